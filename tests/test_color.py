"""Color 값 모델 테스트"""
import pytest
from dataclasses import FrozenInstanceError

from colorgen.color import Color, CSS_COLORS
from colorgen.errors import InvalidColorFormat, PaletteError


class TestColorParse:
    """색상 문자열 파싱 테스트"""

    def test_parse_hex_uppercase(self):
        """대문자 HEX → 소문자 정규 표현"""
        assert Color.parse("#3B82F6").hex == "#3b82f6"

    def test_parse_hex_without_hash(self):
        assert Color.parse("3b82f6").rgb == (59, 130, 246)

    def test_parse_short_hex(self):
        """3자리 HEX 확장"""
        assert Color.parse("#abc").hex == "#aabbcc"

    def test_parse_rgb_function(self):
        assert Color.parse("rgb(255, 87, 51)").hex == "#ff5733"

    def test_parse_hsl_function(self):
        """hsl(0, 100%, 50%) = 빨강"""
        assert Color.parse("hsl(0, 100%, 50%)").hex == "#ff0000"

    def test_parse_hsl_wraps_hue(self):
        assert Color.parse("hsl(480, 100%, 50%)") == Color.parse("hsl(120, 100%, 50%)")

    def test_parse_css_name(self):
        assert Color.parse("Coral").rgb == CSS_COLORS["coral"]

    def test_parse_whitespace(self):
        assert Color.parse("  #FFFFFF  ").hex == "#ffffff"

    def test_parse_color_instance_passthrough(self):
        c = Color(1, 2, 3)
        assert Color.parse(c) is c

    @pytest.mark.parametrize("value", ["", "   ", "#12", "#gggggg", "notacolor", "rgb(300,0,0)", None, 42])
    def test_invalid_inputs_raise(self, value):
        """해석 불가 입력은 InvalidColorFormat"""
        with pytest.raises(InvalidColorFormat):
            Color.parse(value)

    def test_invalid_color_is_palette_error(self):
        """도메인 오류 계층 (ValueError 하위)"""
        with pytest.raises(PaletteError):
            Color.parse("xyz123")
        with pytest.raises(ValueError):
            Color.parse("xyz123")


class TestColorConversion:
    """RGB ⇄ HSL 변환 테스트"""

    def test_hsl_of_pure_red(self):
        h, s, l = Color(255, 0, 0).hsl
        assert h == 0
        assert s == pytest.approx(1.0)
        assert l == pytest.approx(0.5)

    def test_hsl_of_gray_is_achromatic(self):
        h, s, l = Color(128, 128, 128).hsl
        assert h == 0
        assert s == 0

    def test_hsl_of_blue_hue(self):
        assert Color(0, 0, 255).hue == pytest.approx(240)

    def test_from_hsl_clamps(self):
        """채도/명도는 0~1로 제한"""
        assert Color.from_hsl(0, 2.0, 1.5).hex == "#ffffff"
        assert Color.from_hsl(0, -1, -0.5).hex == "#000000"

    def test_from_hsl_negative_hue(self):
        assert Color.from_hsl(-120, 1, 0.5) == Color.from_hsl(240, 1, 0.5)

    def test_roundtrip_preserves_hex(self):
        """HEX → HSL → HEX 왕복 시 동일 (8비트 반올림)"""
        for value in ("#3b82f6", "#10b981", "#f43f5e", "#1e293b"):
            c = Color.parse(value)
            assert Color.from_hsl(*c.hsl).hex == value


class TestColorValue:
    """값 객체 특성 테스트"""

    def test_equality_by_canonical_hex(self):
        assert Color.parse("#FFF") == Color.parse("white")

    def test_frozen(self):
        c = Color(1, 2, 3)
        with pytest.raises(FrozenInstanceError):
            c.r = 10

    def test_channel_range_validated(self):
        with pytest.raises(InvalidColorFormat):
            Color(256, 0, 0)

    def test_str_is_hex(self):
        assert str(Color(255, 0, 0)) == "#ff0000"

    def test_closest_css_name(self):
        assert Color.parse("#fe0101").closest_css_name() == "red"

    def test_css_names_complete(self):
        """CSS Color Level 4 전체 색상명"""
        assert len(CSS_COLORS) == 148

    @pytest.mark.parametrize("name,expected", [
        ("cornflowerblue", "#6495ed"),
        ("darkblue", "#00008b"),
        ("lightgray", "#d3d3d3"),
        ("lightgrey", "#d3d3d3"),
        ("whitesmoke", "#f5f5f5"),
        ("HotPink", "#ff69b4"),
        ("rebeccapurple", "#663399"),
    ])
    def test_parse_extended_css_names(self, name, expected):
        assert Color.parse(name).hex == expected

    @pytest.mark.parametrize("value", ["# f f f", "#+f+f+f", "#-1-1-1", "##fff", "#ff ff ff", "0x0fff"])
    def test_hex_rejects_signs_and_spaces(self, value):
        """부호/공백이 섞인 HEX는 거부"""
        with pytest.raises(InvalidColorFormat):
            Color.parse(value)

    @pytest.mark.parametrize("h,s,l", [(float("nan"), 0.5, 0.5), (float("inf"), 0.5, 0.5), (0, float("nan"), 0.5)])
    def test_from_hsl_rejects_non_finite(self, h, s, l):
        with pytest.raises(InvalidColorFormat):
            Color.from_hsl(h, s, l)

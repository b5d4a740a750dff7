"""색상 분석 테스트"""
import pytest

from colorgen.analysis import (
    BLACK,
    WHITE,
    analyze_color,
    color_temperature,
    contrast_ratio,
    recommended_text_color,
    relative_luminance,
)
from colorgen.color import Color
from colorgen.errors import InvalidColorFormat


class TestLuminanceAndContrast:
    """WCAG 휘도/대비 테스트"""

    def test_luminance_extremes(self):
        assert relative_luminance(WHITE) == pytest.approx(1.0)
        assert relative_luminance(BLACK) == pytest.approx(0.0)

    def test_luminance_pure_blue(self):
        assert relative_luminance(Color(0, 0, 255)) == pytest.approx(0.0722)

    def test_max_contrast(self):
        assert contrast_ratio(WHITE, BLACK) == pytest.approx(21.0)

    def test_contrast_symmetric(self):
        c = Color.parse("#3b82f6")
        assert contrast_ratio(c, WHITE) == pytest.approx(contrast_ratio(WHITE, c))

    def test_contrast_same_color(self):
        c = Color.parse("#777777")
        assert contrast_ratio(c, c) == pytest.approx(1.0)

    def test_recommended_text(self):
        assert recommended_text_color(Color.parse("navy")) == "white"
        assert recommended_text_color(Color.parse("yellow")) == "black"
        assert recommended_text_color(WHITE) == "black"


class TestTemperature:
    """색온도 추정 테스트"""

    def test_red_is_minimum(self):
        assert color_temperature(Color(255, 0, 0)) == pytest.approx(1000, abs=1)

    def test_blue_is_maximum(self):
        """R=0 이면 탐색 상한"""
        assert color_temperature(Color(0, 0, 255)) == pytest.approx(40000, abs=1)

    def test_white_near_daylight(self):
        assert 6000 < color_temperature(WHITE) < 7000

    def test_warm_cooler_ordering(self):
        warm = color_temperature(Color.parse("#ff8a13"))
        cool = color_temperature(Color.parse("#cbdbff"))
        assert warm < 3000 < cool


class TestAnalyzeColor:
    """analyze_color 통합 테스트"""

    def test_fields(self):
        result = analyze_color("#3B82F6")
        assert result.color.hex == "#3b82f6"
        assert 0 < result.luminance < 1
        assert result.contrast_white * result.contrast_black > 1
        assert result.recommended_text in ("white", "black")
        assert isinstance(result.temperature, int)
        assert result.closest_name

    def test_named_color(self):
        result = analyze_color("coral")
        assert result.color.hex == "#ff7f50"
        assert result.closest_name == "coral"

    def test_invalid(self):
        with pytest.raises(InvalidColorFormat):
            analyze_color("#zzzzzz")

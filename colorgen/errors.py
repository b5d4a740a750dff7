"""
colorgen 오류 정의

모든 도메인 오류는 PaletteError를 상속합니다.
요청 경계(도구 main(), core.handle_request)에서 텍스트 응답으로 변환되며
프로세스를 종료시키지 않습니다.
"""


class PaletteError(ValueError):
    """colorgen 도메인 오류 기본 클래스"""


class InvalidColorFormat(PaletteError):
    """HEX/RGB/HSL/CSS 색상명으로 해석할 수 없는 입력"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"인식할 수 없는 색상 형식입니다: {value}")


class UnknownStrategy(PaletteError):
    """지원하지 않는 색상 조화 전략"""

    def __init__(self, strategy, available=()):
        self.strategy = strategy
        self.available = tuple(available)
        msg = f"알 수 없는 전략입니다: {strategy}"
        if self.available:
            msg += f" (사용 가능: {', '.join(self.available)})"
        super().__init__(msg)


class InsufficientColors(PaletteError):
    """그라디언트에 필요한 색상 수 부족"""

    def __init__(self, count):
        self.count = count
        super().__init__(f"그라디언트에는 최소 2개의 색상이 필요합니다 (입력: {count}개)")


class InvalidDirection(PaletteError):
    """지원하지 않는 그라디언트 방향"""

    def __init__(self, direction):
        self.direction = direction
        super().__init__(f"알 수 없는 그라디언트 방향입니다: {direction}")


class UnsupportedEncoding(PaletteError):
    """대상 데이터에 적용할 수 없는 출력 형식"""

    def __init__(self, encoding, target=None):
        self.encoding = encoding
        msg = f"지원하지 않는 출력 형식입니다: {encoding}"
        if target:
            msg += f" ({target})"
        super().__init__(msg)


class UnknownOperation(PaletteError):
    """등록되지 않은 도구 이름"""

    def __init__(self, name):
        self.name = name
        super().__init__(f"알 수 없는 도구: {name}")


class InvalidHue(PaletteError):
    """유한한 숫자가 아닌 기준 색상각"""

    def __init__(self, hue):
        self.hue = hue
        super().__init__(f"기준 색상각은 유한한 숫자여야 합니다: {hue}")

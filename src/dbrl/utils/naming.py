"""Layer name derivation from image references."""

import re
import time
from typing import Optional

# Sanitized names and the time-based fallback
LAYER_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
FALLBACK_PATTERN = re.compile(r"^layer_[0-9]+$")

_ALLOWED_PUNCTUATION = {"_", "-"}


def _sanitize_char(char: str) -> str:
    """Map one character onto the layer name alphabet."""
    if char in (":", "@"):
        return "_"
    if char.isascii() and char.isalnum():
        return char
    if char in _ALLOWED_PUNCTUATION:
        return char
    return "_"


def fallback_layer_name(now: Optional[float] = None) -> str:
    """Time-based name used when nothing usable survives sanitization."""
    timestamp = int(time.time() if now is None else now)
    return f"layer_{timestamp}"


def sanitize_layer_name(reference: str, now: Optional[float] = None) -> str:
    """이미지 참조에서 안전한 레이어 이름을 만듭니다.

    마지막 경로 구성요소만 사용합니다. 태그와 digest 구분자(":", "@")와
    [A-Za-z0-9_-] 이외의 문자는 밑줄로 바꾸고, 앞뒤 밑줄은 제거합니다.
    연속된 밑줄은 합치지 않습니다. 비 ASCII 문자는 UTF-8 바이트가 아닌
    코드 포인트 단위로 처리되어 한 글자가 밑줄 하나가 됩니다 ("ü" → "_").

    Args:
        reference: 이미지 참조 (예: "quay.io/fedora:42", "repo/name@sha256:abcd")
        now: 대체 이름에 사용할 유닉스 시각 (기본값: 현재 시각)

    Returns:
        str: 경로 구성요소와 CLI 인자로 안전한 비어 있지 않은 이름

    Examples:
        sanitize_layer_name("quay.io/fedora:42")
        # 결과: "fedora_42"

        sanitize_layer_name("repo/name@sha256:abcd")
        # 결과: "name_sha256_abcd"

        # 남는 문자가 없으면 시간 기반 이름
        sanitize_layer_name("___")
        # 결과: "layer_1760000000"
    """
    base = reference.rsplit("/", 1)[-1]
    name = "".join(_sanitize_char(char) for char in base).strip("_")
    if not name:
        return fallback_layer_name(now)
    return name


def is_valid_layer_name(name: str) -> bool:
    """Check that a name is already in sanitized form."""
    if not LAYER_NAME_PATTERN.match(name):
        return False
    return FALLBACK_PATTERN.match(name) is not None or name.strip("_") == name

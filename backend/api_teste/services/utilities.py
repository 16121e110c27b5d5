import base64
import hashlib
import re
import secrets
import string
import uuid
from dataclasses import dataclass
from typing import Any, List, Optional

from ..core.errors import InvalidConfiguration, InvalidFormat

BYTE_UNITS = ["B", "KB", "MB", "GB", "TB"]
HASH_ALGORITHMS = ("md5", "sha1", "sha256", "sha512")
CONVERT_FORMATS = ("base64", "hex", "uppercase", "lowercase", "reverse")
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

UUID_MIN, UUID_MAX = 1, 100
PASSWORD_MIN, PASSWORD_MAX = 8, 128

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def format_bytes(num: float) -> str:
    size = float(num)
    unit = 0
    while size >= 1024 and unit < len(BYTE_UNITS) - 1:
        size /= 1024
        unit += 1
    return f"{size:.2f} {BYTE_UNITS[unit]}"


def clamp_int(raw: Any, default: int, low: int, high: int) -> int:
    """Parse a loose integer (``"12abc"`` -> 12) and clamp it to ``[low, high]``.

    Missing, malformed or zero input falls back to ``default`` before clamping.
    """
    value = None
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    elif raw is not None:
        match = _LEADING_INT.match(str(raw))
        if match:
            value = int(match.group(1))
    if not value:
        value = default
    return min(max(value, low), high)


def parse_flag(raw: Any, default: bool = True) -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() == "true"


def generate_uuids(count: Any = 1) -> List[str]:
    count = clamp_int(count, 1, UUID_MIN, UUID_MAX)
    return [str(uuid.uuid4()) for _ in range(count)]


def digest(text: str, algorithm: str = "sha256") -> str:
    if algorithm not in HASH_ALGORITHMS:
        raise InvalidFormat(f"Algoritmo inválido: {algorithm}")
    return hashlib.new(algorithm, text.encode("utf-8")).hexdigest()


def generate_password(
    length: Any = 16,
    lowercase: bool = True,
    uppercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> str:
    length = clamp_int(length, 16, PASSWORD_MIN, PASSWORD_MAX)
    pool = ""
    if lowercase:
        pool += string.ascii_lowercase
    if uppercase:
        pool += string.ascii_uppercase
    if digits:
        pool += string.digits
    if symbols:
        pool += SYMBOLS
    if not pool:
        raise InvalidConfiguration("Pelo menos um tipo de caractere deve ser incluído")
    return "".join(pool[secrets.randbelow(len(pool))] for _ in range(length))


def convert_text(text: str, fmt: str) -> str:
    if fmt == "base64":
        return base64.b64encode(text.encode("utf-8")).decode("ascii")
    if fmt == "hex":
        return text.encode("utf-8").hex()
    if fmt == "uppercase":
        return text.upper()
    if fmt == "lowercase":
        return text.lower()
    if fmt == "reverse":
        return text[::-1]
    raise InvalidFormat("Formato inválido")


@dataclass(frozen=True)
class TextAnalysis:
    length: int
    words: int
    characters: int
    non_whitespace: int
    lines: int
    uppercase: int
    lowercase: int
    digits: int
    symbols: int
    blank: bool


def analyze_text(text: Optional[str]) -> TextAnalysis:
    text = text or ""
    stripped = text.strip()
    return TextAnalysis(
        length=len(text),
        words=len(stripped.split()) if stripped else 0,
        characters=len(text),
        non_whitespace=len(re.sub(r"\s", "", text)),
        lines=text.count("\n") + 1,
        uppercase=len(re.findall(r"[A-Z]", text)),
        lowercase=len(re.findall(r"[a-z]", text)),
        digits=len(re.findall(r"[0-9]", text)),
        symbols=len(re.findall(r"[^a-zA-Z0-9\s]", text)),
        blank=not stripped,
    )

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


MAX_SAFE_INTEGER = 2**53 - 1
INVALID_INPUT_MESSAGE = "input tidak valid untuk basis yang dipilih"
SAFE_INTEGER_MESSAGE = f"nilai melebihi batas bilangan bulat aman ({MAX_SAFE_INTEGER})"


class ConversionError(ValueError):
    """Raised when an input string cannot be converted."""


class InvalidInput(ConversionError):
    pass


class Base(str, Enum):
    DECIMAL = "decimal"
    BINARY = "binary"
    OCTAL = "octal"
    HEX = "hex"
    AUTO = "auto"


class DetectionOutcome(str, Enum):
    BINARY = "binary"
    OCTAL = "octal"
    DECIMAL = "decimal"
    HEX = "hex"
    NONE = "none"


RADIX: Dict[Base, int] = {
    Base.BINARY: 2,
    Base.OCTAL: 8,
    Base.DECIMAL: 10,
    Base.HEX: 16,
}

MAX_DIGITS: Dict[int, int] = {
    2: len(format(MAX_SAFE_INTEGER, "b")),
    8: len(format(MAX_SAFE_INTEGER, "o")),
    10: len(str(MAX_SAFE_INTEGER)),
    16: len(format(MAX_SAFE_INTEGER, "x")),
}

ALPHABETS: Dict[int, frozenset] = {
    2: frozenset("01"),
    8: frozenset("01234567"),
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}

# Narrowest alphabet first; "11" is valid in all four.
DETECTION_ORDER = (
    (re.compile(r"[01]+", re.IGNORECASE), DetectionOutcome.BINARY),
    (re.compile(r"[0-7]+", re.IGNORECASE), DetectionOutcome.OCTAL),
    (re.compile(r"[0-9]+", re.IGNORECASE), DetectionOutcome.DECIMAL),
    (re.compile(r"[0-9A-Fa-f]+", re.IGNORECASE), DetectionOutcome.HEX),
)

BASE_ALIASES: Dict[str, Base] = {
    "2": Base.BINARY,
    "bin": Base.BINARY,
    "8": Base.OCTAL,
    "oct": Base.OCTAL,
    "10": Base.DECIMAL,
    "dec": Base.DECIMAL,
    "16": Base.HEX,
    "hexadecimal": Base.HEX,
}

LABELS: Dict[str, str] = {
    "auto": "Auto",
    "decimal": "Desimal",
    "binary": "Biner",
    "octal": "Oktal",
    "hex": "Heksadesimal",
    "none": "unknown",
}


@dataclass(frozen=True)
class ConversionResult:
    decimal: str
    binary: str
    octal: str
    hex: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "decimal": self.decimal,
            "binary": self.binary,
            "octal": self.octal,
            "hex": self.hex,
        }


def parse_base(value: object) -> Base:
    """Resolve a base given as a member, a name ("hex") or a radix ("16")."""
    if isinstance(value, Base):
        return value
    if value is None:
        return Base.AUTO
    text = value.value if isinstance(value, Enum) else str(value)
    raw = text.strip().lower()
    if not raw:
        return Base.AUTO
    try:
        return Base(raw)
    except ValueError:
        pass
    base = BASE_ALIASES.get(raw)
    if base is None:
        raise InvalidInput(f"basis tidak dikenal: {text}")
    return base


def detect_base(value: object) -> DetectionOutcome:
    raw = "" if value is None else str(value).strip()
    if not raw:
        return DetectionOutcome.NONE
    for pattern, outcome in DETECTION_ORDER:
        if pattern.fullmatch(raw):
            return outcome
    return DetectionOutcome.NONE


def resolve_base(value: object, base: object = Base.AUTO) -> Base:
    """Explicit bases pass through; auto detects and falls back to decimal."""
    requested = parse_base(base)
    if requested is not Base.AUTO:
        return requested
    outcome = detect_base(value)
    if outcome is DetectionOutcome.NONE:
        return Base.DECIMAL
    return Base(outcome.value)


def parse_to_decimal(value: object, base: object = Base.AUTO) -> int:
    radix = RADIX[resolve_base(value, base)]
    raw = "" if value is None else str(value).strip()
    if not raw:
        raise InvalidInput(INVALID_INPUT_MESSAGE)

    # int() alone would also accept signs, "0x" prefixes and underscores.
    allowed = ALPHABETS[radix]
    if any(char not in allowed for char in raw):
        raise InvalidInput(INVALID_INPUT_MESSAGE)

    # Bounded before int(); long decimal strings hit the interpreter digit limit.
    if len(raw.lstrip("0")) > MAX_DIGITS[radix]:
        raise InvalidInput(SAFE_INTEGER_MESSAGE)

    number = int(raw, radix)
    if number > MAX_SAFE_INTEGER:
        raise InvalidInput(SAFE_INTEGER_MESSAGE)
    return number


def render(number: int) -> ConversionResult:
    if number < 0:
        raise InvalidInput("bilangan negatif tidak didukung")
    return ConversionResult(
        decimal=str(number),
        binary=format(number, "b"),
        octal=format(number, "o"),
        hex=format(number, "X"),
    )


def convert_all(
    value: object, base: object = Base.AUTO
) -> Tuple[ConversionResult, Base]:
    """Convert ``value`` into all four bases.

    Returns the result together with the base the input was read in, so
    callers can show the detected base without keeping any state of their own.
    Every failure is a :class:`ConversionError`; input problems are the
    :class:`InvalidInput` subclass.
    """
    resolved = resolve_base(value, base)
    number = parse_to_decimal(value, resolved)
    return render(number), resolved


def label_for(value: object) -> str:
    key = value.value if isinstance(value, Enum) else str(value)
    return LABELS.get(key, key)


def convert_payload(
    value: object, base: object = None, *, max_length: int | None = None
) -> Tuple[Dict[str, Any] | None, str | None]:
    raw = "" if value is None else str(value).strip()
    if max_length is not None and len(raw) > max_length:
        return None, f"Input terlalu panjang (maksimal {max_length} karakter)."

    try:
        requested = parse_base(base)
        result, resolved = convert_all(raw, requested)
    except ConversionError as exc:
        return None, str(exc)

    return {
        "input": raw,
        "base": requested.value,
        "detected": resolved.value,
        "label": label_for(resolved),
        "result": result.as_dict(),
    }, None


def detect_payload(value: object) -> Dict[str, str]:
    raw = "" if value is None else str(value).strip()
    outcome = detect_base(raw)
    return {
        "input": raw,
        "detected": outcome.value,
        "label": label_for(outcome),
    }

import pytest

from modules.base_convert.core.base import (
    INVALID_INPUT_MESSAGE,
    MAX_SAFE_INTEGER,
    Base,
    ConversionError,
    ConversionResult,
    DetectionOutcome,
    InvalidInput,
    convert_all,
    convert_payload,
    detect_base,
    detect_payload,
    parse_base,
    parse_to_decimal,
    render,
    resolve_base,
)


@pytest.mark.parametrize("value", ["0", "1", "11", "1010", "0001", "  101  "])
def test_detect_binary(value):
    assert detect_base(value) == DetectionOutcome.BINARY


@pytest.mark.parametrize("value", ["2", "17", "377", "0777", "1234567"])
def test_detect_octal(value):
    assert detect_base(value) == DetectionOutcome.OCTAL


@pytest.mark.parametrize("value", ["8", "19", "255", "90"])
def test_detect_decimal(value):
    assert detect_base(value) == DetectionOutcome.DECIMAL


@pytest.mark.parametrize("value", ["FF", "ff", "1a", "ABCDEF", "0f0"])
def test_detect_hex(value):
    assert detect_base(value) == DetectionOutcome.HEX


@pytest.mark.parametrize(
    "value", ["", "   ", None, "XYZ", "12G", "0x1F", "-5", "1 0", "1.5", "1_000"]
)
def test_detect_none(value):
    assert detect_base(value) == DetectionOutcome.NONE


def test_detection_never_yields_auto():
    assert "auto" not in {outcome.value for outcome in DetectionOutcome}


def test_resolve_base_falls_back_to_decimal():
    assert resolve_base("12G") is Base.DECIMAL
    assert resolve_base("") is Base.DECIMAL
    assert resolve_base("101", Base.HEX) is Base.HEX
    assert resolve_base("101") is Base.BINARY


def test_parse_base_names_and_radixes():
    assert parse_base("HEX") is Base.HEX
    assert parse_base("16") is Base.HEX
    assert parse_base("2") is Base.BINARY
    assert parse_base(" oct ") is Base.OCTAL
    assert parse_base(None) is Base.AUTO
    assert parse_base("") is Base.AUTO
    with pytest.raises(InvalidInput):
        parse_base("base7")


@pytest.mark.parametrize(
    "value,base,expected",
    [
        ("11111111", Base.BINARY, 255),
        ("377", Base.OCTAL, 255),
        ("255", Base.DECIMAL, 255),
        ("ff", Base.HEX, 255),
        (" FF ", "hex", 255),
        ("10", Base.AUTO, 2),
        ("0", Base.DECIMAL, 0),
    ],
)
def test_parse_to_decimal(value, base, expected):
    assert parse_to_decimal(value, base) == expected


@pytest.mark.parametrize(
    "value,base",
    [
        ("19", Base.BINARY),
        ("8", Base.OCTAL),
        ("1A", Base.DECIMAL),
        ("0x1F", Base.HEX),
        ("-5", Base.DECIMAL),
        ("+5", Base.DECIMAL),
        ("1_000", Base.DECIMAL),
        ("", Base.DECIMAL),
        ("   ", Base.AUTO),
    ],
)
def test_parse_to_decimal_rejects_invalid_digits(value, base):
    with pytest.raises(InvalidInput) as excinfo:
        parse_to_decimal(value, base)
    assert str(excinfo.value) == INVALID_INPUT_MESSAGE


def test_parse_to_decimal_safe_integer_limit():
    assert parse_to_decimal(str(MAX_SAFE_INTEGER), Base.DECIMAL) == MAX_SAFE_INTEGER
    with pytest.raises(InvalidInput):
        parse_to_decimal(str(MAX_SAFE_INTEGER + 1), Base.DECIMAL)
    with pytest.raises(InvalidInput):
        parse_to_decimal("1" * 54, Base.BINARY)


@pytest.mark.parametrize("number", [0, 1, 7, 8, 255, 4096, 65535, MAX_SAFE_INTEGER])
def test_render_then_parse_returns_same_number(number):
    rendered = render(number)
    assert parse_to_decimal(rendered.binary, Base.BINARY) == number
    assert parse_to_decimal(rendered.octal, Base.OCTAL) == number
    assert parse_to_decimal(rendered.decimal, Base.DECIMAL) == number
    assert parse_to_decimal(rendered.hex, Base.HEX) == number


def test_render_zero():
    assert render(0) == ConversionResult("0", "0", "0", "0")


def test_render_hex_is_uppercase_and_unprefixed():
    result = render(48879)
    assert result.hex == "BEEF"
    assert result.binary == "1011111011101111"
    assert result.octal == "137357"


def test_render_rejects_negative():
    with pytest.raises(InvalidInput):
        render(-1)


def test_convert_all_decimal(expected_255):
    result, resolved = convert_all("255", Base.DECIMAL)
    assert result.as_dict() == expected_255
    assert resolved is Base.DECIMAL


def test_convert_all_hex(expected_255):
    result, resolved = convert_all("FF", Base.HEX)
    assert result.as_dict() == expected_255
    assert resolved is Base.HEX


def test_convert_all_auto_detects_binary(expected_255):
    result, resolved = convert_all("11111111")
    assert result.as_dict() == expected_255
    assert resolved is Base.BINARY


def test_convert_all_auto_detects_octal_and_hex():
    result, resolved = convert_all("777", Base.AUTO)
    assert resolved is Base.OCTAL
    assert result.decimal == "511"

    result, resolved = convert_all("1a", Base.AUTO)
    assert resolved is Base.HEX
    assert result.decimal == "26"


@pytest.mark.parametrize(
    "value,base",
    [("", Base.AUTO), ("XYZ", Base.AUTO), ("19", Base.BINARY), ("12G", Base.AUTO)],
)
def test_convert_all_failures(value, base):
    with pytest.raises(InvalidInput):
        convert_all(value, base)


def test_invalid_input_is_a_conversion_error():
    assert issubclass(InvalidInput, ConversionError)
    assert issubclass(ConversionError, ValueError)
    with pytest.raises(ConversionError, match=INVALID_INPUT_MESSAGE):
        convert_all("XYZ")


def test_convert_all_is_idempotent():
    assert convert_all("DEAD", "auto") == convert_all("DEAD", "auto")


def test_conversion_result_is_frozen():
    result = render(1)
    with pytest.raises(AttributeError):
        result.decimal = "2"


def test_convert_payload_success():
    payload, error = convert_payload(" FF ", "16")
    assert error is None
    assert payload == {
        "input": "FF",
        "base": "hex",
        "detected": "hex",
        "label": "Heksadesimal",
        "result": {"decimal": "255", "binary": "11111111", "octal": "377", "hex": "FF"},
    }


def test_convert_payload_defaults_to_auto():
    payload, error = convert_payload("101")
    assert error is None
    assert payload["base"] == "auto"
    assert payload["detected"] == "binary"
    assert payload["result"]["decimal"] == "5"


def test_convert_payload_errors():
    assert convert_payload("19", "binary") == (None, INVALID_INPUT_MESSAGE)
    assert convert_payload("10", "base7") == (None, "basis tidak dikenal: base7")

    payload, error = convert_payload("1" * 65, max_length=64)
    assert payload is None
    assert "64" in error


def test_detect_payload():
    assert detect_payload(" 377 ") == {"input": "377", "detected": "octal", "label": "Oktal"}
    assert detect_payload("") == {"input": "", "detected": "none", "label": "unknown"}


def test_very_long_input_is_invalid_input():
    with pytest.raises(InvalidInput):
        convert_all("9" * 5000, Base.DECIMAL)
    with pytest.raises(InvalidInput):
        convert_all("F" * 5000)
    assert convert_payload("9" * 5000)[0] is None


def test_leading_zeros_do_not_count_against_the_limit():
    assert parse_to_decimal("0" * 100 + "1", Base.BINARY) == 1
    assert parse_to_decimal("0" * 100 + str(MAX_SAFE_INTEGER), Base.DECIMAL) == MAX_SAFE_INTEGER


def test_parse_base_accepts_enum_members():
    assert parse_base(DetectionOutcome.HEX) is Base.HEX
    assert parse_base(DetectionOutcome.BINARY) is Base.BINARY
    with pytest.raises(InvalidInput, match="basis tidak dikenal: none"):
        parse_base(DetectionOutcome.NONE)

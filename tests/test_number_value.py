# tests/test_number_value.py
"""
Tests for NumberValue and the number parser (component_1).

Covers:
- Parsing and canonical normalization
- Format errors (radix, digits, radix points, fraction bound)
- Derived properties and rendering
- Cached zero/one constants
- Python operator protocol (arithmetic, comparison, hash, bool, int)
"""

from decimal import Decimal

import pytest

from component_1_number_parser import coerce, from_text, parse
from component_1_number_value import NumberValue, SFloat, normalize, one, zero
from infrastructure.cache_manager import get_cache_manager, reset_cache_manager
from sfloat_config import reset_config
from sfloat_exceptions import (
    FractionLengthOutOfRangeError,
    InvalidDigitError,
    MultipleRadixPointsError,
    NumberFormatException,
    RadixOutOfRangeError,
)


@pytest.fixture(autouse=True)
def clean_state():
    """Fixture: fresh configuration and caches for every test"""
    reset_config()
    reset_cache_manager()
    yield
    reset_config()
    reset_cache_manager()


class TestParsing:
    """Tests for parse()"""

    @pytest.mark.parametrize(
        "text,radix,expected",
        [
            ("5734.2", 10, "5734.2"),
            ("  -00123.4500 ", 10, "-123.45"),
            ("ff.33", 16, "FF.33"),
            ("428.6A", 16, "428.6A"),
            ("-127.35", 8, "-127.35"),
            (".5", 10, "0.5"),
            ("5.", 10, "5"),
            ("000", 10, "0"),
            ("zz", 36, "ZZ"),
            ("1011", 2, "1011"),
        ],
    )
    def test_canonical_text(self, text, radix, expected):
        """Test: Parsed values render in canonical form"""
        assert str(parse(text, radix)) == expected

    def test_internal_layout(self):
        """Test: Digits and point position"""
        value = parse("5734.2")

        assert value.digits == "57342"
        assert value.point_position == 4
        assert value.radix == 10
        assert value.is_negative is False

    def test_negative_zero_is_not_negative(self):
        """Test: -0.000 normalizes to non-negative zero"""
        value = parse("-0.000")

        assert str(value) == "0"
        assert value.is_negative is False
        assert value.is_zero

    def test_fraction_truncated_to_bound(self):
        """Test: Fraction digits beyond the bound are dropped"""
        value = parse("0.33333333", 10, 2)

        assert str(value) == "0.33"
        assert value.max_fraction_length == 2

    def test_digits_beyond_bound_still_validated(self):
        """Test: Dropped fraction digits must still be valid"""
        with pytest.raises(InvalidDigitError):
            parse("0.12G", 10, 1)

    def test_from_text_alias(self):
        """Test: from_text is parse"""
        assert from_text is parse

    def test_default_bound_from_config(self):
        """Test: Default fraction bound is 128"""
        assert parse("1").max_fraction_length == 128


class TestParsingErrors:
    """Tests for the format error taxonomy"""

    def test_multiple_radix_points(self):
        """Test: Second radix point is rejected"""
        with pytest.raises(MultipleRadixPointsError) as exc_info:
            parse("1.2.3")

        assert exc_info.value.context["position"] == 3

    def test_invalid_digit_context(self):
        """Test: Invalid digit carries character, position and radix"""
        with pytest.raises(InvalidDigitError) as exc_info:
            parse("12G", 16)

        context = exc_info.value.context
        assert context["character"] == "G"
        assert context["position"] == 2
        assert context["radix"] == 16

    @pytest.mark.parametrize(
        "text,radix",
        [("19", 8), ("2", 2), ("5-3", 10), ("--5", 10), ("+5", 10), ("1 2", 10)],
    )
    def test_invalid_digits(self, text, radix):
        """Test: Digits outside the radix and stray signs"""
        with pytest.raises(InvalidDigitError):
            parse(text, radix)

    @pytest.mark.parametrize("text", ["", "   ", "-", ".", "-."])
    def test_text_without_digits(self, text):
        """Test: Text without any digit is rejected"""
        with pytest.raises(InvalidDigitError):
            parse(text)

    @pytest.mark.parametrize("radix", [0, 1, 37, 100])
    def test_radix_out_of_range(self, radix):
        """Test: Radix outside [2, 36]"""
        with pytest.raises(RadixOutOfRangeError) as exc_info:
            parse("1", radix)

        assert exc_info.value.context["radix"] == radix

    @pytest.mark.parametrize("bound", [-1, 10_001])
    def test_fraction_bound_out_of_range(self, bound):
        """Test: Fraction bound outside the allowed range"""
        with pytest.raises(FractionLengthOutOfRangeError):
            parse("1.5", 10, bound)

    def test_format_errors_are_value_errors(self):
        """Test: Format errors can be caught as ValueError"""
        with pytest.raises(ValueError):
            parse("XYZ")
        assert issubclass(InvalidDigitError, NumberFormatException)

    def test_non_string_input(self):
        """Test: Non-string input raises TypeError"""
        with pytest.raises(TypeError):
            parse(5)


class TestNormalize:
    """Tests for the normalizing factory"""

    def test_strips_leading_zeros(self):
        assert str(normalize("00123", 5, 10)) == "123"

    def test_pads_point_beyond_digits(self):
        """Test: Point right of the buffer pads zeros"""
        assert str(normalize("123", 5, 10)) == "12300"

    def test_pads_negative_point(self):
        """Test: Point left of the buffer pads fraction zeros"""
        assert str(normalize("5", -2, 10)) == "0.005"

    def test_zero_loses_sign(self):
        value = normalize("000", 1, 10, True)

        assert str(value) == "0"
        assert value.is_negative is False

    def test_uppercases_digits(self):
        assert normalize("ff", 2, 16).digits == "FF"


class TestDirectConstruction:
    """Tests for the canonical-form checks of the NumberValue constructor"""

    def test_canonical_fields_accepted(self):
        value = SFloat(16, "FF8", 2, True)

        assert value == parse("-FF.8", 16)
        assert str(value) == "-FF.8"

    @pytest.mark.parametrize(
        "radix,digits,point_position,is_negative",
        [
            (10, "0012", 2, False),
            (16, "ff", 2, True),
            (10, "12", 5, False),
            (10, "12", 0, False),
            (10, "0", 1, True),
            (10, "1230", 3, False),
            (8, "19", 2, False),
            (10, "", 0, False),
        ],
    )
    def test_non_canonical_rejected(self, radix, digits, point_position, is_negative):
        """Test: Buffers that normalize() would never produce are refused"""
        with pytest.raises(InvalidDigitError):
            SFloat(radix, digits, point_position, is_negative)

    def test_fraction_beyond_bound_rejected(self):
        with pytest.raises(InvalidDigitError) as exc_info:
            NumberValue(10, "1234", 1, max_fraction_length=2)

        assert exc_info.value.context["max_fraction_length"] == 2

    def test_lowercase_digit_reported(self):
        with pytest.raises(InvalidDigitError) as exc_info:
            NumberValue(16, "Fa", 2)

        assert exc_info.value.context["character"] == "a"
        assert exc_info.value.context["position"] == 1


class TestProperties:
    """Tests for derived properties and rendering"""

    def test_lengths(self):
        value = parse("13.089")

        assert value.integer_length == 2
        assert value.fraction_length == 3
        assert value.is_fractional
        assert not value.is_integer

    def test_integer_value(self):
        value = parse("42")

        assert value.is_integer
        assert value.fraction_length == 0

    def test_bool(self):
        """Test: Truthiness follows the magnitude"""
        assert not parse("0")
        assert parse("0.001")
        assert parse("-1")

    def test_repr(self):
        assert repr(parse("ff", 16)) == "SFloat('FF', radix=16)"

    def test_sfloat_alias(self):
        assert SFloat is NumberValue

    def test_integer_and_fraction_part_properties(self):
        value = parse("-13.089")

        assert str(value.integer_part) == "-13"
        assert str(value.fraction_part) == "0.089"

    def test_values_are_immutable(self):
        value = parse("1")

        with pytest.raises(AttributeError):
            value.digits = "2"


class TestConstants:
    """Tests for cached zero/one"""

    def test_zero_and_one(self):
        assert str(zero(16)) == "0"
        assert zero(16).radix == 16
        assert str(one(2)) == "1"
        assert one(2).radix == 2

    def test_constants_are_cached(self):
        """Test: Repeated requests return the cached instance"""
        first = zero(16)
        second = zero(16)

        assert first is second
        assert get_cache_manager().get("radix_constants", ("0", 16, 128)) is first

    def test_bound_is_part_of_key(self):
        assert zero(10, 5).max_fraction_length == 5
        assert zero(10, 5) is not zero(10, 6)

    def test_constants_validate_radix(self):
        with pytest.raises(RadixOutOfRangeError):
            one(40)


class TestOperators:
    """Tests for the Python operator protocol"""

    def test_add_operator(self):
        assert str(parse("12.93") + parse("5.7")) == "18.63"
        assert str(parse("8", 16) + parse("8", 16)) == "10"

    def test_mixed_int_operands(self):
        assert str(1 + parse("2")) == "3"
        assert str(parse("10") - 3) == "7"
        assert str(10 - parse("3")) == "7"
        assert str(parse("2.5") * 2) == "5"
        assert str(3 * parse("1.5")) == "4.5"

    def test_decimal_and_text_operands(self):
        assert str(Decimal("0.5") + parse("1")) == "1.5"
        assert str(parse("1") + "0.25") == "1.25"

    def test_unsupported_operand(self):
        """Test: Floats are not coerced"""
        with pytest.raises(TypeError):
            parse("1") + 1.5

    def test_division_operators(self):
        assert str(parse("10") / parse("4")) == "2.5"
        assert str(parse("7") // parse("2")) == "3"
        assert str(parse("7") % 2) == "1"

        quotient, remainder = divmod(parse("-7"), parse("2"))
        assert str(quotient) == "-3"
        assert str(remainder) == "-1"

    def test_unary_operators(self):
        value = parse("-5")

        assert str(-value) == "5"
        assert str(abs(value)) == "5"
        assert +value is value

    def test_int_conversion(self):
        assert int(parse("FF", 16)) == 255

    def test_equality(self):
        assert parse("FF", 16) == parse("255")
        assert parse("FF", 16) == 255
        assert parse("1") != "1"
        assert parse("1.5") != parse("1.50001")

    def test_ordering(self):
        assert parse("-5") < parse("-3")
        assert parse("3") > -5
        assert parse("0.5") <= parse("0.5")
        assert parse("A", 16) >= 10

    def test_decimal_not_comparable(self):
        """Test: Decimal operands are refused by == and by ordering alike"""
        value = parse("1.5")

        assert value != Decimal("1.5")
        with pytest.raises(TypeError):
            value <= Decimal("1.5")
        with pytest.raises(TypeError):
            value >= Decimal("1.5")
        with pytest.raises(TypeError):
            Decimal("1.5") < value

    def test_hash_agrees_with_equality(self):
        assert hash(parse("255")) == hash(255)
        assert hash(parse("FF", 16)) == hash(parse("255"))
        assert len({parse("FF", 16), parse("255"), parse("11111111", 2)}) == 1

    def test_coerce(self):
        like = parse("1", 10, 4)

        assert coerce(like, like) is like
        assert coerce(7, like).max_fraction_length == 4
        assert coerce(True, like) is None
        assert coerce(1.5, like) is None
        assert coerce("2", like, allow_text=False) is None

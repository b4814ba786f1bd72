"""Tests for built-in value converters."""

import enum
import uuid
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from fractions import Fraction

import pytest

from stateprinter.base import HandlerRegistry
from stateprinter.converters import (
    STANDARD_TYPES,
    EnumConverter,
    StandardTypesConverter,
    StringConverter,
)


class Color(enum.Enum):
    RED = 1
    GREEN = 2


class Permission(enum.Flag):
    READ = 1
    WRITE = 2
    EXECUTE = 4
    READ_WRITE = READ | WRITE


class Level(enum.IntEnum):
    LOW = 10
    HIGH = 20


@pytest.fixture
def registry():
    return HandlerRegistry(culture="C")


class TestStandardTypesConverter:
    """Tests for StandardTypesConverter."""

    @pytest.mark.parametrize(
        "tp",
        [
            int,
            float,
            bool,
            complex,
            Decimal,
            Fraction,
            datetime,
            date,
            uuid.UUID,
            type(None),
        ],
    )
    def test_handles_standard_types(self, tp):
        """Test that standard scalar types are accepted."""
        assert StandardTypesConverter().can_handle_type(tp) is True

    @pytest.mark.parametrize("tp", [str, list, dict, object, Color])
    def test_rejects_other_types(self, tp):
        """Test that non-scalar types are rejected."""
        assert StandardTypesConverter().can_handle_type(tp) is False

    def test_handles_subclasses(self):
        """Test that subclasses of handled types are accepted."""

        class Meters(float):
            pass

        assert StandardTypesConverter().can_handle_type(Meters) is True

    def test_non_type_argument(self):
        """Test that non-class arguments are rejected instead of raising."""
        assert StandardTypesConverter().can_handle_type("int") is False

    def test_custom_handled_types(self):
        """Test restricting the handled types."""
        converter = StandardTypesConverter(handled_types=(int,))

        assert converter.can_handle_type(int) is True
        assert converter.can_handle_type(float) is False

    def test_empty_handled_types_accepts_nothing(self):
        """Test that an explicit empty type tuple is not replaced by the defaults."""
        converter = StandardTypesConverter(handled_types=())

        assert converter.handled_types == ()
        assert converter.can_handle_type(int) is False

    def test_default_types(self):
        """Test that the default type set is used when none is given."""
        assert StandardTypesConverter().handled_types == STANDARD_TYPES

    def test_render(self, registry):
        """Test rendering of various scalar values."""
        converter = StandardTypesConverter()

        assert converter.render(42, registry) == "42"
        assert converter.render(True, registry) == "True"
        assert converter.render(None, registry) == "None"
        assert converter.render(Decimal("1.50"), registry) == "1.50"
        assert converter.render(Fraction(1, 3), registry) == "1/3"
        assert converter.render(timedelta(hours=1), registry) == "1:00:00"

    def test_render_float_round_trips(self, registry):
        """Test that floats are rendered with full precision."""
        text = StandardTypesConverter().render(0.1 + 0.2, registry)

        assert text == "0.30000000000000004"
        assert float(text) == 0.1 + 0.2

    def test_render_datetime(self, registry):
        """Test datetime rendering."""
        value = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

        assert StandardTypesConverter().render(value, registry) == (
            "2024-01-15 10:30:00+00:00"
        )

    def test_render_uuid(self, registry):
        """Test UUID rendering."""
        value = uuid.UUID("12345678-1234-5678-1234-567812345678")

        assert StandardTypesConverter().render(value, registry) == str(value)


class TestStringConverter:
    """Tests for StringConverter."""

    def test_handles_strings_only(self):
        """Test type acceptance."""
        converter = StringConverter()

        assert converter.can_handle_type(str) is True
        assert converter.can_handle_type(bytes) is False
        assert converter.can_handle_type(int) is False

    def test_default_quotes(self, registry):
        """Test rendering with default double quotes."""
        assert StringConverter().render("hello", registry) == '"hello"'

    def test_custom_quotes(self, registry):
        """Test rendering with custom quote characters."""
        converter = StringConverter("<<", ">>")

        assert converter.render("hello", registry) == "<<hello>>"

    def test_empty_string(self, registry):
        """Test rendering an empty string."""
        assert StringConverter().render("", registry) == '""'

    def test_repr(self):
        """Test repr shows quote configuration."""
        assert repr(StringConverter("'", "'")) == (
            "StringConverter(quote_start=\"'\", quote_end=\"'\")"
        )


class TestEnumConverter:
    """Tests for EnumConverter."""

    def test_handles_enums(self):
        """Test type acceptance."""
        converter = EnumConverter()

        assert converter.can_handle_type(Color) is True
        assert converter.can_handle_type(Permission) is True
        assert converter.can_handle_type(Level) is True
        assert converter.can_handle_type(int) is False

    def test_render_member_name(self, registry):
        """Test that members render by name."""
        assert EnumConverter().render(Color.GREEN, registry) == "GREEN"
        assert EnumConverter().render(Level.HIGH, registry) == "HIGH"

    def test_render_declared_flag_combination(self, registry):
        """Test that a declared combination renders by its own name."""
        value = Permission.READ | Permission.WRITE

        assert EnumConverter().render(value, registry) == "READ_WRITE"

    def test_render_undeclared_flag_combination(self, registry):
        """Test that undeclared combinations render as joined member names."""
        value = Permission.READ | Permission.EXECUTE

        assert EnumConverter().render(value, registry) == "READ, EXECUTE"

    def test_enum_wins_over_standard_types_for_int_enum(self):
        """Test precedence when both converters accept an IntEnum."""
        registry = HandlerRegistry().add(StandardTypesConverter()).add(EnumConverter())

        found, converter = registry.resolve_value_converter(Level)

        assert found is True
        assert isinstance(converter, EnumConverter)

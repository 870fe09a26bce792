# ABOUTME: Unit tests for VersionRegistration
# ABOUTME: Tests construction checks, decode/convert separation and error wrapping

import pytest

from field_versions.components.resolver.registration import VersionRegistration
from field_versions.exceptions.resolution import ConversionError, RegistrationError, StructuralMismatch
from field_versions.implementations.content.content_buffer import ContentBuffer
from field_versions.models.version_tag import CURRENT, Num, Ver


def add_hundred(value: str) -> int:
    return int(value) + 100


class NotAType:
    """Arbitrary class pydantic has no schema for."""


class TestVersionRegistrationConstruction:
    """Test cases for building registrations."""

    @pytest.mark.unit
    def test_defaults_name_to_converter(self):
        """Test that the converter's name is used for logs by default."""
        registration = VersionRegistration(Ver("OldString"), str, add_hundred)

        assert registration.name == "add_hundred"
        assert registration.wire_type_name == "str"
        assert registration.is_current is False

    @pytest.mark.unit
    def test_explicit_name(self):
        """Test that an explicit name wins."""
        registration = VersionRegistration(Num(1), str, add_hundred, name="v1")

        assert registration.name == "v1"

    @pytest.mark.unit
    def test_rejects_non_tag(self):
        """Test that the tag must be a VersionTag."""
        with pytest.raises(RegistrationError) as exc_info:
            VersionRegistration("v1", str, add_hundred)

        assert exc_info.value.code == "INVALID_TAG"

    @pytest.mark.unit
    def test_rejects_non_callable_converter(self):
        """Test that the converter must be callable."""
        with pytest.raises(RegistrationError) as exc_info:
            VersionRegistration(Num(1), str, 100)

        assert exc_info.value.code == "INVALID_CONVERTER"

    @pytest.mark.unit
    def test_rejects_undecodable_wire_type(self):
        """Test that the wire type must be something pydantic can validate."""
        with pytest.raises(RegistrationError) as exc_info:
            VersionRegistration(Num(1), NotAType, lambda v: v)

        assert exc_info.value.code == "INVALID_WIRE_TYPE"
        assert exc_info.value.details["wire_type"] == "NotAType"

    @pytest.mark.unit
    def test_current_factory(self):
        """Test the identity registration for the current type."""
        registration = VersionRegistration.current(int)

        assert registration.tag == CURRENT
        assert registration.is_current is True
        assert registration.wire_type is int
        assert registration.convert(5) == 5


class TestVersionRegistrationApply:
    """Test cases for decoding and converting."""

    @pytest.mark.unit
    def test_apply_success(self):
        """Test decode then convert."""
        registration = VersionRegistration(Ver("OldString"), str, add_hundred)

        assert registration.apply(ContentBuffer("100")) == 200

    @pytest.mark.unit
    def test_structural_failure_is_not_conversion_failure(self):
        """Test that a shape mismatch surfaces as StructuralMismatch."""
        registration = VersionRegistration(Ver("OldString"), str, add_hundred)

        with pytest.raises(StructuralMismatch):
            registration.apply(ContentBuffer(100))

    @pytest.mark.unit
    def test_converter_failure_is_wrapped(self):
        """Test that converter exceptions become ConversionError chained to the original."""
        registration = VersionRegistration(Num(2), str, add_hundred)

        with pytest.raises(ConversionError) as exc_info:
            registration.apply(ContentBuffer("not a number"))

        error = exc_info.value
        assert error.code == "CONVERSION_FAILED"
        assert error.tag == Num(2)
        assert error.details["error_type"] == "ValueError"
        assert error.details["wire_type"] == "str"
        assert isinstance(error.__cause__, ValueError)

    @pytest.mark.unit
    def test_converter_receives_fresh_value(self):
        """Test that a converter mutating its input cannot affect the buffer."""

        def destructive(values: list[int]) -> int:
            total = sum(values)
            values.clear()
            return total

        registration = VersionRegistration(Num(1), list[int], destructive)
        buffer = ContentBuffer([1, 2, 3])

        assert registration.apply(buffer) == 6
        assert registration.apply(buffer) == 6


class TestVersionRegistrationIdentity:
    """Test cases for equality and representation."""

    @pytest.mark.unit
    def test_equality(self):
        """Test that registrations compare by tag, wire type and converter."""
        first = VersionRegistration(Num(1), str, add_hundred)
        same = VersionRegistration(Num(1), str, add_hundred, name="other")
        different = VersionRegistration(Num(1), int, add_hundred)

        assert first == same
        assert hash(first) == hash(same)
        assert first != different
        assert first != "not a registration"

    @pytest.mark.unit
    def test_repr(self):
        """Test string representation."""
        registration = VersionRegistration(Num(1), str, add_hundred)

        assert repr(registration) == "VersionRegistration(tag=num:1, wire_type=str, name='add_hundred')"

# ABOUTME: Unit tests for VersionRegistry
# ABOUTME: Tests registration, lookup, removal and resolver assembly per current type

from typing import Annotated

import pytest

from field_versions.components.resolver.registry import VersionRegistry, default_registry
from field_versions.exceptions.resolution import RegistrationError, RegistrationNotFoundError
from field_versions.models.version_tag import CURRENT, Num, Sem, Ver


class TestVersionRegistryRegistration:
    """Test cases for adding registrations."""

    @pytest.mark.unit
    def test_add_and_get(self, registry):
        """Test registering and looking up a representation."""
        registration = registry.add(int, Ver("OldString"), str, int)

        assert registry.get(int, Ver("OldString")) is registration
        assert registry.contains(int, Ver("OldString"))
        assert registry.count(int) == 1

    @pytest.mark.unit
    def test_decorator(self, registry):
        """Test the decorator form."""

        @registry.register(int, Num(1), list[int])
        def total(values: list[int]) -> int:
            return sum(values)

        assert total([1, 2]) == 3
        assert registry.get(int, Num(1)).name == "total"

    @pytest.mark.unit
    def test_duplicate_rejected(self, registry):
        """Test that a (type, tag) pair is registered once."""
        registry.add(int, Num(1), str, int)

        with pytest.raises(RegistrationError) as exc_info:
            registry.add(int, Num(1), list[int], sum)

        assert exc_info.value.code == "DUPLICATE_TAG"

    @pytest.mark.unit
    def test_same_tag_for_different_types(self, registry):
        """Test that registrations are scoped to their current type."""
        registry.add(int, Num(1), str, int)
        registry.add(str, Num(1), int, str)

        assert registry.count() == 2
        assert registry.get(str, Num(1)).wire_type is int

    @pytest.mark.unit
    def test_current_not_registrable(self, registry):
        """Test that the current representation cannot be registered."""
        with pytest.raises(RegistrationError) as exc_info:
            registry.add(int, CURRENT, int, int)

        assert exc_info.value.code == "CURRENT_NOT_REGISTRABLE"

    @pytest.mark.unit
    def test_unhashable_current_type(self, registry):
        """Test that unhashable annotations can still key registrations."""
        current_type = Annotated[int, {"unit": "ms"}]
        registry.add(current_type, Num(1), str, int)

        assert registry.contains(Annotated[int, {"unit": "ms"}], Num(1))
        assert registry.count(current_type) == 1


class TestVersionRegistryLookup:
    """Test cases for lookup and maintenance."""

    @pytest.mark.unit
    def test_missing_registration(self, registry):
        """Test that looking up an unknown pair raises."""
        with pytest.raises(RegistrationNotFoundError) as exc_info:
            registry.get(int, Num(9))

        assert exc_info.value.code == "REGISTRATION_NOT_FOUND"
        assert isinstance(exc_info.value, RegistrationError)

    @pytest.mark.unit
    def test_tags_in_registration_order(self, registry):
        """Test that tags keep the order they were registered in."""
        registry.add(int, Sem(0, 0, 1), str, int)
        registry.add(int, Num(1), list[int], sum)
        registry.add(int, Ver("OldString"), bool, int)

        assert registry.tags_for(int) == [Sem(0, 0, 1), Num(1), Ver("OldString")]
        assert registry.tags_for(float) == []

    @pytest.mark.unit
    def test_unregister(self, registry):
        """Test removing registrations."""
        registry.add(int, Num(1), str, int)

        assert registry.unregister(int, Num(1)) is True
        assert registry.unregister(int, Num(1)) is False
        assert registry.count() == 0

    @pytest.mark.unit
    def test_clear(self, registry):
        """Test clearing one type or everything."""
        registry.add(int, Num(1), str, int)
        registry.add(str, Num(1), int, str)

        registry.clear(int)
        assert registry.count(int) == 0
        assert registry.count(str) == 1

        registry.clear()
        assert registry.count() == 0

    @pytest.mark.unit
    def test_repr(self, registry):
        """Test string representation."""
        registry.add(int, Num(1), str, int)

        assert repr(registry) == "VersionRegistry(name='test', registrations=1)"

    @pytest.mark.unit
    def test_default_registry_exists(self):
        """Test the module-level registry."""
        assert isinstance(default_registry, VersionRegistry)
        assert default_registry.name == "default"


class TestVersionRegistryResolver:
    """Test cases for assembling resolvers."""

    @pytest.mark.unit
    def test_all_tags_by_default(self, registry):
        """Test that every registered tag is used in registration order."""
        registry.add(int, Num(1), str, lambda v: int(v) + 100)
        registry.add(int, Num(2), str, lambda v: int(v) + 300)

        resolver = registry.resolver(int)

        assert resolver.tags == (CURRENT, Num(1), Num(2))
        assert resolver.resolve_raw('"100"') == 200

    @pytest.mark.unit
    def test_selected_tags_define_order(self, registry):
        """Test that explicitly named tags are tried in the order named."""
        registry.add(int, Num(1), str, lambda v: int(v) + 100)
        registry.add(int, Num(2), str, lambda v: int(v) + 300)

        resolver = registry.resolver(int, Num(2), Num(1))

        assert resolver.resolve_raw('"100"') == 400

    @pytest.mark.unit
    def test_current_tag_is_ignored(self, registry):
        """Test that naming the current tag does not require a registration."""
        registry.add(int, Num(1), str, int)

        resolver = registry.resolver(int, CURRENT, Num(1))

        assert resolver.tags == (CURRENT, Num(1))

    @pytest.mark.unit
    def test_unknown_tag(self, registry):
        """Test that naming an unregistered tag fails."""
        with pytest.raises(RegistrationNotFoundError):
            registry.resolver(int, Num(3))

    @pytest.mark.unit
    def test_options_forwarded(self, registry):
        """Test that resolver options pass through."""
        resolver = registry.resolver(int, name="counter")

        assert resolver.name == "counter"

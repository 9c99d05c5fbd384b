"""Tests for Unit property CRUD, modifiers, and lifecycle.

Critical Invariants:
- set_property never changes base_value
- set_base_property always leaves value == base_value
- Readonly properties reject every mutation and stay unchanged
"""

import pytest

from atago import (
    Modifier,
    Property,
    PropertyContainer,
    PropertyNotFoundError,
    ReadonlyPropertyError,
    TraitHolder,
    Unit,
    UnitSettings,
)


def test_unit_identity(unit):
    assert unit.id == "unit-1"
    assert unit.name == "Test Unit"
    assert unit.type == "test"
    assert unit.properties == {}


def test_unit_type_defaults(settings):
    assert Unit("u", "U", settings=settings).type == "unit"


def test_unit_satisfies_protocols(unit):
    assert isinstance(unit, PropertyContainer)
    assert isinstance(unit, TraitHolder)


def test_initial_properties_are_copied_not_aliased(settings):
    initial = {"hp": Property("hp", 10)}

    u = Unit("u", "U", "npc", initial, settings=settings)
    u.set_property("mp", 5)

    assert "mp" not in initial
    assert u.get_property("hp") is initial["hp"]


def test_initial_property_key_must_match_name(settings):
    with pytest.raises(ValueError, match="mismatched key"):
        Unit("u", "U", "npc", {"hp": Property("health", 10)}, settings=settings)


def test_key_validation_can_be_disabled():
    lax = UnitSettings(validate_property_keys=False)
    u = Unit("u", "U", "npc", {"hp": Property("health", 10)}, settings=lax)
    assert u.get_property_value("hp") == 10


# Queries


def test_get_missing_property_returns_none(unit):
    assert unit.get_property("mana") is None
    assert unit.get_property_value("mana") is None
    assert unit.get_property_value("mana", default=0) == 0


def test_require_missing_property_raises(unit):
    with pytest.raises(PropertyNotFoundError) as exc:
        unit.require_property("mana")
    assert exc.value.name == "mana"
    assert str(exc.value) == 'Property "mana" does not exist'

    with pytest.raises(PropertyNotFoundError):
        unit.require_property_value("mana")


def test_require_existing_property(unit):
    unit.set_property("health", 100)

    assert unit.require_property("health").name == "health"
    assert unit.require_property_value("health") == 100


def test_none_is_a_storable_value(unit):
    unit.set_property("target", None)

    assert "target" in unit
    assert unit.require_property_value("target") is None
    assert unit.get_property_value("target", default="missing") is None


# Writes


def test_set_property_only_changes_value(unit):
    """Damage: current health drops, base health stays."""
    unit.set_property("health", 100)
    unit.set_property("health", 70)

    prop = unit.get_property("health")
    assert prop.value == 70
    assert prop.base_value == 100


def test_set_base_property_changes_both(unit):
    """Training: base and current move together."""
    unit.set_property("strength", 10)
    unit.set_property("strength", 4)
    unit.set_base_property("strength", 15)

    prop = unit.get_property("strength")
    assert prop.value == 15
    assert prop.base_value == 15


def test_set_base_property_creates_missing(unit):
    unit.set_base_property("mana", 30)
    assert unit.get_property("mana").base_value == 30


def test_update_recomputes_from_base_after_temporary_change(unit):
    unit.set_property("attack", 20)
    unit.set_property("attack", 15)
    unit.add_property_modifier("attack", Modifier.transform("weapon", lambda v: v + 5, 1))

    unit.update(1 / 60)
    assert unit.get_property_value("attack") == 25

    unit.set_base_property("attack", 25)
    unit.add_property_modifier("attack", Modifier.transform("buff", lambda v: v + 3, 2))
    unit.update(1 / 60)

    assert unit.get_property_value("attack") == 33
    assert unit.get_property("attack").base_value == 25


def test_update_ignores_delta_time(unit):
    unit.set_property("speed", 10)
    unit.add_property_modifier("speed", Modifier.transform("haste", lambda v: v * 2))

    unit.update(0.0)
    first = unit.get_property_value("speed")
    unit.update(100.0)

    assert first == unit.get_property_value("speed") == 20


# Modifiers


def test_add_modifier_to_missing_property_raises(unit):
    with pytest.raises(PropertyNotFoundError):
        unit.add_property_modifier("attack", Modifier.constant("x", 1))


def test_same_source_replaces_modifier(unit):
    unit.set_property("attack", 10)
    unit.add_property_modifier("attack", Modifier.transform("sword", lambda v: v + 5))
    unit.add_property_modifier("attack", Modifier.transform("sword", lambda v: v + 8))
    unit.update(1)

    assert len(unit.get_property("attack").modifiers) == 1
    assert unit.get_property_value("attack") == 18


def test_remove_modifier_is_silent_when_absent(unit):
    unit.remove_property_modifier("nothing", "sword")
    unit.set_property("attack", 10)
    unit.remove_property_modifier("attack", "sword")

    assert unit.get_property("attack").modifiers == []


def test_removed_modifier_stops_applying(unit):
    unit.set_property("attack", 10)
    unit.add_property_modifier("attack", Modifier.transform("sword", lambda v: v + 5))
    unit.update(1)
    unit.remove_property_modifier("attack", "sword")
    unit.update(1)

    assert unit.get_property_value("attack") == 10


# Readonly


@pytest.fixture
def locked(settings):
    cap = Property("level_cap", 99, readonly=True)
    cap.modifiers.append(Modifier.constant("event", 120))
    return Unit("u", "U", "npc", {"level_cap": cap}, settings=settings)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda u: u.set_property("level_cap", 1),
        lambda u: u.set_base_property("level_cap", 1),
        lambda u: u.add_property_modifier("level_cap", Modifier.constant("x", 1)),
        lambda u: u.remove_property_modifier("level_cap", "event"),
        lambda u: u.add_trait("level_cap"),
        lambda u: u.remove_trait("level_cap"),
    ],
)
def test_readonly_rejects_mutation_and_keeps_state(locked, mutate):
    with pytest.raises(ReadonlyPropertyError) as exc:
        mutate(locked)

    prop = locked.get_property("level_cap")
    assert exc.value.name == "level_cap"
    assert prop.value == 99
    assert prop.base_value == 99
    assert [m.source for m in prop.modifiers] == ["event"]


def test_readonly_property_still_recomputes(locked):
    locked.update(1)
    assert locked.get_property_value("level_cap") == 120


# Lifecycle


def test_destroy_clears_properties_keeps_identity(unit):
    unit.set_property("health", 100)
    unit.add_trait("brave")
    held = unit.get_property("health")

    unit.destroy()

    assert unit.properties == {}
    assert unit.get_property("health") is None
    assert not unit.has_trait("brave")
    assert unit.id == "unit-1"

    held.value = 1
    assert unit.get_property("health") is None


def test_container_dunders(unit):
    unit.set_property("a", 1)
    unit.set_property("b", 2)

    assert len(unit) == 2
    assert set(unit) == {"a", "b"}
    assert "a" in unit
    assert "z" not in unit
    assert "test" in repr(unit)

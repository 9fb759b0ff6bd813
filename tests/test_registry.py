"""Tests for the default breakpoint registry."""

from breakpoints.registry import (
    BreakpointDefinition,
    BreakpointName,
    Direction,
    get_default_config,
    get_definition,
    list_definitions,
)


def test_default_config_matches_table_in_order():
    config = get_default_config()
    rows = [(d.name.value, d.label, d.default_value, d.direction.value) for d in config.values()]
    assert rows == [
        ("mobile", "Mobile", 767, "max"),
        ("mobile_extra", "Mobile Extra", 880, "max"),
        ("tablet", "Tablet", 1024, "max"),
        ("tablet_extra", "Tablet Extra", 1366, "max"),
        ("laptop", "Laptop", 1620, "max"),
        ("widescreen", "Widescreen", 2400, "min"),
    ]
    assert list(config.keys()) == list(BreakpointName)


def test_default_values_ascending():
    values = [d.default_value for d in list_definitions()]
    assert values == sorted(values)


def test_default_config_returns_fresh_mapping():
    first = get_default_config()
    first.pop(BreakpointName.MOBILE)
    assert BreakpointName.MOBILE in get_default_config()


def test_get_definition_accepts_enum_and_string():
    tablet = get_definition("tablet")
    assert isinstance(tablet, BreakpointDefinition)
    assert tablet is get_definition(BreakpointName.TABLET)
    assert tablet.direction is Direction.MAX


def test_unknown_definition_is_none():
    assert get_definition("desktop") is None
    assert get_definition(None) is None  # type: ignore[arg-type]


def test_parse_name():
    assert BreakpointName.parse("laptop") is BreakpointName.LAPTOP
    assert BreakpointName.parse(BreakpointName.WIDESCREEN) is BreakpointName.WIDESCREEN
    assert BreakpointName.parse("Laptop") is None
    assert BreakpointName.parse(42) is None

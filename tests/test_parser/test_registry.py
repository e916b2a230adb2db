import pytest

from argweave.exceptions import ArgumentNotFoundError, ConfigurationError
from argweave.parser import ArgKind, ArgumentRegistry, ValueSlot


def test_add_argument_registers_both_names():
    registry = ArgumentRegistry()
    registry.add_argument(ArgKind.INT, "n", "count", description="How many")

    argument = registry.get_argument("count")
    assert argument is registry.get_argument("n")
    assert argument.kind is ArgKind.INT
    assert argument.short_name == "n"
    assert argument.description == "How many"
    assert "count" in registry and "n" in registry
    assert len(registry) == 1


@pytest.mark.parametrize(
    "kind, expected",
    [
        (str, ArgKind.STRING),
        (int, ArgKind.INT),
        (bool, ArgKind.BOOL),
        ("flag", ArgKind.BOOL),
        (ArgKind.INT, ArgKind.INT),
    ],
)
def test_add_argument_kind_forms(kind, expected):
    registry = ArgumentRegistry()
    registry.add_argument(kind, "value")
    assert registry.get_argument("value").kind is expected


@pytest.mark.parametrize("kind", [float, "float", 3, None, list])
def test_add_argument_unsupported_kind(kind):
    registry = ArgumentRegistry()
    with pytest.raises(ConfigurationError):
        registry.add_argument(kind, "value")


@pytest.mark.parametrize(
    "names",
    [
        (),
        ("",),
        ("--value",),
        ("key=value",),
        ("two words",),
        ("ab", "value"),
        ("-", "value"),
        ("=", "value"),
        ("a", "b", "c"),
    ],
)
def test_add_argument_invalid_names(names):
    registry = ArgumentRegistry()
    with pytest.raises(ConfigurationError):
        registry.add_argument(ArgKind.STRING, *names)


def test_duplicate_long_name_is_rejected():
    registry = ArgumentRegistry()
    registry.add_string_argument("a", "alpha")
    with pytest.raises(ConfigurationError):
        registry.add_int_argument("alpha")
    assert registry.get_argument("alpha").kind is ArgKind.STRING


def test_duplicate_short_name_is_rejected():
    registry = ArgumentRegistry()
    registry.add_string_argument("a", "alpha")
    with pytest.raises(ConfigurationError) as excinfo:
        registry.add_string_argument("a", "another")
    assert "--alpha" in str(excinfo.value)
    assert "another" not in registry


@pytest.mark.parametrize(
    "modifier, args",
    [
        ("set_default", ("x",)),
        ("set_positional", ()),
        ("set_multi_value", (2,)),
        ("store_value", (ValueSlot(),)),
        ("store_values", ([],)),
    ],
)
def test_modifier_before_any_argument(modifier, args):
    registry = ArgumentRegistry()
    with pytest.raises(ConfigurationError) as excinfo:
        getattr(registry, modifier)(*args)
    assert "no argument configured" in str(excinfo.value)


def test_modifiers_apply_to_last_added():
    registry = ArgumentRegistry()
    (
        registry.add_string_argument("first")
        .add_string_argument("second")
        .set_positional()
        .set_multi_value(2)
    )
    first = registry.get_argument("first")
    second = registry.get_argument("second")
    assert not first.positional and not first.multi_value
    assert second.positional and second.multi_value
    assert second.min_values == 2


def test_modifier_aliases():
    registry = ArgumentRegistry()
    registry.add_int_argument("count").multi_value(1).positional().default(4)
    argument = registry.get_argument("count")
    assert argument.multi_value and argument.positional
    assert argument.cell.values() == [4]


def test_set_multi_value_rejects_non_int_minimum():
    registry = ArgumentRegistry()
    registry.add_string_argument("files")
    with pytest.raises(ConfigurationError):
        registry.set_multi_value("2")
    with pytest.raises(ConfigurationError):
        registry.set_multi_value(True)


@pytest.mark.parametrize(
    "kind, value",
    [
        (ArgKind.INT, "3"),
        (ArgKind.INT, True),
        (ArgKind.STRING, 3),
        (ArgKind.BOOL, 1),
        (ArgKind.BOOL, "true"),
    ],
)
def test_set_default_type_mismatch(kind, value):
    registry = ArgumentRegistry()
    registry.add_argument(kind, "value")
    with pytest.raises(ConfigurationError):
        registry.set_default(value)
    assert not registry.get_argument("value").initialized


def test_store_value_type_mismatch():
    registry = ArgumentRegistry()
    registry.add_int_argument("port")
    with pytest.raises(ConfigurationError):
        registry.store_value(ValueSlot("8080"))
    with pytest.raises(ConfigurationError):
        registry.store_value(8080)


def test_store_value_declared_kind():
    registry = ArgumentRegistry()
    registry.add_int_argument("port")
    with pytest.raises(ConfigurationError):
        registry.store_value(ValueSlot(kind=ArgKind.STRING))
    slot = ValueSlot(kind=ArgKind.INT)
    registry.store_value(slot)
    assert registry.get_argument("port").cell.has_external_value


def test_store_values_empty_list_binds_to_any_kind():
    registry = ArgumentRegistry()
    registry.add_int_argument("numbers").set_multi_value()
    numbers: list[int] = []
    registry.store_values(numbers)
    assert registry.get_argument("numbers").cell.has_external_values


def test_store_values_type_mismatch():
    registry = ArgumentRegistry()
    registry.add_string_argument("files")
    with pytest.raises(ConfigurationError):
        registry.store_values([1, 2])
    with pytest.raises(ConfigurationError):
        registry.store_values(("a",))


def test_add_help():
    registry = ArgumentRegistry()
    assert not registry.help_enabled
    registry.add_help("h", "help", "Show help")

    assert registry.help_enabled
    assert registry.help_short == "h"
    assert registry.help_long == "help"
    assert registry.help_description == "Show help"
    help_argument = registry.get_argument("help")
    assert help_argument.kind is ArgKind.STRING
    assert registry.is_help_argument(help_argument)

    with pytest.raises(ConfigurationError):
        registry.add_help("?", "usage")


def test_get_argument_not_found():
    registry = ArgumentRegistry()
    registry.add_string_argument("a", "alpha")
    with pytest.raises(ArgumentNotFoundError) as excinfo:
        registry.get_argument("beta")
    assert str(excinfo.value) == "Argument not found: beta"
    with pytest.raises(KeyError):
        registry.get_argument("b")


def test_long_name_shadows_short_name():
    registry = ArgumentRegistry()
    registry.add_string_argument("x", "extra").add_int_argument("x")
    assert registry.get_argument("x").kind is ArgKind.INT
    assert registry.find_short("x").long_name == "extra"


def test_iteration_follows_registration_order():
    registry = ArgumentRegistry()
    for name in ["zeta", "alpha", "mid"]:
        registry.add_string_argument(name)
    assert [argument.long_name for argument in registry] == ["zeta", "alpha", "mid"]


def test_long_name_is_read_only():
    registry = ArgumentRegistry()
    registry.add_string_argument("alpha")
    with pytest.raises(AttributeError):
        registry.get_argument("alpha").long_name = "beta"

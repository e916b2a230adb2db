import pytest

from argweave.exceptions import (
    ArgumentNotFoundError,
    ArgumentTypeError,
    ConfigurationError,
    MultiValueIndexError,
)
from argweave.parser import ArgKind, ArgParser


def make_parser() -> ArgParser:
    parser = ArgParser("test")
    parser.add_string_argument("n", "name")
    parser.add_int_argument("c", "count")
    parser.add_flag("v", "verbose")
    parser.add_string_argument("tags").set_multi_value()
    return parser


def test_typed_getters_by_long_and_short_name():
    parser = make_parser()
    parser.parse(["-n", "alice", "-c", "3", "-v", "--tags=a", "--tags=b"])

    assert parser.get_string("name") == parser.get_string("n") == "alice"
    assert parser.get_int("count") == parser.get_int("c") == 3
    assert parser.get_flag("verbose") is parser.get_flag("v") is True
    assert parser.get_string("tags", 1) == "b"


def test_generic_get_value():
    parser = make_parser()
    parser.parse(["-c", "3"])
    assert parser.get_value("count") == 3
    assert parser.get_value("count", int) == 3
    assert parser.get_value("c", "int") == 3
    assert parser.get_value("c", ArgKind.INT) == 3


@pytest.mark.parametrize(
    "getter, name",
    [
        ("get_int", "name"),
        ("get_string", "c"),
        ("get_flag", "count"),
        ("get_int", "verbose"),
    ],
)
def test_type_mismatch(getter, name):
    parser = make_parser()
    with pytest.raises(ArgumentTypeError):
        getattr(parser, getter)(name)
    with pytest.raises(TypeError):
        getattr(parser, getter)(name)


def test_get_value_with_unsupported_kind():
    parser = make_parser()
    with pytest.raises(ConfigurationError):
        parser.get_value("count", float)


@pytest.mark.parametrize("name", ["missing", "x", ""])
def test_not_found(name):
    parser = make_parser()
    with pytest.raises(ArgumentNotFoundError):
        parser.get_value(name)
    with pytest.raises(ArgumentNotFoundError):
        parser.is_initialized(name)


def test_uninitialized_values_are_zero():
    parser = make_parser()
    assert parser.get_string("name") == ""
    assert parser.get_int("count") == 0
    assert parser.get_flag("verbose") is False
    assert parser.get_values("tags") == []


def test_multi_value_index_out_of_range():
    parser = make_parser()
    parser.parse(["--tags", "a"])
    with pytest.raises(MultiValueIndexError):
        parser.get_string("tags", 1)


def test_value_count():
    parser = make_parser()
    parser.parse(["--tags", "a", "--tags=b", "-n", "x"])
    assert parser.get_argument("tags").value_count() == 2
    assert parser.get_argument("name").value_count() == 1
    assert parser.get_argument("count").value_count() == 0


def test_get_values_on_single_value_argument():
    parser = make_parser()
    assert parser.get_values("name") == []
    parser.parse(["--name=x", "-c", "4"])
    assert parser.get_values("name") == ["x"]
    assert parser.get_values("c", int) == [4]


def test_get_values_is_a_copy():
    parser = make_parser()
    parser.parse(["--tags", "a"])
    values = parser.get_values("tags", "string")
    values.append("b")
    assert parser.get_values("tags") == ["a"]


def test_parse_argv_skips_program_name():
    parser = make_parser()
    assert parser.parse_argv(["prog", "-n", "bob", "-c", "1", "--tags=z"]) is True
    assert parser.get_string("name") == "bob"


def test_parse_argv_uses_sys_argv(monkeypatch):
    parser = make_parser()
    monkeypatch.setattr("sys.argv", ["prog", "--name=sys", "-c", "2", "--tags=z"])
    assert parser.parse_argv() is True
    assert parser.get_string("name") == "sys"


def test_parse_none_is_empty():
    parser = ArgParser("test")
    parser.add_flag("v", "verbose")
    assert parser.parse() is True
    assert parser.parse(None) is True


def test_str():
    parser = make_parser()
    parser.add_int_argument("numbers").set_positional().set_multi_value()
    assert str(parser) == (
        "ArgParser(name='test', args=5, short=3, positional=1, multi_value=2)"
    )
    assert repr(parser) == str(parser)


def test_default_name_uses_program_invocation(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/usr/local/bin/some-tool-that-does-not-exist"])
    assert ArgParser().name == "some-tool-that-does-not-exist"

import pytest

from optscan.exceptions import IllegalOptionError, ValueBindingError
from optscan.parser import UNLIMITED, Option, ValueType


def test_option_needs_a_name():
    with pytest.raises(IllegalOptionError):
        Option()


@pytest.mark.parametrize("name", ["opt`", "a b", "=", "-", " ", "o.p"])
def test_illegal_short_names(name):
    with pytest.raises(IllegalOptionError):
        Option(name)


@pytest.mark.parametrize("name", ["a", "Z", "9", "?", "@", "&", ".", '"', "opt", "_x", "$"])
def test_legal_short_names(name):
    assert Option(name).short_name == name


@pytest.mark.parametrize("name", ["with space", "a=b", "-verbose", "tab\tname"])
def test_illegal_long_names(name):
    with pytest.raises(IllegalOptionError):
        Option(long_name=name)


def test_invalid_arity():
    with pytest.raises(IllegalOptionError):
        Option("o", arity=-5)
    assert Option("o", arity=UNLIMITED).has_args


def test_value_separator_must_be_one_character():
    with pytest.raises(IllegalOptionError):
        Option("D", arity=2, value_separator="==")


def test_key_prefers_short_name():
    assert Option("v", "verbose").key == "v"
    assert Option(long_name="verbose").key == "verbose"
    assert Option("v", "verbose").names == ("v", "verbose")


def test_value_type_is_coerced_from_string():
    option = Option("t", arity=1, value_type="date")
    assert option.value_type is ValueType.DATE


def test_flag_rejects_values():
    option = Option("a")
    assert not option.has_arg
    with pytest.raises(ValueBindingError):
        option.add_value("x")


def test_add_value_until_full():
    option = Option("o", arity=2)
    option.add_value("1")
    option.add_value("2")
    assert option.is_full
    with pytest.raises(ValueBindingError):
        option.add_value("3")
    assert option.values == ["1", "2"]


def test_unlimited_never_full():
    option = Option("o", arity=UNLIMITED)
    for value in "abcdef":
        option.add_value(value)
    assert not option.is_full
    assert option.values == list("abcdef")


def test_value_separator_splits_up_to_arity():
    option = Option("D", arity=2, value_separator="=")
    option.add_value("key=value=more")
    assert option.values == ["key", "value=more"]


def test_value_separator_unlimited():
    option = Option("D", arity=UNLIMITED, value_separator=",")
    option.add_value("a,b,c")
    assert option.values == ["a", "b", "c"]


def test_copy_is_independent():
    option = Option("o", "output", arity=1)
    option.add_value("x")
    copy = option.copy()
    assert copy.values == []
    assert option.values == ["x"]
    assert copy == option
    assert copy is not option
    assert hash(copy) == hash(option)


def test_clear_values():
    option = Option("o", arity=1)
    option.add_value("x")
    option.clear_values()
    assert option.values == []


def test_str():
    assert str(Option("v", "verbose")) == "Option(-v, --verbose)"
    option = Option(long_name="out", arity=1)
    option.add_value("f")
    assert str(option) == "Option(--out, values=['f'])"

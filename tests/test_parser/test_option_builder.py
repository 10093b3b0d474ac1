import pytest

from optscan.exceptions import IllegalOptionError
from optscan.parser import UNLIMITED, OptionBuilder, ValueType


def test_complete_option():
    simple = (
        OptionBuilder()
        .with_long_name("simple-option")
        .has_arg()
        .is_required()
        .has_args()
        .with_type(ValueType.NUMBER)
        .with_description("this is a simple option")
        .create("s")
    )

    assert simple.short_name == "s"
    assert simple.long_name == "simple-option"
    assert simple.description == "this is a simple option"
    assert simple.value_type is ValueType.NUMBER
    assert simple.has_arg
    assert simple.required
    assert simple.has_args
    assert simple.arity == UNLIMITED


def test_two_complete_options():
    builder = OptionBuilder()
    simple = (
        builder.with_long_name("simple-option")
        .has_arg()
        .is_required()
        .has_args()
        .with_type("number")
        .with_description("this is a simple option")
        .create("s")
    )
    assert simple.required

    dimple = (
        builder.with_long_name("dimple-option")
        .has_arg()
        .with_description("this is a dimple option")
        .create("d")
    )

    assert dimple.short_name == "d"
    assert dimple.long_name == "dimple-option"
    assert dimple.description == "this is a dimple option"
    assert dimple.value_type is None
    assert dimple.has_arg
    assert not dimple.required
    assert not dimple.has_args


def test_base_flag():
    option = OptionBuilder().with_description("option description").create("o")
    assert option.short_name == "o"
    assert option.description == "option description"
    assert not option.has_arg


def test_special_option_chars():
    assert OptionBuilder().with_description("help options").create("?").short_name == "?"
    assert OptionBuilder().with_description("read from stdin").create("@").short_name == "@"


def test_option_arg_numbers():
    option = OptionBuilder().has_args(2).create("o")
    assert option.arity == 2


def test_optional_args():
    option = OptionBuilder().has_optional_arg().create("o")
    assert option.optional_arg
    assert option.arity == 1


def test_value_separator():
    option = OptionBuilder().has_args(2).with_value_separator().create("D")
    assert option.value_separator == "="


def test_illegal_options():
    with pytest.raises(IllegalOptionError):
        OptionBuilder().with_description("option description").create("=")

    with pytest.raises(IllegalOptionError):
        OptionBuilder().create("opt`")

    assert OptionBuilder().create("opt").short_name == "opt"


def test_illegal_type():
    with pytest.raises(IllegalOptionError):
        OptionBuilder().with_type("colour")


def test_incomplete_option_rejected():
    builder = OptionBuilder()
    with pytest.raises(IllegalOptionError):
        builder.has_arg().create()
    assert not builder.create("opt").has_arg


def test_builder_is_reset_always():
    builder = OptionBuilder()
    with pytest.raises(IllegalOptionError):
        builder.with_description("JUnit").create("=")
    assert builder.create("x").description == ""

    with pytest.raises(IllegalOptionError):
        builder.with_description("JUnit").create()
    assert builder.create("x").description == ""


def test_long_name_only():
    option = OptionBuilder().with_long_name("verbose").create()
    assert option.key == "verbose"
    assert option.short_name == ""

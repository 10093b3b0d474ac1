import pytest

from optscan.exceptions import (
    AlreadySelectedError,
    MissingArgumentError,
    MissingRequiredOptionsError,
    UnknownPropertyError,
    UnrecognizedOptionError,
    ValueBindingError,
)
from optscan.parser import (
    UNLIMITED,
    Dialect,
    Option,
    OptionCatalogue,
    OptionGroup,
    OptionParser,
    parse,
)

ALL_DIALECTS = list(Dialect)


def value_catalogue(arity: int = 1) -> OptionCatalogue:
    return OptionCatalogue().register(Option("o", "output", arity=arity)).add("a")


def group_catalogue(required: bool = False) -> tuple[OptionCatalogue, OptionGroup]:
    group = OptionGroup([Option("a"), Option("b")], required=required)
    return OptionCatalogue().add_group(group).add("x"), group


@pytest.mark.parametrize("dialect", ALL_DIALECTS)
def test_empty_input(dialect):
    catalogue = OptionCatalogue().add("a", "first")
    result = parse(catalogue, [], dialect=dialect)
    assert result.options == []
    assert result.args == []
    assert not result.has_option("a")

    assert parse(catalogue, None, dialect=dialect).options == []


def test_catalogue_reuse_clears_state():
    catalogue = value_catalogue()
    first = parse(catalogue, ["-o", "x", "-a"])
    assert first.get_value("o") == "x"

    second = parse(catalogue, [])
    assert second.options == []
    assert catalogue.lookup("o").values == []
    assert first.get_value("o") == "x"


@pytest.mark.parametrize("dialect", ALL_DIALECTS)
def test_positional_only_input(dialect):
    args = ["foo", "bar", "x=y", "a b"]
    result = parse(value_catalogue(), args, dialect=dialect)
    assert result.args == args
    assert result.options == []


def test_last_match_wins():
    result = parse(value_catalogue(), ["-o", "a", "-o", "b"])
    assert result.get_value("o") == "b"
    assert result.get_values("o") == ["b"]
    assert len(result) == 1


def test_unlimited_accumulates():
    result = parse(value_catalogue(UNLIMITED), ["-o", "1", "-o", "2", "3"])
    assert result.get_values("output") == ["1", "2", "3"]


def test_missing_argument():
    with pytest.raises(MissingArgumentError) as excinfo:
        parse(value_catalogue(), ["-o"])
    assert excinfo.value.option.key == "o"


def test_missing_argument_before_option():
    with pytest.raises(MissingArgumentError):
        parse(value_catalogue(), ["-o", "-a"])


def test_optional_argument():
    catalogue = OptionCatalogue().register(Option("o", arity=1, optional_arg=True))
    result = parse(catalogue, ["-o"])
    assert result.has_option("o")
    assert result.get_values("o") == []
    assert result.get_value("o", "fallback") == "fallback"


def test_exclusive_group():
    catalogue, group = group_catalogue()
    with pytest.raises(AlreadySelectedError) as excinfo:
        parse(catalogue, ["-a", "-b"])
    assert excinfo.value.group is group
    assert excinfo.value.previous == "a"
    assert excinfo.value.attempted.key == "b"


def test_group_same_option_twice():
    catalogue, _ = group_catalogue()
    assert parse(catalogue, ["-a", "-a"]).has_option("a")


def test_group_selection_does_not_leak_between_parses():
    catalogue, _ = group_catalogue()
    assert parse(catalogue, ["-a"]).has_option("a")
    assert parse(catalogue, ["-b"]).has_option("b")


@pytest.mark.parametrize("args", [["-a"], ["-b", "-x"]])
def test_required_group_satisfied(args):
    catalogue, _ = group_catalogue(required=True)
    parse(catalogue, args)


def test_required_group_missing():
    catalogue, group = group_catalogue(required=True)
    with pytest.raises(MissingRequiredOptionsError) as excinfo:
        parse(catalogue, ["-x"])
    assert excinfo.value.keys == [group]


def test_required_group_both_supplied():
    catalogue, _ = group_catalogue(required=True)
    with pytest.raises(AlreadySelectedError):
        parse(catalogue, ["-b", "-a"])


@pytest.mark.parametrize("dialect", ALL_DIALECTS)
def test_stop_at_non_option(dialect):
    catalogue = OptionCatalogue().add("a")
    result = parse(catalogue, ["-a", "foo", "-z"], stop_at_non_option=True, dialect=dialect)
    assert [option.key for option in result] == ["a"]
    assert result.args == ["foo", "-z"]


@pytest.mark.parametrize("dialect", ALL_DIALECTS)
def test_stop_at_unknown_option(dialect):
    catalogue = OptionCatalogue().add("a")
    result = parse(catalogue, ["-z", "-a"], stop_at_non_option=True, dialect=dialect)
    assert result.options == []
    assert result.args == ["-z", "-a"]


@pytest.mark.parametrize("dialect", ALL_DIALECTS)
def test_unrecognized_option(dialect):
    with pytest.raises(UnrecognizedOptionError) as excinfo:
        parse(value_catalogue(), ["-a", "-z"], dialect=dialect)
    assert excinfo.value.token == "-z"


@pytest.mark.parametrize("dialect", ALL_DIALECTS)
def test_unrecognized_long_option(dialect):
    with pytest.raises(UnrecognizedOptionError) as excinfo:
        parse(value_catalogue(), ["--zeta=1"], dialect=dialect)
    assert excinfo.value.token == "--zeta=1"


@pytest.mark.parametrize("dialect", ALL_DIALECTS)
def test_double_dash(dialect):
    result = parse(value_catalogue(), ["-a", "--", "-a", "-o", "x"], dialect=dialect)
    assert [option.key for option in result] == ["a"]
    assert result.args == ["-a", "-o", "x"]


def test_later_double_dashes_are_dropped():
    result = parse(value_catalogue(), ["--", "x", "--", "y"])
    assert result.args == ["x", "y"]


def test_double_dash_ends_values():
    result = parse(value_catalogue(UNLIMITED), ["-o", "1", "--", "2"])
    assert result.get_values("o") == ["1"]
    assert result.args == ["2"]


def test_single_dash_is_positional():
    result = parse(value_catalogue(), ["-", "-a"])
    assert result.args == ["-"]
    assert result.has_option("a")


def test_single_dash_with_stop():
    result = parse(value_catalogue(), ["-a", "-", "-o", "x"], stop_at_non_option=True)
    assert result.args == ["-o", "x"]
    assert not result.has_option("o")


def test_values_stop_at_next_option():
    result = parse(value_catalogue(UNLIMITED), ["-o", "1", "2", "-a", "3"])
    assert result.get_values("o") == ["1", "2"]
    assert result.has_option("a")
    assert result.args == ["3"]


def test_fixed_arity_pushes_back_extra_values():
    result = parse(value_catalogue(2), ["-o", "1", "2", "3"])
    assert result.get_values("o") == ["1", "2"]
    assert result.args == ["3"]


def test_unknown_dash_token_is_a_value():
    result = parse(value_catalogue(), ["-o", "-5"])
    assert result.get_value("o") == "-5"


@pytest.mark.parametrize(
    "token, expected",
    [
        ('"hello world"', "hello world"),
        ("'x'", "x"),
        ('"x', '"x'),
        ("'x\"", "'x\""),
        ('""', ""),
    ],
)
def test_quotes_are_stripped(token, expected):
    assert parse(value_catalogue(), ["-o", token]).get_value("o") == expected


@pytest.mark.parametrize("dialect", ALL_DIALECTS)
@pytest.mark.parametrize(
    "args", [["--output=f.txt"], ["--output", "f.txt"], ["-o", "f.txt"], ["-of.txt"]]
)
def test_value_forms(dialect, args):
    assert parse(value_catalogue(), args, dialect=dialect).get_value("output") == "f.txt"


def test_posix_bundles():
    catalogue = OptionCatalogue().add("a").add("b").add("c", has_arg=True)
    result = parse(catalogue, ["-abc", "value"], dialect="posix")
    assert result.has_option("a")
    assert result.has_option("b")
    assert result.get_value("c") == "value"

    with pytest.raises(UnrecognizedOptionError) as excinfo:
        parse(catalogue, ["-abx"], dialect=Dialect.POSIX)
    assert excinfo.value.token == "-abx"

    with pytest.raises(MissingArgumentError):
        parse(catalogue, ["-abc"], dialect=Dialect.POSIX)


def test_gnu_properties():
    catalogue = OptionCatalogue().register(
        Option("D", arity=UNLIMITED, value_separator="=")
    )
    result = parse(catalogue, ["-Dk1=v1", "-Dk2=v2"], dialect=Dialect.GNU)
    assert result.get_values("D") == ["k1", "v1", "k2", "v2"]
    assert result.get_properties("D") == {"k1": "v1", "k2": "v2"}


def test_value_separator_respects_arity():
    catalogue = OptionCatalogue().register(Option("D", arity=2, value_separator="="))
    result = parse(catalogue, ["-D", "k=v=w", "rest"])
    assert result.get_values("D") == ["k", "v=w"]
    assert result.args == ["rest"]


def test_required_option_missing():
    catalogue = (
        OptionCatalogue()
        .register(Option("r", required=True))
        .register(Option(long_name="needed", arity=1, required=True))
        .add("a")
    )
    with pytest.raises(MissingRequiredOptionsError) as excinfo:
        parse(catalogue, ["-a"])
    assert excinfo.value.keys == ["r", "needed"]
    assert "r, needed" in str(excinfo.value)


def test_required_option_supplied():
    catalogue = OptionCatalogue().register(Option("r", "req", required=True))
    assert parse(catalogue, ["--req"]).has_option("r")


def test_defaults_fill_missing_values():
    result = parse(value_catalogue(), [], defaults={"o": "x"})
    assert result.get_value("o") == "x"


def test_defaults_do_not_override():
    result = parse(value_catalogue(), ["--output", "y"], defaults={"output": "x"})
    assert result.get_value("o") == "y"


@pytest.mark.parametrize("value", ["yes", "TRUE", "1", "True"])
def test_flag_default_affirmative(value):
    result = parse(value_catalogue(), [], defaults={"a": value})
    assert result.has_option("a")


def test_flag_default_negative_stops_defaulting():
    catalogue = value_catalogue().add("f").add("g")
    result = parse(catalogue, [], defaults={"o": "x", "f": "no", "g": "true", "a": "1"})
    assert result.get_value("o") == "x"
    assert not result.has_option("f")
    assert not result.has_option("g")
    assert not result.has_option("a")


def test_unknown_default_key():
    with pytest.raises(UnknownPropertyError) as excinfo:
        parse(value_catalogue(), [], defaults={"zzz": "1"})
    assert excinfo.value.key == "zzz"


def test_defaults_do_not_satisfy_required():
    catalogue = OptionCatalogue().register(Option("r", arity=1, required=True))
    with pytest.raises(MissingRequiredOptionsError):
        parse(catalogue, [], defaults={"r": "v"})


def test_defaults_skip_group_exclusivity():
    catalogue, _ = group_catalogue()
    result = parse(catalogue, ["-a"], defaults={"b": "true"})
    assert result.has_option("a")
    assert result.has_option("b")


def test_default_values_are_stringified():
    result = parse(value_catalogue(), [], defaults={"o": 3})
    assert result.get_value("o") == "3"


def test_default_binding_failure_is_ignored(monkeypatch):
    def reject(self, value):
        raise ValueBindingError(f"Option '{self.key}' rejects {value!r}")

    monkeypatch.setattr(Option, "add_value", reject)
    result = parse(value_catalogue(), [], defaults={"o": "bad", "a": "yes"})

    assert result.has_option("o")
    assert result.get_values("o") == []
    assert result.has_option("a")


def test_option_parser():
    parser = OptionParser("posix")
    assert parser.dialect is Dialect.POSIX
    assert str(parser) == "OptionParser(dialect=posix)"
    catalogue = OptionCatalogue().add("a").add("b")
    result = parser.parse(catalogue, ["-ab", "file"])
    assert result.has_option("a")
    assert result.has_option("b")
    assert result.args == ["file"]


def test_arguments_are_not_mutated():
    args = ["-abc", "value"]
    catalogue = OptionCatalogue().add("a").add("b").add("c", has_arg=True)
    parse(catalogue, args, dialect=Dialect.POSIX)
    assert args == ["-abc", "value"]

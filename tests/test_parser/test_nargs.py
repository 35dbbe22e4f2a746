import pytest

from typedargs.exceptions import InvalidSpecification, MissingValue, TypeMismatch
from typedargs.parser import ArgumentParser, Nargs, NargsRule, ParseStatus


@pytest.mark.parametrize(
    "spec, expected",
    [
        (None, Nargs(NargsRule.SINGLE)),
        ("", Nargs(NargsRule.SINGLE)),
        ("*", Nargs(NargsRule.ZERO_OR_MORE)),
        (" + ", Nargs(NargsRule.ONE_OR_MORE)),
        ("?", Nargs(NargsRule.ZERO_OR_ONE)),
        ("2", Nargs(NargsRule.EXACTLY, 2)),
        (3, Nargs(NargsRule.EXACTLY, 3)),
    ],
)
def test_nargs_parse(spec, expected):
    assert Nargs.parse(spec) == expected
    assert Nargs.parse(expected) is expected


def test_nargs_bounds():
    assert (Nargs.single().min_values, Nargs.single().max_values) == (1, 1)
    assert (Nargs.exactly(3).min_values, Nargs.exactly(3).max_values) == (3, 3)
    assert (Nargs.zero_or_more().min_values, Nargs.zero_or_more().max_values) == (0, None)
    assert (Nargs.one_or_more().min_values, Nargs.one_or_more().max_values) == (1, None)
    assert (Nargs.zero_or_one().min_values, Nargs.zero_or_one().max_values) == (0, 1)
    assert Nargs.zero_or_more().is_greedy
    assert not Nargs.zero_or_one().is_greedy
    assert not Nargs.single().is_list
    assert Nargs.zero_or_one().is_list


@pytest.mark.parametrize("nargs", [0, -1, True])
def test_nargs_exactly_rejects_non_positive(nargs):
    with pytest.raises(InvalidSpecification):
        Nargs.exactly(nargs)


@pytest.mark.parametrize("nargs, text", [(None, ""), ("*", "*"), (4, "4"), ("?", "?")])
def test_nargs_str(nargs, text):
    assert str(Nargs.parse(nargs)) == text


def test_zero_or_more():
    parser = ArgumentParser("test")
    parser.add_argument("--files", nargs="*")
    assert parser.parse(["test", "--files", "a.txt", "b.txt", "c.txt"])
    assert parser.get_list("files", str) == ["a.txt", "b.txt", "c.txt"]

    assert parser.parse(["test", "--files"])
    assert parser.get_list("files", str) == []


def test_zero_or_more_absent_is_empty_list():
    parser = ArgumentParser("test")
    parser.add_argument("--files", nargs="*")
    assert parser.parse(["test"])
    assert parser.has("files")
    assert parser.get_list("files", str) == []


def test_one_or_more():
    parser = ArgumentParser("test")
    parser.add_argument("--nums", kind=int, nargs="+")
    assert parser.parse(["test", "--nums", "1", "2", "3"])
    assert parser.get_list("nums", int) == [1, 2, 3]


def test_one_or_more_requires_a_value():
    parser = ArgumentParser("test")
    parser.add_argument("--nums", kind=int, nargs="+")
    result = parser.parse(["test", "--nums"])
    assert result.status == ParseStatus.FAILED
    assert isinstance(result.error, MissingValue)
    assert result.error.key == "nums"


def test_zero_or_one():
    parser = ArgumentParser("test")
    parser.add_argument("--config", nargs="?")
    assert parser.parse(["test", "--config", "settings.conf"])
    assert parser.get_list("config", str) == ["settings.conf"]

    assert parser.parse(["test", "--config"])
    assert parser.get_list("config", str) == []


def test_zero_or_one_is_list_shaped():
    parser = ArgumentParser("test")
    parser.add_argument("--config", nargs="?")
    assert parser.parse(["test", "--config", "settings.conf"])
    with pytest.raises(TypeMismatch):
        parser.get("config", str)


def test_zero_or_one_takes_at_most_one():
    parser = ArgumentParser("test")
    parser.add_argument("--config", nargs="?")
    parser.add_argument("target")
    assert parser.parse(["test", "--config", "a.conf", "build"])
    assert parser.get_list("config", str) == ["a.conf"]
    assert parser.get_str("target") == "build"


def test_exact_count():
    parser = ArgumentParser("test")
    parser.add_argument("--coords", kind=float, nargs="2")
    assert parser.parse(["test", "--coords", "1.5", "2.5"])
    assert parser.get_list("coords", float) == [1.5, 2.5]


def test_exact_count_too_few():
    parser = ArgumentParser("test")
    parser.add_argument("--coords", kind=float, nargs=2)
    result = parser.parse(["test", "--coords", "1.5"])
    assert result.status == ParseStatus.FAILED
    assert result.reason == "missing_value"


def test_exact_count_stops_at_option():
    parser = ArgumentParser("test")
    parser.add_argument("--coords", kind=int, nargs=2)
    parser.add_argument("--verbose", kind=bool)
    result = parser.parse(["test", "--coords", "1", "--verbose"])
    assert result.reason == "missing_value"


def test_exact_count_leaves_extra_tokens():
    parser = ArgumentParser("test")
    parser.add_argument("--coords", kind=int, nargs=2)
    result = parser.parse(["test", "--coords", "1", "2", "3"])
    assert result.status == ParseStatus.FAILED
    assert result.reason == "unknown_argument"


def test_greedy_stops_at_option():
    parser = ArgumentParser("test")
    parser.add_argument("--files", nargs="*")
    parser.add_argument("--verbose", kind=bool)
    assert parser.parse(["test", "--files", "a", "b", "--verbose"])
    assert parser.get_list("files", str) == ["a", "b"]
    assert parser.get_bool("verbose") is True


def test_repeated_list_is_replaced():
    parser = ArgumentParser("test")
    parser.add_argument("--files", nargs="+")
    assert parser.parse(["test", "--files", "a", "b", "--files", "c"])
    assert parser.get_list("files", str) == ["c"]


def test_positional_greedy():
    parser = ArgumentParser("test")
    parser.add_argument("files", nargs="+")
    parser.add_argument("--verbose", kind=bool)
    assert parser.parse(["test", "a.txt", "b.txt", "--verbose"])
    assert parser.get_list("files", str) == ["a.txt", "b.txt"]
    assert parser.get_bool("verbose") is True


def test_positional_exact_then_single():
    parser = ArgumentParser("test")
    parser.add_argument("point", kind=int, nargs=2)
    parser.add_argument("label")
    assert parser.parse(["test", "3", "4", "origin"])
    assert parser.get_list("point", int) == [3, 4]
    assert parser.get_str("label") == "origin"


def test_bool_list():
    parser = ArgumentParser("test")
    parser.add_argument("--switches", kind=bool, nargs="+")
    assert parser.parse(["test", "--switches", "true", "off", "1"])
    assert parser.get_list("switches", bool) == [True, False, True]


def test_single_optional_requires_value():
    parser = ArgumentParser("test")
    parser.add_argument("--input")
    parser.add_argument("--verbose", kind=bool)

    result = parser.parse(["test", "--input"])
    assert result.reason == "missing_value"

    result = parser.parse(["test", "--input", "--verbose"])
    assert result.reason == "missing_value"


def test_coercion_error_in_list():
    parser = ArgumentParser("test")
    parser.add_argument("--nums", kind=int, nargs="*")
    result = parser.parse(["test", "--nums", "1", "two", "3"])
    assert result.status == ParseStatus.FAILED
    assert isinstance(result.error, TypeMismatch)
    assert result.error.key == "nums"

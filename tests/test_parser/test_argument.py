import pytest

from typedargs.parser import Argument, ArgumentKind, ArgumentParser, Nargs


def test_flag_has_no_choice_text():
    argument = Argument(aliases=("-v", "--verbose"), key="verbose", kind=ArgumentKind.BOOL)
    assert argument.is_flag
    assert argument.get_choice_text() == ""


def test_bool_list_is_not_a_flag():
    argument = Argument(
        aliases=("--switches",),
        key="switches",
        kind=ArgumentKind.BOOL,
        nargs=Nargs.one_or_more(),
    )
    assert not argument.is_flag
    assert argument.is_list


@pytest.mark.parametrize(
    "nargs, expected",
    [
        (Nargs.single(), "OUTPUT"),
        (Nargs.zero_or_one(), "[OUTPUT]"),
        (Nargs.zero_or_more(), "[OUTPUT ...]"),
        (Nargs.one_or_more(), "OUTPUT [OUTPUT ...]"),
        (Nargs.exactly(2), "OUTPUT OUTPUT"),
    ],
)
def test_choice_text_follows_nargs(nargs, expected):
    argument = Argument(aliases=("--output",), key="output", nargs=nargs)
    assert argument.get_choice_text() == expected


def test_choice_text_prefers_choices_then_metavar():
    parser = ArgumentParser("test")
    with_choices = parser.add_argument("--mode", choices=["a", "b"], metavar="M")
    with_metavar = parser.add_argument("--path", metavar="FILE")
    positional = parser.add_argument("source")
    assert with_choices.get_choice_text() == "{a,b}"
    assert with_metavar.get_choice_text() == "FILE"
    assert positional.get_choice_text() == "source"
    assert positional.get_positional_text() == "source"
    assert with_metavar.get_positional_text() == ""

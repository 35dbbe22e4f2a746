import pytest

from typedargs.exceptions import DuplicateAlias, InvalidSpecification
from typedargs.parser import ArgumentKind, ArgumentParser, Nargs, ParseStatus


@pytest.mark.parametrize("nargs", ["invalid", "0", "-1", "1.5", "**", 0, -2, True, 1.5])
def test_invalid_nargs_fails_at_registration(nargs):
    parser = ArgumentParser("test")
    with pytest.raises(InvalidSpecification):
        parser.add_argument("--test", nargs=nargs)
    assert parser.get_argument("test") is None


@pytest.mark.parametrize("nargs", ["*", "+", "?", "3", 3, "", None])
def test_valid_nargs_forms(nargs):
    parser = ArgumentParser("test")
    argument = parser.add_argument("--test", nargs=nargs)
    assert argument.nargs == Nargs.parse(nargs)


def test_duplicate_alias():
    parser = ArgumentParser("test")
    parser.add_argument("-v", "--verbose", kind=bool)
    with pytest.raises(DuplicateAlias):
        parser.add_argument("-v", "--version", kind=bool)


def test_duplicate_canonical_key():
    parser = ArgumentParser("test")
    parser.add_argument("--out-file")
    with pytest.raises(DuplicateAlias):
        parser.add_argument("--out_file")


def test_positional_and_option_cannot_share_a_key():
    parser = ArgumentParser("test")
    parser.add_argument("target")
    with pytest.raises(DuplicateAlias):
        parser.add_argument("--target")


@pytest.mark.parametrize("aliases", [("-h",), ("--help",), ("help",), ("-x", "--help")])
def test_help_is_reserved(aliases):
    parser = ArgumentParser("test")
    with pytest.raises(DuplicateAlias):
        parser.add_argument(*aliases)


def test_failed_registration_has_no_effect():
    parser = ArgumentParser("test")
    parser.add_argument("--verbose", kind=bool)
    with pytest.raises(DuplicateAlias):
        parser.add_argument("-x", "--verbose", kind=bool)

    result = parser.parse(["test", "-x"])
    assert result.status == ParseStatus.FAILED
    assert result.reason == "unknown_argument"


@pytest.mark.parametrize(
    "aliases",
    [
        (),
        ("",),
        ("--",),
        ("-5",),
        ("--two words",),
        ("name", "--name"),
        ("first", "second"),
        ("--same", "--same"),
    ],
)
def test_invalid_aliases(aliases):
    parser = ArgumentParser("test")
    with pytest.raises(InvalidSpecification):
        parser.add_argument(*aliases)


def test_invalid_kind():
    parser = ArgumentParser("test")
    with pytest.raises(InvalidSpecification):
        parser.add_argument("--value", kind="complex")
    with pytest.raises(InvalidSpecification):
        parser.add_argument("--value", kind=list)


def test_choices_must_match_kind():
    parser = ArgumentParser("test")
    with pytest.raises(InvalidSpecification):
        parser.add_argument("--level", kind=int, choices=["1", "two"])


def test_choices_must_not_be_a_string():
    parser = ArgumentParser("test")
    with pytest.raises(InvalidSpecification):
        parser.add_argument("--mode", choices="fast")


def test_bool_flag_rejects_choices():
    parser = ArgumentParser("test")
    with pytest.raises(InvalidSpecification):
        parser.add_argument("--flag", kind=bool, choices=["true"])


def test_bool_flag_can_be_required():
    parser = ArgumentParser("test")
    argument = parser.add_argument("--force", kind=bool, required=True)
    assert argument.is_flag
    assert argument.required


def test_list_default_requires_list_nargs():
    parser = ArgumentParser("test")
    with pytest.raises(InvalidSpecification):
        parser.add_argument("--name", default=["a", "b"])


def test_unbalanced_list_default():
    parser = ArgumentParser("test")
    with pytest.raises(InvalidSpecification):
        parser.add_argument("--names", nargs="*", default='"unterminated')


def test_register_takes_an_alias_sequence():
    parser = ArgumentParser("test")
    argument = parser.register(
        ["-o", "--output", "--out"],
        "Output file",
        ArgumentKind.STR,
        "out.txt",
        False,
        "FILE",
    )
    assert argument.key == "output"
    assert argument.aliases == ("-o", "--output", "--out")
    assert argument.metavar == "FILE"
    assert argument.help == "Output file"
    assert parser.get_argument("output") is argument


def test_add_argument_accepts_alias_list():
    parser = ArgumentParser("test")
    argument = parser.add_argument(["-c", "--count"], kind=int)
    assert argument.key == "count"
    assert argument.kind == ArgumentKind.INT


def test_positional_detection():
    parser = ArgumentParser("test")
    assert parser.add_argument("input").positional is True
    assert parser.add_argument("-i", "--include").positional is False
    assert [arg.key for arg in parser.positional_arguments] == ["input"]
    assert [arg.key for arg in parser.arguments] == ["input", "include"]


def test_to_definition_list():
    parser = ArgumentParser("test")
    parser.add_argument("--files", nargs="*", default="a.txt b.txt", help="Files")
    parser.add_argument("--level", kind=int, choices=[1, 2, 3], metavar="N")
    assert parser.to_definition_list() == [
        {
            "aliases": ["--files"],
            "key": "files",
            "kind": "str",
            "nargs": "*",
            "default": ["a.txt", "b.txt"],
            "choices": [],
            "required": False,
            "metavar": "",
            "positional": False,
            "help": "Files",
        },
        {
            "aliases": ["--level"],
            "key": "level",
            "kind": "int",
            "nargs": "",
            "default": None,
            "choices": ["1", "2", "3"],
            "required": False,
            "metavar": "N",
            "positional": False,
            "help": "",
        },
    ]

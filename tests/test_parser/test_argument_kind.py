import pytest

from typedargs.parser import ArgumentKind


@pytest.mark.parametrize(
    "value, expected",
    [
        ("bool", ArgumentKind.BOOL),
        ("boolean", ArgumentKind.BOOL),
        ("INT", ArgumentKind.INT),
        ("integer", ArgumentKind.INT),
        (" double ", ArgumentKind.FLOAT),
        ("text", ArgumentKind.STR),
    ],
)
def test_kind_aliases(value, expected):
    assert ArgumentKind(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (bool, ArgumentKind.BOOL),
        (int, ArgumentKind.INT),
        (float, ArgumentKind.FLOAT),
        (str, ArgumentKind.STR),
        ("float", ArgumentKind.FLOAT),
        (ArgumentKind.STR, ArgumentKind.STR),
    ],
)
def test_from_type(value, expected):
    assert ArgumentKind.from_type(value) is expected


@pytest.mark.parametrize("value", ["complex", list, None, 3])
def test_invalid_kind(value):
    with pytest.raises(ValueError):
        ArgumentKind.from_type(value)


def test_kind_properties():
    assert ArgumentKind.INT.is_numeric
    assert ArgumentKind.FLOAT.is_numeric
    assert not ArgumentKind.STR.is_numeric
    assert ArgumentKind.BOOL.python_type is bool
    assert str(ArgumentKind.FLOAT) == "float"
    assert ArgumentKind.choices() == [
        ArgumentKind.BOOL,
        ArgumentKind.INT,
        ArgumentKind.FLOAT,
        ArgumentKind.STR,
    ]

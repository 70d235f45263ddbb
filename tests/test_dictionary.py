import pytest

from pixraster import commands
from pixraster.dictionary import CommandDictionary, default_dictionary

ALL_COMMAND_TYPES = [
    commands.AddVertex,
    commands.BeginDraw,
    commands.EndDraw,
    commands.SetCameraPosition,
    commands.SetCameraDirection,
    commands.SetCameraNear,
    commands.SetCameraFar,
    commands.SetCameraFov,
    commands.DrawPixel,
    commands.PushTranslation,
    commands.PushRotationX,
    commands.PushRotationY,
    commands.PushRotationZ,
    commands.PushScaling,
    commands.PopMatrix,
    commands.SetClipping,
    commands.SetColor,
    commands.SetFillMode,
    commands.SetResolution,
    commands.VarFloat,
]


def test_default_dictionary_holds_every_command():
    dictionary = default_dictionary()
    assert set(dictionary.names()) == {t.name for t in ALL_COMMAND_TYPES}
    assert len(dictionary) == len(ALL_COMMAND_TYPES)


@pytest.mark.parametrize("command_type", ALL_COMMAND_TYPES)
def test_lookup_returns_command_of_right_type(command_type):
    dictionary = default_dictionary()
    assert isinstance(dictionary.lookup(command_type.name), command_type)
    assert command_type.name in dictionary


def test_lookup_unknown_returns_none():
    assert default_dictionary().lookup("NoSuchCommand") is None


def test_lookup_is_case_sensitive():
    dictionary = default_dictionary()
    assert "vertex" not in dictionary
    assert dictionary.lookup("vertex") is None
    assert "Vertex" in dictionary


def test_names_are_sorted():
    names = default_dictionary().names()
    assert names == sorted(names)


def test_register_and_duplicate():
    dictionary = CommandDictionary()
    assert "float" not in dictionary
    dictionary.register(commands.VarFloat())
    assert dictionary.names() == ["float"]
    with pytest.raises(ValueError):
        dictionary.register(commands.VarFloat())
    assert len(dictionary) == 1


def test_iteration_follows_name_order():
    dictionary = default_dictionary()
    assert [c.name for c in dictionary] == dictionary.names()
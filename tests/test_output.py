import json

from braille_map.output import serialize, to_json, to_text, write_output

ROWS = ["⣿⠀", "⠁⢀"]


def test_to_json_keeps_braille_unescaped():
    text = to_json(ROWS, indent=None)
    assert text == '["⣿⠀", "⠁⢀"]'
    assert json.loads(to_json(ROWS)) == ROWS


def test_to_text():
    assert to_text(ROWS) == "⣿⠀\n⠁⢀\n"
    assert to_text([]) == ""


def test_write_output(tmp_path):
    path = write_output(tmp_path / "art.txt", ROWS, "text")
    assert path.read_text(encoding="utf-8") == "⣿⠀\n⠁⢀\n"
    path = write_output(tmp_path / "art.json", ROWS, "json")
    assert json.loads(path.read_text(encoding="utf-8")) == ROWS


def test_unknown_format():
    import pytest

    with pytest.raises(ValueError):
        serialize(ROWS, "html")  # type: ignore[arg-type]

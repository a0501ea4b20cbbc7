import pytest

from pathlib import Path

from recipe_lang.scripts.recp import show, main


def test_show(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    recipe = tmp_path / "stew.recp"
    recipe.write_text(">> name: stew\nCook the {beans}(400 gr) slowly.\n")

    assert show([recipe]) == 0

    out, err = capsys.readouterr()
    assert out.startswith("Stew\n")
    assert "beans" in out
    assert "Cook the beans slowly." in out
    assert err == ""


def test_show_parse_error(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    recipe = tmp_path / "broken.recp"
    recipe.write_text("Cook the {beans slowly.\n")

    assert show([recipe]) == 1

    out, err = capsys.readouterr()
    assert out == ""
    assert "Failed to parse the recipe" in err
    assert "Expected closing '}'" in err


def test_show_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert show([tmp_path / "missing.recp"]) == 1
    _out, err = capsys.readouterr()
    assert "Could not read the file" in err


@pytest.mark.parametrize("command", ["show", "s"])
def test_main(tmp_path: Path, command: str) -> None:
    recipe = tmp_path / "toast.recp"
    recipe.write_text("Toast the {bread}.")

    with pytest.raises(SystemExit) as exc_info:
        main([command, str(recipe)])
    assert exc_info.value.code == 0

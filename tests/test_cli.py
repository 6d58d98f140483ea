import pytest

from solong.board import MapError, Tile
from solong.cli import load_game, main, run

MAP = ["11111", "1PCE1", "11111"]


def _write_map(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(MAP) + "\n", encoding="latin-1")
    return path


def test_load_game_builds_game(tmp_path):
    game = load_game(_write_map(tmp_path))
    assert game.width == len(MAP[0])
    assert game.height == len(MAP)
    assert game.tile_at(*game.player) == Tile.PLAYER


def test_load_game_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_game(tmp_path / "absent.ber")


def test_main_usage_without_arguments(capsys):
    count = main([])
    out = capsys.readouterr().out
    assert out.startswith("Usage: ")
    assert out.endswith(" map.ber\n")
    assert count == len(out)


def test_main_usage_with_too_many_arguments(capsys):
    count = main(["a.ber", "b.ber"])
    out = capsys.readouterr().out
    assert out.startswith("Usage: ")
    assert count == len(out)


def test_main_reports_unreadable_map(tmp_path, capsys):
    status = main([str(tmp_path / "absent.ber")])
    err = capsys.readouterr().err
    assert status == 0
    assert err == "Error\nFailed to read the map!\n"


def test_run_reports_missing_textures(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    path = _write_map(tmp_path)
    monkeypatch.chdir(tmp_path)
    status = run(path)
    err = capsys.readouterr().err
    assert status == 0
    assert err == "Error\nFailed to load textures.\n"
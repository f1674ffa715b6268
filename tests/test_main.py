"""Tests for the command line entry point."""

import io
import sys

import pytest

import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # no stray ttt.toml or TTT_* variables
    monkeypatch.chdir(tmp_path)
    for var in ("TTT_CONFIG_TOML", "TTT_BOARD_SIZE", "TTT_NUM_PLAYERS", "TTT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


def write_moves(tmp_path, moves):
    path = tmp_path / "moves.txt"
    path.write_text("".join(f"{p} {r} {c}\n" for p, r, c in moves), encoding="utf-8")
    return str(path)


class TestMain:
    def test_reference_game(self, tmp_path, reference_moves, reference_board):
        out = io.StringIO()
        path = write_moves(tmp_path, reference_moves)
        rc = main.main([path, "--size", "5", "--players", "3", "--print-board"], out=out)
        assert rc == 0
        assert out.getvalue() == "0\n" * 17 + "3\n" + reference_board + "\n"

    def test_stops_on_win(self, tmp_path):
        out = io.StringIO()
        path = write_moves(tmp_path, [(1, 0, 0), (1, 0, 1), (1, 0, 2), (1, 2, 2)])
        assert main.main([path, "--players", "1"], out=out) == 0
        assert out.getvalue() == "0\n0\n1\n"

    def test_reads_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("2 0 0\n1 0 0\n"))
        out = io.StringIO()
        assert main.main([], out=out) == 0
        assert out.getvalue() == "-2\n-1\n"

    def test_strict_turns(self, tmp_path):
        out = io.StringIO()
        path = write_moves(tmp_path, [(2, 0, 0), (1, 0, 0)])
        assert main.main([path, "--strict-turns"], out=out) == 0
        assert out.getvalue() == "-2\n0\n"

    def test_config_file(self, tmp_path):
        (tmp_path / "ttt.toml").write_text(
            "print_board = true\n[game]\nboard_size = 2\nnum_players = 1\n", encoding="utf-8")
        out = io.StringIO()
        path = write_moves(tmp_path, [(1, 0, 0), (1, 0, 1)])
        assert main.main([path], out=out) == 0
        assert out.getvalue() == "0\n1\n1 1\n0 0\n"

    def test_bad_move_file(self, tmp_path):
        path = tmp_path / "moves.txt"
        path.write_text("1 0\n", encoding="utf-8")
        assert main.main([str(path)], out=io.StringIO()) == 2

    def test_missing_move_file(self, tmp_path):
        assert main.main([str(tmp_path / "nope.txt")], out=io.StringIO()) == 2

    def test_bad_board_size(self, tmp_path):
        path = write_moves(tmp_path, [(1, 0, 0)])
        with pytest.raises(SystemExit) as exc:
            main.main([path, "--size", "0"], out=io.StringIO())
        assert exc.value.code == 2

    def test_bad_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("1 0\n"))
        assert main.main([], out=io.StringIO()) == 2

    def test_malformed_config_file(self, tmp_path):
        (tmp_path / "ttt.toml").write_text("[game\nboard_size = 3\n", encoding="utf-8")
        path = write_moves(tmp_path, [(1, 0, 0)])
        with pytest.raises(SystemExit) as exc:
            main.main([path], out=io.StringIO())
        assert exc.value.code == 2

    def test_config_value_of_wrong_type(self, tmp_path):
        (tmp_path / "ttt.toml").write_text('[game]\nboard_size = "5"\n', encoding="utf-8")
        path = write_moves(tmp_path, [(1, 0, 0)])
        with pytest.raises(SystemExit) as exc:
            main.main([path], out=io.StringIO())
        assert exc.value.code == 2

    def test_env_value_not_an_integer(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TTT_BOARD_SIZE", "five")
        path = write_moves(tmp_path, [(1, 0, 0)])
        with pytest.raises(SystemExit) as exc:
            main.main([path], out=io.StringIO())
        assert exc.value.code == 2

    def test_headless_run_skips_window_module(self, tmp_path, monkeypatch):
        monkeypatch.delitem(sys.modules, "ttt_nxn.ui.main_window", raising=False)
        path = write_moves(tmp_path, [(1, 0, 0)])
        assert main.main([path], out=io.StringIO()) == 0
        assert "ttt_nxn.ui.main_window" not in sys.modules

"""Command-line interface tests."""

import json
import logging

import pytest

from pdaderive.cli import main
from pdaderive.config import PROGRAM_ID_ENV

USER = "BQuvWWJmjhS2X4jc6G9T2meEHdyzY6RsooTHLMABKeah"
ANCHOR_PROGRAM = "8pKd7UzCkLS3og9yk97WSGWehSf4AD7cXLi5Bpj8oJPd"
USER_PDA = "7WN45hbKYtXmm1iLwWdxUnh43tVuhJ26iWPyT85jG5Hm"
PDA = "4NajcZCzkipVs8SrvtCdN5pVM5KLLNd2aRQVb9mrdXHr"


@pytest.fixture(autouse=True)
def _clear_program_id_env(monkeypatch):
    monkeypatch.delenv(PROGRAM_ID_ENV, raising=False)


class TestFind:
    def test_prints_bump_and_address(self, capsys):
        assert main(["find", "solwarrior", f"pubkey:{USER}"]) == 0
        out = capsys.readouterr()
        assert out.out == f"255, {PDA}\n"
        assert out.err == ""

    def test_json(self, capsys):
        assert main(["find", "--json", "solwarrior", f"pubkey:{USER}"]) == 0
        assert json.loads(capsys.readouterr().out) == {"address": PDA, "bump": 255}

    def test_program_id_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv(PROGRAM_ID_ENV, ANCHOR_PROGRAM)
        assert main(["find", "solwarrior", f"pubkey:{USER}"]) == 0
        assert capsys.readouterr().out == f"250, {USER_PDA}\n"

    def test_seed_too_long(self, capsys):
        assert main(["find", "x" * 33]) == 1
        out = capsys.readouterr()
        assert out.out == ""
        assert out.err.startswith("error: ")

    def test_bad_program_id(self, capsys):
        assert main(["find", "--program-id", "abc", "solwarrior"]) == 1
        assert "program id" in capsys.readouterr().err

    def test_bad_seed_spec(self, capsys):
        assert main(["find", "hex:zz"]) == 1
        assert "hex" in capsys.readouterr().err

    def test_verbose_keeps_stdout_clean(self, capsys, caplog):
        caplog.set_level(logging.DEBUG, logger="pdaderive")
        argv = ["--verbose", "find", "--program-id", ANCHOR_PROGRAM, "solwarrior", f"pubkey:{USER}"]
        assert main(argv) == 0
        assert capsys.readouterr().out == f"250, {USER_PDA}\n"
        assert "bump 255 is on curve" in caplog.text
        assert "with bump 250" in caplog.text


class TestVerify:
    def test_valid_bump(self, capsys):
        assert main(["verify", "--bump", "255", "solwarrior", f"pubkey:{USER}"]) == 0
        assert capsys.readouterr().out == f"{PDA}\n"

    def test_on_curve_bump(self, capsys):
        assert main(["verify", "--bump", "254", "solwarrior", f"pubkey:{USER}"]) == 1
        out = capsys.readouterr()
        assert out.out == ""
        assert "bump 254" in out.err

    def test_missing_bump_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["verify", "solwarrior"])
        assert exc.value.code == 2


class TestUser:
    def test_default_program(self, capsys):
        assert main(["user", "--json", USER]) == 0
        assert json.loads(capsys.readouterr().out) == {
            "address": USER_PDA,
            "bump": 250,
        }


class TestWithSeed:
    def test_prints_address(self, capsys):
        argv = ["with-seed", "--base", USER, "--owner", "11111111111111111111111111111111", "solwarrior"]
        assert main(argv) == 0
        assert capsys.readouterr().out == "JDbFRY9yNGwrmgghNyBPhwKFgf3JKkiVt9rxtXzCkpd1\n"

    def test_seed_too_long(self, capsys):
        argv = ["with-seed", "--base", USER, "--owner", "11111111111111111111111111111111", "y" * 33]
        assert main(argv) == 1
        assert "seed" in capsys.readouterr().err

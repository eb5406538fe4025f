"""Tests for the command-line interface.

WHY: The CLI is the main way a word becomes a file. It must write exactly
the merged bytes, never overwrite earlier output, and never leave a file
behind when a letter is missing.

HOW: main() is called with an explicit argv against a tmp_path letter
library. Exit codes are checked via SystemExit; status text via capsys.
"""

from __future__ import annotations

import pytest

from conftest import COLOR_CHANGE, END, filtered, make_header

from dst_merger.cli import build_parser, main


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args(["hello"])
        assert args.word == "hello"
        assert args.letters_dir is None
        assert args.base_url is None
        assert args.output_dir is None
        assert args.stdout is False

    def test_requires_word(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:

    def test_saves_merged_design(self, letter_library, tmp_path, capsys):
        out_dir = tmp_path / "out"
        out_dir.mkdir()

        main(["ab", "--letters-dir", str(letter_library), "--output-dir", str(out_dir)])

        saved = out_dir / "AB.dst"
        assert saved.read_bytes() == (
            make_header("A") + COLOR_CHANGE + filtered("A") + filtered("B") + END
        )
        err = capsys.readouterr().err
        assert "Done! Saved" in err
        assert "4 stitches" in err

    def test_conflict_gets_numeric_suffix(self, letter_library, tmp_path):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        argv = ["ab", "--letters-dir", str(letter_library), "--output-dir", str(out_dir)]

        main(argv)
        main(argv)
        main(argv)

        assert (out_dir / "AB.dst").is_file()
        assert (out_dir / "AB-2.dst").is_file()
        assert (out_dir / "AB-3.dst").is_file()
        assert (out_dir / "AB.dst").read_bytes() == (out_dir / "AB-3.dst").read_bytes()

    def test_stdout_output(self, letter_library, capsysbinary):
        main(["c", "--letters-dir", str(letter_library), "--stdout"])
        out = capsysbinary.readouterr().out
        assert out == make_header("C") + COLOR_CHANGE + filtered("C") + END

    def test_missing_letter_exits_1_without_file(self, letter_library, tmp_path, capsys):
        out_dir = tmp_path / "out"
        out_dir.mkdir()

        with pytest.raises(SystemExit) as exc_info:
            main(["aq", "--letters-dir", str(letter_library), "--output-dir", str(out_dir)])

        assert exc_info.value.code == 1
        assert list(out_dir.iterdir()) == []
        assert "Error: Letter 'Q'" in capsys.readouterr().err

    def test_invalid_word_exits_1(self, letter_library, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["123", "--letters-dir", str(letter_library)])
        assert exc_info.value.code == 1
        assert "at least one valid letter" in capsys.readouterr().err

    def test_missing_output_dir_exits_1(self, letter_library, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["a", "--letters-dir", str(letter_library),
                  "--output-dir", str(tmp_path / "nope")])
        assert exc_info.value.code == 1
        assert "Output directory does not exist" in capsys.readouterr().err

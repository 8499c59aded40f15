"""Tests for the separate-image command line."""

import sys
import os
import argparse

import cv2
import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from separate_image import build_parser, main, str_to_bool


def write_test_image(path, height=4, width=6):
    img = np.arange(height * width * 3, dtype=np.uint8).reshape(height, width, 3)
    assert cv2.imwrite(str(path), img)
    return img


def test_defaults():
    args = build_parser().parse_args(["a.png"])
    assert args.column == 1
    assert args.row == 1
    assert args.reverse_col is False
    assert args.input_paths == ["a.png"]


def test_short_and_long_flags():
    args = build_parser().parse_args(["-c", "3", "--row", "2", "--reverse-col", "true",
                                      "a.png", "b.jpg"])
    assert (args.column, args.row, args.reverse_col) == (3, 2, True)
    assert args.input_paths == ["a.png", "b.jpg"]


@pytest.mark.parametrize("text, expected", [
    ("true", True), ("True", True), ("yes", True), ("1", True), ("on", True),
    ("false", False), ("FALSE", False), ("no", False), ("0", False), ("off", False),
])
def test_str_to_bool(text, expected):
    assert str_to_bool(text) is expected


def test_str_to_bool_rejects_garbage():
    with pytest.raises(argparse.ArgumentTypeError):
        str_to_bool("maybe")


def test_requires_input_path():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


@pytest.mark.parametrize("argv", [["-c", "0", "a.png"], ["-r", "-1", "a.png"]])
def test_invalid_grid_exits_before_processing(argv, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert "must be >= 1" in capsys.readouterr().err


def test_success(tmp_path):
    src = tmp_path / "photo.png"
    write_test_image(src)

    assert main(["-q", "-c", "2", str(src)]) == 0
    assert (tmp_path / "photo-0-0.png").exists()
    assert (tmp_path / "photo-0-1.png").exists()


def test_reverse_col_flag(tmp_path):
    src = tmp_path / "photo.png"
    img = write_test_image(src)

    assert main(["-q", "-c", "2", "--reverse-col", "yes", str(src)]) == 0
    left = cv2.imread(str(tmp_path / "photo-0-1.png"), cv2.IMREAD_UNCHANGED)
    np.testing.assert_array_equal(left, img[:, 0:3])


def test_missing_file_exits_nonzero(tmp_path, capsys):
    assert main(["-q", str(tmp_path / "missing.png")]) == 1
    assert "missing.png" in capsys.readouterr().err


def test_degenerate_grid_exits_nonzero(tmp_path, capsys):
    src = tmp_path / "small.png"
    write_test_image(src, height=2, width=3)

    assert main(["-q", "-c", "5", str(src)]) == 1
    assert "columns" in capsys.readouterr().err


def test_one_failure_still_processes_other_files(tmp_path, capsys):
    good = tmp_path / "good.png"
    write_test_image(good)

    assert main(["-c", "2", str(tmp_path / "missing.png"), str(good)]) == 1
    assert (tmp_path / "good-0-1.png").exists()
    assert "1 of 2 file(s) failed" in capsys.readouterr().out

import pytest

from bmpfilter import bmp, filters
from bmpfilter.bmp import Bitmap, BitmapFileHeader, BitmapInfoHeader, Pixel
from bmpfilter.cli import Arguments, UsageError, main, parse_args, run
from bmpfilter.filters import FilterKind


def _image():
    return [
        [Pixel(10, 20, 30), Pixel(200, 100, 50), Pixel(0, 0, 255)],
        [Pixel(5, 5, 5), Pixel(255, 255, 255), Pixel(1, 2, 3)],
        [Pixel(90, 80, 70), Pixel(0, 128, 0), Pixel(33, 66, 99)],
    ]


def _write_sample(path):
    pixels = _image()
    bitmap = Bitmap(
        BitmapFileHeader(),
        BitmapInfoHeader(width=len(pixels[0]), height=len(pixels)),
        pixels,
    )
    bmp.save(bitmap, path)
    return bitmap


def test_parse_args_with_flag():
    assert parse_args(["-g", "in.bmp", "out.bmp"]) == Arguments(
        FilterKind.GRAYSCALE, "in.bmp", "out.bmp"
    )


def test_parse_args_flag_after_operands():
    assert parse_args(["in.bmp", "out.bmp", "-b"]).kind is FilterKind.BLUR


def test_parse_args_without_flag():
    assert parse_args(["in.bmp", "out.bmp"]) == Arguments(None, "in.bmp", "out.bmp")


def test_parse_args_double_dash_ends_options():
    assert parse_args(["-e", "--", "-in.bmp", "out.bmp"]) == Arguments(
        FilterKind.EDGES, "-in.bmp", "out.bmp"
    )


@pytest.mark.parametrize(
    "argv, code",
    [
        (["-x", "in.bmp", "out.bmp"], 1),
        (["-g", "-r", "in.bmp", "out.bmp"], 2),
        (["-gr", "in.bmp", "out.bmp"], 2),
        (["-g", "in.bmp"], 3),
        (["-g", "a", "b", "c"], 3),
        ([], 3),
    ],
)
def test_parse_args_errors(argv, code):
    with pytest.raises(UsageError) as info:
        parse_args(argv)
    assert info.value.exit_code == code


def test_run_grayscale_matches_filter(tmp_path):
    source = tmp_path / "in.bmp"
    target = tmp_path / "out.bmp"
    original = _write_sample(source)
    elapsed = run(FilterKind.GRAYSCALE, source, target, 2)
    assert elapsed >= 0
    result = bmp.load(target)
    assert result.pixels == filters.grayscale(original.pixels)
    assert result.info_header == original.info_header
    assert result.file_header == original.file_header


@pytest.mark.parametrize("flag", ["b", "e", "r", "a"])
def test_run_matches_serial_filters(tmp_path, flag):
    source = tmp_path / "in.bmp"
    target = tmp_path / "out.bmp"
    original = _write_sample(source)
    run(flag, source, target, 3)
    assert bmp.load(target).pixels == filters.apply_filter(flag, original.pixels)


def test_run_without_filter_copies_bytes(tmp_path):
    source = tmp_path / "in.bmp"
    target = tmp_path / "out.bmp"
    _write_sample(source)
    run(None, source, target)
    assert target.read_bytes() == source.read_bytes()


def test_run_missing_input(tmp_path):
    with pytest.raises(OSError):
        run("g", tmp_path / "missing.bmp", tmp_path / "out.bmp")
    assert not (tmp_path / "out.bmp").exists()


def test_main_success(tmp_path, capsys):
    source = tmp_path / "in.bmp"
    target = tmp_path / "out.bmp"
    original = _write_sample(source)
    assert main(["-r", str(source), str(target)]) == 0
    assert "seconds to execute" in capsys.readouterr().out
    assert bmp.load(target).pixels == filters.reflect(original.pixels)


def test_main_invalid_filter_message(capsys):
    assert main(["-z", "a", "b"]) == 1
    assert "Invalid filter." in capsys.readouterr().err


def test_main_usage_message(capsys):
    assert main(["-g"]) == 3
    assert "Usage: filter [flag] infile outfile" in capsys.readouterr().err


def test_main_cannot_open_input(tmp_path, capsys):
    missing = tmp_path / "missing.bmp"
    assert main(["-g", str(missing), str(tmp_path / "out.bmp")]) == 4
    assert f"Could not open {missing}." in capsys.readouterr().err


def test_main_cannot_create_output(tmp_path, capsys):
    source = tmp_path / "in.bmp"
    _write_sample(source)
    target = tmp_path / "no_such_dir" / "out.bmp"
    assert main(["-g", str(source), str(target)]) == 5
    assert f"Could not create {target}." in capsys.readouterr().err


def test_main_truncated_input(tmp_path):
    source = tmp_path / "in.bmp"
    source.write_bytes(b"BM\x00")
    assert main(["-g", str(source), str(tmp_path / "out.bmp")]) == 6
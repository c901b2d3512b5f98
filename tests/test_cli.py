import json

import pytest
from PIL import Image

from brickart.cli import main


def test_writes_png_next_to_input(tmp_path, capsys):
    src = tmp_path / "photo.png"
    Image.new("RGB", (40, 30), (0, 85, 191)).save(src)
    main([str(src), "-s", "16", "-c", "4"])

    out = tmp_path / "photo_bricks.png"
    assert out.exists()
    with Image.open(out) as img:
        assert img.size == (64, 64)
        # Corner pixel is the darkened border over Bright Blue
        assert img.getpixel((0, 0))[2] < 191
    assert "16x16 bricks, 100% filled" in capsys.readouterr().out


def test_output_and_palette_options(tmp_path):
    src = tmp_path / "in.png"
    Image.new("RGB", (10, 10), (200, 200, 200)).save(src)
    palette = tmp_path / "palette.json"
    palette.write_text(json.dumps([{"name": "Black", "hex": "#000000"}, {"name": "White", "hex": "#FFFFFF"}]))
    out = tmp_path / "art.png"
    main([str(src), "-o", str(out), "-p", str(palette), "-s", "48", "-c", "10"])

    with Image.open(out) as img:
        assert img.size == (480, 480)
        # One pixel in from the corner is flat fill: the sampled gray maps to white
        assert img.getpixel((1, 1)) == (255, 255, 255)


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.png")])
    assert exc.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_bad_palette_file(tmp_path, capsys):
    src = tmp_path / "in.png"
    Image.new("RGB", (10, 10)).save(src)
    palette = tmp_path / "palette.json"
    palette.write_text("{}")
    with pytest.raises(SystemExit) as exc:
        main([str(src), "-p", str(palette)])
    assert exc.value.code == 1
    assert "must contain a list" in capsys.readouterr().err


def test_unsupported_size_rejected_by_parser(tmp_path):
    src = tmp_path / "in.png"
    Image.new("RGB", (10, 10)).save(src)
    with pytest.raises(SystemExit) as exc:
        main([str(src), "-s", "20"])
    assert exc.value.code == 2


@pytest.mark.parametrize("cell", ["0", "-3", "ten"])
def test_invalid_cell_size_rejected_by_parser(tmp_path, capsys, cell):
    src = tmp_path / "in.png"
    Image.new("RGB", (10, 10)).save(src)
    with pytest.raises(SystemExit) as exc:
        main([str(src), "-c", cell])
    assert exc.value.code == 2
    assert "--cell" in capsys.readouterr().err
    assert not (tmp_path / "in_bricks.png").exists()


def test_missing_output_directory(tmp_path, capsys):
    src = tmp_path / "in.png"
    Image.new("RGB", (10, 10)).save(src)
    with pytest.raises(SystemExit) as exc:
        main([str(src), "-o", str(tmp_path / "missing" / "out.png"), "-s", "16", "-c", "2"])
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_unknown_output_extension(tmp_path, capsys):
    src = tmp_path / "in.png"
    Image.new("RGB", (10, 10)).save(src)
    with pytest.raises(SystemExit) as exc:
        main([str(src), "-o", str(tmp_path / "out.notanimage"), "-s", "16", "-c", "2"])
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error: ")

import pytest
from PIL import Image

from conftest import frame_color, make_sheet
from framerev import RepackSettings, repack, repack_file
from framerev.errors import ConfigError, FatalInputError, OutputError
from framerev.imaging import CanvasRaster, SourceRaster
from framerev.repack_job import RepackJobBuilder

BACKGROUND = (0, 0, 0, 0)


def block(img, x, y, width, height):
    return img.crop((x, y, x + width, y + height)).tobytes()


def colors(img):
    return {color for _, color in img.getcolors(img.width * img.height)}


def test_square_sheet_frames_move_by_column_order():
    source = make_sheet(64, 64, 32, 32)
    out = repack(source, 32, 32)
    assert out.size == (64, 64)
    assert out.mode == "RGBA"
    # source cell -> destination pixel offset
    placement = {(0, 0): (0, 0), (0, 1): (32, 0), (1, 0): (0, 32), (1, 1): (32, 32)}
    for (x, y), (dx, dy) in placement.items():
        assert block(out, dx, dy, 32, 32) == block(source, x * 32, y * 32, 32, 32)
        assert out.getpixel((dx + 5, dy + 5)) == frame_color(x, y)


def test_single_row_strip_is_unchanged():
    source = make_sheet(96, 32, 32, 32)
    out = repack(source, 32, 32)
    assert out.size == (96, 32)
    assert out.tobytes() == source.tobytes()


def test_frames_per_row_leaves_trailing_cell_empty():
    source = make_sheet(96, 32, 32, 32)
    out = repack(source, 32, 32, frames_per_row=2)
    assert out.size == (64, 64)
    assert block(out, 0, 0, 32, 32) == block(source, 0, 0, 32, 32)
    assert block(out, 32, 0, 32, 32) == block(source, 32, 0, 32, 32)
    assert block(out, 0, 32, 32, 32) == block(source, 64, 0, 32, 32)
    assert block(out, 32, 32, 32, 32) == bytes(BACKGROUND) * 32 * 32


def test_partial_frames_are_not_copied():
    fill = (255, 0, 255, 255)
    source = make_sheet(100, 50, 32, 32, fill=fill)
    out = repack(source, 32, 32)
    assert out.size == (96, 32)
    assert fill not in colors(out)


def test_single_column_to_rows():
    source = make_sheet(16, 64, 16, 16)
    out = repack(source, 16, 16, frames_per_row=2)
    assert out.size == (32, 32)
    for y in range(4):
        dx, dy = (y % 2) * 16, (y // 2) * 16
        assert block(out, dx, dy, 16, 16) == block(source, 0, y * 16, 16, 16)


def test_every_frame_copied_exactly():
    source = make_sheet(60, 45, 20, 15)
    out = repack(source, 20, 15, frames_per_row=4)
    assert out.size == (80, 45)
    index = 0
    for x in range(3):
        for y in range(3):
            dx, dy = (index % 4) * 20, (index // 4) * 15
            assert block(out, dx, dy, 20, 15) == block(source, x * 20, y * 15, 20, 15)
            index += 1
    assert block(out, 20, 30, 60, 15) == bytes(BACKGROUND) * 60 * 15


def test_non_rgba_source_is_normalized():
    source = Image.new("RGB", (8, 4), (10, 20, 30))
    out = repack(source, 4, 4, frames_per_row=1)
    assert out.mode == "RGBA"
    assert out.size == (4, 8)
    assert colors(out) == {(10, 20, 30, 255)}


def test_custom_background():
    source = SourceRaster(make_sheet(96, 32, 32, 32))
    settings = RepackSettings(32, 32, frames_per_row=2, background=(1, 2, 3, 255))
    job = RepackJobBuilder(settings).build(source)
    assert job.image.getpixel((40, 40)) == (1, 2, 3, 255)
    assert job.geometry.unused_cells == 1


def test_oversized_frame_fails_before_allocation(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("canvas allocated")

    monkeypatch.setattr(CanvasRaster, "new", fail)
    source = SourceRaster(make_sheet(32, 32, 16, 16))
    with pytest.raises(FatalInputError):
        RepackJobBuilder(RepackSettings(64, 16)).build(source)


def test_zero_frame_width_is_rejected():
    with pytest.raises(ConfigError):
        repack(make_sheet(32, 32, 16, 16), 0, 16)


def test_repack_file_round_trip(tmp_path):
    src = tmp_path / "sheet.png"
    dst = tmp_path / "packed.png"
    source = make_sheet(96, 32, 32, 32)
    source.save(src)
    job = repack_file(str(src), str(dst), RepackSettings(32, 32, frames_per_row=1))
    assert job.geometry.canvas_size == (32, 96)
    with Image.open(dst) as written:
        assert written.size == (32, 96)
        assert block(written.convert("RGBA"), 0, 64, 32, 32) == block(source, 64, 0, 32, 32)


def test_repack_file_writes_nothing_on_bad_frame(tmp_path):
    src = tmp_path / "sheet.png"
    dst = tmp_path / "packed.png"
    make_sheet(32, 32, 16, 16).save(src)
    with pytest.raises(FatalInputError):
        repack_file(str(src), str(dst), RepackSettings(33, 16))
    assert not dst.exists()


def test_repack_file_missing_input(tmp_path):
    with pytest.raises(FatalInputError, match="missing.png"):
        repack_file(str(tmp_path / "missing.png"), str(tmp_path / "out.png"), RepackSettings(8, 8))


def test_repack_file_unwritable_output(tmp_path):
    src = tmp_path / "sheet.png"
    make_sheet(32, 32, 16, 16).save(src)
    dst = tmp_path / "no-such-dir" / "out.png"
    with pytest.raises(OutputError, match="out.png"):
        repack_file(str(src), str(dst), RepackSettings(16, 16))


def test_geometry_and_moves_are_logged(caplog):
    caplog.set_level("DEBUG", logger="framerev")
    repack(make_sheet(100, 32, 32, 32), 32, 32, frames_per_row=2)
    messages = [record.getMessage() for record in caplog.records]
    assert "Source grid 3x1, destination grid 2x2, canvas 64x64" in messages
    assert "Ignoring 4 pixel column(s) and 0 pixel row(s) outside the frame grid" in messages
    assert "Frame 2: source cell (2, 0) at (64, 0) -> (0, 32)" in messages

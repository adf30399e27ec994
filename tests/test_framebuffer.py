from __future__ import annotations

import pytest

from bingo_board.buffer import BACKGROUND, BLACK, FrameBuffer, WHITE


def test_new_buffer_is_filled_with_background() -> None:
    fb = FrameBuffer(4, 3)

    assert fb.size == (4, 3)
    assert fb.stride == 12
    assert len(fb.buffer) == 4 * 3 * 3
    assert all(fb.get_pixel(x, y) == BACKGROUND for x in range(4) for y in range(3))


def test_rejects_empty_dimensions() -> None:
    with pytest.raises(ValueError):
        FrameBuffer(0, 10)


def test_get_pixel_is_bounds_checked() -> None:
    fb = FrameBuffer(3, 3, WHITE)

    for x, y in [(3, 0), (-1, 0), (0, 3), (0, -1)]:
        with pytest.raises(IndexError):
            fb.get_pixel(x, y)


def test_pixel_offsets_are_row_major() -> None:
    fb = FrameBuffer(5, 2, WHITE)
    fb.hline(2, 1, 1, (1, 2, 3))

    idx = (1 * 5 + 2) * 3
    assert bytes(fb.buffer[idx:idx + 3]) == bytes((1, 2, 3))


def test_invalid_color_raises() -> None:
    fb = FrameBuffer(2, 2)
    with pytest.raises(ValueError):
        fb.hline(0, 0, 1, (0, 0))
    with pytest.raises(ValueError):
        fb.clear((0, 0, 256))


def test_hline_is_clipped_to_buffer() -> None:
    fb = FrameBuffer(6, 2, WHITE)

    fb.hline(-3, 0, 5, BLACK)
    fb.hline(4, 1, 10, BLACK)
    fb.hline(0, 5, 6, BLACK)

    assert [fb.get_pixel(x, 0) == BLACK for x in range(6)] == [True, True, False, False, False, False]
    assert [fb.get_pixel(x, 1) == BLACK for x in range(6)] == [False, False, False, False, True, True]


def test_vline_is_clipped_to_buffer() -> None:
    fb = FrameBuffer(2, 5, WHITE)

    fb.vline(1, -2, 4, BLACK)
    fb.vline(2, 0, 5, BLACK)

    assert [fb.get_pixel(1, y) == BLACK for y in range(5)] == [True, True, False, False, False]
    assert all(fb.get_pixel(0, y) == WHITE for y in range(5))


def test_clear_resets_every_pixel() -> None:
    fb = FrameBuffer(3, 3, WHITE)
    fb.hline(0, 1, 3, BLACK)

    fb.clear((10, 20, 30))

    assert all(fb.get_pixel(x, y) == (10, 20, 30) for x in range(3) for y in range(3))


def test_to_image_matches_buffer() -> None:
    fb = FrameBuffer(7, 4, WHITE)
    fb.hline(6, 3, 1, (9, 8, 7))

    image = fb.to_image()

    assert image.mode == "RGB"
    assert image.size == (7, 4)
    assert image.getpixel((6, 3)) == (9, 8, 7)
    assert image.getpixel((0, 0)) == WHITE

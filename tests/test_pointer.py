import pytest

from rmdesk.pointer import MAX_SIZE, make_dummy_pointer

BLACK = 0x000000
WHITE = 0xFFFFFF


def _pixel(pointer, row, col):
    start = (row * pointer.size + col) * 4
    return pointer.data[start:start + 4]


def test_data_length():
    pointer = make_dummy_pointer(BLACK, WHITE, 1)
    assert pointer.size == MAX_SIZE
    assert len(pointer.data) == MAX_SIZE * MAX_SIZE * 4


def test_black_cursor_has_white_outline():
    pointer = make_dummy_pointer(BLACK, WHITE, 1)
    assert _pixel(pointer, 0, 0) == b"\xff\xff\xff\xff"


def test_npxl_value():
    assert make_dummy_pointer(BLACK, WHITE, 1).npxl == 155


def test_transparent_corner_uses_npxl():
    pointer = make_dummy_pointer(BLACK, WHITE, 1)
    assert _pixel(pointer, MAX_SIZE - 1, MAX_SIZE - 1) == bytes([pointer.npxl] * 4)
    assert _pixel(pointer, 0, MAX_SIZE - 1) == bytes([pointer.npxl] * 4)


def test_outline_and_body_differ():
    pointer = make_dummy_pointer(BLACK, WHITE, 1)
    assert _pixel(pointer, 0, 0) != _pixel(pointer, 1, 1)


def test_colour_swaps_outline_and_body():
    black = make_dummy_pointer(BLACK, WHITE, 1)
    white = make_dummy_pointer(BLACK, WHITE, 0)
    assert _pixel(black, 0, 0) == _pixel(white, 1, 1)
    assert _pixel(black, 1, 1) == _pixel(white, 0, 0)


def test_transparent_cells_same_for_both_colours():
    black = make_dummy_pointer(BLACK, WHITE, 1)
    white = make_dummy_pointer(BLACK, WHITE, 0)
    clear = bytes([black.npxl] * 4)
    for row in range(MAX_SIZE):
        for col in range(MAX_SIZE):
            assert (_pixel(black, row, col) == clear) == (_pixel(white, row, col) == clear)


@pytest.mark.parametrize(
    "black_pixel, white_pixel",
    [(BLACK, WHITE), (0x01000000, BLACK), (WHITE, BLACK)],
)
def test_npxl_distinct_from_drawn_alpha(black_pixel, white_pixel):
    pointer = make_dummy_pointer(black_pixel, white_pixel, 1)
    outline = _pixel(pointer, 0, 0)
    body = _pixel(pointer, 1, 1)
    assert pointer.npxl not in (outline[3], body[3])


def test_smaller_size_is_top_left_crop():
    full = make_dummy_pointer(BLACK, WHITE, 1)
    small = make_dummy_pointer(BLACK, WHITE, 1, size=8)
    assert len(small.data) == 8 * 8 * 4
    for row in range(8):
        for col in range(8):
            assert _pixel(small, row, col) == _pixel(full, row, col)


@pytest.mark.parametrize("size", [0, -1, MAX_SIZE + 1])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        make_dummy_pointer(BLACK, WHITE, 1, size=size)
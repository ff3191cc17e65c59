"""A drawn arrow cursor for use when the real cursor cannot be captured."""

from __future__ import annotations

from dataclasses import dataclass

# Byte positions of each channel within a 32-bit little-endian ARGB pixel.
BLUE, GREEN, RED, ALPHA = 0, 1, 2, 3

# "W" marks the outline, "B" the body and "." the see-through cells.
_ARROW = (
    "WW..............",
    "WBW.............",
    "WBBW............",
    "WBBBW...........",
    "WBBBBW..........",
    "WBBBBBW.........",
    "WBBBBBBW........",
    "WBBBBBBBW.......",
    "WBBBBBBBBW......",
    "WBBBBBWWWW......",
    "WBBBBBW.........",
    "WBBWWBBW........",
    "WBW.WBBW........",
    "WW...WBBW.......",
    ".....WBBW.......",
    "......WW........",
)

MAX_SIZE = len(_ARROW)


@dataclass(frozen=True)
class DummyPointer:
    """Square cursor image, four bytes per pixel in row-major order.

    Pixels whose every byte equals ``npxl`` are not to be drawn.
    """

    size: int
    npxl: int
    data: bytes


def _inverted_bytes(pixel: int) -> tuple[int, int, int, int]:
    """Alpha, red, green and blue bytes of ``pixel`` with each byte inverted."""
    return (
        ((pixel ^ 0xFF000000) >> 24) & 0xFF,
        ((pixel ^ 0x00FF0000) >> 16) & 0xFF,
        ((pixel ^ 0x0000FF00) >> 8) & 0xFF,
        (pixel ^ 0x000000FF) & 0xFF,
    )


def make_dummy_pointer(
    black_pixel: int, white_pixel: int, color: int = 1, size: int = MAX_SIZE
) -> DummyPointer:
    """Build the arrow cursor; ``color`` 0 gives a white one, 1 a black one."""
    if not 1 <= size <= MAX_SIZE:
        raise ValueError(f"pointer size must be between 1 and {MAX_SIZE}, not {size}")

    wp = _inverted_bytes(white_pixel)
    bp = _inverted_bytes(black_pixel)
    npxl = (wp[0] - 100 if wp[0] - 1 != bp[0] else wp[0] - 102) & 0xFF
    clear = (npxl,) * 4

    outline, body = (bp, wp) if color else (wp, bp)
    cells = {"W": outline, "B": body, ".": clear}

    data = bytearray()
    for row in _ARROW[:size]:
        for cell in row[:size]:
            alpha, red, green, blue = cells[cell]
            pixel = [0, 0, 0, 0]
            pixel[ALPHA] = alpha
            pixel[RED] = red
            pixel[GREEN] = green
            pixel[BLUE] = blue
            data.extend(pixel)
    return DummyPointer(size=size, npxl=npxl, data=bytes(data))
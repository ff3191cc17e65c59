"""Bookkeeping of damaged screen areas as a list of rectangles.

New areas are merged into the list so that, as far as possible, no pixel
is covered twice. Areas that share an edge are joined, covered areas are
dropped and partly overlapping ones are cut into pieces.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        """True when the rectangle has no area."""
        return self.width <= 0 or self.height <= 0


class Collision(IntEnum):
    """Outcome of colliding a resident rectangle with a new one."""

    NONE = 0
    RESIDENT_COVERED = 1
    NEW_COVERED = 2
    RESIDENT_BROKEN = -1
    NEW_BROKEN = -2
    GROUPED = -10


def _inside(px: int, py: int, xs: tuple[int, int], ys: tuple[int, int]) -> bool:
    return xs[0] <= px <= xs[1] and ys[0] <= py <= ys[1]


def _corners_in(
    xa: tuple[int, int], ya: tuple[int, int], xb: tuple[int, int], yb: tuple[int, int]
) -> tuple[bool, bool, bool, bool]:
    """Which corners of rectangle a (tl, tr, bl, br) lie within rectangle b."""
    return (
        _inside(xa[0], ya[0], xb, yb),
        _inside(xa[1], ya[0], xb, yb),
        _inside(xa[0], ya[1], xb, yb),
        _inside(xa[1], ya[1], xb, yb),
    )


def collide_rects(resident: Rect, new: Rect) -> tuple[Collision, tuple[Rect, ...]]:
    """Collide two rectangles and decide how the new one should be inserted.

    Returns the kind of collision and the rectangles that result from it:
    nothing for NONE and the covered cases, the joined rectangle for GROUPED,
    the remaining part of the resident rectangle for RESIDENT_BROKEN and the
    one or two parts of the new rectangle for NEW_BROKEN.
    """
    r1, r2 = resident, new
    if r1.x >= r2.x and r1.right <= r2.right and r1.y >= r2.y and r1.bottom <= r2.bottom:
        return Collision.RESIDENT_COVERED, ()
    if r2.x >= r1.x and r2.right <= r1.right and r2.y >= r1.y and r2.bottom <= r1.bottom:
        return Collision.NEW_COVERED, ()
    if r1.right < r2.x or r2.right < r1.x or r1.bottom < r2.y or r2.bottom < r1.y:
        return Collision.NONE, ()

    # Touching edges count as overlap: damage events often repeat regions.
    x1 = (r1.x, r1.right)
    y1 = (r1.y, r1.bottom)
    x2 = (r2.x, r2.right)
    y2 = (r2.y, r2.bottom)
    enc1 = _corners_in(x1, y1, x2, y2)
    enc2 = _corners_in(x2, y2, x1, y1)
    tot1 = sum(enc1)
    tot2 = sum(enc2)

    if tot1 == 2 and tot2 == 2:
        if enc2[0] and enc2[1] and r1.width == r2.width:
            return Collision.GROUPED, (Rect(r1.x, r1.y, r1.width, r2.height + r2.y - r1.y),)
        if enc2[0] and enc2[2] and r1.height == r2.height:
            return Collision.GROUPED, (Rect(r1.x, r1.y, r2.width + r2.x - r1.x, r1.height),)
        if enc2[3] and enc2[1] and r1.height == r2.height:
            return Collision.GROUPED, (Rect(r2.x, r2.y, r1.width + r1.x - r2.x, r2.height),)
        if enc2[3] and enc2[2] and r1.width == r2.width:
            return Collision.GROUPED, (Rect(r2.x, r2.y, r2.width, r1.height + r1.y - r2.y),)

    if tot2 == 2:
        x, y, w, h = r2.x, r2.y, r2.width, r2.height
        if enc2[0] and enc2[1]:
            y = y1[1]
            h -= y1[1] - y2[0]
        elif enc2[0] and enc2[2]:
            x = x1[1]
            w -= x1[1] - x2[0]
        elif enc2[3] and enc2[1]:
            w -= x2[1] - x1[0]
        elif enc2[3] and enc2[2]:
            h -= y2[1] - y1[0]
        return Collision.NEW_BROKEN, (Rect(x, y, w, h),)

    if tot1 == 2:
        x, y, w, h = r1.x, r1.y, r1.width, r1.height
        if enc1[0] and enc1[1]:
            y = y2[1]
            h -= y2[1] - y1[0]
        elif enc1[0] and enc1[2]:
            x = x2[1]
            w -= x2[1] - x1[0]
        elif enc1[3] and enc1[1]:
            w -= x1[1] - x2[0]
        elif enc1[3] and enc1[2]:
            h -= y1[1] - y2[0]
        return Collision.RESIDENT_BROKEN, (Rect(x, y, w, h),)

    if tot2 == 1:
        if enc2[0]:
            pieces = (
                Rect(x1[1], y2[0], r2.width - x1[1] + x2[0], r2.height),
                Rect(x2[0], y1[1], x1[1] - x2[0], r2.height - y1[1] + y2[0]),
            )
        elif enc2[1]:
            pieces = (
                Rect(x2[0], y2[0], r2.width - x2[1] + x1[0], r2.height),
                Rect(x1[0], y1[1], x2[1] - x1[0], r2.height - y1[1] + y2[0]),
            )
        elif enc2[2]:
            pieces = (
                Rect(x1[1], y2[0], r2.width - x1[1] + x2[0], r2.height),
                Rect(x2[0], y2[0], x1[1] - x2[0], r2.height - y2[1] + y1[0]),
            )
        else:
            pieces = (
                Rect(x2[0], y2[0], r2.width - x2[1] + x1[0], r2.height),
                Rect(x1[0], y2[0], x2[1] - x1[0], r2.height - y2[1] + y1[0]),
            )
        return Collision.NEW_BROKEN, pieces

    # The rectangles cross without any corner of one inside the other:
    # keep the two parts of the new one that stick out.
    if r2.y < r1.y:
        pieces = (
            Rect(x2[0], y2[0], r2.width, r2.height - y2[1] + y1[0]),
            Rect(x2[0], y1[1], r2.width, y2[1] - y1[1]),
        )
    else:
        pieces = (
            Rect(x2[0], y2[0], r2.width - x2[1] + x1[0], r2.height),
            Rect(x1[1], y2[0], x2[1] - x1[1], r2.height),
        )
    return Collision.NEW_BROKEN, pieces


class DamageList:
    """Ordered collection of damaged areas kept free of redundant overlap."""

    def __init__(self) -> None:
        self._rects: list[Rect] = []

    def insert(self, rect: Rect) -> int:
        """Merge ``rect`` into the list and return the net number of insertions."""
        return self._insert(rect, 0)

    def clear(self) -> None:
        """Forget every area."""
        self._rects.clear()

    def __iter__(self) -> Iterator[Rect]:
        return iter(list(self._rects))

    def __len__(self) -> int:
        return len(self._rects)

    def _insert(self, rect: Rect, start: int) -> int:
        rects = self._rects
        if start >= len(rects):
            rects.append(rect)
            return 1

        total = 0
        i = start
        while True:
            kind, pieces = collide_rects(rects[i], rect)
            first = i == 0
            last = i == len(rects) - 1

            if kind is Collision.NONE:
                if last:
                    rects.append(rect)
                    return total + 1
                i += 1
                continue

            if kind is Collision.NEW_COVERED:
                return total

            if kind is Collision.RESIDENT_COVERED:
                total -= 1
                if not last:
                    del rects[i]
                    if not rect.is_empty:
                        total += self._insert(rect, i)
                elif not first or not rect.is_empty:
                    rects[i] = rect
                    total += 1
                else:
                    del rects[i]
                    total += 1
                return total

            if kind is Collision.RESIDENT_BROKEN:
                piece = pieces[0]
                if not piece.is_empty:
                    rects[i] = piece
                    if last:
                        rects.append(rect)
                        return total + 1
                    i += 1
                    continue
                if first and not last:
                    del rects[i]
                elif last:
                    rects[i] = rect
                else:
                    total -= 1
                    del rects[i]
                    total += self._insert(rect, i)
                return total

            if kind is Collision.NEW_BROKEN:
                if last:
                    rects.extend(pieces)
                    return total + len(pieces)
                for piece in pieces:
                    if not piece.is_empty:
                        total += self._insert(piece, i + 1)
                return total

            # Collision.GROUPED
            joined = pieces[0]
            if last:
                rects[i] = joined
                return total
            total -= 1
            del rects[i]
            if not joined.is_empty:
                total += self._insert(joined, i)
            return total
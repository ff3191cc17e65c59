"""Clipping and alignment of damage reports against the recorded area."""

from __future__ import annotations

from rmdesk.rects import Rect


def clip_event_area(area: Rect, cliprect: Rect) -> Rect | None:
    """Clip a damaged ``area`` to ``cliprect``.

    Returns the clipped rectangle, or None when the two are judged not to
    overlap. An area whose far edge lies beyond the far edge of the clip
    rectangle, without covering it entirely, is treated as not overlapping.
    """
    if (
        area.x <= cliprect.x
        and area.y <= cliprect.y
        and area.width >= cliprect.width
        and area.height >= cliprect.height
    ):
        return Rect(cliprect.x, cliprect.y, cliprect.width, cliprect.height)

    if (
        area.right < cliprect.x
        or area.right > cliprect.right
        or area.bottom < cliprect.y
        or area.bottom > cliprect.bottom
    ):
        return None

    x = max(area.x, cliprect.x)
    width = min(area.right, cliprect.right) - x
    y = max(area.y, cliprect.y)
    height = min(area.bottom, cliprect.bottom) - y
    if not width or not height:
        return None
    return Rect(x, y, width, height)


def uv_align(cliprect: Rect, rect: Rect) -> Rect:
    """Grow ``rect`` so it starts and ends on even offsets within ``cliprect``.

    Chroma planes work on 2x2 pixel blocks. Where the clip rectangle leaves
    no room to reach an even size the odd width or height is kept.
    """
    rel_x = rect.x - cliprect.x
    rel_y = rect.y - cliprect.y
    width = rect.width
    height = rect.height

    if rel_x % 2:
        rel_x -= 1
        width += 1
    if rel_y % 2:
        rel_y -= 1
        height += 1

    if width % 2 and width + rel_x < cliprect.width:
        width += 1
    if height % 2 and height + rel_y < cliprect.height:
        height += 1

    return Rect(rel_x + cliprect.x, rel_y + cliprect.y, width, height)
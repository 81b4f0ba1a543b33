"""Drawing frames to the terminal, writing only the cells that changed."""

from __future__ import annotations

from typing import Protocol, TextIO

from terminvaders.frame import Frame


class _Styling(Protocol):
    on_blue: str
    clear: str
    on_black: str
    white: str

    def move_xy(self, x: int, y: int) -> str: ...


def render(
    term: _Styling,
    stream: TextIO,
    last_frame: Frame,
    curr_frame: Frame,
    force: bool,
) -> None:
    """Write ``curr_frame`` to ``stream``.

    Only cells that differ from ``last_frame`` are written unless ``force`` is
    set, in which case the screen is cleared and every cell is redrawn.
    """
    parts: list[str] = []
    if force:
        parts.extend((term.on_blue, term.clear, term.on_black, term.white))
    for x, (column, last_column) in enumerate(zip(curr_frame, last_frame)):
        for y, (cell, last_cell) in enumerate(zip(column, last_column)):
            if force or cell != last_cell:
                parts.append(term.move_xy(x, y))
                parts.append(cell)
    stream.write("".join(parts))
    stream.flush()
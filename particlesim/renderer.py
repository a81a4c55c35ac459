"""Draw particles onto a character grid with ANSI colours."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from particlesim.particle import Particle

TYPE_CHARS = ("o", "*", "+")
TYPE_COLORS = ("\033[31m", "\033[32m", "\033[34m")
HIGHLIGHT_COLOR = "\033[1;43m"
RESET_COLOR = "\033[0m"
CLEAR_SCREEN = "\033[2J\033[1;1H"


def render_frame(particles: Iterable[Particle], width: int, height: int) -> str:
    """Return one screen: a clear sequence and ``height`` lines of ``width`` cells.

    When particles share a cell the last one drawn wins.
    """
    owners: dict[tuple[int, int], Particle] = {}
    for p in particles:
        gx, gy = int(p.x), int(p.y)
        if 0 <= gx < width and 0 <= gy < height:
            owners[gx, gy] = p

    def cell(x: int, y: int) -> str:
        p = owners.get((x, y))
        if p is None:
            return " "
        t = p.kind % len(TYPE_CHARS)
        prefix = HIGHLIGHT_COLOR if p.highlight_ticks > 0 else ""
        return f"{prefix}{TYPE_COLORS[t]}{TYPE_CHARS[t]}{RESET_COLOR}"

    rows = ("".join(cell(x, y) for x in range(width)) + "\n" for y in range(height))
    return CLEAR_SCREEN + "".join(rows)


def render(
    particles: Iterable[Particle], width: int, height: int, stream: Optional[TextIO] = None
) -> None:
    """Write one frame to ``stream`` (standard output by default)."""
    out = sys.stdout if stream is None else stream
    out.write(render_frame(particles, width, height))
    out.flush()
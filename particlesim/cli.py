"""Interactive terminal front end for the particle simulation."""

from __future__ import annotations

import argparse
import itertools
import os
import random
import select
import shutil
import sys
import time
from typing import Callable, Optional, Sequence, TypeVar

from particlesim.group import init_group, update_group
from particlesim.particle import Particle, interaction_matrix
from particlesim.renderer import render
from particlesim.simulation import reset_particles, simulate
from particlesim.statistics import Statistics

GROUP_PRESET = 5
FRAME_DELAY = 0.05

_MENU = (
    "Выберите тип взаимодействия (пресет):\n"
    "1 - Охота (догонялки)\n"
    "2 - Расслоение (разные типы избегают друг друга)\n"
    "3 - Хаос (рандомные взаимодействия частиц)\n"
    "4 - Союзы (2 типа объединяются против третьего)\n"
    "5 - Группировка (частицы одинаковых типов создают несколько плотных кластеров"
    " - шаблон для будущих пресетов фигур)\n"
)

T = TypeVar("T")


def _ask(prompt: str, parse: Callable[[str], T], valid: Callable[[T], bool]) -> T:
    while True:
        reply = input(prompt).strip()
        try:
            value = parse(reply)
        except ValueError:
            continue
        if valid(value):
            return value


class _KeyReader:
    """Non-blocking single-key reads from a terminal; inert when stdin is not one."""

    def __init__(self) -> None:
        self._fd: Optional[int] = None
        self._saved = None
        self._termios = None

    def __enter__(self) -> "_KeyReader":
        try:
            import termios
            import tty
        except ImportError:
            return self
        try:
            fd = sys.stdin.fileno()
        except (AttributeError, OSError, ValueError):
            return self
        if not os.isatty(fd):
            return self
        self._termios = termios
        self._saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        self._fd = fd
        return self

    def __exit__(self, *exc) -> None:
        if self._fd is not None and self._termios is not None:
            self._termios.tcsetattr(self._fd, self._termios.TCSADRAIN, self._saved)
        self._fd = None

    def poll(self) -> Optional[str]:
        if self._fd is None:
            return None
        ready, _, _ = select.select([self._fd], [], [], 0)
        if not ready:
            return None
        return os.read(self._fd, 1).decode(errors="ignore") or None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="particlesim",
        description="Particle life in the terminal. Press q to quit, r to restart.",
    )
    parser.add_argument("--count", type=int, help="number of particles")
    parser.add_argument("--preset", type=int, choices=range(1, 6), help="interaction preset 1-5")
    parser.add_argument(
        "--events", action=argparse.BooleanOptionalAction, default=None, help="random events"
    )
    parser.add_argument("--width", type=int, help="field width (terminal width by default)")
    parser.add_argument("--height", type=int, help="field height (terminal height by default)")
    parser.add_argument("--steps", type=int, help="stop after this many steps")
    parser.add_argument("--delay", type=float, default=FRAME_DELAY, help="seconds between frames")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument("--csv", default="statistics.csv", help="where to save the statistics")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation until q is pressed (or the step limit), then report."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.count is not None and args.count <= 0:
        parser.error("--count must be positive")
    for name in ("width", "height"):
        value = getattr(args, name)
        if value is not None and value <= 0:
            parser.error(f"--{name} must be positive")

    try:
        count = args.count
        if count is None:
            count = _ask(
                "Введите количество частиц (рекомендуется 50 - 500): ", int, lambda n: n > 0
            )
        preset = args.preset
        if preset is None:
            print(_MENU, end="")
            preset = _ask("Введите номер пресета (1-5): ", int, lambda n: 1 <= n <= 5)
        events = args.events
        if events is None:
            answer = _ask(
                "Включить случайные события? (y/n): ",
                lambda s: s[:1].lower(),
                lambda c: c in ("y", "n"),
            )
            events = answer == "y"
    except EOFError:
        return 1

    size = shutil.get_terminal_size()
    width = args.width or size.columns
    height = args.height or size.lines
    rng = random.Random(args.seed)
    matrix = interaction_matrix(preset)
    grouping = preset == GROUP_PRESET

    def fresh() -> list[Particle]:
        if grouping:
            return init_group(count, width, height, rng)
        return reset_particles(count, width, height, rng)

    stats = Statistics()
    stats.reset(count)
    particles = fresh()

    steps = itertools.count() if args.steps is None else range(args.steps)
    try:
        with _KeyReader() as keys:
            for _ in steps:
                key = keys.poll()
                if key == "q":
                    break
                if key == "r":
                    particles = fresh()
                    stats.reset(count)

                if grouping:
                    update_group(particles, width, height)
                else:
                    simulate(particles, width, height, matrix, events, stats, rng)
                stats.increment_step()
                stats.update_particle_count(len(particles))

                render(particles, width, height, sys.stdout)
                if args.delay > 0:
                    time.sleep(args.delay)
    except KeyboardInterrupt:
        pass

    stats.print_summary(particles, sys.stdout)
    try:
        stats.save_csv(particles, args.csv)
    except OSError:
        print(f"Ошибка открытия файла для записи статистики: {args.csv}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
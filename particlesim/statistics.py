"""Statistics gathered over a simulation run, with a text summary and CSV export."""

from __future__ import annotations

import itertools
import math
import sys
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, TextIO

from particlesim.particle import Particle

_ANSI_RED = "\033[1;31m"
_ANSI_GREEN = "\033[1;32m"
_ANSI_BLUE = "\033[1;34m"
_ANSI_RESET = "\033[0m"

_TYPE_LABELS = {
    0: _ANSI_RED + "0(R)" + _ANSI_RESET,
    1: _ANSI_GREEN + "1(G)" + _ANSI_RESET,
    2: _ANSI_BLUE + "2(B)" + _ANSI_RESET,
}

_GRID_SIZE = 10
_CLOSE_DISTANCE = 2.0


def type_colored(particle_type: int) -> str:
    """Return a coloured label for a particle type, or the bare number."""
    return _TYPE_LABELS.get(particle_type, str(particle_type))


def _grid_cell(value: float, low: float, span: float) -> int:
    if span == 0:
        return 0
    cell = int((value - low) / span * _GRID_SIZE)
    return min(max(cell, 0), _GRID_SIZE - 1)


@dataclass
class Statistics:
    """Counters of random events and per-run totals."""

    removed_particles: int = 0
    reproductions: int = 0
    type_changes: int = 0
    teleports: int = 0
    sleeping_particles: int = 0
    mass_changes: int = 0
    speed_jumps: int = 0
    total_random_events: int = 0
    particles_with_events: int = 0
    simulation_steps: int = 0
    total_particle_count: int = 0
    top_massive_particles: list[tuple[float, int]] = field(default_factory=list)
    had_random_event: list[bool] = field(default_factory=list)

    def reset(self, particle_count: int) -> None:
        """Clear all counters before a new run of ``particle_count`` particles."""
        self.removed_particles = 0
        self.reproductions = 0
        self.type_changes = 0
        self.teleports = 0
        self.sleeping_particles = 0
        self.mass_changes = 0
        self.speed_jumps = 0
        self.total_random_events = 0
        self.particles_with_events = 0
        self.simulation_steps = 0
        self.total_particle_count = 0
        self.had_random_event = [False] * particle_count
        self.top_massive_particles.clear()

    def record_random_event(self, particle_index: int) -> None:
        """Count an event; each known particle counts once towards the affected total."""
        if 0 <= particle_index < len(self.had_random_event) and not self.had_random_event[particle_index]:
            self.had_random_event[particle_index] = True
            self.particles_with_events += 1
        self.total_random_events += 1

    def increment_event_count(self, event_type: int) -> None:
        """Bump the counter belonging to an event type (0-6); others are ignored."""
        if event_type == 0:
            self.increment_removed()
        elif event_type == 1:
            self.type_changes += 1
        elif event_type == 2:
            self.reproductions += 1
        elif event_type == 3:
            self.teleports += 1
        elif event_type == 4:
            self.mass_changes += 1
        elif event_type == 5:
            self.speed_jumps += 1
        elif event_type == 6:
            self.sleeping_particles += 1

    def increment_removed(self) -> None:
        self.removed_particles += 1

    def increment_step(self) -> None:
        self.simulation_steps += 1

    def update_particle_count(self, count: int) -> None:
        """Add the particle count of one frame to the running total."""
        self.total_particle_count += count

    def summary(self, particles: Iterable[Particle]) -> str:
        """Build the end-of-run report as text."""
        particles = list(particles)
        count = len(particles)
        if count == 0:
            return "Нет частиц для статистики.\n"

        lines = ["", "--- Итоговая статистика симуляции ---"]

        by_type: dict[int, list[Particle]] = defaultdict(list)
        for p in particles:
            by_type[p.kind].append(p)
        types = sorted(by_type)

        lines.append("Количество частиц по типам:")
        lines.extend(f"  Тип {type_colored(t)}: {len(by_type[t])}" for t in types)

        lines.append("Средняя масса по типам:")
        total_mass = 0.0
        for t in types:
            mass_sum = sum(p.mass for p in by_type[t])
            lines.append(f"  Тип {type_colored(t)}: {mass_sum / len(by_type[t]):g}")
            total_mass += mass_sum
        lines.append(f"Средняя масса всех частиц: {total_mass / count:g}")

        lines += [
            f"Количество удалённых частиц (взрывов): {self.removed_particles}",
            f"Количество размножений: {self.reproductions}",
            f"Количество смен типов: {self.type_changes}",
            f"Количество телепортаций: {self.teleports}",
            f"Количество 'спящих' частиц: {self.sleeping_particles}",
            f"Количество смен массы: {self.mass_changes}",
            f"Количество резких ускорений: {self.speed_jumps}",
            f"Всего случайных событий: {self.total_random_events}",
            f"Частиц, переживших ≥1 случайное событие: {self.particles_with_events}",
        ]

        xs = [p.x for p in particles]
        ys = [p.y for p in particles]
        mean_x = sum(xs) / count
        mean_y = sum(ys) / count
        std_x = math.sqrt(sum((x - mean_x) ** 2 for x in xs) / count)
        std_y = math.sqrt(sum((y - mean_y) ** 2 for y in ys) / count)

        dist_sum_all = 0.0
        pair_count = 0
        close_pairs = 0
        same_type_sum: dict[int, float] = defaultdict(float)
        same_type_count: Counter[int] = Counter()
        for a, b in itertools.combinations(particles, 2):
            d = math.dist((a.x, a.y), (b.x, b.y))
            dist_sum_all += d
            pair_count += 1
            if d < _CLOSE_DISTANCE:
                close_pairs += 1
            if a.kind == b.kind:
                same_type_sum[a.kind] += d
                same_type_count[a.kind] += 1

        average_distance = dist_sum_all / pair_count if pair_count else 0.0
        lines.append(f"Среднее расстояние между всеми частицами: {average_distance:.3f}")
        lines.append("Среднее расстояние между частицами одного типа:")
        for t in sorted(same_type_sum):
            lines.append(f"  Тип {type_colored(t)}: {same_type_sum[t] / same_type_count[t]:.3f}")

        min_x, max_x = min(xs), max(xs)
        min_y, max_y = min(ys), max(ys)
        area = (max_x - min_x) * (max_y - min_y)
        if area < 0.01:
            area = 1.0
        lines.append(f"Средняя плотность (частиц на единицу площади): {count / area:.3f}")
        lines.append(f"Стандартное отклонение X: {std_x:.3f}, Y: {std_y:.3f}")

        speeds = [p.speed for p in particles]
        lines.append(f"Средняя скорость всех частиц: {sum(speeds) / count:.3f}")
        lines.append("Средняя скорость по типам:")
        for t in types:
            type_speeds = [p.speed for p in by_type[t]]
            lines.append(f"  Тип {type_colored(t)}: {sum(type_speeds) / len(type_speeds):.3f}")

        by_speed = sorted(range(count), key=speeds.__getitem__, reverse=True)
        by_mass = sorted(range(count), key=lambda i: particles[i].mass, reverse=True)

        lines.append("Частицы с наибольшей скоростью (топ 3):")
        for idx in by_speed[:3]:
            lines.append(
                f"  Индекс {idx} Скорость: {speeds[idx]:.3f} Тип: {type_colored(particles[idx].kind)}"
            )
        lines.append("Частицы с наименьшей скоростью (топ 3):")
        for idx in by_speed[::-1][:3]:
            lines.append(
                f"  Индекс {idx} Скорость: {speeds[idx]:.3f} Тип: {type_colored(particles[idx].kind)}"
            )
        lines.append("Частицы с наибольшей массой (топ 3):")
        for idx in by_mass[:3]:
            lines.append(
                f"  Индекс {idx} Масса: {particles[idx].mass:.3f} Тип: {type_colored(particles[idx].kind)}"
            )

        lines.append(f"Число шагов симуляции: {self.simulation_steps}")
        if self.simulation_steps:
            per_frame = self.total_particle_count / self.simulation_steps
        else:
            per_frame = float(count)
        lines.append(f"Среднее количество частиц на кадр: {per_frame:.3f}")
        lines.append(f"Количество близких сближений (<2.0): {close_pairs}")

        cells = Counter(
            (
                _grid_cell(p.x, min_x, max_x - min_x),
                _grid_cell(p.y, min_y, max_y - min_y),
            )
            for p in particles
        )
        lines.append(f"Максимальная плотность в одной ячейке (10x10 сетка): {max(cells.values())}")
        lines.append("--- Конец статистики ---")
        lines.append("")
        return "\n".join(lines) + "\n"

    def print_summary(self, particles: Iterable[Particle], stream: TextIO | None = None) -> None:
        """Write the report to ``stream`` (standard output by default)."""
        out = sys.stdout if stream is None else stream
        out.write(self.summary(particles))
        out.flush()

    def save_csv(self, particles: Iterable[Particle], path: str | Path) -> None:
        """Write per-type averages and event counters to a CSV file."""
        counts: Counter[int] = Counter()
        mass_sums: dict[int, float] = defaultdict(float)
        speed_sums: dict[int, float] = defaultdict(float)
        for p in particles:
            counts[p.kind] += 1
            mass_sums[p.kind] += p.mass
            speed_sums[p.kind] += p.speed

        rows = ["Тип,Количество,Средняя масса,Средняя скорость"]
        for t in sorted(counts):
            n = counts[t]
            rows.append(f"{t},{n},{mass_sums[t] / n:g},{speed_sums[t] / n:g}")

        rows += [
            "",
            "Общие события,Значения",
            f"Удалённых частиц (взрывов),{self.removed_particles}",
            f"Размножений,{self.reproductions}",
            f"Смен типов,{self.type_changes}",
            f"Телепортаций,{self.teleports}",
            f"Спящих частиц,{self.sleeping_particles}",
            f"Смен массы,{self.mass_changes}",
            f"Резких ускорений,{self.speed_jumps}",
            f"Всего случайных событий,{self.total_random_events}",
            f"Частиц с событиями,{self.particles_with_events}",
            f"Шагов симуляции,{self.simulation_steps}",
        ]
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write("\n".join(rows) + "\n")
import io

from particlesim.particle import Particle
from particlesim.renderer import CLEAR_SCREEN, render, render_frame


def _rows(frame):
    assert frame.startswith(CLEAR_SCREEN)
    return frame[len(CLEAR_SCREEN):].split("\n")[:-1]


def test_empty_frame():
    frame = render_frame([], 5, 3)
    assert frame == "\033[2J\033[1;1H" + ("     \n" * 3)


def test_particle_drawn_in_its_cell():
    frame = render_frame([Particle(1.7, 0.2, kind=0)], 4, 2)
    rows = _rows(frame)
    assert len(rows) == 2
    assert rows[0] == " \033[31mo\033[0m  "
    assert rows[1] == "    "


def test_highlighted_particle():
    frame = render_frame([Particle(0.0, 0.0, kind=1, highlight_ticks=2)], 1, 1)
    assert _rows(frame) == ["\033[1;43m\033[32m*\033[0m"]


def test_out_of_bounds_particles_are_skipped():
    particles = [Particle(10.0, 0.0), Particle(0.0, 5.0), Particle(-3.0, -3.0)]
    assert render_frame(particles, 3, 2) == render_frame([], 3, 2)


def test_last_particle_in_cell_wins():
    frame = render_frame([Particle(0.2, 0.2, kind=0), Particle(0.8, 0.9, kind=2)], 1, 1)
    assert _rows(frame) == ["\033[34m+\033[0m"]


def test_render_writes_frame_to_stream():
    particles = [Particle(2.0, 1.0, kind=2), Particle(0.5, 0.5, kind=1)]
    buffer = io.StringIO()
    render(particles, 4, 3, buffer)
    assert buffer.getvalue() == render_frame(particles, 4, 3)
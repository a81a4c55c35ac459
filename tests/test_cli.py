import io

import pytest

from particlesim.cli import main


def _base_args(tmp_path, *extra):
    return [
        "--width", "20", "--height", "8", "--delay", "0", "--seed", "3",
        "--csv", str(tmp_path / "stats.csv"), *extra,
    ]


def test_run_with_arguments_writes_csv_and_summary(tmp_path, capsys):
    code = main(_base_args(tmp_path, "--count", "12", "--preset", "1", "--no-events", "--steps", "3"))
    assert code == 0
    out = capsys.readouterr().out
    assert "Число шагов симуляции: 3" in out
    text = (tmp_path / "stats.csv").read_text(encoding="utf-8")
    assert text.startswith("Тип,Количество,Средняя масса,Средняя скорость\n")
    assert "Шагов симуляции,3" in text
    assert "Всего случайных событий,0" in text


def test_group_preset_runs(tmp_path, capsys):
    code = main(_base_args(tmp_path, "--count", "8", "--preset", "5", "--events", "--steps", "2"))
    assert code == 0
    text = (tmp_path / "stats.csv").read_text(encoding="utf-8")
    assert "Шагов симуляции,2" in text
    assert "Среднее количество частиц на кадр: 8.000" in capsys.readouterr().out


def test_prompts_repeat_until_valid(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\nabc\n6\n9\n2\nx\nn\n"))
    code = main(_base_args(tmp_path, "--steps", "1"))
    assert code == 0
    out = capsys.readouterr().out
    assert out.count("Введите количество частиц") == 3
    assert out.count("Введите номер пресета (1-5): ") == 2
    assert out.count("Включить случайные события? (y/n): ") == 2
    assert "Среднее количество частиц на кадр: 6.000" in out


def test_end_of_input_returns_error(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\n"))
    assert main(_base_args(tmp_path, "--steps", "1")) == 1


def test_non_positive_count_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(_base_args(tmp_path, "--count", "0"))
    assert info.value.code == 2


def test_unknown_preset_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(_base_args(tmp_path, "--preset", "7"))
    assert info.value.code == 2
# tests/test_main_cli.py
import importlib
import logging
import pytest
from roster import config
from roster.main import main_cli, build_default_manager, run
from roster.manager import StudentManager

def test_cli_show_default_students(feed_input, capsys):
    """Стартовый список студентов показывается в пункте 1."""
    feed_input('1', '5')
    main_cli()
    output = capsys.readouterr().out

    assert "Bhanu Pratap" in output
    assert "Harsh" in output
    assert "Badal" in output
    assert "До свидания!" in output

def test_cli_show_empty(feed_input, capsys):
    feed_input('1', '5')
    main_cli(StudentManager())
    assert "Студенты не найдены" in capsys.readouterr().out

def test_cli_search(feed_input, capsys):
    feed_input('2', '102', '2', '999', '5')
    main_cli()
    output = capsys.readouterr().out
    assert "Студент найден" in output
    assert "Harsh" in output
    assert "Студент с ID 999 не найден" in output

def test_cli_top_scorer(feed_input, capsys):
    feed_input('3', '0', '3', '-1', '3', '7', '5')
    main_cli()
    output = capsys.readouterr().out
    assert "Лучший студент по предмету 1" in output
    assert "Harsh" in output
    assert "Индекс предмета не может быть отрицательным" in output
    assert "Нет оценок по этому предмету" in output

def test_cli_add_student(feed_input, capsys):
    manager = build_default_manager()
    feed_input('4', 'X', '5', '2', '70', '80', '5')
    main_cli(manager)
    assert "Студент X успешно добавлен" in capsys.readouterr().out
    assert manager.find_by_id(5).scores == [70, 80]
    assert len(manager) == 4

def test_cli_add_duplicate(feed_input, capsys):
    manager = build_default_manager()
    feed_input('4', 'Клон', '101', '5')
    main_cli(manager)
    assert "уже существует" in capsys.readouterr().out
    assert len(manager) == 3

def test_cli_add_bad_score_not_inserted(feed_input, capsys):
    manager = StudentManager()
    feed_input('4', 'Y', '7', '2', '90', '150', '5')
    main_cli(manager)
    assert "Ошибка данных" in capsys.readouterr().out
    assert 7 not in manager

def test_cli_invalid_input_does_not_crash(feed_input, capsys):
    feed_input('2', 'abc', '9', '5')
    main_cli()
    output = capsys.readouterr().out
    assert "Ожидалось целое число" in output
    assert "Неверный выбор" in output
    assert "До свидания!" in output

def test_cli_eof_exits(feed_input, capsys):
    feed_input()
    main_cli()
    assert "До свидания!" in capsys.readouterr().out

def test_run_returns_zero_on_exit(feed_input, capsys):
    feed_input('5')
    assert run() == 0
    assert "До свидания!" in capsys.readouterr().out

def test_run_ctrl_c_stops_cleanly(monkeypatch, capsys):
    def interrupted_input(prompt=""):
        raise KeyboardInterrupt
    monkeypatch.setattr('builtins.input', interrupted_input)

    assert run() == 0
    assert "Программа принудительно остановлена" in capsys.readouterr().out

@pytest.mark.parametrize("env_value, expected", [
    ("debug", "DEBUG"),
    ("Info", "INFO"),
    ("verbose", "WARNING"),
])
def test_log_level_from_environment(monkeypatch, env_value, expected):
    monkeypatch.setenv("ROSTER_LOG_LEVEL", env_value)
    try:
        importlib.reload(config)
        assert config.LOG_LEVEL == expected
    finally:
        monkeypatch.delenv("ROSTER_LOG_LEVEL")
        importlib.reload(config)
    assert config.LOG_LEVEL == "WARNING"

def test_run_passes_log_level_to_basic_config(monkeypatch, feed_input):
    calls = []
    monkeypatch.setattr(config, "LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    feed_input('5')
    run()
    assert calls == [{"level": "DEBUG"}]

# tests/conftest.py
import pytest
from typing import List
from roster.models import Student
from roster.manager import StudentManager

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student(101, "Bhanu Pratap", [80, 90, 85]),
        Student(102, "Harsh", [95, 88, 92]),
        Student(103, "Badal", [78, 85, 80]),
    ]

@pytest.fixture
def manager(sample_students) -> StudentManager:
    """Менеджер, заполненный тестовыми студентами."""
    m = StudentManager()
    for s in sample_students:
        m.add_student(s)
    return m

@pytest.fixture
def feed_input(monkeypatch):
    """Подменяет input() последовательностью ответов; после них - EOF."""
    def _feed(*answers):
        answers_iter = iter(answers)

        def mock_input(prompt=""):
            try:
                return next(answers_iter)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr('builtins.input', mock_input)
    return _feed

# roster/io_utils.py
"""Модуль для консольного ввода/вывода: чтение чисел и форматирование списков."""
from typing import Iterable, List

try:
    # Сначала относительный (для pytest)
    from .models import Student
    from .errors import InvalidInputError
except (ImportError, ValueError):
    # Затем прямой (для EXE)
    from models import Student
    from errors import InvalidInputError
# -------------------------

NO_STUDENTS_MESSAGE = "ℹ️ Студенты не найдены."

def parse_int(raw: str, what: str = "значение") -> int:
    """Преобразует строку в int. При ошибке - InvalidInputError вместо падения программы."""
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidInputError(f"Ожидалось целое число ({what}), получено: '{raw}'.") from None

def read_int(prompt: str, what: str = "значение") -> int:
    """Запрашивает у пользователя целое число."""
    return parse_int(input(prompt), what)

def read_count(prompt: str) -> int:
    """Запрашивает неотрицательное количество (например, число оценок)."""
    count = read_int(prompt, "количество")
    if count < 0:
        raise InvalidInputError(f"Количество не может быть отрицательным: {count}.")
    return count

def read_scores(count: int) -> List[int]:
    """Запрашивает count оценок по одной."""
    return [read_int(f"Введите оценку {i + 1}: ", "оценка") for i in range(count)]

def format_students(students: Iterable[Student]) -> str:
    """Собирает текст списка студентов. Для пустого списка - явное сообщение."""
    students = list(students)
    if not students:
        return NO_STUDENTS_MESSAGE
    lines = ["--- Все студенты ---"]
    lines.extend(str(s) for s in students)
    return "\n".join(lines)

# roster/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class StudentAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class DataValidationError(StudentAppError, ValueError):
    """Исключение, связанное с некорректными данными (оценка, индекс, ввод)."""
    pass

class ScoreOutOfRangeError(DataValidationError):
    """Оценка вне допустимого диапазона 0-100."""
    pass

class InvalidSubjectIndexError(DataValidationError):
    """Отрицательный индекс предмета."""
    pass

class InvalidInputError(DataValidationError):
    """Некорректный ввод в консоли (ожидалось целое число)."""
    pass

class DuplicateStudentIdError(StudentAppError):
    """Исключение при попытке добавить студента с уже существующим ID."""
    pass

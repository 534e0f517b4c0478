# roster/models.py
"""Модуль, определяющий модели данных: Person и Student."""
from typing import Iterable, List

try:
    # Сначала относительный (для pytest)
    from .config import SCORE_MIN, SCORE_MAX
    from .errors import ScoreOutOfRangeError
except (ImportError, ValueError):
    # Затем прямой (для EXE)
    from config import SCORE_MIN, SCORE_MAX
    from errors import ScoreOutOfRangeError
# -------------------------

class Person:
    """Личность: имя и неизменяемый ID."""
    def __init__(self, name: str, person_id: int):
        self.name = name
        self._id = person_id

    @property
    def id(self) -> int:
        return self._id

    def __repr__(self) -> str:
        return f"Person(name='{self.name}', id={self.id})"

    def __str__(self) -> str:
        return f"Имя: {self.name}, ID: {self.id}"


class Student:
    """Студент: личность (Person) плюс упорядоченный список оценок."""
    def __init__(self, student_id: int, name: str, scores: Iterable[int] = ()):
        self.person = Person(name, student_id)
        self._scores: List[int] = []
        # Каждая оценка проходит ту же проверку, что и add_score
        for score in scores:
            self.add_score(score)

    @property
    def id(self) -> int:
        return self.person.id

    @property
    def name(self) -> str:
        return self.person.name

    def add_score(self, score: int) -> None:
        """Добавляет оценку в конец списка. Вне диапазона 0-100 - ScoreOutOfRangeError."""
        if score < SCORE_MIN or score > SCORE_MAX:
            raise ScoreOutOfRangeError(
                f"Оценка {score} недопустима. Разрешен диапазон {SCORE_MIN}-{SCORE_MAX}."
            )
        self._scores.append(score)

    @property
    def scores(self) -> List[int]:
        """Возвращает копию списка оценок: изменения копии не влияют на студента."""
        return list(self._scores)

    @property
    def average(self) -> float:
        """Рассчитывает средний балл студента. Возвращает 0.0, если оценок нет."""
        if not self._scores:
            return 0.0
        return sum(self._scores) / len(self._scores)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(id={self.id}, name='{self.name}', scores={self._scores})"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        scores_str = ", ".join(map(str, self._scores)) if self._scores else "Нет оценок"
        return f"{self.person}\nОценки: [{scores_str}], Средний балл: {self.average:.2f}"

# roster/manager.py
"""Модуль с StudentManager: хранение студентов по ID, поиск и выбор лучшего по предмету."""
import logging
from typing import Dict, List, Optional

try:
    # 1. Относительный импорт (для pytest)
    from .models import Student
    from .errors import DuplicateStudentIdError, InvalidSubjectIndexError
except (ImportError, ValueError):
    # 2. Прямой импорт (для EXE)
    from models import Student
    from errors import DuplicateStudentIdError, InvalidSubjectIndexError
# --------------------------------------------------

logger = logging.getLogger(__name__)


class StudentManager:
    """Владеет студентами, хранит их в словаре ID -> Student. Только добавление."""

    def __init__(self):
        self._students: Dict[int, Student] = {}

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, student_id: int) -> bool:
        return student_id in self._students

    def add_student(self, student: Student) -> None:
        """Добавляет студента, проверяя уникальность ID."""
        if student.id in self._students:
            logger.warning("Отклонен дубликат ID %s", student.id)
            raise DuplicateStudentIdError(f"Студент с ID {student.id} уже существует.")
        self._students[student.id] = student
        logger.info("Добавлен студент %s (ID %s)", student.name, student.id)

    def find_by_id(self, student_id: int) -> Optional[Student]:
        """Ищет студента бинарным поиском по отсортированному снимку. None, если не найден."""
        # Снимок пересобирается и сортируется при каждом вызове
        snapshot = sorted(self._students.values(), key=lambda s: s.id)

        low, high = 0, len(snapshot) - 1
        while low <= high:
            mid = (low + high) // 2
            mid_id = snapshot[mid].id
            if mid_id == student_id:
                logger.debug("Студент с ID %s найден", student_id)
                return snapshot[mid]
            elif mid_id < student_id:
                low = mid + 1
            else:
                high = mid - 1

        logger.debug("Студент с ID %s не найден", student_id)
        return None

    def list_all(self) -> List[Student]:
        """Возвращает всех студентов (порядок не гарантируется)."""
        return list(self._students.values())

    def top_scorer_for_subject(self, subject_index: int) -> Optional[Student]:
        """Возвращает студента с максимальной оценкой по предмету subject_index.

        Студенты, у которых нет оценки с таким индексом, пропускаются.
        При равных оценках остается первый встреченный. None, если оценок
        с таким индексом нет ни у кого.
        """
        if subject_index < 0:
            raise InvalidSubjectIndexError("Индекс предмета не может быть отрицательным.")

        top_student = None
        top_score = -1
        for student in self._students.values():
            scores = student.scores
            if subject_index < len(scores) and scores[subject_index] > top_score:
                top_score = scores[subject_index]
                top_student = student

        return top_student

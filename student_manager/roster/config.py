# roster/config.py
"""Настройки приложения: границы оценок, стартовый список студентов, логирование."""
import os
import logging

# --- КОНФИГУРАЦИЯ ---
SCORE_MIN = 0
SCORE_MAX = 100

# (ID, имя, оценки) - студенты, с которыми стартует консольное приложение
DEFAULT_STUDENTS = [
    (101, "Bhanu Pratap", [80, 90, 85]),
    (102, "Harsh", [95, 88, 92]),
    (103, "Badal", [78, 85, 80]),
]

# Логи идут в stderr, поэтому по умолчанию показываем только предупреждения
LOG_LEVEL = os.environ.get("ROSTER_LOG_LEVEL", "WARNING").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    # Неизвестное имя уровня - basicConfig упал бы с ValueError
    LOG_LEVEL = "WARNING"

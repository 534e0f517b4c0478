# roster/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для управления студентами."""
import sys
import os
import logging
import traceback
from typing import Optional

if getattr(sys, 'frozen', False):
    base_path = sys._MEIPASS
else:
    base_path = os.path.dirname(os.path.abspath(__file__))

if base_path not in sys.path:
    sys.path.append(base_path)

try:
    # 1. Попытка относительного импорта (Для pytest и запуска через python -m roster.main)
    from . import io_utils, config, errors
    from .models import Student
    from .manager import StudentManager
except (ImportError, ValueError):
    # 2. Попытка прямого импорта (Для EXE и запуска через python roster/main.py)
    import io_utils
    import config
    import errors
    from models import Student
    from manager import StudentManager
# -------------------------

logger = logging.getLogger(__name__)

def build_default_manager() -> StudentManager:
    """Создает менеджер со стартовым списком студентов из config.DEFAULT_STUDENTS."""
    manager = StudentManager()
    for student_id, name, scores in config.DEFAULT_STUDENTS:
        manager.add_student(Student(student_id, name, scores))
    return manager

def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*30)
    print("      МЕНЮ УПРАВЛЕНИЯ")
    print("="*30)
    print("1. Показать всех студентов")
    print("2. Найти студента по ID")
    print("3. Лучший студент по предмету")
    print("4. Добавить нового студента")
    print("5. Выход")
    print("="*30)

def add_student_interactive(manager: StudentManager) -> Student:
    """Спрашивает имя, ID и оценки, затем добавляет студента в менеджер."""
    name = input("Введите имя студента: ").strip()
    stud_id = io_utils.read_int("Введите ID студента: ", "ID")
    if stud_id in manager:
        # Не заставляем вводить оценки, если ID уже занят
        raise errors.DuplicateStudentIdError(f"Студент с ID {stud_id} уже существует.")
    count = io_utils.read_count("Сколько оценок добавить? ")

    student = Student(stud_id, name)
    for score in io_utils.read_scores(count):
        student.add_score(score)
    manager.add_student(student)
    return student

def main_cli(manager: Optional[StudentManager] = None):
    """Основной цикл консольного приложения."""
    if manager is None:
        manager = build_default_manager()

    while True:
        print_menu()
        try:
            choice = input("Выберите пункт меню: ").strip()
        except EOFError:
            print("\n👋 До свидания!")
            break

        try:
            if choice == '1':
                print(io_utils.format_students(manager.list_all()))

            elif choice == '2':
                stud_id = io_utils.read_int("Введите ID студента для поиска: ", "ID")
                found = manager.find_by_id(stud_id)
                if found is not None:
                    print(f"✅ Студент найден:\n{found}")
                else:
                    print(f"ℹ️ Студент с ID {stud_id} не найден.")

            elif choice == '3':
                index = io_utils.read_int(
                    "Введите индекс предмета (0 - первый предмет, 1 - второй и т.д.): ", "индекс"
                )
                top = manager.top_scorer_for_subject(index)
                if top is not None:
                    print(f"🏆 Лучший студент по предмету {index + 1}:\n{top}")
                else:
                    print("ℹ️ Нет оценок по этому предмету.")

            elif choice == '4':
                student = add_student_interactive(manager)
                print(f"✅ Студент {student.name} успешно добавлен.")

            elif choice == '5':
                print("👋 До свидания!")
                break

            else:
                print("❌ Неверный выбор. Пожалуйста, введите число от 1 до 5.")

        except errors.DataValidationError as e:
            print(f"❌ Ошибка данных: {e}")
        except errors.StudentAppError as e:
            print(f"❌ Ошибка логики: {e}")
        except EOFError:
            print("\n👋 До свидания!")
            break
        except Exception as e:
            logger.exception("Непредвиденная ошибка в пункте меню %s", choice)
            print(f"❌ Произошла непредвиденная ошибка: {e}")

def run() -> int:
    """Точка входа консольного скрипта student-roster."""
    logging.basicConfig(level=config.LOG_LEVEL)
    try:
        main_cli()
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()
        return 1
    finally:
        if getattr(sys, 'frozen', False):
            input("\nНажмите Enter, чтобы выйти...")
    return 0

if __name__ == '__main__':
    sys.exit(run())

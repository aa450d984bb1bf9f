# exercise_menu/services/__init__.py
"""
Services package exports.
"""
from .employee_service import EmployeeService
from .grep_service import GrepService
from .guessing_service import GuessingService
from .match_service import MatchService
from .pig_latin_service import PigLatinService
from .rectangle_service import RectangleService
from .statistics_service import StatisticsService
from .vector_service import VectorService

__all__ = [
    "EmployeeService",
    "GrepService",
    "GuessingService",
    "MatchService",
    "PigLatinService",
    "RectangleService",
    "StatisticsService",
    "VectorService",
]

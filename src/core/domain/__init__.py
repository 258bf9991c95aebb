"""
Domain models and value objects.

Contains the calendar value types: LeapOffset, CivilDate.
"""

from src.core.domain.calendar_values import CivilDate, LeapOffset

__all__ = [
    "CivilDate",
    "LeapOffset",
]

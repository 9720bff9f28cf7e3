"""
Service layer that owns the schedule and orchestrates domain logic.
"""

from .schedule_service import ScheduleService

__all__ = ["ScheduleService"]

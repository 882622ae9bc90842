"""Business logic services."""

from fitcoach.services.assignment_service import AssignmentService
from fitcoach.services.checkin_service import CheckinService
from fitcoach.services.program_service import ProgramService
from fitcoach.services.schedule_service import ScheduleService

__all__ = [
    "AssignmentService",
    "CheckinService",
    "ProgramService",
    "ScheduleService",
]

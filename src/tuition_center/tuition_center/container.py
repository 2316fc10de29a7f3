from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceRecorder, TodayAttendanceService
from .billing.service import BillingService
from .classes.mysql_class_repository import MySQLClassRepository
from .classes.repository import ClassRepository
from .core.constants import DEFAULT_DAY_NAMES
from .database.connection import DatabaseConnection, DBConfig
from .schedules.matcher import ScheduleMatcher
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.store import FeePolicyStore
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    settings_repo: SettingsRepository
    attendance_repo: AttendanceRepository
    classes_repo: ClassRepository
    students_repo: StudentRepository

    schedule_matcher: ScheduleMatcher
    fee_policy_store: FeePolicyStore
    billing_service: BillingService
    attendance_recorder: AttendanceRecorder
    today_attendance_service: TodayAttendanceService


def assemble(
    *,
    settings_repo: SettingsRepository,
    attendance_repo: AttendanceRepository,
    classes_repo: ClassRepository,
    students_repo: StudentRepository,
    conn: Optional[DatabaseConnection] = None,
    day_names: Sequence[str] = DEFAULT_DAY_NAMES,
    on_invalidate: Optional[Callable[[str], None]] = None,
) -> Container:
    """Wire services around any repository implementations (MySQL or in-memory)."""

    schedule_matcher = ScheduleMatcher(day_names)
    fee_policy_store = FeePolicyStore(settings_repo, on_invalidate=on_invalidate)
    billing_service = BillingService(fee_policy_store)
    attendance_recorder = AttendanceRecorder(attendance_repo, students_repo, on_invalidate=on_invalidate)
    today_attendance_service = TodayAttendanceService(
        attendance_repo,
        classes_repo,
        students_repo,
        matcher=schedule_matcher,
    )

    return Container(
        conn=conn,
        settings_repo=settings_repo,
        attendance_repo=attendance_repo,
        classes_repo=classes_repo,
        students_repo=students_repo,
        schedule_matcher=schedule_matcher,
        fee_policy_store=fee_policy_store,
        billing_service=billing_service,
        attendance_recorder=attendance_recorder,
        today_attendance_service=today_attendance_service,
    )


def build_container(
    *,
    db_config: dict,
    day_names: Sequence[str] = DEFAULT_DAY_NAMES,
    on_invalidate: Optional[Callable[[str], None]] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        conn=conn,
        settings_repo=MySQLSettingsRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        classes_repo=MySQLClassRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        day_names=day_names,
        on_invalidate=on_invalidate,
    )

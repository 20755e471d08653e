from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mongo_attendance_repository import MongoAttendanceRepository
from .attendance.session import AttendanceSession
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_MONGO_TIMEOUT_MS
from .core.enums import DateKeyFormat
from .database.connection import DatabaseConnection, MongoConfig
from .employees.mongo_employee_repository import MongoEmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: MongoEmployeeRepository
    attendance_repo: MongoAttendanceRepository

    employee_service: EmployeeService
    strategy_factory: AttendanceStrategyFactory

    date_key_format: DateKeyFormat = DateKeyFormat.LOCALE
    clock: Callable[[], datetime] = now_local

    def attendance_session(self) -> AttendanceSession:
        """A fresh operator session for one request, with employees and today's records loaded."""
        session = AttendanceSession(
            self.attendance_repo,
            clock=self.clock,
            date_key_format=self.date_key_format,
            strategy_factory=self.strategy_factory,
        )
        session.load()
        return session


def build_container(*, mongo_config: dict, date_key_format: str = "locale", atomic_writes: bool = False) -> Container:
    config = MongoConfig(
        uri=str(mongo_config["uri"]),
        database=str(mongo_config["database"]),
        timeout_ms=int(mongo_config.get("timeout_ms", DEFAULT_MONGO_TIMEOUT_MS)),
    )
    conn = DatabaseConnection.get_instance(config)

    employees_repo = MongoEmployeeRepository(conn)
    attendance_repo = MongoAttendanceRepository(conn, atomic_writes=atomic_writes)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_service=EmployeeService(employees_repo),
        strategy_factory=AttendanceStrategyFactory(),
        date_key_format=DateKeyFormat(date_key_format),
    )

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from pymongo.collection import Collection

from ..core.constants import ATTENDANCE_COLLECTION, EMPLOYEE_ATTENDANCE_SUBCOLLECTION, EMPLOYEES_COLLECTION
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, StoreError
from ..database.connection import DatabaseConnection
from ..database.mongo_base import id_filter, store_errors, str_id
from ..employees.model import Employee
from ..employees.mongo_employee_repository import employee_from_doc
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def record_to_doc(record: AttendanceRecord) -> Dict[str, Any]:
    return {
        "name": record.name,
        "role": record.role,
        "employeeId": record.employee_id,
        "status": record.status.value,
        "requestedStatus": record.requested_status.value,
        "date": record.date,
        "timeIn": record.time_in,
        "createdAt": record.created_at or datetime.now(),
    }


def record_from_doc(doc: Dict[str, Any]) -> AttendanceRecord:
    status = AttendanceStatus(doc["status"])
    requested = doc.get("requestedStatus")
    if requested is None:
        # Older documents only carry the billed status.
        requested = AttendanceStatus.PRESENT if status == AttendanceStatus.HALF_PRESENT else status

    return AttendanceRecord(
        record_id=str_id(doc),
        employee_id=str(doc.get("employeeId") or ""),
        name=str(doc.get("name") or ""),
        role=str(doc.get("role") or ""),
        requested_status=AttendanceStatus(requested),
        status=status,
        time_in=str(doc.get("timeIn") or "-"),
        date=str(doc.get("date") or ""),
        created_at=doc.get("createdAt"),
    )


class MongoAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, atomic_writes: bool = False):
        self._conn_factory = conn_factory
        self._atomic_writes = bool(atomic_writes)

    def _attendance(self) -> Collection:
        return self._conn_factory.db()[ATTENDANCE_COLLECTION]

    def _history(self, employee_id: str) -> Collection:
        # employees.<id>.attendance, write-only mirror
        return self._conn_factory.db()[EMPLOYEES_COLLECTION][employee_id][EMPLOYEE_ATTENDANCE_SUBCOLLECTION]

    def list_employees(self) -> Sequence[Employee]:
        with store_errors("list_employees"):
            return [employee_from_doc(d) for d in self._conn_factory.db()[EMPLOYEES_COLLECTION].find({})]

    def list_for_date(self, date_key: str) -> Sequence[AttendanceRecord]:
        with store_errors("list_attendance"):
            docs = list(self._attendance().find({"date": date_key}))

        out: list[AttendanceRecord] = []
        for doc in docs:
            try:
                out.append(record_from_doc(doc))
            except (KeyError, ValueError) as e:
                logger.warning("Skipping malformed attendance document %s: %s", doc.get("_id"), e)
        return out

    def create(self, record: AttendanceRecord) -> str:
        doc = record_to_doc(record)
        if self._atomic_writes:
            return self._create_atomic(record.employee_id, doc)

        # insert_one adds _id to the dict it is given, so each write gets its own copy.
        with store_errors("create_attendance_history"):
            self._history(record.employee_id).insert_one(dict(doc))
        try:
            with store_errors("create_attendance"):
                result = self._attendance().insert_one(dict(doc))
        except StoreError:
            logger.error(
                "Attendance for employee %s on %s written to history only; no queryable record exists",
                record.employee_id,
                record.date,
            )
            raise
        logger.info("Attendance %s marked for employee %s on %s", result.inserted_id, record.employee_id, record.date)
        return str(result.inserted_id)

    def _create_atomic(self, employee_id: str, doc: Dict[str, Any]) -> str:
        # Transactions need a replica set or sharded cluster.
        def write_both(session) -> Any:
            self._history(employee_id).insert_one(dict(doc), session=session)
            return self._attendance().insert_one(dict(doc), session=session).inserted_id

        with store_errors("create_attendance"):
            with self._conn_factory.client.start_session() as session:
                inserted_id = session.with_transaction(write_both)
        return str(inserted_id)

    def update(self, record_id: str, record: AttendanceRecord) -> None:
        changes: Dict[str, Optional[str]] = {
            "status": record.status.value,
            "requestedStatus": record.requested_status.value,
            "timeIn": record.time_in,
        }
        with store_errors("update_attendance"):
            result = self._attendance().update_one(id_filter(record_id), {"$set": changes})
        if result.matched_count == 0:
            raise NotFoundError(f"Attendance record {record_id} not found")

from __future__ import annotations

import logging

from pymongo import ASCENDING

from ..core.constants import ATTENDANCE_COLLECTION, EMPLOYEES_COLLECTION
from .connection import DatabaseConnection
from .mongo_base import store_errors

logger = logging.getLogger(__name__)


def ensure_indexes(conn: DatabaseConnection) -> None:
    """Create the indexes the attendance sheet queries rely on (idempotent).

    The (employeeId, date) index is not unique: one record per employee per
    day is only kept by the eligible-employee filter.
    """
    db = conn.db()
    with store_errors("ensure_indexes"):
        db[ATTENDANCE_COLLECTION].create_index([("date", ASCENDING)], name="date_1")
        db[ATTENDANCE_COLLECTION].create_index(
            [("employeeId", ASCENDING), ("date", ASCENDING)], name="employeeId_1_date_1"
        )
        db[EMPLOYEES_COLLECTION].create_index([("employeeId", ASCENDING)], name="employeeId_1")
    logger.info("Indexes ready on %s", db.name)


def list_collections(conn: DatabaseConnection) -> list[str]:
    with store_errors("list_collections"):
        return sorted(conn.db().list_collection_names())

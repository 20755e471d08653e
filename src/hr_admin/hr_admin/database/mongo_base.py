from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Union

from bson import ObjectId
from pymongo.errors import PyMongoError

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translate driver failures into StoreError for the service layer."""
    try:
        yield
    except PyMongoError as e:
        logger.error("Store operation %s failed: %s", operation, e)
        raise StoreError(f"{operation} failed") from e


def to_doc_id(value: str) -> Union[ObjectId, str]:
    """Document ids are ObjectIds when created by us, but imported documents may use plain strings."""
    if isinstance(value, ObjectId):
        return value
    if ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def id_filter(value: str) -> Dict[str, Any]:
    return {"_id": to_doc_id(value)}


def str_id(doc: Dict[str, Any]) -> str:
    return str(doc["_id"])

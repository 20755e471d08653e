from __future__ import annotations

import logging
from functools import wraps

from flask import current_app, jsonify

from ..core.exceptions import NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def ok(message: str = "OK", status: int = 200, **data):
    return jsonify({"success": True, "message": message, **data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_errors(view):
    """Map domain errors raised by a view onto JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except StoreError as e:
            logger.error("%s failed: %s", view.__name__, e)
            if bool(current_app.config.get("DEBUG", False)):
                return fail(f"Database error: {e}", 502)
            return fail("Database error, please try again", 502)

    return wrapper

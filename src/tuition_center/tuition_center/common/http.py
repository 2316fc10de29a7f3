from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    """Request JSON object; a missing body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Dữ liệu gửi lên phải là một đối tượng JSON")
    return data


def api_errors(fallback_message: str):
    """Translate domain errors into JSON responses.

    Anything else is logged and reported as a 500 with ``fallback_message``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return error_response(str(e), 400)
            except NotFoundError as e:
                return error_response(str(e), 404)
            except ConflictError as e:
                return error_response(str(e), 409)
            except Exception:
                logger.exception("Unhandled error in %s", view.__name__)
                return error_response(fallback_message, 500)

        return wrapper

    return decorator

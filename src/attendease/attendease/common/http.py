from __future__ import annotations

from functools import wraps
from typing import Any

from flask import current_app, jsonify, request

from ..core.constants import GENERIC_ERROR_MESSAGE
from ..core.exceptions import DomainError


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(message: str, status: int):
    return jsonify({"message": message}), status


def json_endpoint(view):
    """Translate domain errors into ``{"message": ...}`` responses.

    Unexpected failures are logged with the traceback and answered with a
    generic 500 so store details never reach the client.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            current_app.logger.info("%s rejected (%s): %s", request.endpoint, e.status_code, e.message)
            return error_response(e.message, e.status_code)
        except Exception:
            current_app.logger.exception("Unhandled error in %s", request.endpoint)
            return error_response(GENERIC_ERROR_MESSAGE, 500)

    return wrapper

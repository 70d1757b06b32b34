from typing import Dict
from fastapi import HTTPException, status
import logging

logger = logging.getLogger(__name__)


def error_response(
    message: str,
    field_errors: Dict[str, str],
    code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
) -> HTTPException:
    """Return an HTTPException with a ``{"message", "field_errors"}`` detail.

    Client mistakes are logged as warnings, server-side failures as errors.
    """
    level = logging.ERROR if code >= 500 else logging.WARNING
    logger.log(level, "%s %s", message, field_errors)
    detail = {"message": message, "field_errors": field_errors}
    return HTTPException(status_code=code, detail=detail)


def not_found(entity: str, field: str) -> HTTPException:
    """404 for a lookup by id, e.g. ``not_found("Artist", "artist_id")``."""
    return error_response(
        f"{entity} not found",
        {field: "Not found"},
        status.HTTP_404_NOT_FOUND,
    )

import logging
from sqlalchemy import event
from sqlalchemy.orm.attributes import NO_VALUE

from .. import models

logger = logging.getLogger(__name__)

_registered = False


def _status_change(target, value, oldvalue, initiator):  # noqa: ANN001
    """Log booking-request status decisions as they hit the ORM."""
    if oldvalue is NO_VALUE or oldvalue is None or oldvalue == value:
        return value
    logger.info(
        "BookingRequest id=%s status changed from %s to %s",
        getattr(target, "id", "unknown"),
        getattr(oldvalue, "value", oldvalue),
        getattr(value, "value", value),
    )
    return value


def register_status_listeners() -> None:
    """Attach the status listener to ``BookingRequest`` once per process."""
    global _registered
    if _registered:
        return
    event.listen(
        models.BookingRequest.status,  # type: ignore[arg-type]
        "set",
        _status_change,
        retval=False,
    )
    _registered = True

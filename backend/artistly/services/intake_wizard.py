"""Three-step onboarding wizard for new artists.

Step 1 collects basic info (name, bio, photo), step 2 categories and
languages, step 3 pricing and location. All transitions are pure: they take
a ``WizardState`` and return a new one, leaving rendering to the client.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, Optional, Protocol

from ..core.config import settings
from ..sample_data import FEE_RANGES
from ..schemas.onboarding import ArtistFormData, WizardState

logger = logging.getLogger(__name__)

FIRST_STEP = 1
LAST_STEP = 3

STEP_FIELDS: Dict[int, tuple[str, ...]] = {
    1: ("name", "bio", "image_url"),
    2: ("category", "languages"),
    3: ("fee_range", "location"),
}

NAME_MIN_LENGTH = 2
BIO_MIN_LENGTH = 50
LOCATION_MIN_LENGTH = 2


class IntakeValidationError(ValueError):
    """Raised when a submission still has invalid fields."""

    def __init__(self, field_errors: Dict[str, str]) -> None:
        super().__init__("Artist application has invalid fields")
        self.field_errors = field_errors


class WizardNotReady(ValueError):
    """Raised when submitting from a step other than the last, or twice."""


class SubmissionBackend(Protocol):
    """Receives completed artist applications."""

    def submit(self, form: ArtistFormData) -> None: ...


class LoggingSubmissionBackend:
    """Stand-in backend: logs the application and keeps nothing."""

    def submit(self, form: ArtistFormData) -> None:
        logger.info("Artist application submitted: %s", form.model_dump())


def _text_rule(required: str, min_length: int, too_short: str) -> Callable[[Any], Optional[str]]:
    def check(value: Any) -> Optional[str]:
        text = value or ""
        if not text:
            return required
        if len(text) < min_length:
            return too_short
        return None

    return check


def _list_rule(message: str) -> Callable[[Any], Optional[str]]:
    def check(value: Any) -> Optional[str]:
        return None if value else message

    return check


def _check_fee_range(value: Any) -> Optional[str]:
    if not value:
        return "Fee range is required"
    if value not in FEE_RANGES:
        return "Please select a valid fee range"
    return None


FIELD_RULES: Dict[str, Callable[[Any], Optional[str]]] = {
    "name": _text_rule(
        "Name is required",
        NAME_MIN_LENGTH,
        f"Name must be at least {NAME_MIN_LENGTH} characters",
    ),
    "bio": _text_rule(
        "Bio is required",
        BIO_MIN_LENGTH,
        f"Bio must be at least {BIO_MIN_LENGTH} characters",
    ),
    "category": _list_rule("Please select at least one category"),
    "languages": _list_rule("Please select at least one language"),
    "fee_range": _check_fee_range,
    "location": _text_rule(
        "Location is required",
        LOCATION_MIN_LENGTH,
        f"Location must be at least {LOCATION_MIN_LENGTH} characters",
    ),
    # image_url is optional and free-form
}


def validate_field(field: str, value: Any) -> Optional[str]:
    rule = FIELD_RULES.get(field)
    return rule(value) if rule else None


def _validate(values: ArtistFormData, fields: tuple[str, ...]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for field in fields:
        message = validate_field(field, getattr(values, field))
        if message:
            errors[field] = message
    return errors


def validate_form(values: ArtistFormData) -> Dict[str, str]:
    """Return ``{field: message}`` for every invalid field (empty when valid)."""
    return _validate(values, tuple(FIELD_RULES))


def validate_step(state: WizardState) -> WizardState:
    """Validate only the fields shown on the current step."""
    step_errors = _validate(state.values, STEP_FIELDS[state.current_step])
    errors = {
        field: message
        for field, message in state.errors.items()
        if field not in STEP_FIELDS[state.current_step]
    }
    errors.update(step_errors)
    return state.model_copy(update={"errors": errors})


def next_step(state: WizardState) -> WizardState:
    return state.model_copy(update={"current_step": min(state.current_step + 1, LAST_STEP)})


def prev_step(state: WizardState) -> WizardState:
    return state.model_copy(update={"current_step": max(state.current_step - 1, FIRST_STEP)})


def update_fields(state: WizardState, **changes: Any) -> WizardState:
    """Apply field changes and re-validate just the touched fields."""
    unknown = set(changes) - set(ArtistFormData.model_fields)
    if unknown:
        raise KeyError(f"Unknown onboarding fields: {', '.join(sorted(unknown))}")
    values = state.values.model_copy(update=changes)
    errors = dict(state.errors)
    for field in changes:
        message = validate_field(field, getattr(values, field))
        if message:
            errors[field] = message
        else:
            errors.pop(field, None)
    return state.model_copy(update={"values": values, "errors": errors})


def _toggle(items: list[str], item: str) -> list[str]:
    if item in items:
        return [i for i in items if i != item]
    return [*items, item]


def toggle_category(state: WizardState, category: str) -> WizardState:
    return update_fields(state, category=_toggle(state.values.category, category))


def toggle_language(state: WizardState, language: str) -> WizardState:
    return update_fields(state, languages=_toggle(state.values.languages, language))


def reset(state: WizardState) -> WizardState:
    """Back to step 1 for another application, keeping the entered values."""
    return state.model_copy(update={"current_step": FIRST_STEP, "errors": {}, "submitted": False})


async def submit(
    state: WizardState,
    backend: SubmissionBackend | None = None,
    *,
    delay: float | None = None,
) -> WizardState:
    """Submit the application once every field validates.

    Raises ``WizardNotReady`` unless the wizard is on its last step and not
    yet submitted, and ``IntakeValidationError`` with all field messages when
    any field is invalid. After the simulated latency the form is handed to
    ``backend`` and the wizard moves to its terminal submitted state.
    """
    if state.submitted:
        raise WizardNotReady("Artist application was already submitted")
    if state.current_step != LAST_STEP:
        raise WizardNotReady(f"Artist application can only be submitted from step {LAST_STEP}")
    errors = validate_form(state.values)
    if errors:
        logger.warning("Rejected artist application: %s", errors)
        raise IntakeValidationError(errors)
    if delay is None:
        delay = settings.INTAKE_SUBMIT_DELAY_SECONDS
    backend = backend or LoggingSubmissionBackend()

    await asyncio.sleep(delay)

    backend.submit(state.values)
    return state.model_copy(update={"errors": {}, "submitted": True})

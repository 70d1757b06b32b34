from fastapi import APIRouter, Depends, status
from fastapi.responses import ORJSONResponse

from .. import schemas
from ..services import intake_wizard
from ..utils import error_response
from .dependencies import get_submission_backend

router = APIRouter(
    tags=["Onboarding"],
    default_response_class=ORJSONResponse,
)


@router.post("/wizard/next", response_model=schemas.WizardState)
def wizard_next(state: schemas.WizardState):
    return intake_wizard.next_step(state)

@router.post("/wizard/back", response_model=schemas.WizardState)
def wizard_back(state: schemas.WizardState):
    return intake_wizard.prev_step(state)

@router.post("/wizard/validate", response_model=schemas.WizardState)
def wizard_validate(state: schemas.WizardState):
    """Validate the fields of the wizard's current step."""
    return intake_wizard.validate_step(state)

@router.post("/validate", response_model=schemas.ValidationResult)
def validate_application(form: schemas.ArtistFormData):
    field_errors = intake_wizard.validate_form(form)
    return {"valid": not field_errors, "field_errors": field_errors}

@router.post(
    "/",
    response_model=schemas.SubmissionReceipt,
    status_code=status.HTTP_201_CREATED,
    summary="Submit an artist application",
)
async def submit_application(
    form: schemas.ArtistFormData,
    backend: intake_wizard.SubmissionBackend = Depends(get_submission_backend),
):
    try:
        await intake_wizard.submit(schemas.WizardState(current_step=intake_wizard.LAST_STEP, values=form), backend)
    except intake_wizard.IntakeValidationError as exc:
        raise error_response("Invalid artist application", exc.field_errors)
    return {
        "submitted": True,
        "name": form.name,
        "message": (
            "Thank you for submitting your artist profile. We'll review your "
            "application and get back to you within 2-3 business days."
        ),
    }

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class ArtistFormData(BaseModel):
    """Onboarding form values.

    Missing or ``null`` fields arrive as empty values so the wizard reports
    them with its own per-field messages.
    """

    name: str = ""
    bio: str = ""
    category: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    fee_range: str = ""
    location: str = ""
    image_url: Optional[str] = None

    @field_validator("name", "bio", "fee_range", "location", mode="before")
    def null_text_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("category", "languages", mode="before")
    def null_list_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class WizardState(BaseModel):
    current_step: int = Field(default=1, ge=1, le=3)
    values: ArtistFormData = Field(default_factory=ArtistFormData)
    errors: Dict[str, str] = Field(default_factory=dict)
    submitted: bool = False


class ValidationResult(BaseModel):
    valid: bool
    field_errors: Dict[str, str]


class SubmissionReceipt(BaseModel):
    submitted: bool
    name: str
    message: str

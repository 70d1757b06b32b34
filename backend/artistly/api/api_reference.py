"""Static option lists used by the catalog filters and the onboarding form."""

from fastapi import APIRouter, Response

from .. import sample_data

router = APIRouter()

_CACHE_CONTROL = "public, max-age=3600"


@router.get("/locations", response_model=list[str])
def list_locations(response: Response):
    response.headers["Cache-Control"] = _CACHE_CONTROL
    return sample_data.LOCATIONS


@router.get("/fee-ranges", response_model=list[str])
def list_fee_ranges(response: Response):
    response.headers["Cache-Control"] = _CACHE_CONTROL
    return sample_data.FEE_RANGES


@router.get("/languages", response_model=list[str])
def list_languages(response: Response):
    response.headers["Cache-Control"] = _CACHE_CONTROL
    return sample_data.LANGUAGES

from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from account_service.app.services.reference_data import ReferenceData
from account_service.depends import get_reference_data

router = APIRouter(prefix="/reference", tags=["Reference"])


class LanguageResponse(BaseModel):
    code: str
    name: str
    iso639: str


class TimezoneResponse(BaseModel):
    code: str
    name: str
    utc_offset: int
    daylight_saving: int


@router.get("/languages", status_code=status.HTTP_200_OK, response_model=List[LanguageResponse])
async def list_languages(reference_data: ReferenceData = Depends(get_reference_data)):
    return [
        LanguageResponse(
            code=lang.code, name=lang.name, iso639=reference_data.to_iso639(lang.code)
        )
        for lang in reference_data.languages
    ]


@router.get("/timezones", status_code=status.HTTP_200_OK, response_model=List[TimezoneResponse])
async def list_timezones(reference_data: ReferenceData = Depends(get_reference_data)):
    return [
        TimezoneResponse(
            code=t.code, name=t.name, utc_offset=t.utc_offset, daylight_saving=t.daylight_saving
        )
        for t in reference_data.timezones
    ]

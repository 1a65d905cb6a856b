# folklore_http_api/routers/languages.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from folklore_http_api.db.session import get_session
from folklore_http_api.repositories.languages import LanguagesRepository
from folklore_http_api.schemas.common import ErrorResponse
from folklore_http_api.services.languages_service import LanguagesService

router = APIRouter(prefix="/languages", tags=["languages"])


def get_languages_service(session: Session = Depends(get_session)) -> LanguagesService:
    return LanguagesService(LanguagesRepository(session))


@router.get(
    "",
    response_model=List[str],
    summary="List languages",
    description=(
        "Every language used by a story or proverb, merged with the fixed "
        "reference set of Indian languages. Used to populate the frontend selectors."
    ),
    responses={500: {"model": ErrorResponse}},
)
def list_languages(
    service: LanguagesService = Depends(get_languages_service),
) -> List[str]:
    return service.list_languages()

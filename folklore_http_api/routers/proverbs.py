# folklore_http_api/routers/proverbs.py

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from folklore_http_api.db.session import get_session
from folklore_http_api.repositories.proverbs import ProverbsRepository
from folklore_http_api.schemas.common import ErrorResponse, MessageResponse
from folklore_http_api.schemas.proverbs import ProverbCreate, ProverbRead
from folklore_http_api.services.proverbs_service import ProverbsService

router = APIRouter(prefix="/proverbs", tags=["proverbs"])


def get_proverbs_service(session: Session = Depends(get_session)) -> ProverbsService:
    return ProverbsService(ProverbsRepository(session))


@router.get(
    "",
    response_model=List[ProverbRead],
    summary="List proverbs",
    description="Return shared proverbs, newest first, optionally filtered by language and/or region.",
    responses={500: {"model": ErrorResponse}},
)
def list_proverbs(
    *,
    service: ProverbsService = Depends(get_proverbs_service),
    language: Optional[str] = Query(None, description="Exact language match."),
    region: Optional[str] = Query(None, description="Exact region match, e.g. 'Chennai'."),
) -> List[ProverbRead]:
    return service.list_proverbs(language=language, region=region)


@router.post(
    "",
    response_model=MessageResponse,
    summary="Share a proverb",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_proverb(
    *,
    payload: ProverbCreate,
    service: ProverbsService = Depends(get_proverbs_service),
) -> MessageResponse:
    return service.create_proverb(payload)

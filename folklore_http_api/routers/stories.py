# folklore_http_api/routers/stories.py

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from folklore_http_api.db.session import get_session
from folklore_http_api.repositories.stories import StoriesRepository
from folklore_http_api.schemas.common import ErrorResponse, MessageResponse
from folklore_http_api.schemas.stories import StoryCreate, StoryRead
from folklore_http_api.services.stories_service import StoriesService

router = APIRouter(prefix="/stories", tags=["stories"])


def get_stories_service(session: Session = Depends(get_session)) -> StoriesService:
    """
    Dependency-injected factory for StoriesService.

    Tests can swap the implementation via ``app.dependency_overrides``.
    """
    return StoriesService(StoriesRepository(session))


@router.get(
    "",
    response_model=List[StoryRead],
    summary="List stories",
    description="Return shared stories, newest first, optionally filtered by language and/or category.",
    responses={500: {"model": ErrorResponse}},
)
def list_stories(
    *,
    service: StoriesService = Depends(get_stories_service),
    language: Optional[str] = Query(None, description="Exact language match, e.g. 'Tamil'."),
    category: Optional[str] = Query(None, description="Exact category match, e.g. 'Fable'."),
) -> List[StoryRead]:
    return service.list_stories(language=language, category=category)


@router.post(
    "",
    response_model=MessageResponse,
    summary="Share a story",
    description=(
        "Store a new story. `title` and `content` are required; author, language "
        "and category default to 'Anonymous', 'English' and 'General'."
    ),
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_story(
    *,
    payload: StoryCreate,
    service: StoriesService = Depends(get_stories_service),
) -> MessageResponse:
    return service.create_story(payload)

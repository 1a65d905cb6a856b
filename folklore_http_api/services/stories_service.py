# folklore_http_api/services/stories_service.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from folklore_http_api.db.models import DEFAULT_AUTHOR, DEFAULT_CATEGORY, DEFAULT_LANGUAGE
from folklore_http_api.logging import get_logger
from folklore_http_api.repositories.filters import EqualityFilters
from folklore_http_api.repositories.stories import StoriesRepository
from folklore_http_api.schemas.common import MessageResponse
from folklore_http_api.schemas.stories import StoryCreate, StoryRead

from .errors import StorageError
from .fields import clean_text, require_text, text_or_default

logger = get_logger(__name__)


class StoriesService:
    """
    High-level service for shared stories.

    Responsibilities:
    - Validate create payloads and apply field defaults.
    - Delegate persistence to `StoriesRepository`.
    - Translate SQLAlchemy failures into `StorageError`.
    """

    def __init__(self, repo: StoriesRepository) -> None:
        self._repo = repo

    def list_stories(
        self,
        *,
        language: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[StoryRead]:
        """
        List stories, newest first, optionally filtered by language and/or
        category. Blank filter values are ignored.
        """
        filters = EqualityFilters.from_values(language=language, category=category)
        try:
            rows = self._repo.list_stories(**filters.as_dict())
        except SQLAlchemyError as exc:
            logger.error("storage_error", operation="list_stories", error=str(exc))
            raise StorageError.from_exc(exc) from exc

        logger.info(
            "stories_listed",
            filters=filters.combination,
            count=len(rows),
        )
        return [StoryRead.model_validate(row) for row in rows]

    def create_story(self, payload: StoryCreate) -> MessageResponse:
        """
        Store a new story. Title and content are required; everything else
        falls back to its default when missing or blank.
        """
        title = require_text(payload.title, field="title", message="Title is required")
        content = require_text(payload.content, field="content", message="Content is required")

        try:
            story = self._repo.create(
                title=title,
                content=content,
                author=text_or_default(payload.author, DEFAULT_AUTHOR),
                language=text_or_default(payload.language, DEFAULT_LANGUAGE),
                category=text_or_default(payload.category, DEFAULT_CATEGORY),
                tags=clean_text(payload.tags),
            )
            self._repo.session.commit()
        except SQLAlchemyError as exc:
            self._repo.session.rollback()
            logger.error("storage_error", operation="create_story", error=str(exc))
            raise StorageError.from_exc(exc) from exc

        logger.info("story_created", story_id=story.id, language=story.language)
        return MessageResponse(message="Story added successfully")

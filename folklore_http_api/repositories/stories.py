# folklore_http_api/repositories/stories.py

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..db import models
from .filters import EqualityFilters, build_list_query


class StoriesRepository:
    """
    Thin data-access layer around the Story model.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list_stories(
        self,
        *,
        language: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Sequence[models.Story]:
        """
        Return stories matching the given filters, newest first.
        """
        filters = EqualityFilters.from_values(language=language, category=category)
        stmt = build_list_query(models.Story, filters)
        return list(self.session.execute(stmt).scalars().all())

    def count(self) -> int:
        stmt = select(func.count()).select_from(models.Story)
        return int(self.session.execute(stmt).scalar_one())

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(
        self,
        *,
        title: str,
        content: str,
        author: str,
        language: str,
        category: str,
        tags: str,
    ) -> models.Story:
        """
        Add a new Story to the session and flush it. Committing is left to the
        caller.
        """
        story = models.Story(
            title=title,
            content=content,
            author=author,
            language=language,
            category=category,
            tags=tags,
        )
        self.session.add(story)
        self.session.flush()
        return story

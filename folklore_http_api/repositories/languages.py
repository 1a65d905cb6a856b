# folklore_http_api/repositories/languages.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select, union
from sqlalchemy.orm import Session

from ..db import models


class LanguagesRepository:
    """
    Read-only view over the language values used by stories and proverbs.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def distinct_languages(self) -> List[Optional[str]]:
        """
        Return every distinct ``language`` value stored in either table.

        Values come back exactly as stored; NULL and blank entries are
        filtered by the caller.
        """
        stmt = union(
            select(models.Story.language).distinct(),
            select(models.Proverb.language).distinct(),
        )
        return [row[0] for row in self.session.execute(stmt).all()]

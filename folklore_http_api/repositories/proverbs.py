# folklore_http_api/repositories/proverbs.py

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..db import models
from .filters import EqualityFilters, build_list_query


class ProverbsRepository:
    """
    Thin data-access layer around the Proverb model.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def list_proverbs(
        self,
        *,
        language: Optional[str] = None,
        region: Optional[str] = None,
    ) -> Sequence[models.Proverb]:
        filters = EqualityFilters.from_values(language=language, region=region)
        stmt = build_list_query(models.Proverb, filters)
        return list(self.session.execute(stmt).scalars().all())

    def count(self) -> int:
        stmt = select(func.count()).select_from(models.Proverb)
        return int(self.session.execute(stmt).scalar_one())

    def create(
        self,
        *,
        proverb: str,
        meaning: str,
        language: str,
        region: str,
        contributor: str,
    ) -> models.Proverb:
        row = models.Proverb(
            proverb=proverb,
            meaning=meaning,
            language=language,
            region=region,
            contributor=contributor,
        )
        self.session.add(row)
        self.session.flush()
        return row

# folklore_http_api/services/proverbs_service.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from folklore_http_api.db.models import DEFAULT_CONTRIBUTOR, DEFAULT_LANGUAGE, DEFAULT_REGION
from folklore_http_api.logging import get_logger
from folklore_http_api.repositories.filters import EqualityFilters
from folklore_http_api.repositories.proverbs import ProverbsRepository
from folklore_http_api.schemas.common import MessageResponse
from folklore_http_api.schemas.proverbs import ProverbCreate, ProverbRead

from .errors import StorageError
from .fields import clean_text, require_text, text_or_default

logger = get_logger(__name__)


class ProverbsService:
    """
    High-level service for shared proverbs.
    """

    def __init__(self, repo: ProverbsRepository) -> None:
        self._repo = repo

    def list_proverbs(
        self,
        *,
        language: Optional[str] = None,
        region: Optional[str] = None,
    ) -> List[ProverbRead]:
        filters = EqualityFilters.from_values(language=language, region=region)
        try:
            rows = self._repo.list_proverbs(**filters.as_dict())
        except SQLAlchemyError as exc:
            logger.error("storage_error", operation="list_proverbs", error=str(exc))
            raise StorageError.from_exc(exc) from exc

        logger.info("proverbs_listed", filters=filters.combination, count=len(rows))
        return [ProverbRead.model_validate(row) for row in rows]

    def create_proverb(self, payload: ProverbCreate) -> MessageResponse:
        text = require_text(
            payload.proverb, field="proverb", message="Proverb text is required"
        )

        try:
            row = self._repo.create(
                proverb=text,
                meaning=clean_text(payload.meaning),
                language=text_or_default(payload.language, DEFAULT_LANGUAGE),
                region=text_or_default(payload.region, DEFAULT_REGION),
                contributor=text_or_default(payload.contributor, DEFAULT_CONTRIBUTOR),
            )
            self._repo.session.commit()
        except SQLAlchemyError as exc:
            self._repo.session.rollback()
            logger.error("storage_error", operation="create_proverb", error=str(exc))
            raise StorageError.from_exc(exc) from exc

        logger.info("proverb_created", proverb_id=row.id, language=row.language)
        return MessageResponse(message="Proverb added successfully")

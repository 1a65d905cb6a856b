# folklore_http_api/services/languages_service.py

from __future__ import annotations

from typing import List, Tuple

from sqlalchemy.exc import SQLAlchemyError

from folklore_http_api.logging import get_logger
from folklore_http_api.repositories.languages import LanguagesRepository

from .errors import StorageError

logger = get_logger(__name__)


# Always offered in the language pickers, even before anything is shared.
REFERENCE_LANGUAGES: Tuple[str, ...] = (
    "Hindi",
    "English",
    "Tamil",
    "Telugu",
    "Bengali",
    "Marathi",
    "Gujarati",
    "Punjabi",
    "Malayalam",
    "Kannada",
    "Urdu",
    "Odia",
    "Assamese",
    "Sanskrit",
    "Other",
)


class LanguagesService:
    def __init__(self, repo: LanguagesRepository) -> None:
        self._repo = repo

    def list_languages(self) -> List[str]:
        """
        Languages used by any story or proverb, plus the reference set,
        deduplicated and sorted ascending.
        """
        try:
            stored = self._repo.distinct_languages()
        except SQLAlchemyError as exc:
            logger.error("storage_error", operation="list_languages", error=str(exc))
            raise StorageError.from_exc(exc) from exc

        in_use = {lang for lang in stored if lang and lang.strip()}
        languages = sorted(in_use.union(REFERENCE_LANGUAGES))
        logger.debug("languages_listed", stored=len(in_use), count=len(languages))
        return languages

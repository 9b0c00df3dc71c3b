import logging
import threading
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from autocorrect.common.config import Settings, SettingsError, load_settings
from autocorrect.spellcheck.corrector import Corrector
from autocorrect.spellcheck.dictionary import DictionaryError, load_dictionary

logger = logging.getLogger(__name__)

app = FastAPI(title="Autocorrect API")


class CorrectionResponse(BaseModel):
    word: str
    suggestions: list[str]


class SpellcheckResponse(BaseModel):
    suggestion: str | None


class CorrectionService:
    def __init__(self, *, settings: Settings | None = None, corrector: Corrector | None = None) -> None:
        self._settings = settings
        self._corrector = corrector
        self._lock = threading.Lock()

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    @property
    def dictionary_path(self) -> Path:
        return Path(self.settings.dictionary_path)

    def get_corrector(self) -> Corrector:
        if self._corrector is not None:
            return self._corrector
        with self._lock:
            if self._corrector is None:
                dictionary = load_dictionary(self.dictionary_path)
                self._corrector = Corrector(dictionary, limit=self.settings.suggestion_limit)
        return self._corrector

    def corrections(self, word: str, limit: int | None = None) -> CorrectionResponse:
        corrector = self.get_corrector()
        normalized = corrector.engine.normalize_word(word)
        return CorrectionResponse(word=normalized, suggestions=corrector.corrections(normalized, limit=limit))

    def suggest(self, q: str) -> SpellcheckResponse:
        return SpellcheckResponse(suggestion=self.get_corrector().correct_text(q))


correction_service = CorrectionService()


def _unavailable(exc: DictionaryError | SettingsError) -> HTTPException:
    logger.error("corrector unavailable: %s", exc)
    return HTTPException(status_code=503, detail=str(exc))


@app.get("/corrections", response_model=CorrectionResponse)
def corrections(
    word: str = Query(..., min_length=1, max_length=64),
    limit: int | None = Query(None, ge=1, le=100),
) -> CorrectionResponse:
    try:
        return correction_service.corrections(word, limit=limit)
    except (DictionaryError, SettingsError) as exc:
        raise _unavailable(exc) from exc


@app.get("/spellcheck", response_model=SpellcheckResponse)
def spellcheck(
    q: str = Query(..., min_length=1),
) -> SpellcheckResponse:
    try:
        return correction_service.suggest(q)
    except (DictionaryError, SettingsError) as exc:
        raise _unavailable(exc) from exc

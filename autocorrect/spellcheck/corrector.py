import logging
import re
from typing import Callable, Iterable

from autocorrect.spellcheck.dictionary import Dictionary
from autocorrect.spellcheck.engine import WORD_RE, SpellCheckerEngine

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 10

StageHook = Callable[[str, int], None]
Stage = Callable[[str], set[str] | None]


class Corrector:
    """Resolves a word to its most probable corrections from a Dictionary.

    The search runs an ordered chain of stages: exact match, known words one
    edit away, known words two edits away, then the word itself. The first
    stage to return a non-empty set wins. Candidates are ranked by descending
    probability; equally probable words are ordered alphabetically.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        *,
        limit: int = MAX_SUGGESTIONS,
        engine: SpellCheckerEngine | None = None,
        on_stage: StageHook | None = None,
    ) -> None:
        if dictionary is None:
            raise ValueError("a loaded dictionary is required")
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        self.dictionary = dictionary
        self.limit = limit
        self.engine = engine or SpellCheckerEngine()
        self.on_stage = on_stage
        self.stages: tuple[tuple[str, Stage], ...] = (
            ("exact", self._exact),
            ("distance-1", self._distance_one),
            ("distance-2", self._distance_two),
        )

    def _exact(self, word: str) -> set[str] | None:
        return {word} if self.dictionary.contains(word) else None

    def _distance_one(self, word: str) -> set[str] | None:
        return self.dictionary.known(self.engine.edits1(word)) or None

    def _distance_two(self, word: str) -> set[str] | None:
        return self.dictionary.known(self.engine.edits2(word)) or None

    def _notify(self, stage: str, count: int) -> None:
        if self.on_stage is None:
            logger.debug("stage %s found %s candidates", stage, count)
            return
        try:
            self.on_stage(stage, count)
        except Exception:
            logger.exception("stage hook failed for stage %s", stage)

    def candidates(self, word: str) -> set[str]:
        for name, stage in self.stages:
            found = stage(word)
            self._notify(name, len(found) if found else 0)
            if found:
                return found
        self._notify("fallback", 1)
        return {word}

    def rank(self, candidates: Iterable[str], limit: int | None = None) -> list[str]:
        limit = self.limit if limit is None else limit
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        ranked = sorted(candidates, key=lambda word: (-self.dictionary.probability(word), word))
        return ranked[:limit]

    def corrections(self, word: str, limit: int | None = None) -> list[str]:
        return self.rank(self.candidates(word), limit=limit)

    def correction(self, word: str) -> str:
        return self.corrections(word, limit=1)[0]

    def correct_text(self, text: str) -> str | None:
        corrected: dict[str, str] = {}

        def _replace(match: re.Match[str]) -> str:
            token = match.group(0)
            word = self.engine.normalize_word(token)
            if word not in corrected:
                corrected[word] = self.correction(word)
            if corrected[word] == word:
                return token
            return self.engine.apply_case(token, corrected[word])

        suggestion = WORD_RE.sub(_replace, text or "")
        if suggestion == text:
            return None
        return suggestion

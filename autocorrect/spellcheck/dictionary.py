import logging
import math
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Mapping

from autocorrect.spellcheck.engine import normalize_word

logger = logging.getLogger(__name__)


class AutocorrectError(Exception):
    pass


class DictionaryError(AutocorrectError):
    """The dictionary could not be built; no query can be answered."""


@dataclass(frozen=True)
class LexiconEntry:
    word: str
    count: int = 0


class Dictionary:
    """Read-only word -> occurrence count mapping.

    The corpus total is summed once here so that probability lookups never
    touch mutable state after construction.
    """

    def __init__(self, counts: Mapping[str, int]) -> None:
        if not counts:
            raise DictionaryError("dictionary has no words")
        entries: dict[str, int] = {}
        for word, count in counts.items():
            if not isinstance(word, str) or not word:
                raise DictionaryError(f"invalid dictionary word: {word!r}")
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise DictionaryError(f"invalid count for {word!r}: {count!r}")
            entries[word] = count
        self._counts = entries
        self._total_count = sum(entries.values())

    @classmethod
    def from_entries(cls, entries: Iterable[LexiconEntry]) -> "Dictionary":
        counts: Counter[str] = Counter()
        for entry in entries:
            counts[entry.word] += entry.count
        return cls(counts)

    @property
    def total_count(self) -> int:
        return self._total_count

    def contains(self, word: str) -> bool:
        return word in self._counts

    def count(self, word: str) -> int:
        return self._counts.get(word, 0)

    def probability(self, word: str) -> float:
        if not self._total_count:
            return 0.0
        return self.count(word) / self._total_count

    def known(self, words: Iterable[str]) -> set[str]:
        return {word for word in words if word in self._counts}

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __len__(self) -> int:
        return len(self._counts)


def _read_lines(path: Path) -> Iterator[str]:
    with path.open("rb") as handle:
        for raw_line in handle:
            line = raw_line.decode("utf-8", errors="ignore").strip()
            if line:
                yield line


def _parse_ranked_line(line: str) -> LexiconEntry | None:
    # <rank> <word> <frequency>; the rank is not used
    parts = line.split()
    if len(parts) < 3:
        return None

    word = normalize_word(parts[1])
    if not word:
        return None

    count_token = parts[2].replace(",", "")
    try:
        count = int(count_token)
    except ValueError:
        try:
            frequency = float(count_token)
        except ValueError:
            return None
        if not math.isfinite(frequency):
            return None
        count = int(frequency)
    if count < 0:
        return None

    return LexiconEntry(word=word, count=count)


def parse_dictionary_lines(lines: Iterable[str]) -> tuple[list[LexiconEntry], int]:
    entries: list[LexiconEntry] = []
    skipped = 0
    for line in lines:
        entry = _parse_ranked_line(line)
        if entry is None:
            skipped += 1
            continue
        entries.append(entry)
    return entries, skipped


def load_dictionary(path: str | Path) -> Dictionary:
    path = Path(path)
    try:
        entries, skipped = parse_dictionary_lines(_read_lines(path))
    except OSError as exc:
        raise DictionaryError(f"cannot read dictionary {path}: {exc}") from exc

    if skipped:
        logger.warning("skipped %s malformed lines in %s", skipped, path)
    if not entries:
        raise DictionaryError(f"dictionary {path} contains no usable words")

    dictionary = Dictionary.from_entries(entries)
    logger.info("loaded %s words from %s (total count %s)", len(dictionary), path, dictionary.total_count)
    return dictionary

import re
from typing import Iterable

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
WORD_RE = re.compile(r"\b[a-zA-Z]{2,32}\b")


class SpellCheckerEngine:
    """Generates the strings reachable from a word by single-character edits.

    Every operator works on the word's character-boundary splits, so the start
    and end of the word need no special handling.
    """

    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.letters = tuple(alphabet)

    def normalize_word(self, word: str) -> str:
        return (word or "").strip().lower()

    def split_word(self, word: str) -> list[tuple[str, str]]:
        # "fo" -> ("", "fo"), ("f", "o"), ("fo", "")
        return [(word[:idx], word[idx:]) for idx in range(len(word) + 1)]

    def deletions(self, splits: Iterable[tuple[str, str]]) -> list[str]:
        return [prefix + suffix[1:] for prefix, suffix in splits if suffix]

    def transpositions(self, splits: Iterable[tuple[str, str]]) -> list[str]:
        return [
            prefix + suffix[1] + suffix[0] + suffix[2:]
            for prefix, suffix in splits
            if len(suffix) > 1
        ]

    def replacements(self, splits: Iterable[tuple[str, str]]) -> list[str]:
        return [
            prefix + letter + suffix[1:]
            for prefix, suffix in splits
            if suffix
            for letter in self.letters
        ]

    def insertions(self, splits: Iterable[tuple[str, str]]) -> list[str]:
        return [prefix + letter + suffix for prefix, suffix in splits for letter in self.letters]

    def edits1(self, word: str) -> set[str]:
        splits = self.split_word(word)
        edits: set[str] = set()
        edits.update(self.deletions(splits))
        edits.update(self.transpositions(splits))
        edits.update(self.replacements(splits))
        edits.update(self.insertions(splits))
        edits.discard("")
        return edits

    def edits2(self, word: str) -> set[str]:
        first = self.edits1(word)
        edits = set(first)
        for edit in first:
            edits.update(self.edits1(edit))
        return edits

    def apply_case(self, original: str, replacement: str) -> str:
        if original.isupper():
            return replacement.upper()
        if original[:1].isupper() and original[1:].islower():
            return replacement.capitalize()
        return replacement


spellchecker_engine = SpellCheckerEngine()


def normalize_word(word: str) -> str:
    return spellchecker_engine.normalize_word(word)


def split_word(word: str) -> list[tuple[str, str]]:
    return spellchecker_engine.split_word(word)


def edits1(word: str) -> set[str]:
    return spellchecker_engine.edits1(word)


def edits2(word: str) -> set[str]:
    return spellchecker_engine.edits2(word)


def apply_case(original: str, replacement: str) -> str:
    return spellchecker_engine.apply_case(original, replacement)

from .corrector import MAX_SUGGESTIONS, Corrector
from .dictionary import (
    AutocorrectError,
    Dictionary,
    DictionaryError,
    LexiconEntry,
    load_dictionary,
)
from .engine import (
    ALPHABET,
    WORD_RE,
    SpellCheckerEngine,
    apply_case,
    edits1,
    edits2,
    normalize_word,
    split_word,
)

__all__ = [
    "ALPHABET",
    "AutocorrectError",
    "Corrector",
    "Dictionary",
    "DictionaryError",
    "LexiconEntry",
    "MAX_SUGGESTIONS",
    "SpellCheckerEngine",
    "WORD_RE",
    "apply_case",
    "edits1",
    "edits2",
    "load_dictionary",
    "normalize_word",
    "split_word",
]

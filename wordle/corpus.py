import datetime
import logging
import random
from pathlib import Path

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORD_LIST = DATA_DIR / "wordlist.txt"
DEFAULT_DICTIONARY = DATA_DIR / "guesses.txt"

# Day zero of the daily puzzle, a local calendar date. Changing it renumbers every puzzle.
EPOCH = datetime.date(2021, 6, 19)


class CorpusLoadError(Exception):
    def __init__(self, path, reason):
        super().__init__(f"Could not load words from {path}: {reason}")
        self.path = path
        self.reason = reason


# Function to check a single word
def is_word(word):
    return len(word) == 5 and word.isascii() and word.isalpha()


# Function to read a word file, one word per line
def load_lines(path):
    path = Path(path)
    words = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                word = line.strip().lower()
                if not word:
                    continue
                if not is_word(word):
                    logger.warning(f"{path}:{lineno}: skipping '{word}', not a five-letter word")
                    continue
                words.append(word)
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(path, e) from e

    if not words:
        raise CorpusLoadError(path, "no five-letter words found")
    logger.info(f"Loaded {len(words)} words from {path}")
    return words


class Corpus:
    """The words of the game.

    ``solutions`` is ordered, the daily puzzle indexes into it. ``extras`` are
    words that are accepted as guesses but never picked as a target. Both are
    stored in lowercase and never change after construction, so one corpus
    can be shared between sessions.
    """

    def __init__(self, solutions, extras):
        self._solutions = tuple(w.lower() for w in solutions)
        extras = frozenset(w.lower() for w in extras)
        if not self._solutions:
            raise ValueError("a corpus needs at least one solution")
        if not extras:
            raise ValueError("a corpus needs at least one extra guess")
        bad = [w for w in self._solutions + tuple(sorted(extras)) if not is_word(w)]
        if bad:
            raise ValueError(f"not five-letter words: {', '.join(bad[:5])}")
        self._valid = frozenset(self._solutions) | extras

    @classmethod
    def load(cls, word_list=None, dictionary=None):
        """Load the corpus from files, falling back to the bundled lists."""
        solutions = load_lines(word_list if word_list else DEFAULT_WORD_LIST)
        extras = load_lines(dictionary if dictionary else DEFAULT_DICTIONARY)
        return cls(solutions, extras)

    @property
    def solutions(self):
        return self._solutions

    def __len__(self):
        return len(self._solutions)

    def __contains__(self, word):
        return self.is_valid(word)

    def __repr__(self):
        return f"Corpus({len(self._solutions)} solutions, {len(self._valid)} valid guesses)"

    def is_valid(self, word):
        return word.lower() in self._valid

    def daily_index(self, today=None):
        """Calendar days between the epoch and ``today`` (local date), may be negative."""
        if today is None:
            today = datetime.date.today()
        return (today - EPOCH).days

    def word_of_the_day(self, today=None):
        idx = self.daily_index(today)
        return self._solutions[idx % len(self._solutions)].upper()

    def random_word(self, rng=None):
        rng = rng if rng is not None else random
        return rng.choice(self._solutions).upper()

import logging
from enum import Enum
from string import ascii_letters
from typing import NamedTuple, Optional, Tuple

from wordle.evaluator import Clue, evaluate, format_clues

logger = logging.getLogger(__name__)

MAX_GUESSES = 6     # number of guesses in a game
WORD_LENGTH = 5     # length of every word

ALL_CORRECT = (Clue.CORRECT,) * WORD_LENGTH


class GameMode(Enum):
    WORDLE = "wordle"
    RANDOM_WORD = "random-word"


class InputKind(Enum):
    CHAR = "char"
    DELETE = "delete"
    SUBMIT = "submit"
    QUIT = "quit"


class GameInput(NamedTuple):
    kind: InputKind
    char: Optional[str] = None

    @classmethod
    def letter(cls, c):
        return cls(InputKind.CHAR, c)


GameInput.DELETE = GameInput(InputKind.DELETE)
GameInput.SUBMIT = GameInput(InputKind.SUBMIT)
GameInput.QUIT = GameInput(InputKind.QUIT)


class GuessRecord(NamedTuple):
    word: str
    clues: Tuple[Clue, ...]


class Session:
    """One game: the target, what is being typed and what has been guessed.

    ``clues`` keeps the best clue each letter has received so far, so the
    keyboard never forgets a green letter when it is later guessed in the
    wrong place.
    """

    def __init__(self, corpus, target):
        target = target.upper()
        assert corpus.is_valid(target), f"target {target} is not in the corpus"
        self._corpus = corpus
        self._target = target
        self._entry = []
        self._history = []
        self._clues = {}
        self.last_error = None

    @classmethod
    def new(cls, corpus, mode=GameMode.WORDLE):
        mode = GameMode(mode)
        if mode is GameMode.RANDOM_WORD:
            target = corpus.random_word()
        else:
            target = corpus.word_of_the_day()
        logger.info(f"New {mode.value} game")
        return cls(corpus, target)

    @classmethod
    def with_target(cls, corpus, target):
        return cls(corpus, target)

    @property
    def target(self):
        return self._target

    @property
    def entry(self):
        return "".join(self._entry)

    @property
    def history(self):
        return tuple(self._history)

    @property
    def clues(self):
        return dict(self._clues)

    @property
    def guesses_left(self):
        return MAX_GUESSES - len(self._history)

    def is_win(self):
        return bool(self._history) and self._history[-1].clues == ALL_CORRECT

    def is_over(self):
        return self.is_win() or len(self._history) >= MAX_GUESSES

    def handle_input(self, event):
        if event.kind is InputKind.QUIT:
            raise ValueError("quit must be handled by the caller")
        if self.is_over():
            return

        if event.kind is InputKind.CHAR:
            c = event.char or ""
            if len(c) == 1 and c in ascii_letters and len(self._entry) < WORD_LENGTH:
                self._entry.append(c.upper())
        elif event.kind is InputKind.DELETE:
            if self._entry:
                self._entry.pop()
        elif event.kind is InputKind.SUBMIT:
            if len(self._entry) == WORD_LENGTH:
                self._submit()
        else:
            raise ValueError(f"unknown input {event!r}")

    def _submit(self):
        guess = self.entry
        if not self._corpus.is_valid(guess):
            self.last_error = f"Word '{guess}' is not valid."
            logger.info(f"Rejected guess {guess}")
            return

        self.last_error = None
        result = evaluate(self._target, guess)
        for c, clue in zip(guess, result):
            self._clues[c] = max(self._clues.get(c, clue), clue)
        self._history.append(GuessRecord(guess, result))
        self._entry.clear()
        logger.info(f"Guess {len(self._history)}/{MAX_GUESSES}: {guess} {format_clues(result)}")

        if self.is_win():
            logger.info(f"Won in {len(self._history)}/{MAX_GUESSES}")
        elif self.is_over():
            logger.info(f"Lost, the word was {self._target}")

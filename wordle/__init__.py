from wordle.corpus import Corpus, CorpusLoadError
from wordle.evaluator import Clue, evaluate
from wordle.session import GameInput, GameMode, InputKind, Session

__all__ = [
    "Clue",
    "Corpus",
    "CorpusLoadError",
    "GameInput",
    "GameMode",
    "InputKind",
    "Session",
    "evaluate",
]

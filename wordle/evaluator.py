from enum import IntEnum


class Clue(IntEnum):
    DEFAULT = 0
    WRONG = 1
    PRESENT = 2
    CORRECT = 3


CLUE_SYMBOLS = {
    Clue.DEFAULT: ".",
    Clue.WRONG: "x",
    Clue.PRESENT: "?",
    Clue.CORRECT: "!",
}
SYMBOL_CLUES = {symbol: clue for clue, symbol in CLUE_SYMBOLS.items()}


def evaluate(target, guess):
    """Score ``guess`` against ``target``, one clue per position.

    Target letters that are not matched in place go into a pool. Walking the
    guess left to right, a letter in the wrong place is PRESENT only while the
    pool still holds a copy of it, and each PRESENT uses one copy up. A letter
    is never marked PRESENT more often than the target has spare copies.
    """
    target = target.upper()
    guess = guess.upper()

    # First pass: target letters left over after the exact matches
    pool = [t for t, g in zip(target, guess) if t != g]

    # Second pass: exact matches, then letters still in the pool
    result = []
    for t, g in zip(target, guess):
        if t == g:
            result.append(Clue.CORRECT)
        elif g in pool:
            pool.remove(g)
            result.append(Clue.PRESENT)
        else:
            result.append(Clue.WRONG)
    return tuple(result)


# Function to write clues as "!?x." symbols
def format_clues(clues):
    return "".join(CLUE_SYMBOLS[c] for c in clues)


# Function to read clues back from "!?x." symbols
def parse_clues(code):
    try:
        return tuple(SYMBOL_CLUES[c] for c in code)
    except KeyError as e:
        raise ValueError(f"unknown clue symbol {e.args[0]!r} in {code!r}") from None

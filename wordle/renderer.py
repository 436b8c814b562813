from rich.align import Align
from rich.console import Console, Group
from rich.text import Text

from wordle.evaluator import Clue
from wordle.session import MAX_GUESSES, WORD_LENGTH

QWERTY_ROWS = ["QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM"]

TILE_STYLES = {
    Clue.DEFAULT: "bold white on grey11",
    Clue.WRONG: "black on grey50",
    Clue.PRESENT: "bold black on dark_goldenrod",
    Clue.CORRECT: "bold black on green4",
}
KEY_STYLES = {
    None: "black on grey50",
    Clue.DEFAULT: "black on grey50",
    Clue.WRONG: "grey42 on grey11",
    Clue.PRESENT: TILE_STYLES[Clue.PRESENT],
    Clue.CORRECT: TILE_STYLES[Clue.CORRECT],
}
HEADER_STYLE = "bold italic white on blue"


# Function to draw a row of letter tiles
def tile_row(word, styles):
    row = Text()
    for i, (letter, style) in enumerate(zip(word, styles)):
        if i:
            row.append(" ")
        row.append(f" {letter} ", style=style)
    return row


def render_header():
    title = tile_row("WORDLE", [HEADER_STYLE] * 6)
    subtitle = Text("Wordle in Python", style="bold")
    return Group(Align.center(title), Align.center(subtitle), Text())


def render_board(session):
    rows = []
    for word, clues in session.history:
        rows.append(tile_row(word, [TILE_STYLES[c] for c in clues]))

    blank = [TILE_STYLES[Clue.DEFAULT]] * WORD_LENGTH
    if not session.is_over():
        # entry row with a cursor, padded to full width
        entry = (session.entry + "_").ljust(WORD_LENGTH)[:WORD_LENGTH]
        rows.append(tile_row(entry, blank))
    while len(rows) < MAX_GUESSES:
        rows.append(tile_row(" " * WORD_LENGTH, blank))

    lines = []
    for row in rows:
        lines.extend([Align.center(row), Text()])
    return Group(*lines)


def render_keyboard(session):
    clues = session.clues
    lines = []
    for keys in QWERTY_ROWS:
        row = Text()
        for i, key in enumerate(keys):
            if i:
                row.append(" ")
            row.append(f" {key} ", style=KEY_STYLES[clues.get(key, None)])
        lines.append(Align.center(row))
    lines.append(Text())
    return Group(*lines)


def render_message(session):
    if session.is_win():
        message = Text("Winner!", style="bold green")
    elif session.is_over():
        message = Text(f"Loser! The word was {session.target}.", style="bold red")
    elif session.last_error:
        message = Text(session.last_error, style="yellow")
    else:
        message = Text()
    return Align.center(message)


def render_screen(session):
    return Group(
        render_header(),
        render_board(session),
        render_keyboard(session),
        render_message(session),
    )


class Renderer:
    def __init__(self, console=None):
        self.console = console if console is not None else Console()

    def render(self, session):
        self.console.clear()
        self.console.print(render_screen(session))

    def show_error(self, message):
        self.console.print(Text(message, style="bold white on red"))

import contextlib
import logging
import os
import re
import termios
import tty
from string import ascii_letters

from wordle.session import GameInput

logger = logging.getLogger(__name__)

CTRL_C = "\x03"
BACKSPACE = ("\x7f", "\x08")
ENTER = ("\r", "\n")

# CSI (ESC [ ... final byte) and SS3 (ESC O x) key sequences, or a lone ESC
ESCAPE_SEQUENCE = re.compile(r"\x1b(?:\[[0-?]*[ -/]*[@-~]|O[A-Z~]|)")


def decode_keys(data):
    """Turn a chunk of raw terminal input into game inputs.

    Arrow and function keys arrive as escape sequences. Those are cut out
    first, otherwise their trailing letters would be typed.
    """
    inputs = []
    for ch in ESCAPE_SEQUENCE.sub("", data):
        if ch == CTRL_C:
            inputs.append(GameInput.QUIT)
            break
        if ch in BACKSPACE:
            inputs.append(GameInput.DELETE)
        elif ch in ENTER:
            inputs.append(GameInput.SUBMIT)
        elif ch in ascii_letters:
            inputs.append(GameInput.letter(ch.upper()))
    return inputs


@contextlib.contextmanager
def raw_terminal(stream):
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield stream
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        logger.debug("Terminal mode restored")


# Function to read whatever the terminal has for us, at least one key
def read_keys(stream, size=32):
    data = os.read(stream.fileno(), size)
    if not data:
        return [GameInput.QUIT]
    return decode_keys(data.decode("utf-8", errors="ignore"))

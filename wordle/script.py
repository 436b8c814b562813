## Terminal Wordle: guess the five-letter word in six tries.

import argparse
import contextlib
import logging
import sys

from rich.console import Console

from wordle.config import load_config
from wordle.corpus import Corpus, CorpusLoadError
from wordle.keys import raw_terminal, read_keys
from wordle.renderer import Renderer
from wordle.session import GameMode, InputKind, Session

logger = logging.getLogger(__name__)
console = Console()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_USAGE = 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="wordle", description="Wordle in the terminal")
    parser.add_argument(
        "mode", nargs="?", default=GameMode.WORDLE.value,
        choices=[m.value for m in GameMode],
        help="word of the day (wordle) or a random word (random-word)")
    parser.add_argument("-w", "--word-list", metavar="FILE", help="file with the possible solutions")
    parser.add_argument("-d", "--dictionary", metavar="FILE", help="file with extra accepted guesses")
    parser.add_argument("--log-file", metavar="FILE", help="where to write the log")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="log level")
    parser.add_argument("--env-file", metavar="FILE", help="dotenv file with settings")
    return parser.parse_args(argv)


# Function to set up the log file, the terminal itself belongs to the game
def setup_logging(log_file, level):
    logging.basicConfig(
        filename=str(log_file),
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%m/%d/%Y %H:%M:%S'
    )


def play(session, renderer, next_inputs):
    """Render, read keys and feed them to the session until the game ends.

    ``next_inputs`` returns the inputs decoded from the next chunk of keys.
    """
    while True:
        renderer.render(session)
        if session.is_over():
            return
        for event in next_inputs():
            if event.kind is InputKind.QUIT:
                logger.info("Player quit")
                return
            session.handle_input(event)


def main(argv=None):
    args = parse_args(argv)
    config = load_config(args.env_file)
    renderer = Renderer(console)

    log_level = args.log_level or config.log_level
    if log_level not in LOG_LEVELS:
        renderer.show_error(f"Unknown log level {log_level}")
        return EXIT_USAGE
    setup_logging(args.log_file or config.log_file, log_level)

    try:
        corpus = Corpus.load(args.word_list or config.word_list, args.dictionary or config.dictionary)
    except CorpusLoadError as e:
        logger.error(f"Error loading the word lists: {e}")
        renderer.show_error(str(e))
        return EXIT_LOAD_ERROR

    if not sys.stdin.isatty():
        renderer.show_error("Wordle needs an interactive terminal.")
        return EXIT_USAGE

    session = Session.new(corpus, GameMode(args.mode))

    console.show_cursor(False)
    try:
        with contextlib.suppress(KeyboardInterrupt), raw_terminal(sys.stdin):
            play(session, renderer, lambda: read_keys(sys.stdin))
    finally:
        console.show_cursor(True)
    return EXIT_OK


if __name__=='__main__':
    sys.exit(main())

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_ENV_FILE = ".env"
DEFAULT_LOG_FILE = Path.home() / ".wordle.log"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class Config:
    word_list: Optional[Path] = None
    dictionary: Optional[Path] = None
    log_file: Path = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LOG_LEVEL


# Function to turn an empty or missing variable into None
def optional_path(value):
    return Path(value).expanduser() if value else None


def load_config(env_file=None):
    """Read settings from the environment, after loading a dotenv file.

    Variables already set in the environment win over the file.
    """
    dotenv_path = Path(env_file or os.getenv("WORDLE_ENV_FILE") or DEFAULT_ENV_FILE)
    load_dotenv(dotenv_path=dotenv_path)

    return Config(
        word_list=optional_path(os.getenv("WORDLE_WORD_LIST")),
        dictionary=optional_path(os.getenv("WORDLE_DICTIONARY")),
        log_file=optional_path(os.getenv("WORDLE_LOG_FILE")) or DEFAULT_LOG_FILE,
        log_level=(os.getenv("WORDLE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )

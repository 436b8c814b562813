import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from wordle.config import DEFAULT_LOG_FILE, load_config


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self.tmpdir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        config = load_config(self.tmpdir / "missing.env")
        self.assertIsNone(config.word_list)
        self.assertIsNone(config.dictionary)
        self.assertEqual(config.log_file, DEFAULT_LOG_FILE)
        self.assertEqual(config.log_level, "INFO")

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_reads_env_file(self):
        env_file = self.tmpdir / "wordle.env"
        env_file.write_text(
            "WORDLE_WORD_LIST=/srv/solutions.txt\n"
            "WORDLE_LOG_LEVEL=debug\n"
        )
        config = load_config(env_file)
        self.assertEqual(config.word_list, Path("/srv/solutions.txt"))
        self.assertEqual(config.log_level, "DEBUG")

    @mock.patch.dict(os.environ, {"WORDLE_DICTIONARY": "/etc/extra.txt"}, clear=True)
    def test_environment_wins_over_file(self):
        env_file = self.tmpdir / "wordle.env"
        env_file.write_text("WORDLE_DICTIONARY=/srv/other.txt\n")
        config = load_config(env_file)
        self.assertEqual(config.dictionary, Path("/etc/extra.txt"))


if __name__ == '__main__':
    unittest.main()

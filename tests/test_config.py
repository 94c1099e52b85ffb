"""Tests for configuration helpers."""

import unittest

from pagescan import config
from pagescan.config import ScanOptions, log_level


class TestLogLevel(unittest.TestCase):
    def test_known_names_normalized(self) -> None:
        self.assertEqual(log_level("debug"), "DEBUG")
        self.assertEqual(log_level(" Error "), "ERROR")

    def test_unknown_or_missing_falls_back(self) -> None:
        self.assertEqual(log_level("verbose"), "WARNING")
        self.assertEqual(log_level(""), "WARNING")
        self.assertEqual(log_level(None), "WARNING")

    def test_module_level_is_valid(self) -> None:
        self.assertIn(config.LOG_LEVEL, config.LOG_LEVELS)


class TestScanOptions(unittest.TestCase):
    def test_from_env_follows_utf8_setting(self) -> None:
        self.assertEqual(ScanOptions.from_env().utf8, config.UTF8_OUTPUT)

    def test_encoding(self) -> None:
        self.assertEqual(ScanOptions(utf8=True).encoding, "utf-8")
        self.assertEqual(ScanOptions(utf8=False).encoding, "latin-1")


if __name__ == "__main__":
    unittest.main()

# tests/test_registry.py
from __future__ import annotations

import os
import unittest
from unittest import mock

from coderelay.core.config import Settings
from coderelay.core.registry import (
    LANGUAGE_CODES,
    PENDING_STATUSES,
    describe_status,
    detect_language,
    is_supported,
    language_code,
)


class TestLanguageRegistry(unittest.TestCase):
    def test_known_codes_are_stable(self):
        expected = {
            "c": 110,
            "csharp": 51,
            "cpp": 54,
            "python": 92,
            "javascript": 93,
            "java": 91,
            "sql": 82,
            "go": 107,
            "php": 68,
            "lua": 64,
            "rust": 108,
            "ruby": 72,
            "swift": 83,
        }
        self.assertEqual(LANGUAGE_CODES, expected)
        for name, code in expected.items():
            self.assertEqual(language_code(name), code)

    def test_unknown_language_has_no_code(self):
        self.assertIsNone(language_code("typescript"))
        self.assertIsNone(language_code(""))
        self.assertIsNone(language_code(None))
        self.assertFalse(is_supported("plaintext"))

    def test_only_queued_and_processing_are_pending(self):
        self.assertEqual(PENDING_STATUSES, {1, 2})
        self.assertEqual(describe_status(3), "Accepted")
        self.assertEqual(describe_status(99), "Unknown status 99")


class TestDetectLanguage(unittest.TestCase):
    def test_suffixes(self):
        self.assertEqual(detect_language("main.py"), "python")
        self.assertEqual(detect_language("App.TS"), "typescript")
        self.assertEqual(detect_language("archive.tar.rs"), "rust")
        self.assertEqual(detect_language("Program.cs"), "csharp")

    def test_unknown_suffix_falls_back_to_plaintext(self):
        self.assertEqual(detect_language("Makefile"), "plaintext")
        self.assertEqual(detect_language("image.png"), "plaintext")

    def test_every_runnable_editor_language_has_a_code(self):
        for filename in ("a.c", "a.cpp", "a.cs", "a.py", "a.js", "a.java", "a.go", "a.rs", "a.rb"):
            self.assertTrue(is_supported(detect_language(filename)), filename)


class TestSettings(unittest.TestCase):
    def test_defaults_without_keys(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        self.assertEqual(settings.judge0_api_key, "")
        self.assertEqual(settings.gemini_api_key, "")
        self.assertEqual(settings.port, 3000)
        self.assertEqual(settings.judge0_poll_interval, 2.0)
        self.assertEqual(settings.judge0_host, "judge0-ce.p.rapidapi.com")
        self.assertEqual(settings.cors_origins, ["*"])

    def test_values_from_environment(self):
        env = {
            "JUDGE0_API_KEY": " abc ",
            "JUDGE0_BASE_URL": "http://judge0.local:2358/",
            "GEMINI_API_KEY": "g",
            "PORT": "8080",
            "JUDGE0_MAX_POLLS": "5",
            "CORS_ORIGINS": "http://localhost:5173, http://127.0.0.1:5173",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        self.assertEqual(settings.judge0_api_key, "abc")
        self.assertEqual(settings.judge0_base_url, "http://judge0.local:2358")
        self.assertEqual(settings.judge0_host, "judge0.local:2358")
        self.assertEqual(settings.port, 8080)
        self.assertEqual(settings.judge0_max_polls, 5)
        self.assertEqual(settings.cors_origins, ["http://localhost:5173", "http://127.0.0.1:5173"])


if __name__ == "__main__":
    unittest.main()

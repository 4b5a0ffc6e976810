# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from mealplan.config import Settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = Settings()
        self.assertEqual(cfg.meal_plan_max_attempts, 5)
        self.assertEqual(cfg.swap_meal_max_attempts, 1)
        self.assertEqual(cfg.delimiter, ";")
        self.assertEqual(cfg.cors_origins, ["http://localhost:3000"])

    def test_non_positive_attempts_rejected_at_startup(self) -> None:
        for name in ("MEAL_PLAN_MAX_ATTEMPTS", "SWAP_MEAL_MAX_ATTEMPTS"):
            for value in ("0", "-2"):
                with patch.dict(os.environ, {name: value}, clear=True):
                    with self.assertRaises(ValueError) as ctx:
                        Settings()
                self.assertIn(name, str(ctx.exception))

    def test_multi_character_delimiter_rejected(self) -> None:
        with patch.dict(os.environ, {"MEAL_PLAN_DELIMITER": ";;"}, clear=True):
            with self.assertRaises(ValueError):
                Settings()

    def test_api_key_read_on_access(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = Settings()
            self.assertIsNone(cfg.openai_api_key)
            os.environ["OPENAI_API_KEY"] = " sk-live "
            self.assertEqual(cfg.openai_api_key, "sk-live")


if __name__ == "__main__":
    unittest.main()

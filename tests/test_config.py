"""Tests for environment configuration."""

import os
import tempfile
import unittest
from unittest.mock import patch

from careerpages.config import SiteConfig
from careerpages.exceptions import ConfigurationError


class SiteConfigTest(unittest.TestCase):
    def test_from_env_mapping(self):
        config = SiteConfig.from_env(
            {
                "NOTION_TOKEN": " secret_abc ",
                "SHEET_ID": "sheet",
                "GOOGLE_SERVICE_ACCOUNT_JSON": '{"type": "service_account"}',
                "CAREERPAGES_CORS_ORIGIN": "",
                "CAREERPAGES_LOG_LEVEL": "debug",
            }
        )
        self.assertEqual(config.notion_token, "secret_abc")
        self.assertEqual(config.sheet_id, "sheet")
        self.assertIsNone(config.cors_origin)
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.service_account_info_or_raise(), {"type": "service_account"})

    def test_defaults(self):
        config = SiteConfig.from_env({})
        self.assertIsNone(config.notion_token)
        self.assertEqual(config.log_level, "INFO")

    def test_secrets_are_not_in_repr(self):
        config = SiteConfig(notion_token="secret_abc", service_account_json="{}")
        self.assertNotIn("secret_abc", repr(config))

    def test_missing_values_name_the_variable(self):
        config = SiteConfig()
        for getter, name in (
            (config.notion_token_or_raise, "NOTION_TOKEN"),
            (config.sheet_id_or_raise, "SHEET_ID"),
            (config.service_account_info_or_raise, "GOOGLE_SERVICE_ACCOUNT_JSON"),
        ):
            with self.assertRaises(ConfigurationError) as ctx:
                getter()
            self.assertEqual(str(ctx.exception), f"Missing {name}")

    def test_malformed_service_account_json(self):
        for raw in ('{"private_key": "abc', "[1, 2]"):
            config = SiteConfig(service_account_json=raw)
            with self.assertRaises(ConfigurationError) as ctx:
                config.service_account_info_or_raise()
            self.assertEqual(
                str(ctx.exception), "Malformed GOOGLE_SERVICE_ACCOUNT_JSON"
            )
            self.assertIsNone(ctx.exception.__cause__)

    def test_from_env_reads_dotenv_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, ".env")
            with open(path, "w") as f:
                f.write("NOTION_TOKEN=from_file\nSHEET_ID=sheet\n")
            with patch.dict(os.environ, {}, clear=True):
                config = SiteConfig.from_env(dotenv_path=path)
        self.assertEqual(config.notion_token, "from_file")
        self.assertEqual(config.sheet_id, "sheet")


if __name__ == "__main__":
    unittest.main()

"""Tests for the command line interface."""

import json
import os
import tempfile
import unittest
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from careerpages.cli.main import app
from careerpages.exceptions import InvalidDocumentReference
from careerpages.services.notion import NotionNotFound
from careerpages.services.sheets import SheetsApiError
from careerpages.services.sheets.models import HomeContent, Job, Section, SiteContent

PAGE_URL = "https://www.notion.so/acme/Nurse-0123456789abcdef0123456789abcdef"


class RenderCommandTest(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.service = MagicMock()
        self.service.render_document.return_value = '<p class="ntn-p">Hi</p>'
        self.service.render_document_page.return_value = "<!doctype html>page"
        patcher = patch(
            "careerpages.cli.commands.render.get_notion_service",
            return_value=self.service,
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_prints_fragment(self):
        result = self.runner.invoke(app, ["render", PAGE_URL])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('<p class="ntn-p">Hi</p>', result.output)
        self.service.render_document.assert_called_once_with(PAGE_URL)

    def test_full_page(self):
        result = self.runner.invoke(app, ["render", PAGE_URL, "--page", "--title", "Jobs"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.service.render_document_page.assert_called_once_with(PAGE_URL, title="Jobs")

    def test_writes_output_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.html")
            result = self.runner.invoke(app, ["render", PAGE_URL, "--output", path])
            self.assertEqual(result.exit_code, 0, result.output)
            with open(path, encoding="utf-8") as f:
                self.assertEqual(f.read(), '<p class="ntn-p">Hi</p>')

    def test_invalid_url_exit_code(self):
        self.service.render_document.side_effect = InvalidDocumentReference("nope")
        result = self.runner.invoke(app, ["render", "nope"])
        self.assertEqual(result.exit_code, 2)

    def test_notion_error_exit_code(self):
        self.service.render_document.side_effect = NotionNotFound("Could not find block")
        result = self.runner.invoke(app, ["render", PAGE_URL])
        self.assertEqual(result.exit_code, 1)


class SheetsCommandTest(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.service = MagicMock()
        self.service.read_site_content.return_value = SiteContent(
            home=HomeContent(title="Careers", intro1="Join us"),
            jobs=[Job(name="Nurse"), Job(name="Chef")],
            sections_by_job={"Nurse": [Section(title="Duties", notion_url=PAGE_URL)]},
        )
        patcher = patch(
            "careerpages.cli.commands.sheets.get_sheets_service",
            return_value=self.service,
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_json_output(self):
        result = self.runner.invoke(app, ["sheets", "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertEqual(data["jobs"][0], {"name": "Nurse", "notionBlurb": ""})
        self.assertNotIn("Chef", data["sectionsByJob"])

    def test_table_output(self):
        result = self.runner.invoke(app, ["sheets"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Careers", result.output)
        self.assertIn("Nurse", result.output)
        self.assertIn("Duties", result.output)

    def test_cell_text_is_not_read_as_markup(self):
        self.service.read_site_content.return_value = SiteContent(
            home=HomeContent(title="[bold]Careers"),
            jobs=[Job(name="[red]x")],
        )
        result = self.runner.invoke(app, ["sheets"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("[red]x", result.output)
        self.assertIn("[bold]Careers", result.output)

    def test_read_error_exit_code(self):
        self.service.read_site_content.side_effect = SheetsApiError("quota exceeded")
        result = self.runner.invoke(app, ["sheets"])
        self.assertEqual(result.exit_code, 1)


class ServeCommandTest(unittest.TestCase):
    def test_runs_app(self):
        flask_app = MagicMock()
        with patch(
            "careerpages.cli.commands.serve.get_config"
        ), patch(
            "careerpages.cli.commands.serve.create_app", return_value=flask_app
        ):
            result = CliRunner().invoke(app, ["serve", "--port", "8080"])
        self.assertEqual(result.exit_code, 0, result.output)
        flask_app.run.assert_called_once_with(host="127.0.0.1", port=8080, debug=False)


if __name__ == "__main__":
    unittest.main()

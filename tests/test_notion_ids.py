"""Tests for Notion page id extraction."""

import unittest

from careerpages.exceptions import InvalidDocumentReference
from careerpages.services.notion.ids import (
    canonical_id,
    extract_page_id,
    require_page_id,
)

PAGE_ID = "0123456789abcdef0123456789abcdef"
CANONICAL = "01234567-89ab-cdef-0123-456789abcdef"


class ExtractPageIdTest(unittest.TestCase):
    def test_share_url_with_title_slug_and_query(self):
        url = f"https://www.notion.so/acme/Registered-Nurse-{PAGE_ID}?pvs=4"
        self.assertEqual(extract_page_id(url), CANONICAL)

    def test_bare_id(self):
        self.assertEqual(extract_page_id(PAGE_ID), CANONICAL)

    def test_hyphenated_uuid_at_end(self):
        url = f"https://acme.notion.site/{CANONICAL}"
        self.assertEqual(extract_page_id(url), CANONICAL)

    def test_uppercase_hex_is_normalized(self):
        self.assertEqual(extract_page_id(PAGE_ID.upper()), CANONICAL)

    def test_no_id(self):
        self.assertIsNone(extract_page_id("https://www.notion.so/acme/Nothing-here"))
        self.assertIsNone(extract_page_id(""))
        self.assertIsNone(extract_page_id(None))

    def test_short_hex_is_rejected(self):
        self.assertIsNone(extract_page_id("0123456789abcdef"))

    def test_canonical_id_strips_existing_hyphens(self):
        self.assertEqual(canonical_id(CANONICAL.upper()), CANONICAL)


class RequirePageIdTest(unittest.TestCase):
    def test_returns_canonical_id(self):
        self.assertEqual(require_page_id(f"https://notion.so/x-{PAGE_ID}"), CANONICAL)

    def test_raises_for_missing_id(self):
        with self.assertRaises(InvalidDocumentReference) as ctx:
            require_page_id("https://example.com/")
        self.assertEqual(str(ctx.exception), "Invalid or missing Notion URL")
        self.assertEqual(ctx.exception.reference, "https://example.com/")

    def test_invalid_reference_is_a_value_error(self):
        with self.assertRaises(ValueError):
            require_page_id("")


if __name__ == "__main__":
    unittest.main()

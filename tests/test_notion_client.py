"""Tests for the Notion REST client, children source and service."""

import unittest
from unittest.mock import MagicMock

import requests

from careerpages.config import SiteConfig
from careerpages.exceptions import ConfigurationError, InvalidDocumentReference
from careerpages.services.notion import (
    NotionApiError,
    NotionAuthError,
    NotionClient,
    NotionNotFound,
    NotionRateLimited,
    NotionService,
)
from careerpages.services.notion.models import NotionPage, parse_block
from careerpages.services.notion.rendering.datasource import NotionChildrenSource

PAGE_URL = "https://www.notion.so/acme/Nurse-0123456789abcdef0123456789abcdef"
PAGE_ID = "01234567-89ab-cdef-0123-456789abcdef"
CHILDREN_URL = "https://api.notion.com/v1/blocks/blk/children"


def response(status_code=200, body=None, headers=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.headers = headers or {}
    resp.text = text
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


def paragraph(block_id, text, has_children=False):
    return {
        "object": "block",
        "id": block_id,
        "type": "paragraph",
        "has_children": has_children,
        "paragraph": {"rich_text": [{"type": "text", "plain_text": text}]},
    }


def listing(results, next_cursor=None):
    return {
        "object": "list",
        "results": results,
        "next_cursor": next_cursor,
        "has_more": next_cursor is not None,
    }


class NotionClientTest(unittest.TestCase):
    def setUp(self):
        self.session = requests.Session()
        self.session.get = MagicMock()
        self.client = NotionClient("secret-token", session=self.session)

    def test_session_headers(self):
        self.assertEqual(self.session.headers["Authorization"], "Bearer secret-token")
        self.assertEqual(self.session.headers["Notion-Version"], "2022-06-28")

    def test_list_children_follows_cursor(self):
        self.session.get.side_effect = [
            response(body=listing([paragraph("p1", "one")], next_cursor="c2")),
            response(body=listing([paragraph("p2", "two")])),
        ]

        blocks = self.client.list_children("blk")

        self.assertEqual([b.id for b in blocks], ["p1", "p2"])
        self.assertEqual(self.session.get.call_count, 2)
        first, second = self.session.get.call_args_list
        self.assertEqual(first.args, (CHILDREN_URL,))
        self.assertEqual(first.kwargs["params"], {"page_size": 100})
        self.assertEqual(
            second.kwargs["params"], {"page_size": 100, "start_cursor": "c2"}
        )

    def test_cursor_ignored_when_has_more_is_false(self):
        body = listing([paragraph("p1", "one")])
        body["next_cursor"] = "stale"
        self.session.get.return_value = response(body=body)

        self.assertEqual(len(self.client.list_children("blk")), 1)
        self.assertEqual(self.session.get.call_count, 1)

    def test_retrieve_page(self):
        self.session.get.return_value = response(
            body={"object": "page", "id": PAGE_ID, "archived": False}
        )
        page = self.client.retrieve_page(PAGE_ID)
        self.assertEqual(page.id, PAGE_ID)
        self.assertEqual(
            self.session.get.call_args.args,
            (f"https://api.notion.com/v1/pages/{PAGE_ID}",),
        )

    def test_not_found_carries_upstream_message(self):
        self.session.get.return_value = response(
            404,
            {"object": "error", "code": "object_not_found", "message": "Could not find block"},
        )
        with self.assertRaises(NotionNotFound) as ctx:
            self.client.list_children("blk")
        self.assertEqual(str(ctx.exception), "Could not find block")

    def test_auth_errors(self):
        for code in (401, 403):
            self.session.get.return_value = response(code, {"message": "nope"})
            with self.assertRaises(NotionAuthError):
                self.client.retrieve_page(PAGE_ID)

    def test_rate_limited(self):
        self.session.get.return_value = response(
            429, {"message": "slow down"}, headers={"Retry-After": "2"}
        )
        with self.assertRaises(NotionRateLimited) as ctx:
            self.client.list_children("blk")
        self.assertEqual(ctx.exception.retry_after, 2.0)

    def test_server_error_without_json(self):
        self.session.get.return_value = response(500, ValueError("no json"), text="oops")
        with self.assertRaises(NotionApiError) as ctx:
            self.client.list_children("blk")
        self.assertEqual(str(ctx.exception), "HTTP 500")
        self.assertEqual(ctx.exception.payload, "oops")

    def test_invalid_json_on_success(self):
        self.session.get.return_value = response(200, ValueError("no json"))
        with self.assertRaises(NotionApiError):
            self.client.list_children("blk")

    def test_transport_error(self):
        self.session.get.side_effect = requests.ConnectionError("down")
        with self.assertRaises(NotionApiError):
            self.client.list_children("blk")


class NotionChildrenSourceTest(unittest.TestCase):
    def test_children_are_memoized_per_block(self):
        client = MagicMock()
        client.list_children.return_value = [parse_block(paragraph("p", "x"))]
        source = NotionChildrenSource(client)

        first = source.get_children("blk")
        first.clear()
        second = source.get_children("blk")

        client.list_children.assert_called_once_with("blk")
        self.assertEqual(len(second), 1)
        self.assertEqual(source.fetched_ids, ["blk"])


class NotionServiceTest(unittest.TestCase):
    def setUp(self):
        self.client = MagicMock()
        self.client.retrieve_page.return_value = NotionPage.model_validate(
            {
                "id": PAGE_ID,
                "properties": {
                    "title": {"type": "title", "title": [{"plain_text": "Nurse"}]}
                },
            }
        )
        self.children = {
            PAGE_ID: [parse_block(paragraph("p1", "Hello", has_children=False))],
        }
        self.client.list_children.side_effect = lambda block_id: list(
            self.children.get(block_id, [])
        )
        self.service = NotionService(self.client)

    def test_render_document(self):
        html = self.service.render_document(PAGE_URL)
        self.assertEqual(html, '<p class="ntn-p">Hello</p>')
        self.client.retrieve_page.assert_called_once_with(PAGE_ID)
        self.client.list_children.assert_called_once_with(PAGE_ID)

    def test_render_document_page_uses_page_title(self):
        html = self.service.render_document_page(PAGE_URL)
        self.assertIn("<title>Nurse</title>", html)
        html = self.service.render_document_page(PAGE_URL, title="Override")
        self.assertIn("<title>Override</title>", html)

    def test_invalid_url_makes_no_calls(self):
        with self.assertRaises(InvalidDocumentReference):
            self.service.render_document("https://example.com/no-id")
        self.client.retrieve_page.assert_not_called()
        self.client.list_children.assert_not_called()

    def test_nested_fetch_failure_fails_the_render(self):
        self.children[PAGE_ID] = [parse_block(paragraph("p1", "x"))]
        self.children[PAGE_ID].append(
            parse_block(
                {
                    "id": "tg",
                    "type": "toggle",
                    "toggle": {"rich_text": []},
                    "has_children": True,
                }
            )
        )

        def list_children(block_id):
            if block_id == "tg":
                raise NotionNotFound("Could not find block")
            return list(self.children.get(block_id, []))

        self.client.list_children.side_effect = list_children
        with self.assertRaises(NotionNotFound):
            self.service.render_document(PAGE_URL)

    def test_page_access_failure_propagates(self):
        self.client.retrieve_page.side_effect = NotionAuthError("Unauthorized")
        with self.assertRaises(NotionAuthError):
            self.service.render_document(PAGE_URL)

    def test_from_config_requires_token(self):
        with self.assertRaises(ConfigurationError) as ctx:
            NotionService.from_config(SiteConfig())
        self.assertEqual(str(ctx.exception), "Missing NOTION_TOKEN")

    def test_from_config_builds_client(self):
        service = NotionService.from_config(SiteConfig(notion_token="t"))
        self.assertIsInstance(service.raw, NotionClient)


if __name__ == "__main__":
    unittest.main()

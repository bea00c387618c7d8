"""
Notion API client for Morning Brief.

This module handles communication with the Notion REST API: listing the
children of a page and creating new pages with content blocks.
"""

import httpx
import logging
import os
from typing import Any, Dict, List, Optional, Sequence

from ..config import config
from ..models import ContentBlock, NotionPage
from .errors import NotionError
from .serializer import blocks_to_notion, title_property


class NotionClient:
    """
    Thin synchronous client over the Notion REST API.
    """

    def __init__(self, api_key: Optional[str] = None, api_base: Optional[str] = None,
                 notion_version: Optional[str] = None, timeout: Optional[float] = None,
                 http_client: Optional[httpx.Client] = None):
        """
        Initialize the Notion client.

        Args:
            api_key: Integration token (defaults to the environment variable named in config)
            api_base: REST API base URL (defaults to config value)
            notion_version: Notion-Version header (defaults to config value)
            timeout: Request timeout in seconds (defaults to config value)
            http_client: Preconfigured httpx client, mainly for tests

        Raises:
            NotionError: If no API key is available
        """
        self.api_key = api_key or os.environ.get(config.notion_api_key_env)
        if not self.api_key:
            raise NotionError(
                f"No Notion API key found; set {config.notion_api_key_env}",
                operation="authenticate"
            )

        self.api_base = (api_base or config.notion_api_base).rstrip("/")
        self.notion_version = notion_version or config.notion_version
        self.page_size = config.notion_page_size
        self.client = http_client or httpx.Client(timeout=timeout or config.notion_timeout)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        self.client.close()

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Notion-Version": self.notion_version,
            "Content-Type": "application/json",
        }

    def _request(self, operation: str, method: str, path: str,
                 params: Optional[Dict[str, Any]] = None,
                 payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Send one request to Notion and decode the JSON response.

        Raises:
            NotionError: On transport errors, non-2xx responses or invalid JSON
        """
        try:
            response = self.client.request(
                method,
                f"{self.api_base}{path}",
                headers=self.headers,
                params=params,
                json=payload
            )
            response.raise_for_status()
            body = response.json()

        except httpx.RequestError as e:
            raise NotionError(f"Failed to connect to Notion: {e}", operation=operation) from e
        except httpx.HTTPStatusError as e:
            raise NotionError(
                f"Notion request failed: {self._error_detail(e.response)}",
                operation=operation,
                status_code=e.response.status_code
            ) from e
        except ValueError as e:
            raise NotionError(f"Invalid JSON from Notion: {e}", operation=operation) from e

        if not isinstance(body, dict):
            raise NotionError(
                f"Unexpected Notion response: expected an object, got {type(body).__name__}",
                operation=operation
            )
        return body

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text[:300]
        if not isinstance(body, dict):
            return response.text[:300]
        return body.get("message") or body.get("code") or response.text[:300]

    def list_children(self, block_id: str) -> List[Dict[str, Any]]:
        """
        List all direct children of a block or page, following pagination.

        Args:
            block_id: Id of the parent block or page

        Returns:
            Child block objects in listing order
        """
        results: List[Dict[str, Any]] = []
        params: Dict[str, Any] = {"page_size": self.page_size}

        while True:
            body = self._request("list_children", "GET", f"/blocks/{block_id}/children", params=params)
            page_results = body.get("results", [])
            if not isinstance(page_results, list):
                raise NotionError("Notion response 'results' is not a list", operation="list_children")
            results.extend(page_results)

            if not body.get("has_more") or not body.get("next_cursor"):
                break
            params = {"page_size": self.page_size, "start_cursor": body["next_cursor"]}

        logging.debug(f"Listed {len(results)} children of {block_id}")
        return results

    def list_child_pages(self, block_id: str) -> List[NotionPage]:
        """
        List the child pages of a page.

        Args:
            block_id: Id of the parent page

        Returns:
            NotionPage objects in listing order
        """
        pages = []
        for block in self.list_children(block_id):
            if not isinstance(block, dict) or block.get("type") != "child_page":
                continue
            if not block.get("id"):
                raise NotionError(f"Child page of {block_id} has no id", operation="list_children")

            child_page = block.get("child_page")
            title = child_page.get("title", "") if isinstance(child_page, dict) else ""
            pages.append(NotionPage(id=block["id"], title=title, parent_id=block_id))
        return pages

    def create_page(self, parent_id: str, title: str,
                    children: Optional[Sequence[ContentBlock]] = None) -> NotionPage:
        """
        Create a page under a parent page.

        Args:
            parent_id: Id of the parent page
            title: Title of the new page
            children: Content blocks to attach as the page body

        Returns:
            The created page
        """
        payload: Dict[str, Any] = {
            "parent": {"page_id": parent_id},
            "properties": title_property(title),
        }
        if children is not None:
            payload["children"] = blocks_to_notion(children)

        body = self._request("create_page", "POST", "/pages", payload=payload)

        if "id" not in body:
            raise NotionError("Notion response did not include a page id", operation="create_page")

        logging.info(f"Created Notion page '{title}' ({body['id']}) under {parent_id}")
        return NotionPage(id=body["id"], title=title, parent_id=parent_id, url=body.get("url"))

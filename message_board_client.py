"""Message board API client.

This module defines a small client wrapper around the posts REST API.
It uses the ``requests`` library internally to make HTTP calls and
exposes one method per operation:

* :meth:`list_posts` – return all posts.
* :meth:`get_post` – fetch a single post by its identifier.
* :meth:`create_post` – create a post and return its new id.
* :meth:`update_post` – replace all fields of a post.
* :meth:`delete_post` – delete a post.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with ``status_code`` and ``message`` keys.  The client
never raises for HTTP or connection errors, which keeps calling code
(scripts, bots, other services) free of ``try`` blocks.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class MessageBoardClient:
    """Client for the ``/posts`` resource of the Message Board API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL including the API prefix, e.g.
                ``http://127.0.0.1:3000/api/v1``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/posts``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies).
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method, url, json=json_body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = None
            # Validation errors carry a list of field errors; keep the raw text then.
            message = detail if isinstance(detail, str) else response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Post operations
    # ------------------------------------------------------------------
    def list_posts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all posts.

        Returns:
            A tuple ``(posts, error)``. ``posts`` is empty on failure.
        """
        data, error = self._request("GET", "/posts")
        if error:
            return [], error
        return data or [], None

    def get_post(self, post_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single post by ID.

        A missing post is reported as an error with status code 404.
        """
        return self._request("GET", f"/posts/{post_id}")

    def create_post(self, post: Dict[str, Any]) -> Tuple[Optional[str], Optional[Error]]:
        """Create a post.

        Returns:
            A tuple ``(post_id, error)`` with the id generated by the server.
        """
        data, error = self._request("POST", "/posts", json_body=post)
        if error:
            return None, error
        return data["_id"], None

    def update_post(
        self, post_id: str, post: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace every field of an existing post."""
        return self._request("PUT", f"/posts/{post_id}", json_body=post)

    def delete_post(self, post_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a post.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/posts/{post_id}")
        if error:
            return False, error
        return True, None

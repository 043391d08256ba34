# weave_content/client.py
"""
HTTP client for the content API.

Thin wrapper over `requests`: one call per method, no retries and no cache.
Every failure surfaces as a ContentStoreError so the editor can decide what
the user sees.
"""
import logging
import os
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ContentStoreError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ContentNotFoundError(ContentStoreError):
    pass


class ContentStoreClient:
    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        if token:
            self.set_token(token)

    @classmethod
    def from_env(cls, **kwargs) -> "ContentStoreClient":
        """
        Build a client from CONTENT_API_BASE_URL / CONTENT_API_TOKEN /
        CONTENT_API_TIMEOUT.
        """
        return cls(
            os.getenv("CONTENT_API_BASE_URL", "http://localhost:5000/api"),
            token=os.getenv("CONTENT_API_TOKEN"),
            timeout=float(os.getenv("CONTENT_API_TIMEOUT", DEFAULT_TIMEOUT)),
            **kwargs,
        )

    def set_token(self, token: str) -> None:
        self.session.headers["Authorization"] = f"Bearer {token}"

    def fork(self) -> "ContentStoreClient":
        """
        Same API, credentials and transport adapters on a fresh Session.
        A requests Session is not safe to share between threads.
        """
        session = requests.Session()
        session.headers.update(self.session.headers)
        for prefix, adapter in self.session.adapters.items():
            session.mount(prefix, adapter)
        return type(self)(self.base_url, session=session, timeout=self.timeout)

    # ------------------------
    # Transport
    # ------------------------

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        kwargs.setdefault("timeout", self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.exceptions.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ContentStoreError(f"{method} {path} failed: {exc}") from exc

        if response.status_code == 404:
            raise ContentNotFoundError(self._error_message(response), status_code=404)

        if not response.ok:
            logger.warning("%s %s returned %s", method, url, response.status_code)
            raise ContentStoreError(self._error_message(response), status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise ContentStoreError(
                f"{method} {path} returned invalid JSON", status_code=response.status_code
            ) from exc

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return f"HTTP {response.status_code}"
        if isinstance(body, dict):
            return body.get("error") or body.get("msg") or f"HTTP {response.status_code}"
        return f"HTTP {response.status_code}"

    # ------------------------
    # Content API
    # ------------------------

    def login(self, email: str, password: str) -> str:
        tokens = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.set_token(tokens["access_token"])
        return tokens["access_token"]

    def fetch_by_section(self, section: str) -> Optional[Dict[str, Any]]:
        """
        Current record for a section, or None when none exists yet.
        The list endpoint may return one record or a list.
        """
        data = self._request("GET", "/content", params={"section": section})
        if isinstance(data, list):
            return data[0] if data else None
        return data or None

    def fetch(self, content_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/content/{content_id}")

    def create(self, section: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/content", json={"section": section, "data": data})

    def patch(self, content_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PATCH", f"/content/{content_id}", json=payload)

    def create_or_patch(
        self,
        section: str,
        draft_data: Optional[Dict[str, Any]],
        *,
        content_id: Optional[str] = None,
        action: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Persist an editor intent.

        PATCH the known record; when there is no id, or the record is gone
        (404), create a fresh one with POST instead. A publish that had to
        create first is followed by a publish PATCH on the new id. Revert
        never creates.
        """
        if action == "revert":
            payload: Dict[str, Any] = {"action": "revert"}
        elif action == "publish":
            payload = {"action": "publish", "draftData": draft_data}
        elif action is None:
            payload = {"draftData": draft_data}
        else:
            raise ValueError(f"Unknown action: {action}")

        if content_id:
            try:
                return self.patch(content_id, payload)
            except ContentNotFoundError:
                if action == "revert":
                    raise
                logger.info("Content %s no longer exists, recreating %s", content_id, section)
        elif action == "revert":
            raise ContentNotFoundError("Nothing to revert", status_code=None)

        created = self.create(section, draft_data or {})
        if action == "publish":
            return self.patch(created["_id"], payload)
        return created

    def upload_image(self, path: str) -> str:
        try:
            with open(path, "rb") as fh:
                data = self._request(
                    "POST",
                    "/upload",
                    files={"file": (os.path.basename(path), fh)},
                )
        except OSError as exc:
            raise ContentStoreError(f"Cannot read {path}: {exc}") from exc
        url = data.get("url")
        if not url:
            raise ContentStoreError(f"Upload of {path} returned no URL")
        return url

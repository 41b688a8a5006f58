"""Thin JSON/text REST helper shared by the TeamCity services."""

from __future__ import annotations

from typing import Any, Optional

import requests

_ACTIONS = {
    "GET": "getting",
    "POST": "creating",
    "PUT": "updating",
    "DELETE": "deleting",
}


class TeamCityError(Exception):
    """Raised when the server answers with an error or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RestClient:
    """Issues requests relative to a base URL over a shared session."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        auth: Any = None,
    ) -> None:
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._session = session if session is not None else requests.Session()
        if auth is not None:
            self._session.auth = auth

    @property
    def base_url(self) -> str:
        return self._base_url

    def scoped(self, prefix: str) -> "RestClient":
        """A client whose paths are resolved under ``prefix``."""
        return RestClient(self._base_url + prefix, self._session)

    def _request(self, method: str, path: str, what: str, **kwargs: Any) -> requests.Response:
        url = self._base_url + path
        action = _ACTIONS.get(method, method.lower())
        try:
            response = self._session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            raise TeamCityError(f"error when {action} {what}: {exc}") from exc
        if not response.ok:
            raise TeamCityError(
                f"{response.status_code} {response.reason or ''} - "
                f"error when {action} {what}: {response.text}",
                response.status_code,
            )
        return response

    @staticmethod
    def _json(response: requests.Response) -> Any:
        return response.json() if response.content else None

    def get(self, path: str, what: str) -> Any:
        response = self._request("GET", path, what, headers={"Accept": "application/json"})
        return self._json(response)

    def post(self, path: str, body: Any, what: str) -> Any:
        response = self._request(
            "POST", path, what, json=body, headers={"Accept": "application/json"}
        )
        return self._json(response)

    def put(self, path: str, body: Any, what: str) -> Any:
        response = self._request(
            "PUT", path, what, json=body, headers={"Accept": "application/json"}
        )
        return self._json(response)

    def put_text(self, path: str, text: str, what: str) -> str:
        response = self._request(
            "PUT",
            path,
            what,
            data=text.encode("utf-8"),
            headers={"Content-Type": "text/plain", "Accept": "text/plain"},
        )
        return response.text

    def delete(self, path: str, what: str) -> None:
        self._request("DELETE", path, what)
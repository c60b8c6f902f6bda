"""OptiCore mock backend client.

A thin wrapper around the HTTP/JSON surface of the mock backend, built
on the ``requests`` library.  It is meant for scripts, demos and the
front‑end team's smoke tests:

* :meth:`OptiCoreAPI.login` – obtain a bearer token (kept on the client).
* :meth:`OptiCoreAPI.subscribe` – create a client subscription.
* :meth:`OptiCoreAPI.get_dashboard` – read a client's dashboard.
* :meth:`OptiCoreAPI.toggle_service` – switch one service on or off.
* :meth:`OptiCoreAPI.pause_client` / :meth:`OptiCoreAPI.resume_client`.
* :meth:`OptiCoreAPI.list_clients` – list every client (admin only).

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with ``status_code`` and ``message`` keys, the
message being the server's ``{"error": ...}`` text when available.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class OptiCoreAPI:
    """Client for the OptiCore mock backend."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:3000``.  The
                ``/api`` prefix is added by the client.
            token: Optional bearer token from an earlier login.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/login``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Sessions and subscriptions
    # ------------------------------------------------------------------
    def login(self, email: str, role: str, client_id: Optional[int] = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log in and remember the returned token for later calls."""
        payload: Dict[str, Any] = {"email": email, "role": role}
        if client_id is not None:
            payload["clientId"] = client_id
        data, error = self._request("POST", "/api/login", json_body=payload)
        if error:
            return None, error
        self.token = data.get("token")
        return data, None

    def subscribe(self, name: str, plan: str) -> Tuple[Optional[int], Optional[Error]]:
        """Create a subscription and return the new client identifier."""
        data, error = self._request("POST", "/api/subscribe", json_body={"name": name, "plan": plan})
        if error:
            return None, error
        return data.get("clientId"), None

    # ------------------------------------------------------------------
    # Client self‑service
    # ------------------------------------------------------------------
    def get_dashboard(self, client_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/dashboard/{client_id}")

    def toggle_service(self, client_id: int, service: str, enabled: bool) -> Tuple[Optional[Dict[str, bool]], Optional[Error]]:
        """Enable or disable ``service``; returns the updated service map."""
        data, error = self._request(
            "POST",
            f"/api/clients/{client_id}/service",
            json_body={"service": service, "enabled": enabled},
        )
        if error:
            return None, error
        return data.get("services"), None

    # ------------------------------------------------------------------
    # Administration
    # ------------------------------------------------------------------
    def pause_client(self, client_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._client_action(client_id, "pause")

    def resume_client(self, client_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._client_action(client_id, "resume")

    def _client_action(self, client_id: int, action: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("POST", f"/api/admin/clients/{client_id}/{action}")
        if error:
            return None, error
        return data.get("client"), None

    def list_clients(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/api/admin/clients")
        if error:
            return [], error
        return data.get("clients", []), None

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/health")

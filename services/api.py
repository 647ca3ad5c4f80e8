"""HTTP client for the vehicle registration backend.

All four endpoints live under one base path (``/registrations``). Every
failure, whether transport, error status with a JSON ``{"error": ...}`` body,
or error status without a usable body, surfaces as RegistrationApiError so
callers have a single thing to catch.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from config import AppConfig
from domain.models import VehicleRegistration

logger = logging.getLogger(__name__)


class RegistrationApiError(Exception):
    """Backend call failed; the message is safe to show to the user."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class RegistrationClient:
    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: AppConfig) -> "RegistrationClient":
        return cls(config.api_base_url, timeout=config.request_timeout)

    def _request(self, method: str, path: str = "", payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise RegistrationApiError(f"Network error: {e}", endpoint=url) from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.ok:
            message = data.get("error") if isinstance(data, dict) else None
            raise RegistrationApiError(
                message or f"HTTP error! Status: {response.status_code}",
                status_code=response.status_code,
                endpoint=url,
            )
        return data if isinstance(data, dict) else {}

    def list_registrations(self) -> List[Dict[str, Any]]:
        data = self._request("GET")
        return list(data.get("existingRegistrations") or [])

    def create_registration(self, registration: VehicleRegistration) -> Dict[str, Any]:
        return self._request("POST", "/new", registration.to_payload())

    def update_registration(self, registration_id: str, registration: VehicleRegistration) -> Dict[str, Any]:
        return self._request("PUT", f"/update/{registration_id}", registration.to_payload())

    def delete_registration(self, registration_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/delete/{registration_id}")

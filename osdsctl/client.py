"""
HTTP client for the volume endpoints of the storage control plane.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

from .config import ClientSettings, Config
from .exceptions import HttpError, RemoteError
from .models import ExtendVolumeRequest, VolumeFilter, VolumeRecord, VolumeRequest

logger = logging.getLogger(__name__)


class VolumeClient:
    """Client for the block volume API of a single tenant."""

    def __init__(self, settings: ClientSettings, session: Optional[requests.Session] = None):
        """Initialize the volume client.

        Args:
            settings: Endpoint, tenant and auth settings for this invocation
            session: Optional pre-built session (mainly for tests)
        """
        self.settings = settings
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        if settings.auth_token:
            self.session.headers["X-Auth-Token"] = settings.auth_token

    def _url(self, *parts: str) -> str:
        base = "/".join([
            self.settings.endpoint,
            self.settings.api_version,
            self.settings.tenant_id,
            "block",
            "volumes",
        ])
        return "/".join([base, *parts]) if parts else base

    @staticmethod
    def _masked(data: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """Copy a header or body mapping with credential values hidden."""
        if data is None:
            return None
        return {
            k: "[REDACTED]" if k.lower() in Config.REDACT_KEYS else v
            for k, v in data.items()
        }

    def _request(
        self,
        method: str,
        url: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        logger.debug(
            f"{method} {url} headers={self._masked(dict(self.session.headers))} "
            f"params={params} body={self._masked(body)}"
        )
        try:
            response = self.session.request(
                method,
                url,
                json=body,
                params=params,
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            raise RemoteError(f"Failed to reach {self.settings.endpoint}: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.debug(f"{method} {url} failed: {response.status_code} {response.text}")
            raise HttpError(response.status_code, response.text, url)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(f"Invalid JSON in response from {url}") from e

    def _record(self, method: str, url: str, body: Optional[Dict[str, Any]] = None) -> VolumeRecord:
        """Call an endpoint that must answer with a single volume."""
        record = self._request(method, url, body=body)
        if not isinstance(record, dict):
            raise RemoteError(f"empty response from {method} {url}")
        return record

    def create_volume(self, body: VolumeRequest) -> VolumeRecord:
        return self._record("POST", self._url(), body=body.to_body())

    def get_volume(self, volume_id: str) -> VolumeRecord:
        return self._record("GET", self._url(volume_id))

    def list_volumes(self, query: VolumeFilter) -> List[VolumeRecord]:
        # Empty filters mean "no constraint" and are not put on the query string
        params = {k: v for k, v in query.to_query().items() if v != ""}
        return self._request("GET", self._url(), params=params) or []

    def delete_volume(self, volume_id: str, body: VolumeRequest) -> None:
        self._request("DELETE", self._url(volume_id), body=body.to_body())

    def update_volume(self, volume_id: str, body: VolumeRequest) -> VolumeRecord:
        return self._record("PUT", self._url(volume_id), body=body.to_body())

    def extend_volume(self, volume_id: str, body: ExtendVolumeRequest) -> VolumeRecord:
        return self._record("POST", self._url(volume_id, "resize"), body=body.to_body())

"""
Lightweight REST client for the pet-clinic backend
Every response comes back as a dict carrying _status_code and _success
"""

import asyncio
import logging
import re
from typing import Dict, Any, Optional

import httpx

from petclinic_e2e.config import TestConfig, get_config

logger = logging.getLogger(__name__)

_PATH_TOKEN = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


class ApiUnavailableError(RuntimeError):
    """Backend could not be reached after all retry attempts"""


class RestClient:
    """Async REST client with optional basic authentication"""

    SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")

    def __init__(self, config: Optional[TestConfig] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or get_config()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "RestClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.api_base_url,
                timeout=self.config.request_timeout,
                auth=self.config.basic_auth,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def health_check(self) -> bool:
        """Verify backend server connectivity"""
        try:
            response = await self._get_client().get(self.config.health_endpoint)
        except httpx.HTTPError as e:
            logger.warning("Health check against %s failed: %s", self.config.api_base_url, e)
            return False
        return response.is_success

    async def request(self, method: str, endpoint: str, data: Optional[Any] = None, params: Optional[Dict] = None) -> Dict[str, Any]:
        """Make REST request and normalize the response body"""
        method = method.upper()
        if method not in self.SUPPORTED_METHODS:
            raise ValueError(f"Unsupported method: {method}")

        client = self._get_client()
        json_body = data if method in ("POST", "PUT") else None

        # One initial attempt plus max_retries retries
        attempts = self.config.max_retries + 1
        for attempt in range(1, attempts + 1):
            try:
                response = await client.request(method, endpoint, json=json_body, params=params)
                break
            except httpx.RequestError as e:
                if attempt == attempts:
                    raise ApiUnavailableError(
                        f"{method} {endpoint} failed after {attempts} attempts: {e}"
                    ) from e
                logger.warning("%s %s failed (attempt %d of %d): %s, retrying", method, endpoint, attempt, attempts, e)
                await asyncio.sleep(self.config.retry_delay)

        logger.debug("%s %s -> %d", method, endpoint, response.status_code)
        return self._parse_response(response)

    @staticmethod
    def _parse_response(response: httpx.Response) -> Dict[str, Any]:
        if not response.content:
            parsed_response = {}
        else:
            try:
                parsed_response = response.json()
            except ValueError:
                parsed_response = {"raw_response": response.text}

        # Handle list and scalar responses by wrapping in consistent format
        if isinstance(parsed_response, dict):
            result = dict(parsed_response)
        else:
            result = {"data": parsed_response}

        result["_status_code"] = response.status_code
        result["_success"] = response.status_code < 400
        return result


def status_of(response: Dict[str, Any]) -> Optional[int]:
    return response.get("_status_code")


def json_path(body: Dict[str, Any], path: str) -> Any:
    """
    Read a nested field such as "type.id" or "pets[0].name"

    Raises KeyError when the path does not resolve.
    """
    current: Any = body
    for key, index in _PATH_TOKEN.findall(path):
        if key:
            if not isinstance(current, dict) or key not in current:
                raise KeyError(path)
            current = current[key]
        else:
            position = int(index)
            if not isinstance(current, list) or position >= len(current):
                raise KeyError(path)
            current = current[position]
    return current

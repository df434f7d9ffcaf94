import hashlib
import time
from typing import Any, NamedTuple

import requests

from gogrid_adapter.core.context import ProviderContext
from gogrid_adapter.core.utils import get_wire_logger, setup_logger
from gogrid_adapter.providers.error_classifier import classify_response
from gogrid_adapter.providers.exceptions import (
    ConfigurationError,
    GoGridError,
    ParseError,
    TransportError,
)

logger = setup_logger(name="providers.gogrid_method")
wire = get_wire_logger("providers.gogrid_method")


class Param(NamedTuple):
    key: str
    value: str


class GoGridMethod:
    """Signed GET requests against the GoGrid REST API."""

    LOOKUP_LIST = "common/lookup/list"

    def __init__(self, context: ProviderContext):
        self.context = context

    def sign(self, timestamp: int | None = None) -> str:
        """
        Compute the request signature GoGrid expects: the MD5 hex digest of
        api key, shared secret and the current unix time in seconds.
        """
        if timestamp is None:
            timestamp = int(time.time())
        raw = f"{self.context.api_key}{self.context.shared_secret}{timestamp}"
        return hashlib.md5(raw.encode("utf-8")).hexdigest()

    def get_params(self, *params: Param) -> list[tuple[str, str]]:
        if not self.context.has_credentials():
            raise ConfigurationError("No API key and shared secret were configured")
        query = [
            ("api_key", self.context.api_key),
            ("sig", self.sign()),
            ("v", self.context.api_version),
            ("format", "json"),
        ]
        query.extend((p.key, p.value) for p in params)
        return query

    def get(self, command: str, *params: Param) -> list[Any] | None:
        """
        Issue a GET for the given API command.

        Returns:
            The "list" array of the response, or None when GoGrid sent no list.

        Raises:
            GoGridError: GoGrid answered with an error status
            TransportError: the request failed before a response arrived
            ParseError: a successful response was not JSON
        """
        if not self.context.endpoint:
            raise ConfigurationError("No endpoint was set for this request")
        url = f"{self.context.endpoint.rstrip('/')}/{command}"
        query = self.get_params(*params)
        logger.debug(f"GET {url} {list(params)}")

        try:
            response = requests.get(url, params=query, timeout=self.context.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            descriptor = classify_response(response)
            logger.warning(
                f"GoGrid returned {descriptor.http_status_code} {descriptor.provider_code} for {command}"
            )
            raise GoGridError(descriptor)

        if not response.content:
            return None
        wire.debug(response.text)
        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Failed to parse JSON from {command}: {e}")
            raise ParseError(f"GoGrid returned a non-JSON response for {command}") from e

        if not isinstance(data, dict):
            raise ParseError(f"GoGrid returned an unexpected document for {command}")
        items = data.get("list")
        if items is None:
            return None
        if not isinstance(items, list):
            raise ParseError(f"'list' in the {command} response is not an array")
        return items

    def lookup(self, category: str, **params: str) -> list[Any] | None:
        """Fetch the options GoGrid knows for a lookup category, e.g. 'datacenter'"""
        extra = [Param(k, v) for k, v in params.items()]
        return self.get(self.LOOKUP_LIST, Param("lookup", category), *extra)

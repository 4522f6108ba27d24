"""Generic BFF resource client backed by ``httpx``.

Every domain object (post, user, comment, ...) travels over the same REST
protocol and only differs in shape, so the CRUD logic lives here once and is
parameterised by a :class:`~platformkit.schemas.base.FeatureDataModel`
subclass.

Wire contract:

* ``GET {base}/{path}``      -> 2xx, body is one object or an array of objects
* ``PUT {base}/{path}``      -> exactly 200, body is the stored object
* ``DELETE {base}/{path}/{id}`` -> 200 or 204

The client keeps no state between calls beyond its base address; each call
opens and closes its own ``httpx.AsyncClient``.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Dict
from typing import List
from typing import Optional
from typing import Type
from typing import TypeVar
from typing import Union

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError

from platformkit.core.interfaces import ResourceClient
from platformkit.networking.exceptions import Cancelled
from platformkit.networking.exceptions import DecodeFailure
from platformkit.networking.exceptions import InvalidLocation
from platformkit.networking.exceptions import TransportFailure
from platformkit.networking.exceptions import UnexpectedStatus
from platformkit.schemas.base import FeatureDataModel
from platformkit.schemas.base import require_resource_schema

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=FeatureDataModel)

Location = Union[str, httpx.URL]

_ALLOWED_SCHEMES = frozenset({"http", "https"})
_DELETE_OK = frozenset({200, 204})


def resolve_location(location: Location, base_url: Optional[str] = None) -> httpx.URL:
    """Turn a relative path or absolute URL into a dispatchable address.

    Relative paths are appended to ``base_url`` verbatim, so a base carrying a
    path prefix (``https://host/api``) keeps it.

    Raises:
        InvalidLocation: when the result is not an ``http(s)`` URL with a host.
    """
    raw = str(location) if isinstance(location, httpx.URL) else location
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidLocation(location, "empty location")
    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw):
        raise InvalidLocation(location, "contains whitespace or control characters")

    try:
        url = httpx.URL(raw)
        if not url.scheme:
            if base_url is None:
                raise InvalidLocation(location, "relative location but no base address configured")
            url = httpx.URL(f"{base_url.rstrip('/')}/{raw.lstrip('/')}")
    except httpx.InvalidURL as exc:
        raise InvalidLocation(location, str(exc)) from exc

    if url.scheme not in _ALLOWED_SCHEMES:
        raise InvalidLocation(location, f"unsupported scheme {url.scheme!r}")
    if not url.host:
        raise InvalidLocation(location, "missing host")
    return url


@lru_cache(maxsize=None)
def _list_adapter(schema: Type[FeatureDataModel]) -> TypeAdapter:
    return TypeAdapter(List[schema])  # type: ignore[valid-type]


class HttpResourceClient(ResourceClient):
    """:class:`ResourceClient` implementation talking JSON over HTTP."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self._base_url = base_url.rstrip("/") if base_url else None
        # Test seam: an ``httpx.MockTransport`` replaces the network entirely.
        self._transport = transport
        self._headers = {"Accept": "application/json", "User-Agent": "platformkit/1.0"}
        if headers:
            self._headers.update(headers)

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    # ------------------------------------------------------------------
    # Address resolution
    # ------------------------------------------------------------------

    def resolve(self, location: Location) -> httpx.URL:
        return resolve_location(location, self._base_url)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _send(
        self,
        method: str,
        url: httpx.URL,
        *,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        request_headers = dict(self._headers)
        if headers:
            request_headers.update(headers)

        logger.debug("%s %s", method, url)
        try:
            # Timeouts are the caller's business (asyncio.wait_for / asyncio.timeout).
            async with httpx.AsyncClient(transport=self._transport, timeout=None, follow_redirects=True) as client:
                response = await client.request(method, url, content=content, headers=request_headers)
        except asyncio.CancelledError as exc:
            logger.info("%s %s cancelled by caller", method, url)
            raise Cancelled(method, str(url)) from exc
        except httpx.InvalidURL as exc:
            raise InvalidLocation(str(url), str(exc)) from exc
        except httpx.RequestError as exc:
            # Connection errors, redirect loops and undecodable content encodings:
            # no usable response was obtained.
            logger.error("%s %s transport failure: %s", method, url, exc)
            raise TransportFailure(method, str(url), exc) from exc

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    @staticmethod
    def _decode(response: httpx.Response, url: httpx.URL, schema: Type[T]) -> T:
        try:
            return schema.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeFailure(str(url), schema.__name__, exc) from exc

    @staticmethod
    def _decode_list(response: httpx.Response, url: httpx.URL, schema: Type[T]) -> List[T]:
        try:
            return _list_adapter(schema).validate_json(response.content)
        except ValidationError as exc:
            raise DecodeFailure(str(url), f"List[{schema.__name__}]", exc) from exc

    # ------------------------------------------------------------------
    # ResourceClient API
    # ------------------------------------------------------------------

    async def fetch_single(self, location: Location, schema: Type[T]) -> T:
        require_resource_schema(schema)
        url = self.resolve(location)
        response = await self._send("GET", url)
        if not 200 <= response.status_code <= 299:
            raise UnexpectedStatus("GET", str(url), response.status_code, response.text)
        return self._decode(response, url, schema)

    async def fetch_list(self, location: Location, schema: Type[T]) -> List[T]:
        require_resource_schema(schema)
        url = self.resolve(location)
        response = await self._send("GET", url)
        if not 200 <= response.status_code <= 299:
            raise UnexpectedStatus("GET", str(url), response.status_code, response.text)
        return self._decode_list(response, url, schema)

    async def update(self, location: Location, schema: Type[T], record: T) -> T:
        require_resource_schema(schema)
        if not isinstance(record, schema):
            raise TypeError(f"record must be a {schema.__name__}, got {type(record).__name__}")
        url = self.resolve(location)
        body = record.to_wire()
        response = await self._send("PUT", url, content=body, headers={"Content-Type": "application/json"})
        if response.status_code != 200:
            raise UnexpectedStatus("PUT", str(url), response.status_code, response.text)
        # The server's copy is authoritative, not the submitted record.
        return self._decode(response, url, schema)

    async def delete(self, location: Location, schema: Type[T], record_id: int) -> None:
        require_resource_schema(schema)
        if record_id is None:
            raise InvalidLocation(location, f"cannot delete {schema.__name__} without an identifier")
        url = self.resolve(location)

        path = url.path.rstrip("/")
        if path.rsplit("/", 1)[-1] != str(record_id):
            url = url.copy_with(path=f"{path}/{record_id}")

        response = await self._send("DELETE", url)
        if response.status_code in _DELETE_OK:
            logger.info(
                "%s %s deleted successfully (status %s)", schema.__name__, record_id, response.status_code
            )
            return

        logger.warning(
            "Failed to delete %s %s (status %s). Server response: %s",
            schema.__name__,
            record_id,
            response.status_code,
            response.text,
        )
        raise UnexpectedStatus("DELETE", str(url), response.status_code, response.text or None)

from __future__ import annotations

import ssl
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx

from zonesync.config.http_transport import TransportConfig

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._client import UseClientDefault
    from httpx._types import (
        AuthTypes,
        HeaderTypes,
        QueryParamTypes,
        RequestContent,
        TimeoutTypes,
        URLTypes,
    )


class RequestOptions(TypedDict, total=False):
    content: RequestContent | None
    json: object
    params: QueryParamTypes | None
    headers: HeaderTypes | None
    auth: AuthTypes | UseClientDefault | None
    timeout: TimeoutTypes | UseClientDefault


class ClientOptions(TypedDict, total=False):
    base_url: str
    timeout: TimeoutTypes
    verify: bool | ssl.SSLContext
    auth: AuthTypes
    headers: HeaderTypes
    params: QueryParamTypes
    transport: httpx.BaseTransport


class TransportClient:
    """Blocking HTTP client that issues one request at a time.

    No retry or caching layer: every call returns the response or raises the
    ``httpx`` error that ended it.
    """

    def __init__(
        self,
        config: TransportConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config

        client_kwargs: ClientOptions = {
            "base_url": config.base_url,
            "timeout": config.timeout_seconds,
            "verify": _ssl_verify(config.verify),
        }
        if config.auth is not None:
            client_kwargs["auth"] = httpx.BasicAuth(config.auth.username, config.auth.password)
        if config.default_headers:
            client_kwargs["headers"] = dict(config.default_headers)
        if config.default_params:
            client_kwargs["params"] = dict(config.default_params)
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.Client(**client_kwargs)

    def __enter__(self) -> TransportClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return self._client.request(method, url, **kwargs)

    def get(self, url: URLTypes, **kwargs: Unpack[RequestOptions]) -> httpx.Response:
        return self.request("GET", url, **kwargs)

    def put(self, url: URLTypes, **kwargs: Unpack[RequestOptions]) -> httpx.Response:
        return self.request("PUT", url, **kwargs)

    def delete(self, url: URLTypes, **kwargs: Unpack[RequestOptions]) -> httpx.Response:
        return self.request("DELETE", url, **kwargs)


def _ssl_verify(verify: bool | str) -> bool | ssl.SSLContext:
    if isinstance(verify, str):
        return ssl.create_default_context(cafile=verify)
    return verify

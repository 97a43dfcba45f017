"""Constructores de peticiones versionadas.

- `JetpackRequest`: llamada a la API de WooCommerce de un sitio, tunelizada a
  través de WordPress.com (`jetpack-blogs/{site_id}/rest-api/`).
- `DotcomRequest`: llamada directa a la API REST de WordPress.com.

Ambas son valores inmutables; `build()` es puro y devuelve una
`httpx.Request` lista para enviar.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping

import httpx

from core.config import AppSettings
from core.errors import InvalidRequestError


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class WooAPIVersion(str, Enum):
    """Versión de la API de WooCommerce (prefijo de ruta)."""

    NONE = ""
    MARK1 = "wc/v1/"
    MARK2 = "wc/v2/"
    MARK3 = "wc/v3/"


class WordPressAPIVersion(str, Enum):
    MARK1_1 = "rest/v1.1"
    MARK1_2 = "rest/v1.2"


def _request_factory(client: httpx.AsyncClient | None) -> Callable[..., httpx.Request]:
    # `client.send()` no añade los headers del cliente; `build_request()` sí.
    return client.build_request if client is not None else httpx.Request


def _freeze(parameters: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    if parameters is None:
        return None
    return MappingProxyType(dict(parameters))


@dataclass(frozen=True)
class JetpackRequest:
    woo_api_version: WooAPIVersion
    method: HTTPMethod
    site_id: int
    path: str
    parameters: Mapping[str, Any] | None = field(default=None)

    def __post_init__(self) -> None:
        if self.site_id <= 0:
            raise InvalidRequestError(f"site_id must be a positive integer, got {self.site_id}")
        if not self.path:
            raise InvalidRequestError("path is required")
        object.__setattr__(self, "parameters", _freeze(self.parameters))

    @property
    def description(self) -> str:
        return f"{self.method.value} {self.jetpack_path}"

    @property
    def jetpack_path(self) -> str:
        return "/" + self.woo_api_version.value + self.path

    @property
    def dotcom_method(self) -> HTTPMethod:
        return HTTPMethod.GET if self.method is HTTPMethod.GET else HTTPMethod.POST

    @property
    def dotcom_path(self) -> str:
        return f"jetpack-blogs/{self.site_id}/rest-api/"

    def dotcom_parameters(self) -> dict[str, str]:
        """Parámetros del túnel: ruta interna, método interno y payload JSON."""

        output = {
            "json": "true",
            "path": f"{self.jetpack_path}&_method={self.method.value.lower()}",
        }
        if self.parameters:
            encoded = json.dumps(dict(self.parameters), sort_keys=True)
            key = "query" if self.method is HTTPMethod.GET else "body"
            output[key] = encoded
        return output

    def build(self, settings: AppSettings, client: httpx.AsyncClient | None = None) -> httpx.Request:
        url = f"{settings.rest_root}/{WordPressAPIVersion.MARK1_1.value}/{self.dotcom_path}"
        params = self.dotcom_parameters()
        make = _request_factory(client)
        if self.dotcom_method is HTTPMethod.GET:
            return make("GET", url, params=params)
        return make("POST", url, data=params)


@dataclass(frozen=True)
class DotcomRequest:
    wordpress_api_version: WordPressAPIVersion
    method: HTTPMethod
    path: str
    parameters: Mapping[str, Any] | None = field(default=None)

    def __post_init__(self) -> None:
        if not self.path:
            raise InvalidRequestError("path is required")
        object.__setattr__(self, "parameters", _freeze(self.parameters))

    @property
    def description(self) -> str:
        return f"{self.method.value} /{self.wordpress_api_version.value}/{self.path}"

    def build(self, settings: AppSettings, client: httpx.AsyncClient | None = None) -> httpx.Request:
        url = f"{settings.rest_root}/{self.wordpress_api_version.value}/{self.path}"
        params = {k: str(v) for k, v in (self.parameters or {}).items()}
        make = _request_factory(client)
        if self.method is HTTPMethod.GET:
            return make("GET", url, params=params)
        return make(self.method.value, url, data=params)

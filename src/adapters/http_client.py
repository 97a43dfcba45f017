"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers (User-Agent, bearer token) y el mapeo de
  fallos HTTP a `core.errors`.
- Facilita testeo: se puede sustituir el transporte por `httpx.MockTransport`
  o el `Network` completo por un stub.
"""

from __future__ import annotations

import json

import httpx
import structlog

from core.config import AppSettings
from core.errors import DotcomError, NetworkError, ResponseStatusError
from core.interfaces.request import RemoteRequest

logger = structlog.get_logger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Centraliza timeouts/headers para que todos los remotes se comporten igual.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.auth_token:
        headers["Authorization"] = f"Bearer {settings.auth_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def parse_dotcom_error(response: httpx.Response) -> DotcomError | None:
    """Detecta el payload de error de WordPress.com (`{"error", "message"}`)."""

    try:
        payload = json.loads(response.content)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    code = payload.get("error")
    if not isinstance(code, str) or not code:
        return None
    message = payload.get("message")
    return DotcomError(
        code,
        message if isinstance(message, str) else "",
        status_code=response.status_code,
    )


class HttpxNetwork:
    """`Network` real sobre `httpx.AsyncClient`.

    Una petición por llamada, sin reintentos. Si no se le pasa un cliente,
    crea uno propio con `build_async_client` y lo cierra en `aclose()`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings, transport=transport)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    async def response_data(self, request: RemoteRequest) -> bytes:
        http_request = request.build(self._settings, self._client)
        try:
            response = await self._client.send(http_request)
        except httpx.HTTPError as exc:
            raise NetworkError(f"{request.description}: {exc}") from exc

        logger.debug(
            "http.response",
            method=http_request.method,
            url=str(http_request.url),
            status_code=response.status_code,
        )
        if response.is_success:
            # La API de WordPress.com puede devolver 200 con payload de error.
            error = parse_dotcom_error(response)
            if error is not None:
                raise error
            return response.content

        error = parse_dotcom_error(response)
        if error is not None:
            raise error
        raise ResponseStatusError(response.status_code, response.text)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxNetwork":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

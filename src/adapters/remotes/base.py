"""Base de los remotes (un remote por familia de recursos).

Cada remote recibe un `Network` inyectado y combina:
petición versionada -> transporte -> mapper -> resultado tipado.
Todos los fallos salen por el mismo canal (`core.errors.RemoteError`).
"""

from __future__ import annotations

import json
from typing import Callable, TypeVar

import structlog
from pydantic import ValidationError

from core.domain.result import RemoteResult
from core.errors import DecodingError, RemoteError
from core.interfaces.mapper import Mapper
from core.interfaces.network import Network
from core.interfaces.request import RemoteRequest

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class Remote:
    """Despacha peticiones a través del `Network` inyectado."""

    def __init__(self, network: Network) -> None:
        self._network = network

    @property
    def network(self) -> Network:
        return self._network

    async def enqueue(self, request: RemoteRequest, mapper: Mapper[T]) -> T:
        """Envía `request` y decodifica la respuesta con `mapper`.

        Lanza `NetworkError`, `ResponseStatusError`, `DotcomError` o
        `DecodingError`; no reintenta.
        """

        log = logger.bind(request=request.description, site_id=getattr(request, "site_id", None))
        log.debug("remote.dispatch")
        try:
            data = await self._network.response_data(request)
        except RemoteError as exc:
            log.warning("remote.failed", error=str(exc), error_type=type(exc).__name__)
            raise

        try:
            return mapper.map(data)
        except (ValidationError, json.JSONDecodeError, ValueError, TypeError, KeyError) as exc:
            log.warning("remote.decode_failed", mapper=type(mapper).__name__, error=str(exc))
            raise DecodingError(type(mapper).__name__, str(exc)) from exc

    async def enqueue_result(self, request: RemoteRequest, mapper: Mapper[T]) -> RemoteResult[T]:
        return await RemoteResult.capture(self.enqueue(request, mapper))

    async def enqueue_with_completion(
        self,
        request: RemoteRequest,
        mapper: Mapper[T],
        completion: Callable[[T | None, RemoteError | None], None],
    ) -> None:
        """Contrato de callback: `completion` se invoca exactamente una vez."""

        result = await self.enqueue_result(request, mapper)
        result.deliver(completion)

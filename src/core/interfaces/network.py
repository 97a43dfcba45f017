"""Contrato del transporte HTTP.

Los remotes reciben un `Network` en su constructor (inyección explícita), de
modo que el transporte real (httpx) y los dobles de test son intercambiables.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.interfaces.request import RemoteRequest


@runtime_checkable
class Network(Protocol):
    """Transporte opaco y thread-safe.

    Reglas de diseño:
    - `response_data` es asíncrono porque hace I/O.
    - Devuelve el cuerpo crudo de una respuesta 2xx; cualquier otro desenlace
      se lanza como `core.errors.RemoteError`.
    """

    async def response_data(self, request: RemoteRequest) -> bytes:
        ...

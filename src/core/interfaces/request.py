"""Contrato de una petición remota ya formada."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx

from core.config import AppSettings


@runtime_checkable
class RemoteRequest(Protocol):
    """Descriptor inmutable capaz de convertirse en una `httpx.Request`."""

    @property
    def description(self) -> str:
        """Resumen corto (método + ruta) para logs."""

        ...

    def build(self, settings: AppSettings, client: httpx.AsyncClient | None = None) -> httpx.Request:
        """Con `client`, la petición hereda sus headers por defecto (auth, User-Agent)."""

        ...

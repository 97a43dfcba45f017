"""Errores del acceso remoto.

Todos los fallos de una llamada (transporte, status HTTP, payload de error de
WordPress.com o decodificación) derivan de `RemoteError`, de modo que el
llamador tiene un único canal de error.
"""

from __future__ import annotations

from enum import Enum


class RemoteError(Exception):
    """Base de cualquier fallo de una llamada remota."""


class NetworkError(RemoteError):
    """Fallo de transporte (conectividad, timeout). La causa original va en `__cause__`."""


class InvalidRequestError(RemoteError):
    """La petición no se puede formar (p.ej. `site_id` no positivo o ruta vacía)."""


class ResponseStatusError(RemoteError):
    """El backend respondió con un status no-2xx sin payload de error reconocible."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Unexpected HTTP status {status_code}")


class DotcomError(RemoteError):
    """Payload de error de WordPress.com: `{"error": code, "message": text}`."""

    def __init__(self, code: str, message: str = "", status_code: int | None = None) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"{code}: {message}" if message else code)


class DecodingError(RemoteError):
    """El cuerpo de la respuesta no tiene la forma esperada."""

    def __init__(self, what: str, detail: str = "") -> None:
        self.what = what
        self.detail = detail
        super().__init__(f"Could not decode {what}" + (f": {detail}" if detail else ""))


class ProductUpdateError(str, Enum):
    """Errores de validación al editar un producto."""

    DUPLICATED_SKU = "duplicated_sku"

    @property
    def alert_title(self) -> str:
        return "Cannot update product"

    @property
    def alert_message(self) -> str:
        return "The SKU is used by another product."


class ProductUpdateFailed(Exception):
    """Se lanza cuando la edición de un producto no supera la validación."""

    def __init__(self, error: ProductUpdateError) -> None:
        self.error = error
        super().__init__(f"{error.alert_title}: {error.alert_message}")

"""Contrato de los mappers de respuesta."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Mapper(Protocol[T_co]):
    """Decodifica el cuerpo crudo de una respuesta en objetos del dominio.

    Debe lanzar (ValueError, pydantic.ValidationError, ...) ante cuerpos mal
    formados; nunca devuelve objetos parciales.
    """

    def map(self, response: bytes) -> T_co:
        ...

"""Enumeraciones extensibles (string-backed).

El backend puede introducir valores nuevos (p.ej. tipos de producto añadidos
por extensiones). Una `ExtensibleEnum` decodifica los valores conocidos a su
variante y conserva cualquier otro string como variante `custom`, sin fallar.

Contrato:
- `from_raw_value(s).raw_value == s` para cualquier string `s`.
- Las variantes conocidas forman una biyección variante <-> clave de wire.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

CUSTOM = "custom"


@dataclass(frozen=True)
class ExtensibleEnum:
    """Base de las enumeraciones abiertas.

    Las subclases declaran `KNOWN` (variante -> clave de wire). Cada variante
    conocida queda expuesta como atributo de clase en mayúsculas
    (`ProductType.SIMPLE`).
    """

    variant: str
    raw_value: str

    KNOWN: ClassVar[Mapping[str, str]] = {}
    _BY_RAW: ClassVar[Mapping[str, str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        by_raw = {raw: variant for variant, raw in cls.KNOWN.items()}
        if len(by_raw) != len(cls.KNOWN):
            raise TypeError(f"{cls.__name__}.KNOWN must map variants to distinct wire keys")
        if CUSTOM in cls.KNOWN:
            raise TypeError(f"{cls.__name__}.KNOWN cannot redefine the '{CUSTOM}' variant")
        cls._BY_RAW = by_raw
        for variant, raw in cls.KNOWN.items():
            setattr(cls, variant.upper(), cls(variant, raw))

    @classmethod
    def from_raw_value(cls, raw_value: str):
        """Decodifica un string del backend. Nunca falla para strings."""

        variant = cls._BY_RAW.get(raw_value)
        if variant is None:
            return cls(CUSTOM, raw_value)
        return cls(variant, raw_value)

    @classmethod
    def custom(cls, raw_value: str):
        """Variante `custom`; una clave conocida no puede ser custom."""

        if raw_value in cls._BY_RAW:
            raise ValueError(f"{raw_value!r} is a known {cls.__name__} key; use from_raw_value()")
        return cls(CUSTOM, raw_value)

    @classmethod
    def known_values(cls) -> list:
        return [cls(variant, raw) for variant, raw in cls.KNOWN.items()]

    @property
    def is_custom(self) -> bool:
        return self.variant == CUSTOM

    def __str__(self) -> str:
        return self.raw_value

    def __repr__(self) -> str:
        if self.is_custom:
            return f"{type(self).__name__}.custom({self.raw_value!r})"
        return f"{type(self).__name__}.{self.variant.upper()}"

    @classmethod
    def _validate(cls, value: Any):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_raw_value(value)
        raise ValueError(f"{cls.__name__} expects a string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.raw_value,
                return_schema=core_schema.str_schema(),
            ),
        )


class ProductType(ExtensibleEnum):
    """Tipo de producto. `external` en el wire es la variante `affiliate`."""

    KNOWN = {
        "simple": "simple",
        "grouped": "grouped",
        "affiliate": "external",
        "variable": "variable",
    }


class ProductStockStatus(ExtensibleEnum):
    KNOWN = {
        "in_stock": "instock",
        "out_of_stock": "outofstock",
        "on_backorder": "onbackorder",
    }

    @property
    def description(self) -> str:
        labels = {
            "in_stock": "In stock",
            "out_of_stock": "Out of stock",
            "on_backorder": "On backorder",
        }
        return labels.get(self.variant, self.raw_value)


class ProductBackordersSetting(ExtensibleEnum):
    KNOWN = {
        "not_allowed": "no",
        "allowed_and_notify": "notify",
        "allowed": "yes",
    }

    @property
    def description(self) -> str:
        labels = {
            "not_allowed": "Do not allow",
            "allowed_and_notify": "Allow, but notify customer",
            "allowed": "Allow",
        }
        return labels.get(self.variant, self.raw_value)


class OrderStatus(ExtensibleEnum):
    KNOWN = {
        "pending": "pending",
        "processing": "processing",
        "on_hold": "on-hold",
        "completed": "completed",
        "cancelled": "cancelled",
        "refunded": "refunded",
        "failed": "failed",
    }

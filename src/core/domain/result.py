"""Resultado de una llamada remota (éxito XOR fallo)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar

from core.errors import RemoteError

T = TypeVar("T")


@dataclass(frozen=True)
class RemoteResult(Generic[T]):
    """Valor de un solo uso: exactamente uno de `value` / `error` está presente."""

    value: T | None = None
    error: RemoteError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("RemoteResult requires exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "RemoteResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RemoteError) -> "RemoteResult[T]":
        return cls(error=error)

    @classmethod
    async def capture(cls, operation: Awaitable[T]) -> "RemoteResult[T]":
        """Espera `operation` y encapsula su valor o su `RemoteError`."""

        try:
            value = await operation
        except RemoteError as exc:
            return cls.failure(exc)
        return cls.success(value)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def deliver(self, completion: Callable[[T | None, RemoteError | None], None]) -> None:
        """Invoca `completion` una única vez con `(value, None)` o `(None, error)`."""

        completion(self.value, self.error)


async def run_with_completion(
    operation: Awaitable[T],
    completion: Callable[[T | None, RemoteError | None], None],
) -> None:
    """Adapta una operación `async` al contrato de callback de completion."""

    result: RemoteResult[T] = await RemoteResult.capture(operation)
    result.deliver(completion)

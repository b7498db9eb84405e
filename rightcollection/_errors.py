# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "CollectionError",
    "OutOfRangeError",
    "NotFoundError",
    "EmptyCollectionError",
)


class CollectionError(Exception):
    default_message: ClassVar[str] = "Collection error"
    status_code: ClassVar[int] = 500

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}
        self.status_code = status_code or self.status_code

    def __str__(self) -> str:
        return self.message

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__


class OutOfRangeError(CollectionError, IndexError):
    """Positional access outside ``[0, size)``."""

    default_message = "Index out of range"
    status_code = 416

    @classmethod
    def from_index(cls, index: Any, size: int) -> "OutOfRangeError":
        return cls(
            f"index {index} is out of range for collection of size {size}",
            details={"index": index, "size": size},
        )


class NotFoundError(CollectionError, LookupError):
    """Keyed lookup matched no element."""

    default_message = "Item not found"
    status_code = 404


class EmptyCollectionError(CollectionError):
    """Aggregate or extremum query on a collection with no elements."""

    default_message = "Collection is empty"
    status_code = 409

    @classmethod
    def for_operation(cls, operation: str) -> "EmptyCollectionError":
        return cls(
            f"cannot compute {operation} of an empty collection",
            details={"operation": operation},
        )

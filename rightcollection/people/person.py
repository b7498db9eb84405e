# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = ("Person",)


class Person(BaseModel):
    """An immutable person value.

    Two persons are equal when both their name and age are equal; there
    is no identity beyond that. Age is expected to be non-negative but
    is not checked.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        use_attribute_docstrings=True,
    )

    name: str = Field(..., title="Name")
    """The name of the person. Not required to be unique."""

    age: int = Field(..., title="Age")
    """The age of the person, in years."""

    def __init__(self, name: str, age: int, **data: Any) -> None:
        super().__init__(name=name, age=age, **data)

    def __str__(self) -> str:
        return f"{self.name}, {self.age} years old"

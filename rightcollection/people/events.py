# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from .person import Person

if TYPE_CHECKING:
    from .collection import PersonCollection

__all__ = ("PersonEvent", "PERSON_ADDED", "PERSON_REMOVED")

PERSON_ADDED = "added"
PERSON_REMOVED = "removed"


@dataclass(frozen=True)
class PersonEvent:
    """Payload delivered to collection observers."""

    person: Person
    channel: Literal["added", "removed"]
    sender: PersonCollection | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return str(self.person)

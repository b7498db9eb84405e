# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .collection import PersonCollection
from .events import PERSON_ADDED, PERSON_REMOVED, PersonEvent
from .person import Person

__all__ = (
    "Person",
    "PersonCollection",
    "PersonEvent",
    "PERSON_ADDED",
    "PERSON_REMOVED",
)

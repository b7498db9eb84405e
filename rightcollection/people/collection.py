# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Iterator
from typing import Any

from rightcollection._errors import (
    EmptyCollectionError,
    NotFoundError,
    OutOfRangeError,
)
from rightcollection.protocols._concepts import Collective
from rightcollection.protocols.generic.broadcaster import EventChannel

from .events import PERSON_ADDED, PERSON_REMOVED, PersonEvent
from .person import Person

__all__ = ("PersonCollection",)

logger = logging.getLogger(__name__)


class PersonCollection(Collective[Person]):
    """A collection of people with sorting, filtering, aggregation and
    change notification.

    The underlying list is never handed out. Membership changes go
    through :meth:`add` and :meth:`remove`, which notify the
    ``person_added`` and ``person_removed`` channels after the change is
    visible. Positional replacement and sorting do not notify.

    The collection is not thread-safe and does not guard against
    observers that mutate it from inside a callback.

    Example::

        people = PersonCollection([Person("Alice", 40), Person("Bob", 35)])
        people.person_added.subscribe(lambda e: print(f"Person added: {e.person}"))
        people.add(Person("Charlie", 50))
    """

    def __init__(self, people: Iterable[Person] | None = None):
        self._people: list[Person] = []
        self.person_added: EventChannel[PersonEvent] = EventChannel(
            PERSON_ADDED, event_type=PersonEvent
        )
        self.person_removed: EventChannel[PersonEvent] = EventChannel(
            PERSON_REMOVED, event_type=PersonEvent
        )
        for person in people or ():
            self._validate_item_type(person)
            self._people.append(person)

    def _validate_item_type(self, item: Any) -> None:
        if not isinstance(item, Person):
            raise TypeError(
                f"Item must be of type {Person.__name__}, "
                f"not {item.__class__.__name__}."
            )

    def _check_index(self, index: Any) -> int:
        if isinstance(index, bool):
            raise TypeError("indices must be integers, not bool")
        try:
            position = operator.index(index)
        except TypeError:
            raise TypeError(
                f"indices must be integers, not {index.__class__.__name__}"
            ) from None
        if not 0 <= position < len(self._people):
            raise OutOfRangeError.from_index(position, len(self._people))
        return position

    # ------------------------------------------------------------------
    # access
    # ------------------------------------------------------------------

    def at(self, index: int) -> Person:
        """Returns the person at ``index``.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, count)``.
        """
        return self._people[self._check_index(index)]

    def set_at(self, index: int, person: Person) -> None:
        """Replaces the person at ``index`` without notifying observers.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, count)``.
            TypeError: If ``person`` is not a :class:`Person`.
        """
        index = self._check_index(index)
        self._validate_item_type(person)
        self._people[index] = person

    def by_name(self, name: str) -> Person:
        """Returns the first person, in current order, named ``name``.

        Names are not required to be unique; later matches are ignored.
        Use :meth:`find_by_name` to see all of them.

        Raises:
            NotFoundError: If nobody has that name.
        """
        for person in self._people:
            if person.name == name:
                return person
        raise NotFoundError(
            f"No person named '{name}' in collection", details={"name": name}
        )

    first_by_name = by_name

    def __getitem__(self, key: int | str) -> Person:
        if isinstance(key, str):
            return self.by_name(key)
        return self.at(key)

    def __setitem__(self, index: int, person: Person) -> None:
        self.set_at(index, person)

    # ------------------------------------------------------------------
    # membership
    # ------------------------------------------------------------------

    def add(self, person: Person) -> None:
        """Appends ``person`` and notifies ``person_added``."""
        self._validate_item_type(person)
        self._people.append(person)
        logger.debug(f"Added {person} (count={len(self._people)})")
        self._on_person_added(person)

    def remove(self, person: Person) -> bool:
        """Removes the first person equal to ``person``.

        Notifies ``person_removed`` only when something was removed.

        Returns:
            bool: True if a person was removed; otherwise False.
        """
        try:
            index = self._people.index(person)
        except ValueError:
            return False
        removed = self._people.pop(index)
        logger.debug(f"Removed {removed} (count={len(self._people)})")
        self._on_person_removed(removed)
        return True

    def include(self, item: Person, /) -> None:
        """Same as :meth:`add`."""
        self.add(item)

    def exclude(self, item: Person, /) -> bool:
        """Same as :meth:`remove`."""
        return self.remove(item)

    @property
    def count(self) -> int:
        """The number of people in the collection."""
        return len(self._people)

    def __len__(self) -> int:
        return len(self._people)

    def __bool__(self) -> bool:
        return bool(self._people)

    def __contains__(self, item: Any) -> bool:
        return item in self._people

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def to_list(self) -> list[Person]:
        """Returns a new list holding the people in current order."""
        return list(self._people)

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def find_by_name(self, name: str) -> Iterator[Person]:
        """Yields every person named ``name``, in current order."""
        return (p for p in self._people if p.name == name)

    def filter_by_age(self, minimum_age: int) -> Iterator[Person]:
        """Yields every person at least ``minimum_age`` years old."""
        return (p for p in self._people if p.age >= minimum_age)

    def sort_by_name(self) -> None:
        """Sorts the collection in place by name. Ties keep their order."""
        self._people.sort(key=lambda p: p.name)
        logger.debug("Sorted collection by name")

    def sort_by_age(self) -> None:
        """Sorts the collection in place by age. Ties keep their order."""
        self._people.sort(key=lambda p: p.age)
        logger.debug("Sorted collection by age")

    def average_age(self) -> float:
        """Returns the mean age.

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        if not self._people:
            raise EmptyCollectionError.for_operation("average age")
        return sum(p.age for p in self._people) / len(self._people)

    def oldest_person(self) -> Person:
        """Returns the oldest person; the first one wins a tie.

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        if not self._people:
            raise EmptyCollectionError.for_operation("oldest person")
        return max(self._people, key=lambda p: p.age)

    def youngest_person(self) -> Person:
        """Returns the youngest person; the first one wins a tie.

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        if not self._people:
            raise EmptyCollectionError.for_operation("youngest person")
        return min(self._people, key=lambda p: p.age)

    # ------------------------------------------------------------------
    # notification
    # ------------------------------------------------------------------

    def _on_person_added(self, person: Person) -> None:
        self.person_added.emit(
            PersonEvent(person=person, channel=PERSON_ADDED, sender=self)
        )

    def _on_person_removed(self, person: Person) -> None:
        self.person_removed.emit(
            PersonEvent(person=person, channel=PERSON_REMOVED, sender=self)
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._people!r})"

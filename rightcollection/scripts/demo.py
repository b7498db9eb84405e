# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""
Walk through the PersonCollection API and print what happens.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from rightcollection.people import Person, PersonCollection, PersonEvent

logger = logging.getLogger(__name__)

TITLE = "The Right Collection"
DESCRIPTION = (
    "This project demonstrates how to encapsulate a collection of items in a "
    "class that provides a more meaningful interface than the built-in "
    "collection types."
)


def write_collection(items: Iterable[Any], write: Callable[[str], Any] = print) -> None:
    for item in items:
        write(f"- {item}")


def run_demo(write: Callable[[str], Any] = print) -> PersonCollection:
    """Run the walkthrough, sending every output line to ``write``.

    Returns the collection in its final state.
    """
    write(TITLE)
    write("-" * 21)
    write(DESCRIPTION)

    write("")
    write("Create a collection of people:")
    people = PersonCollection(
        [
            Person("Alice", 40),
            Person("Bob", 35),
            Person("Charlie", 50),
        ]
    )

    write("")
    write("People:")
    write_collection(people, write)

    write("")
    write("People named 'Bob':")
    write_collection(people.find_by_name("Bob"), write)

    write("")
    write("Sort by age:")
    people.sort_by_age()
    write_collection(people, write)

    write("")
    write("Get the oldest person:")
    write(str(people.oldest_person()))

    write("")
    write("Subscribe to events:")

    def on_added(event: PersonEvent) -> None:
        write(f"Person added: {event.person}")

    def on_removed(event: PersonEvent) -> None:
        write(f"Person removed: {event.person}")

    people.person_added.subscribe(on_added)
    people.person_removed.subscribe(on_removed)

    bob = people["Bob"]
    people.remove(bob)
    people.add(bob)
    write_collection(people, write)

    logger.debug(f"Demo finished with {people.count} people")
    return people


def main() -> None:
    run_demo()


if __name__ == "__main__":
    main()

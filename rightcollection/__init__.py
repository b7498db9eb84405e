# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    CollectionError,
    EmptyCollectionError,
    NotFoundError,
    OutOfRangeError,
)
from .config import settings
from .people import Person, PersonCollection, PersonEvent
from .protocols.generic.broadcaster import EventChannel, Subscription
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

__all__ = (
    "CollectionError",
    "EmptyCollectionError",
    "EventChannel",
    "NotFoundError",
    "OutOfRangeError",
    "Person",
    "PersonCollection",
    "PersonEvent",
    "Subscription",
    "settings",
    "__version__",
)

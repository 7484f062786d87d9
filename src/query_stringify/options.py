"""Conversion options passed alongside a record."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger("query_stringify.options")


class Option(str, Enum):
    """
    Behavioural modifiers for a conversion call.

    New behaviours are added as new members; anything that is not a
    member is ignored by :func:`resolve_options`.

    Members:
        SKIP_EMPTY: Omit text fields equal to ``""`` and integer fields
            equal to ``0``. Booleans are never considered empty.
    """

    SKIP_EMPTY = "skip_empty"


SkipEmpty = Option.SKIP_EMPTY


@dataclass(frozen=True)
class ConversionOptions:
    """Resolved, immutable view of an option set."""

    skip_empty: bool = False


def resolve_options(options: tuple[object, ...]) -> ConversionOptions:
    """Collapse positional option values into a :class:`ConversionOptions`."""
    skip_empty = False
    for opt in options:
        if not isinstance(opt, Option):
            logger.debug("Ignoring unrecognised option %r", opt)
            continue
        if opt is Option.SKIP_EMPTY:
            skip_empty = True
    return ConversionOptions(skip_empty=skip_empty)

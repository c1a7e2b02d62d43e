from __future__ import annotations

import logging
from typing import IO, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Opener = Callable[[], IO[str]]


def load_with_fallback(
    open_primary: Opener,
    open_default: Opener,
    parse: Callable[[IO[str]], T],
    what: str,
) -> T:
    """Parse the user's file, or the bundled default if the user has none yet.

    Only a missing user file selects the default. Anything else raised while
    opening or parsing (permissions, corrupt content) reaches the caller.
    """
    try:
        stream = open_primary()
    except FileNotFoundError:
        logger.info("Loading default %s.", what)
        with open_default() as fh:
            return parse(fh)
    with stream:
        logger.info("Loading user %s.", what)
        return parse(stream)

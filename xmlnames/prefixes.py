"""Short namespace prefixes generated during one serialization pass."""

import logging
import string
from contextlib import contextmanager

from .errors import UnboundCounter

logger = logging.getLogger(__name__)

PREFIX_ALPHABET = string.ascii_lowercase


def generatePrefix(n):
    """Map a non-negative integer onto a lowercase prefix.

    Base 26 digits ``a`` to ``z``, least significant digit first:
    0 -> ``a``, 25 -> ``z``, 26 -> ``ab``, 51 -> ``zb``.
    """
    if n < 0:
        raise ValueError("prefix number must not be negative: %d" % n)
    base = len(PREFIX_ALPHABET)
    letters = []
    while True:
        n, digit = divmod(n, base)
        letters.append(PREFIX_ALPHABET[digit])
        if n <= 0:
            break
    return "".join(letters)


class PrefixGenerator:
    """Stateful prefix source for a single serialization pass.

    The counter is bound on construction and unbound by :meth:`close`;
    calling :meth:`next` afterwards raises :class:`UnboundCounter`.
    Generators are not shared between passes.
    """

    def __init__(self, start=0):
        if start < 0:
            raise ValueError("prefix counter must not start below zero: %d" % start)
        self._counter = start

    def isBound(self):
        return self._counter is not None

    def next(self):
        if self._counter is None:
            raise UnboundCounter("prefix counter is not bound to a serialization pass")
        current = self._counter
        self._counter = current + 1
        prefix = generatePrefix(current)
        logger.debug("generated prefix %s (counter %d)", prefix, current)
        return prefix

    __next__ = next

    def close(self):
        self._counter = None


@contextmanager
def prefixScope(start=0):
    "provide a fresh prefix generator for one serialization pass"
    generator = PrefixGenerator(start)
    logger.debug("prefix scope opened at %d", start)
    try:
        yield generator
    finally:
        generator.close()
        logger.debug("prefix scope closed")

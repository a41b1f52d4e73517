"""Itanium C++ ABI name classification and demangling."""

from __future__ import annotations

from itanium_demangler import parse

from wedlock.utils.logging import get_logger

log = get_logger(__name__)

_MAX_LEADING_UNDERSCORES = 4


def is_itanium_encoding(name: str) -> bool:
    """A valid Itanium encoding has 1-4 leading underscores followed by 'Z'."""
    pos = len(name) - len(name.lstrip("_"))
    if pos == len(name):
        return False
    return 0 < pos <= _MAX_LEADING_UNDERSCORES and name[pos] == "Z"


def demangle(name: str) -> str:
    """Demangle ``name``, returning it unchanged when it cannot be demangled."""
    if not is_itanium_encoding(name):
        return name
    try:
        node = parse(name)
    except Exception as exc:  # parse() raises assorted errors on malformed names
        log.debug("demangle_failed", name=name, error=str(exc))
        return name
    if node is None:
        return name
    return str(node)

"""Display grouping and search for color token keys."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")
_WORD_START_RE = re.compile(r"\b\w")

_GENERAL_KEYS = frozenset(
    {"accentColor", "separatorLine", "defaultIconBackground", "skeleton"}
)
_STATUS_PREFIXES = ("success", "warning", "error", "info")


@dataclass(frozen=True, slots=True)
class TokenGroup:
    """A named group and the predicate that claims keys for it."""

    name: str
    match: Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class KeyGroup:
    """Keys claimed by one group, in input order."""

    name: str
    keys: tuple[str, ...]


def _prefix(prefix: str) -> Callable[[str], bool]:
    return lambda key: key.startswith(prefix)


# Order matters: a key lands in the first group whose predicate matches.
COLOR_GROUPS: tuple[TokenGroup, ...] = (
    TokenGroup("General", lambda key: key in _GENERAL_KEYS),
    TokenGroup("Modal", _prefix("modal")),
    TokenGroup("Wallet Select", _prefix("walletSelect")),
    TokenGroup("Connect Button", _prefix("connectButton")),
    TokenGroup("Account", _prefix("account")),
    TokenGroup("Network", lambda key: "network" in key.lower()),
    TokenGroup("Assets", _prefix("asset")),
    TokenGroup("Navigation", _prefix("navigation")),
    TokenGroup("Status", lambda key: key.startswith(_STATUS_PREFIXES)),
    TokenGroup("Other", lambda key: True),
)

FALLBACK_GROUP = COLOR_GROUPS[-1].name


def humanize(key: str) -> str:
    """Turn ``modalBackground`` / ``modal_background`` into ``Modal Background``."""
    spaced = _CAMEL_BOUNDARY_RE.sub(r"\1 \2", key).replace("_", " ")
    return _WORD_START_RE.sub(lambda match: match.group(0).upper(), spaced)


def classify(key: str, groups: tuple[TokenGroup, ...] = COLOR_GROUPS) -> str:
    for group in groups:
        if group.match(key):
            return group.name
    return FALLBACK_GROUP


def matches_query(key: str, query: str) -> bool:
    needle = query.strip().lower()
    if not needle:
        return True
    return needle in key.lower() or needle in humanize(key).lower()


def filter_and_group(
    keys: Iterable[str],
    query: str = "",
    groups: tuple[TokenGroup, ...] = COLOR_GROUPS,
) -> list[KeyGroup]:
    """Filter keys by query and bucket them into non-empty groups, in group order."""
    buckets: dict[str, list[str]] = {group.name: [] for group in groups}
    buckets.setdefault(FALLBACK_GROUP, [])
    for key in keys:
        if not matches_query(key, query):
            continue
        buckets[classify(key, groups)].append(key)
    return [
        KeyGroup(name=group.name, keys=tuple(buckets[group.name]))
        for group in groups
        if buckets[group.name]
    ]

"""Grouping strategies used to split records into sections.

group_by: stable equal-key grouping, groups in order of first appearance.
group_consecutive: runs of adjacent equal keys.

A key may be a callable or a field name. Field names are looked up as dict
keys on dicts and as attributes on everything else.
"""

import itertools
import operator

from sectioned_list.config import get_config
from sectioned_list.exceptions import SectionedListConfigError


def field_getter(selector):
    """Return selector itself if callable, else a getter for the named field."""
    if callable(selector):
        return selector
    return lambda item: item[selector] if isinstance(item, dict) else getattr(item, selector)


def _is_hashable(value) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def group_by(items, key, equals=None) -> list:
    """Group items by key, preserving first-appearance and within-group order.

    Without equals, hashable keys are matched through a dict and unhashable
    keys by == against previously seen unhashable keys. With equals, every key
    is matched by equals(seen_key, key) in first-seen order.
    """
    key_of = field_getter(key)
    groups = []
    by_hash = {}
    scanned = []
    for item in items:
        k = key_of(item)
        hashed = equals is None and _is_hashable(k)
        if hashed:
            group = by_hash.get(k)
        else:
            eq = equals if equals is not None else operator.eq
            group = next((g for seen, g in scanned if eq(seen, k)), None)
        if group is None:
            group = []
            groups.append(group)
            if hashed:
                by_hash[k] = group
            else:
                scanned.append((k, group))
        group.append(item)
    return groups


def group_consecutive(items, key, equals=None) -> list:
    """Group adjacent items whose keys are equal. Equal keys that are not
    adjacent start a new group.

    Each key is compared with the first key of the current run, as
    equals(run_key, key).
    """
    key_of = field_getter(key)
    if equals is None:
        return [list(run) for _, run in itertools.groupby(items, key_of)]
    groups = []
    run_key = None
    for item in items:
        k = key_of(item)
        if groups and equals(run_key, k):
            groups[-1].append(item)
        else:
            groups.append([item])
            run_key = k
    return groups


GROUPERS = {
    "stable": group_by,
    "consecutive": group_consecutive,
}


def get_grouper(strategy: str | None = None):
    """Return the grouping function registered under strategy.

    With no strategy, grouping.strategy from the config is used.
    """
    if strategy is None:
        strategy = get_config()["grouping"]["strategy"]
    try:
        return GROUPERS[strategy]
    except (KeyError, TypeError):
        raise SectionedListConfigError(
            f"Unknown grouping strategy: {strategy!r} (expected one of {', '.join(GROUPERS)})"
        ) from None

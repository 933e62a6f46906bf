"""Structural equality and hashing for JSON-like values.

Values are trees of ``None``, ``bool``, numbers, ``str``, sequences
(``list``/``tuple``) and string-keyed mappings, i.e. the shape of decoded
JSON. Both functions walk the tree with an explicit stack, so each node is
visited once and deeply nested payloads never hit the recursion limit.

Hashes are built on the built-in ``hash()``, which is salted per process
for strings (``PYTHONHASHSEED``). They identify values within one process,
for dict and set keys, and must not be persisted or compared across
processes.
"""

from collections.abc import Mapping
from typing import Any

_MASK = (1 << 64) - 1
_PRIME = 1099511628211
_SEED = 14695981039346656037

# Tokens marking container boundaries in the hashed stream
_MAP_TOKEN = 0x6D6170
_SEQUENCE_TOKEN = 0x736571
_CLOSE_TOKEN = 0x656E64
_BOOL_SALT = 0x626F6F6C

_CLOSE = object()


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _key_order(key: Any) -> tuple[int, str, str]:
    # Total order over any hashable keys; string keys sort by value
    if isinstance(key, str):
        return (0, key, "")
    return (1, type(key).__name__, repr(key))


def json_map_equals(a: Any, b: Any) -> bool:
    """Compare two JSON-like values for structural equality.

    Mappings compare regardless of key order, sequences compare
    element-wise in order. ``bool`` never equals a number, and a container
    never equals a scalar or a container of the other kind. Anything that is
    not JSON-like falls back to its own ``==``.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if both values are structurally equal, False otherwise.
    """
    stack: list[tuple[Any, Any]] = [(a, b)]

    while stack:
        left, right = stack.pop()

        if left is right:
            continue

        if isinstance(left, bool) or isinstance(right, bool):
            if not (isinstance(left, bool) and isinstance(right, bool)):
                return False
            if left != right:
                return False
            continue

        if isinstance(left, Mapping):
            if not isinstance(right, Mapping) or len(left) != len(right):
                return False
            for key, value in left.items():
                if key not in right:
                    return False
                stack.append((value, right[key]))
            continue

        if _is_sequence(left):
            if not _is_sequence(right) or len(left) != len(right):
                return False
            stack.extend(zip(left, right))
            continue

        if isinstance(right, Mapping) or _is_sequence(right):
            return False

        if left != right:
            return False

    return True


def json_hash(value: Any) -> int:
    """Hash a JSON-like value consistently with :func:`json_map_equals`.

    The tree is flattened into a pre-order token stream and folded into a
    64-bit polynomial hash. Mapping entries are folded in sorted key order,
    so two mappings that compare equal always hash equal.

    Args:
        value: The value to hash.

    Returns:
        A non-negative integer hash, stable within the current process.
    """
    acc = _SEED
    stack: list[Any] = [value]

    while stack:
        item = stack.pop()

        if item is _CLOSE:
            token = _CLOSE_TOKEN
        elif isinstance(item, bool):
            token = hash(item) ^ _BOOL_SALT
        elif isinstance(item, Mapping):
            token = _MAP_TOKEN ^ len(item)
            stack.append(_CLOSE)
            # Pushed in reverse so the smallest key is folded first
            for key in sorted(item, key=_key_order, reverse=True):
                stack.append(item[key])
                stack.append(key)
        elif _is_sequence(item):
            token = _SEQUENCE_TOKEN ^ len(item)
            stack.append(_CLOSE)
            stack.extend(reversed(item))
        else:
            token = hash(item)

        acc = ((acc ^ (token & _MASK)) * _PRIME) & _MASK

    return acc

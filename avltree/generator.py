"""
Key sequences for building demo and test trees.

Keys are plain ints. Random sequences use a private, seeded generator so a
given seed always produces the same tree.
"""

import random
from typing import List, Optional


def ascending_keys(count: int, start: int = 0) -> List[int]:
    """Return count consecutive ints beginning at start."""
    if count < 0:
        raise ValueError("count must be non-negative")
    return list(range(start, start + count))


def random_keys(count: int, low: int = 0, high: Optional[int] = None, seed: int = 1337) -> List[int]:
    """
    Return count distinct ints drawn from [low, high] in random order.
    high defaults to low + 10 * count, which leaves room for sparse keys.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    if high is None:
        high = low + 10 * count
    if high - low + 1 < count:
        raise ValueError(f"cannot draw {count} distinct keys from [{low}, {high}]")
    rng = random.Random(seed)
    return rng.sample(range(low, high + 1), count)


def parse_keys(raw: Optional[str]) -> List[int]:
    """
    Parse a key list such as "0..9" or "5,3,8" (both forms may be mixed:
    "1..3,10"). Blank input gives an empty list.
    """
    s = (raw or "").strip()
    if not s:
        return []

    keys: List[int] = []
    for part in s.split(","):
        part = part.strip()
        if not part:
            continue
        if ".." in part:
            lo_raw, hi_raw = part.split("..", 1)
            try:
                lo, hi = int(lo_raw), int(hi_raw)
            except ValueError:
                raise ValueError(f"invalid key range: {part!r}") from None
            if lo > hi:
                raise ValueError(f"empty key range: {part!r}")
            keys.extend(range(lo, hi + 1))
        else:
            try:
                keys.append(int(part))
            except ValueError:
                raise ValueError(f"invalid key: {part!r}") from None
    return keys

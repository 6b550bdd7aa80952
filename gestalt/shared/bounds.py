from collections import Counter
from typing import Any, Hashable, Sequence


def length_bound(a: Sequence[Any], b: Sequence[Any]) -> float:
    """
    No decomposition can match more than the shorter side
    """

    total = len(a) + len(b)
    if not total:
        return 1.0
    else:
        return 2.0 * min(len(a), len(b)) / total


def multiset_bound(a: Sequence[Hashable], b: Sequence[Hashable]) -> float:
    """
    Test intersection size, ignore order
    """

    total = len(a) + len(b)
    if not total:
        return 1.0
    else:
        l_c, r_c = Counter(a), Counter(b)
        common = sum((l_c & r_c).values())
        return 2.0 * common / total

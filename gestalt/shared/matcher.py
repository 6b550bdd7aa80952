from bisect import bisect_left
from collections import defaultdict
from typing import (
    Any,
    Hashable,
    Mapping,
    MutableMapping,
    MutableSequence,
    Optional,
    Sequence,
)

from .types import Match, Strategy, Window


class Index:
    """
    Element -> ascending offsets in B

    Built once for the whole of B, every window of B reuses it
    """

    def __init__(self, seq: Sequence[Hashable]) -> None:
        b2j: MutableMapping[Hashable, MutableSequence[int]] = defaultdict(list)
        for j, elem in enumerate(seq):
            b2j[elem].append(j)
        self._b2j: Mapping[Hashable, Sequence[int]] = dict(b2j)

    def __len__(self) -> int:
        return len(self._b2j)

    def offsets(self, elem: Hashable, window: Window) -> Sequence[int]:
        js = self._b2j.get(elem, ())
        lo = bisect_left(js, window.start)
        hi = bisect_left(js, window.stop, lo)
        return js[lo:hi]


def hashable(seq: Sequence[Any]) -> bool:
    try:
        for elem in seq:
            hash(elem)
    except TypeError:
        return False
    else:
        return True


def resolve(strategy: Strategy, *seqs: Sequence[Any]) -> Strategy:
    if strategy == "auto":
        return "indexed" if all(map(hashable, seqs)) else "scan"
    elif strategy in {"indexed", "scan"}:
        return strategy
    else:
        raise ValueError(f"Unknown strategy :: {strategy!r}")


def _indexed(
    a: Sequence[Any], index: Index, a_window: Window, b_window: Window
) -> Match:
    best_i, best_j, best_size = a_window.start, b_window.start, 0
    # j2len[j] = length of the run ending at (i - 1, j)
    j2len: Mapping[int, int] = {}
    for i in a_window:
        new_j2len: MutableMapping[int, int] = {}
        for j in index.offsets(a[i], window=b_window):
            k = new_j2len[j] = j2len.get(j - 1, 0) + 1
            if k > best_size:
                best_i, best_j, best_size = i - k + 1, j - k + 1, k
        j2len = new_j2len

    return Match(a=best_i, b=best_j, size=best_size)


def _scan(
    a: Sequence[Any], b: Sequence[Any], a_window: Window, b_window: Window
) -> Match:
    best_i, best_j, best_size = a_window.start, b_window.start, 0
    width = len(b_window)
    prev = [0] * (width + 1)
    for i in a_window:
        curr = [0] * (width + 1)
        for col, j in enumerate(b_window, start=1):
            if a[i] == b[j]:
                k = curr[col] = prev[col - 1] + 1
                if k > best_size:
                    best_i, best_j, best_size = i - k + 1, j - k + 1, k
        prev = curr

    return Match(a=best_i, b=best_j, size=best_size)


def find_longest_match(
    a: Sequence[Any],
    b: Sequence[Any],
    a_window: Optional[Window] = None,
    b_window: Optional[Window] = None,
    index: Optional[Index] = None,
    strategy: Strategy = "auto",
) -> Match:
    """
    Longest run of equal elements inside both windows

    Ties go to the smallest start in `a`, then the smallest start in `b`.
    `size == 0` when the windows share nothing.

    Elements must equal themselves: the index looks up by identity first, so
    a shared `float("nan")` matches under `indexed` but not under `scan`.
    """

    a_win = range(len(a)) if a_window is None else a_window
    b_win = range(len(b)) if b_window is None else b_window

    if not a_win or not b_win:
        return Match(a=a_win.start, b=b_win.start, size=0)
    elif index is not None:
        return _indexed(a, index=index, a_window=a_win, b_window=b_win)
    elif resolve(strategy, a, b) == "indexed":
        return _indexed(a, index=Index(b), a_window=a_win, b_window=b_win)
    else:
        return _scan(a, b=b, a_window=a_win, b_window=b_win)

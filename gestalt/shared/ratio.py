from typing import Any, Iterator, MutableSequence, Optional, Sequence, Tuple

from .matcher import Index, find_longest_match, resolve
from .types import Match, Strategy, Window


def _index(
    a: Sequence[Any], b: Sequence[Any], index: Optional[Index], strategy: Strategy
) -> Optional[Index]:
    if index is not None:
        return index
    elif resolve(strategy, a, b) == "indexed":
        return Index(b)
    else:
        return None


def _decompose(
    a: Sequence[Any],
    b: Sequence[Any],
    a_window: Window,
    b_window: Window,
    index: Optional[Index],
) -> Iterator[Match]:
    stack: MutableSequence[Tuple[Window, Window]] = [(a_window, b_window)]

    while stack:
        a_win, b_win = stack.pop()
        if a_win and b_win:
            match = find_longest_match(
                a,
                b,
                a_window=a_win,
                b_window=b_win,
                index=index,
                strategy="scan",
            )
            if match.size:
                yield match
                a_hi, b_hi = match.a + match.size, match.b + match.size
                stack.append((range(a_hi, a_win.stop), range(b_hi, b_win.stop)))
                stack.append(
                    (range(a_win.start, match.a), range(b_win.start, match.b))
                )


def accumulate_matches(
    a: Sequence[Any],
    b: Sequence[Any],
    a_window: Optional[Window] = None,
    b_window: Optional[Window] = None,
    index: Optional[Index] = None,
    strategy: Strategy = "auto",
) -> int:
    """
    Sum of every match size found by splitting around the longest match

    Left and right remainders are independent, so they are walked off a work
    stack instead of the call stack.
    """

    a_win = range(len(a)) if a_window is None else a_window
    b_win = range(len(b)) if b_window is None else b_window
    idx = _index(a, b, index=index, strategy=strategy)
    return sum(
        match.size
        for match in _decompose(a, b, a_window=a_win, b_window=b_win, index=idx)
    )


def matching_blocks(
    a: Sequence[Any],
    b: Sequence[Any],
    index: Optional[Index] = None,
    strategy: Strategy = "auto",
) -> Sequence[Match]:
    idx = _index(a, b, index=index, strategy=strategy)
    matches = _decompose(
        a, b, a_window=range(len(a)), b_window=range(len(b)), index=idx
    )
    return sorted(matches, key=lambda m: (m.a, m.b))


def gestalt_ratio(
    a: Sequence[Any],
    b: Sequence[Any],
    index: Optional[Index] = None,
    strategy: Strategy = "auto",
) -> float:
    """
    2 * matched / (len(a) + len(b)), two empty sequences are identical
    """

    total = len(a) + len(b)
    if not total:
        return 1.0
    else:
        matched = accumulate_matches(a, b, index=index, strategy=strategy)
        return 2.0 * matched / total

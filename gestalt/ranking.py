from heapq import nlargest
from typing import Any, Iterable, MutableSequence, Sequence, TypeVar, cast

from .shared.bounds import length_bound, multiset_bound
from .shared.logging import log
from .shared.matcher import Index, hashable, resolve
from .shared.ratio import gestalt_ratio
from .shared.settings import Settings, validate_ranking
from .shared.timeit import timeit
from .shared.types import Ranked

_S = TypeVar("_S", bound=Sequence[Any])


def rank(
    target: Sequence[Any],
    candidates: Iterable[Sequence[Any]],
    settings: Settings,
) -> Sequence[Ranked]:
    """
    Best candidates first, ratio against `target` >= cutoff

    Equal ratios keep the order of `candidates`.
    `settings.match.strategy` picks how runs are searched.
    """

    options, strategy = settings.ranking, settings.match.strategy
    validate_ranking(options)
    cutoff = options.cutoff
    t_index = Index(target) if resolve(strategy, target) == "indexed" else None

    ranked: MutableSequence[Ranked] = []
    skipped = 0
    with timeit("RANK", len(target)):
        for idx, candidate in enumerate(candidates):
            if length_bound(candidate, target) < cutoff:
                skipped += 1
            elif t_index is not None and hashable(candidate):
                if multiset_bound(candidate, target) < cutoff:
                    skipped += 1
                else:
                    ratio = gestalt_ratio(candidate, target, index=t_index)
                    if ratio >= cutoff:
                        ranked.append(
                            Ranked(ratio=ratio, index=idx, candidate=candidate)
                        )
            else:
                ratio = gestalt_ratio(candidate, target, strategy="scan")
                if ratio >= cutoff:
                    ranked.append(Ranked(ratio=ratio, index=idx, candidate=candidate))

    log.debug("%s", f"RANKED -- {len(ranked)} kept, {skipped} skipped by bounds")
    return nlargest(options.max_results, ranked, key=lambda r: r.ratio)


def close_matches(
    target: _S,
    candidates: Iterable[_S],
    settings: Settings,
) -> Sequence[_S]:
    ranked = rank(target, candidates=candidates, settings=settings)
    return tuple(cast(_S, r.candidate) for r in ranked)

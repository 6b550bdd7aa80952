from dataclasses import dataclass

from .types import Strategy


class ValidationError(Exception): ...


@dataclass(frozen=True)
class MatchOptions:
    strategy: Strategy


@dataclass(frozen=True)
class RankingOptions:
    max_results: int
    cutoff: float


@dataclass(frozen=True)
class Settings:
    match: MatchOptions
    ranking: RankingOptions


def validate_ranking(options: RankingOptions) -> None:
    if options.max_results <= 0:
        raise ValidationError("ranking.max_results <= 0")
    if not 0 <= options.cutoff <= 1:
        raise ValidationError("ranking.cutoff not in [0, 1]")

from .ranking import close_matches, rank
from .shared.matcher import Index, find_longest_match
from .shared.ratio import accumulate_matches, gestalt_ratio, matching_blocks
from .shared.types import Match, Ranked

__all__ = (
    "Index",
    "Match",
    "Ranked",
    "accumulate_matches",
    "close_matches",
    "find_longest_match",
    "gestalt_ratio",
    "matching_blocks",
    "rank",
)

from dataclasses import dataclass
from typing import Any, Literal, Sequence

UTF8: Literal["UTF-8"] = "UTF-8"

# Indices into one of the original sequences, never a copy of it
Window = range

Strategy = Literal["auto", "indexed", "scan"]


@dataclass(frozen=True)
class Match:
    """
    A[a + k] == B[b + k] for k in [0, size)
    """

    a: int
    b: int
    size: int


@dataclass(frozen=True)
class Ranked:
    ratio: float
    index: int
    candidate: Sequence[Any]

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, MutableMapping

from std2.locale import si_prefixed_smol
from std2.timeit import timeit as _timeit

from ..consts import DEBUG
from .logging import log


@dataclass(frozen=True)
class Record:
    calls: int
    total: float

    @property
    def mean(self) -> float:
        return self.total / self.calls if self.calls else 0.0


_RECORDS: MutableMapping[str, Record] = {}


def records() -> Mapping[str, Record]:
    return {**_RECORDS}


@contextmanager
def timeit(name: str, *args: Any, force: bool = False) -> Iterator[None]:
    if not (DEBUG or force):
        yield None
    else:
        with _timeit() as t:
            yield None
        delta = t().total_seconds()

        prev = _RECORDS.get(name, Record(calls=0, total=0.0))
        rec = _RECORDS[name] = Record(calls=prev.calls + 1, total=prev.total + delta)

        time = f"{si_prefixed_smol(delta, precision=0)}s".ljust(8)
        mean = f"{si_prefixed_smol(rec.mean, precision=0)}s".ljust(8)
        msg = f"TIME -- {name.ljust(30)} :: {time} @ {mean} {' '.join(map(str, args))}"
        if force:
            log.info("%s", msg)
        else:
            log.debug("%s", msg)

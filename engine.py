# engine.py

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Tuple

from errors import InvalidCapacityError
from references import Token, parse_capacity, parse_references

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Totals:
    """Running hit/miss counters."""
    hits: int = 0
    misses: int = 0

    @property
    def total(self) -> int:
        return self.hits + self.misses

    @property
    def hit_ratio(self) -> float:
        return round(self.hits / self.total, 4) if self.total > 0 else 0.0

    @property
    def miss_ratio(self) -> float:
        return round(self.misses / self.total, 4) if self.total > 0 else 0.0

    def as_dict(self):
        return {
            "hits": self.hits,
            "misses": self.misses,
            "total": self.total,
            "hit_ratio": self.hit_ratio,
            "miss_ratio": self.miss_ratio,
        }


@dataclass(frozen=True)
class StepResult:
    """
    Outcome of processing one reference.

    Attributes:
        index (int): Zero-based position of the reference in the sequence
        reference (Token): The page that was referenced
        before (Tuple[Token, ...]): Frame contents before the step
        after (Tuple[Token, ...]): Frame contents after the step
        is_hit (bool): True if the page was already resident
        changed_slot (Optional[int]): Frame written by a miss, None on a hit
        evicted (Optional[Token]): Page replaced by this step, if any
        totals (Totals): Running counters including this step
    """
    index: int
    reference: Token
    before: Tuple[Token, ...]
    after: Tuple[Token, ...]
    is_hit: bool
    changed_slot: Optional[int]
    evicted: Optional[Token]
    totals: Totals

    @property
    def status(self) -> str:
        return "Hit" if self.is_hit else "Miss"


def describe_step(step: StepResult) -> List[str]:
    """Event log lines for a single step."""
    ref = step.reference
    if step.is_hit:
        return [f"Hit: Page {ref} in Frame {step.after.index(ref)}"]

    events = [f"Miss: Page {ref} not in memory"]
    if step.evicted is not None:
        events.append(f"Evicting: Page {step.evicted} from Frame {step.changed_slot}")
        events.append(f"Loaded: Page {ref} -> Frame {step.changed_slot} (replaced)")
    else:
        events.append(f"Loaded: Page {ref} -> Frame {step.changed_slot}")
    return events


class SimulationRun(NamedTuple):
    """Precomputed result of a full run; unpacks as (steps, totals)."""
    steps: Tuple[StepResult, ...]
    totals: Totals

    @property
    def final_state(self) -> Tuple[Token, ...]:
        return self.steps[-1].after if self.steps else ()

    @property
    def events(self) -> List[str]:
        return [line for step in self.steps for line in describe_step(step)]


def _check_capacity(capacity) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
        raise InvalidCapacityError(capacity)
    return capacity


class LRUSimulator:
    """
    Fixed-capacity page frames under Least-Recently-Used replacement.

    Frame contents keep their slot positions: a new page takes the first
    free frame and a replacement overwrites the victim's own frame. The
    recency track maps each resident page to the step it was last touched,
    oldest first, and alone decides the next victim.
    """

    def __init__(self, capacity: int):
        self.capacity = _check_capacity(capacity)
        self.reset()

    def reset(self):
        self._frames: List[Token] = []
        self._recency: "OrderedDict[Token, int]" = OrderedDict()
        self._step = 0
        self._totals = Totals()

    @property
    def frames(self) -> Tuple[Token, ...]:
        return tuple(self._frames)

    @property
    def recency(self) -> Tuple[Token, ...]:
        """Resident pages, least recently used first."""
        return tuple(self._recency)

    @property
    def totals(self) -> Totals:
        return self._totals

    # -----------------------------
    # Stepper
    # -----------------------------
    def access(self, ref: Token) -> StepResult:
        step = self._step
        before = tuple(self._frames)
        evicted = None
        changed_slot = None

        if ref in self._recency:
            is_hit = True
            self._totals = Totals(self._totals.hits + 1, self._totals.misses)
            del self._recency[ref]
        else:
            is_hit = False
            self._totals = Totals(self._totals.hits, self._totals.misses + 1)

            if len(self._frames) < self.capacity:
                changed_slot = len(self._frames)
                self._frames.append(ref)
            else:
                evicted = next(iter(self._recency))
                changed_slot = self._frames.index(evicted)
                self._frames[changed_slot] = ref
                del self._recency[evicted]

        # Most recent end
        self._recency[ref] = step
        self._step += 1

        result = StepResult(
            index=step,
            reference=ref,
            before=before,
            after=tuple(self._frames),
            is_hit=is_hit,
            changed_slot=changed_slot,
            evicted=evicted,
            totals=self._totals,
        )
        logger.debug("Step %d: ref=%r %s frames=%s", step, ref, result.status, result.after)
        return result

    def run(self, refs: Iterable[Token]) -> SimulationRun:
        refs = tuple(refs)
        self.reset()
        steps = tuple(self.access(ref) for ref in refs)
        logger.info(
            "LRU run finished: %d refs, capacity=%d, hits=%d, misses=%d",
            len(refs), self.capacity, self._totals.hits, self._totals.misses,
        )
        return SimulationRun(steps, self._totals)


def run(refs: Iterable[Token], capacity: int) -> SimulationRun:
    """
    Run a whole reference sequence through a fresh LRU simulator.

    Raises:
        InvalidCapacityError: If capacity is not a positive integer
    """
    return LRUSimulator(capacity).run(refs)


def simulate(raw_references: str, raw_capacity) -> SimulationRun:
    """Parse and validate user input, then run the simulation."""
    refs = parse_references(raw_references)
    capacity = parse_capacity(raw_capacity)
    return run(refs, capacity)

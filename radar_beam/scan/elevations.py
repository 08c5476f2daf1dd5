"""
Tiered Elevation Schedules
==========================

Expands a compact list of elevation tiers into the ordered elevation
angles of a volume scan. Tier values are integer codes in tenths of a
degree so that schedules can be written without floating-point steps.

Each tier runs from its own start up to (not including) the start of
the next tier. The last tier has no successor and contributes only its
start angle, whatever its step.

Tiers are not validated here: non-ascending starts give empty runs and
a zero step on a non-final tier raises the ``ValueError`` of ``range``.
Use ``DiagramConfig.validate`` to check user-supplied schedules.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

# Tier codes are tenths of a degree
ELEVATION_CODE_TO_DEGREE_FACTOR = 0.1

# Fine steps near the horizon, coarse steps at high angles
DEFAULT_ELEVATION_TIERS: Tuple[Tuple[int, int], ...] = (
    (0, 5),
    (50, 10),
    (100, 20),
    (200, 50),
    (400, 0),
)


@dataclass(frozen=True)
class ElevationTier:
    """
    One segment of an elevation schedule.

    Attributes
    ----------
    start : int
        First angle of the tier in tenths of a degree
    step : int
        Angle increment in tenths of a degree (unused on the last tier)
    """
    start: int
    step: int

    @property
    def start_deg(self) -> float:
        """Start angle in degrees."""
        return self.start * ELEVATION_CODE_TO_DEGREE_FACTOR


def tier_ranges(tiers: Sequence[ElevationTier]) -> Iterator[range]:
    """
    Yield the integer code range covered by each tier.

    Parameters
    ----------
    tiers : sequence of ElevationTier
        Tiers in ascending ``start`` order

    Yields
    ------
    codes : range
        ``range(start_i, start_{i+1}, step_i)`` for every tier but the
        last, ``range(start_last, start_last + 1)`` for the last one
    """
    for i, tier in enumerate(tiers):
        if i + 1 < len(tiers):
            yield range(tier.start, tiers[i + 1].start, tier.step)
        else:
            yield range(tier.start, tier.start + 1, 1)


def iter_elevations(tiers: Sequence[ElevationTier]) -> Iterator[float]:
    """
    Lazily expand tiers into elevation angles in degrees.

    >>> tiers = [ElevationTier(0, 5), ElevationTier(20, 0)]
    >>> list(iter_elevations(tiers))
    [0.0, 0.5, 1.0, 1.5, 2.0]
    """
    return (
        code * ELEVATION_CODE_TO_DEGREE_FACTOR
        for codes in tier_ranges(tiers)
        for code in codes
    )


class ElevationSchedule:
    """
    Immutable, re-iterable elevation schedule.

    Iterating twice yields the same angles; the tiers are kept as a tuple
    and expanded anew on every iteration.

    Example:
        >>> schedule = ElevationSchedule.parse("0:5, 50:10, 100:0")
        >>> schedule.angles()
        [0.0, 0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
    """

    def __init__(self, tiers: Iterable[ElevationTier]):
        self._tiers = tuple(tiers)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[int]]) -> "ElevationSchedule":
        """Build a schedule from ``(start, step)`` pairs."""
        return cls(ElevationTier(int(start), int(step)) for start, step in pairs)

    @classmethod
    def default(cls) -> "ElevationSchedule":
        """Schedule built from ``DEFAULT_ELEVATION_TIERS``."""
        return cls.from_pairs(DEFAULT_ELEVATION_TIERS)

    @classmethod
    def parse(cls, text: str) -> "ElevationSchedule":
        """
        Parse a schedule written as ``"start:step,start:step,..."``.

        Raises
        ------
        ValueError
            If an entry is not two integers separated by ``:``
        """
        pairs = []
        for entry in text.split(","):
            entry = entry.strip()
            if not entry:
                continue
            parts = entry.split(":")
            if len(parts) != 2:
                raise ValueError(f"Invalid elevation tier {entry!r}, expected 'start:step'")
            try:
                pairs.append((int(parts[0]), int(parts[1])))
            except ValueError:
                raise ValueError(
                    f"Invalid elevation tier {entry!r}, start and step must be integers"
                ) from None
        return cls.from_pairs(pairs)

    @property
    def tiers(self) -> Tuple[ElevationTier, ...]:
        """Tiers of the schedule."""
        return self._tiers

    def pairs(self) -> List[List[int]]:
        """Tiers as ``[start, step]`` lists, for serialization."""
        return [[t.start, t.step] for t in self._tiers]

    def angles(self) -> List[float]:
        """All elevation angles in degrees."""
        return list(self)

    def __iter__(self) -> Iterator[float]:
        return iter_elevations(self._tiers)

    def __len__(self) -> int:
        return sum(len(codes) for codes in tier_ranges(self._tiers))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ElevationSchedule):
            return NotImplemented
        return self._tiers == other._tiers

    def __hash__(self) -> int:
        return hash(self._tiers)

    def __repr__(self) -> str:
        return f"ElevationSchedule({list(self._tiers)!r})"

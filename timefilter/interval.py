from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True, kw_only=True)
class Interval:
    """Half-open time interval ``[start, end)``.

    Bounds are not validated: an inverted or zero-length interval is allowed
    and never overlaps anything.
    """

    start: datetime
    end: datetime

    def contains(self, timestamp: datetime) -> bool:
        return self.start <= timestamp < self.end

    def overlaps(self, other: "Interval") -> bool:
        """True if both intervals share at least one instant."""
        return self.start < other.end and other.start < self.end

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        return (
            f"Interval({self.start.isoformat()}→{self.end.isoformat()}, "
            f"{self.duration})"
        )

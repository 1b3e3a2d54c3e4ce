"""Production Timing — start/end per segment, anchored on the match start.

Invariants:
    - The time-anchor segment starts exactly at the match start
    - Segments after the anchor run forward back-to-back
    - Segments before the anchor run backward back-to-back
    - Pure: input is (segments ordered by order, match start), no IO
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol, Sequence

from app.core.errors import BusinessRuleError


class TimedSegment(Protocol):
    id: int
    name: str
    order: int
    duration_minutes: int
    is_time_anchor: bool


@dataclass(frozen=True)
class SegmentTiming:
    segment_id: int
    name: str
    order: int
    duration_minutes: int
    is_time_anchor: bool
    start: datetime
    end: datetime


def compute_timing(
    segments: Sequence[TimedSegment], match_start: datetime,
) -> list[SegmentTiming]:
    """Lay segments out around the anchor. Raises when none is anchored."""
    if not segments:
        return []
    anchor_idx = next(
        (i for i, s in enumerate(segments) if s.is_time_anchor), None,
    )
    if anchor_idx is None:
        raise BusinessRuleError(
            "No anchor segment defined", "NO_TIME_ANCHOR", http_status=400,
        )

    starts: list[datetime] = [match_start] * len(segments)
    t = match_start
    for i in range(anchor_idx, len(segments)):
        starts[i] = t
        t += timedelta(minutes=segments[i].duration_minutes)
    t = match_start
    for i in range(anchor_idx - 1, -1, -1):
        t -= timedelta(minutes=segments[i].duration_minutes)
        starts[i] = t

    return [
        SegmentTiming(
            segment_id=s.id,
            name=s.name,
            order=s.order,
            duration_minutes=s.duration_minutes,
            is_time_anchor=s.is_time_anchor,
            start=start,
            end=start + timedelta(minutes=s.duration_minutes),
        )
        for s, start in zip(segments, starts)
    ]

"""Dense Ordering — pure planning for 1..N ordered lists under a unique (group, order) key.

Invariants:
    - Every function is PURE: takes the current ordering, returns a plan, never does IO
    - After a plan is applied, the group's orders are exactly {1..N}
    - A ShiftPlan never places a row on a key held by a live row, at any step:
      phase 1 parks the affected run outside [1, max], phase 2 brings it back
      one slot away from where it started
    - Positions are clamped, not rejected, once they are positive integers

Design Decisions:
    - Plans over in-place mutation: shell reads state, core computes the diff,
      shell writes it (ADR: impureim sandwich)
    - Offset grows with the list (max(1000, max_order + 1)): a fixed 1000 would
      collide once a production holds more than 1000 rows
"""

from dataclasses import dataclass
from typing import Hashable, Sequence

from app.core.errors import InvalidArgumentError


DEFAULT_BUMP_OFFSET: int = 1000


@dataclass(frozen=True)
class ShiftPlan:
    """Shift the contiguous run [start, end] by `direction` (+1 or -1)."""
    start: int
    end: int
    direction: int
    offset: int

    @property
    def park_delta(self) -> int:
        """Phase 1 delta — moves the run out of the valid range."""
        return self.offset * self.direction

    @property
    def restore_delta(self) -> int:
        """Phase 2 delta — net effect of both phases is `direction`."""
        return -(self.offset - 1) * self.direction

    @property
    def parked_bounds(self) -> tuple[int, int]:
        """Inclusive order range occupied by the run between the two phases."""
        return self.start + self.park_delta, self.end + self.park_delta


# ─── Validation & clamping ──────────────────────────────────────

def validate_position(value: object, field: str = "order") -> int:
    """Reject anything that is not a positive integer. bool is not a position."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{field} must be an integer", field)
    if value <= 0:
        raise InvalidArgumentError(f"{field} must be a positive integer", field)
    return value


def bump_offset_for(max_order: int, base: int = DEFAULT_BUMP_OFFSET) -> int:
    return max(base, max_order + 1)


def clamp_insert_position(requested: int | None, max_order: int) -> int:
    """Append when absent; otherwise clamp into [1, max_order + 1]."""
    if requested is None:
        return max_order + 1
    validate_position(requested)
    return min(requested, max_order + 1)


def clamp_move_position(requested: int, max_order: int) -> int:
    """Clamp into [1, max_order]. The moved item itself counts towards max_order."""
    validate_position(requested)
    return max(1, min(requested, max_order))


# ─── Plans ──────────────────────────────────────────────────────

def plan_insert(
    position: int, max_order: int, base_offset: int = DEFAULT_BUMP_OFFSET,
) -> ShiftPlan | None:
    """Room for a new row at `position`. None when appending."""
    if position > max_order:
        return None
    return ShiftPlan(
        start=position, end=max_order, direction=1,
        offset=bump_offset_for(max_order, base_offset),
    )


def plan_move(
    current: int, target: int, max_order: int,
    base_offset: int = DEFAULT_BUMP_OFFSET,
) -> ShiftPlan | None:
    """Siblings to shift when an item moves current -> target. None when unchanged."""
    offset = bump_offset_for(max_order, base_offset)
    if target < current:
        return ShiftPlan(start=target, end=current - 1, direction=1, offset=offset)
    if target > current:
        return ShiftPlan(start=current + 1, end=target, direction=-1, offset=offset)
    return None


def plan_renumber(
    ordered: Sequence[tuple[Hashable, int]],
) -> list[tuple[Hashable, int]]:
    """Close gaps: (id, order) pairs sorted by order -> only the rows that change.

    Ascending writes are collision-free because every target is <= the row's
    current order and the slot below it has already been vacated.
    """
    ranked = sorted(ordered, key=lambda pair: pair[1])
    return [
        (item_id, index)
        for index, (item_id, order) in enumerate(ranked, start=1)
        if order != index
    ]


def plan_reorder(
    ordered: Sequence[tuple[Hashable, int]], requested_ids: Sequence[Hashable],
) -> list[tuple[Hashable, int]]:
    """Explicit permutation -> rows whose order changes.

    `requested_ids` must name every item of the group exactly once; a partial
    list cannot keep the ordering dense.
    """
    current = dict(ordered)
    if len(set(requested_ids)) != len(requested_ids):
        raise InvalidArgumentError("ids must not contain duplicates", "ids")
    unknown = [i for i in requested_ids if i not in current]
    if unknown:
        raise InvalidArgumentError(
            f"ids do not belong to this group: {unknown}", "ids",
        )
    if len(requested_ids) != len(current):
        raise InvalidArgumentError(
            f"ids must list all {len(current)} items of the group", "ids",
        )
    return [
        (item_id, index)
        for index, item_id in enumerate(requested_ids, start=1)
        if current[item_id] != index
    ]


def is_dense(orders: Sequence[int]) -> bool:
    return sorted(orders) == list(range(1, len(orders) + 1))

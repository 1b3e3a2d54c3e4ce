"""Order Manager — persists dense 1..N orderings under a live unique (group, order) key.

Invariants:
    - Every write goes through a plan from core/ordering.py (no arithmetic here)
    - No intermediate statement ever holds two rows on the same (group, order):
      affected runs are parked outside [1, max] before anything lands on their keys
    - Callers wrap each operation in infrastructure.database.atomic(): the manager
      only flushes, it never commits
    - Orders touched by a bulk UPDATE are synchronized into the session identity map

Design Decisions:
    - One manager for every ordered model (segments, title definitions): the model
      only needs an integer `order` column and a group column (ADR: DRY over two
      hand-maintained copies of the shifting code)
    - Bulk UPDATE for runs, per-row UPDATE for renumber/reorder diffs: runs are
      contiguous ranges, diffs are arbitrary
"""

import logging
from typing import Any, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.ordering import (
    DEFAULT_BUMP_OFFSET,
    ShiftPlan,
    bump_offset_for,
    clamp_insert_position,
    clamp_move_position,
    plan_insert,
    plan_move,
    plan_renumber,
    plan_reorder,
)

logger = logging.getLogger(__name__)


class OrderManager:
    """Insert / move / delete / reorder rows of `model` within one group."""

    def __init__(
        self,
        db: AsyncSession,
        model: type,
        group_attr: str = "production_id",
        base_offset: int = DEFAULT_BUMP_OFFSET,
    ):
        self.db = db
        self.model = model
        self.group_attr = group_attr
        self.base_offset = base_offset

    @property
    def _group_col(self):
        return getattr(self.model, self.group_attr)

    @property
    def _order_col(self):
        return self.model.order

    # ─── Reads ──────────────────────────────────────────────────

    async def max_order(self, group_id: int) -> int:
        result = await self.db.execute(
            select(func.max(self._order_col)).where(self._group_col == group_id),
        )
        return result.scalar_one_or_none() or 0

    async def ordered_items(self, group_id: int) -> list:
        result = await self.db.execute(
            select(self.model)
            .where(self._group_col == group_id)
            .order_by(self._order_col),
        )
        return list(result.scalars().all())

    async def _current_orders(self, group_id: int) -> list[tuple[int, int]]:
        result = await self.db.execute(
            select(self.model.id, self._order_col)
            .where(self._group_col == group_id)
            .order_by(self._order_col),
        )
        return [(row[0], row[1]) for row in result.all()]

    # ─── Operations ─────────────────────────────────────────────

    async def insert(
        self, group_id: int, position: int | None, values: dict[str, Any],
    ):
        """Create a row at `position` (clamped to [1, max+1]) or append."""
        max_order = await self.max_order(group_id)
        position = clamp_insert_position(position, max_order)
        plan = plan_insert(position, max_order, self.base_offset)

        if plan:
            await self._park(group_id, plan)
        item = self.model(**{self.group_attr: group_id, "order": position}, **values)
        self.db.add(item)
        await self.db.flush()
        if plan:
            await self._restore(group_id, plan)

        logger.info(
            f"Inserted {self.model.__name__} {item.id} at {position}",
            extra={"production_id": group_id, "position": position,
                   "shifted": _run_length(plan)},
        )
        return item

    async def move(self, item, target: int | None, values: dict[str, Any]):
        """Move `item` to `target` (clamped to [1, max]) and apply payload fields.

        target None or equal to the current order is a payload-only update.
        """
        group_id = getattr(item, self.group_attr)
        plan: ShiftPlan | None = None
        new_order = item.order
        if target is not None:
            max_order = await self.max_order(group_id)
            new_order = clamp_move_position(target, max_order)
            plan = plan_move(item.order, new_order, max_order, self.base_offset)

        if plan:
            await self._park(group_id, plan, exclude_id=item.id)
        for key, value in values.items():
            setattr(item, key, value)
        item.order = new_order
        await self.db.flush()
        if plan:
            await self._restore(group_id, plan)
            logger.info(
                f"Moved {self.model.__name__} {item.id} to {new_order}",
                extra={"production_id": group_id, "position": new_order,
                       "shifted": _run_length(plan)},
            )
        return item

    async def delete(self, item) -> None:
        """Delete `item` (ORM cascades remove dependents) and close the gap."""
        group_id = getattr(item, self.group_attr)
        await self.db.delete(item)
        await self.db.flush()
        for item_id, new_order in plan_renumber(await self._current_orders(group_id)):
            await self._set_order(item_id, new_order)

    async def reorder(self, group_id: int, ids: Sequence[int]) -> list:
        """Apply an explicit permutation of the group's ids."""
        current = await self._current_orders(group_id)
        diff = plan_reorder(current, list(ids))
        if diff:
            offset = bump_offset_for(len(current), self.base_offset)
            for item_id, new_order in diff:
                await self._set_order(item_id, new_order + offset)
            for item_id, new_order in diff:
                await self._set_order(item_id, new_order)
            logger.info(
                f"Reordered {len(diff)} {self.model.__name__} rows",
                extra={"production_id": group_id, "shifted": len(diff)},
            )
        return await self.ordered_items(group_id)

    # ─── Writes ─────────────────────────────────────────────────

    async def _park(self, group_id: int, plan: ShiftPlan, exclude_id: int | None = None):
        """Phase 1 — move [start, end] out of the valid range."""
        stmt = (
            update(self.model)
            .where(self._group_col == group_id)
            .where(self._order_col >= plan.start)
            .where(self._order_col <= plan.end)
        )
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        await self.db.execute(
            stmt.values({self._order_col: self._order_col + plan.park_delta}),
        )

    async def _restore(self, group_id: int, plan: ShiftPlan):
        """Phase 2 — bring the parked run back, one slot from where it started."""
        low, high = plan.parked_bounds
        await self.db.execute(
            update(self.model)
            .where(self._group_col == group_id)
            .where(self._order_col >= low)
            .where(self._order_col <= high)
            .values({self._order_col: self._order_col + plan.restore_delta}),
        )

    async def _set_order(self, item_id: int, order: int):
        await self.db.execute(
            update(self.model)
            .where(self.model.id == item_id)
            .values({self._order_col: order}),
        )


def _run_length(plan: ShiftPlan | None) -> int:
    return 0 if plan is None else plan.end - plan.start + 1


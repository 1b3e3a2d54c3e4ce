"""Segment Assignment Routes — crew per segment, bulk copy and suggested positions.

Invariants:
    - Assignments are skill-gated (see services.assignment_service)
    - Copy is all-or-nothing: any missing or foreign target aborts the whole copy
"""

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.lookups import get_segment_or_404
from app.infrastructure.database import atomic, get_db
from app.models.segment_role_assignment import SegmentRoleAssignment
from app.schemas.segment import (
    AssignmentCopyRequest, AssignmentCopyResponse, AssignmentCreate,
    AssignmentResponse, DefaultPositionResponse,
)
from app.services.assignment_service import (
    copy_assignments, create_assignment, default_positions_for_segment,
    delete_assignment, list_assignments,
)

router = APIRouter(prefix="/api/v1/segments", tags=["assignments"])


@router.get(
    "/{segment_id}/assignments", response_model=list[AssignmentResponse],
)
async def get_assignments(
    segment_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    await get_segment_or_404(db, segment_id)
    return await list_assignments(db, segment_id)


@router.post(
    "/{segment_id}/assignments",
    response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED,
)
async def add_assignment(
    body: AssignmentCreate,
    segment_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    segment = await get_segment_or_404(db, segment_id)
    async with atomic(db):
        assignment = await create_assignment(
            db, segment, body.person_id, body.position_id,
        )
    return await db.get(SegmentRoleAssignment, assignment.id)


@router.delete(
    "/{segment_id}/assignments/{assignment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_assignment(
    segment_id: int = Path(gt=0),
    assignment_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    await get_segment_or_404(db, segment_id)
    async with atomic(db):
        await delete_assignment(db, segment_id, assignment_id)


@router.post(
    "/{segment_id}/assignments/copy", response_model=AssignmentCopyResponse,
)
async def copy_segment_assignments(
    body: AssignmentCopyRequest,
    segment_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    """Copy this segment's crew onto other segments of the same production."""
    source = await get_segment_or_404(db, segment_id)
    async with atomic(db):
        result = await copy_assignments(
            db, source, body.target_segment_ids, body.mode,
        )
    return result


@router.get(
    "/{segment_id}/positions", response_model=list[DefaultPositionResponse],
)
async def get_segment_positions(
    segment_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    """Suggested positions; built-in positions missing from the catalog get created."""
    segment = await get_segment_or_404(db, segment_id)
    async with atomic(db):
        positions = await default_positions_for_segment(db, segment)
    return positions

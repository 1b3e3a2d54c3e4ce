"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Production is the aggregate root for segments, titles and segment assignments

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from app.models.match_schedule import MatchSchedule  # noqa: F401
from app.models.production import Production  # noqa: F401
from app.models.production_segment import ProductionSegment  # noqa: F401
from app.models.segment_role_assignment import SegmentRoleAssignment  # noqa: F401
from app.models.title_definition import TitleDefinition  # noqa: F401
from app.models.title_part import TitlePart  # noqa: F401
from app.models.skill import Skill  # noqa: F401
from app.models.position import Position  # noqa: F401
from app.models.person import Person  # noqa: F401
from app.models.person_skill import PersonSkill  # noqa: F401
from app.models.segment_default_position import SegmentDefaultPosition  # noqa: F401

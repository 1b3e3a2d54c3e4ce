"""Initial schema — matches, productions, segments, titles, crew catalog.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "match_schedules",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("home_team_name", sa.String(200), nullable=False),
        sa.Column("away_team_name", sa.String(200), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("field_name", sa.String(200), nullable=True),
        sa.Column("is_home_match", sa.Boolean, nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_match_schedules_date", "match_schedules", ["date"])

    op.create_table(
        "productions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("match_schedule_id", sa.Integer, sa.ForeignKey("match_schedules.id"), nullable=False, unique=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "production_segments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("production_id", sa.Integer, sa.ForeignKey("productions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("duration_minutes", sa.Integer, nullable=False),
        sa.Column("order", sa.Integer, nullable=False),
        sa.Column("is_time_anchor", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("production_id", "order", name="uq_production_segments_production_order"),
    )
    op.create_index("ix_production_segments_production_id", "production_segments", ["production_id"])

    op.create_table(
        "title_definitions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("production_id", sa.Integer, sa.ForeignKey("productions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("order", sa.Integer, nullable=False),
        sa.Column("enabled", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.UniqueConstraint("production_id", "order", name="uq_title_definitions_production_order"),
    )
    op.create_index("ix_title_definitions_production_id", "title_definitions", ["production_id"])

    op.create_table(
        "title_parts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title_definition_id", sa.Integer, sa.ForeignKey("title_definitions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("source_type", sa.String(40), nullable=False),
        sa.Column("team_side", sa.String(10), nullable=False, server_default="NONE"),
        sa.Column("limit", sa.Integer, nullable=True),
        sa.Column("filters", sa.JSON, nullable=True),
        sa.Column("custom_function", sa.String(200), nullable=True),
        sa.Column("custom_name", sa.String(200), nullable=True),
    )
    op.create_index("ix_title_parts_title_definition_id", "title_parts", ["title_definition_id"])

    op.create_table(
        "skills",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(50), nullable=False, unique=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("name_male", sa.String(100), nullable=False),
        sa.Column("name_female", sa.String(100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "positions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("skill_id", sa.Integer, sa.ForeignKey("skills.id"), nullable=True),
    )

    op.create_table(
        "persons",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("gender", sa.String(10), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "person_skills",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("person_id", sa.Integer, sa.ForeignKey("persons.id", ondelete="CASCADE"), nullable=False),
        sa.Column("skill_id", sa.Integer, sa.ForeignKey("skills.id"), nullable=False),
        sa.UniqueConstraint("person_id", "skill_id", name="uq_person_skills_person_skill"),
    )

    op.create_table(
        "segment_role_assignments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("production_segment_id", sa.Integer, sa.ForeignKey("production_segments.id", ondelete="CASCADE"), nullable=False),
        sa.Column("person_id", sa.Integer, sa.ForeignKey("persons.id", ondelete="CASCADE"), nullable=False),
        sa.Column("position_id", sa.Integer, sa.ForeignKey("positions.id"), nullable=False),
        sa.UniqueConstraint(
            "production_segment_id", "person_id", "position_id",
            name="uq_segment_role_assignments_segment_person_position",
        ),
    )
    op.create_index(
        "ix_segment_role_assignments_production_segment_id",
        "segment_role_assignments", ["production_segment_id"],
    )

    op.create_table(
        "segment_default_positions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("segment_name", sa.String(100), nullable=False),
        sa.Column("position_id", sa.Integer, sa.ForeignKey("positions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("order", sa.Integer, nullable=False, server_default="0"),
        sa.UniqueConstraint("segment_name", "position_id", name="uq_segment_default_positions_name_position"),
    )
    op.create_index("ix_segment_default_positions_segment_name", "segment_default_positions", ["segment_name"])


def downgrade() -> None:
    op.drop_table("segment_default_positions")
    op.drop_table("segment_role_assignments")
    op.drop_table("person_skills")
    op.drop_table("persons")
    op.drop_table("positions")
    op.drop_table("skills")
    op.drop_table("title_parts")
    op.drop_table("title_definitions")
    op.drop_table("production_segments")
    op.drop_table("productions")
    op.drop_table("match_schedules")

"""Domain Types — enums shared by schemas, models and routes.

Invariants:
    - All valid states encoded as Enums — no raw string matching
    - Enum values are the wire values (what clients send and receive)

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class TitleSourceType(str, Enum):
    """Where a title part takes its names from."""
    COMMENTARY = "COMMENTARY"
    PRESENTATION = "PRESENTATION"
    PRESENTATION_AND_ANALIST = "PRESENTATION_AND_ANALIST"
    TEAM_PLAYER = "TEAM_PLAYER"
    TEAM_COACH = "TEAM_COACH"
    FREE_TEXT = "FREE_TEXT"


class TeamSide(str, Enum):
    HOME = "HOME"
    AWAY = "AWAY"
    NONE = "NONE"


class CopyMode(str, Enum):
    """How segment assignments are copied onto target segments."""
    MERGE = "merge"
    OVERWRITE = "overwrite"

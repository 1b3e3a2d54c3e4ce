"""Position → Skill Mapping — canonical skill codes required by crew positions.

Invariants:
    - Position names are matched case-insensitively after trimming
    - A position configured with its own skill always wins over this table
      (resolved by the caller, see resolve_required_skill_code)

Design Decisions:
    - Static table in core: the catalog in the DB may be empty on a fresh install,
      assignments must still be skill-gated
"""

GLOBAL_SEGMENT_NAME: str = "__GLOBAL__"
GLOBAL_SEGMENT_LABEL: str = "Algemeen"

POSITION_TO_SKILL: dict[str, str] = {
    # Cameras
    "camera rechts": "CAMERA_ZOOM",
    "camera links": "CAMERA_ZOOM",
    "camera studio": "CAMERA_ZOOM",
    "camera midden": "CAMERA_OVERVIEW",
    # Direction / production
    "regie": "REGISSEUR",
    "show caller": "SHOW_CALLER",
    # Replay
    "herhalingen": "HERHALINGEN",
    # LED / graphics / music
    "scherm regie": "SCHERM_REGISSEUR",
    "muziek": "GELUID",
    # On-air
    "commentaar": "COMMENTAAR",
    "presentatie": "PRESENTATIE",
    "analist": "ANALIST",
    # Misc
    "volgspot oplopen": "SPOTLIGHT",
    "interview coordinator": "INTERVIEW_COORDINATOR",
}

DEFAULT_SEGMENT_POSITIONS: list[str] = [
    "overzicht camera",
    "camera links",
    "camera rechts",
    "regie",
    "scherm regie",
    "commentaar",
]


def normalize_position_name(name: str) -> str:
    return name.strip().lower()


def required_skill_code_for_position(name: str) -> str | None:
    return POSITION_TO_SKILL.get(normalize_position_name(name))


def resolve_required_skill_code(
    position_name: str, configured_skill_code: str | None,
) -> str | None:
    """Configured skill on the position first, then the canonical table."""
    if configured_skill_code:
        return configured_skill_code
    return required_skill_code_for_position(position_name)


def storage_segment_name(name: str) -> str:
    """'Algemeen' is the display name of the global default set."""
    name = name.strip()
    return GLOBAL_SEGMENT_NAME if name == GLOBAL_SEGMENT_LABEL else name

"""
OSPA Point Tables (Annex J-1)
ospa/scoring/rubric_table.py

Immutable point tables for every scoring category of the nomination rubric.

Three table shapes:
  - Contest tables:    Level -> Rank -> points  (individual, group, special
                       awards, school publication). Only National ranks run
                       to 7th; Regional and Division stop at 3rd.
  - Role tables:       Role -> Level -> points  (leadership, extension).
  - Flat level tables: Level -> points          (innovations, tiered services,
                       articles). Innovations alone reach District and School.

Combinations absent from a table score zero; see instance_scorer.py.
"""

from types import MappingProxyType
from typing import Mapping

from ospa.models.enumerations import (
    Category,
    ExtensionRole,
    LeadershipRole,
    Level,
    Rank,
)

ContestTable = Mapping[Level, Mapping[Rank, int]]
RoleTable = Mapping[str, Mapping[Level, int]]
LevelTable = Mapping[Level, int]


def _freeze(table: dict) -> Mapping:
    """Wrap a (possibly nested) dict in read-only mapping proxies."""
    return MappingProxyType({
        key: _freeze(value) if isinstance(value, dict) else value
        for key, value in table.items()
    })


def _ranked(*points: int) -> dict:
    """Assign points to ranks in order, starting at 1st."""
    return dict(zip(Rank, points))


# ---------------------------------------------------------------------------
# Contest tables (pp. 7-9)
# ---------------------------------------------------------------------------

CONTESTS: ContestTable = _freeze({
    Level.NATIONAL: _ranked(20, 19, 18, 17, 16, 15, 14),
    Level.REGIONAL: _ranked(12, 11, 10),
    Level.DIVISION: _ranked(7, 6, 5),
})

SPECIAL_AWARDS: ContestTable = _freeze({
    Level.NATIONAL: _ranked(15, 14, 13, 12, 11, 10, 9),
    Level.REGIONAL: _ranked(7, 6, 5),
    Level.DIVISION: _ranked(4, 3, 2),
})

PUBLICATION: ContestTable = _freeze({
    Level.NATIONAL: _ranked(13, 12, 11, 10, 9, 8, 7),
    Level.REGIONAL: _ranked(6, 5, 4),
    Level.DIVISION: _ranked(3, 2, 1),
})


# ---------------------------------------------------------------------------
# Role tables (p. 10)
# ---------------------------------------------------------------------------

LEADERSHIP: RoleTable = _freeze({
    LeadershipRole.PRESIDENT: {Level.NATIONAL: 25, Level.REGIONAL: 20, Level.DIVISION: 15},
    LeadershipRole.VICE_PRESIDENT: {Level.NATIONAL: 20, Level.REGIONAL: 15, Level.DIVISION: 10},
    LeadershipRole.OTHER: {Level.NATIONAL: 18, Level.REGIONAL: 12, Level.DIVISION: 8},
})

EXTENSION: RoleTable = _freeze({
    ExtensionRole.CHAIRPERSON: {Level.NATIONAL: 10, Level.REGIONAL: 8, Level.DIVISION: 6},
    ExtensionRole.FACILITATOR: {Level.NATIONAL: 8, Level.REGIONAL: 6, Level.DIVISION: 4},
})


# ---------------------------------------------------------------------------
# Flat level tables (pp. 10-11)
# ---------------------------------------------------------------------------

INNOVATIONS: LevelTable = _freeze({
    Level.NATIONAL: 15,
    Level.REGIONAL: 12,
    Level.DIVISION: 10,
    Level.DISTRICT: 8,
    Level.SCHOOL: 6,
})

# Speakership (resource speaker / judge) and published books / modules
TIERED_SERVICES: LevelTable = _freeze({
    Level.NATIONAL: 10,
    Level.REGIONAL: 7,
    Level.DIVISION: 5,
})

ARTICLES: LevelTable = _freeze({
    Level.NATIONAL: 5,
    Level.REGIONAL: 3,
    Level.DIVISION: 1,
})


# ---------------------------------------------------------------------------
# Category dispatch
# ---------------------------------------------------------------------------

CONTEST_TABLES: Mapping[Category, ContestTable] = MappingProxyType({
    Category.INDIVIDUAL: CONTESTS,
    Category.GROUP: CONTESTS,
    Category.SPECIAL: SPECIAL_AWARDS,
    Category.PUBLICATION: PUBLICATION,
})

ROLE_TABLES: Mapping[Category, RoleTable] = MappingProxyType({
    Category.LEADERSHIP: LEADERSHIP,
    Category.EXTENSION: EXTENSION,
})

# Role enum per role category; its first member is the default role.
ROLE_ENUMS = MappingProxyType({
    Category.LEADERSHIP: LeadershipRole,
    Category.EXTENSION: ExtensionRole,
})

LEVEL_TABLES: Mapping[Category, LevelTable] = MappingProxyType({
    Category.INNOVATIONS: INNOVATIONS,
    Category.TIERED_SERVICES: TIERED_SERVICES,
    Category.ARTICLES: ARTICLES,
})


def default_role(category: Category):
    """First listed role of a role category, used when an instance has none."""
    return next(iter(ROLE_ENUMS[category]))


def as_dict() -> dict:
    """Plain, JSON-friendly copy of every table keyed by category name."""
    out: dict = {}
    for category, table in CONTEST_TABLES.items():
        out[category.value] = {
            level.value: {rank.value: pts for rank, pts in ranks.items()}
            for level, ranks in table.items()
        }
    for category, table in ROLE_TABLES.items():
        out[category.value] = {
            role.value: {level.value: pts for level, pts in levels.items()}
            for role, levels in table.items()
        }
    for category, table in LEVEL_TABLES.items():
        out[category.value] = {level.value: pts for level, pts in table.items()}
    return out

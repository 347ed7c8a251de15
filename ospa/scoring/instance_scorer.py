"""
Instance Scorer
ospa/scoring/instance_scorer.py

Looks up the point value of a single achievement or service instance.

    score(Category.INDIVIDUAL, Level.NATIONAL, Rank.FIRST)       -> 20
    score(Category.LEADERSHIP, Level.REGIONAL, role="President") -> 20
    score(Category.INNOVATIONS, Level.SCHOOL)                    -> 6

The scorer is total: any combination the rubric does not tabulate (a School
level contest, an unknown role label, an unknown category) is worth 0 points
rather than an error, because a candidate may legitimately record entries the
rubric gives no credit for.

When a contest instance carries no (or an empty) rank it is scored as 1st,
and a role instance with no role is scored as the category's first role
(President for leadership, Chairperson for extension).
TODO: rankless contest entries still earn 1st-place points; decide with the
screening committee whether they should score 0 instead.
"""

from enum import Enum
from typing import Optional, Type, TypeVar, Union

from ospa.models.enumerations import Category, Level, Rank
from ospa.scoring.rubric_table import (
    CONTEST_TABLES,
    LEVEL_TABLES,
    ROLE_ENUMS,
    ROLE_TABLES,
    default_role,
)

E = TypeVar("E", bound=Enum)

NO_POINTS = 0


def _coerce(enum_cls: Type[E], value: Union[E, str, None]) -> Optional[E]:
    """Convert a label to its enum member; None when the label is unknown."""
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def score(
    category: Union[Category, str],
    level: Union[Level, str],
    rank: Union[Rank, str, None] = None,
    role: Optional[str] = None,
) -> int:
    """Point value of one instance, 0 for anything the rubric does not list."""
    cat = _coerce(Category, category)
    lvl = _coerce(Level, level)
    if cat is None or lvl is None:
        return NO_POINTS

    if cat in CONTEST_TABLES:
        rnk = _coerce(Rank, rank) if rank else Rank.FIRST
        if rnk is None:
            return NO_POINTS
        return CONTEST_TABLES[cat].get(lvl, {}).get(rnk, NO_POINTS)

    if cat in ROLE_TABLES:
        role_member = _coerce(ROLE_ENUMS[cat], role) if role else default_role(cat)
        if role_member is None:
            return NO_POINTS
        return ROLE_TABLES[cat].get(role_member, {}).get(lvl, NO_POINTS)

    if cat in LEVEL_TABLES:
        return LEVEL_TABLES[cat].get(lvl, NO_POINTS)

    return NO_POINTS

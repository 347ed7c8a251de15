"""
Models Package - OSPA Scorer
ospa/models/__init__.py

Enumerations. Candidate models: ospa.models.candidate, ospa.models.sync.
"""

from ospa.models.enumerations import (
    Category,
    ExtensionRole,
    InterviewRating,
    LeadershipRole,
    Level,
    ProficiencyLevel,
    Rank,
)

__all__ = [
    "Category",
    "ExtensionRole",
    "InterviewRating",
    "LeadershipRole",
    "Level",
    "ProficiencyLevel",
    "Rank",
]

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel
from uuid import uuid4
from datetime import datetime, timezone
from typing import List, Optional

from ospa.models.enumerations import InterviewRating, Level, ProficiencyLevel, Rank
from ospa.scoring.aggregator import (
    INTERVIEW_FIELDS,
    LIST_CATEGORIES,
    section_of,
    total,
)


def _new_id() -> str:
    return str(uuid4())


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# Interview values a dimension may hold; 0 marks a dimension not yet rated.
INTERVIEW_VALUES = tuple(r.value for r in InterviewRating)


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase keys; dumps camelCase with by_alias."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Instance(CamelModel):
    """
    One scoreable achievement or service entry.

    Instances are never edited in place; remove and re-add to change one.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        default_factory=_new_id,
        description="Unique instance identifier"
    )

    level: Level = Field(
        ...,
        description="Tier at which the achievement or service took place"
    )

    rank: Optional[Rank] = Field(
        default=None,
        description="Contest placement (contest categories only)"
    )

    type: Optional[str] = Field(
        default=None,
        max_length=100,
        description="Role label, e.g. 'President' or 'Facilitator'"
    )


class Achievements(CamelModel):
    individual: List[Instance] = Field(default_factory=list)
    group: List[Instance] = Field(default_factory=list)
    special_awards: List[Instance] = Field(default_factory=list)
    publication: List[Instance] = Field(default_factory=list)


class ProfessionalServices(CamelModel):
    leadership: List[Instance] = Field(default_factory=list)
    extension: List[Instance] = Field(default_factory=list)
    innovations: List[Instance] = Field(default_factory=list)
    speakership: List[Instance] = Field(default_factory=list)
    books: List[Instance] = Field(default_factory=list)
    articles: List[Instance] = Field(default_factory=list)


class InterviewScores(CamelModel):
    """Panel interview, maximum 10 points."""

    principles: float = 0.0
    leadership: float = 0.0
    experience: float = 0.0
    growth: float = 0.0
    communication: float = 0.0

    @field_validator(*INTERVIEW_FIELDS)
    @classmethod
    def validate_rating(cls, value: float) -> float:
        if value not in INTERVIEW_VALUES:
            raise ValueError(
                f"Interview rating must be one of {', '.join(str(v) for v in INTERVIEW_VALUES)}"
            )
        return float(value)


def normalize_list_name(list_name: str) -> str:
    """Map 'specialAwards' / 'special_awards' style names to the attribute name."""
    for name in LIST_CATEGORIES:
        if list_name in (name, to_camel(name)):
            return name
    raise KeyError(list_name)


class Candidate(CamelModel):
    """
    OSPA nominee with achievement and service records.

    ``total_score`` is computed from the instance lists and interview on every
    read, so direct edits are reflected and a stored or client-supplied total
    is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(
        default_factory=_new_id,
        description="Unique candidate identifier"
    )

    name: str = Field(default="", max_length=255, description="Nominee name")
    school: str = Field(default="", max_length=255, description="School name")
    division: str = Field(default="", max_length=255, description="Schools division office")

    level: ProficiencyLevel = Field(
        default=ProficiencyLevel.SECONDARY,
        description="Elementary or Secondary school paper"
    )

    performance_rating: bool = Field(
        default=True,
        description="Meets the Very Satisfactory performance rating requirement"
    )

    achievements: Achievements = Field(default_factory=Achievements)
    professional: ProfessionalServices = Field(default_factory=ProfessionalServices)
    interview: InterviewScores = Field(default_factory=InterviewScores)

    timestamp: str = Field(
        default_factory=_now_iso,
        description="Creation / last update time (ISO-8601, UTC)"
    )

    @computed_field(alias="totalScore")
    @property
    def total_score(self) -> float:
        """Instance points plus interview, rounded half-up to 2 decimals."""
        return total(self)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def instances(self, list_name: str) -> List[Instance]:
        name = normalize_list_name(list_name)
        return getattr(getattr(self, section_of(name)), name)

    def add_instance(
        self,
        list_name: str,
        level: Level,
        rank: Optional[Rank] = None,
        type: Optional[str] = None,
    ) -> Instance:
        instance = Instance(level=level, rank=rank, type=type)
        self.instances(list_name).append(instance)
        return instance

    def remove_instance(self, list_name: str, instance_id: str) -> bool:
        items = self.instances(list_name)
        kept = [i for i in items if i.id != instance_id]
        removed = len(kept) != len(items)
        items[:] = kept
        return removed

    def set_interview(self, dimension: str, value: float) -> None:
        if dimension not in INTERVIEW_FIELDS:
            raise KeyError(dimension)
        self.interview = InterviewScores(
            **{**self.interview.model_dump(), dimension: value}
        )

    def touch(self) -> None:
        self.timestamp = _now_iso()

    @property
    def missing_required_fields(self) -> List[str]:
        return [f for f in ("name", "school", "division") if not getattr(self, f).strip()]

    def to_storage(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

# ospa/scoring/aggregator.py
"""
Candidate Aggregator
--------------------
Turns a candidate's instance lists and panel interview into one total.

Formula:
    total = Σ_lists Σ_instances score(category(list), level, rank, role)
            + Σ interview dimension values
    rounded half-up to 2 decimal places

Category per instance list:
    achievements.individual      INDIVIDUAL
    achievements.group           GROUP
    achievements.special_awards  SPECIAL
    achievements.publication     PUBLICATION
    professional.leadership      LEADERSHIP
    professional.extension       EXTENSION
    professional.innovations     INNOVATIONS
    professional.speakership     TIERED_SERVICES
    professional.books           TIERED_SERVICES
    professional.articles        ARTICLES
"""
import structlog
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable

from ospa.models.enumerations import Category
from ospa.scoring.instance_scorer import score
from ospa.scoring.utils import round_points, sum_points, to_decimal

logger = structlog.get_logger(__name__)

ACHIEVEMENT_LISTS: Dict[str, Category] = {
    "individual": Category.INDIVIDUAL,
    "group": Category.GROUP,
    "special_awards": Category.SPECIAL,
    "publication": Category.PUBLICATION,
}

PROFESSIONAL_LISTS: Dict[str, Category] = {
    "leadership": Category.LEADERSHIP,
    "extension": Category.EXTENSION,
    "innovations": Category.INNOVATIONS,
    "speakership": Category.TIERED_SERVICES,
    "books": Category.TIERED_SERVICES,
    "articles": Category.ARTICLES,
}

LIST_CATEGORIES: Dict[str, Category] = {**ACHIEVEMENT_LISTS, **PROFESSIONAL_LISTS}

INTERVIEW_FIELDS = ("principles", "leadership", "experience", "growth", "communication")


def section_of(list_name: str) -> str:
    """'achievements' or 'professional' for a known list name."""
    if list_name in ACHIEVEMENT_LISTS:
        return "achievements"
    if list_name in PROFESSIONAL_LISTS:
        return "professional"
    raise KeyError(list_name)


def instance_points(instance, category: Category) -> int:
    """Points for one instance scored under the given category."""
    return score(category, instance.level, instance.rank, instance.type)


def list_points(instances: Iterable, category: Category) -> int:
    """Sum of instance scores for one list."""
    return sum(instance_points(i, category) for i in instances)


@dataclass
class AggregateResult:
    """Output of CandidateAggregator.calculate()."""
    list_points: Dict[str, int] = field(default_factory=dict)  # list name -> points
    interview_total: Decimal = Decimal("0.00")
    total: Decimal = Decimal("0.00")

    def points(self, *list_names: str) -> int:
        return sum(self.list_points.get(name, 0) for name in list_names)


class CandidateAggregator:
    """Sum instance and interview points for a candidate."""

    def calculate(self, candidate) -> AggregateResult:
        """
        Args:
            candidate: Object exposing ``achievements``, ``professional`` and
                       ``interview`` with the attribute names listed above.

        Returns:
            AggregateResult with per-list points, interview subtotal and total.
        """
        per_list: Dict[str, int] = {}
        for list_name, category in LIST_CATEGORIES.items():
            section = getattr(candidate, section_of(list_name))
            per_list[list_name] = list_points(getattr(section, list_name), category)

        interview = self.interview_total(candidate)
        total = to_decimal(sum_points(per_list.values()) + interview)

        logger.debug(
            "candidate_total_calculated",
            candidate_id=getattr(candidate, "id", None),
            list_points=per_list,
            interview_total=float(interview),
            total=float(total),
        )

        return AggregateResult(
            list_points=per_list,
            interview_total=interview,
            total=total,
        )

    @staticmethod
    def interview_total(candidate) -> Decimal:
        values = [getattr(candidate.interview, f) for f in INTERVIEW_FIELDS]
        return to_decimal(sum_points(values))


_aggregator = CandidateAggregator()


def total(candidate) -> float:
    """Candidate total score rounded to 2 decimals."""
    return round_points(_aggregator.calculate(candidate).total)


def subtotals(candidate) -> AggregateResult:
    """Per-list points, interview subtotal and total for a candidate."""
    return _aggregator.calculate(candidate)

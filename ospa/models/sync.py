from pydantic import BaseModel, ConfigDict, Field

from ospa.scoring.aggregator import subtotals
from ospa.scoring.utils import round_points

ACADEMIC_QUALIFIED = "Qualified (VS)"
ACADEMIC_NOT_QUALIFIED = "Not Qualified"


class SyncRecord(BaseModel):
    """
    Flat per-candidate row sent to the spreadsheet and written to CSV.

    Point fields are derived subtotals, never the raw instance lists.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    school: str
    division: str
    academic: str = Field(..., description="Performance rating eligibility label")

    individual: int = Field(..., description="Individual contests")
    group: int = Field(..., description="Group contests")
    special: int = Field(..., description="Special awards")
    pub_lead: int = Field(..., alias="pubLead", description="School publication contests")
    guild_lead: int = Field(..., alias="guildLead", description="Journalism leadership")
    innovation: int = Field(..., description="Innovations & advocacies")
    community: int = Field(..., description="Extension services")
    published: int = Field(..., description="Published books/modules and articles")
    trainings: int = Field(..., description="Speakership (resource speaker / judge)")

    interview_total: float = Field(..., alias="interviewTotal")
    grand_total: float = Field(..., alias="grandTotal")

    @classmethod
    def from_candidate(cls, candidate) -> "SyncRecord":
        result = subtotals(candidate)
        return cls(
            name=candidate.name,
            school=candidate.school,
            division=candidate.division,
            academic=ACADEMIC_QUALIFIED if candidate.performance_rating else ACADEMIC_NOT_QUALIFIED,
            individual=result.points("individual"),
            group=result.points("group"),
            special=result.points("special_awards"),
            pub_lead=result.points("publication"),
            guild_lead=result.points("leadership"),
            innovation=result.points("innovations"),
            community=result.points("extension"),
            published=result.points("books", "articles"),
            trainings=result.points("speakership"),
            interview_total=round_points(result.interview_total),
            grand_total=round_points(result.total),
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)

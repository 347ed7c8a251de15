# tests/test_models.py

"""
Model Tests - Candidate, Instance, interview ratings and sync records
"""

import pytest
from pydantic import ValidationError

from ospa.models.candidate import (
    Candidate,
    Instance,
    InterviewScores,
    normalize_list_name,
)
from ospa.models.enumerations import (
    ExtensionRole,
    InterviewRating,
    LeadershipRole,
    Level,
    Rank,
)
from ospa.models.sync import ACADEMIC_NOT_QUALIFIED, ACADEMIC_QUALIFIED, SyncRecord


# ENUMERATION TESTS


class TestEnumerations:

    def test_level_values(self):
        assert [l.value for l in Level] == ["National", "Regional", "Division", "District", "School"]

    def test_rank_values(self):
        assert [r.value for r in Rank] == ["1st", "2nd", "3rd", "4th", "5th", "6th", "7th"]

    def test_first_roles(self):
        assert list(LeadershipRole)[0].value == "President"
        assert list(ExtensionRole)[0].value == "Chairperson"

    def test_interview_ratings(self):
        assert InterviewRating.COMMENDABLE == 2.0
        assert InterviewRating(0.4) is InterviewRating.INSUFFICIENT


# INSTANCE TESTS


class TestInstance:

    def test_generates_unique_ids(self):
        a = Instance(level=Level.NATIONAL)
        b = Instance(level=Level.NATIONAL)
        assert a.id != b.id

    def test_is_frozen(self):
        inst = Instance(level=Level.NATIONAL, rank=Rank.FIRST)
        with pytest.raises(ValidationError):
            inst.rank = Rank.SECOND

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            Instance(level="Provincial")

    def test_type_max_length(self):
        with pytest.raises(ValidationError):
            Instance(level=Level.DIVISION, type="x" * 101)


# CANDIDATE TESTS


class TestCandidate:

    def test_defaults(self):
        c = Candidate()
        assert c.level.value == "Secondary"
        assert c.performance_rating is True
        assert c.total_score == 0.0
        assert c.achievements.individual == []

    def test_accepts_camel_case(self, candidate_payload):
        c = Candidate.model_validate(candidate_payload)
        assert c.performance_rating is True
        assert c.total_score == 36.0

    def test_supplied_total_is_replaced(self, candidate_payload):
        c = Candidate.model_validate({**candidate_payload, "totalScore": 999})
        assert c.total_score == 36.0

    def test_total_follows_direct_interview_assignment(self):
        c = Candidate()
        c.interview = InterviewScores(principles=2.0)
        assert c.total_score == 2.0

    def test_total_follows_direct_list_edits(self, candidate):
        candidate.achievements.individual.append(Instance(level=Level.NATIONAL, rank=Rank.FIRST))
        assert candidate.total_score == 56.0
        candidate.achievements.individual.clear()
        assert candidate.total_score == 16.0

    def test_snake_case_total_is_ignored(self, candidate_payload):
        c = Candidate.model_validate({**candidate_payload, "total_score": 1.5})
        assert c.total_score == 36.0

    def test_storage_dump_is_camel_case(self, candidate):
        data = candidate.to_storage()
        assert data["totalScore"] == 36.0
        assert data["performanceRating"] is True
        assert "specialAwards" in data["achievements"]
        assert data["achievements"]["individual"][0]["level"] == "National"
        assert data["achievements"]["individual"][0]["rank"] == "1st"

    def test_storage_round_trip(self, candidate):
        restored = Candidate.model_validate(candidate.to_storage())
        assert restored == candidate

    def test_add_instance(self):
        c = Candidate()
        inst = c.add_instance("specialAwards", Level.REGIONAL, rank=Rank.SECOND)
        assert c.achievements.special_awards == [inst]
        assert c.total_score == 6.0

    def test_remove_instance_restores_total(self, candidate):
        before = candidate.total_score
        inst = candidate.add_instance("leadership", Level.NATIONAL, type="President")
        assert candidate.total_score == before + 25
        assert candidate.remove_instance("leadership", inst.id) is True
        assert candidate.total_score == before

    def test_remove_unknown_instance(self, candidate):
        before = candidate.total_score
        assert candidate.remove_instance("individual", "does-not-exist") is False
        assert candidate.total_score == before
        assert len(candidate.achievements.individual) == 1

    def test_unknown_list(self):
        with pytest.raises(KeyError):
            Candidate().add_instance("awards", Level.NATIONAL)

    def test_set_interview_invalid_value(self):
        c = Candidate()
        with pytest.raises(ValidationError):
            c.set_interview("principles", 1.5)
        assert c.interview.principles == 0.0

    def test_set_interview_unknown_dimension(self):
        with pytest.raises(KeyError):
            Candidate().set_interview("charisma", 2.0)

    def test_missing_required_fields(self):
        c = Candidate(name="Ana", school="  ")
        assert c.missing_required_fields == ["school", "division"]


class TestInterviewScores:

    @pytest.mark.parametrize("value", [0, 0.4, 1.0, 2.0])
    def test_allowed_values(self, value):
        assert InterviewScores(principles=value).principles == float(value)

    @pytest.mark.parametrize("value", [0.5, 3.0, -1.0])
    def test_rejected_values(self, value):
        with pytest.raises(ValidationError):
            InterviewScores(growth=value)


class TestNormalizeListName:

    @pytest.mark.parametrize("raw, expected", [
        ("special_awards", "special_awards"),
        ("specialAwards", "special_awards"),
        ("books", "books"),
    ])
    def test_known_names(self, raw, expected):
        assert normalize_list_name(raw) == expected

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            normalize_list_name("SpecialAwards")


# SYNC RECORD TESTS


class TestSyncRecord:

    def test_from_candidate(self, candidate):
        candidate.add_instance("publication", Level.REGIONAL, rank=Rank.FIRST)   # 6
        candidate.add_instance("extension", Level.NATIONAL, type="Facilitator")  # 8
        candidate.add_instance("books", Level.DIVISION)                          # 5
        candidate.add_instance("articles", Level.NATIONAL)                       # 5
        candidate.add_instance("speakership", Level.NATIONAL)                    # 10

        payload = SyncRecord.from_candidate(candidate).to_payload()

        assert payload["name"] == "Maria Santos"
        assert payload["academic"] == ACADEMIC_QUALIFIED
        assert payload["individual"] == 20
        assert payload["group"] == 6
        assert payload["pubLead"] == 6
        assert payload["guildLead"] == 0
        assert payload["community"] == 8
        assert payload["published"] == 10
        assert payload["trainings"] == 10
        assert payload["interviewTotal"] == 10.0
        assert payload["grandTotal"] == 70.0

    def test_not_qualified_label(self):
        c = Candidate(name="A", school="B", division="Manila", performance_rating=False)
        assert SyncRecord.from_candidate(c).academic == ACADEMIC_NOT_QUALIFIED

    def test_payload_keys(self, candidate):
        assert list(SyncRecord.from_candidate(candidate).to_payload()) == [
            "name", "school", "division", "academic",
            "individual", "group", "special", "pubLead", "guildLead",
            "innovation", "community", "published", "trainings",
            "interviewTotal", "grandTotal",
        ]

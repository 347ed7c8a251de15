from enum import Enum


class Level(str, Enum):
    NATIONAL = "National"
    REGIONAL = "Regional"
    DIVISION = "Division"
    DISTRICT = "District"
    SCHOOL = "School"


class Rank(str, Enum):
    FIRST = "1st"
    SECOND = "2nd"
    THIRD = "3rd"
    FOURTH = "4th"
    FIFTH = "5th"
    SIXTH = "6th"
    SEVENTH = "7th"


class ProficiencyLevel(str, Enum):
    ELEMENTARY = "Elementary"
    SECONDARY = "Secondary"


class Category(str, Enum):
    """Scoring categories understood by the instance scorer."""
    INDIVIDUAL = "INDIVIDUAL"            # Individual contests
    GROUP = "GROUP"                      # Group contests
    SPECIAL = "SPECIAL"                  # Special awards
    PUBLICATION = "PUBLICATION"          # School publication contests
    LEADERSHIP = "LEADERSHIP"            # Journalism leadership posts
    EXTENSION = "EXTENSION"              # Extension services
    INNOVATIONS = "INNOVATIONS"          # Innovations & advocacies
    TIERED_SERVICES = "TIERED_SERVICES"  # Speakership, books/modules
    ARTICLES = "ARTICLES"                # Articles published


class LeadershipRole(str, Enum):
    PRESIDENT = "President"
    VICE_PRESIDENT = "Vice President"
    OTHER = "Other"


class ExtensionRole(str, Enum):
    CHAIRPERSON = "Chairperson"
    FACILITATOR = "Facilitator"


class InterviewRating(float, Enum):
    """Panel interview rating for a single dimension."""
    UNRATED = 0.0
    INSUFFICIENT = 0.4
    LIMITED = 1.0
    COMMENDABLE = 2.0

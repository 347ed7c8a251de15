from __future__ import annotations

import csv
import io
from datetime import date
from pathlib import Path
from typing import List, Sequence

from ospa.models.candidate import Candidate
from ospa.models.sync import SyncRecord

CSV_HEADERS: List[str] = [
    "Name", "School", "Division", "Academic",
    "Individual", "Group", "Special", "Pub Lead", "Guild Lead",
    "Innovation", "Community", "Published", "Trainings",
    "Interview Total", "Grand Total",
]


def candidate_row(candidate: Candidate) -> list:
    rec = SyncRecord.from_candidate(candidate)
    return [
        rec.name, rec.school, rec.division, rec.academic,
        rec.individual, rec.group, rec.special, rec.pub_lead, rec.guild_lead,
        rec.innovation, rec.community, rec.published, rec.trainings,
        rec.interview_total, rec.grand_total,
    ]


def render_csv(candidates: Sequence[Candidate]) -> str:
    """Header plus one row per candidate; text fields quoted, quotes doubled."""
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(CSV_HEADERS)
    rows = csv.writer(buf, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for candidate in candidates:
        rows.writerow(candidate_row(candidate))
    return buf.getvalue()


def export_filename(day: date | None = None) -> str:
    day = day or date.today()
    return f"ospa_export_{day.isoformat()}.csv"


def export_candidates_csv(
    candidates: Sequence[Candidate],
    out_dir: Path,
    day: date | None = None,
) -> Path | None:
    """Write the CSV export; nothing is written for an empty candidate list."""
    if not candidates:
        return None

    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / export_filename(day)
    out_path.write_text(render_csv(candidates), encoding="utf-8")
    return out_path

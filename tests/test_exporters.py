# tests/test_exporters.py
"""
CSV export tests
"""

import csv
import io
from datetime import date

from ospa.models.candidate import Candidate
from ospa.services.exporter import (
    CSV_HEADERS,
    export_candidates_csv,
    export_filename,
    render_csv,
)


class TestRenderCsv:

    def test_header_row(self):
        assert render_csv([]).splitlines() == [",".join(CSV_HEADERS)]

    def test_one_row_per_candidate(self, candidate):
        other = Candidate(name="Jose Cruz", school="Pasay East HS", division="Pasay")
        lines = render_csv([candidate, other]).splitlines()
        assert len(lines) == 3
        assert lines[1].startswith('"Maria Santos","Rizal High School","Pasig","Qualified (VS)",20,6')
        assert lines[1].endswith(",10.0,36.0")

    def test_quotes_are_doubled(self):
        c = Candidate(name='Ana "Ate" Reyes', school="School, Main", division="Manila")
        line = render_csv([c]).splitlines()[1]
        assert line.startswith('"Ana ""Ate"" Reyes","School, Main"')

        row = next(csv.reader(io.StringIO(line)))
        assert row[0] == 'Ana "Ate" Reyes'
        assert row[1] == "School, Main"


class TestExportCandidatesCsv:

    def test_empty_list_writes_nothing(self, tmp_path):
        out_dir = tmp_path / "exports"
        assert export_candidates_csv([], out_dir) is None
        assert not out_dir.exists()

    def test_writes_dated_file(self, tmp_path, candidate):
        path = export_candidates_csv([candidate, candidate], tmp_path, day=date(2026, 10, 19))
        assert path.name == "ospa_export_2026-10-19.csv"
        with path.open(encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
        assert len(rows) == 3
        assert rows[0] == CSV_HEADERS

    def test_export_filename_defaults_to_today(self):
        assert export_filename() == f"ospa_export_{date.today().isoformat()}.csv"

"""
scoring/ - OSPA Scoring Engine

Modules:
    rubric_table.py     - Annex J-1 point tables
    instance_scorer.py  - Point value of one achievement / service instance
    aggregator.py       - Candidate total and per-category subtotals
    utils.py            - Decimal utilities
"""

"""
scoring/ - Funding Compatibility Scoring Engine

Modules:
    utils.py                 - rounding, currency, presence and date helpers
    amount_gate.py           - requested-amount hard gate
    industry_alignment.py    - industry alignment analyzer (0-30)
    stage_compatibility.py   - business stage analyzer (0-25)
    financial_readiness.py   - financial readiness analyzer (0-25)
    profile_completeness.py  - profile completeness analyzer (0-20)
    insights.py              - strengths / gaps / risk flag synthesis
    engine.py                - CompatibilityEngine (aggregation + public API)
"""

from fundmatch.scoring.engine import CompatibilityEngine, classify_eligibility

__all__ = ["CompatibilityEngine", "classify_eligibility"]

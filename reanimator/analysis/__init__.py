"""Legacy code risk analysis.

Detects legacy anti-patterns in source artifacts, scores the resulting
risk, and suggests which conversion chamber should handle the findings.

Quick start::

    from reanimator.analysis import analyze_legacy_code

    report = analyze_legacy_code([
        {"path": "index.html", "content": source, "type": "html"},
    ])
    print(report.overall_score, report.risk_band.level)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .detector import analyze_complexity, count_lines, detect_patterns
from .models import (
    CodeFile,
    ComplexityMetrics,
    LegacyPattern,
    MigrationPhase,
    PatternLocation,
    ResurrectionRoute,
    RiskBand,
    RiskReport,
    TopFinding,
)
from .router import determine_resurrection_routes
from .rules import (
    DETECTION_RULES,
    DetectionRule,
    PatternCategory,
    Severity,
    SuggestedTarget,
)
from .scorer import (
    calculate_risk_score,
    determine_risk_band,
    generate_migration_phases,
    generate_recommendations,
    identify_top_findings,
)

logger = logging.getLogger("reanimator.analysis")


def analyze_legacy_code(files: Iterable[CodeFile | dict]) -> RiskReport:
    """Run the full analysis pipeline over a set of artifacts.

    Args:
        files: Artifacts to analyze (``CodeFile`` instances or dicts with
            ``path``, ``content`` and ``type`` keys).

    Returns:
        The aggregate ``RiskReport``. Identical input always yields an
        identical report.
    """
    code_files = [f if isinstance(f, CodeFile) else CodeFile.model_validate(f) for f in files]

    patterns = detect_patterns(code_files)
    score = calculate_risk_score(patterns)
    risk_band = determine_risk_band(score)

    report = RiskReport(
        overall_score=score,
        risk_band=risk_band,
        top_findings=identify_top_findings(patterns),
        patterns_detected=patterns,
        recommendations=generate_recommendations(patterns, score),
        resurrection_routes=determine_resurrection_routes(patterns),
        migration_phases=generate_migration_phases(patterns, score),
        analyzed_files=len(code_files),
        total_lines=count_lines(code_files),
        complexity_metrics=analyze_complexity(code_files),
    )

    logger.info(
        f"Analyzed {len(code_files)} files: score {score} ({risk_band.level} risk)",
        extra={
            "event": "analysis_complete",
            "files": len(code_files),
            "patterns": len(patterns),
            "score": score,
            "risk_level": risk_band.level,
        },
    )
    return report


analyze = analyze_legacy_code

__all__ = [
    "analyze",
    "analyze_legacy_code",
    "analyze_complexity",
    "detect_patterns",
    "calculate_risk_score",
    "determine_risk_band",
    "determine_resurrection_routes",
    "generate_migration_phases",
    "generate_recommendations",
    "identify_top_findings",
    "DETECTION_RULES",
    "DetectionRule",
    "PatternCategory",
    "Severity",
    "SuggestedTarget",
    "CodeFile",
    "ComplexityMetrics",
    "LegacyPattern",
    "MigrationPhase",
    "PatternLocation",
    "ResurrectionRoute",
    "RiskBand",
    "RiskReport",
    "TopFinding",
]

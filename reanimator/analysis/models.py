"""Pydantic models for legacy code risk analysis results.

This module defines the data models produced by the analysis pipeline:
detected legacy patterns, risk bands, routing suggestions, migration
phases and the aggregate risk report. Field names are snake_case in
Python and serialize to camelCase (``model_dump(by_alias=True)``) for the
report renderers that consume them.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .rules import PatternCategory, Severity, SuggestedTarget


class AnalysisModel(BaseModel):
    """Base for analysis records: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class CodeFile(AnalysisModel):
    """A source artifact submitted for analysis.

    Attributes:
        path: Path or display name of the artifact.
        content: Full text content.
        type: Free-form artifact type such as "html", "js" or "wsdl".
    """

    path: str
    content: str
    type: str = "text"


class PatternLocation(AnalysisModel):
    """A single source line on which a detection rule matched."""

    file: str
    line: int
    column: int | None = None
    snippet: str = ""


class LegacyPattern(AnalysisModel):
    """All occurrences of one detection rule across the analyzed artifacts.

    Attributes:
        id: Stable slug of the rule name (e.g. "hardcoded-secrets").
        name: Human-readable rule name.
        severity: Severity of the rule.
        category: Category of the rule.
        occurrences: Raw match count over whole file contents.
        locations: Lines on which the rule matched when tested line by line.
            A line may hold several matches, and multi-line rules may match
            the whole content without matching any single line, so
            ``len(locations)`` need not equal ``occurrences``.
        modernization_path: Target state after modernization.
        description: What the rule detects.
        rationale: Why the pattern is a problem.
        recommendation: How to fix it.
        suggested_target: Chamber able to convert the pattern automatically.
    """

    id: str
    name: str
    severity: Severity
    category: PatternCategory
    occurrences: int
    locations: list[PatternLocation] = Field(default_factory=list)
    modernization_path: str
    description: str
    rationale: str
    recommendation: str
    suggested_target: SuggestedTarget | None = None


class RiskBand(AnalysisModel):
    """Qualitative risk label derived from the overall score."""

    level: Literal["low", "medium", "high", "critical"]
    range: str
    description: str


class TopFinding(AnalysisModel):
    """One of the most impactful findings, with an impact statement."""

    pattern: str
    severity: Severity
    impact: str


class MigrationPhase(AnalysisModel):
    """A phase of a migration plan, numbered in emission order."""

    phase: int
    name: str
    duration: str
    activities: list[str] = Field(default_factory=list)
    deliverables: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)


class ResurrectionRoute(AnalysisModel):
    """Suggestion to hand findings to a downstream conversion chamber."""

    chamber: Literal["reanimator", "api-necromancer", "ghost-ui"]
    reason: str
    priority: int
    confidence: Literal["high", "medium", "low"]


class ComplexityMetrics(AnalysisModel):
    """Function-size statistics, independent of the rule catalog."""

    avg_function_length: int = 0
    max_function_length: int = 0
    god_functions: int = 0


class RiskReport(AnalysisModel):
    """Aggregate result of one analysis invocation."""

    overall_score: int = Field(ge=0, le=100)
    risk_band: RiskBand
    top_findings: list[TopFinding] = Field(default_factory=list)
    patterns_detected: list[LegacyPattern] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    resurrection_routes: list[ResurrectionRoute] = Field(default_factory=list)
    migration_phases: list[MigrationPhase] = Field(default_factory=list)
    analyzed_files: int = 0
    total_lines: int = 0
    complexity_metrics: ComplexityMetrics = Field(default_factory=ComplexityMetrics)

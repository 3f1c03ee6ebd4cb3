"""Risk scoring, findings summary, recommendations and migration phases.

The score starts at 100 and every detected pattern subtracts a penalty of
``severity weight * category multiplier``, capped per pattern so a single
rule cannot dominate. Everything else in the report (risk band, top
findings, recommendations, phases) is derived from the pattern set and
the score.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..constants import (
    HIGH_RISK_MIN_SCORE,
    LOW_RISK_MIN_SCORE,
    MAX_PATTERN_PENALTY,
    MAX_TOP_FINDINGS,
    MEDIUM_RISK_MIN_SCORE,
    STRATEGY_PATTERN_THRESHOLD,
)
from .models import LegacyPattern, MigrationPhase, RiskBand, TopFinding
from .rules import PatternCategory, Severity, SuggestedTarget
from .utils import round_half_up

SEVERITY_WEIGHTS: dict[Severity, int] = {
    Severity.CRITICAL: 35,
    Severity.HIGH: 25,
    Severity.MEDIUM: 12,
    Severity.LOW: 5,
}

# Security and data issues are weighted heavier
CATEGORY_MULTIPLIERS: dict[PatternCategory, float] = {
    PatternCategory.SECURITY: 1.5,
    PatternCategory.DATA_ACCESS: 1.3,
    PatternCategory.ARCHITECTURE: 1.2,
    PatternCategory.API_DESIGN: 1.1,
    PatternCategory.PERFORMANCE: 1.0,
    PatternCategory.MAINTAINABILITY: 0.9,
    PatternCategory.MODERNIZATION: 0.8,
    PatternCategory.UI_FRAMEWORK: 0.8,
}

SEVERITY_RANK: dict[Severity, int] = {
    Severity.CRITICAL: 4,
    Severity.HIGH: 3,
    Severity.MEDIUM: 2,
    Severity.LOW: 1,
}


def pattern_penalty(pattern: LegacyPattern) -> float:
    """Penalty contributed by a single pattern, capped at ``MAX_PATTERN_PENALTY``."""
    weight = SEVERITY_WEIGHTS[pattern.severity]
    multiplier = CATEGORY_MULTIPLIERS.get(pattern.category, 1.0)
    return min(weight * multiplier, MAX_PATTERN_PENALTY)


def calculate_risk_score(patterns: Sequence[LegacyPattern]) -> int:
    """Compute the 0-100 health score (100 means no legacy risk found)."""
    total_penalty = sum(pattern_penalty(p) for p in patterns)
    return max(0, round_half_up(100 - total_penalty))


def determine_risk_band(score: int) -> RiskBand:
    """Map a score onto its risk band (thresholds 80/50/20)."""
    if score >= LOW_RISK_MIN_SCORE:
        return RiskBand(
            level="low",
            range="80-100",
            description="Low risk - codebase is relatively modern with minimal technical debt",
        )
    elif score >= MEDIUM_RISK_MIN_SCORE:
        return RiskBand(
            level="medium",
            range="50-79",
            description="Medium risk - significant modernization opportunities identified",
        )
    elif score >= HIGH_RISK_MIN_SCORE:
        return RiskBand(
            level="high",
            range="20-49",
            description="High risk - critical technical debt requiring immediate attention",
        )
    return RiskBand(
        level="critical",
        range="0-19",
        description=(
            "Critical risk - severe technical debt threatening system stability "
            "and security"
        ),
    )


def identify_top_findings(patterns: Sequence[LegacyPattern]) -> list[TopFinding]:
    """Return the most impactful findings: by severity, then occurrences."""
    ranked = sorted(
        patterns,
        key=lambda p: (-SEVERITY_RANK[p.severity], -p.occurrences),
    )
    return [
        TopFinding(
            pattern=p.name,
            severity=p.severity,
            impact=generate_impact_statement(p),
        )
        for p in ranked[:MAX_TOP_FINDINGS]
    ]


def generate_impact_statement(pattern: LegacyPattern) -> str:
    severity, category, occurrences = pattern.severity, pattern.category, pattern.occurrences

    if severity == Severity.CRITICAL:
        if category == PatternCategory.SECURITY:
            return f"{occurrences} critical security vulnerabilities requiring immediate remediation"
        return f"{occurrences} critical issues threatening system stability"

    if severity == Severity.HIGH:
        if category == PatternCategory.ARCHITECTURE:
            return f"{occurrences} architectural issues impeding scalability and maintainability"
        if category == PatternCategory.API_DESIGN:
            return f"{occurrences} legacy API patterns blocking modern integration"
        return f"{occurrences} high-priority issues requiring near-term attention"

    if severity == Severity.MEDIUM:
        return f"{occurrences} modernization opportunities to improve code quality"

    return f"{occurrences} minor improvements for long-term maintainability"


def _opening_recommendation(score: int) -> str:
    if score < HIGH_RISK_MIN_SCORE:
        return (
            "🚨 CRITICAL: Immediate executive attention required. This codebase poses "
            "significant business risk and requires emergency modernization planning."
        )
    if score < MEDIUM_RISK_MIN_SCORE:
        return (
            "⚠️ HIGH PRIORITY: Schedule dedicated modernization sprint within next quarter. "
            "Technical debt is impeding velocity and increasing operational risk."
        )
    if score < LOW_RISK_MIN_SCORE:
        return (
            "📋 PLANNED WORK: Incorporate modernization tasks into regular sprint planning. "
            "Address high-priority items first."
        )
    return (
        "✅ GOOD STANDING: Codebase is relatively healthy. Focus on incremental "
        "improvements and preventing regression."
    )


def generate_recommendations(patterns: Sequence[LegacyPattern], score: int) -> list[str]:
    """Build the ordered recommendation list for a report.

    The first entry always reflects the score band; the rest are appended in
    a fixed order only when their triggering findings are present.
    """
    recommendations = [_opening_recommendation(score)]

    def in_category(category: PatternCategory) -> list[LegacyPattern]:
        return [p for p in patterns if p.category == category]

    def routed_to(target: SuggestedTarget) -> list[LegacyPattern]:
        return [p for p in patterns if p.suggested_target == target]

    security = in_category(PatternCategory.SECURITY)
    if security:
        critical = [p for p in security if p.severity == Severity.CRITICAL]
        if critical:
            recommendations.append(
                f"🔒 SECURITY ALERT: {len(critical)} critical security vulnerabilities "
                "detected. Engage security team for immediate assessment and remediation plan."
            )
        else:
            recommendations.append(
                f"🔒 Security: {len(security)} security-related patterns identified. "
                "Schedule security review and implement fixes in priority order."
            )

    architecture = in_category(PatternCategory.ARCHITECTURE)
    if architecture:
        god_objects = [
            p for p in patterns if "god-class" in p.id or "god-function" in p.id
        ]
        if god_objects:
            recommendations.append(
                f"🏗️ Architecture: {len(god_objects)} god classes/functions detected. "
                "Apply SOLID principles and extract responsibilities into focused modules."
            )
        else:
            recommendations.append(
                f"🏗️ Architecture: {len(architecture)} architectural improvements identified. "
                "Consider refactoring to improve modularity and testability."
            )

    soap = routed_to(SuggestedTarget.API_NECROMANCER)
    if soap:
        recommendations.append(
            f"⚡ API Modernization: {soap[0].occurrences} SOAP/legacy API patterns detected. "
            "Use API Necromancer to generate REST endpoints with OpenAPI 3.0 specifications."
        )

    ui = routed_to(SuggestedTarget.GHOST_UI)
    if ui:
        total = sum(p.occurrences for p in ui)
        recommendations.append(
            f"👻 UI Modernization: {total} legacy UI patterns detected. Use Ghost UI "
            "Converter to transform Bootstrap/jQuery into React + Tailwind components."
        )

    data = in_category(PatternCategory.DATA_ACCESS)
    if data:
        recommendations.append(
            f"💾 Data Layer: {len(data)} data access issues found. Implement ORM or query "
            "builder with parameterized queries to prevent SQL injection."
        )

    performance = in_category(PatternCategory.PERFORMANCE)
    if performance:
        recommendations.append(
            f"⚡ Performance: {len(performance)} performance anti-patterns detected. "
            "Profile application and address bottlenecks in high-traffic code paths."
        )

    modernization = in_category(PatternCategory.MODERNIZATION)
    if modernization and score >= MEDIUM_RISK_MIN_SCORE:
        recommendations.append(
            f"🔄 Modernization: {len(modernization)} syntax/pattern updates available. "
            "Consider automated refactoring tools (ESLint --fix, Rector, etc.) for quick wins."
        )

    if len(patterns) > STRATEGY_PATTERN_THRESHOLD:
        recommendations.append(
            f"📊 Strategy: High pattern count ({len(patterns)}) suggests systematic issues. "
            "Recommend strangler fig approach: build new alongside old, migrate "
            "incrementally, deprecate legacy."
        )

    if len(recommendations) == 1 and score >= LOW_RISK_MIN_SCORE:
        recommendations.append(
            "🎯 Continuous Improvement: Maintain code quality through regular reviews, "
            "automated testing, and staying current with framework updates."
        )

    return recommendations


def generate_migration_phases(
    patterns: Sequence[LegacyPattern], score: int
) -> list[MigrationPhase]:
    """Build the phased migration plan; phase numbers follow emission order."""
    has_critical = any(p.severity == Severity.CRITICAL for p in patterns)
    has_security = any(p.category == PatternCategory.SECURITY for p in patterns)
    has_architecture = any(p.category == PatternCategory.ARCHITECTURE for p in patterns)
    has_api = any(p.suggested_target == SuggestedTarget.API_NECROMANCER for p in patterns)
    has_ui = any(p.suggested_target == SuggestedTarget.GHOST_UI for p in patterns)

    phases: list[MigrationPhase] = []

    def add(name: str, duration: str, activities: list[str], deliverables: list[str]) -> None:
        phases.append(
            MigrationPhase(
                phase=len(phases) + 1,
                name=name,
                duration=duration,
                activities=activities,
                deliverables=deliverables,
            )
        )

    if score < LOW_RISK_MIN_SCORE:
        add(
            "Stabilization & Risk Mitigation",
            "2-3 weeks" if has_critical else "1-2 weeks",
            [
                "Address critical security vulnerabilities immediately"
                if has_security
                else "Establish baseline metrics and monitoring",
                "Implement comprehensive test coverage for critical paths",
                "Set up CI/CD pipeline with automated quality gates",
                "Document current architecture and dependencies",
            ],
            [
                "Security vulnerabilities remediated",
                "Test coverage report (target: 60%+ for critical paths)",
                "Architecture documentation",
                "Monitoring dashboard with key metrics",
            ],
        )

    if has_api:
        add(
            "API Modernization (Strangler Fig)",
            "4-6 weeks",
            [
                "Generate REST API specifications using API Necromancer",
                "Implement REST façade alongside existing SOAP services",
                "Deploy with feature flags for gradual rollout",
                "Migrate internal consumers to REST endpoints",
            ],
            [
                "OpenAPI 3.0 specification",
                "REST API implementation with 100% feature parity",
                "API documentation and client SDKs",
                "Migration guide for external consumers",
            ],
        )

    if has_ui:
        add(
            "UI Modernization",
            "6-8 weeks",
            [
                "Convert legacy UI components using Ghost UI Converter",
                "Implement React component library with Tailwind CSS",
                "Establish design system and accessibility standards",
                "Migrate pages incrementally with A/B testing",
            ],
            [
                "React component library",
                "Tailwind CSS design system",
                "WCAG 2.1 AA compliance certification",
                "Performance improvement metrics (target: 40% faster load times)",
            ],
        )

    if has_architecture:
        add(
            "Architecture Refactoring",
            "8-12 weeks",
            [
                "Decompose god classes into focused modules",
                "Extract business logic from presentation layer",
                "Implement dependency injection and SOLID principles",
                "Establish clear layering (presentation, business, data)",
            ],
            [
                "Refactored codebase with improved modularity",
                "Dependency injection container configuration",
                "Updated architecture diagrams",
                "Reduced cyclomatic complexity (target: <10 per function)",
            ],
        )

    add(
        "Hardening & Observability",
        "2-4 weeks",
        [
            "Implement comprehensive logging and distributed tracing",
            "Set up alerting for critical business metrics",
            "Conduct load testing and performance optimization",
            "Establish runbooks and incident response procedures",
        ],
        [
            "Observability stack (logs, metrics, traces)",
            "SLO/SLA definitions and monitoring",
            "Load test results and capacity planning",
            "Production readiness checklist completed",
        ],
    )

    return phases

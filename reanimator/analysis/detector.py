"""Pattern detection and complexity measurement over source artifacts.

Detection is a fold over the static rule catalog: every rule is tested
against every artifact, and matches are aggregated into one
``LegacyPattern`` per rule across all artifacts.

Two independent counts are kept per rule. ``occurrences`` is the number of
matches over the whole file content, while ``locations`` is rebuilt by
testing the rule against each line on its own. Rules that span lines (God
Class, Callback Hell, Await in Loop) can therefore report occurrences with
fewer or no locations; both numbers are reported as computed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..constants import GOD_FUNCTION_THRESHOLD, SNIPPET_MAX_LENGTH
from .models import CodeFile, ComplexityMetrics, LegacyPattern, PatternLocation
from .rules import DETECTION_RULES, DetectionRule
from .utils import round_half_up

logger = logging.getLogger("reanimator.analysis")

# Function-like blocks: JS/PHP style ``function name(...) { ... }`` (lazy up
# to the first closing brace) or a Python ``def name(...):`` signature.
FUNCTION_BLOCK_PATTERN = re.compile(
    r"function\s+\w+\s*\([^)]*\)\s*\{[\s\S]*?\}|def\s+\w+\s*\([^)]*\):"
)


@dataclass
class _PatternAccumulator:
    """Mutable state for one rule while the detection pass runs."""

    rule: DetectionRule
    occurrences: int = 0
    locations: list[PatternLocation] = field(default_factory=list)

    def freeze(self) -> LegacyPattern:
        rule = self.rule
        return LegacyPattern(
            id=rule.rule_id,
            name=rule.name,
            severity=rule.severity,
            category=rule.category,
            occurrences=self.occurrences,
            locations=list(self.locations),
            modernization_path=rule.modernization_path,
            description=rule.description,
            rationale=rule.rationale,
            recommendation=rule.recommendation,
            suggested_target=rule.suggested_target,
        )


def _locate(rule: DetectionRule, file: CodeFile, lines: list[str]) -> list[PatternLocation]:
    """Return every line of ``file`` on which ``rule`` matches by itself."""
    return [
        PatternLocation(
            file=file.path,
            line=index + 1,
            snippet=line.strip()[:SNIPPET_MAX_LENGTH],
        )
        for index, line in enumerate(lines)
        if rule.pattern.search(line)
    ]


def _coerce_files(files: Iterable[CodeFile | dict]) -> list[CodeFile]:
    return [f if isinstance(f, CodeFile) else CodeFile.model_validate(f) for f in files]


def detect_patterns(
    files: Iterable[CodeFile | dict],
    rules: Sequence[DetectionRule] = DETECTION_RULES,
) -> list[LegacyPattern]:
    """Scan artifacts against the rule catalog.

    Args:
        files: Artifacts to scan; dicts with ``path``/``content``/``type``
            keys are accepted.
        rules: Rule catalog to apply. Defaults to the built-in catalog.

    Returns:
        One ``LegacyPattern`` per rule that matched at least once, in the
        order the rules were first encountered.
    """
    accumulators: dict[str, _PatternAccumulator] = {}

    for file in _coerce_files(files):
        lines = file.content.split("\n")

        for rule in rules:
            match_count = sum(1 for _ in rule.pattern.finditer(file.content))
            if not match_count:
                continue

            acc = accumulators.get(rule.rule_id)
            if acc is None:
                acc = accumulators[rule.rule_id] = _PatternAccumulator(rule)

            acc.occurrences += match_count
            acc.locations.extend(_locate(rule, file, lines))

    patterns = [acc.freeze() for acc in accumulators.values()]
    logger.debug(
        f"Detected {len(patterns)} distinct legacy patterns",
        extra={"event": "patterns_detected", "patterns": len(patterns)},
    )
    return patterns


def analyze_complexity(files: Iterable[CodeFile | dict]) -> ComplexityMetrics:
    """Measure function-like block sizes across artifacts.

    This is purely descriptive and unrelated to the God Function and God
    Class rules, which use their own patterns and may disagree with it.
    """
    total_functions = 0
    total_length = 0
    max_length = 0
    god_functions = 0

    for file in _coerce_files(files):
        for match in FUNCTION_BLOCK_PATTERN.finditer(file.content):
            length = len(match.group(0))
            total_functions += 1
            total_length += length
            max_length = max(max_length, length)
            if length > GOD_FUNCTION_THRESHOLD:
                god_functions += 1

    return ComplexityMetrics(
        avg_function_length=(
            round_half_up(total_length / total_functions) if total_functions else 0
        ),
        max_function_length=max_length,
        god_functions=god_functions,
    )


def count_lines(files: Iterable[CodeFile | dict]) -> int:
    """Total line count across artifacts (an empty file counts as one line)."""
    return sum(len(f.content.split("\n")) for f in _coerce_files(files))

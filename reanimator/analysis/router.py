"""Route findings to the downstream conversion chambers.

The router only emits suggestions; it never invokes the SOAP converter or
any other pipeline itself.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..constants import JS_ROUTE_HIGH_CONFIDENCE, UI_ROUTE_HIGH_CONFIDENCE
from .models import LegacyPattern, ResurrectionRoute

SOAP_PATTERN_IDS = frozenset({"soap-wsdl-service"})

UI_PATTERN_IDS = frozenset({
    "jquery-dom-manipulation",
    "bootstrap-3-x-classes",
})

LEGACY_JS_PATTERN_IDS = frozenset({
    "var-declarations",
    "direct-innerhtml-manipulation",
    "document-write-usage",
    "direct-dom-manipulation",
    "callback-hell-pattern",
})


def determine_resurrection_routes(patterns: Sequence[LegacyPattern]) -> list[ResurrectionRoute]:
    """Suggest chambers for the detected patterns, sorted by priority."""
    routes: list[ResurrectionRoute] = []

    soap = [p for p in patterns if p.id in SOAP_PATTERN_IDS]
    if soap:
        routes.append(
            ResurrectionRoute(
                chamber="api-necromancer",
                reason=f"{soap[0].occurrences} SOAP/WSDL patterns detected - ready for REST conversion",
                priority=1,
                confidence="high",
            )
        )

    ui = [p for p in patterns if p.id in UI_PATTERN_IDS]
    if ui:
        total = sum(p.occurrences for p in ui)
        routes.append(
            ResurrectionRoute(
                chamber="ghost-ui",
                reason=f"{total} legacy UI patterns detected - convert to React + Tailwind",
                priority=2,
                confidence="high" if len(ui) >= UI_ROUTE_HIGH_CONFIDENCE else "medium",
            )
        )

    js = [p for p in patterns if p.id in LEGACY_JS_PATTERN_IDS]
    if js:
        total = sum(p.occurrences for p in js)
        routes.append(
            ResurrectionRoute(
                chamber="reanimator",
                reason=f"{total} legacy JavaScript patterns - modernize syntax and practices",
                priority=3,
                confidence="high" if len(js) >= JS_ROUTE_HIGH_CONFIDENCE else "medium",
            )
        )

    return sorted(routes, key=lambda r: r.priority)

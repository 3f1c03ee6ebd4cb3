"""Tests for chamber routing."""

from reanimator.analysis.router import determine_resurrection_routes


class TestResurrectionRoutes:
    """Routes are suggested per pattern family and sorted by priority."""

    def test_no_patterns(self):
        assert determine_resurrection_routes([]) == []

    def test_unrouted_patterns(self, make_pattern):
        assert determine_resurrection_routes([make_pattern("hardcoded-secrets")]) == []

    def test_soap_route(self, make_pattern):
        routes = determine_resurrection_routes([make_pattern("soap-wsdl-service", 3)])
        assert len(routes) == 1
        route = routes[0]
        assert route.chamber == "api-necromancer"
        assert route.priority == 1
        assert route.confidence == "high"
        assert route.reason.startswith("3 SOAP/WSDL patterns")

    def test_ui_route_sums_occurrences(self, make_pattern):
        routes = determine_resurrection_routes(
            [make_pattern("jquery-dom-manipulation", 4), make_pattern("bootstrap-3-x-classes", 2)]
        )
        assert [r.chamber for r in routes] == ["ghost-ui"]
        assert routes[0].reason.startswith("6 legacy UI patterns")
        assert routes[0].confidence == "medium"

    def test_legacy_js_confidence(self, make_pattern):
        few = determine_resurrection_routes([make_pattern("var-declarations")])
        assert few[0].chamber == "reanimator"
        assert few[0].confidence == "medium"

        many = determine_resurrection_routes(
            [
                make_pattern("var-declarations"),
                make_pattern("direct-innerhtml-manipulation"),
                make_pattern("document-write-usage"),
                make_pattern("direct-dom-manipulation"),
                make_pattern("callback-hell-pattern"),
            ]
        )
        assert many[0].confidence == "high"
        assert many[0].reason.startswith("5 legacy JavaScript patterns")

    def test_sorted_by_priority(self, make_pattern):
        routes = determine_resurrection_routes(
            [
                make_pattern("var-declarations"),
                make_pattern("jquery-dom-manipulation"),
                make_pattern("soap-wsdl-service"),
            ]
        )
        assert [r.chamber for r in routes] == ["api-necromancer", "ghost-ui", "reanimator"]
        assert [r.priority for r in routes] == [1, 2, 3]

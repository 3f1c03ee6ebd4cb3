"""
Detection rules for legacy source artifacts.

This module defines the static catalog of legacy anti-patterns that the
pattern detector scans for. The catalog covers several ecosystems (PHP,
Java, .NET, JavaScript, Python, SQL, markup) and is deliberately regex based:
rules run over raw text and never assume the input is well formed.

Each rule includes:
- A compiled regular expression matched against file contents
- Severity level (critical, high, medium, low)
- Category (security, architecture, api-design, ...)
- Description, rationale, recommendation and modernization path
- An optional suggested target chamber for automated conversion

The catalog is a module-level tuple of frozen dataclasses and is never
mutated at run time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..constants import GOD_CLASS_THRESHOLD, GOD_FUNCTION_THRESHOLD


class Severity(str, Enum):
    """Severity levels for legacy patterns."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PatternCategory(str, Enum):
    """Categories of legacy patterns."""

    SECURITY = "security"
    PERFORMANCE = "performance"
    MAINTAINABILITY = "maintainability"
    MODERNIZATION = "modernization"
    ARCHITECTURE = "architecture"
    DATA_ACCESS = "data-access"
    UI_FRAMEWORK = "ui-framework"
    API_DESIGN = "api-design"


class SuggestedTarget(str, Enum):
    """Downstream transformation pipelines a pattern can be routed to."""

    API_NECROMANCER = "api-necromancer"
    GHOST_UI = "ghost-ui"
    PLATFORM_REFACTOR = "platform-refactor"


_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Build the stable pattern id for a rule name.

    ``"Hardcoded Secrets"`` becomes ``"hardcoded-secrets"`` and
    ``"Bootstrap 3.x Classes"`` becomes ``"bootstrap-3-x-classes"``.
    """
    return _SLUG_RE.sub("-", name.lower()).strip("-")


@dataclass(frozen=True)
class DetectionRule:
    """A legacy pattern definition.

    Attributes:
        pattern: Compiled regular expression matched against source text.
        severity: How severe this pattern is.
        category: The pattern category.
        name: Short human-readable name (the pattern id is derived from it).
        description: What the rule detects.
        rationale: Why the pattern is a problem.
        recommendation: How to fix it.
        modernization_path: The target state after modernization.
        suggested_target: Chamber able to convert the pattern automatically.
    """

    pattern: re.Pattern[str]
    severity: Severity
    category: PatternCategory
    name: str
    description: str
    rationale: str
    recommendation: str
    modernization_path: str
    suggested_target: SuggestedTarget | None = None

    @property
    def rule_id(self) -> str:
        return slugify(self.name)


# ---------------------------------------------------------------------------
# A. Security critical
# ---------------------------------------------------------------------------

SECURITY_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(
        pattern=re.compile(
            r"mysql_query|mysql_connect|mysql_real_escape_string", re.IGNORECASE
        ),
        severity=Severity.CRITICAL,
        category=PatternCategory.SECURITY,
        name="Deprecated MySQL Functions (PHP)",
        description="Legacy mysql_* functions detected - removed in PHP 7.0",
        rationale=(
            "These functions are vulnerable to SQL injection and have been "
            "deprecated since PHP 5.5"
        ),
        recommendation="Migrate to PDO or MySQLi with prepared statements immediately",
        modernization_path="Use PDO with parameter binding",
        suggested_target=SuggestedTarget.PLATFORM_REFACTOR,
    ),
    DetectionRule(
        pattern=re.compile(r"eval\s*\(|new Function\s*\("),
        severity=Severity.CRITICAL,
        category=PatternCategory.SECURITY,
        name="Dynamic Code Execution",
        description="eval() or Function constructor detected",
        rationale="Allows arbitrary code execution and is a major security vulnerability",
        recommendation=(
            "Refactor to use safe alternatives like JSON.parse or explicit "
            "function calls"
        ),
        modernization_path="Remove eval() and use structured data parsing",
    ),
    DetectionRule(
        pattern=re.compile(
            r"""(password|api[_-]?key|secret|token)\s*=\s*["'][^"']{8,}["']""",
            re.IGNORECASE,
        ),
        severity=Severity.CRITICAL,
        category=PatternCategory.SECURITY,
        name="Hardcoded Secrets",
        description="Potential hardcoded credentials or API keys detected",
        rationale="Hardcoded secrets in source code are a critical security vulnerability",
        recommendation=(
            "Move all secrets to environment variables or secure vaults "
            "(AWS Secrets Manager, HashiCorp Vault)"
        ),
        modernization_path="Use environment variables and secret management",
    ),
    DetectionRule(
        pattern=re.compile(
            r'SELECT\s+\*\s+FROM\s+\w+\s+WHERE\s+.*\+|"SELECT.*"\s*\+\s*\w+',
            re.IGNORECASE,
        ),
        severity=Severity.CRITICAL,
        category=PatternCategory.SECURITY,
        name="SQL String Concatenation",
        description="SQL queries built with string concatenation",
        rationale="Highly vulnerable to SQL injection attacks",
        recommendation="Use parameterized queries or ORM with parameter binding",
        modernization_path="Implement prepared statements or ORM",
    ),
)

# ---------------------------------------------------------------------------
# B. API & service patterns
# ---------------------------------------------------------------------------

API_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(
        pattern=re.compile(
            r"xmlns:soap|<soap:|<wsdl:|<definitions.*wsdl", re.IGNORECASE
        ),
        severity=Severity.HIGH,
        category=PatternCategory.API_DESIGN,
        name="SOAP/WSDL Service",
        description="SOAP/WSDL service implementation detected",
        rationale=(
            "SOAP is verbose, complex, and difficult to maintain compared to "
            "modern REST APIs"
        ),
        recommendation="Convert to RESTful API with OpenAPI 3.0 specification",
        modernization_path="Transform to REST using strangler fig pattern",
        suggested_target=SuggestedTarget.API_NECROMANCER,
    ),
    DetectionRule(
        pattern=re.compile(
            r"<system\.serviceModel>|<basicHttpBinding>|<wsHttpBinding>",
            re.IGNORECASE,
        ),
        severity=Severity.HIGH,
        category=PatternCategory.API_DESIGN,
        name="WCF Service (.NET)",
        description="Windows Communication Foundation service detected",
        rationale="WCF is legacy technology, not supported in .NET Core/5+",
        recommendation="Migrate to ASP.NET Core Web API or gRPC",
        modernization_path="Convert to ASP.NET Core REST API",
    ),
    DetectionRule(
        pattern=re.compile(r"javax\.ejb\.|@Stateless|@Stateful|@MessageDriven"),
        severity=Severity.HIGH,
        category=PatternCategory.ARCHITECTURE,
        name="Enterprise JavaBeans (EJB)",
        description="EJB components detected",
        rationale=(
            "EJBs are heavyweight, complex, and largely replaced by Spring "
            "Framework"
        ),
        recommendation="Migrate to Spring Boot with dependency injection",
        modernization_path="Refactor to Spring Boot microservices",
    ),
)

# ---------------------------------------------------------------------------
# C. Frontend / UI patterns
# ---------------------------------------------------------------------------

UI_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(
        pattern=re.compile(r"\$\(document\)\.ready|\$\(|jQuery\("),
        severity=Severity.MEDIUM,
        category=PatternCategory.UI_FRAMEWORK,
        name="jQuery DOM Manipulation",
        description="jQuery library usage detected",
        rationale=(
            "jQuery is outdated; modern frameworks provide better performance "
            "and maintainability"
        ),
        recommendation="Migrate to React with hooks for declarative UI",
        modernization_path="Convert to React components with useState/useEffect",
        suggested_target=SuggestedTarget.GHOST_UI,
    ),
    DetectionRule(
        pattern=re.compile(
            r'class="[^"]*\b(col-xs|col-sm|col-md|col-lg|panel|panel-|jumbotron|well)'
        ),
        severity=Severity.MEDIUM,
        category=PatternCategory.UI_FRAMEWORK,
        name="Bootstrap 3.x Classes",
        description="Bootstrap 3 CSS framework detected",
        rationale=(
            "Bootstrap 3 is end-of-life (2019); lacks modern features and "
            "accessibility"
        ),
        recommendation="Migrate to Tailwind CSS for utility-first styling",
        modernization_path="Convert to Tailwind CSS with modern responsive design",
        suggested_target=SuggestedTarget.GHOST_UI,
    ),
    DetectionRule(
        pattern=re.compile(r"\.innerHTML\s*=|\.outerHTML\s*="),
        severity=Severity.HIGH,
        category=PatternCategory.SECURITY,
        name="Direct innerHTML Manipulation",
        description="Direct innerHTML assignment detected",
        rationale=(
            "XSS vulnerability if user input is involved; bypasses framework "
            "security"
        ),
        recommendation="Use React component rendering or sanitize with DOMPurify",
        modernization_path="Refactor to React JSX or use safe DOM APIs",
    ),
    DetectionRule(
        pattern=re.compile(
            r"document\.getElementById|document\.querySelector|document\.getElementsBy"
        ),
        severity=Severity.LOW,
        category=PatternCategory.MODERNIZATION,
        name="Direct DOM Manipulation",
        description="Direct DOM API usage detected",
        rationale="Imperative DOM manipulation is error-prone and hard to maintain",
        recommendation="Use React declarative rendering",
        modernization_path="Convert to React component state",
    ),
    DetectionRule(
        pattern=re.compile(r"document\.write(?:ln)?\s*\("),
        severity=Severity.MEDIUM,
        category=PatternCategory.MODERNIZATION,
        name="document.write Usage",
        description="document.write() or document.writeln() detected",
        rationale=(
            "document.write blocks parsing, wipes the page when called after "
            "load, and is an XSS sink"
        ),
        recommendation="Render content through components or safe DOM APIs",
        modernization_path="Replace with React rendering or appendChild",
    ),
)

# ---------------------------------------------------------------------------
# D. Backend patterns
# ---------------------------------------------------------------------------

BACKEND_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(
        pattern=re.compile(r"org\.apache\.struts|com\.opensymphony\.xwork2"),
        severity=Severity.CRITICAL,
        category=PatternCategory.ARCHITECTURE,
        name="Apache Struts Framework",
        description="Apache Struts framework detected",
        rationale=(
            "Struts has had multiple critical security vulnerabilities "
            "(CVE-2017-5638, etc.)"
        ),
        recommendation="Migrate to Spring Boot or modern Java framework immediately",
        modernization_path="Refactor to Spring Boot with Spring MVC",
    ),
    DetectionRule(
        pattern=re.compile(
            r'System\.Web\.UI\.Page|<%@\s*Page|<asp:|runat="server"', re.IGNORECASE
        ),
        severity=Severity.HIGH,
        category=PatternCategory.ARCHITECTURE,
        name="ASP.NET WebForms",
        description="ASP.NET WebForms detected",
        rationale="WebForms is legacy technology with poor testability and performance",
        recommendation="Migrate to ASP.NET Core MVC or Razor Pages",
        modernization_path="Convert to ASP.NET Core with modern patterns",
    ),
    DetectionRule(
        pattern=re.compile(r"new\s+SqlCommand\([^)]*\+|SqlCommand.*CommandText.*\+"),
        severity=Severity.CRITICAL,
        category=PatternCategory.SECURITY,
        name="ADO.NET String Concatenation",
        description="SQL commands built with string concatenation in .NET",
        rationale="SQL injection vulnerability in ADO.NET code",
        recommendation="Use parameterized SqlCommand with Parameters.AddWithValue",
        modernization_path="Implement Entity Framework Core or Dapper with parameters",
    ),
)

# ---------------------------------------------------------------------------
# E. JavaScript / Node.js patterns
# ---------------------------------------------------------------------------

JAVASCRIPT_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(
        pattern=re.compile(r"\bvar\s+\w+\s*="),
        severity=Severity.LOW,
        category=PatternCategory.MODERNIZATION,
        name="var Declarations",
        description="Legacy var keyword detected",
        rationale="var has function scope and hoisting issues; const/let are block-scoped",
        recommendation="Replace with const (default) or let (when reassignment needed)",
        modernization_path="Modernize to ES6+ const/let",
    ),
    DetectionRule(
        pattern=re.compile(
            r"function\s*\([^)]*\)\s*\{[^}]*callback\s*\([^)]*\)\s*;[^}]*\}"
        ),
        severity=Severity.MEDIUM,
        category=PatternCategory.MODERNIZATION,
        name="Callback Hell Pattern",
        description="Nested callback pattern detected",
        rationale="Callback pyramids are hard to read, debug, and maintain",
        recommendation="Refactor to async/await or Promises",
        modernization_path="Convert to async/await for better readability",
    ),
    DetectionRule(
        pattern=re.compile(r"app\.get\(|app\.post\(|app\.put\(|app\.delete\("),
        severity=Severity.LOW,
        category=PatternCategory.ARCHITECTURE,
        name="Express.js Monolithic Routes",
        description="Express.js route definitions detected",
        rationale="Monolithic Express apps can become unmaintainable at scale",
        recommendation=(
            "Consider microservices architecture or modular route organization"
        ),
        modernization_path="Refactor to modular Express routers or NestJS",
    ),
)

# ---------------------------------------------------------------------------
# F. Python patterns
# ---------------------------------------------------------------------------

PYTHON_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(
        pattern=re.compile(
            r"from\s+django\.conf\.urls\s+import\s+url|django\.contrib\.admin"
        ),
        severity=Severity.LOW,
        category=PatternCategory.ARCHITECTURE,
        name="Django Monolithic App",
        description="Django framework detected",
        rationale="Large Django monoliths can benefit from service decomposition",
        recommendation=(
            "Consider breaking into smaller services or using Django REST framework"
        ),
        modernization_path="Modularize with Django apps or microservices",
    ),
)

# ---------------------------------------------------------------------------
# G. Architecture smells
# ---------------------------------------------------------------------------

ARCHITECTURE_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(
        pattern=re.compile(
            r"function\s+\w+\s*\([^)]{50,}\)|def\s+\w+\s*\([^)]{50,}\)"
        ),
        severity=Severity.MEDIUM,
        category=PatternCategory.ARCHITECTURE,
        name="Long Parameter Lists",
        description="Functions with excessive parameters detected",
        rationale="Long parameter lists indicate poor abstraction and tight coupling",
        recommendation="Refactor to use parameter objects or dependency injection",
        modernization_path="Introduce DTOs or configuration objects",
    ),
    DetectionRule(
        pattern=re.compile(r"class\s+\w+\s*\{[\s\S]{%d,}\}" % GOD_CLASS_THRESHOLD),
        severity=Severity.HIGH,
        category=PatternCategory.ARCHITECTURE,
        name="God Class",
        description=(
            f"Extremely large class detected (>{GOD_CLASS_THRESHOLD} characters)"
        ),
        rationale=(
            "God classes violate single responsibility principle and are hard "
            "to maintain"
        ),
        recommendation="Decompose into smaller, focused classes",
        modernization_path="Apply SOLID principles and extract responsibilities",
    ),
    DetectionRule(
        pattern=re.compile(
            r"function\s+\w+\s*\([^)]*\)\s*\{[\s\S]{%d,}\}" % GOD_FUNCTION_THRESHOLD
        ),
        severity=Severity.MEDIUM,
        category=PatternCategory.MAINTAINABILITY,
        name="God Function",
        description=(
            f"Extremely long function detected (>{GOD_FUNCTION_THRESHOLD} characters)"
        ),
        rationale="Long functions are hard to test, understand, and maintain",
        recommendation="Extract smaller, single-purpose functions",
        modernization_path="Refactor using Extract Method pattern",
    ),
)

# ---------------------------------------------------------------------------
# H. Performance patterns
# ---------------------------------------------------------------------------

PERFORMANCE_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(
        pattern=re.compile(r"SELECT\s+\*\s+FROM", re.IGNORECASE),
        severity=Severity.LOW,
        category=PatternCategory.PERFORMANCE,
        name="SELECT * Queries",
        description="SELECT * queries detected",
        rationale="Selecting all columns wastes bandwidth and memory",
        recommendation="Specify only needed columns explicitly",
        modernization_path="Use explicit column lists in queries",
    ),
    DetectionRule(
        pattern=re.compile(r"for\s*\([^)]*\)\s*\{[^}]*\bawait\b"),
        severity=Severity.MEDIUM,
        category=PatternCategory.PERFORMANCE,
        name="Await in Loop",
        description="await inside loop detected",
        rationale="Sequential awaits in loops cause poor performance",
        recommendation="Use Promise.all() for parallel execution",
        modernization_path="Refactor to Promise.all() or Promise.allSettled()",
    ),
)


# ---------------------------------------------------------------------------
# Aggregate catalog
# ---------------------------------------------------------------------------

DETECTION_RULES: tuple[DetectionRule, ...] = (
    SECURITY_RULES
    + API_RULES
    + UI_RULES
    + BACKEND_RULES
    + JAVASCRIPT_RULES
    + PYTHON_RULES
    + ARCHITECTURE_RULES
    + PERFORMANCE_RULES
)

_RULES_BY_ID: dict[str, DetectionRule] = {r.rule_id: r for r in DETECTION_RULES}


def get_rule_by_id(rule_id: str) -> DetectionRule | None:
    """Look up a rule by its pattern id (e.g. ``"hardcoded-secrets"``)."""
    return _RULES_BY_ID.get(rule_id)


def get_rules_by_category(category: PatternCategory) -> list[DetectionRule]:
    """Return all rules in the given category, in catalog order."""
    return [r for r in DETECTION_RULES if r.category == category]


def get_rules_by_severity(severity: Severity) -> list[DetectionRule]:
    """Return all rules with the given severity, in catalog order."""
    return [r for r in DETECTION_RULES if r.severity == severity]


def get_rules_by_target(target: SuggestedTarget) -> list[DetectionRule]:
    """Return all rules routed to the given conversion chamber."""
    return [r for r in DETECTION_RULES if r.suggested_target == target]

"""
pagecheck — HTML/SEO + responsive layout gate for a single page.

Runs a fixed set of markup rules and horizontal-overflow checks against
one HTML document, scores the outcome and fails CI on any failure.
"""

__version__ = "1.0.0"

from pagecheck.audit import AuditEngine, Report, RuleResult

__all__ = ["AuditEngine", "Report", "RuleResult", "__version__"]

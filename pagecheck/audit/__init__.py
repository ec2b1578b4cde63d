"""pagecheck audit package: rules, scoring and the engine that runs them."""

from .engine import AuditEngine
from .types import LayoutMetrics, LayoutRule, LoadedDocument, MarkupRule, Report, RuleResult

__all__ = [
    "AuditEngine",
    "LayoutMetrics",
    "LayoutRule",
    "LoadedDocument",
    "MarkupRule",
    "Report",
    "RuleResult",
]

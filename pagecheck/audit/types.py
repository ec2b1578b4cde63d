"""Data types for the audit engine."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional

from pagecheck.i18n import get_trans

if TYPE_CHECKING:
    from bs4 import BeautifulSoup


@dataclass(frozen=True)
class RuleResult:
    """Outcome of a single rule."""
    label: str
    passed: bool
    detail: str = ""    # diagnostics only; never scored


@dataclass(frozen=True)
class MarkupRule:
    """Synchronous predicate over the raw source and the parsed document."""
    key: str
    check: Callable[[str, "BeautifulSoup"], bool]

    def label(self, lang: str = "en") -> str:
        return get_trans(self.key, lang)


@dataclass(frozen=True)
class LayoutRule:
    """No horizontal overflow when rendered at ``width`` px."""
    width: int
    key: str = "rule_no_overflow"

    def label(self, lang: str = "en") -> str:
        return get_trans(self.key, lang).format(width=self.width)


@dataclass(frozen=True)
class LayoutMetrics:
    """Geometry read back from a rendered page."""
    scroll_width: int
    inner_width: int

    @property
    def overflow(self) -> int:
        return self.scroll_width - self.inner_width

    @property
    def fits(self) -> bool:
        return self.scroll_width <= self.inner_width


@dataclass(frozen=True)
class LoadedDocument:
    """The winning candidate file and its contents."""
    path: Path          # absolute
    relpath: str        # candidate as declared
    text: str

    @property
    def has_content(self) -> bool:
        return bool(self.text.strip())

    @property
    def url(self) -> str:
        return self.path.resolve().as_uri()


@dataclass(frozen=True)
class Report:
    """Ordered rule results plus the derived score."""
    results: tuple[RuleResult, ...]
    score: int          # 0-100
    note: Optional[str] = None

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def all_passed(self) -> bool:
        # An empty report only happens when the run short-circuited.
        return bool(self.results) and all(r.passed for r in self.results)

    @classmethod
    def empty(cls, note: str) -> Report:
        return cls(results=(), score=0, note=note)

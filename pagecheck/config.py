"""
pagecheck — Configuration.
Shared settings read from the environment, plus the explicit config values
handed to the engine and the report sinks.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

# ─── Document Discovery ──────────────────────────────────────────────
DEFAULT_CANDIDATES = ("index.html", "docs/index.html")

# ─── Layout Rendering ────────────────────────────────────────────────
DEFAULT_WIDTHS = (320, 768, 1440)
DEFAULT_HEIGHT = 800
# Playwright "waitUntil" values accepted by page.goto
SETTLE_CONDITIONS = ("load", "domcontentloaded", "networkidle", "commit")


def _parse_widths(raw: str) -> tuple[int, ...]:
    widths = [int(w) for w in raw.replace(" ", "").split(",") if w]
    return tuple(widths) if widths else DEFAULT_WIDTHS


def _load() -> None:
    global VIEWPORT_WIDTHS, VIEWPORT_HEIGHT, WAIT_UNTIL, NAV_TIMEOUT_MS
    global CONCURRENCY, LANGUAGE

    VIEWPORT_WIDTHS = _parse_widths(os.environ.get("PAGECHECK_WIDTHS", ""))
    VIEWPORT_HEIGHT = int(os.environ.get("PAGECHECK_HEIGHT", str(DEFAULT_HEIGHT)))
    WAIT_UNTIL = os.environ.get("PAGECHECK_WAIT_UNTIL", "networkidle")
    NAV_TIMEOUT_MS = float(os.environ.get("PAGECHECK_NAV_TIMEOUT_MS", "30000"))
    # 1 = sequential; >1 = that many browsers at once
    CONCURRENCY = int(os.environ.get("PAGECHECK_CONCURRENCY", "1"))
    LANGUAGE = os.environ.get("PAGECHECK_LANG", "en")


VIEWPORT_WIDTHS: tuple[int, ...] = DEFAULT_WIDTHS
VIEWPORT_HEIGHT: int = DEFAULT_HEIGHT
WAIT_UNTIL: str = "networkidle"
NAV_TIMEOUT_MS: float = 30000.0
CONCURRENCY: int = 1
LANGUAGE: str = "en"

_load()


def reload() -> None:
    """Re-read every setting from the current environment."""
    _load()


@dataclass(frozen=True)
class AuditSettings:
    """Runtime knobs for one audit run."""

    candidates: tuple[str, ...] = DEFAULT_CANDIDATES
    widths: tuple[int, ...] = DEFAULT_WIDTHS
    height: int = DEFAULT_HEIGHT
    wait_until: str = "networkidle"
    timeout_ms: float = 30000.0
    concurrency: int = 1
    lang: str = "en"

    def __post_init__(self):
        if self.wait_until not in SETTLE_CONDITIONS:
            raise ValueError(
                f"wait_until must be one of {', '.join(SETTLE_CONDITIONS)}, got {self.wait_until!r}"
            )
        if self.concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be > 0")
        if any(w <= 0 for w in self.widths):
            raise ValueError("viewport widths must be positive")

    @classmethod
    def from_env(cls, **overrides) -> AuditSettings:
        values = {
            "widths": VIEWPORT_WIDTHS,
            "height": VIEWPORT_HEIGHT,
            "wait_until": WAIT_UNTIL,
            "timeout_ms": NAV_TIMEOUT_MS,
            "concurrency": CONCURRENCY,
            "lang": LANGUAGE,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


# ─── Report Sinks (GitHub Actions) ───────────────────────────────────
PR_EVENTS = frozenset({"pull_request", "pull_request_target"})
PR_REF_PATTERN = re.compile(r"refs/pull/(\d+)/")


@dataclass(frozen=True)
class SinkConfig:
    """Where reports go. Captured once from the environment."""

    summary_path: str | None = None
    event_name: str = ""
    ref: str = ""
    comment_enabled: bool = True
    env: dict[str, str] = field(default_factory=dict, repr=False)

    @classmethod
    def from_env(cls, environ=None, comment_enabled: bool = True) -> SinkConfig:
        environ = dict(os.environ if environ is None else environ)
        return cls(
            summary_path=environ.get("GITHUB_STEP_SUMMARY") or None,
            event_name=environ.get("GITHUB_EVENT_NAME", ""),
            ref=environ.get("GITHUB_REF", ""),
            comment_enabled=comment_enabled,
            env=environ,
        )

    @property
    def is_pull_request(self) -> bool:
        return self.event_name in PR_EVENTS

    @property
    def pr_number(self) -> int | None:
        match = PR_REF_PATTERN.search(self.ref or "")
        return int(match.group(1)) if match else None

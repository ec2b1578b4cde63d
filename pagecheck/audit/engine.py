"""
pagecheck — Audit Engine.

Loads the document, runs the markup rules then the layout rules, and
scores the outcome.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

from pagecheck.audit.layout import Measurer, PlaywrightMeasurer, layout_rules_for, run_layout_rules
from pagecheck.audit.loader import load_document
from pagecheck.audit.markup import MARKUP_RULES, parse_document, run_markup_rules
from pagecheck.audit.scoring import build_report
from pagecheck.audit.types import LoadedDocument, Report
from pagecheck.config import AuditSettings
from pagecheck.exceptions import DocumentError
from pagecheck.i18n import get_trans

logger = logging.getLogger("pagecheck.audit")


class AuditEngine:
    """Runs the fixed rule set against one HTML page."""

    def __init__(
        self,
        settings: Optional[AuditSettings] = None,
        root: str | Path = ".",
        measure: Optional[Measurer] = None,
    ):
        self.settings = settings or AuditSettings()
        self.root = Path(root)
        self.measure = measure or PlaywrightMeasurer(
            height=self.settings.height,
            wait_until=self.settings.wait_until,
            timeout_ms=self.settings.timeout_ms,
        )

    @property
    def total_rules(self) -> int:
        return len(MARKUP_RULES) + len(layout_rules_for(self.settings.widths))

    def load(self) -> LoadedDocument:
        return load_document(self.settings.candidates, self.root)

    async def audit(self, doc: LoadedDocument) -> Report:
        """Evaluate every rule against an already loaded document."""
        lang = self.settings.lang
        soup = parse_document(doc.text)
        results = run_markup_rules(doc.text, soup, lang)
        results.extend(
            await run_layout_rules(
                doc.url,
                self.settings.widths,
                self.measure,
                lang=lang,
                concurrency=self.settings.concurrency,
                timeout_ms=self.settings.timeout_ms,
            )
        )
        report = build_report(results)
        logger.info("Audited %s: %d/%d rules passed, score %d", doc.relpath, report.passed, report.total, report.score)
        return report

    async def run(self) -> Report:
        """Full run. A missing or empty document yields an empty, zero-score report."""
        try:
            doc = self.load()
        except DocumentError as e:
            logger.error("%s", e)
            return Report.empty(note=get_trans(e.note_key, self.settings.lang))
        return await self.audit(doc)

    def run_sync(self) -> Report:
        return asyncio.run(self.run())

"""Report sinks: the CI step summary file and the pull request comment."""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile

from pagecheck.audit.types import Report
from pagecheck.config import SinkConfig
from pagecheck.exceptions import CommentDeliveryFailure
from pagecheck.report.formatter import render_comment_markdown

logger = logging.getLogger("pagecheck.report")

GH_TIMEOUT_S = 60
PERMISSION_HINT = "Check that GITHUB_TOKEN has the `pull-requests: write` permission"


def append_summary(markdown: str, config: SinkConfig) -> bool:
    """Append to the step summary file if one is configured. Returns True if written."""
    if not config.summary_path:
        return False
    try:
        with open(config.summary_path, "a", encoding="utf-8") as fh:
            fh.write(markdown)
    except OSError as e:
        logger.warning("Could not append step summary to %s: %s", config.summary_path, e)
        return False
    return True


def post_comment(pr_number: int, body: str, env: dict[str, str] | None = None, runner=subprocess.run) -> None:
    """
    Post ``body`` on pull request ``pr_number`` through the ``gh`` CLI.

    The body goes through a temp file so no shell quoting is involved.
    Raises CommentDeliveryFailure on any error.
    """
    fd, tmp_path = tempfile.mkstemp(prefix="pr-comment-", suffix=".md")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(body)
        proc = runner(
            ["gh", "pr", "comment", str(pr_number), "--body-file", tmp_path],
            capture_output=True,
            text=True,
            timeout=GH_TIMEOUT_S,
            env=env or None,
        )
        if proc.returncode != 0:
            stderr = (proc.stderr or "").strip()
            raise CommentDeliveryFailure(f"gh exited {proc.returncode}: {stderr[:200]}")
    except (subprocess.SubprocessError, OSError) as e:
        raise CommentDeliveryFailure(str(e)) from e
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


def publish_comment(report: Report, config: SinkConfig, lang: str = "en", runner=subprocess.run) -> bool:
    """Best-effort PR comment. Never raises; returns True if the comment was posted."""
    if not config.comment_enabled:
        logger.debug("PR comment disabled")
        return False
    if not config.is_pull_request:
        logger.info("ℹ️  Not a pull request event, skipping comment")
        return False
    pr_number = config.pr_number
    if pr_number is None:
        logger.warning("⚠️  Could not resolve PR number from %r, skipping comment", config.ref)
        return False

    body = render_comment_markdown(report, lang)
    try:
        post_comment(pr_number, body, env=config.env, runner=runner)
    except CommentDeliveryFailure as e:
        logger.error("❌ Comment failed: %s", e)
        logger.error("Hint: %s", PERMISSION_HINT)
        return False

    logger.info("✅ Commented on PR #%d", pr_number)
    return True

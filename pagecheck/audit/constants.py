"""Constants for the audit engine."""

import re

# Authored tags must be present in the raw source; parsers may synthesize them.
STRUCTURE_PATTERNS = (
    re.compile(r"<html\b[^>]*>", re.IGNORECASE),
    re.compile(r"<head\b[^>]*>", re.IGNORECASE),
    re.compile(r"<body\b[^>]*>", re.IGNORECASE),
)

REQUIRED_CHARSET = "UTF-8"

DESCRIPTION_MIN = 50
DESCRIPTION_MAX = 160

INVALID_HREFS = frozenset({"#"})

# bs4 tree builder; stdlib-backed, keeps authored structure as-is
HTML_PARSER = "html.parser"

# Browser launch + teardown allowance on top of the navigation timeout
LAUNCH_GRACE_S = 30.0

MEASURE_SCRIPT = """
() => ({
  scrollWidth: document.documentElement.scrollWidth,
  innerWidth: window.innerWidth
})
"""

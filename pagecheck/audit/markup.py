"""HTML/SEO rules evaluated against the raw source and the parsed tree."""

import logging

from bs4 import BeautifulSoup

from pagecheck.audit.constants import (
    DESCRIPTION_MAX,
    DESCRIPTION_MIN,
    HTML_PARSER,
    INVALID_HREFS,
    REQUIRED_CHARSET,
    STRUCTURE_PATTERNS,
)
from pagecheck.audit.types import MarkupRule, RuleResult
from pagecheck.exceptions import RuleEvaluationFailure

logger = logging.getLogger("pagecheck.audit")


def parse_document(raw: str) -> BeautifulSoup:
    return BeautifulSoup(raw, HTML_PARSER)


def _attr(tag, name: str) -> str:
    """Attribute value as a string; missing reads as empty."""
    if tag is None:
        return ""
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, list):  # multi-valued attributes
        return " ".join(value)
    return value


# ─── Predicates ──────────────────────────────────────────────────────


def has_root_structure(raw: str, soup: BeautifulSoup) -> bool:
    return all(p.search(raw) for p in STRUCTURE_PATTERNS)


def has_html_lang(raw: str, soup: BeautifulSoup) -> bool:
    return bool(_attr(soup.find("html"), "lang").strip())


def has_utf8_charset(raw: str, soup: BeautifulSoup) -> bool:
    meta = soup.select_one("meta[charset]")
    return meta is not None and _attr(meta, "charset").upper() == REQUIRED_CHARSET


def has_title(raw: str, soup: BeautifulSoup) -> bool:
    text = "".join(t.get_text() for t in soup.find_all("title"))
    return len(text.strip()) > 0


def has_bounded_description(raw: str, soup: BeautifulSoup) -> bool:
    meta = soup.select_one('meta[name="description"]')
    if meta is None or meta.get("content") is None:
        return False
    return DESCRIPTION_MIN <= len(_attr(meta, "content")) <= DESCRIPTION_MAX


def has_single_h1(raw: str, soup: BeautifulSoup) -> bool:
    return len(soup.find_all("h1")) == 1


def images_have_alt(raw: str, soup: BeautifulSoup) -> bool:
    return all(_attr(img, "alt").strip() for img in soup.find_all("img"))


def links_have_targets(raw: str, soup: BeautifulSoup) -> bool:
    for a in soup.find_all("a"):
        href = _attr(a, "href").strip()
        if not href or href in INVALID_HREFS:
            return False
    return True


MARKUP_RULES: tuple[MarkupRule, ...] = (
    MarkupRule("rule_structure", has_root_structure),
    MarkupRule("rule_html_lang", has_html_lang),
    MarkupRule("rule_charset", has_utf8_charset),
    MarkupRule("rule_title", has_title),
    MarkupRule("rule_description", has_bounded_description),
    MarkupRule("rule_single_h1", has_single_h1),
    MarkupRule("rule_img_alt", images_have_alt),
    MarkupRule("rule_link_href", links_have_targets),
)


# ─── Evaluation ──────────────────────────────────────────────────────


def evaluate_markup_rule(rule: MarkupRule, raw: str, soup: BeautifulSoup, lang: str = "en") -> RuleResult:
    """Run one rule. Any exception counts as a failure, never aborts the run."""
    label = rule.label(lang)
    try:
        passed = bool(rule.check(raw, soup))
    except Exception as e:
        failure = RuleEvaluationFailure(f"{rule.key}: {type(e).__name__}: {e}")
        logger.warning("Rule raised, marking failed: %s", failure)
        return RuleResult(label=label, passed=False, detail=str(failure))
    return RuleResult(label=label, passed=passed)


def run_markup_rules(raw: str, soup: BeautifulSoup | None = None, lang: str = "en") -> list[RuleResult]:
    if soup is None:
        soup = parse_document(raw)
    return [evaluate_markup_rule(rule, raw, soup, lang) for rule in MARKUP_RULES]

"""
pagecheck — Internationalization Module (i18n).

Rule labels and report text.
Default: English (en)
Supported: Traditional Chinese (zh)
"""

from functools import lru_cache

__all__ = [
    "get_trans",
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
]

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = frozenset({"en", "zh"})


TRANSLATIONS: dict[str, dict[str, str]] = {
    # Markup rules
    "rule_structure": {
        "en": "Basic structure `<html><head><body>`",
        "zh": "基本結構 `<html><head><body>`",
    },
    "rule_html_lang": {
        "en": "`<html lang>`",
        "zh": "`<html lang>`",
    },
    "rule_charset": {
        "en": '`<meta charset="UTF-8">`',
        "zh": '`<meta charset="UTF-8">`',
    },
    "rule_title": {
        "en": "`<title>` not empty",
        "zh": "`<title>` 非空",
    },
    "rule_description": {
        "en": "`<meta name=description>` 50~160",
        "zh": "`<meta name=description>` 50~160",
    },
    "rule_single_h1": {
        "en": "Exactly one `<h1>`",
        "zh": "`<h1>` 有且僅一個",
    },
    "rule_img_alt": {
        "en": "Every `<img>` has non-empty alt",
        "zh": "`<img>` 皆有非空 alt",
    },
    "rule_link_href": {
        "en": "`<a>` href valid (not empty / not #)",
        "zh": "`<a>` href 合法（非空/非 #）",
    },
    # Layout rules ({width} is substituted)
    "rule_no_overflow": {
        "en": "{width}px no horizontal scroll",
        "zh": "{width}px 無水平捲動",
    },

    # Report
    "report_title": {
        "en": "Site check results",
        "zh": "網站檢查結果",
    },
    "report_score_console": {
        "en": "🎯 Score: {score}/100",
        "zh": "🎯 本次檢查：{score}/100 分",
    },
    "report_total_score": {
        "en": "Total score",
        "zh": "總分",
    },
    "report_col_rule": {
        "en": "Rule",
        "zh": "規則",
    },
    "report_col_result": {
        "en": "Result",
        "zh": "結果",
    },
    "report_passed": {
        "en": "Passed",
        "zh": "通過",
    },
    "report_failed": {
        "en": "Failed",
        "zh": "失敗",
    },
    "report_attribution": {
        "en": "*Automated check by pagecheck*",
        "zh": "*自動檢查 by pagecheck*",
    },

    # Notes
    "note_missing_document": {
        "en": "index.html or docs/index.html not found",
        "zh": "找不到 index.html 或 docs/index.html",
    },
    "note_empty_document": {
        "en": "The HTML file is empty",
        "zh": "HTML 檔案為空",
    },
    "note_document_error": {
        "en": "The HTML file could not be read",
        "zh": "無法讀取 HTML 檔案",
    },

    # Gate
    "gate_failed": {
        "en": "❌ Some checks failed, failing CI",
        "zh": "❌ 有檢查項目未通過，CI 失敗",
    },
    "gate_passed": {
        "en": "✅ All checks passed!",
        "zh": "✅ 所有檢查項目通過！",
    },
}


@lru_cache(maxsize=256)
def get_trans(key: str, lang: str | None = DEFAULT_LANGUAGE) -> str:
    """Text for ``key`` in ``lang`` ('zh-TW' reads as 'zh'); English, then the key itself, as fallback."""
    entry = TRANSLATIONS.get(key, {})
    code = (lang or DEFAULT_LANGUAGE).split("-")[0].lower()
    return entry.get(code) or entry.get(DEFAULT_LANGUAGE, key)

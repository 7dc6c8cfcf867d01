# tests/cli/i18n/test_i18n.py
"""
Tests for cli/i18n - Internationalization module

Tests cover:
- Translation function (t)
- Language context management
- Message registry
- Format string interpolation
- Message completeness for every page, finder category and modal kind
"""

import pytest

from cli.i18n import DEFAULT_LANG, SUPPORTED_LANGS, enum_text, get_lang, set_lang, t
from cli.i18n.messages import MESSAGES, register_messages
from core.finder import FinderCategory
from tui.pages import Page
from tui.state.modal import MessageKind

# =============================================================================
# Language Context Tests
# =============================================================================


class TestLanguageContext:
    """Test language context management"""

    def test_default_language(self):
        """Default language is Korean"""
        assert DEFAULT_LANG == "ko"

    def test_supported_languages(self):
        """Supported languages are defined"""
        assert SUPPORTED_LANGS == ("ko", "en")

    def test_set_lang_english(self):
        """Set language to English"""
        set_lang("en")
        assert get_lang() == "en"

    def test_set_lang_invalid(self):
        """Invalid language defaults to Korean"""
        set_lang("fr")
        assert get_lang() == "ko"


# =============================================================================
# Translation Function Tests
# =============================================================================


class TestTranslationFunction:
    """Test translation function (t)"""

    def test_translate_korean(self):
        assert t("dash.loading") == "불러오는 중..."

    def test_translate_english(self):
        set_lang("en")
        assert t("dash.loading") == "Loading..."

    def test_translate_with_lang_override(self):
        """Override does not change the context language"""
        assert t("menu.instances", lang="en") == "EC2 Instances"
        assert get_lang() == "ko"

    def test_translate_nonexistent_key(self):
        """Nonexistent key returns key itself"""
        assert t("nonexistent.key") == "nonexistent.key"

    def test_translate_with_format(self):
        assert t("dash.finder_total", count=5) == "총 5개 리소스"
        assert t("dash.finder_total", lang="en", count=5) == "5 resources found"

    def test_translate_with_multiple_params(self):
        text = t("dash.search_info", lang="en", query="web", current=2, total=7)
        assert text == "Search: web (2/7)"

    def test_missing_format_param_returns_template(self):
        """Missing format parameters are handled gracefully"""
        assert t("dash.finder_total", wrong_param=5) == "총 {count}개 리소스"

    def test_enum_text_uses_member_value(self):
        assert enum_text("dash.page", Page.FINDER_RESULTS, lang="en") == t("dash.page_finder_results", lang="en")
        assert enum_text("dash.modal", MessageKind.ERROR) == t("dash.modal_error")
        assert enum_text("dash.finder", FinderCategory.INSTANCES) != "dash.finder_instances"

    def test_missing_translation_falls_back_to_korean(self):
        register_messages("test", {"only_ko": {"ko": "한국어만"}})  # type: ignore[typeddict-item]
        assert t("test.only_ko", lang="en") == "한국어만"


# =============================================================================
# Message Completeness Tests
# =============================================================================


class TestMessageCompleteness:
    """Test message completeness across languages"""

    def test_all_messages_have_both_languages(self):
        for key, value in MESSAGES.items():
            if key.startswith("test."):
                continue
            for lang in SUPPORTED_LANGS:
                assert isinstance(value.get(lang), str), f"{key} missing {lang}"
                assert value[lang], f"{key} has empty {lang}"

    @pytest.mark.parametrize("page", list(Page))
    def test_every_page_has_title(self, page):
        assert f"dash.page_{page.value}" in MESSAGES

    @pytest.mark.parametrize("category", list(FinderCategory))
    def test_every_finder_category_has_title(self, category):
        assert f"dash.finder_{category.value}" in MESSAGES

    @pytest.mark.parametrize("kind", list(MessageKind))
    def test_every_modal_kind_has_title(self, kind):
        assert f"dash.modal_{kind.value}" in MESSAGES

    def test_menu_entries_have_descriptions(self):
        menu_keys = [k for k in MESSAGES if k.startswith("menu.") and not k.endswith("_desc")]
        assert menu_keys
        for key in menu_keys:
            assert f"{key}_desc" in MESSAGES

"""
Tests for the section catalogue and defaults
"""
import pytest

from weave_content.domain.sections import (
    SECTION_IDS,
    SECTION_DEFAULTS,
    UnknownSection,
    blank_item,
    is_valid_section,
    list_fields,
    section_defaults,
    section_label,
    with_defaults,
)


@pytest.mark.unit
class TestCatalogue:

    def test_fixed_section_order(self):
        assert SECTION_IDS == (
            "hero", "about", "why-weave", "process",
            "portfolio", "team", "contact", "footer",
        )

    def test_every_section_has_defaults(self):
        assert set(SECTION_IDS) == set(SECTION_DEFAULTS)

    def test_labels(self):
        assert section_label("why-weave") == "Why Weave"

    def test_unknown_section(self):
        assert not is_valid_section("pricing")
        with pytest.raises(UnknownSection):
            section_defaults("pricing")


@pytest.mark.unit
class TestDefaults:

    def test_defaults_are_copies(self):
        first = section_defaults("team")
        first["management"].append({"name": "Someone"})
        assert len(section_defaults("team")["management"]) == 2

    def test_with_defaults_fills_absent_fields(self):
        merged = with_defaults("hero", {"subheadline": "New tagline"})
        assert merged["subheadline"] == "New tagline"
        assert merged["cta1Text"] == "View Our Work"

    def test_with_defaults_keeps_explicit_empty_values(self):
        merged = with_defaults("footer", {"quickLinks": []})
        assert merged["quickLinks"] == []

    def test_with_defaults_accepts_none(self):
        assert with_defaults("contact", None) == section_defaults("contact")


@pytest.mark.unit
class TestListFields:

    def test_blank_item_template(self):
        assert blank_item("footer", "quickLinks") == {"label": "", "href": ""}

    def test_blank_item_unknown_field(self):
        with pytest.raises(KeyError):
            blank_item("hero", "cards")

    def test_list_fields(self):
        assert list_fields("team") == ["management", "admin", "production"]
        assert list_fields("hero") == []

"""
Tests for the section editor controller, driven through the real API
"""
import pytest

from weave_content.domain.lifecycle.content import Status
from weave_content.domain.sections import SECTION_IDS, section_defaults
from weave_content.editor import (
    INVALID_FIELD,
    NOTHING_TO_REVERT,
    PUBLISH_FAILED,
    REVERT_FAILED,
    SAVE_FAILED,
    SectionEditor,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def editor(api_client):
    return SectionEditor(api_client)


class TestHeroScenario:

    def test_draft_publish_revert(self, editor, adapter):
        editor.load_section("hero")
        assert editor.draft == section_defaults("hero")
        assert editor.status is Status.UNPUBLISHED
        assert editor.content_id is None

        editor.edit_field("subheadline", "New tagline")

        assert editor.save_draft()
        assert editor.status is Status.DRAFT
        assert editor.content_id is not None
        assert adapter.calls[-1] == ("POST", "/api/content")
        content_id = editor.content_id

        assert editor.publish()
        assert editor.status is Status.PUBLISHED
        assert editor.published["subheadline"] == "New tagline"
        assert adapter.calls[-1] == ("PATCH", f"/api/content/{content_id}")

        assert editor.revert()
        assert editor.draft == {}
        assert editor.published["subheadline"] == "New tagline"
        assert editor.status is Status.PUBLISHED
        assert editor.content_id == content_id
        assert editor.success == "Reverted to published"


class TestProperties:

    @pytest.mark.parametrize("section", SECTION_IDS)
    def test_save_without_edits_keeps_published(self, api_client, section):
        created = api_client.create(section, {"marker": "live"})
        api_client.patch(created["_id"], {"action": "publish"})

        editor = SectionEditor(api_client, section)
        editor.load_section()
        assert editor.save_draft()

        assert api_client.fetch(created["_id"])["publishedData"] == {"marker": "live"}
        assert editor.published == {"marker": "live"}

    def test_publish_converges_draft_and_published(self, editor):
        editor.load_section("about")
        editor.edit_field("yearsExperience", 21)

        assert editor.publish()
        assert editor.draft == editor.published
        assert editor.published["yearsExperience"] == 21

    def test_revert_after_publish(self, editor, api_client):
        editor.load_section("contact")
        editor.publish()
        published = dict(editor.published)

        assert editor.revert()
        assert editor.draft == {}
        assert editor.published == published
        assert api_client.fetch(editor.content_id)["draftData"] == {}

    def test_publish_after_revert_then_revert_again(self, editor, api_client):
        editor.load_section("hero")
        editor.edit_field("subheadline", "New tagline")
        assert editor.save_draft()
        assert editor.publish()
        assert editor.revert()

        assert editor.publish()
        assert editor.published == {}

        assert editor.revert()
        assert editor.error is None
        assert editor.draft == {}
        assert editor.status is Status.UNPUBLISHED
        assert api_client.fetch(editor.content_id)["status"] == "unpublished"

    def test_saving_empty_draft_over_empty_publish(self, editor):
        editor.load_section("footer")
        editor.publish()
        editor.revert()
        editor.publish()

        assert editor.save_draft()
        assert editor.status is Status.DRAFT

    def test_created_id_is_reused(self, editor, adapter):
        editor.load_section("footer")
        editor.save_draft()
        content_id = editor.content_id

        editor.edit_field("companyInfo", "Weave CP")
        editor.save_draft()
        editor.publish()

        assert editor.content_id == content_id
        assert [c for c in adapter.calls if c[0] == "POST"] == [("POST", "/api/content")]

    def test_stale_id_recreates_and_keeps_edits(self, editor, client, admin_headers, api_client):
        editor.load_section("process")
        editor.save_draft()
        stale_id = editor.content_id
        client.delete(f"/api/content/{stale_id}", headers=admin_headers)

        editor.edit_field("heading", "How we work")
        assert editor.save_draft()

        assert editor.content_id != stale_id
        assert api_client.fetch(editor.content_id)["draftData"]["heading"] == "How we work"


class TestLoading:

    def test_load_adopts_server_state(self, api_client, editor):
        created = api_client.create("team", {"heading": "Our people"})

        editor.load_section("team")

        assert editor.content_id == created["_id"]
        assert editor.status is Status.DRAFT
        assert editor.draft["heading"] == "Our people"
        assert editor.draft["management"] == section_defaults("team")["management"]
        assert not editor.is_dirty

    def test_load_failure_falls_back_silently(self, offline_client):
        editor = SectionEditor(offline_client)
        editor.load_section("portfolio")

        assert editor.draft == section_defaults("portfolio")
        assert editor.status is Status.UNPUBLISHED
        assert editor.content_id is None
        assert editor.error is None
        assert not editor.loading

    def test_switching_section_resets_state(self, editor):
        editor.load_section("hero")
        editor.edit_field("subheadline", "Unsaved")
        editor.stage_image("afterImage", "/tmp/after.png")

        editor.load_section("about")

        assert editor.section == "about"
        assert editor.staged_images == {}
        assert "subheadline" not in editor.draft


class TestLocalEdits:

    def test_edit_does_not_change_status(self, editor):
        editor.load_section("hero")
        editor.publish()

        editor.edit_field("subheadline", "Pending")

        assert editor.status is Status.PUBLISHED
        assert editor.is_dirty

    def test_edit_list_item(self, editor):
        editor.load_section("why-weave")
        editor.edit_field("cards.0.title", "Speed")

        assert editor.draft["cards"][0]["title"] == "Speed"
        assert section_defaults("why-weave")["cards"][0]["title"] != "Speed"

    @pytest.mark.parametrize("path", ["cards.9.title", "cards.first.title", "cards.-1.title", "heading.0"])
    def test_edit_outside_list_sets_error(self, editor, path):
        editor.load_section("why-weave")

        assert editor.edit_field(path, "x") is False
        assert editor.error == INVALID_FIELD
        assert editor.draft == section_defaults("why-weave")
        assert not editor.is_dirty

    def test_add_and_remove_items(self, editor):
        editor.load_section("footer")
        count = len(editor.draft["quickLinks"])

        editor.add_item("quickLinks")
        assert editor.draft["quickLinks"][-1] == {"label": "", "href": ""}

        editor.remove_item("quickLinks", 0)
        assert len(editor.draft["quickLinks"]) == count

    def test_set_items(self, editor):
        editor.load_section("portfolio")
        editor.set_items("items", [{"title": "Anilao"}])
        assert editor.draft["items"] == [{"title": "Anilao"}]


class TestFailures:

    def test_save_failure_keeps_state(self, offline_client):
        editor = SectionEditor(offline_client)
        editor.load_section("hero")
        editor.edit_field("subheadline", "Offline edit")

        assert editor.save_draft() is False
        assert editor.error == SAVE_FAILED
        assert editor.draft["subheadline"] == "Offline edit"
        assert editor.status is Status.UNPUBLISHED
        assert editor.content_id is None
        assert not editor.saving

    def test_publish_failure(self, offline_client):
        editor = SectionEditor(offline_client)
        editor.load_section("hero")

        assert editor.publish() is False
        assert editor.error == PUBLISH_FAILED
        assert editor.published == {}

    def test_revert_without_record(self, editor, adapter):
        editor.load_section("hero")
        calls = len(adapter.calls)

        assert editor.revert() is False
        assert editor.error == NOTHING_TO_REVERT
        assert len(adapter.calls) == calls

    def test_revert_of_deleted_record(self, editor, client, admin_headers):
        editor.load_section("hero")
        editor.publish()
        client.delete(f"/api/content/{editor.content_id}", headers=admin_headers)

        assert editor.revert() is False
        assert editor.error == NOTHING_TO_REVERT

    def test_revert_rejected_by_server(self, editor, api_client, staff_headers):
        editor.load_section("hero")
        editor.publish()
        draft = dict(editor.draft)
        api_client.session.headers.update(staff_headers)

        assert editor.revert() is False
        assert editor.error == REVERT_FAILED
        assert editor.draft == draft

    def test_editor_recovers_after_failure(self, editor, api_client, offline_client):
        editor.load_section("hero")
        editor.client = offline_client
        assert not editor.save_draft()

        editor.client = api_client
        assert editor.save_draft()
        assert editor.error is None
        assert editor.success == "Draft saved"


class TestImages:

    def test_staged_image_is_uploaded_on_save(self, editor, png_file, client):
        editor.load_section("hero")
        editor.stage_image("afterImage", str(png_file))

        assert editor.save_draft()

        url = editor.draft["afterImage"]
        assert url.startswith("/uploads/")
        assert editor.staged_images == {}
        assert client.get(url).status_code == 200

    def test_failed_upload_aborts_save(self, editor, tmp_path):
        editor.load_section("hero")
        editor.stage_image("afterImage", str(tmp_path / "missing.png"))

        assert editor.save_draft() is False
        assert editor.error == SAVE_FAILED
        assert editor.content_id is None
        assert "afterImage" in editor.staged_images


def test_preview_renders_current_draft(editor):
    editor.load_section("hero")
    editor.edit_field("subheadline", "Preview me")
    assert "Preview me" in editor.preview()

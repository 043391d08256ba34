# weave_content/editor.py
"""
Section editor controller.

Holds the working state of the section currently open in the dashboard
content editor and turns editor actions into content API calls. Every failure
ends up as a message in `error`; the editor never raises to its caller and
stays usable after any failure.
"""
import logging
from copy import deepcopy
from typing import Any, Dict, Optional

from weave_content.client import ContentNotFoundError, ContentStoreClient, ContentStoreError
from weave_content.domain.lifecycle.content import Event, InvalidTransition, Status, next_status
from weave_content.domain.sections import assert_section_id, blank_item, section_defaults, with_defaults
from weave_content import preview

logger = logging.getLogger(__name__)

SAVE_FAILED = "Failed to save draft"
PUBLISH_FAILED = "Failed to publish"
REVERT_FAILED = "Failed to revert"
INVALID_FIELD = "Invalid field"
NOTHING_TO_REVERT = "Nothing to revert. No published content exists for this section."


class SectionEditor:
    def __init__(self, client: ContentStoreClient, section: str = "hero"):
        self.client = client
        self.section = assert_section_id(section)

        self.draft: Dict[str, Any] = {}
        self.published: Dict[str, Any] = {}
        self.status: Status = Status.UNPUBLISHED
        self.content_id: Optional[str] = None

        self.loading = False
        self.saving = False
        self.error: Optional[str] = None
        self.success: Optional[str] = None

        # field -> local file path, uploaded on the next save or publish
        self.staged_images: Dict[str, str] = {}
        self._persisted_draft: Dict[str, Any] = {}

    # ------------------------
    # Loading
    # ------------------------

    def load_section(self, section: Optional[str] = None) -> None:
        """
        Open a section, replacing all local state.

        A missing record or a failed fetch silently falls back to the section
        defaults with status unpublished.
        """
        if section is not None:
            self.section = assert_section_id(section)

        self.loading = True
        self.error = None
        self.success = None
        self.staged_images = {}

        try:
            content = self.client.fetch_by_section(self.section)
        except ContentStoreError as exc:
            logger.info("Loading %s failed, using defaults: %s", self.section, exc)
            content = None

        if content:
            self.draft = with_defaults(self.section, content.get("draftData"))
            self.published = dict(content.get("publishedData") or {})
            self.status = next_status(self.status, Event.LOAD, reported=content.get("status"))
            self.content_id = content.get("_id")
        else:
            self.draft = section_defaults(self.section)
            self.published = {}
            self.status = next_status(self.status, Event.LOAD)
            self.content_id = None

        self._persisted_draft = deepcopy(self.draft)
        self.loading = False

    # ------------------------
    # Local edits
    # ------------------------

    def edit_field(self, name: str, value: Any) -> bool:
        """
        Set a draft field. Dotted names address list items, e.g.
        ``cards.0.title``. Status is left alone until the next round trip.

        A path that does not address an existing list item leaves the draft
        untouched and sets `error`.
        """
        head, _, rest = name.partition(".")
        if not rest:
            self.draft[head] = value
        else:
            index, _, key = rest.partition(".")
            items = self._list(head)
            if not index.isdigit() or int(index) >= len(items):
                return self._reject_edit(name)

            position = int(index)
            if key:
                if not isinstance(items[position], dict):
                    return self._reject_edit(name)
                items[position] = {**items[position], key: value}
            else:
                items[position] = value
            self.draft[head] = items

        self.status = next_status(self.status, Event.EDIT)
        return True

    def _reject_edit(self, name: str) -> bool:
        logger.info("Ignoring edit of %s in section %s", name, self.section)
        self.error = INVALID_FIELD
        return False

    def add_item(self, field: str, item: Optional[Dict[str, Any]] = None) -> None:
        new_item = dict(item) if item is not None else blank_item(self.section, field)
        self.draft[field] = [*self._list(field), new_item]

    def remove_item(self, field: str, index: int) -> None:
        self.draft[field] = [item for i, item in enumerate(self._list(field)) if i != index]

    def set_items(self, field: str, items) -> None:
        self.draft[field] = [dict(item) for item in items]

    def stage_image(self, field: str, path: str) -> None:
        self.staged_images[field] = path

    def _list(self, field: str):
        value = self.draft.get(field)
        return list(value) if isinstance(value, list) else []

    @property
    def is_dirty(self) -> bool:
        return bool(self.staged_images) or self.draft != self._persisted_draft

    # ------------------------
    # Server round trips
    # ------------------------

    def save_draft(self) -> bool:
        self._begin()
        try:
            draft = self._draft_with_uploads()
            content = self.client.create_or_patch(
                self.section, draft, content_id=self.content_id
            )
        except ContentStoreError as exc:
            return self._fail(SAVE_FAILED, exc)

        self.draft = draft
        self.content_id = content.get("_id") or self.content_id
        self.status = next_status(self.status, Event.SAVE_DRAFT)
        self.staged_images = {}
        self._persisted_draft = deepcopy(draft)
        return self._succeed("Draft saved")

    def publish(self) -> bool:
        self._begin()
        try:
            draft = self._draft_with_uploads()
            content = self.client.create_or_patch(
                self.section, draft, content_id=self.content_id, action="publish"
            )
        except ContentStoreError as exc:
            return self._fail(PUBLISH_FAILED, exc)

        self.draft = dict(content.get("draftData") or {})
        self.published = dict(content.get("publishedData") or {})
        self.status = next_status(self.status, Event.PUBLISH, reported=content.get("status"))
        self.content_id = content.get("_id") or self.content_id
        self.staged_images = {}
        self._persisted_draft = deepcopy(self.draft)
        return self._succeed("Published")

    def revert(self) -> bool:
        self._begin()
        try:
            next_status(self.status, Event.REVERT, has_record=self.content_id is not None)
            content = self.client.create_or_patch(
                self.section, None, content_id=self.content_id, action="revert"
            )
        except (InvalidTransition, ContentNotFoundError) as exc:
            return self._fail(NOTHING_TO_REVERT, exc)
        except ContentStoreError as exc:
            return self._fail(REVERT_FAILED, exc)

        self.draft = {}
        self.published = dict(content.get("publishedData") or {})
        self.status = next_status(self.status, Event.REVERT, reported=content.get("status"))
        self.staged_images = {}
        self._persisted_draft = {}
        return self._succeed("Reverted to published")

    def _draft_with_uploads(self) -> Dict[str, Any]:
        """Current draft, read at call time, with staged images uploaded."""
        draft = deepcopy(self.draft)
        for field, path in self.staged_images.items():
            draft[field] = self.client.upload_image(path)
        return draft

    def _begin(self) -> None:
        self.saving = True
        self.error = None
        self.success = None

    def _fail(self, message: str, exc: Exception) -> bool:
        logger.warning("%s for section %s: %s", message, self.section, exc)
        self.error = message
        self.saving = False
        return False

    def _succeed(self, message: str) -> bool:
        logger.info("%s: section %s (%s)", message, self.section, self.status.value)
        self.success = message
        self.saving = False
        return True

    # ------------------------
    # Preview
    # ------------------------

    def preview(self) -> str:
        return preview.render_section(self.section, self.draft)

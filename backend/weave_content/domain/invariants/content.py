from weave_content.domain.sections import is_valid_section
from .exceptions import InvariantViolation


def assert_section_name(section):
    if not section or not isinstance(section, str):
        raise InvariantViolation("Section is required.")

    if not is_valid_section(section):
        raise InvariantViolation(f"Unknown section: {section}")


def assert_content_data(data, field="draftData"):
    if data is None:
        return

    if not isinstance(data, dict):
        raise InvariantViolation(f"{field} must be an object.")


def assert_content(content, publish=False):
    assert_section_name(content.section)
    assert_content_data(content.draft_data)
    assert_content_data(content.published_data, field="publishedData")

    if publish and content.published_data != content.draft_data:
        raise InvariantViolation(
            "Published data must match the draft it was published from."
        )

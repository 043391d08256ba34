# weave_content/preview.py
"""
Renders marketing-site sections from draft or published data.

The templates mirror the live components: every field that the data does
not provide falls back to the section default, so an empty draft renders the
same page visitors saw before any editing happened.
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Mapping, Optional

from jinja2 import Environment, PackageLoader, select_autoescape

from weave_content.client import ContentStoreError
from weave_content.domain.sections import SECTION_IDS, section_label, with_defaults

logger = logging.getLogger(__name__)

_env = Environment(
    loader=PackageLoader("weave_content", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def section_props(section: str, data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Props for a section component.

    Empty values ("" or []) count as unset, the same way the components use
    their built-in defaults for missing props.
    """
    provided = {
        key: value
        for key, value in (data or {}).items()
        if value not in ("", None, [])
    }
    return with_defaults(section, provided)


def render_section(section: str, data: Optional[Mapping[str, Any]] = None) -> str:
    template = _env.get_template(f"sections/{section}.html")
    return template.render(
        section=section,
        label=section_label(section),
        props=section_props(section, data),
    )


def render_page(
    data_by_section: Optional[Mapping[str, Mapping[str, Any]]] = None,
    *,
    title: str = "Weave Collaboration Partners",
    preview: bool = False,
) -> str:
    """Full marketing page, sections in site order."""
    data_by_section = data_by_section or {}
    sections = [
        render_section(section, data_by_section.get(section))
        for section in SECTION_IDS
    ]
    return _env.get_template("page.html").render(
        title=title,
        preview=preview,
        sections=sections,
    )


def fetch_all_drafts(client, *, max_workers: int = len(SECTION_IDS)) -> Dict[str, Dict[str, Any]]:
    """
    Draft data for every section, fetched in parallel.

    Each worker thread talks through its own fork of the client. A section
    whose fetch fails renders with no props at all.
    """
    local = threading.local()

    def fetch_one(section):
        if not hasattr(local, "client"):
            local.client = client.fork()
        try:
            content = local.client.fetch_by_section(section)
        except ContentStoreError:
            logger.warning("Preview fetch failed for section %s", section, exc_info=True)
            return section, {}
        return section, dict((content or {}).get("draftData") or {})

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return dict(pool.map(fetch_one, SECTION_IDS))


def render_full_preview(client) -> str:
    return render_page(fetch_all_drafts(client), preview=True)

# weave_content/domain/sections.py
"""
Catalogue of the editable marketing-site sections.

Every section has a fixed identifier, a label for the editor navigation and a
set of default field values. The defaults are what the marketing components
render when a field has never been edited, so load, save and preview all read
them from here.
"""
from copy import deepcopy
from typing import Any, Dict, List, Mapping, Tuple


class UnknownSection(ValueError):
    pass


SECTIONS: Tuple[Tuple[str, str], ...] = (
    ("hero", "Hero"),
    ("about", "About"),
    ("why-weave", "Why Weave"),
    ("process", "Process"),
    ("portfolio", "Portfolio"),
    ("team", "Team"),
    ("contact", "Contact"),
    ("footer", "Footer"),
)

SECTION_IDS: Tuple[str, ...] = tuple(section_id for section_id, _ in SECTIONS)


SECTION_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "hero": {
        "beforeImage": "/Before - Anilao Site Plan_page-0001.jpg",
        "afterImage": "/After - Anilao Render.jpg",
        "subheadline": "seamlessly translates design concepts into documentation.",
        "cta1Text": "View Our Work",
        "cta1Link": "/portfolio",
        "cta2Text": "Learn More",
        "cta2Link": "/about",
    },
    "about": {
        "paragraph1": (
            "Architecture is a challenging field and a complex business. Weave "
            "Collaboration Partners was established to make running your company "
            "easier, simpler, and more profitable. We handle the mechanical and "
            "routine tasks, allowing you to focus on the imaginative, the creative, "
            "the functional, and the beautiful."
        ),
        "paragraph2": (
            "Don't think of it as just outsourcing. Think of it as a seamless "
            "extension of your team, a remote resource that delivers high-quality "
            "work with the same efficiency and excellence you expect from your own staff."
        ),
        "ctaLink": "/about",
        "yearsExperience": 20,
        "projectsCompleted": 500,
    },
    "why-weave": {
        "heading": "Why Weave?",
        "cards": [
            {
                "title": "Architectural Proficiency",
                "description": (
                    "Our team of architects is proficient in architectural design, and "
                    "takes great care to understand our clients' design language. "
                    "Therefore we ensure that all output is consistent with the client's "
                    "design intent, is compliant with applicable regulations, and is "
                    "constructible."
                ),
                "image": "/viber_image_2024-08-20_10-24-20-974.jpg",
            },
            {
                "title": "The Right Tools",
                "description": (
                    "Our team is equipped with the powerful equipment and "
                    "industry-standard software necessary to deliver the output the "
                    "client needs, promptly and accurately."
                ),
                "image": "/viber_image_2024-08-20_10-27-11-706.jpg",
            },
            {
                "title": "A Culture of Joy",
                "description": (
                    "Our unique blend of joy and service, a hallmark of Filipino culture, "
                    "sets us apart. We believe in a collaborative process that ensures "
                    "client satisfaction."
                ),
                "image": "/DENS0741.jpg",
            },
        ],
    },
    "process": {
        "steps": [
            {
                "number": "01",
                "title": "Scope & Contract",
                "description": (
                    "We begin by understanding your needs, scoping out the project, "
                    "creating a drawing list, and formalizing our commitment in a "
                    "contract that outlines our deliverables, requirements, and timeline."
                ),
            },
            {
                "number": "02",
                "title": "Kickoff",
                "description": (
                    "We delve into the project details, discussing standards, reference "
                    "drawings, update preferences, and communication frequency."
                ),
            },
            {
                "number": "03",
                "title": "Drawing, Updates & Revisions",
                "description": (
                    "We produce the required drawings and deliver them on schedule. We "
                    "quickly incorporate updates and revisions."
                ),
            },
            {
                "number": "04",
                "title": "Final Revisions & Meeting",
                "description": (
                    "We make final edits to ensure the output meets your needs and "
                    "satisfies your clients."
                ),
            },
            {
                "number": "05",
                "title": "Job Review & Feedback",
                "description": (
                    "We seek your feedback to improve our processes, so we continuously "
                    "improve for you and all our clients."
                ),
            },
        ],
    },
    "portfolio": {
        "items": [
            {"title": "Modern Office Complex", "category": "Commercial", "image": "/api/placeholder/400/300"},
            {"title": "Luxury Residential Villa", "category": "Residential", "image": "/api/placeholder/400/300"},
            {"title": "Sustainable Community Center", "category": "Public", "image": "/api/placeholder/400/300"},
        ],
    },
    "team": {
        "management": [
            {"name": "Nicky Santiago", "role": "Partner", "image": "/DENS0602.jpg"},
            {"name": "Jon Lanuza", "role": "Partner", "image": "/DENS0133.jpg"},
        ],
        "admin": [
            {"name": "Yza Buenaventura", "role": "HR Manager", "image": "/DENS0315.jpg"},
            {"name": "Jonathan Fernandez", "role": "IT Administrator", "image": "/IMG_1985.JPG"},
            {"name": "Wence Medina", "role": "General & Administrative Associate", "image": "/DENS0273.jpg"},
            {"name": "Hannah Urrera", "role": "Finance & Accounting Associate", "image": "/IMG_1983.JPG"},
        ],
        "production": [
            {"name": "Van Climaco", "role": "Associate Architect", "image": "/image0.jpg"},
            {"name": "Ar. John Lu", "role": "BIM Manager/Consultant", "image": "/DENS0227.jpg"},
            {"name": "Joanne Martinez", "role": "BIM Coordinator", "image": "/DENS0146.jpg"},
            {"name": "Ar. Rachel Rivera", "role": "Senior 3D Architect", "image": "/DENS0008.jpg"},
            {"name": "Trisha Chua", "role": "Junior Architect", "image": "/DENS0089.jpg"},
        ],
    },
    "contact": {
        "heading": "Ready to Start Your Project?",
        "description": (
            "Let's discuss your vision and create something extraordinary together. "
            "Our team is ready to bring your architectural dreams to life."
        ),
        "cta1Text": "Contact Us",
        "cta1Link": "/contact",
        "cta2Text": "Join Our Team",
        "cta2Link": "/careers",
        "stats": [
            {"label": "Projects Completed", "value": "50+"},
            {"label": "Years Experience", "value": "4+"},
            {"label": "Client Satisfaction", "value": "98%"},
        ],
    },
    "footer": {
        "companyInfo": (
            "Creating innovative design solutions that inspire and transform spaces. "
            "We specialize in sustainable architecture and exceptional client experiences."
        ),
        "quickLinks": [
            {"label": "Home", "href": "/"},
            {"label": "About Us", "href": "/about"},
            {"label": "Portfolio", "href": "/portfolio"},
            {"label": "Contact", "href": "/#contact"},
        ],
        "contactInfo": [
            {"label": "Email", "value": "info@weavecp.com"},
            {"label": "Phone", "value": "+63 912 345 6789"},
        ],
    },
}

# Blank item added by the editor's "Add ..." buttons
SECTION_LIST_FIELDS: Dict[str, Dict[str, Dict[str, str]]] = {
    "why-weave": {"cards": {"title": "", "description": "", "image": ""}},
    "process": {"steps": {"number": "", "title": "", "description": ""}},
    "portfolio": {"items": {"title": "", "category": "", "image": ""}},
    "team": {
        "management": {"name": "", "role": "", "image": ""},
        "admin": {"name": "", "role": "", "image": ""},
        "production": {"name": "", "role": "", "image": ""},
    },
    "contact": {"stats": {"label": "", "value": ""}},
    "footer": {
        "quickLinks": {"label": "", "href": ""},
        "contactInfo": {"label": "", "value": ""},
    },
}

SECTION_IMAGE_FIELDS: Dict[str, Tuple[str, ...]] = {
    "hero": ("beforeImage", "afterImage"),
}


def is_valid_section(section: str) -> bool:
    return section in SECTION_DEFAULTS


def assert_section_id(section: str) -> str:
    if not is_valid_section(section):
        raise UnknownSection(f"Unknown section: {section!r}")
    return section


def section_label(section: str) -> str:
    return dict(SECTIONS)[assert_section_id(section)]


def section_defaults(section: str) -> Dict[str, Any]:
    """Fresh copy of the section defaults; callers may mutate it."""
    return deepcopy(SECTION_DEFAULTS[assert_section_id(section)])


def with_defaults(section: str, data: Mapping[str, Any] | None) -> Dict[str, Any]:
    """
    Overlay stored data on the section defaults.

    Fields absent from `data` fall back to the default value; fields present
    in `data` win, even when empty.
    """
    merged = section_defaults(section)
    merged.update(deepcopy(dict(data or {})))
    return merged


def list_fields(section: str) -> List[str]:
    return list(SECTION_LIST_FIELDS.get(assert_section_id(section), {}))


def blank_item(section: str, field: str) -> Dict[str, str]:
    templates = SECTION_LIST_FIELDS.get(assert_section_id(section), {})
    if field not in templates:
        raise KeyError(f"{section} has no list field {field!r}")
    return dict(templates[field])

"""Resume section presence checks and ATS formatting scan."""

import logging
import re

from models.schemas.structure_report import SectionCheck, StructureReport
from services.lexicons import ACTION_VERBS

logger = logging.getLogger(__name__)

# Canonical sections in report order: (name, keyword patterns, required).
# Contact Information has no keywords; it uses has_contact_info instead.
SECTION_RULES: tuple[tuple[str, tuple[str, ...], bool], ...] = (
    ("Contact Information", (), True),
    ("Professional Summary", (r"summary", r"profile", r"objective", r"about\s+me"), False),
    ("Experience", (r"experience", r"work\s+history", r"employment"), True),
    ("Education", (r"education", r"university", r"college", r"degree",
                   r"bachelor(?:'?s)?", r"master(?:'?s)?"), True),
    ("Skills", (r"skills", r"technologies", r"technical", r"competencies"), True),
    ("Projects", (r"projects?", r"portfolio"), False),
    ("Certifications", (r"certifications?", r"certified", r"certificates?"), False),
)

# Compile all patterns into a single regex per section
_COMPILED: dict[str, re.Pattern] = {}
for _name, _patterns, _required in SECTION_RULES:
    if _patterns:
        _COMPILED[_name] = re.compile(
            rf"\b(?:{'|'.join(_patterns)})\b", re.IGNORECASE
        )

CONTACT_LABELS = ("email", "phone", "address", "linkedin", "github")
_CONTACT_LABEL_RE = re.compile(
    rf"\b(?:{'|'.join(CONTACT_LABELS)})\b", re.IGNORECASE
)
_PHONE_RUN_RE = re.compile(r"\+?[\d(][\d\s\-().]{5,}\d")

# Contact info patterns
EMAIL_RE = re.compile(r"[\w.%+-]+@[\w.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"(?:\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")

# ATS-hostile artifacts
_IMAGE_RE = re.compile(r"\.(?:jpe?g|png|gif|bmp)\b", re.IGNORECASE)
_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
_TABLE_RE = re.compile(r"\t{2,}| {4,}")
_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

# Content quality
_DATE_TOKEN_RE = re.compile(r"\b(?:19\d{2}|20\d{2}|present|current)\b", re.IGNORECASE)
_METRIC_RE = re.compile(r"\d+%|\$\d+|\d+\s*\+")
_BULLET_RE = re.compile(r"(?:^|\s)[•\-*]\s")

MAX_PIPES = 10
MAX_NON_ASCII = 5
MIN_WORDS = 200
MAX_WORDS = 1000

MISSING_SECTIONS_SUGGESTION = (
    "Add the missing sections so ATS parsers can map your resume correctly"
)


def has_contact_info(text: str) -> bool:
    """Label word, an ``@``, or a phone-like run of at least 7 digits."""
    if _CONTACT_LABEL_RE.search(text) or "@" in text:
        return True
    for match in _PHONE_RUN_RE.finditer(text):
        if sum(ch.isdigit() for ch in match.group()) >= 7:
            return True
    return False


def _section_present(name: str, text: str) -> bool:
    if name == "Contact Information":
        return has_contact_info(text)
    return _COMPILED[name].search(text) is not None


def scan_ats_artifacts(text: str) -> tuple[list[str], list[str]]:
    """Formatting problems that commonly break ATS parsing.

    Returns ``(warnings, suggestions)``. Each check is independent.
    """
    warnings: list[str] = []
    suggestions: list[str] = []

    if _IMAGE_RE.search(text):
        warnings.append("Images detected - ATS cannot read embedded images")
    if text.count("|") > MAX_PIPES:
        warnings.append("Heavy use of pipe characters - may cause ATS parsing issues")
    if len(_NON_ASCII_RE.findall(text)) > MAX_NON_ASCII:
        warnings.append("Special characters detected - some ATS may not parse correctly")
    if _TABLE_RE.search(text):
        suggestions.append(
            "Complex formatting detected - consider using simple single-column layout"
        )

    word_count = len(text.split())
    if word_count < MIN_WORDS:
        suggestions.append("Resume appears short - consider adding more detail")
    elif word_count > MAX_WORDS:
        suggestions.append("Resume appears long - consider condensing to 1-2 pages")

    if not _YEAR_RE.search(text):
        warnings.append("No dates found - include dates for experience and education")

    return warnings, suggestions


def content_quality_suggestions(text: str) -> list[str]:
    """Suggestions for contact details, dates, verbs, metrics, and bullets."""
    lower = text.lower()
    suggestions = []

    if not EMAIL_RE.search(text):
        suggestions.append("Resume likely missing a valid email address.")
    if not PHONE_RE.search(text):
        suggestions.append("Resume likely missing a phone number.")

    if len(_DATE_TOKEN_RE.findall(text)) < 2:
        suggestions.append(
            "Could not detect clear dates in Experience section. "
            'Use standard formats (e.g., "Jan 2023 - Present").'
        )

    verb_count = sum(1 for verb in ACTION_VERBS if verb in lower)
    if verb_count < 2:
        suggestions.append(
            f"Found only {verb_count} strong action verbs. "
            'Use words like "Developed", "Optimized", "Led".'
        )

    if not _METRIC_RE.search(text):
        suggestions.append(
            'Add quantifiable metrics (e.g., "Increased sales by 20%", '
            '"Reduced load time by 2s").'
        )

    if len(_BULLET_RE.findall(text)) < 5:
        suggestions.append(
            "Use bullet points to display experience and skills for better readability."
        )

    return suggestions


def check_structure(text: str) -> StructureReport:
    """Check which canonical sections a resume contains.

    Score is the share of sections present, 0-100. Blank text reports
    every section absent and skips the formatting scan.
    """
    blank = not text.strip()
    sections: list[SectionCheck] = []
    warnings: list[str] = []
    suggestions: list[str] = []

    for name, _, required in SECTION_RULES:
        present = False if blank else _section_present(name, text)
        warning = None
        if not present and required:
            warning = f"Missing {name} section - most ATS systems expect this"
            warnings.append(warning)
        sections.append(SectionCheck(
            section_name=name, present=present, required=required, warning=warning,
        ))

    present_count = sum(1 for s in sections if s.present)
    score = round(100 * present_count / len(sections))
    if score < 100:
        suggestions.append(MISSING_SECTIONS_SUGGESTION)

    if not blank:
        artifact_warnings, artifact_suggestions = scan_ats_artifacts(text)
        warnings.extend(artifact_warnings)
        suggestions.extend(artifact_suggestions)
        suggestions.extend(content_quality_suggestions(text))

    logger.debug("Structure check: %d/%d sections present", present_count, len(sections))
    return StructureReport(
        sections=sections, score=score, warnings=warnings, suggestions=suggestions,
    )

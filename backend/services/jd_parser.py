"""Rule-based job description parsing.

Every "first rule that matches wins" decision is driven by an ordered
table of ``(pattern, outcome)`` pairs defined at module level, so the
precedence can be read and tested on its own.
"""

import logging
import re
from functools import lru_cache

from models.schemas.jd_analysis import JDAnalysis, SeniorityLevel, Urgency
from models.schemas.keywords import CategoryDictionary, ExtractedKeyword, Importance
from services.keyword_extractor import extract, extract_keywords, find_phrase
from services.lexicons import TECHNICAL_SKILLS
from services.role_classifier import detect_industry
from services.role_database import INDUSTRY_KEYWORDS

logger = logging.getLogger(__name__)

UNIVERSAL_SOFT_SKILLS: tuple[str, ...] = (
    "communication", "teamwork", "leadership", "problem solving",
    "time management", "attention to detail", "organization", "adaptability",
    "flexibility", "initiative", "interpersonal", "collaboration",
    "critical thinking", "decision making", "multitasking", "customer service",
    "presentation", "analytical", "creative", "self-motivated",
    "deadline-driven", "results-oriented", "proactive", "reliable", "punctual",
)

_TITLE_SUFFIXES = (
    "Engineer|Developer|Manager|Analyst|Designer|Specialist|Coordinator|"
    "Director|Lead|Executive|Administrator|Officer|Consultant|Technician|"
    "Nurse|Teacher|Accountant|Lawyer|Chef"
)

# Ordered title rules; group 1 holds the candidate title.
TITLE_RULES: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(rf"^([A-Z][a-zA-Z ]+(?:{_TITLE_SUFFIXES}))", re.MULTILINE), "heading"),
    (re.compile(r"\bjob\s*title\s*:\s*([A-Za-z /&-]+)", re.IGNORECASE), "job title label"),
    (re.compile(r"\bposition\s*:\s*([A-Za-z /&-]+)", re.IGNORECASE), "position label"),
    (re.compile(r"\brole\s*:\s*([A-Za-z /&-]+)", re.IGNORECASE), "role label"),
    (re.compile(r"\bhiring\s*:\s*([A-Za-z /&-]+)", re.IGNORECASE), "hiring label"),
)
MIN_TITLE_LENGTH = 3
MAX_TITLE_LENGTH = 60

# Ordered seniority rules: (pattern, level, signal). First match wins.
SENIORITY_RULES: tuple[tuple[re.Pattern, SeniorityLevel, str], ...] = (
    (re.compile(r"\bsenior\b|\bsr\b\.?|\bstaff\b|\bprincipal\b", re.IGNORECASE),
     SeniorityLevel.SENIOR, "Title contains senior/staff/principal"),
    (re.compile(r"\blead\b|\bmanager\b|\bdirector\b|\bhead\s+of\b", re.IGNORECASE),
     SeniorityLevel.LEAD, "Leadership role indicated"),
    (re.compile(r"\bjunior\b|\bentry\b|\bgraduate\b|\bintern\b|\b0-2\s*years?\b", re.IGNORECASE),
     SeniorityLevel.ENTRY, "Entry-level indicators"),
    (re.compile(r"\b[3-5]\+?\s*years?\b", re.IGNORECASE),
     SeniorityLevel.MID, "3-5 years experience required"),
    (re.compile(r"\b[6-9]\+?\s*years?\b|\b10\+?\s*years?\b", re.IGNORECASE),
     SeniorityLevel.SENIOR, "6+ years experience required"),
)

# Independent signals, reported alongside the primary level.
SENIORITY_SIGNAL_RULES: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"mentor|coach|guide\s+team", re.IGNORECASE), "Mentorship responsibilities"),
    (re.compile(r"architect|design\s+system|technical\s+direction", re.IGNORECASE),
     "Architecture responsibilities"),
    (re.compile(r"cross-functional|stakeholder", re.IGNORECASE), "Cross-functional collaboration"),
)

# Role family used when no explicit title is found.
ROLE_TYPE_RULES: tuple[tuple[re.Pattern, str], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), role_type)
    for pattern, role_type in (
        (r"\b(?:frontend|front-end|react|angular|vue|ui)\b", "Frontend Developer"),
        (r"\b(?:backend|back-end|api|server|microservices?)\b", "Backend Developer"),
        (r"\bfull.?stack\b|\bfullstack\b", "Full Stack Developer"),
        (r"\bdata\s*scientist\b|\bmachine\s*learning\b|\bml\s*engineer\b|\bai\s*engineer\b",
         "ML/AI Engineer"),
        (r"\bdata\s*analyst\b|\banalytics\b|\bbi\s*analyst\b", "Data Analyst"),
        (r"\bdata\s*engineer\b|\betl\b|\bpipelines?\b", "Data Engineer"),
        (r"\bdevops\b|\bsre\b|\binfrastructure\b|\bplatform\b", "DevOps/Platform Engineer"),
        (r"\bproduct\s*manager\b|\bpm\b", "Product Manager"),
        (r"\bqa\b|\bquality\b|\btest\s*engineer\b|\bautomation\b", "QA Engineer"),
        (r"\bsecurity\b|\bcybersecurity\b|\binfosec\b", "Security Engineer"),
    )
)
DEFAULT_ROLE_TYPE = "General"

_SENTENCE_SPLIT_RE = re.compile(r"[.!?\n]+")
MIN_SENTENCE_LENGTH = 10

_REQUIRED_CONTEXT_RE = re.compile(r"required|must|essential|mandatory|necessary", re.IGNORECASE)
_NICE_CONTEXT_RE = re.compile(r"preferred|nice|bonus|plus|ideal", re.IGNORECASE)
_CERT_REQUIRED_RE = re.compile(r"required|must|essential", re.IGNORECASE)
NICE_TO_HAVE_MARKER_RE = re.compile(r"nice\s+to\s+have|preferred|bonus", re.IGNORECASE)

TOOL_PATTERNS: tuple[re.Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    # Office and collaboration platforms
    r"\b(?:excel|word|powerpoint|outlook|google\s*suite|slack|zoom|teams|asana|trello|"
    r"jira|notion|monday|salesforce|hubspot|sap|oracle|workday)\b",
    # Design
    r"\b(?:figma|sketch|photoshop|illustrator|indesign|canva|adobe\s*\w+)\b",
    # Data
    r"\b(?:tableau|power\s*bi|looker|google\s*analytics|mixpanel|amplitude)\b",
    # Industry-specific
    r"\b(?:autocad|revit|solidworks|matlab|spss|stata|quickbooks|xero)\b",
))

CERTIFICATION_PATTERNS: tuple[re.Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\b(?:certified|certification|certificate|licensed|license)\s+\w+",
    r"\b(?:cpa|cfa|pmp|scrum\s*master|aws\s*certified|google\s*certified|six\s*sigma|"
    r"ccna|cissp|ceh|comptia|prince2|itil)\b",
    # Healthcare
    r"\b(?:rn|lpn|bls|acls|cpr|registered\s*nurse|licensed\s*practical\s*nurse)\b",
    # Trade licenses
    r"\b(?:journeyman|master\s*electrician|licensed\s*contractor|osha\s*\d+)\b",
))

EDUCATION_PATTERNS: tuple[re.Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\b(?:bachelor'?s?|master'?s?|phd|doctorate|associate'?s?|diploma)\s*(?:degree|of)?\s*(?:in)?\s*\w+",
    r"\b(?:bs|ba|ms|ma|mba|bsc|msc|btech|mtech|bcom|mcom|llb|llm|md|rn)\b",
    r"\b(?:degree|graduate|post.?graduate|undergraduate)\s*(?:in|from)?\s*\w+",
    r"\b(?:high\s*school|ged|equivalent)\b",
))

EXPERIENCE_PATTERNS: tuple[re.Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\d+\+?\s*(?:years?|yrs?)\s*(?:of)?\s*(?:experience|exp)?",
    r"experience\s*(?:of|with)?\s*\d+\+?\s*(?:years?|yrs?)",
    r"\d+\s*(?:-|to)\s*\d+\s*(?:years?|yrs?)",
))

RESPONSIBILITY_INDICATORS: tuple[re.Pattern, ...] = (
    re.compile(r"^(?:you\s*will|responsibilities|duties|tasks|requirements|what\s*you|role\s*includes)",
               re.IGNORECASE),
    re.compile(r"\b(?:responsible\s*for|manage|develop|create|lead|coordinate|ensure|maintain|"
               r"analyze|design|implement|support|collaborate|communicate)\b", re.IGNORECASE),
)
_BULLET_PREFIX_RE = re.compile(r"^[\s\-•*\d.]+")
MIN_RESPONSIBILITY_LENGTH = 15
MAX_RESPONSIBILITY_LENGTH = 300
MAX_RESPONSIBILITIES = 15
MAX_CORE_SKILLS = 15
MAX_NICE_TO_HAVE = 10

_REMOTE_RE = re.compile(r"\b(?:remote|work.?from.?home|wfh|hybrid|virtual)\b", re.IGNORECASE)
_SALARY_RE = re.compile(r"\$[\d,]+|\b(?:salary|compensation|pay|ctc|lpa)\b", re.IGNORECASE)

# Ordered location rules; group 1 holds the location.
LOCATION_RULES: tuple[re.Pattern, ...] = (
    re.compile(r"\blocation\s*:\s*([A-Za-z ,]+)", re.IGNORECASE),
    re.compile(r"\bbased\s*in[: ]+([A-Za-z ,]+)", re.IGNORECASE),
    re.compile(r"\b([A-Z][a-z]+,? *[A-Z]{2})\b"),
    re.compile(r"\b(new\s*york|san\s*francisco|los\s*angeles|chicago|boston|seattle|austin|"
               r"denver|atlanta|dallas|houston|miami|bangalore|mumbai|delhi|hyderabad|"
               r"london|berlin|singapore|dubai)\b", re.IGNORECASE),
)

# Ordered urgency tiers; the immediate tier wins when both appear.
URGENCY_RULES: tuple[tuple[re.Pattern, Urgency], ...] = (
    (re.compile(r"\b(?:immediate|urgent|asap|right\s*away|start\s*immediately)\b", re.IGNORECASE),
     Urgency.HIGH),
    (re.compile(r"\b(?:soon|quickly|fast.?track)\b", re.IGNORECASE), Urgency.MEDIUM),
)

FEW_SKILLS_WARNING = (
    "Few specific skills detected. Consider adding more detail to the job description."
)
FEW_RESPONSIBILITIES_WARNING = "Limited responsibilities found. JD may be incomplete."
NO_TITLE_WARNING = "Could not detect specific job title."


def split_sentences(text: str) -> list[str]:
    return [
        s.strip() for s in _SENTENCE_SPLIT_RE.split(text)
        if len(s.strip()) >= MIN_SENTENCE_LENGTH
    ]


def extract_title(text: str) -> str | None:
    for pattern, _ in TITLE_RULES:
        match = pattern.search(text)
        if not match:
            continue
        title = match.group(1).strip()
        if MIN_TITLE_LENGTH <= len(title) <= MAX_TITLE_LENGTH:
            return title
    return None


def detect_seniority(text: str) -> tuple[SeniorityLevel, list[str]]:
    """Primary level from ``SENIORITY_RULES`` plus every independent signal."""
    level = SeniorityLevel.UNKNOWN
    signals: list[str] = []
    for pattern, rule_level, signal in SENIORITY_RULES:
        if pattern.search(text):
            level = rule_level
            signals.append(signal)
            break

    for pattern, signal in SENIORITY_SIGNAL_RULES:
        if pattern.search(text):
            signals.append(signal)
    return level, signals


def detect_role_type(text: str) -> str | None:
    for pattern, role_type in ROLE_TYPE_RULES:
        if pattern.search(text):
            return role_type
    return None


def detect_urgency(text: str) -> Urgency:
    for pattern, urgency in URGENCY_RULES:
        if pattern.search(text):
            return urgency
    return Urgency.LOW


def extract_location(text: str) -> str | None:
    for pattern in LOCATION_RULES:
        match = pattern.search(text)
        if match:
            location = match.group(1).strip(" ,")
            if location:
                return location
    return None


def _context_sentence(sentences: list[str], phrase: str) -> str:
    for sentence in sentences:
        if find_phrase(sentence, phrase) >= 0:
            return sentence
    return ""


def _importance(context: str) -> Importance:
    if _REQUIRED_CONTEXT_RE.search(context):
        return Importance.REQUIRED
    if _NICE_CONTEXT_RE.search(context):
        return Importance.NICE_TO_HAVE
    return Importance.PREFERRED


@lru_cache(maxsize=None)
def _industry_dictionary(industry: str) -> CategoryDictionary:
    hard_skills = tuple(INDUSTRY_KEYWORDS.get(industry, ()))
    if industry == "technology":
        hard_skills = tuple(dict.fromkeys(hard_skills + TECHNICAL_SKILLS))
    return CategoryDictionary(categories={
        "hard_skills": hard_skills,
        "soft_skills": UNIVERSAL_SOFT_SKILLS,
    })


def _by_position(lower: str, phrases) -> list[str]:
    return sorted(phrases, key=lambda p: (find_phrase(lower, p), p))


def _keywords_with_importance(
    lower: str, sentences: list[str], phrases, category: str
) -> list[ExtractedKeyword]:
    found = []
    for phrase in _by_position(lower, phrases):
        context = _context_sentence(sentences, phrase)
        found.append(ExtractedKeyword(
            phrase=phrase, category=category,
            importance=_importance(context), source_context=context[:150],
        ))
    return found


def _pattern_matches(
    lower: str, sentences: list[str], patterns, category: str, required_re=None
) -> list[ExtractedKeyword]:
    found: list[ExtractedKeyword] = []
    seen: set[str] = set()
    for pattern in patterns:
        for match in pattern.finditer(lower):
            phrase = match.group(0).strip()
            if phrase in seen:
                continue
            seen.add(phrase)
            context = next((s for s in sentences if phrase in s.lower()), "")
            importance = Importance.PREFERRED
            if required_re is not None and required_re.search(context):
                importance = Importance.REQUIRED
            found.append(ExtractedKeyword(
                phrase=phrase, category=category,
                importance=importance, source_context=context[:150],
            ))
    return found


def _all_matches(lower: str, patterns) -> list[str]:
    found = []
    for pattern in patterns:
        found.extend(m.group(0).strip() for m in pattern.finditer(lower))
    return list(dict.fromkeys(found))


def extract_responsibilities(sentences: list[str]) -> list[str]:
    responsibilities = []
    for sentence in sentences:
        if not MIN_RESPONSIBILITY_LENGTH <= len(sentence) <= MAX_RESPONSIBILITY_LENGTH:
            continue
        if not any(p.search(sentence) for p in RESPONSIBILITY_INDICATORS):
            continue
        cleaned = _BULLET_PREFIX_RE.sub("", sentence).strip()
        if len(cleaned) > MIN_RESPONSIBILITY_LENGTH:
            responsibilities.append(cleaned)
        if len(responsibilities) == MAX_RESPONSIBILITIES:
            break
    return responsibilities


def split_core_and_nice(lower: str, skills) -> tuple[list[str], list[str]]:
    """Partition skills by position relative to the first nice-to-have marker.

    Skills first seen at or after the marker are nice-to-have; everything
    else, including all skills when no marker exists, is core.
    """
    marker = NICE_TO_HAVE_MARKER_RE.search(lower)
    marker_index = marker.start() if marker else -1
    core, nice = [], []
    for skill in _by_position(lower, skills):
        if marker_index >= 0 and find_phrase(lower, skill) >= marker_index:
            nice.append(skill)
        else:
            core.append(skill)
    return core[:MAX_CORE_SKILLS], nice[:MAX_NICE_TO_HAVE]


def compute_confidence(
    hard_skills: list[ExtractedKeyword], responsibilities: list[str], title: str | None
) -> int:
    score = 50
    if len(hard_skills) >= 5:
        score += 15
    elif len(hard_skills) >= 3:
        score += 10

    if len(responsibilities) >= 5:
        score += 15
    elif len(responsibilities) >= 3:
        score += 10

    if title:
        score += 10
    if any(k.importance == Importance.REQUIRED for k in hard_skills):
        score += 10
    return min(score, 100)


def parse_job_description(jd_text: str) -> JDAnalysis:
    """Build a structured JDAnalysis from raw job description text.

    Total for any string: empty input yields defaults plus warnings.
    """
    lower = jd_text.lower()
    sentences = split_sentences(jd_text)

    industry = detect_industry(lower, INDUSTRY_KEYWORDS)
    title = extract_title(jd_text)
    seniority, signals = detect_seniority(jd_text)

    role_type = title or detect_role_type(jd_text) or ""
    if not role_type and jd_text.strip():
        role_type = DEFAULT_ROLE_TYPE

    skill_bag = extract(lower, _industry_dictionary(industry))
    hard_skills = _keywords_with_importance(
        lower, sentences, skill_bag.get("hard_skills"), "hard_skill"
    )
    soft_skills = _keywords_with_importance(
        lower, sentences, skill_bag.get("soft_skills"), "soft_skill"
    )
    tools = _pattern_matches(lower, sentences, TOOL_PATTERNS, "tool")
    certifications = _pattern_matches(
        lower, sentences, CERTIFICATION_PATTERNS, "certification", _CERT_REQUIRED_RE
    )

    keywords = extract_keywords(jd_text)
    core_skills, nice_to_have = split_core_and_nice(lower, keywords.skills)
    responsibilities = extract_responsibilities(sentences)

    warnings = []
    if len(hard_skills) < 3:
        warnings.append(FEW_SKILLS_WARNING)
    if len(responsibilities) < 2:
        warnings.append(FEW_RESPONSIBILITIES_WARNING)
    if not title:
        warnings.append(NO_TITLE_WARNING)

    confidence = compute_confidence(hard_skills, responsibilities, title)
    logger.debug(
        "Parsed JD: industry=%s seniority=%s skills=%d confidence=%d",
        industry, seniority.value, len(hard_skills), confidence,
    )

    return JDAnalysis(
        role_type=role_type,
        detected_role=title,
        seniority_level=seniority,
        seniority_signals=signals,
        core_skills=core_skills,
        nice_to_have=nice_to_have,
        responsibilities=responsibilities,
        industry=industry,
        hard_skills=hard_skills,
        soft_skills=soft_skills,
        tools=tools,
        certifications=certifications,
        education_requirements=_all_matches(lower, EDUCATION_PATTERNS),
        experience_requirements=_all_matches(lower, EXPERIENCE_PATTERNS),
        keywords=keywords,
        is_remote=bool(_REMOTE_RE.search(jd_text)),
        location=extract_location(jd_text),
        salary_mentioned=bool(_SALARY_RE.search(jd_text)),
        urgency=detect_urgency(jd_text),
        confidence=confidence,
        warnings=warnings,
    )

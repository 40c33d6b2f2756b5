"""Static phrase dictionaries for keyword extraction.

All lists are lowercase tuples so they can be shared across threads and
injected into ``keyword_extractor.extract`` as a ``CategoryDictionary``.
"""

from models.schemas.keywords import CategoryDictionary

TECHNICAL_SKILLS: tuple[str, ...] = (
    # Languages
    "python", "javascript", "typescript", "java", "c++", "c#", "go", "rust",
    "ruby", "php", "swift", "kotlin", "scala", "r", "matlab", "perl", "shell",
    "bash", "powershell",
    # Frontend
    "react", "angular", "vue", "svelte", "next.js", "nextjs", "nuxt", "gatsby",
    "html", "css", "sass", "less", "tailwind", "bootstrap", "material ui", "chakra",
    # Backend frameworks
    "node.js", "nodejs", "express", "fastapi", "django", "flask", "spring",
    "spring boot", ".net", "asp.net", "rails", "laravel", "gin", "fiber",
    # Databases
    "sql", "mysql", "postgresql", "postgres", "mongodb", "redis", "elasticsearch",
    "dynamodb", "cassandra", "oracle", "sqlite", "mariadb", "neo4j", "graphql",
    # Cloud & DevOps
    "aws", "azure", "gcp", "google cloud", "docker", "kubernetes", "k8s",
    "terraform", "ansible", "jenkins", "ci/cd", "github actions", "gitlab ci",
    "circleci",
    # AI / ML
    "machine learning", "deep learning", "tensorflow", "pytorch", "keras",
    "scikit-learn", "sklearn", "pandas", "numpy", "opencv", "nlp",
    "computer vision", "llm", "rag", "langchain", "huggingface", "transformers",
    # Data
    "data analysis", "data science", "data engineering", "etl", "spark",
    "hadoop", "airflow", "kafka", "tableau", "power bi", "looker", "dbt",
    # Mobile
    "ios", "android", "react native", "flutter", "xamarin", "ionic",
    # Tooling
    "git", "jira", "confluence", "figma", "sketch", "postman", "swagger",
    "linux", "unix", "vim", "vscode",
)

SOFT_SKILLS: tuple[str, ...] = (
    "leadership", "communication", "teamwork", "collaboration", "problem solving",
    "problem-solving", "critical thinking", "analytical", "detail-oriented",
    "detail oriented", "project management", "time management", "agile",
    "scrum", "kanban", "stakeholder management", "cross-functional",
    "mentoring", "coaching", "presentation", "negotiation",
    "conflict resolution", "adaptability", "creativity", "innovation",
    "strategic thinking", "decision making",
)

ROLE_KEYWORDS: tuple[str, ...] = (
    "software engineer", "software developer", "frontend", "front-end",
    "backend", "back-end", "full stack", "fullstack", "devops", "sre",
    "site reliability", "data scientist", "data analyst", "data engineer",
    "ml engineer", "machine learning engineer", "ai engineer",
    "product manager", "project manager", "scrum master", "tech lead",
    "engineering manager", "architect", "solution architect", "qa engineer",
    "test engineer", "automation engineer", "security engineer",
    "cloud engineer", "platform engineer",
)

BUSINESS_TERMS: tuple[str, ...] = (
    "revenue", "roi", "kpi", "metrics", "growth", "optimization", "efficiency",
    "scalability", "performance", "reliability", "compliance", "gdpr", "hipaa",
    "soc2", "pci", "security", "audit", "governance", "b2b", "b2c", "saas",
    "startup", "enterprise", "stakeholder", "customer", "user experience", "ux",
)

# A technical skill whose text contains one of these is also filed as a tool.
TOOL_TERMS: tuple[str, ...] = (
    "docker", "kubernetes", "git", "jenkins", "terraform", "ansible", "jira",
    "confluence", "figma", "postman", "aws", "azure", "gcp",
)

DEFAULT_DICTIONARY = CategoryDictionary(
    categories={
        "skills": TECHNICAL_SKILLS,
        "soft_skills": SOFT_SKILLS,
        "role_keywords": ROLE_KEYWORDS,
        "business_terms": BUSINESS_TERMS,
    },
    tool_terms=TOOL_TERMS,
    tool_category="skills",
)

# Comparator category labels, keyed by KeywordBag category name.
MATCH_CATEGORY_LABELS: dict[str, str] = {
    "skills": "skill",
    "tools": "tool",
    "technologies": "tech",
    "soft_skills": "soft",
    "role_keywords": "role",
    "business_terms": "business",
    "certifications": "certification",
}

# Words that never count as overused, regardless of frequency.
OVERUSE_STOPWORDS: frozenset[str] = frozenset({
    "the", "and", "for", "with", "that", "this", "from", "have", "been",
})

# Strong action verbs for resume bullet quality checks.
ACTION_VERBS: tuple[str, ...] = (
    "managed", "created", "developed", "led", "designed", "implemented",
    "orchestrated", "engineered", "built", "analyzed", "optimized", "reduced",
    "increased", "generated", "initiated", "launched", "delivered",
    "collaborated", "spearheaded", "resolved",
)

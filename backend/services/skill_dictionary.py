"""Declarative lookup tables for resume feature extraction.

Extend detection by editing the tables below; resume_parser never branches
on individual skills or tags.
"""

from models.schemas.resume_profile import ExtractionConfig

# Skills whose display form is all caps / symbolic rather than title-case
ACRONYM_SKILLS: dict[str, str] = {
    "sql": "SQL",
    "aws": "AWS",
    "gcp": "GCP",
    "c#": "C#",
}

# Detection keywords, in output order
SKILL_KEYWORDS: tuple[str, ...] = (
    "react",
    "vue",
    "angular",
    "node",
    "typescript",
    "javascript",
    "python",
    "java",
    "c#",
    "aws",
    "gcp",
    "azure",
    "sql",
    "postgres",
    "graphql",
    "docker",
    "kubernetes",
    "figma",
    "sketch",
    "swift",
    "kotlin",
)

# Tag -> keywords. Tags are independent; one resume can carry several.
TECH_TAG_RULES: dict[str, list[str]] = {
    "backend": ["node", "java", "c#", "python", "go", "scala"],
    "frontend": ["react", "vue", "angular", "typescript", "css"],
    "mobile": ["swift", "kotlin", "android", "ios"],
    "data": ["sql", "python", "spark", "hadoop"],
    "design": ["figma", "sketch", "xd"],
}


def capitalize_skill(skill: str) -> str:
    """Display form of a detection keyword: acronym table, else first letter up."""
    key = skill.lower()
    if key in ACRONYM_SKILLS:
        return ACRONYM_SKILLS[key]
    return skill[:1].upper() + skill[1:]


def build_skill_dictionary(keywords: tuple[str, ...] | list[str]) -> dict[str, list[str]]:
    """Map canonical display name -> [keyword], preserving keyword order."""
    dictionary: dict[str, list[str]] = {}
    for keyword in keywords:
        dictionary.setdefault(capitalize_skill(keyword), []).append(keyword.lower())
    return dictionary


DEFAULT_EXTRACTION_CONFIG = ExtractionConfig(
    skill_dictionary=build_skill_dictionary(SKILL_KEYWORDS),
    tech_tags=TECH_TAG_RULES,
)

"""Fixed-width feature encoding for salary records.

Layout of the default 50-wide vector:

    [0, 30)   skill flags
    [30, 40)  location flags (substring match)
    [40, 45)  experience one-hot
    [45, 48)  degree flags: bachelor, master, doctorate
    [48, 50)  category index / 10, category index % 2

The same encoder must be used for training and inference.
"""

import numpy as np

from salary.domain import Degree, ExperienceLevel, SalaryRecord

FEATURE_WIDTH = 50

SKILLS = (
    "javascript", "python", "java", "react", "node",
    "angular", "vue", "typescript", "php", "ruby",
    "go", "rust", "c++", "c#", "swift",
    "kotlin", "sql", "mongodb", "postgresql", "mysql",
    "aws", "azure", "gcp", "docker", "kubernetes",
    "devops", "ml", "ai", "data-science", "blockchain",
)  # fmt: skip

LOCATIONS = (
    "bangalore", "mumbai", "delhi", "hyderabad", "pune",
    "chennai", "kolkata", "ahmedabad", "remote", "gurgaon",
)  # fmt: skip

EXPERIENCE_ORDER = (
    ExperienceLevel.ENTRY,
    ExperienceLevel.MID,
    ExperienceLevel.SENIOR,
    ExperienceLevel.EXECUTIVE,
    ExperienceLevel.FRESHER,
)

# Ranked lowest to highest; each level matches by keyword substring.
DEGREE_KEYWORDS = (
    ("bachelor", "btech"),
    ("master", "mba"),
    ("phd", "doctorate"),
)

CATEGORIES = {
    "technology": 0,
    "design": 1,
    "marketing": 2,
    "sales": 3,
    "hr": 4,
    "finance": 5,
    "operations": 6,
    "consulting": 7,
    "customer-service": 8,
    "other": 9,
}
FALLBACK_CATEGORY = CATEGORIES["other"]

_SKILL_INDEX = {skill: i for i, skill in enumerate(SKILLS)}
_LAYOUT_WIDTH = len(SKILLS) + len(LOCATIONS) + len(EXPERIENCE_ORDER) + len(DEGREE_KEYWORDS) + 2


def degree_rank(education: tuple[Degree, ...]) -> int | None:
    """Return the index into DEGREE_KEYWORDS of the highest degree, or None."""
    best = None
    for record in education:
        text = (record.degree or "").lower()
        for rank, keywords in enumerate(DEGREE_KEYWORDS):
            if any(keyword in text for keyword in keywords):
                if best is None or rank > best:
                    best = rank
    return best


def category_index(category: str) -> int:
    return CATEGORIES.get((category or "").strip().lower(), FALLBACK_CATEGORY)


class SalaryFeatureEncoder:
    """Encodes a SalaryRecord into a float vector of a fixed width."""

    def __init__(self, width: int = FEATURE_WIDTH) -> None:
        if width < _LAYOUT_WIDTH:
            raise ValueError(f"Feature width must be at least {_LAYOUT_WIDTH}, got {width}")
        self.width = width
        self._location_offset = len(SKILLS)
        self._experience_offset = self._location_offset + len(LOCATIONS)
        self._degree_offset = self._experience_offset + len(EXPERIENCE_ORDER)
        self._category_offset = self._degree_offset + len(DEGREE_KEYWORDS)

    def encode(self, record: SalaryRecord) -> np.ndarray:
        features = np.zeros(self.width, dtype=np.float64)

        for skill in record.skills:
            index = _SKILL_INDEX.get(skill.strip().lower())
            if index is not None:
                features[index] = 1.0

        location = (record.location or "").lower()
        if location:
            for i, known in enumerate(LOCATIONS):
                if known in location:
                    features[self._location_offset + i] = 1.0

        if record.experience_level is not None:
            position = EXPERIENCE_ORDER.index(record.experience_level)
            features[self._experience_offset + position] = 1.0

        rank = degree_rank(record.education)
        if rank is not None:
            features[self._degree_offset + rank] = 1.0

        index = category_index(record.category)
        features[self._category_offset] = index / 10
        features[self._category_offset + 1] = index % 2

        return features

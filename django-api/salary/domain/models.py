"""Salary domain models.

A SalaryRecord is the typed profile or job posting the estimator reads.
Every field is optional; absent fields encode as zeros.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class ExperienceLevel(Enum):
    FRESHER = "fresher"
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    EXECUTIVE = "executive"

    @classmethod
    def parse(cls, value: str | None) -> Self | None:
        """Case-insensitive lookup; unknown or empty values give None."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Degree:
    degree: str
    field: str = ""


@dataclass(frozen=True)
class SalaryRecord:
    skills: tuple[str, ...] = ()
    location: str = ""
    experience_level: ExperienceLevel | None = None
    education: tuple[Degree, ...] = ()
    category: str = ""
    title: str = ""
    industry: str = ""
    salary: float | None = None


@dataclass(frozen=True)
class SalaryBand:
    """Closed salary interval used to normalize targets and scale scores."""

    low: float = 200_000
    high: float = 5_000_000

    def __post_init__(self) -> None:
        if self.low < 0 or self.high <= self.low:
            raise ValueError("Salary band must satisfy 0 <= low < high")

    @property
    def width(self) -> float:
        return self.high - self.low

    def normalize(self, salary: float) -> float:
        """Map a salary into [0, 1], clipping values outside the band."""
        return min(1.0, max(0.0, (salary - self.low) / self.width))

    def scale(self, score: float) -> float:
        return self.low + score * self.width


@dataclass(frozen=True)
class SalaryEstimate:
    min: float
    max: float
    average: float
    currency: str
    confidence: float


@dataclass(frozen=True)
class MarketComparison:
    market_average: int
    your_prediction: int
    difference: int
    percent_difference: int
    status: str
    message: str


@dataclass(frozen=True)
class MarketInsight:
    factor: str
    impact: str
    message: str


@dataclass(frozen=True)
class PayBreakdown:
    base: int
    variable: int
    bonus: int
    benefits: int
    total: int


@dataclass(frozen=True)
class SalaryReport:
    """Estimate together with the market analysis shown to users."""

    estimate: SalaryEstimate
    market: MarketComparison
    insights: tuple[MarketInsight, ...] = ()
    breakdown: PayBreakdown | None = None

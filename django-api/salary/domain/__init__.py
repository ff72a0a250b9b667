from salary.domain.errors import ModelNotReadyError
from salary.domain.models import (
    Degree,
    ExperienceLevel,
    MarketComparison,
    MarketInsight,
    PayBreakdown,
    SalaryBand,
    SalaryEstimate,
    SalaryRecord,
    SalaryReport,
)

__all__ = [
    "Degree",
    "ExperienceLevel",
    "MarketComparison",
    "MarketInsight",
    "ModelNotReadyError",
    "PayBreakdown",
    "SalaryBand",
    "SalaryEstimate",
    "SalaryRecord",
    "SalaryReport",
]

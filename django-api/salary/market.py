"""Market comparison and insights around a salary estimate (INR)."""

from salary.domain import (
    ExperienceLevel,
    MarketComparison,
    MarketInsight,
    PayBreakdown,
    SalaryEstimate,
    SalaryRecord,
    SalaryReport,
)

TIER1_CITIES = (
    "bangalore", "bengaluru", "mumbai", "delhi", "new delhi",
    "hyderabad", "pune", "chennai", "gurgaon", "noida",
)  # fmt: skip
TIER2_CITIES = (
    "ahmedabad", "kolkata", "kochi", "cochin", "trivandrum",
    "thiruvananthapuram", "coimbatore", "indore", "jaipur", "lucknow",
    "bhubaneshwar", "bhubaneswar", "surat", "vadodara", "visakhapatnam",
)  # fmt: skip

ROLE_MULTIPLIERS = (
    (("data scientist", "machine learning", "ml"), 1.30),
    (("devops", "site reliability", "sre", "kubernetes"), 1.20),
    (("backend", "server", "java", "spring", "node"), 1.12),
    (("full stack", "full-stack"), 1.12),
    (("frontend", "react", "angular", "vue"), 1.00),
    (("mobile", "android", "ios", "flutter", "react native"), 1.10),
    (("product manager",), 1.40),
    (("qa", "test", "testing", "automation"), 0.92),
    (("hr", "human resources"), 0.75),
    (("designer", "ui", "ux"), 0.95),
    (("sales",), 0.90),
)

TIER_MULTIPLIERS = {"tier1": 1.15, "tier2": 1.05, "remote": 1.07, "tier3": 1.0}

INDUSTRY_MULTIPLIERS = (
    (("bank", "fin"), 1.15),
    (("it", "tech"), 1.00),
    (("health",), 0.98),
    (("retail",), 0.92),
    (("consult",), 1.05),
)

MARKET_BASE = {
    ExperienceLevel.ENTRY: 600_000,
    ExperienceLevel.MID: 1_200_000,
    ExperienceLevel.SENIOR: 2_000_000,
    ExperienceLevel.EXECUTIVE: 2_800_000,
}
DEFAULT_MARKET_BASE = 800_000

# Percent difference within which a prediction counts as "at" market.
MARKET_DEAD_BAND = 10

LOCATION_PREMIUMS = (
    ("bangalore", 1.15),
    ("mumbai", 1.10),
    ("delhi", 1.08),
    ("hyderabad", 1.05),
    ("pune", 1.03),
    ("remote", 1.12),
)
HOT_SKILLS = frozenset({"react", "node", "python", "aws", "kubernetes", "ml", "ai"})

BREAKDOWN_SHARES = {"base": 0.70, "variable": 0.15, "bonus": 0.10, "benefits": 0.05}


def city_tier(location: str) -> str:
    text = (location or "").lower()
    if any(city in text for city in TIER1_CITIES):
        return "tier1"
    if any(city in text for city in TIER2_CITIES):
        return "tier2"
    if "remote" in text:
        return "remote"
    return "tier3"


def _first_match(text: str, table, default: float = 1.0) -> float:
    text = (text or "").lower()
    if not text:
        return default
    for keywords, multiplier in table:
        if any(keyword in text for keyword in keywords):
            return multiplier
    return default


def role_multiplier(title: str) -> float:
    return _first_match(title, ROLE_MULTIPLIERS)


def industry_multiplier(industry: str) -> float:
    return _first_match(industry, INDUSTRY_MULTIPLIERS)


def compare_to_market(record: SalaryRecord, predicted: float) -> MarketComparison:
    """Compare a prediction with the typical pay for the same role, city and level."""
    base = MARKET_BASE.get(record.experience_level, DEFAULT_MARKET_BASE)
    market_average = round(
        base
        * role_multiplier(record.title)
        * TIER_MULTIPLIERS[city_tier(record.location)]
        * industry_multiplier(record.industry or record.category)
    )
    prediction = round(predicted)
    difference = prediction - market_average
    percent = round(difference / max(1, market_average) * 100)

    if percent > MARKET_DEAD_BAND:
        status, message = "above", f"{percent}% above market average"
    elif percent < -MARKET_DEAD_BAND:
        status, message = "below", f"{abs(percent)}% below market average"
    else:
        status, message = "at", "In line with market average"

    return MarketComparison(
        market_average=market_average,
        your_prediction=prediction,
        difference=difference,
        percent_difference=percent,
        status=status,
        message=message,
    )


def market_insights(record: SalaryRecord) -> tuple[MarketInsight, ...]:
    insights = []

    location = (record.location or "").lower()
    for city, premium in LOCATION_PREMIUMS:
        if city in location:
            percent = round((premium - 1) * 100)
            insights.append(
                MarketInsight(
                    factor="Location",
                    impact=f"+{percent}%",
                    message=f"{city.capitalize()} offers {percent}% higher salaries",
                )
            )
            break

    if any(skill.strip().lower() in HOT_SKILLS for skill in record.skills):
        insights.append(
            MarketInsight(
                factor="Skills",
                impact="+10%",
                message="High-demand skills increase your market value",
            )
        )

    if record.experience_level in (ExperienceLevel.SENIOR, ExperienceLevel.EXECUTIVE):
        insights.append(
            MarketInsight(
                factor="Experience",
                impact="+25%",
                message="Senior positions command premium salaries",
            )
        )

    return tuple(insights)


def pay_breakdown(total: float) -> PayBreakdown:
    return PayBreakdown(
        **{part: round(total * share) for part, share in BREAKDOWN_SHARES.items()},
        total=round(total),
    )


def build_report(record: SalaryRecord, estimate: SalaryEstimate) -> SalaryReport:
    return SalaryReport(
        estimate=estimate,
        market=compare_to_market(record, estimate.average),
        insights=market_insights(record),
        breakdown=pay_breakdown(estimate.average),
    )

"""Reference salary samples used to train the estimator at startup.

Annual compensation in INR for common roles across Indian cities.
"""

from salary.domain import Degree, ExperienceLevel, SalaryRecord


def _sample(
    skills: tuple[str, ...],
    experience: str,
    degree: str,
    location: str,
    salary: int,
    category: str = "",
) -> SalaryRecord:
    return SalaryRecord(
        skills=skills,
        location=location,
        experience_level=ExperienceLevel(experience),
        education=(Degree(degree=degree),),
        category=category,
        salary=float(salary),
    )


REFERENCE_SALARIES: tuple[SalaryRecord, ...] = (
    _sample(("javascript", "html", "css"), "entry", "bachelor", "bangalore", 450000, category="technology"),
    _sample(("python", "django"), "entry", "bachelor", "bangalore", 480000, category="technology"),
    _sample(("java", "spring"), "entry", "bachelor", "pune", 420000, category="technology"),
    _sample(("react", "javascript"), "entry", "bachelor", "hyderabad", 460000, category="technology"),
    _sample(("node", "mongodb"), "entry", "bachelor", "bangalore", 520000, category="technology"),
    _sample(("angular", "typescript"), "entry", "bachelor", "mumbai", 480000, category="technology"),
    _sample(("php", "mysql"), "entry", "bachelor", "delhi", 400000, category="technology"),
    _sample(("flutter", "dart"), "entry", "bachelor", "bangalore", 490000, category="technology"),
    _sample(("react", "node", "aws"), "mid", "bachelor", "bangalore", 1200000),
    _sample(("python", "ml", "tensorflow"), "mid", "master", "bangalore", 1400000),
    _sample(("java", "spring", "microservices"), "mid", "bachelor", "pune", 1100000),
    _sample(("react", "typescript", "redux"), "mid", "bachelor", "hyderabad", 1050000),
    _sample(("node", "express", "postgresql"), "mid", "bachelor", "bangalore", 1150000),
    _sample(("vue", "javascript", "docker"), "mid", "bachelor", "mumbai", 1180000),
    _sample(("angular", "rxjs", "typescript"), "mid", "master", "delhi", 1080000),
    _sample(("python", "django", "aws"), "mid", "bachelor", "bangalore", 1250000),
    _sample(("go", "kubernetes", "docker"), "mid", "bachelor", "bangalore", 1350000),
    _sample(("react", "node", "mongodb"), "mid", "bachelor", "remote", 1300000),
    _sample(("react", "node", "aws", "kubernetes"), "senior", "bachelor", "bangalore", 2200000),
    _sample(("python", "ml", "ai", "tensorflow"), "senior", "master", "bangalore", 2800000),
    _sample(("java", "spring", "microservices", "aws"), "senior", "bachelor", "pune", 2000000),
    _sample(("react", "node", "aws", "devops"), "senior", "master", "bangalore", 2500000),
    _sample(("python", "data-science", "ml"), "senior", "master", "mumbai", 2400000),
    _sample(("go", "kubernetes", "devops", "aws"), "senior", "bachelor", "bangalore", 2600000),
    _sample(("java", "spring", "kafka", "redis"), "senior", "bachelor", "hyderabad", 1900000),
    _sample(("react", "typescript", "aws", "node"), "senior", "bachelor", "remote", 2700000),
    _sample(("python", "django", "postgresql", "redis"), "senior", "bachelor", "bangalore", 2100000),
    _sample(("blockchain", "ethereum", "solidity"), "senior", "master", "bangalore", 3000000),
    _sample(("react", "node", "aws", "kubernetes", "devops"), "executive", "master", "bangalore", 3500000),
    _sample(("java", "spring", "microservices", "aws", "kafka"), "executive", "master", "bangalore", 3800000),
    _sample(("python", "ml", "ai", "data-science", "aws"), "executive", "phd", "bangalore", 4200000),
    _sample(("aws", "kubernetes", "devops", "terraform"), "executive", "bachelor", "mumbai", 3600000),
    _sample(("figma", "photoshop"), "entry", "bachelor", "bangalore", 400000, category="design"),
    _sample(("sketch", "illustrator"), "entry", "bachelor", "mumbai", 420000, category="design"),
    _sample(("figma", "adobe xd"), "entry", "bachelor", "pune", 380000, category="design"),
    _sample(("figma", "sketch", "prototyping"), "mid", "bachelor", "bangalore", 900000, category="design"),
    _sample(("ui/ux", "figma", "user research"), "mid", "bachelor", "mumbai", 950000, category="design"),
    _sample(("product design", "figma", "sketch"), "mid", "master", "bangalore", 1100000, category="design"),
    _sample(("product design", "figma", "user research", "prototyping"), "senior", "master", "bangalore", 1800000, category="design"),
    _sample(("ui/ux", "figma", "design systems"), "senior", "bachelor", "mumbai", 1600000, category="design"),
    _sample(("seo", "content writing"), "entry", "bachelor", "delhi", 350000, category="marketing"),
    _sample(("social media", "marketing"), "entry", "bachelor", "mumbai", 380000, category="marketing"),
    _sample(("digital marketing", "seo", "sem"), "mid", "bachelor", "bangalore", 800000, category="marketing"),
    _sample(("content strategy", "seo", "analytics"), "mid", "bachelor", "mumbai", 850000, category="marketing"),
    _sample(("social media", "content", "analytics"), "mid", "master", "delhi", 900000, category="marketing"),
    _sample(("digital marketing", "strategy", "analytics"), "senior", "master", "bangalore", 1600000, category="marketing"),
    _sample(("marketing strategy", "growth hacking"), "senior", "bachelor", "mumbai", 1500000, category="marketing"),
    _sample(("python", "data-science", "ml"), "mid", "master", "bangalore", 1350000),
    _sample(("python", "sql", "tableau"), "mid", "bachelor", "pune", 1100000),
    _sample(("r", "statistics", "ml"), "mid", "master", "hyderabad", 1200000),
    _sample(("python", "ml", "ai", "tensorflow", "pytorch"), "senior", "phd", "bangalore", 2900000),
    _sample(("data-science", "ml", "aws", "python"), "senior", "master", "mumbai", 2500000),
    _sample(("aws", "kubernetes", "docker"), "mid", "bachelor", "bangalore", 1300000),
    _sample(("azure", "kubernetes", "terraform"), "mid", "bachelor", "pune", 1200000),
    _sample(("gcp", "docker", "jenkins"), "mid", "bachelor", "hyderabad", 1150000),
    _sample(("aws", "kubernetes", "terraform", "ansible"), "senior", "bachelor", "bangalore", 2400000),
    _sample(("devops", "kubernetes", "aws", "jenkins"), "senior", "master", "mumbai", 2300000),
    _sample(("android", "kotlin", "java"), "mid", "bachelor", "bangalore", 1150000),
    _sample(("ios", "swift", "objective-c"), "mid", "bachelor", "mumbai", 1200000),
    _sample(("flutter", "dart", "firebase"), "mid", "bachelor", "bangalore", 1100000),
    _sample(("react-native", "javascript"), "mid", "bachelor", "pune", 1050000),
    _sample(("android", "kotlin", "architecture"), "senior", "bachelor", "bangalore", 2100000),
    _sample(("ios", "swift", "architecture"), "senior", "master", "mumbai", 2200000),
    _sample(("manual testing", "selenium"), "entry", "bachelor", "pune", 380000, category="technology"),
    _sample(("automation", "selenium", "java"), "entry", "bachelor", "bangalore", 420000, category="technology"),
    _sample(("automation", "selenium", "java", "jenkins"), "mid", "bachelor", "bangalore", 950000, category="technology"),
    _sample(("testing", "cypress", "javascript"), "mid", "bachelor", "pune", 900000, category="technology"),
    _sample(("automation", "framework", "ci/cd"), "senior", "bachelor", "bangalore", 1700000, category="technology"),
    _sample(("accounting", "excel"), "entry", "bachelor", "mumbai", 400000, category="finance"),
    _sample(("financial analysis", "excel"), "entry", "bachelor", "bangalore", 420000, category="finance"),
    _sample(("financial analysis", "modeling", "excel"), "mid", "master", "mumbai", 1100000, category="finance"),
    _sample(("accounting", "sap", "financial reporting"), "mid", "bachelor", "bangalore", 950000, category="finance"),
    _sample(("financial planning", "strategy", "analysis"), "senior", "master", "mumbai", 2000000, category="finance"),
    _sample(("recruitment", "hr"), "entry", "bachelor", "bangalore", 350000, category="hr"),
    _sample(("hr operations", "recruitment"), "entry", "bachelor", "mumbai", 370000, category="hr"),
    _sample(("talent acquisition", "hr strategy"), "mid", "master", "bangalore", 850000, category="hr"),
    _sample(("hr operations", "employee relations"), "mid", "bachelor", "pune", 800000, category="hr"),
    _sample(("hr strategy", "talent management", "compensation"), "senior", "master", "bangalore", 1600000, category="hr"),
    _sample(("sales", "communication"), "entry", "bachelor", "bangalore", 400000, category="sales"),
    _sample(("business development", "sales"), "entry", "bachelor", "mumbai", 420000, category="sales"),
    _sample(("enterprise sales", "negotiation"), "mid", "bachelor", "bangalore", 1000000, category="sales"),
    _sample(("sales strategy", "account management"), "mid", "master", "mumbai", 1100000, category="sales"),
    _sample(("sales strategy", "team management", "enterprise"), "senior", "master", "bangalore", 1800000, category="sales"),
)

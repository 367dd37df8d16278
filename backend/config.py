import os
from dotenv import load_dotenv

from compliance.types import LaborLawRules

load_dotenv()

LABOR_JURISDICTION = os.getenv("LABOR_JURISDICTION", "PL")
LABOR_MAX_DAILY_HOURS = float(os.getenv("LABOR_MAX_DAILY_HOURS", "12"))
LABOR_MAX_NIGHT_HOURS = float(os.getenv("LABOR_MAX_NIGHT_HOURS", "8"))
LABOR_MIN_DAILY_REST_HOURS = float(os.getenv("LABOR_MIN_DAILY_REST_HOURS", "11"))
LABOR_MAX_WEEKLY_HOURS = float(os.getenv("LABOR_MAX_WEEKLY_HOURS", "48"))
LABOR_MIN_WEEKLY_REST_HOURS = float(os.getenv("LABOR_MIN_WEEKLY_REST_HOURS", "35"))
LABOR_ISO_WEEK_BUCKETS = os.getenv("LABOR_ISO_WEEK_BUCKETS", "false").lower() in ("1", "true", "yes")

CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))

RULE_THRESHOLDS = (
    "max_daily_hours",
    "max_night_hours",
    "min_daily_rest_hours",
    "max_weekly_hours",
    "min_weekly_rest_hours",
)


def cors_origins() -> list[str]:
    return [o.strip() for o in CORS_ALLOW_ORIGINS.split(",") if o.strip()]


def get_default_rules() -> LaborLawRules:
    return LaborLawRules(
        jurisdiction=LABOR_JURISDICTION,
        max_daily_hours=LABOR_MAX_DAILY_HOURS,
        max_night_hours=LABOR_MAX_NIGHT_HOURS,
        min_daily_rest_hours=LABOR_MIN_DAILY_REST_HOURS,
        max_weekly_hours=LABOR_MAX_WEEKLY_HOURS,
        min_weekly_rest_hours=LABOR_MIN_WEEKLY_REST_HOURS,
        iso_week_buckets=LABOR_ISO_WEEK_BUCKETS,
    )


def validate_rules_config(rules: LaborLawRules) -> None:
    invalid = [name for name in RULE_THRESHOLDS if getattr(rules, name) <= 0]

    if invalid:
        raise RuntimeError(
            f"Labor law thresholds must be positive: {', '.join(invalid)}. "
            "Please check these in your .env file."
        )

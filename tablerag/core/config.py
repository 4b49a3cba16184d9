"""
Runtime configuration for table retrieval.
Values come from the environment; getters re-read it so tests can flip settings.
"""

import os

# Source tables
BUSINESS_CSV_PATH = os.getenv("BUSINESS_CSV_PATH", "data/business.csv")
FAQ_CSV_PATH = os.getenv("FAQ_CSV_PATH", "data/faq_kb.csv")

# Ranking defaults; malformed values are reported by validate_config()
RELEVANCE_FLOOR = 0.08
DEFAULT_TOP_K = 3

# Version string
VERSION = "1.0.0"


def get_business_csv_path() -> str:
    """Path of the business facts table."""
    return os.getenv("BUSINESS_CSV_PATH", BUSINESS_CSV_PATH)


def get_faq_csv_path() -> str:
    """Path of the FAQ knowledge table."""
    return os.getenv("FAQ_CSV_PATH", FAQ_CSV_PATH)


def get_relevance_floor() -> float:
    """Minimum cosine score a hit must exceed."""
    return float(os.getenv("RELEVANCE_FLOOR", str(RELEVANCE_FLOOR)))


def get_default_top_k() -> int:
    """Number of hits returned when the caller does not ask for a count."""
    return int(os.getenv("DEFAULT_TOP_K", str(DEFAULT_TOP_K)))


def retrieval_enabled() -> bool:
    """Check if retrieval answers are enabled."""
    return os.getenv("RETRIEVAL_ENABLED", "true").lower() == "true"


def debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "false").lower() == "true"


def validate_config():
    """Validate retrieval configuration and return any issues."""
    issues = []

    try:
        floor = get_relevance_floor()
        if not 0.0 <= floor < 1.0:
            issues.append(f"RELEVANCE_FLOOR must be in [0, 1): {floor}")
    except ValueError:
        issues.append(f"Invalid RELEVANCE_FLOOR: {os.getenv('RELEVANCE_FLOOR')}")

    try:
        if get_default_top_k() < 1:
            issues.append("DEFAULT_TOP_K must be >= 1")
    except ValueError:
        issues.append(f"Invalid DEFAULT_TOP_K: {os.getenv('DEFAULT_TOP_K')}")

    return issues

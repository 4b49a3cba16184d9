"""
Raw table acquisition from local files.
Failures propagate to the caller; nothing here retries or serves stale text.
"""

from pathlib import Path
from typing import Tuple, Union

from .config import get_business_csv_path, get_faq_csv_path
from ..util.logging import logger

PathLike = Union[str, Path]


class SourceUnavailableError(OSError):
    """Raised when a table's raw text cannot be obtained."""
    pass


def read_table_text(path: PathLike) -> str:
    """Read a UTF-8 table file, dropping a leading byte order mark."""
    try:
        # newline="" keeps line terminators for the parser to interpret
        with open(Path(path), "r", encoding="utf-8-sig", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.log_operation("table.read", "failed", {"path": str(path), "error": str(e)})
        raise SourceUnavailableError(f"Could not read table {path}: {e}") from e

    logger.log_operation("table.read", "success", {"path": str(path), "chars": len(text)})
    return text


def load_tables(business_path: PathLike = None, faq_path: PathLike = None) -> Tuple[str, str]:
    """Read the business and FAQ tables, defaulting to the configured paths."""
    business_text = read_table_text(business_path or get_business_csv_path())
    faq_text = read_table_text(faq_path or get_faq_csv_path())
    return business_text, faq_text

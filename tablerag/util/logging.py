"""
Structured logging for table retrieval operations.
Parse, index build and query events share one operation/status/details format.
"""

import logging
from typing import Any, Dict


class StructuredLogger:
    """Structured logger for parse, index and query operations."""

    def __init__(self, name: str = "tablerag"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.info(message)

    def log_table_parse(self, source: str, row_count: int, status: str = "success", details: Dict[str, Any] = None):
        """Log a table parse."""
        log_details = {"source": source, "row_count": row_count}
        if details:
            log_details.update(details)

        self.log_operation("table.parse", status, log_details)

    def log_index_build(self, document_count: int, term_count: int, start_time: float, end_time: float, status: str = "success"):
        """Log index construction with its duration."""
        duration_ms = round((end_time - start_time) * 1000, 2)
        log_details = {
            "document_count": document_count,
            "term_count": term_count,
            "duration_ms": duration_ms,
        }
        self.log_operation("index.build", status, log_details)

    def log_query(self, query: str, hit_count: int, top_score: float = 0.0, status: str = "success"):
        """Log a ranked query."""
        log_details = {
            "query": query[:50] + "..." if len(query) > 50 else query,
            "hit_count": hit_count,
            "top_score": round(top_score, 4),
        }
        self.log_operation("index.query", status, log_details)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)


# Global logger instance
logger = StructuredLogger()

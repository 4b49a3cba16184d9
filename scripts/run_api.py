#!/usr/bin/env python3
"""
Start the table retrieval API.
"""

import argparse
import sys
from pathlib import Path

import uvicorn

# Add the parent directory to sys.path to import our modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from tablerag.core.config import debug_enabled


def main():
    parser = argparse.ArgumentParser(description="Run the table retrieval API")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    args = parser.parse_args()

    uvicorn.run(
        "tablerag.api.main:app",
        host=args.host,
        port=args.port,
        reload=debug_enabled(),
        log_level="debug" if debug_enabled() else "info",
    )


if __name__ == "__main__":
    main()

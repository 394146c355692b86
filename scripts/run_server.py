#!/usr/bin/env python3
"""Run the FastAPI server."""

import logging
import os
from pathlib import Path

# Load environment variables from main folder
from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env")

if __name__ == "__main__":
    import uvicorn

    # Get configuration from environment
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    log_level = os.getenv("LOG_LEVEL", "INFO")

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print("=" * 60)
    print("LIVE EVENTS AGGREGATOR")
    print("=" * 60)
    print(f"Starting server on {host}:{port}")
    print(f"API docs: http://localhost:{port}/docs")
    print(f"Live matches: http://localhost:{port}/api/live-matches")
    print("=" * 60)

    uvicorn.run(
        "live_aggregator.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=False,
        log_level=log_level.lower(),
        access_log=True
    )

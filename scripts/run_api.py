#!/usr/bin/env python3
"""Run the FastAPI server for the Bedtime Story Generator."""

import os
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn


def main():
    """Run the API server."""
    uvicorn.run(
        "backend.api.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=True,  # Enable auto-reload for development
    )


if __name__ == "__main__":
    main()

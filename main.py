#!/usr/bin/env python3
"""
Main entry point for AuthGate server.
"""

import os
import uvicorn
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from authgate.main import create_app  # noqa: E402

if __name__ == "__main__":
    # Get configuration from environment variables
    host = os.getenv("SERVER_HOST", "0.0.0.0")
    port = int(os.getenv("SERVER_PORT", "8000"))

    print(f"Starting AuthGate server on {host}:{port}")
    print("Environment variables loaded from .env file")

    # Create and run the app
    app = create_app()
    uvicorn.run(app, host=host, port=port, log_level="info", access_log=False)

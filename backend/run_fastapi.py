"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn chatrooms.fastapi_app:app --host 0.0.0.0 --port 5001 --reload
"""

import os
import sys

# Make the chatrooms package importable when running from a source checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from chatrooms.config.settings import Config

if __name__ == "__main__":
    env = Config.APP_ENV
    debug = env == "development"

    print(f"Starting FastAPI application in {env} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "chatrooms.fastapi_app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )

#!/usr/bin/env python3
"""
Entry point for the Mflix API.
Imports the FastAPI app and runs uvicorn programmatically.
"""
import os
import sys
import logging

logger = logging.getLogger(__name__)

def main():
    """Main entry point for the application"""
    try:
        from app.server import app
        import uvicorn

        port = int(os.environ.get("PORT", 8080))
        logger.info(f"Starting server on port {port}")

        uvicorn.run(
            app,
            host="0.0.0.0",
            port=port,
            log_level="info"
        )

    except Exception as e:
        logger.error(f"Error starting application: {e}", exc_info=True)
        sys.exit(1)

if __name__ == "__main__":
    main()

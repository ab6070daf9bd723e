"""
main.py

Flask backend exposing the catalog import pipeline.

Dependencies:
  - Python packages: Flask, flask-restx, flask-cors, redis, httpx, yt-dlp
  - Infrastructure: Redis server (unless CATALOG_STORE=memory)

Notes:
  - API v1 endpoints available at /api/v1/ with Swagger docs at /api/v1/docs
  - Set YOUTUBE_API_KEY to use the YouTube Data API; yt-dlp is used otherwise
"""

import os

from catalog_import.app_factory import create_app

app = create_app()

if __name__ == "__main__":
    host = os.getenv("FLASK_HOST", "0.0.0.0")
    port = int(os.getenv("FLASK_PORT", 8000))
    debug = os.getenv("FLASK_DEBUG", "false").lower() == "true"

    app.run(host=host, port=port, debug=debug)

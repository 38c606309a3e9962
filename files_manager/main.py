"""
main.py

Flask entry point for the files manager.

Dependencies:
  - Python packages: Flask, flask-restx, flask-cors, redis
  - Infrastructure: Redis server

Notes:
  - Sessions, users and file metadata live in Redis
  - File content is written under FOLDER_PATH (default /tmp/files_manager)
  - Swagger docs are served at {API_PREFIX}/docs
"""

import logging
import os

from files_manager.app_factory import create_app
from files_manager.config.app_config import AppConfig

config = AppConfig()

logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = create_app(config)


def run() -> None:
    """Run the development server."""
    host = os.getenv("FLASK_HOST", "0.0.0.0")
    port = int(os.getenv("FLASK_PORT", 5000))
    debug = os.getenv("FLASK_DEBUG", "false").lower() == "true"

    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    run()

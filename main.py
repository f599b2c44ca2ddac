"""
main.py

Flask backend for the files manager: token sessions in Redis, catalog in
Redis, content on the local filesystem and Celery for image thumbnails.

Dependencies:
  - Python packages: Flask, flask-restx, flask-cors, redis, celery, bcrypt, Pillow
  - Infrastructure: Redis server, a Celery worker for thumbnails

Notes:
  - API v1 endpoints available at /api/v1/ with Swagger docs at /api/v1/docs
  - Uses application factory pattern for better testability
"""

import os

from files_manager.app_factory import close_connections, create_app

app = create_app()

if __name__ == "__main__":
    host = os.getenv("FLASK_HOST", "0.0.0.0")
    port = int(os.getenv("FLASK_PORT", 5000))
    debug = os.getenv("FLASK_DEBUG", "false").lower() == "true"

    try:
        # Threaded so one slow store round trip never blocks other requests
        app.run(host=host, port=port, debug=debug, threaded=True)
    finally:
        close_connections(app)

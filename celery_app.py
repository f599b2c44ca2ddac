"""
Celery Application Instance

Creates the Celery app instance for use by workers.
Uses the app factory to ensure all services are properly initialized.

    celery -A celery_app.celery_app worker -Q file_queue,user_queue,default
"""

from files_manager.app_factory import create_app

# Create Flask app with all services initialized (including dependency container)
flask_app = create_app()

# Get Celery instance from Flask app
celery_app = flask_app.celery

# Task modules are imported by name when the worker starts, after
# `celery_app` exists, since they import it for their decorators.
celery_app.conf.imports = (
    "files_manager.tasks.thumbnail_task",
    "files_manager.tasks.welcome_task",
)

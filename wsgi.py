"""
WSGI entry point for production deployment.
Exposes the Flask application object as `application` for Gunicorn/uWSGI,
e.g. `gunicorn wsgi:application`.
"""

from app import create_app

application = create_app()

if __name__ == "__main__":
    application.run(host="0.0.0.0", port=5000)

#!/usr/bin/env python3
"""
YouMatter Application Entry Point.

Builds the Flask application around the risk & discount engine: logging,
security headers, rate limiting, the plan catalog and the discount ledger.

Usage:
    Run directly for development: python app.py
    Use create_app() for WSGI production servers (Gunicorn/uWSGI).
"""

from __future__ import annotations

import logging
import signal
import socket
import sys
import time
from typing import Optional

# Third-party imports
from colorama import init as colorama_init, Fore, Style
from flask import Flask, g, request
from flask_cors import CORS
from flask_compress import Compress
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from werkzeug.middleware.proxy_fix import ProxyFix

from api import register_routes
from backend.core.ledger_service import DiscountLedger
from backend.core.plan_service import PlanCatalog
from core import init_core
from core.constants import APP_NAME

colorama_init(autoreset=True)
logger = logging.getLogger(APP_NAME)

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}


def _attach_request_hooks(app: Flask) -> None:
    @app.before_request
    def start_timer():
        g.start = time.perf_counter()

    @app.after_request
    def security_and_logging(response):
        for key, value in SECURITY_HEADERS.items():
            response.headers[key] = value

        duration = time.perf_counter() - getattr(g, "start", time.perf_counter())
        status = response.status_code
        # colour codes are stripped again by the file handler
        color = Fore.GREEN if status < 300 else Fore.YELLOW if status < 500 else Fore.RED
        logger.info(f"{request.method} {request.path} -> {color}{status}{Style.RESET_ALL} ({duration:.4f}s)")
        return response


def _load_catalog(app: Flask) -> PlanCatalog:
    path = app.config.get("PLAN_CATALOG_PATH")
    if path:
        catalog = PlanCatalog.from_json(path)
        logger.info(f"Plan catalog loaded from {path} ({len(catalog)} plans)")
        return catalog
    return PlanCatalog.default()


# --- Application Factory ---
def create_app(config_class: Optional[object] = None) -> Flask:
    """
    Factory to create and configure the Flask application instance.

    The plan catalog and discount ledger are created here and handed to the
    routes through app.extensions.
    """
    # 1. Environment & Config (.env must be loaded before config is imported)
    init_core(log_level=logging.INFO)
    from core.config import get_config

    cfg = config_class or get_config()

    app = Flask(__name__)
    app.config.from_object(cfg)

    if app.config.get("LOG_DIR") and not app.config.get("TESTING"):
        init_core(log_dir=app.config["LOG_DIR"], log_level=logging.DEBUG if app.config.get("DEBUG") else logging.INFO)

    # 2. Extensions
    CORS(app, resources={r"/api/*": {"origins": "*"}})
    Compress(app)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)

    # 3. Rate Limiting
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=app.config.get("RATELIMIT_DEFAULTS", []),
        storage_uri=app.config.get("RATELIMIT_STORAGE_URI", "memory://"),
    )
    limiter.init_app(app)

    # 4. Engine collaborators
    app.extensions["plan_catalog"] = _load_catalog(app)
    app.extensions["discount_ledger"] = DiscountLedger(app.config["LEDGER_PATH"])

    # 5. Routes & hooks
    register_routes(app, limiter)
    _attach_request_hooks(app)

    return app


# Utilities & Entry Point
def find_available_port(start_port: int = 5000) -> int:
    """Helper to find the first free port."""
    port = start_port
    while port < 65535:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            if sock.connect_ex(("127.0.0.1", port)) != 0:
                return port
        port += 1
    raise RuntimeError("No available ports found.")


def _graceful_exit(signum, frame):
    logger.info(f"Signal {signum} received. Shutting down.")
    sys.exit(0)


if __name__ == "__main__":
    app = create_app()

    signal.signal(signal.SIGINT, _graceful_exit)
    signal.signal(signal.SIGTERM, _graceful_exit)

    port = find_available_port()

    print(f"{Fore.GREEN}SYSTEM ONLINE -> http://localhost:{port}{Style.RESET_ALL}")

    app.run(host="0.0.0.0", port=port, debug=app.config.get("DEBUG", False), threaded=True)

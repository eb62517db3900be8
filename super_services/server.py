"""HTTP application shared by every service."""

from __future__ import annotations

from flask import Flask, jsonify


def healthz():
    """Report that the service is alive."""
    return jsonify({"status": "ok"}), 200


def create_app(name: str = "service") -> Flask:
    """Build the HTTP application for the service called ``name``."""
    app = Flask(__name__)
    app.config["SERVICE_NAME"] = name
    app.add_url_rule("/healthz", "healthz", healthz, methods=["GET"])
    return app
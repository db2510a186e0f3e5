from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..auth.guards import current_identity, make_token_required
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.token_service)
    reports = container.report_service

    @app.route("/api/entries", methods=["GET"], endpoint="all_entries")
    @token_required
    def all_entries():
        try:
            entries = reports.list_all_entries(current_identity())
        except DomainError:
            raise
        except Exception:
            logger.exception("Error fetching entries")
            return jsonify({"error": "Error fetching entries"}), 500
        return jsonify([e.to_dict() for e in entries])

    @app.route("/api/entries/<username>", methods=["GET"], endpoint="user_entries")
    @token_required
    def user_entries(username: str):
        try:
            entries = reports.list_entries_for(current_identity(), username)
        except DomainError:
            raise
        except Exception:
            logger.exception("Error fetching user entries")
            return jsonify({"error": "Error fetching entries"}), 500
        return jsonify([e.to_dict() for e in entries])

    @app.route("/api/users", methods=["GET"], endpoint="users")
    @token_required
    def users():
        try:
            rows = reports.list_users(current_identity())
        except DomainError:
            raise
        except Exception:
            logger.exception("Error fetching users")
            return jsonify({"error": "Error fetching users"}), 500
        return jsonify([u.to_public_dict() for u in rows])

    @app.route("/api/stats", methods=["GET"], endpoint="stats")
    @token_required
    def stats():
        try:
            data = reports.stats(current_identity())
        except DomainError:
            raise
        except Exception:
            logger.exception("Error fetching stats")
            return jsonify({"error": "Error fetching stats"}), 500
        return jsonify(data.to_dict())

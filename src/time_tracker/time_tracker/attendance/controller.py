from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..auth.guards import current_identity, make_token_required
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.token_service)

    @app.route("/api/clock", methods=["POST"], endpoint="clock")
    @token_required
    def clock():
        try:
            result = container.attendance_service.toggle(current_identity())
        except DomainError:
            raise
        except Exception:
            logger.exception("Clock error")
            return jsonify({"error": "Error processing clock action"}), 500
        return jsonify(result.to_dict())

from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = _json_body()
        try:
            container.auth_service.signup(
                first_name=data.get("firstName"),
                last_name=data.get("lastName"),
                email=data.get("email"),
                username=data.get("username"),
                password=data.get("password"),
            )
        except DomainError:
            raise
        except Exception:
            logger.exception("Signup error")
            return jsonify({"error": "Error creating account"}), 500
        return jsonify({"message": "Account created successfully"}), 201

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = _json_body()
        try:
            result = container.auth_service.login(data.get("username"), data.get("password"))
        except DomainError:
            raise
        except Exception:
            logger.exception("Login error")
            return jsonify({"error": "Error logging in"}), 500
        return jsonify({"token": result.token, "user": result.user.summary()})

from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container


def _credentials_from_body() -> tuple[str, str]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid request")
    return data.get("username"), data.get("password")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/register", methods=["POST"], endpoint="register")
    def register_user():
        username, password = _credentials_from_body()
        if not username or not password:
            raise ValidationError("Username and password are required")

        user_id = container.auth_service.register(username, password)
        return jsonify({"message": "User created successfully", "user_id": user_id}), 201

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        username, password = _credentials_from_body()
        user = container.auth_service.authenticate(username, password)
        token = container.token_service.issue(user.user_id)
        return jsonify({"token": token, "user_id": user.user_id, "username": user.username})

from __future__ import annotations

from functools import wraps

from flask import Flask, g, jsonify, request

from ..auth.tokens import bearer_token
from ..common.validators import optional_int
from ..core.constants import MAX_GOAL_MINUTES
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            header = request.headers.get("Authorization")
            if not header:
                raise AuthenticationError("Authorization header required")
            g.user_id = container.token_service.verify(bearer_token(header))
            return view(*args, **kwargs)

        return wrapper

    @app.route("/api/workweek", methods=["GET"], endpoint="get_work_week")
    @token_required
    def get_work_week():
        view = container.work_week_service.current(g.user_id)
        return jsonify({"work_week": view.to_dict() if view else None})

    @app.route("/api/workweek/history", methods=["GET"], endpoint="work_week_history")
    @token_required
    def work_week_history():
        items = container.work_week_service.history(g.user_id)
        return jsonify([item.to_dict() for item in items])

    @app.route("/api/workweek/start", methods=["POST"], endpoint="start_week")
    @token_required
    def start_week():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValidationError("Invalid request format")

        goal_minutes = optional_int(data.get("goal_minutes"), "goal_minutes", max_value=MAX_GOAL_MINUTES)
        work_week_id = container.work_week_service.start(g.user_id, goal_minutes)
        return jsonify({"message": "Week started", "work_week_id": work_week_id})

    @app.route("/api/workweek/end", methods=["POST"], endpoint="end_week")
    @token_required
    def end_week():
        container.work_week_service.end(g.user_id)
        return jsonify({"message": "Week ended"})

    @app.route("/api/workweek/pause", methods=["POST"], endpoint="pause_timer")
    @token_required
    def pause_timer():
        container.work_week_service.pause(g.user_id)
        return jsonify({"message": "Timer paused"})

    @app.route("/api/workweek/resume", methods=["POST"], endpoint="resume_timer")
    @token_required
    def resume_timer():
        container.work_week_service.resume(g.user_id)
        return jsonify({"message": "Timer resumed"})

    @app.route("/api/workweek/current-time", methods=["GET"], endpoint="current_work_time")
    @token_required
    def current_work_time():
        return jsonify(container.work_week_service.current_time(g.user_id))

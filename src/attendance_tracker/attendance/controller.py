from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import bearer_required, json_body
from ..container import Container
from .schemas import AttendanceUpdateInput


def register(app: Flask, container: Container) -> None:
    auth = bearer_required(container.token_service)

    @app.route("/attendance", methods=["POST"], endpoint="update_attendance")
    @auth
    def update_attendance():
        data = AttendanceUpdateInput.from_payload(json_body())
        record = container.attendance_service.update(g.user_id, data)
        return jsonify(record.to_dict())

    @app.route("/report", methods=["GET"], endpoint="report")
    @auth
    def report():
        summary = container.report_service.build_report(g.user_id)
        return jsonify(summary.to_dict())

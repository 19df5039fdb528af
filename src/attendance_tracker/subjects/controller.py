from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import bearer_required, json_body
from ..container import Container
from .schemas import CreateSubjectInput


def register(app: Flask, container: Container) -> None:
    auth = bearer_required(container.token_service)

    @app.route("/subjects", methods=["POST"], endpoint="create_subject")
    @auth
    def create_subject():
        data = CreateSubjectInput.from_payload(json_body())
        subject = container.subject_service.create(g.user_id, data)
        return jsonify(subject.to_dict()), 201

    @app.route("/subjects", methods=["GET"], endpoint="list_subjects")
    @auth
    def list_subjects():
        subjects = container.subject_service.list_for(g.user_id)
        return jsonify([s.to_dict(with_summary=True) for s in subjects])

    @app.route("/subjects/<int:subject_id>", methods=["DELETE"], endpoint="delete_subject")
    @auth
    def delete_subject(subject_id: int):
        container.subject_service.delete(g.user_id, subject_id)
        return jsonify({"message": "Subject deleted successfully."})

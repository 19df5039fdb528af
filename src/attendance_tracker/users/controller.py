from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from .schemas import LoginInput, SignupInput


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = SignupInput.from_payload(json_body())
        container.auth_service.signup(data)
        return jsonify({"message": "User created successfully."}), 201

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = LoginInput.from_payload(json_body())
        token = container.auth_service.login(data)
        return jsonify({"token": token})

from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container
from .model import Session
from .schemas import AdminSignupRequest, LoginRequest


def register(app: Flask, container: Container) -> None:
    def _logged_in(session: Session):
        return jsonify({"success": True, "message": "Logged in successfully!", "user": session.to_json()}), 200

    @app.route("/api/admin/login", methods=["POST"], endpoint="admin_login")
    @json_endpoint
    def admin_login():
        req = LoginRequest.from_json(json_body())
        return _logged_in(container.auth_service.login_admin(req))

    @app.route("/api/teacher/login", methods=["POST"], endpoint="teacher_login")
    @json_endpoint
    def teacher_login():
        req = LoginRequest.from_json(json_body())
        return _logged_in(container.auth_service.login_teacher(req))

    @app.route("/api/student/login", methods=["POST"], endpoint="student_login")
    @json_endpoint
    def student_login():
        req = LoginRequest.from_json(json_body())
        return _logged_in(container.auth_service.login_student(req))

    @app.route("/api/admin/signup", methods=["POST"], endpoint="admin_signup")
    @json_endpoint
    def admin_signup():
        req = AdminSignupRequest.from_json(json_body())
        admin_id = container.admin_service.signup(req)
        return jsonify({"success": True, "message": "Admin account created successfully!", "adminId": admin_id}), 201

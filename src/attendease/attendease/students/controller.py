from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, json_endpoint
from ..common.validators import require_int
from ..container import Container
from .schemas import StudentSignupRequest


def register(app: Flask, container: Container) -> None:
    @app.route("/api/student/signup", methods=["POST"], endpoint="student_signup")
    @json_endpoint
    def student_signup():
        req = StudentSignupRequest.from_json(json_body())
        student_id = container.student_service.signup(req)
        return jsonify({"success": True, "message": "Account created successfully!", "studentId": student_id}), 201

    @app.route("/api/teacher/students-by-subject", methods=["GET"], endpoint="students_by_subject")
    @json_endpoint
    def students_by_subject():
        subject_id = require_int(request.args.get("subjectId"), "Subject ID", minimum=1)
        roster = container.student_service.roster_for_subject(subject_id)
        return jsonify([s.to_public_json() for s in roster]), 200

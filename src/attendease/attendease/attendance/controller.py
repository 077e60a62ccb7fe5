from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, json_endpoint
from ..container import Container
from .schemas import SaveAttendanceRequest, SubjectDateQuery


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teacher/attendance", methods=["GET"], endpoint="attendance_get")
    @json_endpoint
    def attendance_get():
        records = container.attendance_service.get_marks(SubjectDateQuery.from_args(request.args))
        return jsonify([{"student_id": r.student_id, "status": r.status.value} for r in records]), 200

    @app.route("/api/teacher/attendance", methods=["POST"], endpoint="attendance_save")
    @json_endpoint
    def attendance_save():
        req = SaveAttendanceRequest.from_json(json_body())
        saved = container.attendance_service.save(req)
        return jsonify({"success": True, "message": "Attendance saved successfully.", "saved": saved}), 201

from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container
from .schemas import (
    AssignSubjectRequest,
    CreateTeacherRequest,
    SyncSubjectsRequest,
    TeacherSignupRequest,
    UpdateTeacherRequest,
)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teacher/signup", methods=["POST"], endpoint="teacher_signup")
    @json_endpoint
    def teacher_signup():
        req = TeacherSignupRequest.from_json(json_body())
        teacher_id = container.teacher_service.signup(req)
        return jsonify({"success": True, "message": "Account created successfully!", "teacherId": teacher_id}), 201

    @app.route("/api/teacher/<teacher_id>/subjects", methods=["GET"], endpoint="teacher_subjects")
    @json_endpoint
    def teacher_subjects(teacher_id: str):
        subjects = container.teacher_service.subjects(teacher_id)
        return jsonify([s.to_json() for s in subjects]), 200

    @app.route("/api/admin/teachers", methods=["GET"], endpoint="admin_teachers")
    @json_endpoint
    def admin_teachers():
        return jsonify(list(container.teacher_service.list_admin_view())), 200

    @app.route("/api/admin/teachers", methods=["POST"], endpoint="admin_teachers_create")
    @json_endpoint
    def admin_teachers_create():
        req = CreateTeacherRequest.from_json(json_body())
        created = container.teacher_service.create(req)
        body = {"success": True, "message": "Teacher created successfully.", "teacherId": created.teacher_id}
        if created.generated_password:
            body["generatedPassword"] = created.generated_password
        return jsonify(body), 201

    @app.route("/api/admin/teacher/<teacher_id>", methods=["PUT"], endpoint="admin_teacher_update")
    @json_endpoint
    def admin_teacher_update(teacher_id: str):
        req = UpdateTeacherRequest.from_json(json_body())
        container.teacher_service.update(teacher_id, req)
        return jsonify({"success": True, "message": "Teacher updated successfully."}), 200

    @app.route("/api/admin/teacher/<teacher_id>", methods=["DELETE"], endpoint="admin_teacher_delete")
    @json_endpoint
    def admin_teacher_delete(teacher_id: str):
        container.teacher_service.delete(teacher_id)
        return jsonify({"success": True, "message": "Teacher deleted successfully."}), 200

    @app.route("/api/admin/teacher/<teacher_id>/subjects", methods=["PUT"], endpoint="admin_teacher_sync_subjects")
    @json_endpoint
    def admin_teacher_sync_subjects(teacher_id: str):
        req = SyncSubjectsRequest.from_json(json_body())
        container.teacher_service.sync_subjects(teacher_id, req.subject_ids)
        return jsonify({"success": True, "message": "Subjects updated successfully."}), 200

    @app.route("/api/admin/assignSubjects", methods=["POST"], endpoint="admin_assign_subject")
    @json_endpoint
    def admin_assign_subject():
        req = AssignSubjectRequest.from_json(json_body())
        assignment_id = container.teacher_service.assign(req)
        return jsonify(
            {"success": True, "message": "Subject assigned to teacher successfully!", "assignment_id": assignment_id}
        ), 201

    @app.route("/api/admin/unassignSubject/<int:assignment_id>", methods=["DELETE"], endpoint="admin_unassign_subject")
    @json_endpoint
    def admin_unassign_subject(assignment_id: int):
        container.teacher_service.unassign(assignment_id)
        return jsonify({"success": True, "message": "Subject unassigned successfully."}), 200

from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, json_endpoint
from ..common.validators import parse_semester, require_non_empty
from ..container import Container
from .schemas import AddSubjectRequest, CourseSelector


def register(app: Flask, container: Container) -> None:
    catalog = container.catalog_service

    # Signup form lookups, all by name.
    @app.route("/api/student/programs", methods=["GET"], endpoint="catalog_programs")
    @json_endpoint
    def catalog_programs():
        return jsonify(catalog.program_names()), 200

    @app.route("/api/student/departments", methods=["GET"], endpoint="catalog_departments")
    @json_endpoint
    def catalog_departments():
        return jsonify(catalog.department_names()), 200

    @app.route("/api/student/semesters", methods=["GET"], endpoint="catalog_semesters")
    @json_endpoint
    def catalog_semesters():
        return jsonify(catalog.semester_labels()), 200

    @app.route("/api/student/subjects", methods=["GET"], endpoint="catalog_subjects")
    @json_endpoint
    def catalog_subjects():
        args = request.args
        names = catalog.subject_names_for(
            program_name=require_non_empty(args.get("program"), "Program"),
            department_name=require_non_empty(args.get("department"), "Department"),
            semester=parse_semester(args.get("semester")),
        )
        return jsonify(list(names)), 200

    @app.route("/api/admin/departments", methods=["GET"], endpoint="admin_departments")
    @json_endpoint
    def admin_departments():
        return jsonify(catalog.departments()), 200

    @app.route("/api/admin/subjects", methods=["GET"], endpoint="admin_subjects")
    @json_endpoint
    def admin_subjects():
        return jsonify(catalog.subjects()), 200

    @app.route("/api/admin/course-subjects", methods=["GET"], endpoint="admin_course_subjects")
    @json_endpoint
    def admin_course_subjects():
        selector = CourseSelector.from_args(request.args)
        return jsonify(catalog.course_subjects(selector)), 200

    @app.route("/api/admin/subjects-to-course", methods=["POST"], endpoint="admin_add_subject")
    @json_endpoint
    def admin_add_subject():
        req = AddSubjectRequest.from_json(json_body())
        subject = catalog.add_subject_to_course(req)
        return jsonify(
            {
                "success": True,
                "message": "Subject added successfully.",
                "subject": {"id": subject.subject_id, "name": subject.subject_name, "course_id": subject.course_id},
            }
        ), 201

    @app.route("/api/admin/subjects/<int:subject_id>", methods=["DELETE"], endpoint="admin_delete_subject")
    @json_endpoint
    def admin_delete_subject(subject_id: int):
        catalog.delete_subject(subject_id)
        return jsonify({"success": True, "message": "Subject removed successfully."}), 200

from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.http import json_endpoint
from ..container import Container
from .schemas import ClassRangeQuery, MonthlyReportQuery, StudentStatsQuery, TeacherDashboardQuery, day_from_args

_CSV_FIELDS = ["date", "day", "subjects", "present", "absent", "late"]


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    def _write_report_csv(*, report: dict, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=_CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in report["tableData"]:
            writer.writerow(row)

        summary = report["summary"]
        out.write("\n")
        out.write(f"Total days,{summary['total_days']}\n")
        out.write(f"Total present,{summary['total_present']}\n")
        out.write(f"Total absent,{summary['total_absent']}\n")
        out.write(f"Total late,{summary['total_late']}\n")
        out.write(f"Average attendance,{summary['average_attendance_percent']}%\n")

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/admin/report-data", methods=["GET"], endpoint="admin_report_data")
    @json_endpoint
    def admin_report_data():
        query = MonthlyReportQuery.from_args(request.args)
        return jsonify(reports.monthly_course_report(query)), 200

    @app.route("/api/admin/report-data.csv", methods=["GET"], endpoint="admin_report_csv")
    @json_endpoint
    def admin_report_csv():
        query = MonthlyReportQuery.from_args(request.args)
        report = reports.monthly_course_report(query)
        info = report["studentInfo"]
        filename = "_".join(
            str(part).replace(" ", "-")
            for part in ("attendance", info["Program"], info["Department"], f"sem{info['Semester']}", f"{query.year}-{query.month:02d}")
        )
        return _write_report_csv(report=report, filename=f"{filename}.csv")

    @app.route("/api/admin/dashboard-stats", methods=["GET"], endpoint="admin_dashboard_stats")
    @json_endpoint
    def admin_dashboard_stats():
        return jsonify(reports.admin_dashboard_stats(day_from_args(request.args))), 200

    @app.route("/api/teacher/dashboard-stats", methods=["GET"], endpoint="teacher_dashboard_stats")
    @json_endpoint
    def teacher_dashboard_stats():
        query = TeacherDashboardQuery.from_args(request.args)
        return jsonify(reports.teacher_dashboard_stats(query)), 200

    @app.route("/api/teacher/attendance-report", methods=["GET"], endpoint="teacher_attendance_report")
    @json_endpoint
    def teacher_attendance_report():
        query = ClassRangeQuery.from_args(request.args)
        return jsonify(reports.class_range_report(query)), 200

    @app.route("/api/student/attendance-stats", methods=["GET"], endpoint="student_attendance_stats")
    @json_endpoint
    def student_attendance_stats():
        query = StudentStatsQuery.from_args(request.args)
        return jsonify(reports.student_month_stats(query)), 200

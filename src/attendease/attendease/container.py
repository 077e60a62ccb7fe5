from __future__ import annotations

from dataclasses import dataclass

from .academics.mysql_academic_repository import MySQLAcademicRepository
from .academics.service import CatalogService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_DB_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import StudentService
from .teachers.mysql_teacher_repository import MySQLTeacherRepository
from .teachers.service import TeacherService
from .users.mysql_admin_repository import MySQLAdminRepository
from .users.service import AdminService, AuthService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    admin_service: AdminService
    catalog_service: CatalogService
    teacher_service: TeacherService
    student_service: StudentService
    attendance_service: AttendanceService
    report_service: ReportService


def build_services(*, admins, academics, teachers, students, attendance) -> Container:
    """Wire services over any repository implementations (MySQL or in-memory)."""

    catalog_service = CatalogService(academics)
    return Container(
        auth_service=AuthService(admins, teachers, students),
        admin_service=AdminService(admins),
        catalog_service=catalog_service,
        teacher_service=TeacherService(teachers, catalog_service),
        student_service=StudentService(students, catalog_service),
        attendance_service=AttendanceService(attendance),
        report_service=ReportService(attendance, students, teachers, catalog_service),
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", DEFAULT_DB_POOL_SIZE)),
    )
    conn = DatabaseConnection.get_instance(config)

    return build_services(
        admins=MySQLAdminRepository(conn),
        academics=MySQLAcademicRepository(conn),
        teachers=MySQLTeacherRepository(conn),
        students=MySQLStudentRepository(conn),
        attendance=MySQLAttendanceRepository(conn),
    )

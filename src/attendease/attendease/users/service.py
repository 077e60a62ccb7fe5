from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError
from ..students.repository import StudentRepository
from ..teachers.repository import TeacherRepository
from .model import AdminSession, StudentSession, TeacherSession
from .repository import AdminRepository
from .schemas import AdminSignupRequest, LoginRequest

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."


def _password_matches(password_hash: str, password: str) -> bool:
    try:
        return check_password_hash(password_hash, password)
    except ValueError:
        # Unparseable stored hash, such as a seeded placeholder.
        return False


class AuthService:
    """Use case: authenticate admins, teachers and students (login)."""

    def __init__(self, admins: AdminRepository, teachers: TeacherRepository, students: StudentRepository):
        self._admins = admins
        self._teachers = teachers
        self._students = students

    def login_admin(self, req: LoginRequest) -> AdminSession:
        admin = self._admins.get_by_email(req.email)
        if not admin or not _password_matches(admin.password_hash, req.password):
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("Admin %s logged in", admin.admin_id)
        return AdminSession(admin_id=admin.admin_id, name=admin.name, email=admin.email)

    def login_teacher(self, req: LoginRequest) -> TeacherSession:
        teacher = self._teachers.get_by_email(req.email)
        if not teacher or not _password_matches(teacher.password_hash, req.password):
            raise AuthenticationError(INVALID_CREDENTIALS)

        subjects = tuple(self._teachers.list_subjects(teacher.teacher_id))
        logger.info("Teacher %s logged in (%d subjects)", teacher.teacher_id, len(subjects))
        return TeacherSession(
            teacher_id=teacher.teacher_id,
            name=teacher.name,
            email=teacher.email,
            department_id=teacher.department_id,
            subjects=subjects,
        )

    def login_student(self, req: LoginRequest) -> StudentSession:
        student = self._students.get_by_email(req.email)
        if not student or not _password_matches(student.password_hash, req.password):
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("Student %s logged in", student.student_id)
        return StudentSession(
            student_id=student.student_id,
            name=student.name,
            email=student.email,
            roll_number=student.roll_number,
            program_id=student.program_id,
            department_id=student.department_id,
            semester=student.semester,
            program_name=student.program_name,
            department_name=student.department_name,
        )


class AdminService:
    """Use case: manage admin accounts."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def signup(self, req: AdminSignupRequest) -> str:
        admin_id = self._admins.create_admin(
            admin_id=req.admin_id,
            name=req.name,
            email=req.email,
            password_hash=generate_password_hash(req.password),
        )
        logger.info("Admin %s created", admin_id)
        return admin_id

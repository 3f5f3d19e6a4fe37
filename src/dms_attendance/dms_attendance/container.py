from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from .access.policy import RoleBasedAccessControl
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .database.mysql_base import transaction
from .notifications.mysql_notification_scheduler import MySQLNotificationScheduler
from .students.mysql_student_repository import MySQLStudentRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: MySQLUserRepository
    students_repo: MySQLStudentRepository
    attendance_repo: MySQLAttendanceRepository
    notification_scheduler: MySQLNotificationScheduler
    access_control: RoleBasedAccessControl

    auth_service: AuthService
    attendance_service: AttendanceService


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    users_repo = MySQLUserRepository(conn)
    students_repo = MySQLStudentRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    notification_scheduler = MySQLNotificationScheduler(conn)
    access_control = RoleBasedAccessControl()

    auth_service = AuthService(users_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        students_repo,
        access_control,
        notification_scheduler,
        transaction=partial(transaction, conn),
    )

    return Container(
        conn=conn,
        users_repo=users_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        notification_scheduler=notification_scheduler,
        access_control=access_control,
        auth_service=auth_service,
        attendance_service=attendance_service,
    )

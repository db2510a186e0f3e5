from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mongo_entry_repository import MongoEntryRepository
from .attendance.repository import EntryRepository
from .attendance.service import AttendanceService
from .auth.tokens import TokenService
from .core.constants import DEFAULT_TOKEN_TTL_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .users.mongo_user_repository import MongoUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    entries_repo: EntryRepository

    token_service: TokenService
    auth_service: AuthService
    attendance_service: AttendanceService
    report_service: ReportService


def assemble_container(
    *,
    users_repo: UserRepository,
    entries_repo: EntryRepository,
    jwt_secret: str,
    token_ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS,
    password_method: Optional[str] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    token_service = TokenService(jwt_secret, ttl_hours=token_ttl_hours)
    return Container(
        conn=conn,
        users_repo=users_repo,
        entries_repo=entries_repo,
        token_service=token_service,
        auth_service=AuthService(users_repo, token_service, password_method=password_method),
        attendance_service=AttendanceService(entries_repo, users_repo),
        report_service=ReportService(entries_repo, users_repo),
    )


def build_container(*, db_config: dict, jwt_secret: str, token_ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS) -> Container:
    config = DBConfig(
        uri=str(db_config["uri"]),
        database=str(db_config["database"]),
        server_selection_timeout_ms=int(db_config.get("server_selection_timeout_ms", 5000)),
    )
    conn = DatabaseConnection(config)

    return assemble_container(
        users_repo=MongoUserRepository(conn),
        entries_repo=MongoEntryRepository(conn),
        jwt_secret=jwt_secret,
        token_ttl_hours=token_ttl_hours,
        conn=conn,
    )

"""Dependency inversion: depend on abstractions, not on details.

`BusinessLogic` depends on the `Database` contract rather than on `MySQL`.
Any database satisfying the contract can be injected (including a test
double) without changing `BusinessLogic`.

The databases below keep connection parameters only; their queries are stubs
returning empty results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from solid_principles.registry import OperationSignature, define_contract, implement, implements

logger = logging.getLogger(__name__)


class QueryResult(BaseModel):
    backend: str
    sql: str
    rows: list[dict[str, object]] = Field(default_factory=list)


DATABASE = define_contract(
    "Database",
    [OperationSignature("query", ("sql",), returns="QueryResult")],
    description="Executes a SQL query",
)


@implements(DATABASE)
@dataclass(frozen=True, slots=True)
class MySQL:
    host: str = "localhost"
    port: int = 3306
    database: str = "app"

    def query(self, sql: str) -> QueryResult:
        logger.info(
            "MySQL query",
            extra={"host": self.host, "port": self.port, "sql": sql},
        )
        return QueryResult(backend="mysql", sql=sql)


@implements(DATABASE)
@dataclass(frozen=True, slots=True)
class PostgreSQL:
    host: str = "localhost"
    port: int = 5432
    database: str = "app"

    def query(self, sql: str) -> QueryResult:
        logger.info(
            "PostgreSQL query",
            extra={"host": self.host, "port": self.port, "sql": sql},
        )
        return QueryResult(backend="postgresql", sql=sql)


@dataclass(frozen=True, slots=True)
class ProcessingReport:
    backend: str
    row_count: int


class BusinessLogic:
    """High-level policy that only knows the `Database` contract."""

    USERS_QUERY = "SELECT * FROM users"

    def __init__(self, db: Any) -> None:
        self.db = implement(DATABASE, db)

    def process_data(self) -> ProcessingReport:
        result = self.db.query(self.USERS_QUERY)
        report = ProcessingReport(backend=result.backend, row_count=len(result.rows))
        logger.info(
            "Data processed",
            extra={"backend": report.backend, "row_count": report.row_count},
        )
        return report


def run() -> list[str]:
    lines: list[str] = []
    for db in (MySQL(), PostgreSQL()):
        report = BusinessLogic(db).process_data()
        lines.append(f"Processed {report.row_count} row(s) from {report.backend}")
    return lines

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, Sequence

from flask import current_app, g

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "migrations" / "schema.sql"
SEED_PATH = Path(__file__).resolve().parent.parent / "seeds" / "seed.sql"

logger = logging.getLogger(__name__)


class DatabaseError(RuntimeError):
    """Raised when the SQLite layer encounters an unexpected error."""


def get_db() -> sqlite3.Connection:
    if "db" not in g:
        db_path = current_app.config["DATABASE"]
        conn = sqlite3.connect(db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        g.db = conn
    return g.db  # type: ignore[return-value]


def close_db(_: Any) -> None:
    conn = g.pop("db", None)
    if conn is not None:
        conn.close()


def executescript(script: str) -> None:
    db = get_db()
    try:
        db.executescript(script)
    except sqlite3.Error as exc:
        logger.error("script failed: %s", exc)
        raise DatabaseError(str(exc)) from exc


def initialize_schema() -> None:
    script = SCHEMA_PATH.read_text(encoding="utf-8")
    executescript(script)


def seed_database() -> None:
    row = query_one("SELECT COUNT(1) FROM employees")
    if row and row[0]:
        return
    script = SEED_PATH.read_text(encoding="utf-8")
    executescript(script)
    logger.info("seeded database from %s", SEED_PATH.name)


def query_one(sql: str, params: Sequence[Any] | None = None) -> sqlite3.Row | None:
    db = get_db()
    try:
        cur = db.execute(sql, params or [])
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc
    try:
        return cur.fetchone()
    finally:
        cur.close()


def query_all(sql: str, params: Sequence[Any] | None = None) -> list[sqlite3.Row]:
    db = get_db()
    try:
        cur = db.execute(sql, params or [])
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc
    try:
        return cur.fetchall()
    finally:
        cur.close()


def execute(sql: str, params: Sequence[Any] | None = None) -> int:
    db = get_db()
    try:
        cur = db.execute(sql, params or [])
        db.commit()
    except sqlite3.Error as exc:
        db.rollback()
        logger.error("write failed: %s", exc)
        raise DatabaseError(str(exc)) from exc
    return cur.rowcount


def insert(sql: str, params: Sequence[Any]) -> int:
    db = get_db()
    try:
        cur = db.execute(sql, params)
        db.commit()
    except sqlite3.Error as exc:
        db.rollback()
        logger.error("insert failed: %s", exc)
        raise DatabaseError(str(exc)) from exc
    return int(cur.lastrowid)


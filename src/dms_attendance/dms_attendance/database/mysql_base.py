from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import mysql.connector

from ..core.exceptions import StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


def _rollback_quietly(conn) -> None:
    # A failed rollback must not replace the error that caused it.
    try:
        conn.rollback()
    except mysql.connector.Error:
        logger.exception("Rollback failed")


def _close_quietly(conn) -> None:
    try:
        conn.close()
    except mysql.connector.Error:
        logger.exception("Closing connection failed")


@contextmanager
def transaction(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """Explicit transaction scope: acquire, run, commit or roll back.

    Nested scopes join the outer one.
    """

    if conn_factory.pinned() is not None:
        yield conn_factory.pinned()
        return

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise StorageError(f"Database unavailable: {e}") from e

    conn_factory.pin(conn)
    try:
        try:
            yield conn
        except Exception:
            logger.debug("Rolling back transaction")
            _rollback_quietly(conn)
            raise

        try:
            conn.commit()
        except mysql.connector.Error as e:
            _rollback_quietly(conn)
            raise StorageError(f"Commit failed: {e}") from e
    finally:
        conn_factory.unpin()
        _close_quietly(conn)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    pinned = conn_factory.pinned()
    if pinned is not None:
        # Commit/rollback belongs to the enclosing transaction().
        cur = pinned.cursor(dictionary=dictionary)
        try:
            yield pinned, cur
        except mysql.connector.Error as e:
            raise StorageError(str(e)) from e
        finally:
            cur.close()
        return

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise StorageError(f"Database unavailable: {e}") from e
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        _rollback_quietly(conn)
        raise StorageError(str(e)) from e
    except Exception:
        _rollback_quietly(conn)
        raise
    finally:
        _close_quietly(conn)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])

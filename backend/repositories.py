from __future__ import annotations

from datetime import date, datetime, timezone
from uuid import uuid4

from sqlalchemy import text as sql_text

from backend.db import get_sessionmaker

TODOS_TABLE = "todos"
JOURNAL_TABLE = "journal"

TODO_SELECT_COLUMNS = ["id", "owner_id", "text", "completed", "date", "created_at", "updated_at"]
JOURNAL_SELECT_COLUMNS = ["id", "owner_id", "date", "content", "created_at", "updated_at"]


def _new_id() -> str:
    return uuid4().hex


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _day_iso(value) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return date.fromisoformat(str(value).strip()).isoformat()


def _clean_todo_text(value) -> str:
    text = str(value or "").strip()
    if not text:
        raise ValueError("Todo text cannot be empty")
    return text


def _normalize_todo_row(row) -> dict:
    if not row:
        return {}
    payload = dict(row)
    payload["completed"] = bool(int(payload.get("completed") or 0))
    return payload


async def list_todos(owner_id: str, day_iso: str | None = None) -> list[dict]:
    params = {"owner_id": owner_id}
    where = "owner_id = :owner_id"
    if day_iso is not None:
        where += " AND date = :date"
        params["date"] = day_iso
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        rows = (await session.execute(
            sql_text(
                f"""
                SELECT {', '.join(TODO_SELECT_COLUMNS)}
                FROM {TODOS_TABLE}
                WHERE {where}
                ORDER BY date, created_at
                """
            ),
            params,
        )).mappings().all()
    return [_normalize_todo_row(row) for row in rows]


async def get_todo(owner_id: str, todo_id: str) -> dict | None:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        row = (await session.execute(
            sql_text(
                f"SELECT {', '.join(TODO_SELECT_COLUMNS)} FROM {TODOS_TABLE} "
                "WHERE owner_id = :owner_id AND id = :id"
            ),
            {"owner_id": owner_id, "id": todo_id},
        )).mappings().fetchone()
    return _normalize_todo_row(row) if row else None


async def create_todo(owner_id: str, payload: dict) -> dict:
    now = _now_iso()
    record = {
        "id": _new_id(),
        "owner_id": owner_id,
        "text": _clean_todo_text(payload.get("text")),
        "completed": int(bool(payload.get("completed", False))),
        "date": _day_iso(payload.get("date")),
        "created_at": now,
        "updated_at": now,
    }
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(
            sql_text(
                f"""
                INSERT INTO {TODOS_TABLE} (id, owner_id, text, completed, date, created_at, updated_at)
                VALUES (:id, :owner_id, :text, :completed, :date, :created_at, :updated_at)
                """
            ),
            record,
        )
        await session.commit()
    return _normalize_todo_row(record)


async def update_todo(owner_id: str, todo_id: str, patch: dict) -> dict | None:
    updates = []
    params = {"id": todo_id, "owner_id": owner_id}
    for key, value in (patch or {}).items():
        if key == "text":
            params[key] = _clean_todo_text(value)
        elif key == "completed":
            if value is None:
                raise ValueError("Todo completed flag cannot be null")
            params[key] = int(bool(value))
        else:
            continue
        updates.append(f"{key} = :{key}")
    if not updates:
        return await get_todo(owner_id, todo_id)
    updates.append("updated_at = :updated_at")
    params["updated_at"] = _now_iso()
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        result = await session.execute(
            sql_text(
                f"UPDATE {TODOS_TABLE} SET {', '.join(updates)} WHERE id = :id AND owner_id = :owner_id"
            ),
            params,
        )
        await session.commit()
    if result.rowcount == 0:
        return None
    return await get_todo(owner_id, todo_id)


async def delete_todo(owner_id: str, todo_id: str) -> bool:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        result = await session.execute(
            sql_text(f"DELETE FROM {TODOS_TABLE} WHERE owner_id = :owner_id AND id = :id"),
            {"owner_id": owner_id, "id": todo_id},
        )
        await session.commit()
    return result.rowcount > 0


async def list_journal_entries(owner_id: str, day_iso: str | None = None) -> list[dict]:
    params = {"owner_id": owner_id}
    where = "owner_id = :owner_id"
    if day_iso is not None:
        where += " AND date = :date"
        params["date"] = day_iso
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        rows = (await session.execute(
            sql_text(
                f"""
                SELECT {', '.join(JOURNAL_SELECT_COLUMNS)}
                FROM {JOURNAL_TABLE}
                WHERE {where}
                ORDER BY date
                """
            ),
            params,
        )).mappings().all()
    return [dict(row) for row in rows]


async def get_journal_entry(owner_id: str, entry_id: str) -> dict | None:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        row = (await session.execute(
            sql_text(
                f"SELECT {', '.join(JOURNAL_SELECT_COLUMNS)} FROM {JOURNAL_TABLE} "
                "WHERE owner_id = :owner_id AND id = :id"
            ),
            {"owner_id": owner_id, "id": entry_id},
        )).mappings().fetchone()
    return dict(row) if row else None


async def create_journal_entry(owner_id: str, day, content: str) -> dict:
    """Insert the entry for ``day``.

    The (owner_id, date) unique index rejects a second entry for the same
    day with ``IntegrityError``; callers are expected to look the day up
    first and update instead.
    """
    now = _now_iso()
    record = {
        "id": _new_id(),
        "owner_id": owner_id,
        "date": _day_iso(day),
        "content": str(content or ""),
        "created_at": now,
        "updated_at": now,
    }
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(
            sql_text(
                f"""
                INSERT INTO {JOURNAL_TABLE} (id, owner_id, date, content, created_at, updated_at)
                VALUES (:id, :owner_id, :date, :content, :created_at, :updated_at)
                """
            ),
            record,
        )
        await session.commit()
    return record


async def update_journal_entry(owner_id: str, entry_id: str, content: str) -> dict | None:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        result = await session.execute(
            sql_text(
                f"UPDATE {JOURNAL_TABLE} SET content = :content, updated_at = :updated_at "
                "WHERE id = :id AND owner_id = :owner_id"
            ),
            {"id": entry_id, "owner_id": owner_id, "content": str(content or ""), "updated_at": _now_iso()},
        )
        await session.commit()
    if result.rowcount == 0:
        return None
    return await get_journal_entry(owner_id, entry_id)


async def delete_journal_entry(owner_id: str, entry_id: str) -> bool:
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        result = await session.execute(
            sql_text(f"DELETE FROM {JOURNAL_TABLE} WHERE owner_id = :owner_id AND id = :id"),
            {"owner_id": owner_id, "id": entry_id},
        )
        await session.commit()
    return result.rowcount > 0

from dataclasses import dataclass, replace

from dashboard.datekeys import to_date_key


@dataclass(frozen=True)
class Todo:
    id: str
    text: str
    completed: bool
    date: str
    owner_id: str

    @classmethod
    def from_payload(cls, payload):
        return cls(
            id=str(payload["id"]),
            text=str(payload.get("text") or ""),
            completed=bool(payload.get("completed", False)),
            date=to_date_key(payload["date"]),
            owner_id=str(payload.get("owner_id") or ""),
        )

    def with_changes(self, **fields):
        return replace(self, **fields)


@dataclass(frozen=True)
class JournalEntry:
    id: str
    owner_id: str
    date: str
    content: str

    @classmethod
    def from_payload(cls, payload):
        return cls(
            id=str(payload["id"]),
            owner_id=str(payload.get("owner_id") or ""),
            date=to_date_key(payload["date"]),
            content=str(payload.get("content") or ""),
        )

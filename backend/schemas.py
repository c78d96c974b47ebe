from __future__ import annotations

from datetime import date
from typing import Optional, List

from pydantic import BaseModel


class TodoCreate(BaseModel):
    text: str
    completed: bool = False
    date: date


class TodoPatch(BaseModel):
    text: Optional[str] = None
    completed: Optional[bool] = None


class TodoResponse(BaseModel):
    id: str
    owner_id: str
    text: str
    completed: bool
    date: str


class TodoListResponse(BaseModel):
    items: List[TodoResponse]


class JournalEntryCreate(BaseModel):
    date: date
    content: str


class JournalEntryPatch(BaseModel):
    content: str


class JournalEntryResponse(BaseModel):
    id: str
    owner_id: str
    date: str
    content: str


class JournalListResponse(BaseModel):
    items: List[JournalEntryResponse]

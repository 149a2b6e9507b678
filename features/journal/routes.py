"""FastAPI routes for journal feature."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.pydantic_schemas import ok as api_ok
from features.journal.dependencies import get_journal_service
from features.journal.schemas import ChatMessageRequest, CreateEntryRequest
from features.journal.service import JournalService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/journal", tags=["journal"])


@router.get("/entries")
def list_entries(
    limit: Optional[int] = Query(None, ge=1, le=500, description="Return at most this many recent entries"),
    service: JournalService = Depends(get_journal_service),
) -> dict:
    """List saved entries, most recent first."""
    entries = service.list_entries(limit)
    return api_ok(
        "Journal entries retrieved",
        data=[entry.to_wire() for entry in entries],
        meta={"count": len(entries), "limit": limit},
    )


@router.post("/entries")
async def create_entry(
    request: CreateEntryRequest,
    service: JournalService = Depends(get_journal_service),
) -> dict:
    """Analyze and save a new entry; analysis failures never block the save."""
    entry = await service.save_entry(request.content, request.mood)
    return api_ok("Journal entry saved", data=entry.to_wire())


@router.get("/chat")
def list_chat_messages(service: JournalService = Depends(get_journal_service)) -> dict:
    """Return the companion chat history, oldest first."""
    messages = service.list_chat_messages()
    return api_ok(
        "Chat history retrieved",
        data=[message.to_wire() for message in messages],
        meta={"count": len(messages)},
    )


@router.post("/chat")
async def send_chat_message(
    request: ChatMessageRequest,
    service: JournalService = Depends(get_journal_service),
) -> dict:
    """Send a message to the companion using recent entries as context."""
    exchange = await service.send_chat_message(request.message)
    return api_ok("Chat reply generated", data=exchange.to_wire())


__all__ = ["router"]

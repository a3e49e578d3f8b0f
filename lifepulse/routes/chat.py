"""
Defines the chat history endpoints.

A conversation is not stored on its own; it is the set of messages that share
a conversation id.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from .. import schemas, models
from ..auth import get_current_user
from ..repository import HealthRepository, get_repository

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.get("/messages/recent", response_model=List[schemas.ChatMessage])
def get_recent_messages(
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """Returns the messages of the most recently started conversation."""
    return repo.recent_chat_messages(current_user.id)


@router.get("/messages", response_model=List[schemas.ChatMessage])
def get_messages(
    conversation_id: Optional[str] = Query(None, alias="conversationId"),
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """Returns the messages of one conversation in chronological order."""
    if not conversation_id:
        raise HTTPException(status_code=400, detail="Conversation ID required")
    return repo.list_chat_messages(current_user.id, conversation_id)


@router.post("/messages", response_model=schemas.ChatMessage, status_code=status.HTTP_201_CREATED)
def create_message(
    message: schemas.ChatMessageCreate,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    db_message = repo.create_chat_message(current_user.id, **message.model_dump())
    repo.commit()
    return db_message


@router.get("/conversations", response_model=List[schemas.ConversationSummary])
def get_conversations(
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """Lists the user's conversations, each titled after its first user message."""
    return repo.list_conversations(current_user.id)

"""
Defines the wellness companion endpoints: chat replies, vitals-based
suggestions, home remedy suggestions and medicine package analysis.

All answers come from the fixed tables in `lifepulse.services`.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, status

from .. import schemas, models
from ..auth import get_current_user
from ..repository import HealthRepository, get_repository
from ..services import companion, remedies, medicine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["Companion"])


@router.post("/chat", response_model=schemas.CompanionChatResponse, status_code=status.HTTP_201_CREATED)
def chat_with_companion(
    request: schemas.CompanionChatRequest,
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """
    Stores the user's message and the companion's reply in the same conversation.

    A new conversation id is generated when the request does not name one.
    """
    conversation_id = request.conversation_id or str(uuid.uuid4())

    user_message = repo.create_chat_message(
        current_user.id,
        content=request.message,
        sender=schemas.Sender.USER.value,
        conversation_id=conversation_id,
        timestamp=models.utc_now(),
    )
    reply = repo.create_chat_message(
        current_user.id,
        content=companion.get_chat_reply(request.message),
        sender=schemas.Sender.AI.value,
        conversation_id=conversation_id,
        timestamp=models.utc_now(),
    )
    repo.commit()
    logger.info(f"Companion replied to user {current_user.id} in conversation {conversation_id}.")
    return {"user_message": user_message, "reply": reply}


@router.get("/health-suggestions", response_model=schemas.HealthSuggestionsResponse)
def get_health_suggestions(
    repo: HealthRepository = Depends(get_repository),
    current_user: models.User = Depends(get_current_user),
):
    """Suggests three improvements based on the user's vitals snapshot."""
    return companion.get_health_suggestions(repo.get_health_stats(current_user.id))


@router.post("/home-remedies", response_model=schemas.RemedySuggestionResponse)
def suggest_home_remedies(
    request: schemas.RemedySuggestionRequest,
    current_user: models.User = Depends(get_current_user),
):
    return {"remedies": remedies.suggest_home_remedies(request.ailment)}


@router.post("/medicine-analysis", response_model=schemas.MedicineAnalysis)
def analyze_medicine(
    request: schemas.MedicineAnalysisRequest,
    current_user: models.User = Depends(get_current_user),
):
    return medicine.analyze_medicine(request.image)

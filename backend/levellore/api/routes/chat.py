from fastapi import APIRouter, Depends
from typing import List

from ..schemas import ChatPostRequest, ChatMessageResponse, ChatPostResponse
from ...auth.dependencies import get_current_user, get_services
from ...models import Account, ChatMessage
from ...services.service_coordinator import ServiceCoordinator

router = APIRouter(prefix="/chat", tags=["chat"])


def _to_response(message: ChatMessage) -> ChatMessageResponse:
    return ChatMessageResponse(**message.to_dict())


@router.get("", response_model=List[ChatMessageResponse])
async def list_messages(
    current_user: Account = Depends(get_current_user),
    services: ServiceCoordinator = Depends(get_services)
):
    """Most recent messages, oldest first. Clients poll this."""
    messages = await services.chat_service.list_recent()
    return [_to_response(m) for m in messages]


@router.post("", response_model=ChatPostResponse)
async def post_message(
    request: ChatPostRequest,
    current_user: Account = Depends(get_current_user),
    services: ServiceCoordinator = Depends(get_services)
):
    """Post a message to the shared room"""
    message = await services.chat_service.post_message(current_user.username, request.text)
    return ChatPostResponse(message="Sent", data=_to_response(message))

"""
FastAPI Router: Authentication, Personalization Prompt and Diaries

This module defines the HTTP API endpoints exposed by the backend. It handles:
- User signup and login
- Reading and updating the personalization prompt
- Diary generation from a conversation
- Listing, reading and editing the caller's own diaries

Each endpoint validates input via Pydantic models. Domain errors raised by the
core propagate to the handler registered in `diary_backend.main`, which
renders them as `{"error": message}` with the matching status code.
"""

from fastapi import APIRouter, Depends, Request

from diary_backend.api.auth import current_caller
from diary_backend.api.models import (
    ConversationData,
    PromptData,
    ThumbnailData,
    TitleData,
    UserCredentials,
)
from diary_backend.context import AppContext
from diary_backend.domain import CallerIdentity
from diary_backend.exceptions import ValidationError

router = APIRouter()
"""Creates the FastAPI router in which we define its routes"""


def get_context(request: Request) -> AppContext:
    return request.app.state.context


@router.post("/signup")
def signup(data: UserCredentials, ctx: AppContext = Depends(get_context)):
    """
    Register a new user account.

    Request Body
    ------------
    UserCredentials {username: str, password: str}

    Returns
    -------
    dict
        {'ok': True} if registration successful.

    Raises
    ------
    ValidationError 400
        If username or password is missing.
    ConflictError 400
        If the username already exists.
    """
    ctx.credentials.register(data.username, data.password)
    return {"ok": True}


@router.post("/login")
def login(data: UserCredentials, ctx: AppContext = Depends(get_context)):
    """
    Authenticate a user and issue a session token.

    Request Body
    ------------
    UserCredentials {username: str, password: str}

    Returns
    -------
    dict
        {'token': str} if successful.

    Raises
    ------
    CredentialError 400
        If the user does not exist or the password does not match.
    """
    identity = ctx.credentials.verify(data.username, data.password)
    return {"token": ctx.tokens.issue(identity)}


@router.post("/prompt")
def set_prompt(
    data: PromptData,
    caller: CallerIdentity = Depends(current_caller),
    ctx: AppContext = Depends(get_context),
):
    """
    Overwrite the caller's personalization prompt. An empty prompt is valid.

    Request Body
    ------------
    PromptData {prompt: str}
    """
    ctx.credentials.set_prompt(caller.identity_id, data.prompt)
    return {"ok": True}


@router.get("/prompt")
def get_prompt(caller: CallerIdentity = Depends(current_caller), ctx: AppContext = Depends(get_context)):
    """Return {'prompt': str} for the caller, '' when none is set."""
    return {"prompt": ctx.credentials.get_prompt(caller.identity_id)}


@router.post("/diary")
async def create_diary(
    data: ConversationData,
    caller: CallerIdentity = Depends(current_caller),
    ctx: AppContext = Depends(get_context),
):
    """
    Generate a diary entry from a conversation.

    Request Body
    ------------
    ConversationData {conversation: str}

    Returns
    -------
    dict
        {'id': str, 'summary': str}

    Raises
    ------
    ValidationError 400
        If the conversation is missing.
    PipelineFailure 502
        If summarization or video synthesis fails. Nothing is stored.
    """
    created = await ctx.pipeline.run_full_pipeline(caller, data.conversation)
    return {"id": str(created.id), "summary": created.summary}


@router.get("/diaries")
def list_diaries(caller: CallerIdentity = Depends(current_caller), ctx: AppContext = Depends(get_context)):
    """
    List the caller's diaries, most recent first.

    Returns
    -------
    list[dict]
        [{'id': str, 'title': str, 'date': str, 'thumbnail': str}, ...]
    """
    return [d.to_dict() for d in ctx.diaries.list_by_owner(caller.identity_id)]


@router.get("/diary/{diary_id}")
def get_diary(diary_id: str, caller: CallerIdentity = Depends(current_caller), ctx: AppContext = Depends(get_context)):
    """
    Fetch a full diary entry.

    Raises
    ------
    NotFoundError 404
        If the entry does not exist or belongs to another user.
    """
    return ctx.diaries.get(diary_id, caller.identity_id).to_dict()


@router.put("/diary/{diary_id}/title")
def update_title(
    diary_id: str,
    data: TitleData,
    caller: CallerIdentity = Depends(current_caller),
    ctx: AppContext = Depends(get_context),
):
    """
    Rename a diary entry.

    Request Body
    ------------
    TitleData {title: str}
    """
    if data.title is None:
        raise ValidationError("Missing title")
    ctx.diaries.update_title(diary_id, caller.identity_id, data.title)
    return {"ok": True}


@router.put("/diary/{diary_id}/thumbnail")
def update_thumbnail(
    diary_id: str,
    data: ThumbnailData,
    caller: CallerIdentity = Depends(current_caller),
    ctx: AppContext = Depends(get_context),
):
    """
    Set the thumbnail reference of a diary entry.

    Request Body
    ------------
    ThumbnailData {thumbnail: str}
    """
    if data.thumbnail is None:
        raise ValidationError("Missing thumbnail")
    ctx.diaries.update_thumbnail(diary_id, caller.identity_id, data.thumbnail)
    return {"ok": True}

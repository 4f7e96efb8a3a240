import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from replypilot.models.review import (
    ErrorResponse,
    LanguageInfo,
    ReplyResponse,
    ReviewRequest,
)
from replypilot.services.completion_client import (
    GENERIC_ERROR,
    CompletionDispatcher,
    describe_error,
)
from replypilot.services.language_policy import (
    LANGUAGE_POLICIES,
    resolve_language,
    supported_languages,
)
from replypilot.services.prompt_composer import compose_prompts
from replypilot.services.tone_policy import resolve_tone

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["replypilot"])

MISSING_REVIEW_TEXT = "Missing reviewText in request."


def get_dispatcher(request: Request) -> CompletionDispatcher:
    return request.app.state.dispatcher


@router.post(
    "/replypilot",
    response_model=ReplyResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ReviewRequest.model_json_schema(by_alias=True)}}
        }
    },
)
async def generate_reply(
    body: Any = Body(default=None),
    dispatcher: CompletionDispatcher = Depends(get_dispatcher),
):
    """
    Generate a public seller reply for a marketplace review.

    1. Reject blank review text before anything else happens.
    2. Resolve language and tone policies, compose the prompt pair.
    3. Call the completion provider and return its reply.
    """
    # A missing or non-object body carries no fields, so every default applies.
    payload = ReviewRequest.model_validate(body if isinstance(body, dict) else {})
    if not payload.review_text.strip():
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=MISSING_REVIEW_TEXT).model_dump(exclude_none=True),
        )

    try:
        language = resolve_language(payload.language)
        tone_instruction = resolve_tone(payload.rating)
        prompts = compose_prompts(payload, language, tone_instruction)
        reply = await dispatcher.complete(prompts)
    except Exception as exc:
        logger.exception(
            "Reply generation failed | marketplace=%s | language=%s",
            payload.marketplace,
            payload.language,
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=GENERIC_ERROR, details=describe_error(exc)).model_dump(),
        )

    return ReplyResponse(reply=reply)


@router.get("/languages", response_model=list[LanguageInfo])
async def list_languages():
    """List the language codes accepted by /api/replypilot."""
    return [
        LanguageInfo(code=code, label=LANGUAGE_POLICIES[code].label)
        for code in supported_languages()
    ]

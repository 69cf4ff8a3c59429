from __future__ import annotations

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from course_assistant.core.errors import InvalidRequestError
from course_assistant.core.modes import Mode
from course_assistant.schema.assistant import AskRequest, QuizRequest

router = APIRouter(tags=["assistant"])


@router.get("/", response_class=JSONResponse)
async def list_transcripts(request: Request) -> JSONResponse:
    ctx = request.app.state.ctx
    names = await ctx.pipeline.list_transcripts()
    return JSONResponse(names)


@router.options("/")
async def preflight() -> Response:
    # Origin-bearing preflights are answered by CORSMiddleware before reaching here.
    return Response(status_code=204)


@router.post("/", response_class=PlainTextResponse)
async def ask(request: Request) -> PlainTextResponse:
    ctx = request.app.state.ctx
    try:
        data = await request.json()
    except ValueError as e:
        raise InvalidRequestError("Invalid JSON") from e
    if not isinstance(data, dict):
        raise InvalidRequestError("Invalid JSON")

    mode = data.get("mode")
    if "transcript" in data and mode not in (None, Mode.TRANSCRIPT_QUIZ.value):
        raise InvalidRequestError("Conflicting mode and transcript")

    if "transcript" in data or mode == Mode.TRANSCRIPT_QUIZ.value:
        try:
            quiz = QuizRequest.model_validate(data)
        except ValidationError as e:
            raise InvalidRequestError("Missing transcript selection") from e
        text = await ctx.pipeline.generate_quiz(quiz)
    else:
        try:
            question = AskRequest.model_validate(data)
        except ValidationError as e:
            raise InvalidRequestError("Missing mode or question") from e
        text = await ctx.pipeline.answer_question(question)

    return PlainTextResponse(text)

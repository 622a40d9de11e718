from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from api.gemini.schemas import PromptRequest
from gemini_client import GeminiClient, get_client
from .service import ask_default, ask_with_body, ask_with_prompt

router = APIRouter(prefix="/gemini", tags=["gemini"], default_response_class=PlainTextResponse)


@router.get("/ask-default")
def ask_default_route(client: GeminiClient = Depends(get_client)) -> str:
    return ask_default(client)


@router.get("/ask")
def ask_route(
    prompt: str = Query(..., description="Prompt to send to Gemini"),
    client: GeminiClient = Depends(get_client),
) -> str:
    return ask_with_prompt(client, prompt)


@router.post("/ask-body")
def ask_body_route(request: PromptRequest, client: GeminiClient = Depends(get_client)) -> str:
    return ask_with_body(client, request)

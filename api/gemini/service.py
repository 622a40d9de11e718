from api.gemini.schemas import PromptRequest
from gemini_client import GeminiClient, ask_gemini

DEFAULT_PROMPT = "Explain in one short paragraph what a large language model is."


def ask_default(client: GeminiClient) -> str:
    return ask_gemini(DEFAULT_PROMPT, client=client)


def ask_with_prompt(client: GeminiClient, prompt: str) -> str:
    return ask_gemini(prompt, client=client)


def ask_with_body(client: GeminiClient, request: PromptRequest) -> str:
    return ask_gemini(request.prompt, client=client)

from pydantic import BaseModel, Field


class PromptRequest(BaseModel):
    prompt: str = Field(..., description="Prompt to send to Gemini")

import logging
from typing import List, Dict, Any, Optional

import httpx
from openai import OpenAI, OpenAIError
from fastapi import APIRouter, HTTPException

from chefmate.utilities.config import (
    OLLAMA_HOST, OLLAMA_TIMEOUT, DEFAULT_MODEL, DEFAULT_SYSTEM_PROMPT, DEFAULT_TEMPERATURE
)
from chefmate.utilities.validators import ChatInput

logger = logging.getLogger(__name__)


class ChatCompletionError(RuntimeError):
    """The local language model could not be reached or returned an error."""


# === Helper: Get OpenAI-compatible client for Ollama ===
def _get_client() -> OpenAI:
    """Return an OpenAI client bound to Ollama's OpenAI-compatible endpoint."""
    # Ollama ignores the key but the SDK requires one
    return OpenAI(base_url=f"{OLLAMA_HOST}/v1", api_key="ollama", timeout=OLLAMA_TIMEOUT)


# === Chat Completion ===
def complete(prompt: str, model: Optional[str] = None, system_prompt: Optional[str] = None,
             temperature: Optional[float] = None) -> str:
    """Send one prompt to the cooking assistant and return the reply text."""
    model = model or DEFAULT_MODEL
    system_prompt = system_prompt or DEFAULT_SYSTEM_PROMPT
    temperature = DEFAULT_TEMPERATURE if temperature is None else temperature

    client = _get_client()
    try:
        response = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            temperature=temperature,
            stream=False,
        )
    except OpenAIError as e:
        logger.error("Chat completion failed (model=%s): %s", model, e)
        raise ChatCompletionError(f"Language model request failed: {e}") from e

    if not response.choices:
        raise ChatCompletionError("Language model returned no choices")
    return (response.choices[0].message.content or "").strip()


def list_models() -> List[Dict[str, Any]]:
    """Return the models installed on the Ollama server (name, modified_at, size)."""
    try:
        resp = httpx.get(f"{OLLAMA_HOST}/api/tags", timeout=OLLAMA_TIMEOUT)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        logger.error("Listing Ollama models failed: %s", e)
        raise ChatCompletionError(f"Could not list models: {e}") from e
    return [
        {"name": m.get("name", ""), "modified_at": m.get("modified_at"), "size": m.get("size", 0)}
        for m in resp.json().get("models", [])
    ]


# === FastAPI Endpoints ===
router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("")
def chat(payload: ChatInput):
    model = payload.model or DEFAULT_MODEL
    try:
        text = complete(payload.prompt, model, payload.system_prompt, payload.temperature)
    except ChatCompletionError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"response": text, "model": model}


@router.get("/models")
def chat_models():
    try:
        models = list_models()
    except ChatCompletionError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"models": models, "count": len(models)}

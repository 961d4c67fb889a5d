import re
from typing import Dict, List

import requests

from cyclegraph.config import LLM_BASE_URL, LLM_MODEL, LLM_TEMPERATURE, LLM_TIMEOUT
from cyclegraph.errors import LLMNotConfiguredError


class LLMClient:
    """Minimal client for an OpenAI-compatible /chat/completions endpoint."""

    def __init__(
        self,
        base_url: str = LLM_BASE_URL,
        model: str = LLM_MODEL,
        temperature: float = LLM_TEMPERATURE,
        timeout: int = LLM_TIMEOUT,
    ):
        if not base_url:
            raise LLMNotConfiguredError("LLM_BASE_URL is not set in environment variables")
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.timeout = timeout

    def chat(self, messages: List[Dict[str, str]]) -> str:
        response = requests.post(
            f"{self.base_url}/chat/completions",
            json={
                "model": self.model,
                "messages": messages,
                "temperature": self.temperature,
            },
            timeout=self.timeout,
        )
        response.raise_for_status()

        content = response.json()["choices"][0]["message"]["content"]

        # Strip markdown fences
        content = re.sub(r"^```(?:\w+)?\s*", "", content.strip())
        content = re.sub(r"\s*```$", "", content.strip())

        return content

    def generate(self, prompt: str) -> str:
        return self.chat([{"role": "user", "content": prompt}])

"""OpenAI Chat Completions client for recipe generation."""

import json
from dataclasses import dataclass

from openai import APIError, AsyncOpenAI

from leftover_chef.domain.errors import MalformedRemoteResponse, RemoteUnavailable
from leftover_chef.services.generation import RecipeClient


@dataclass
class OpenAIRecipeClient(RecipeClient):
    """Recipe client backed by OpenAI chat completions in JSON mode."""

    client: AsyncOpenAI
    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    max_tokens: int = 2000

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        api_key: str,
        *,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        max_tokens: int = 2000,
        timeout_seconds: float = 30.0,
    ) -> "OpenAIRecipeClient":
        """Create a client that makes a single attempt per request."""
        return cls(
            client=AsyncOpenAI(
                api_key=api_key, timeout=timeout_seconds, max_retries=0
            ),
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )

    async def generate(self, *, system_prompt: str, user_prompt: str) -> object:
        """Request a recipe and return the decoded JSON document."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"},
            )
        except APIError as exc:
            raise RemoteUnavailable(f"OpenAI request failed: {exc}") from exc

        if not response.choices:
            raise MalformedRemoteResponse("OpenAI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise MalformedRemoteResponse("OpenAI returned an empty response")
        try:
            return json.loads(_strip_code_fence(content))
        except json.JSONDecodeError as exc:
            raise MalformedRemoteResponse(f"OpenAI returned invalid JSON: {exc}") from exc

    async def close(self) -> None:
        await self.client.close()


def _strip_code_fence(content: str) -> str:
    """Remove a surrounding Markdown code fence, if any."""
    text = content.strip()
    if text.startswith("```json"):
        text = text[len("```json") :]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()

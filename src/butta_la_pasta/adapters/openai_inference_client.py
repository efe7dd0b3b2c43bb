"""OpenAI Responses API client for cooking time inference."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from butta_la_pasta.services.inference import InferenceClient


@dataclass
class OpenAIInferenceClient(InferenceClient):
    """Inference client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIInferenceClient":
        """Create an OpenAI inference client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        web_search: bool,
        store: bool,
    ) -> str:
        """Send a single-turn prompt and return the response text."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": prompt,
            "store": store,
        }
        if web_search:
            request_payload["tools"] = [{"type": "web_search_preview"}]

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying OpenAI HTTP session."""
        await self.client.close()

"""
AI Gateway client.

The gateway speaks the OpenAI chat-completions protocol, so the official
openai SDK is pointed at it via base_url. Upstream failures are surfaced as
GatewayError carrying the HTTP status so routers can mirror 429/402.
"""

import json
import re
from typing import Any, Dict, Optional

from loguru import logger
from openai import APIConnectionError, APIStatusError, APITimeoutError, AsyncOpenAI


_FENCED_BLOCK_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


class GatewayError(Exception):
    """Raised when the AI gateway call fails"""

    def __init__(self, message: str, status_code: int = 500, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def rate_limited(self) -> bool:
        return self.status_code == 429

    @property
    def out_of_credits(self) -> bool:
        return self.status_code == 402


class ReplyFormatError(GatewayError):
    """The gateway answered but the reply is empty or not the expected JSON"""


def strip_markdown_fences(content: str) -> str:
    """Remove every ```json / ``` fence marker, keeping what is between them"""
    content = content.strip()
    if "```json" in content:
        content = re.sub(r"```json\n?", "", content)
    if "```" in content:
        content = re.sub(r"```\n?", "", content)
    return content.strip()


def extract_json_block(content: str) -> str:
    """Return the first fenced block if there is one, else the whole reply"""
    match = _FENCED_BLOCK_RE.search(content)
    return match.group(1).strip() if match else content.strip()


def parse_json_reply(content: str, first_block_only: bool = False) -> Any:
    """
    Parse a model reply that should be JSON but may be wrapped in markdown.

    Raises:
        json.JSONDecodeError: If the cleaned reply is not valid JSON
    """
    cleaned = extract_json_block(content) if first_block_only else strip_markdown_fences(content)
    return json.loads(cleaned)


class AIGateway:
    """Thin async wrapper over an OpenAI-compatible completions endpoint"""

    def __init__(self, api_key: str, base_url: str, timeout: float = 60.0,
                 client: Optional[Any] = None):
        self.api_key = api_key
        self.base_url = base_url
        self.client = client or AsyncOpenAI(api_key=api_key or "unset", base_url=base_url,
                                            timeout=timeout, max_retries=0)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def complete(self, model: str, system_prompt: str, user_prompt: str) -> str:
        """
        Run one chat completion and return the assistant message text.

        Raises:
            GatewayError: On any upstream failure or an empty reply
        """
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except APIStatusError as e:
            logger.error(f"[AI API Error] status={e.status_code} error={e.message}")
            raise GatewayError("AI service error", e.status_code, e.message) from e
        except (APIConnectionError, APITimeoutError) as e:
            logger.error(f"[AI API Error] gateway unreachable: {e}")
            raise GatewayError("AI service unreachable", 502) from e

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices else None
        if not content:
            raise ReplyFormatError("No content in AI response")
        return content

    async def complete_json(self, model: str, system_prompt: str, user_prompt: str,
                            first_block_only: bool = False,
                            parse_error: str = "Failed to parse AI response") -> Dict[str, Any]:
        content = await self.complete(model, system_prompt, user_prompt)
        try:
            return parse_json_reply(content, first_block_only=first_block_only)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse AI response: {content[:500]}")
            raise ReplyFormatError(parse_error) from e

"""
Completion backends.

Backends satisfy the CompletionClient protocol and are chosen by name
(settings.AI_PROVIDER) through create_ai_client. No shared base class.
"""

import asyncio
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass
class AIConfig:
    provider: str = "mock"
    api_key: str | None = None
    model: str | None = None
    temperature: float = 0.7
    max_tokens: int = 1024


@dataclass
class AIPrompt:
    user: str
    system: str | None = None
    context: dict[str, Any] = field(default_factory=dict)


@dataclass
class AIUsage:
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


@dataclass
class AIResponse:
    content: str
    usage: AIUsage | None = None
    model: str | None = None


@runtime_checkable
class CompletionClient(Protocol):
    async def generate_completion(self, prompt: AIPrompt) -> AIResponse: ...

    def generate_stream(self, prompt: AIPrompt) -> AsyncIterator[str]: ...


class MockCompletionClient:
    """Deterministic backend for development and tests"""

    def __init__(self, config: AIConfig, delay: float = 0.0):
        self.config = config
        self.delay = delay

    async def generate_completion(self, prompt: AIPrompt) -> AIResponse:
        if self.delay:
            await asyncio.sleep(self.delay)
        return AIResponse(
            content=f"Mock AI Response for: {prompt.user}",
            usage=AIUsage(prompt_tokens=50, completion_tokens=100, total_tokens=150),
            model="mock-model",
        )

    async def generate_stream(self, prompt: AIPrompt) -> AsyncIterator[str]:
        for word in f"Mock AI Response for: {prompt.user}".split(" "):
            if self.delay:
                await asyncio.sleep(self.delay)
            yield word + " "


PROVIDERS: dict[str, Callable[[AIConfig], CompletionClient]] = {
    "mock": MockCompletionClient,
}


def create_ai_client(config: AIConfig | str) -> CompletionClient:
    """
    Build the completion backend named by config.provider.

    Raises:
        ValueError: If the provider is not registered
    """
    if isinstance(config, str):
        config = AIConfig(provider=config)
    factory = PROVIDERS.get(config.provider)
    if factory is None:
        raise ValueError(
            f"Unknown AI provider '{config.provider}'. Available: {', '.join(sorted(PROVIDERS))}"
        )
    return factory(config)

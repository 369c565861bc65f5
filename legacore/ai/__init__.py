from legacore.ai.clients import (
    AIConfig,
    AIPrompt,
    AIResponse,
    AIUsage,
    CompletionClient,
    MockCompletionClient,
    create_ai_client,
)
from legacore.ai.utils import classify_sentiment, extract_keywords, score_relevance, summarize

__all__ = [
    "AIConfig",
    "AIPrompt",
    "AIResponse",
    "AIUsage",
    "CompletionClient",
    "MockCompletionClient",
    "create_ai_client",
    "classify_sentiment",
    "extract_keywords",
    "score_relevance",
    "summarize",
]

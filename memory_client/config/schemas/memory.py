"""Memory client config schema.

Typed, immutable result of ``normalize``. Attribute names are snake_case,
aliases carry the camelCase names hosts use in their config sources.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SERVER_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30000
DEFAULT_MIN_SCORE = 0.3
DEFAULT_RECALL_LIMIT = 3


class ExtractionStrategy(str, Enum):
    """Background extraction policy run by the memory server.

    - discrete: semantic and episodic memories (server default)
    - summary: running summary of the conversation
    - preferences: user preferences and settings
    - custom: caller supplied extraction prompt (needs customPrompt)
    """

    DISCRETE = "discrete"
    SUMMARY = "summary"
    PREFERENCES = "preferences"
    CUSTOM = "custom"


VALID_STRATEGIES: Tuple[str, ...] = tuple(s.value for s in ExtractionStrategy)


class MemoryConfig(BaseModel):
    server_url: str = Field(DEFAULT_SERVER_URL, alias="serverUrl")
    api_key: Optional[str] = Field(None, alias="apiKey")
    bearer_token: Optional[str] = Field(None, alias="bearerToken")
    namespace: Optional[str] = Field(None, alias="namespace")
    timeout: int = Field(DEFAULT_TIMEOUT, alias="timeout")  # ms
    auto_capture: bool = Field(True, alias="autoCapture")
    auto_recall: bool = Field(True, alias="autoRecall")
    min_score: float = Field(DEFAULT_MIN_SCORE, alias="minScore")
    recall_limit: int = Field(DEFAULT_RECALL_LIMIT, alias="recallLimit")
    extraction_strategy: Optional[ExtractionStrategy] = Field(
        None, alias="extractionStrategy"
    )
    custom_prompt: Optional[str] = Field(None, alias="customPrompt")

    model_config = ConfigDict(
        extra="forbid", frozen=True, populate_by_name=True
    )

    def as_dict(self) -> Dict[str, Any]:
        """camelCase mapping with absent optional fields left out.

        Feeding the result back into ``normalize`` yields an equal config.
        """
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


MEMORY_CONFIG_FIELDS: Tuple[str, ...] = tuple(
    field.alias or name for name, field in MemoryConfig.model_fields.items()
)

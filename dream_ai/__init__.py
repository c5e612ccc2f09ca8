from .client import AiClient
from .exceptions import ClientNotInitializedError, DreamAIError, RequestConfigurationError
from .extractor import get_content_from_json_string
from .models import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    Choice,
    CompletionTokensDetails,
    ERole,
    ResponseFormat,
    ResponseMessage,
    ToolDeclaration,
    ToolFunction,
    Usage,
)

__all__ = [
    "AiClient",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "Choice",
    "ClientNotInitializedError",
    "CompletionTokensDetails",
    "DreamAIError",
    "ERole",
    "RequestConfigurationError",
    "ResponseFormat",
    "ResponseMessage",
    "ToolDeclaration",
    "ToolFunction",
    "Usage",
    "get_content_from_json_string",
]

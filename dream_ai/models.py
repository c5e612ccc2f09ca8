from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ERole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


# ---------------------------------------------------------------- 请求

class ChatMessage(BaseModel):
    """单条对话消息，构造后不可修改。role 可以是 ERole 或任意字符串。"""
    model_config = ConfigDict(frozen=True)

    role: str = ERole.USER.value  # system/user/assistant
    content: str = ""

    @field_validator("role", mode="before")
    @classmethod
    def _role_name(cls, value: Any) -> Any:
        if isinstance(value, ERole):
            return value.value
        return value


class ResponseFormat(BaseModel):
    type: str = "text"


class ToolFunction(BaseModel):
    description: str = ""
    name: str = ""
    parameters: Any = None  # 任意 JSON，原样透传
    strict: bool = False


class ToolDeclaration(BaseModel):
    type: str = "function"
    function: ToolFunction = Field(default_factory=ToolFunction)


class ChatRequest(BaseModel):
    """
    一次 chat completion 调用的完整请求体。

    所有字段都会被序列化，未设置的字段输出为空值 (null / 0 / false)，
    字段顺序与线上格式一致。
    """
    model: str = ""
    messages: Optional[list[ChatMessage]] = None
    stream: bool = False
    max_tokens: int = 0
    stop: Optional[str] = None
    temperature: float = 0.0
    top_p: float = 0.0
    top_k: int = 0
    frequency_penalty: float = 0.0
    n: int = 0
    response_format: Optional[ResponseFormat] = None
    tools: Optional[list[ToolDeclaration]] = None

    def build_payload(self) -> dict:
        return self.model_dump(mode="json")

    def build_string(self) -> str:
        return self.model_dump_json()


# ---------------------------------------------------------------- 响应
# 上游返回的字段可能缺失或为 null，所以全部可选

class ResponseMessage(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None
    reasoning_content: Optional[str] = None


class Choice(BaseModel):
    index: Optional[int] = None
    message: Optional[ResponseMessage] = None
    finish_reason: Optional[str] = None


class CompletionTokensDetails(BaseModel):
    reasoning_tokens: Optional[int] = None


class Usage(BaseModel):
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None
    completion_tokens_details: Optional[CompletionTokensDetails] = None


class ChatResponse(BaseModel):
    id: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    choices: Optional[list[Optional[Choice]]] = None
    usage: Optional[Usage] = None
    system_fingerprint: Optional[str] = None

    def first_content(self) -> Optional[str]:
        if not self.choices:
            return None
        choice = self.choices[0]
        if choice is None or choice.message is None:
            return None
        return choice.message.content

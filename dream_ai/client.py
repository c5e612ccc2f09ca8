import os
import asyncio
import logging
from typing import Optional

import requests

from .models import ChatMessage, ChatRequest, ResponseFormat, ToolDeclaration
from .exceptions import ClientNotInitializedError, RequestConfigurationError

logger = logging.getLogger("dream_ai.client")

# Configuration
DREAM_AI_API_KEY = os.getenv("DREAM_AI_API_KEY")
DREAM_AI_ENDPOINT = os.getenv("DREAM_AI_ENDPOINT", "https://api.openai.com/v1/chat/completions")
DREAM_AI_MODEL = os.getenv("DREAM_AI_MODEL", "gpt-4o-mini")
DREAM_AI_TIMEOUT = os.getenv("DREAM_AI_TIMEOUT")


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    # 未设置时沿用 requests 的默认行为（不超时）
    if not value:
        return None
    return float(value)


class AiClient:
    """
    chat completion 客户端。

    同一个对象既是请求体的构造器（链式 set_* / add_message），
    也负责把请求 POST 到配置好的地址。构造器状态不是线程安全的，
    并发时请为每个请求单独构造 ChatRequest 并调用 send(request)。
    """

    def __init__(self, timeout: Optional[float] = None):
        self._api_key = ""
        self._base_url = ""
        self._timeout = timeout
        self._request_body = ChatRequest()
        self._session = requests.Session()

    @classmethod
    def from_env(cls) -> "AiClient":
        client = cls(timeout=_parse_timeout(DREAM_AI_TIMEOUT))
        client.initialize_client(DREAM_AI_API_KEY or "", DREAM_AI_ENDPOINT)
        return client

    # ------------------------------------------------------------ 请求体

    def reset(self) -> "AiClient":
        self._request_body = ChatRequest()
        return self

    def get_request_body(self) -> ChatRequest:
        return self._request_body

    def set_model(self, model: str) -> "AiClient":
        self._request_body.model = model
        return self

    def set_stream(self, stream: bool) -> "AiClient":
        self._request_body.stream = stream
        return self

    def set_max_tokens(self, max_tokens: int) -> "AiClient":
        self._request_body.max_tokens = max_tokens
        return self

    def set_temperature(self, temperature: float) -> "AiClient":
        self._request_body.temperature = temperature
        return self

    def set_top_p(self, top_p: float) -> "AiClient":
        self._request_body.top_p = top_p
        return self

    def set_top_k(self, top_k: int) -> "AiClient":
        self._request_body.top_k = top_k
        return self

    def set_frequency_penalty(self, frequency_penalty: float) -> "AiClient":
        self._request_body.frequency_penalty = frequency_penalty
        return self

    def set_n(self, n: int) -> "AiClient":
        self._request_body.n = n
        return self

    def set_stop(self, stop: str) -> "AiClient":
        self._request_body.stop = stop
        return self

    def set_response_format(self, response_format: ResponseFormat) -> "AiClient":
        self._request_body.response_format = response_format
        return self

    def set_tools(self, tools: list[ToolDeclaration]) -> "AiClient":
        self._request_body.tools = tools
        return self

    def set_request_body(self, request_body: ChatRequest) -> "AiClient":
        self._request_body = request_body
        return self

    def add_message(self, message: ChatMessage) -> "AiClient":
        if self._request_body.messages is None:
            self._request_body.messages = []
        self._request_body.messages.append(message)
        return self

    # ------------------------------------------------------------ 发送

    def initialize_client(self, api_key: str, base_url: str) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._session.headers["Authorization"] = f"Bearer {self._api_key}"

    def send(self, request: Optional[ChatRequest] = None) -> str:
        """
        发送请求并返回原始响应文本，不解析 JSON，也不检查状态码。
        不传 request 时发送构造器当前累积的请求体。
        """
        body = request if request is not None else self._request_body
        if not self._base_url:
            raise ClientNotInitializedError("send() 之前需要先调用 initialize_client()")
        if not body.messages:
            raise RequestConfigurationError("请求至少需要一条消息")

        logger.debug(f"发送请求 -> {self._base_url} (model={body.model}, messages={len(body.messages)})")
        try:
            response = self._session.post(
                self._base_url,
                data=body.build_string().encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
            data = response.text
        except Exception as e:
            logger.error(f"上游API连接失败: {e}")
            raise
        logger.debug(f"收到响应 ({response.status_code}, {len(data)} chars)")
        return data

    async def send_async(self, request: Optional[ChatRequest] = None) -> str:
        # 在进入线程之前拍下请求快照
        body = request if request is not None else self._request_body.model_copy(deep=True)
        return await asyncio.to_thread(self.send, body)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "AiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

# extractor.py

import logging
from typing import Optional

from pydantic import TypeAdapter

from .models import ChatResponse

logger = logging.getLogger("dream_ai.extractor")

# 顶层为 null 时当作没有候选
_response_adapter = TypeAdapter(Optional[ChatResponse])

TOOL_CALL_SENTINEL = "<tool_call>"
TOOL_CALL_MESSAGE = "This response requires the execution of a tool call, please further process as required."
NO_CHOICES_MESSAGE = "No selection or content is empty"
NO_CONTENT_MESSAGE = "No content returned"


def get_content_from_json_string(json_response: str) -> str:
    """
    从上游返回的原始 JSON 文本中取出第一个候选的回答内容。
    这个函数不会抛出异常，任何解析失败都以文本形式返回。

    Args:
        json_response (str): 上游返回的原始响应体。

    Returns:
        str: 回答内容；工具调用时返回固定提示；
             没有候选或没有内容时返回固定的兜底文本；
             解析失败时返回错误描述。
    """
    try:
        response = _response_adapter.validate_json(json_response)
    except Exception as e:
        logger.warning(f"解析响应失败: {e}")
        return f"An error has occurred: {e}"

    if response is None or not response.choices:
        return NO_CHOICES_MESSAGE

    content = response.first_content()
    # 工具调用只有占位符，没有结构化参数
    if content == TOOL_CALL_SENTINEL:
        return TOOL_CALL_MESSAGE
    if not content:
        return NO_CONTENT_MESSAGE
    return content

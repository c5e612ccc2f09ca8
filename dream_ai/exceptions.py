class DreamAIError(Exception):
    """dream_ai 自身抛出的错误基类"""


class ClientNotInitializedError(DreamAIError):
    """发送前没有调用 initialize_client"""


class RequestConfigurationError(DreamAIError):
    """请求体不完整，例如没有任何消息"""

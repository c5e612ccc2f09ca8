import sys
import argparse
import logging

from . import client as client_config
from .client import AiClient
from .exceptions import DreamAIError
from .extractor import get_content_from_json_string
from .models import ChatMessage, ERole

logger = logging.getLogger("dream_ai")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dream_ai", description="向 chat completion 接口发送一条消息")
    ap.add_argument("prompt", help="用户消息")
    ap.add_argument("--system", help="可选的 system 消息")
    ap.add_argument("--model", default=client_config.DREAM_AI_MODEL)
    ap.add_argument("--max-tokens", type=int, default=512)
    ap.add_argument("--temperature", type=float, default=0.8)
    ap.add_argument("--top-p", type=float, default=1.0)
    ap.add_argument("--endpoint", default=client_config.DREAM_AI_ENDPOINT)
    ap.add_argument("--api-key", default=client_config.DREAM_AI_API_KEY)
    ap.add_argument("--raw", action="store_true", help="输出原始响应而不是提取后的回答")
    ap.add_argument("--verbose", action="store_true")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        timeout = client_config._parse_timeout(client_config.DREAM_AI_TIMEOUT)
    except ValueError:
        logger.error(f"配置错误: DREAM_AI_TIMEOUT 不是数字: {client_config.DREAM_AI_TIMEOUT!r}")
        return 2

    with AiClient(timeout=timeout) as ai:
        ai.initialize_client(args.api_key or "", args.endpoint)
        ai.set_model(args.model).set_max_tokens(args.max_tokens)
        ai.set_temperature(args.temperature).set_top_p(args.top_p)
        if args.system:
            ai.add_message(ChatMessage(role=ERole.SYSTEM, content=args.system))
        ai.add_message(ChatMessage(role=ERole.USER, content=args.prompt))

        try:
            data = ai.send()
        except DreamAIError as e:
            logger.error(f"配置错误: {e}")
            return 2
        except Exception:
            # send() 已经记录了错误
            return 1

    print(data if args.raw else get_content_from_json_string(data))
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Extract 发送客户端。

POST UTF-8 JSON 到下游 intake 接口，返回 True / False。
任何非 2xx 响应或网络异常都转成 False，不往上抛。
重试由 tasks.deliver_extract 负责，这里只发一次。
"""

import json
import logging
from typing import Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def post_extract(extract_url: str, extract: dict, timeout: Optional[float] = None) -> bool:
    """
    发送 extract。

    Args:
        extract_url: 下游 intake 接口地址
        extract:     serialize_extract() 的结果
        timeout:     秒；默认 settings.EXTRACT_TIMEOUT
    """
    if timeout is None:
        timeout = getattr(settings, "EXTRACT_TIMEOUT", 10)

    body = json.dumps(extract, ensure_ascii=False).encode("utf-8")

    try:
        response = requests.post(
            extract_url,
            data=body,
            headers={"Content-Type": JSON_CONTENT_TYPE},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        logger.error("SendDrExtract API call failed: %s", exc)
        return False

    if not response.ok:
        logger.error("SendDrExtract API call failed: %s %s", response.status_code, response.reason)
        return False

    logger.info("SendDrExtract API call successful.")
    return True

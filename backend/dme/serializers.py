"""
Response serializers — ExtractedOrder → JSON-able dict。

只负责「输出格式化」：枚举转符号名，删除空字段。
字段检测已在 dme/extraction/ 完成。
"""

import json
from enum import Enum

from .extraction.types import UNKNOWN, ExtractedOrder

# 这两个字段永远输出，空值时回退成 "Unknown"
REQUIRED_FIELDS = ("device", "ordering_provider")


def _plain(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def serialize_extract(order: ExtractedOrder) -> dict:
    """Serialize extract, dropping None / "" / [] fields."""
    fields = {
        'device':            order.device,
        'liters':            order.liters,
        'usage':             order.usage,
        'diagnosis':         order.diagnosis,
        'mask_type':         order.mask_type,
        'add_ons':           order.add_ons,
        'qualifier':         order.qualifier,
        'ordering_provider': order.ordering_provider,
        'patient_name':      order.patient_name,
        'dob':               order.dob,
    }

    result = {}
    for name, value in fields.items():
        value = _plain(value)
        if value is None or value == "" or value == []:
            if name not in REQUIRED_FIELDS:
                continue
            value = UNKNOWN
        result[name] = value
    return result


def render_extract(extract: dict) -> str:
    """UTF-8 JSON 文本，用于日志和发送。"""
    return json.dumps(extract, indent=2, ensure_ascii=False)

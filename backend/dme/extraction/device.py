"""
设备类型识别。

按固定优先级做大小写不敏感的子串匹配，第一个命中即返回：
  CPAP → Oxygen Tank → Wheelchair → Unknown

同时提到 CPAP 和 Oxygen Tank 的笔记归为 CPAP。
"""

from ..enums import DeviceType
from .text import contains_phrase

# 顺序即优先级
DEVICE_KEYWORDS: list[tuple[str, DeviceType]] = [
    ("CPAP",        DeviceType.CPAP),
    ("Oxygen Tank", DeviceType.OXYGEN_TANK),
    ("Wheelchair",  DeviceType.WHEELCHAIR),
]


def get_device_type(note: str) -> DeviceType:
    for keyword, device in DEVICE_KEYWORDS:
        if contains_phrase(note, keyword):
            return device
    return DeviceType.UNKNOWN

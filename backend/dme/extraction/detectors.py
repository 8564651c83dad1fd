"""
各字段 detector。

每个 detector 都是纯函数：输入笔记文本（以及必要时的设备类型），
输出字段值或 None。对任何字符串都不抛异常。

设备相关：
  get_mask_type            — 只对 CPAP
  get_oxygen_tank_liters   — 只对 OxygenTank
  get_oxygen_tank_use_type — 只对 OxygenTank
设备无关：
  get_add_on_type / get_qualifier / get_provider_name
"""

import re
from typing import Optional

from ..enums import AddOnType, DeviceType, MaskType, OxygenTankUseType
from .text import contains_phrase, rest_of_line, search_phrase
from .types import UNKNOWN

QUALIFIER = "AHI > 20"

# "2.5 L" / "2.5L" / "3 l"；数字和 L 之间只允许同一行内的空白
LITERS_RE = re.compile(r"(\d+(?:\.\d+)?)[^\S\r\n]*L", re.IGNORECASE)


# ── CPAP ───────────────────────────────────────────────────────────────────

def get_mask_type(note: str, device: DeviceType) -> Optional[MaskType]:
    if device == DeviceType.CPAP and contains_phrase(note, "full face"):
        return MaskType.FULL_FACE
    return None


# ── 设备无关 ───────────────────────────────────────────────────────────────

def get_add_on_type(note: str) -> Optional[AddOnType]:
    if contains_phrase(note, "humidifier"):
        return AddOnType.HUMIDIFIER
    return None


def get_qualifier(note: str) -> str:
    """命中时返回固定字面量 "AHI > 20"，否则返回 ""（序列化时会被删掉）。"""
    if contains_phrase(note, QUALIFIER):
        return QUALIFIER
    return ""


def get_provider_name(note: str) -> str:
    """
    从第一个 "Dr."（大小写不敏感）取到当前行末尾，去掉结尾的句点。

    "Ordered by Dr. Cameron."  →  "Dr. Cameron"
    只认第一次出现；换行之后的内容不取。找不到 → "Unknown"。
    """
    match = search_phrase(note, "Dr.")
    if match is None:
        return UNKNOWN
    return rest_of_line(note, match.start()).rstrip(".")


# ── Oxygen Tank ────────────────────────────────────────────────────────────

def get_oxygen_tank_liters(note: str, device: DeviceType) -> Optional[str]:
    """第一个 "<数字> L" → 统一成 "<数字> L"（单个空格）。"""
    if device != DeviceType.OXYGEN_TANK:
        return None

    match = LITERS_RE.search(note)
    if match is None:
        return None
    return f"{match.group(1)} L"


def get_oxygen_tank_use_type(note: str, device: DeviceType) -> Optional[OxygenTankUseType]:
    if device != DeviceType.OXYGEN_TANK:
        return None

    sleep = contains_phrase(note, "sleep")
    exertion = contains_phrase(note, "exertion")

    if sleep and exertion:
        return OxygenTankUseType.SLEEP_AND_EXERTION
    if sleep:
        return OxygenTankUseType.SLEEP
    if exertion:
        return OxygenTankUseType.EXERTION
    return None

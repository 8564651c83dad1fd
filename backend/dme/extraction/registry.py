"""
Detector 注册表：字段名 → detector。

新增字段只需：
  1. 在 detectors.py 新建一个纯函数
  2. 在此处 _build_registry 加一行
  不需要修改 assembler 或任何业务代码。

key 即序列化字段名，顺序即输出顺序（device 由 assembler 单独处理，永远排第一）。
value 统一签名 (note, device) -> 字段值；设备无关的 detector 忽略 device。
"""

from typing import Any, Callable

from ..enums import DeviceType
from .detectors import (
    get_add_on_type,
    get_mask_type,
    get_oxygen_tank_liters,
    get_oxygen_tank_use_type,
    get_provider_name,
    get_qualifier,
)
from .labels import DIAGNOSIS_LABEL, DOB_LABEL, PATIENT_NAME_LABEL, get_label_value

FieldDetector = Callable[[str, DeviceType], Any]


def _label(label: str) -> FieldDetector:
    return lambda note, device: get_label_value(note, label)


def _add_ons(note: str, device: DeviceType) -> tuple:
    add_on = get_add_on_type(note)
    return (add_on,) if add_on is not None else ()


def _build_registry() -> dict[str, FieldDetector]:
    return {
        "liters":            get_oxygen_tank_liters,
        "usage":             get_oxygen_tank_use_type,
        "diagnosis":         _label(DIAGNOSIS_LABEL),
        "mask_type":         get_mask_type,
        "add_ons":           _add_ons,
        "qualifier":         lambda note, device: get_qualifier(note),
        "ordering_provider": lambda note, device: get_provider_name(note),
        "patient_name":      _label(PATIENT_NAME_LABEL),
        "dob":               _label(DOB_LABEL),
    }


def get_detectors() -> dict[str, FieldDetector]:
    """每次返回新的注册表，调用方修改它不会影响其他请求。"""
    return _build_registry()

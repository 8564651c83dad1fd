"""
Extract 组装器。

流程：get_device_type → 注册表里每个 detector → ExtractedOrder

device 只识别一次，所有 detector 共用同一个 note 和 device。
任何 detector 意外抛错 → 整条笔记组装失败，抛 ExtractionError（不吞掉）。
"""

import logging
from typing import Optional

from ..exceptions import ExtractionError
from .device import get_device_type
from .registry import FieldDetector, get_detectors
from .types import ExtractedOrder

logger = logging.getLogger(__name__)


def create_extract(note: str, detectors: Optional[dict[str, FieldDetector]] = None) -> ExtractedOrder:
    """
    把一条医生笔记组装成 ExtractedOrder。

    Args:
        note:      原始笔记文本
        detectors: 字段名 → detector；默认用 registry.get_detectors()

    Raises:
        ExtractionError: 任何 detector 意外失败
    """
    if detectors is None:
        detectors = get_detectors()

    field_name = "device"
    try:
        device = get_device_type(note)
        values = {}
        for field_name, detect in detectors.items():
            values[field_name] = detect(note, device)
        field_name = "record"
        return ExtractedOrder(device=device, **values)
    except Exception as exc:
        logger.error("Error creating JSON extract (field=%s): %s", field_name, exc)
        raise ExtractionError(
            message=f"Failed to build extract: {exc}",
            detail={"field": field_name},
        ) from exc


def create_extract_json(note: str) -> dict:
    """create_extract + serialize_extract，返回已删除空字段的 dict。"""
    # 延迟导入，避免循环依赖
    from ..serializers import serialize_extract

    return serialize_extract(create_extract(note))

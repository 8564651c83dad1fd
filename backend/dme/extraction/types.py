"""
ExtractedOrder dataclass — 整个系统唯一认识的标准 extract 格式。

所有 detector 的结果由 assembler 汇总成这个结构。
serializers.py 只消费这个结构，负责删除空字段后输出 JSON。
"""

from dataclasses import dataclass
from typing import Optional

from ..enums import AddOnType, DeviceType, MaskType, OxygenTankUseType

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ExtractedOrder:
    """
    标准 DME 订单 extract。

    device             必有，识别不到时为 DeviceType.UNKNOWN。
    mask_type          只在 CPAP 时可能有值。
    liters / usage     只在 OxygenTank 时可能有值。
    qualifier          找不到时为 ""，序列化时被删掉。
    ordering_provider  找不到时为 "Unknown"。
    diagnosis / patient_name / dob   标签不存在时为 "Unknown"。

    frozen=True：组装完成后不可修改。
    """

    device: DeviceType = DeviceType.UNKNOWN
    liters: Optional[str] = None
    usage: Optional[OxygenTankUseType] = None
    diagnosis: str = UNKNOWN
    mask_type: Optional[MaskType] = None
    add_ons: tuple[AddOnType, ...] = ()
    qualifier: str = ""
    ordering_provider: str = UNKNOWN
    patient_name: str = UNKNOWN
    dob: str = UNKNOWN

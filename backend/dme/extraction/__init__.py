from .assembler import create_extract, create_extract_json
from .device import get_device_type
from .detectors import (
    get_add_on_type,
    get_mask_type,
    get_oxygen_tank_liters,
    get_oxygen_tank_use_type,
    get_provider_name,
    get_qualifier,
)
from .labels import get_label_value
from .registry import get_detectors
from .types import ExtractedOrder

__all__ = [
    "ExtractedOrder",
    "create_extract",
    "create_extract_json",
    "get_add_on_type",
    "get_detectors",
    "get_device_type",
    "get_label_value",
    "get_mask_type",
    "get_oxygen_tank_liters",
    "get_oxygen_tank_use_type",
    "get_provider_name",
    "get_qualifier",
]

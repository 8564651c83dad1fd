"""
封闭集合枚举。

value 就是序列化时的符号名（"OxygenTank" / "FullFace" / ...），
下游 intake 接口只认这些字符串。
"""

from enum import Enum


class DeviceType(str, Enum):
    UNKNOWN     = "Unknown"
    CPAP        = "CPAP"
    OXYGEN_TANK = "OxygenTank"
    WHEELCHAIR  = "WheelChair"


class MaskType(str, Enum):
    FULL_FACE = "FullFace"


class AddOnType(str, Enum):
    HUMIDIFIER = "Humidifier"


class OxygenTankUseType(str, Enum):
    SLEEP              = "Sleep"
    EXERTION           = "Exertion"
    SLEEP_AND_EXERTION = "SleepAndExertion"

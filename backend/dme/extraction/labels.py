"""
通用 "Label: value" 解析器。

用于 Diagnosis: / Patient Name: / DOB: 这类单行字段：
  "Diagnosis: Asthma\nOther: Value"  →  "Asthma"

标签在最后一行且没有换行时，值一直取到文本结尾。
"""

from .text import rest_of_line, search_phrase
from .types import UNKNOWN

DIAGNOSIS_LABEL    = "Diagnosis:"
PATIENT_NAME_LABEL = "Patient Name:"
DOB_LABEL          = "DOB:"


def get_label_value(note: str, label: str) -> str:
    """
    大小写不敏感地查找 label，返回其后到行末（CRLF / LF / CR 都算换行）之间的内容（去掉首尾空白）。

    label 不存在 → "Unknown"。
    """
    match = search_phrase(note, label)
    if match is None:
        return UNKNOWN

    return rest_of_line(note, match.end()).strip()

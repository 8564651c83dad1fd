"""
医生笔记读取。

读一次，失败就回退到 DEFAULT_NOTE —— 不先判断文件是否存在再读，
读取相关的 I/O 错误在这里消化掉，永远不抛给 extraction 层。
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_NOTE = "Patient needs a CPAP with full face mask and humidifier. AHI > 20. Ordered by Dr. Cameron."


def get_physician_note(file_name) -> str:
    """
    读取笔记文件内容。

    文件不存在 / 无权限 / 是目录 / 不是 UTF-8 → 记录日志，返回 DEFAULT_NOTE。
    """
    try:
        return Path(file_name).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading %s: %s", file_name, exc)
        return DEFAULT_NOTE

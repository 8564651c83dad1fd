"""大小写不敏感的子串查找。返回的下标对应原始字符串，不受 lower() 改变长度影响。"""

import re
from typing import Optional

# 行结束：\r\n / \n / \r 都算
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def search_phrase(note: str, phrase: str) -> Optional[re.Match]:
    return re.search(re.escape(phrase), note, re.IGNORECASE)


def contains_phrase(note: str, phrase: str) -> bool:
    return search_phrase(note, phrase) is not None


def rest_of_line(note: str, start: int) -> str:
    """从 start 到当前行末尾（不含换行符）；没有换行则到文本结尾。"""
    return LINE_BREAK_RE.split(note[start:], maxsplit=1)[0]

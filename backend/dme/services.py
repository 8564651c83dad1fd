import logging

from .exceptions import ExtractionError
from .extraction import create_extract_json
from .notes import get_physician_note
from .serializers import render_extract
from .transport import post_extract

logger = logging.getLogger(__name__)


def extract_and_send(note, extract_url):
    """
    解析笔记并发送到 extract_url，返回 True / False。

    组装失败（ExtractionError）在这里记录并转成 False；
    失败原因只能从日志看到，返回值只有成功 / 失败。
    """
    logger.info("Original note: \n%s", note)

    try:
        extract = create_extract_json(note)
    except ExtractionError as exc:
        logger.error("Error SendDrExtract: %s", exc.message)
        return False

    logger.info("JSON extract to send: \n%s", render_extract(extract))

    return post_extract(extract_url, extract)


def send_dr_extract(note_reference, extract_url):
    """Read the physician note from disk and deliver its extract."""
    note = get_physician_note(note_reference)
    return extract_and_send(note, extract_url)

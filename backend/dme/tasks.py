import logging

from celery import shared_task
from django.conf import settings

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    max_retries=getattr(settings, 'EXTRACT_MAX_RETRIES', 3),
    default_retry_delay=getattr(settings, 'EXTRACT_RETRY_DELAY', 10),   # 指数退避会乘以 2^retry_count
    acks_late=True,           # 任务执行完才 ack，防止 worker 崩溃时任务丢失
    reject_on_worker_lost=True,
)
def deliver_extract(self, note: str, extract_url: str):
    """
    异步解析并发送 extract。

    重试策略：
      - 发送失败（返回 False）最多重试 EXTRACT_MAX_RETRIES 次
      - 指数退避：10s → 20s → 40s
      - 组装失败不重试（同一段文本再试也一样）
    """
    from dme.exceptions import ExtractionError
    from dme.extraction import create_extract_json
    from dme.transport import post_extract

    logger.info("[Celery][deliver_extract] 开始发送 extract → %s (attempt %d/%d)",
                extract_url, self.request.retries + 1, self.max_retries + 1)

    try:
        extract = create_extract_json(note)
    except ExtractionError as exc:
        logger.error("[Celery] extract 组装失败，不重试: %s", exc.message)
        return False

    if post_extract(extract_url, extract):
        logger.info("[Celery] extract 发送成功 → %s", extract_url)
        return True

    if self.request.retries < self.max_retries:
        # 指数退避：countdown = 10 * 2^retries → 10s, 20s, 40s
        countdown = self.default_retry_delay * (2 ** self.request.retries)
        logger.info(
            "[Celery] 将在 %ds 后重试 (第 %d 次)...",
            countdown, self.request.retries + 1
        )
        raise self.retry(countdown=countdown)

    logger.error("[Celery] extract → %s 已达最大重试次数，放弃", extract_url)
    return False

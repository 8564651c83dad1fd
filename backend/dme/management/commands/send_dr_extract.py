"""
python manage.py send_dr_extract [--note-file PATH] [--url URL]

读取医生笔记 → 解析 extract → POST 到 intake 接口。
发送失败时以非零状态码退出。
"""

import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from dme.services import send_dr_extract

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Extract a DME order from a physician note file and send it to the intake endpoint."

    def add_arguments(self, parser):
        parser.add_argument(
            '--note-file',
            default=None,
            help='Physician note file (default: settings.PHYSICIAN_NOTE_FILE).',
        )
        parser.add_argument(
            '--url',
            default=None,
            help='Intake endpoint (default: settings.EXTRACT_URL).',
        )

    def handle(self, *args, **options):
        note_file = options['note_file'] or settings.PHYSICIAN_NOTE_FILE
        extract_url = options['url'] or settings.EXTRACT_URL

        if not extract_url:
            raise CommandError('No extract URL given. Pass --url or set EXTRACT_URL.')

        logger.info("[send_dr_extract] note_file=%s url=%s", note_file, extract_url)

        if not send_dr_extract(note_file, extract_url):
            logger.error("[send_dr_extract] Error sending physician extract.")
            raise CommandError('Error sending physician extract.')

        self.stdout.write(self.style.SUCCESS(f'Physician extract sent to {extract_url}.'))

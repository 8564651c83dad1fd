from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import ValidationError
from .extraction import create_extract_json


class ExtractCreateView(APIView):
    """
    POST /api/extracts/ - 把医生笔记解析成结构化 extract

    请求体：
      {"note": "...", "deliver": false, "extract_url": "https://..."}

    deliver=false → 200，直接返回 extract
    deliver=true  → 202，交给 Celery 异步发送到 extract_url（默认 settings.EXTRACT_URL）
    """

    def post(self, request):
        data = request.data if isinstance(request.data, dict) else {}

        note = data.get('note')
        if not isinstance(note, str) or not note.strip():
            raise ValidationError(
                message="Field 'note' is required and must be non-empty text.",
                code='MISSING_NOTE',
                detail={'field': 'note'},
            )

        deliver = data.get('deliver', False)
        if not isinstance(deliver, bool):
            raise ValidationError(
                message="Field 'deliver' must be a JSON boolean.",
                code='INVALID_DELIVER',
                detail={'field': 'deliver'},
            )

        extract_url = data.get('extract_url')
        if extract_url is not None and not isinstance(extract_url, str):
            raise ValidationError(
                message="Field 'extract_url' must be a string.",
                code='INVALID_EXTRACT_URL',
                detail={'field': 'extract_url'},
            )

        # ExtractionError 不在这里处理，exception_handler 统一兜底
        extract = create_extract_json(note)

        if not deliver:
            return Response(extract)

        extract_url = (extract_url or '').strip() or settings.EXTRACT_URL
        if not extract_url:
            raise ValidationError(
                message='No extract URL given and EXTRACT_URL is not configured.',
                code='MISSING_EXTRACT_URL',
                detail={'field': 'extract_url'},
            )

        from dme.tasks import deliver_extract
        deliver_extract.delay(note, extract_url)

        return Response(
            {
                'status': 'queued',
                'extract_url': extract_url,
                'extract': extract,
            },
            status=status.HTTP_202_ACCEPTED,
        )

"""
统一异常体系。

所有业务异常继承 BaseAppException，包含：
- type:        错误类型标识（validation_error / extraction_error）
- code:        业务错误码（MISSING_NOTE / EXTRACTION_FAILED / ...）
- message:     人类可读的描述
- detail:      可选的附加信息（dict / list / None）
- http_status: HTTP 状态码

View 层只需 raise，exception_handler 统一捕获并格式化响应。

注意：笔记读取失败、发送失败都不走异常 ——
notes.py 回退到默认笔记，transport.py 返回 False。
只有 extract 组装失败才会抛 ExtractionError。
"""


class BaseAppException(Exception):
    """所有业务异常的基类。"""

    type = 'error'
    code = 'UNKNOWN_ERROR'
    http_status = 500

    def __init__(self, message, code=None, detail=None, http_status=None):
        self.message = message
        if code is not None:
            self.code = code
        if http_status is not None:
            self.http_status = http_status
        self.detail = detail
        super().__init__(message)


class ValidationError(BaseAppException):
    """输入验证失败。view 层抛出，400。"""

    type = 'validation_error'
    code = 'VALIDATION_ERROR'
    http_status = 400


class ExtractionError(BaseAppException):
    """
    组装 extract 时出现意外错误。

    detector 本身对任何字符串都不会抛异常；走到这里说明是程序 bug，
    不重试、不吞掉，原始异常通过 __cause__ 保留。
    """

    type = 'extraction_error'
    code = 'EXTRACTION_FAILED'
    http_status = 500

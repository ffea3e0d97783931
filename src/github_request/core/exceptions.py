"""自定义异常类"""

from typing import Any


class RequestClientError(Exception):
    """请求客户端基础异常"""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        self.message = message
        super().__init__(f"[{url}] {message}" if url else message)


class TransportError(RequestClientError):
    """传输层异常（网络错误或非成功状态码）"""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        method: str | None = None,
        status_code: int | None = None,
        response_data: Any = None,
        headers: dict[str, str] | None = None,
    ):
        self.method = method
        self.status_code = status_code
        self.response_data = response_data
        self.headers = headers or {}
        super().__init__(message, url)

    @property
    def is_rate_limited(self) -> bool:
        """是否因速率限制被拒绝

        GitHub 在限流时返回 403（而非 429），剩余配额为 0。
        """
        if self.status_code not in (403, 429):
            return False
        remaining = {k.lower(): v for k, v in self.headers.items()}.get(
            "x-ratelimit-remaining"
        )
        return remaining == "0"


class UnsupportedMethodError(RequestClientError):
    """不支持的 HTTP 方法"""

    def __init__(self, method: str, url: str | None = None):
        self.method = method
        super().__init__(f"Unsupported HTTP verb: {method}", url)

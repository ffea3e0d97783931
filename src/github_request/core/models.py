"""核心数据模型

纯数据模型，不包含业务逻辑。
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


@dataclass
class RateLimit:
    """速率限制信息（来自 X-RateLimit-* 响应头）"""

    limit: int
    remaining: int
    reset_at: datetime

    @classmethod
    def from_headers(cls, headers: dict[str, str]) -> Optional["RateLimit"]:
        """从响应头解析，缺少任一字段时返回 None"""
        lowered = {k.lower(): v for k, v in headers.items()}
        try:
            return cls(
                limit=int(lowered["x-ratelimit-limit"]),
                remaining=int(lowered["x-ratelimit-remaining"]),
                reset_at=datetime.fromtimestamp(
                    int(lowered["x-ratelimit-reset"]), tz=timezone.utc
                ),
            )
        except (KeyError, ValueError, OverflowError, OSError):
            return None


@dataclass
class RequestResult:
    """扩展请求结果（状态码、响应头和响应体）"""

    method: str
    url: str
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    data: Any = None

    @property
    def rate_limit(self) -> Optional[RateLimit]:
        """速率限制信息"""
        return RateLimit.from_headers(self.headers)

    def to_dict(self) -> dict:
        """转换为字典（用于序列化）"""
        rate_limit = self.rate_limit
        return {
            "method": self.method,
            "url": self.url,
            "status_code": self.status_code,
            "headers": dict(self.headers),
            "data": self.data,
            "rate_limit": (
                {
                    "limit": rate_limit.limit,
                    "remaining": rate_limit.remaining,
                    "reset_at": rate_limit.reset_at.isoformat(),
                }
                if rate_limit
                else None
            ),
        }

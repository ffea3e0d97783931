"""核心接口定义

使用 Protocol 定义接口，支持鸭子类型和依赖注入。
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """HTTP 传输接口（requests.Session 满足该接口）"""

    def request(self, method: str, url: str, **kwargs: Any) -> Any:
        """发送请求并返回响应对象"""
        ...

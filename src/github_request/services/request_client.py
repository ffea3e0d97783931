"""HTTP 请求服务

对 requests 的轻量封装：拼装查询参数、发送标准/扩展请求，并统计成功请求次数。
"""

import logging
from threading import Lock
from typing import Any, Callable, Optional
from urllib.parse import quote, urlparse

import requests
import urllib3

from github_request.config.settings import GitHubConfig
from github_request.core.exceptions import TransportError, UnsupportedMethodError
from github_request.core.interfaces import Transport
from github_request.core.models import RequestResult

SUPPORTED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")

# 与 encodeURIComponent 保持一致的保留字符
_QUERY_SAFE_CHARS = "!~*'()"


class RequestClient:
    """HTTP 请求客户端"""

    def __init__(
        self,
        config: Optional[GitHubConfig] = None,
        session: Optional[Transport] = None,
        on_success: Optional[Callable[[RequestResult], None]] = None,
    ):
        """初始化请求客户端

        Args:
            config: GitHub API 配置（默认从环境变量加载）
            session: 可选的传输对象（默认创建 requests.Session）
            on_success: 请求成功回调（默认记录调试日志）
        """
        self.config = config or GitHubConfig()
        self._session = session or self._create_session()
        self._on_success = on_success or self._log_request_success
        self._request_count = 0
        self._count_lock = Lock()

        if not self.config.verify_ssl:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def _create_session(self) -> requests.Session:
        """创建 HTTP 会话"""
        session = requests.Session()
        session.verify = self.config.verify_ssl
        return session

    @property
    def request_count(self) -> int:
        """成功请求次数"""
        return self._request_count

    @staticmethod
    def assemble_query_params(
        params: Optional[dict[str, Any]], param_names: list[str]
    ) -> str:
        """拼装查询字符串

        按 param_names 的顺序挑选 params 中存在且不为 None 的键。

        Args:
            params: 参数字典
            param_names: 需要包含的参数名

        Returns:
            以 ``?`` 开头的查询字符串；没有任何参数时返回空字符串
        """
        if not params:
            return ""

        pairs = []
        for name in param_names:
            value = params.get(name)
            if value is None:
                continue
            encoded = quote(_format_value(value), safe=_QUERY_SAFE_CHARS)
            pairs.append(f"{name}={encoded}")

        if not pairs:
            return ""
        return "?" + "&".join(pairs)

    def standard_request(
        self, url: str, method: str = "GET", body: Any = None
    ) -> Any:
        """发送请求并只返回响应体

        Raises:
            TransportError: 网络错误或非成功状态码
            UnsupportedMethodError: 不支持的 HTTP 方法
        """
        return self.extended_request(url, method, body).data

    def extended_request(
        self, url: str, method: str = "GET", body: Any = None
    ) -> RequestResult:
        """发送请求并返回包含状态码和响应头的完整结果

        Args:
            url: 请求 URL（相对路径会拼接到配置的 host 上）
            method: HTTP 方法，不区分大小写
            body: 请求体（GET 请求忽略）

        Returns:
            RequestResult

        Raises:
            TransportError: 网络错误或非成功状态码
            UnsupportedMethodError: 不支持的 HTTP 方法
        """
        verb = method.strip().upper()
        if verb not in SUPPORTED_METHODS:
            raise UnsupportedMethodError(method, url)

        full_url = self.resolve_url(url)
        kwargs: dict[str, Any] = {
            "headers": self._build_headers(),
            "timeout": self.config.timeout,
        }
        if body is not None and verb != "GET":
            kwargs["json"] = body

        try:
            resp = self._session.request(verb, full_url, **kwargs)
            resp.raise_for_status()
        except requests.HTTPError as e:
            error = self._http_error(e, verb, full_url)
            logging.error(
                f"[{error.status_code}][{verb} {full_url}] {error.response_data}"
            )
            raise error from e
        except requests.RequestException as e:
            logging.error(f"[{verb} {full_url}] {e}")
            raise TransportError(str(e), full_url, verb) from e

        result = RequestResult(
            method=verb,
            url=full_url,
            status_code=resp.status_code,
            headers=dict(resp.headers),
            data=_parse_body(resp),
        )

        with self._count_lock:
            self._request_count += 1

        self._on_success(result)
        return result

    def resolve_url(self, url: str) -> str:
        """将相对路径拼接到 host 上，绝对 URL 原样返回"""
        if urlparse(url).scheme:
            return url
        return f"{self.config.host}/{url.lstrip('/')}"

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self.config.user_agent,
        }
        if self.config.token:
            headers["Authorization"] = f"token {self.config.token}"
        return headers

    def _http_error(
        self, e: requests.HTTPError, verb: str, url: str
    ) -> TransportError:
        """将 requests.HTTPError 转换为 TransportError"""
        resp = e.response
        if resp is None:
            return TransportError(str(e), url, verb)
        return TransportError(
            str(e),
            url,
            verb,
            status_code=resp.status_code,
            response_data=_parse_body(resp),
            headers=dict(resp.headers),
        )

    def _log_request_success(self, result: RequestResult) -> None:
        """记录成功请求（仅在调试模式下）"""
        if not self.config.debug:
            return

        logging.debug(f"[{result.status_code}][{result.method} {result.url}]")
        rate_limit = result.rate_limit
        if rate_limit:
            logging.debug(
                f"Requests remaining: {rate_limit.remaining}/{rate_limit.limit}, "
                f"reset at {rate_limit.reset_at.isoformat()}"
            )


def _format_value(value: Any) -> str:
    """将参数值转换为字符串"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(v) for v in value)
    return str(value)


def _parse_body(resp: requests.Response) -> Any:
    """解析响应体：JSON 优先，其次文本，空响应返回 None"""
    if not resp.content:
        return None
    if "json" in resp.headers.get("Content-Type", ""):
        try:
            return resp.json()
        except ValueError:
            return resp.text
    return resp.text

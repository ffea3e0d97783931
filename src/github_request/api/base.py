"""端点基类"""

from typing import Any, Iterable, Optional

from github_request.services.request_client import RequestClient

PAGE = ("page",)


class BaseEndpoint:
    """端点基类

    子类只负责拼接路径，请求统一交给 RequestClient。
    """

    def __init__(self, client: RequestClient):
        self.client = client

    def _get(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
        param_names: Iterable[str] = (),
    ) -> Any:
        """发送 GET 请求"""
        query = self.client.assemble_query_params(params, list(param_names))
        return self.client.standard_request(path + query)

    def _send(self, path: str, method: str, body: Any = None) -> Any:
        """发送带请求体的请求"""
        return self.client.standard_request(path, method, body)

    def _repo_path(self, owner: Optional[str], repo: Optional[str]) -> str:
        """生成仓库路径，未指定时使用配置中的默认仓库

        Raises:
            ValueError: 未指定仓库且配置中没有默认值
        """
        owner = owner or self.client.config.owner
        repo = repo or self.client.config.repo
        if not owner or not repo:
            raise ValueError("Repository owner and name are required")
        return f"/repos/{owner}/{repo}"

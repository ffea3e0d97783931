"""Pull Request 相关端点

https://docs.github.com/en/rest/pulls
"""

from typing import Any, Optional

from github_request.api.base import PAGE, BaseEndpoint
from github_request.core.exceptions import TransportError

COMMENT_LIST_PARAMS = ("sort", "direction", "since", "page")


class PullRequestsEndpoint(BaseEndpoint):
    """Pull Request"""

    def get_pull_requests(
        self, owner: str, repo: str, params: Optional[dict] = None
    ) -> Any:
        return self._get(
            f"/repos/{owner}/{repo}/pulls",
            params,
            ("state", "head", "base", "sort", "direction", "page"),
        )

    def get_pull_request(self, owner: str, repo: str, number: int) -> Any:
        return self._get(f"/repos/{owner}/{repo}/pulls/{number}")

    def create_pull_request(self, owner: str, repo: str, body: dict) -> Any:
        """创建 Pull Request

        Args:
            body: 包含 title、head、base，可选 body、draft
        """
        return self._send(f"/repos/{owner}/{repo}/pulls", "POST", body)

    def update_pull_request(
        self, owner: str, repo: str, number: int, body: dict
    ) -> Any:
        return self._send(f"/repos/{owner}/{repo}/pulls/{number}", "PATCH", body)

    def get_pull_request_commits(
        self, owner: str, repo: str, number: int, params: Optional[dict] = None
    ) -> Any:
        return self._get(f"/repos/{owner}/{repo}/pulls/{number}/commits", params, PAGE)

    def get_pull_request_files(
        self, owner: str, repo: str, number: int, params: Optional[dict] = None
    ) -> Any:
        return self._get(f"/repos/{owner}/{repo}/pulls/{number}/files", params, PAGE)

    def is_merged(self, owner: str, repo: str, number: int) -> bool:
        """检查是否已合并

        GitHub 对已合并返回 204，未合并返回 404。
        """
        try:
            self._get(f"/repos/{owner}/{repo}/pulls/{number}/merge")
        except TransportError as e:
            if e.status_code == 404:
                return False
            raise
        return True

    def merge(
        self, owner: str, repo: str, number: int, params: Optional[dict] = None
    ) -> Any:
        """合并 Pull Request

        Args:
            params: 可选 commit_title、commit_message、sha、merge_method
        """
        body = None
        if params:
            body = {
                k: v
                for k, v in params.items()
                if k in ("commit_title", "commit_message", "sha", "merge_method")
                and v is not None
            }
        return self._send(f"/repos/{owner}/{repo}/pulls/{number}/merge", "PUT", body)


class PullRequestCommentsEndpoint(BaseEndpoint):
    """Pull Request 审查评论"""

    def get_pull_request_comments(
        self, owner: str, repo: str, number: int, params: Optional[dict] = None
    ) -> Any:
        return self._get(
            f"/repos/{owner}/{repo}/pulls/{number}/comments",
            params,
            COMMENT_LIST_PARAMS,
        )

    def get_repository_comments(
        self, owner: str, repo: str, params: Optional[dict] = None
    ) -> Any:
        return self._get(
            f"/repos/{owner}/{repo}/pulls/comments", params, COMMENT_LIST_PARAMS
        )

    def get_comment(self, owner: str, repo: str, comment_id: int) -> Any:
        return self._get(f"/repos/{owner}/{repo}/pulls/comments/{comment_id}")

    def create_comment(self, owner: str, repo: str, number: int, body: dict) -> Any:
        """创建审查评论

        Args:
            body: 包含 body、commit_id、path、line 等字段
        """
        return self._send(
            f"/repos/{owner}/{repo}/pulls/{number}/comments", "POST", body
        )

    def edit_comment(self, owner: str, repo: str, comment_id: int, body: dict) -> Any:
        return self._send(
            f"/repos/{owner}/{repo}/pulls/comments/{comment_id}", "PATCH", body
        )

    def delete_comment(self, owner: str, repo: str, comment_id: int) -> Any:
        return self._send(f"/repos/{owner}/{repo}/pulls/comments/{comment_id}", "DELETE")

"""Issue 相关端点

https://docs.github.com/en/rest/issues
"""

from typing import Any, Optional

from github_request.api.base import PAGE, BaseEndpoint

ISSUE_LIST_PARAMS = (
    "filter",
    "state",
    "labels",
    "sort",
    "direction",
    "since",
    "page",
)

REPOSITORY_ISSUE_PARAMS = (
    "milestone",
    "state",
    "assignee",
    "creator",
    "mentioned",
    "labels",
    "sort",
    "direction",
    "since",
    "page",
)


class IssuesEndpoint(BaseEndpoint):
    """Issue"""

    def get_issues(self, params: Optional[dict] = None) -> Any:
        """列出认证用户可见的所有 Issue"""
        return self._get("/issues", params, ISSUE_LIST_PARAMS)

    def get_user_issues(self, params: Optional[dict] = None) -> Any:
        """列出认证用户自己仓库和所属仓库的 Issue"""
        return self._get("/user/issues", params, ISSUE_LIST_PARAMS)

    def get_organization_issues(self, org: str, params: Optional[dict] = None) -> Any:
        return self._get(f"/orgs/{org}/issues", params, ISSUE_LIST_PARAMS)

    def get_repository_issues(
        self, owner: str, repo: str, params: Optional[dict] = None
    ) -> Any:
        return self._get(
            f"/repos/{owner}/{repo}/issues", params, REPOSITORY_ISSUE_PARAMS
        )

    def get_repository_issue(self, owner: str, repo: str, number: int) -> Any:
        return self._get(f"/repos/{owner}/{repo}/issues/{number}")

    def create_issue(self, owner: str, repo: str, body: dict) -> Any:
        """创建 Issue

        Args:
            body: 至少包含 title，可选 body、assignees、milestone、labels
        """
        return self._send(f"/repos/{owner}/{repo}/issues", "POST", body)

    def update_issue(self, owner: str, repo: str, number: int, body: dict) -> Any:
        return self._send(f"/repos/{owner}/{repo}/issues/{number}", "PATCH", body)

    def lock_issue(self, owner: str, repo: str, number: int) -> Any:
        return self._send(f"/repos/{owner}/{repo}/issues/{number}/lock", "PUT")

    def unlock_issue(self, owner: str, repo: str, number: int) -> Any:
        return self._send(f"/repos/{owner}/{repo}/issues/{number}/lock", "DELETE")


class IssueCommentsEndpoint(BaseEndpoint):
    """Issue 评论（按 ID 升序）"""

    def get_issue_comments(
        self, owner: str, repo: str, number: int, params: Optional[dict] = None
    ) -> Any:
        return self._get(f"/repos/{owner}/{repo}/issues/{number}/comments", params, PAGE)

    def get_repository_comments(
        self, owner: str, repo: str, params: Optional[dict] = None
    ) -> Any:
        return self._get(
            f"/repos/{owner}/{repo}/issues/comments",
            params,
            ("sort", "direction", "since"),
        )

    def get_comment(self, owner: str, repo: str, comment_id: int) -> Any:
        return self._get(f"/repos/{owner}/{repo}/issues/comments/{comment_id}")

    def create_comment(self, owner: str, repo: str, number: int, body: dict) -> Any:
        return self._send(
            f"/repos/{owner}/{repo}/issues/{number}/comments", "POST", body
        )

    def edit_comment(self, owner: str, repo: str, comment_id: int, body: dict) -> Any:
        return self._send(
            f"/repos/{owner}/{repo}/issues/comments/{comment_id}", "PATCH", body
        )

    def delete_comment(self, owner: str, repo: str, comment_id: int) -> Any:
        return self._send(f"/repos/{owner}/{repo}/issues/comments/{comment_id}", "DELETE")


class IssueEventsEndpoint(BaseEndpoint):
    """Issue 事件"""

    def get_issue_events(
        self, owner: str, repo: str, number: int, params: Optional[dict] = None
    ) -> Any:
        return self._get(f"/repos/{owner}/{repo}/issues/{number}/events", params, PAGE)

    def get_repository_issue_events(
        self, owner: str, repo: str, params: Optional[dict] = None
    ) -> Any:
        return self._get(f"/repos/{owner}/{repo}/issues/events", params, PAGE)

    def get_event(self, owner: str, repo: str, event_id: int) -> Any:
        return self._get(f"/repos/{owner}/{repo}/issues/events/{event_id}")

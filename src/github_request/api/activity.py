"""活动事件端点

https://docs.github.com/en/rest/activity/events
"""

from typing import Any, Optional

from github_request.api.base import PAGE, BaseEndpoint


class EventsEndpoint(BaseEndpoint):
    """事件"""

    def get_events(self, params: Optional[dict] = None) -> Any:
        """列出公开事件"""
        return self._get("/events", params, PAGE)

    def get_repository_events(
        self, owner: str, repo: str, params: Optional[dict] = None
    ) -> Any:
        return self._get(f"/repos/{owner}/{repo}/events", params, PAGE)

    def get_repository_issue_events(
        self, owner: str, repo: str, params: Optional[dict] = None
    ) -> Any:
        return self._get(f"/repos/{owner}/{repo}/issues/events", params, PAGE)

    def get_network_repository_events(
        self, owner: str, repo: str, params: Optional[dict] = None
    ) -> Any:
        """列出仓库网络（含 fork）的公开事件"""
        return self._get(f"/networks/{owner}/{repo}/events", params, PAGE)

    def get_organization_events(self, org: str, params: Optional[dict] = None) -> Any:
        return self._get(f"/orgs/{org}/events", params, PAGE)

    def get_user_events_received(
        self, username: str, params: Optional[dict] = None
    ) -> Any:
        """列出用户收到的事件（认证用户本人时包含私有事件）"""
        return self._get(f"/users/{username}/received_events", params, PAGE)

    def get_user_public_events_received(
        self, username: str, params: Optional[dict] = None
    ) -> Any:
        return self._get(f"/users/{username}/received_events/public", params, PAGE)

    def get_user_events(self, username: str, params: Optional[dict] = None) -> Any:
        return self._get(f"/users/{username}/events", params, PAGE)

    def get_user_public_events(
        self, username: str, params: Optional[dict] = None
    ) -> Any:
        return self._get(f"/users/{username}/events/public", params, PAGE)

    def get_user_organization_events(
        self, username: str, org: str, params: Optional[dict] = None
    ) -> Any:
        """列出用户在组织中的事件（需要认证为该用户）"""
        return self._get(f"/users/{username}/events/orgs/{org}", params, PAGE)

"""团队端点

https://docs.github.com/en/rest/teams
"""

from typing import Any, Optional

from github_request.api.base import PAGE, BaseEndpoint


class TeamsEndpoint(BaseEndpoint):
    """团队"""

    def get_teams(self, org: str, params: Optional[dict] = None) -> Any:
        return self._get(f"/orgs/{org}/teams", params, PAGE)

    def get_team(self, team_id: int, org_id: int) -> Any:
        return self._get(f"/organizations/{org_id}/team/{team_id}")

    def create_team(self, org: str, body: dict) -> Any:
        return self._send(f"/orgs/{org}/teams", "POST", body)

    def edit_team(self, team_id: int, org_id: int, body: dict) -> Any:
        return self._send(f"/organizations/{org_id}/team/{team_id}", "PATCH", body)

    def delete_team(self, team_id: int, org_id: int) -> Any:
        return self._send(f"/organizations/{org_id}/team/{team_id}", "DELETE")

    def get_child_teams(
        self, team_id: int, org_id: int, params: Optional[dict] = None
    ) -> Any:
        return self._get(f"/organizations/{org_id}/team/{team_id}/teams", params, PAGE)

    def get_team_repos(
        self, team_id: int, org_id: int, params: Optional[dict] = None
    ) -> Any:
        return self._get(f"/organizations/{org_id}/team/{team_id}/repos", params, PAGE)

    def get_is_repo_managed_by_team(
        self, team_id: int, org_id: int, owner: str, repo: str
    ) -> Any:
        return self._get(f"/organizations/{org_id}/team/{team_id}/repos/{owner}/{repo}")

    def update_team_repository(
        self, team_id: int, org_id: int, owner: str, repo: str, body: Any = None
    ) -> Any:
        """添加或更新团队对仓库的权限"""
        return self._send(
            f"/organizations/{org_id}/team/{team_id}/repos/{owner}/{repo}", "PUT", body
        )

    def remove_team_repository(
        self, team_id: int, org_id: int, owner: str, repo: str
    ) -> Any:
        return self._send(
            f"/organizations/{org_id}/team/{team_id}/repos/{owner}/{repo}", "DELETE"
        )

    def get_user_teams(self, params: Optional[dict] = None) -> Any:
        """列出认证用户所属的团队"""
        return self._get("/user/teams", params, PAGE)

    def get_team_projects(
        self, team_id: int, org_id: int, params: Optional[dict] = None
    ) -> Any:
        return self._get(
            f"/organizations/{org_id}/team/{team_id}/projects", params, PAGE
        )

    def get_team_project(self, team_id: int, org_id: int, project_id: int) -> Any:
        return self._get(f"/organizations/{org_id}/team/{team_id}/projects/{project_id}")

    def update_team_project(
        self, team_id: int, org_id: int, project_id: int, body: Any = None
    ) -> Any:
        """添加或更新团队对项目的权限"""
        return self._send(
            f"/organizations/{org_id}/team/{team_id}/projects/{project_id}", "PUT", body
        )

    def remove_team_project(self, team_id: int, org_id: int, project_id: int) -> Any:
        return self._send(
            f"/organizations/{org_id}/team/{team_id}/projects/{project_id}", "DELETE"
        )

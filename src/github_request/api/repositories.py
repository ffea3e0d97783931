"""仓库相关端点

https://docs.github.com/en/rest/repos
"""

from typing import Any, Optional
from urllib.parse import quote

from github_request.api.base import PAGE, BaseEndpoint
from github_request.core.exceptions import TransportError


class RepositoriesEndpoint(BaseEndpoint):
    """仓库列表"""

    def get_my_repos(self, params: Optional[dict] = None) -> Any:
        """列出认证用户有权限访问的仓库"""
        return self._get(
            "/user/repos",
            params,
            ("visibility", "affiliation", "type", "sort", "direction", "page"),
        )

    def get_user_repos(self, username: str, params: Optional[dict] = None) -> Any:
        return self._get(
            f"/users/{username}/repos", params, ("type", "sort", "direction", "page")
        )

    def get_org_repos(self, org: str, params: Optional[dict] = None) -> Any:
        return self._get(f"/orgs/{org}/repos", params, ("type", "page"))


class CollaboratorsEndpoint(BaseEndpoint):
    """仓库协作者"""

    def get_collaborators(
        self, owner: str, repo: str, params: Optional[dict] = None
    ) -> Any:
        return self._get(
            f"/repos/{owner}/{repo}/collaborators", params, ("affiliation", "page")
        )

    def is_collaborator(self, owner: str, repo: str, username: str) -> bool:
        """检查用户是否为协作者（是 204，否 404）"""
        try:
            self._get(f"/repos/{owner}/{repo}/collaborators/{username}")
        except TransportError as e:
            if e.status_code == 404:
                return False
            raise
        return True

    def get_permission_level(self, owner: str, repo: str, username: str) -> Any:
        return self._get(f"/repos/{owner}/{repo}/collaborators/{username}/permission")

    def add_collaborator(
        self, owner: str, repo: str, username: str, permission: Optional[str] = None
    ) -> Any:
        """添加协作者（发送邀请）

        Args:
            permission: pull、triage、push、maintain 或 admin
        """
        body = {"permission": permission} if permission else None
        return self._send(
            f"/repos/{owner}/{repo}/collaborators/{username}", "PUT", body
        )

    def remove_collaborator(self, owner: str, repo: str, username: str) -> Any:
        return self._send(
            f"/repos/{owner}/{repo}/collaborators/{username}", "DELETE"
        )


class CommitsEndpoint(BaseEndpoint):
    """提交"""

    def get_commits(self, owner: str, repo: str, params: Optional[dict] = None) -> Any:
        return self._get(
            f"/repos/{owner}/{repo}/commits",
            params,
            ("sha", "path", "author", "since", "until", "page"),
        )

    def get_commit(self, owner: str, repo: str, sha: str) -> Any:
        return self._get(f"/repos/{owner}/{repo}/commits/{sha}")

    def verify_signature(self, owner: str, repo: str, sha: str) -> Any:
        """获取 Git 提交对象（包含 verification 签名信息）"""
        return self._get(f"/repos/{owner}/{repo}/git/commits/{sha}")

    def compare_commits(self, owner: str, repo: str, base: str, head: str) -> Any:
        """比较两个提交（base...head）"""
        return self._get(
            f"/repos/{owner}/{repo}/compare/{quote(base)}...{quote(head)}"
        )


class ContentsEndpoint(BaseEndpoint):
    """仓库内容"""

    def get_readme(self, owner: str, repo: str, params: Optional[dict] = None) -> Any:
        return self._get(f"/repos/{owner}/{repo}/readme", params, ("ref",))

    def get_contents(
        self, owner: str, repo: str, path: str, params: Optional[dict] = None
    ) -> Any:
        return self._get(
            f"/repos/{owner}/{repo}/contents/{quote(path)}", params, ("ref",)
        )

    def put_contents(self, owner: str, repo: str, path: str, body: dict) -> Any:
        """创建或更新文件

        Args:
            body: 包含 message、content（base64），更新时需要 sha
        """
        return self._send(f"/repos/{owner}/{repo}/contents/{quote(path)}", "PUT", body)

    def delete_contents(self, owner: str, repo: str, path: str, body: dict) -> Any:
        """删除文件

        Args:
            body: 包含 message 和文件的 sha
        """
        return self._send(
            f"/repos/{owner}/{repo}/contents/{quote(path)}", "DELETE", body
        )

    def get_archive_link(
        self, owner: str, repo: str, archive_format: str, ref: str
    ) -> Any:
        """获取归档下载内容

        Args:
            archive_format: tarball 或 zipball
        """
        return self._get(f"/repos/{owner}/{repo}/{archive_format}/{quote(ref)}")


class ReleasesEndpoint(BaseEndpoint):
    """发布版本

    owner/repo 未指定时使用配置中的默认仓库。
    """

    def get_releases(
        self,
        params: Optional[dict] = None,
        owner: Optional[str] = None,
        repo: Optional[str] = None,
    ) -> Any:
        return self._get(f"{self._repo_path(owner, repo)}/releases", params, PAGE)

    def get_release(
        self, release_id: int, owner: Optional[str] = None, repo: Optional[str] = None
    ) -> Any:
        return self._get(f"{self._repo_path(owner, repo)}/releases/{release_id}")

    def get_latest_release(
        self, owner: Optional[str] = None, repo: Optional[str] = None
    ) -> Any:
        return self._get(f"{self._repo_path(owner, repo)}/releases/latest")

    def get_release_by_tag(
        self, tag: str, owner: Optional[str] = None, repo: Optional[str] = None
    ) -> Any:
        tag = quote(tag, safe="")
        return self._get(f"{self._repo_path(owner, repo)}/releases/tags/{tag}")

    def create_release(
        self, body: dict, owner: Optional[str] = None, repo: Optional[str] = None
    ) -> Any:
        return self._send(f"{self._repo_path(owner, repo)}/releases", "POST", body)

    def update_release(
        self,
        release_id: int,
        body: dict,
        owner: Optional[str] = None,
        repo: Optional[str] = None,
    ) -> Any:
        return self._send(
            f"{self._repo_path(owner, repo)}/releases/{release_id}", "PATCH", body
        )

    def delete_release(
        self, release_id: int, owner: Optional[str] = None, repo: Optional[str] = None
    ) -> Any:
        return self._send(
            f"{self._repo_path(owner, repo)}/releases/{release_id}", "DELETE"
        )

    def get_release_assets(
        self, release_id: int, owner: Optional[str] = None, repo: Optional[str] = None
    ) -> Any:
        return self._get(f"{self._repo_path(owner, repo)}/releases/{release_id}/assets")

    def get_release_asset(
        self, asset_id: int, owner: Optional[str] = None, repo: Optional[str] = None
    ) -> Any:
        return self._get(f"{self._repo_path(owner, repo)}/releases/assets/{asset_id}")

    def update_release_asset(
        self,
        asset_id: int,
        body: dict,
        owner: Optional[str] = None,
        repo: Optional[str] = None,
    ) -> Any:
        return self._send(
            f"{self._repo_path(owner, repo)}/releases/assets/{asset_id}", "PATCH", body
        )

    def delete_release_asset(
        self, asset_id: int, owner: Optional[str] = None, repo: Optional[str] = None
    ) -> Any:
        return self._send(
            f"{self._repo_path(owner, repo)}/releases/assets/{asset_id}", "DELETE"
        )

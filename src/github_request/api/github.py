"""GitHub API 门面

将所有端点组合到同一个 RequestClient 上。
"""

from types import SimpleNamespace
from typing import Optional

from github_request.api.activity import EventsEndpoint
from github_request.api.issues import (
    IssueCommentsEndpoint,
    IssueEventsEndpoint,
    IssuesEndpoint,
)
from github_request.api.pull_requests import (
    PullRequestCommentsEndpoint,
    PullRequestsEndpoint,
)
from github_request.api.repositories import (
    CollaboratorsEndpoint,
    CommitsEndpoint,
    ContentsEndpoint,
    ReleasesEndpoint,
    RepositoriesEndpoint,
)
from github_request.api.teams import TeamsEndpoint
from github_request.config.settings import GitHubConfig
from github_request.services.request_client import RequestClient


class GitHubApi:
    """GitHub API 客户端

    用法::

        api = GitHubApi(GitHubConfig(token="..."))
        api.issues.comments.get_issue_comments("octocat", "hello-world", 1)
        api.request_count
    """

    def __init__(
        self,
        config: Optional[GitHubConfig] = None,
        client: Optional[RequestClient] = None,
    ):
        """初始化

        Args:
            config: GitHub API 配置，用于创建默认客户端
            client: 已有的请求客户端（使用其自身的配置）

        Raises:
            ValueError: 同时指定了 config 和 client
        """
        if config is not None and client is not None:
            raise ValueError("Pass either config or client, not both")
        self.client = client or RequestClient(config)

        self.activity = SimpleNamespace(events=EventsEndpoint(self.client))
        self.issues = SimpleNamespace(
            comments=IssueCommentsEndpoint(self.client),
            events=IssueEventsEndpoint(self.client),
            issues=IssuesEndpoint(self.client),
        )
        self.pull_requests = SimpleNamespace(
            comments=PullRequestCommentsEndpoint(self.client),
            pull_requests=PullRequestsEndpoint(self.client),
        )
        self.repositories = SimpleNamespace(
            collaborators=CollaboratorsEndpoint(self.client),
            commits=CommitsEndpoint(self.client),
            contents=ContentsEndpoint(self.client),
            releases=ReleasesEndpoint(self.client),
            repositories=RepositoriesEndpoint(self.client),
        )
        # 兼容旧名称
        self.repos = self.repositories
        self.teams = SimpleNamespace(teams=TeamsEndpoint(self.client))

    @property
    def config(self) -> GitHubConfig:
        return self.client.config

    @property
    def request_count(self) -> int:
        """成功请求次数"""
        return self.client.request_count

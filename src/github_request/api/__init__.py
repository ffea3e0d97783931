from github_request.api.github import GitHubApi

__all__ = ["GitHubApi"]

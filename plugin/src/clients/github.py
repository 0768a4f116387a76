"""
GitHub API client for pull request comments.
"""

from typing import List, Optional

import httpx

from plugin.src.clients.base import APIClient
from plugin.src.models.github import GitHubUser, IssueComment

GITHUB_HEADERS = {
    "Accept": "application/vnd.github+json",
    "X-GitHub-Api-Version": "2022-11-28",
}
PAGE_SIZE = 100

class GitHubClient(APIClient):
    name = "github"

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.github.com",
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(api_url, token, headers=GITHUB_HEADERS, transport=transport)

    def current_user(self) -> GitHubUser:
        response = self.request("GET", "/user")
        return self.parse(GitHubUser, self.json(response))

    def list_comments(self, owner: str, repo: str, pull_request: int) -> List[IssueComment]:
        """List every comment on a pull request, following pagination."""
        comments = []
        url = f"/repos/{owner}/{repo}/issues/{pull_request}/comments"
        params = {"per_page": PAGE_SIZE}

        while url:
            response = self.request("GET", url, params=params)
            comments.extend(self.parse(IssueComment, c) for c in self.json(response))
            # The next link already carries its query string
            url = response.links.get("next", {}).get("url")
            params = None

        return comments

    def create_comment(self, owner: str, repo: str, pull_request: int, body: str) -> IssueComment:
        response = self.request(
            "POST",
            f"/repos/{owner}/{repo}/issues/{pull_request}/comments",
            json={"body": body},
        )
        return self.parse(IssueComment, self.json(response))

    def delete_comment(self, owner: str, repo: str, comment_id: int):
        self.request("DELETE", f"/repos/{owner}/{repo}/issues/comments/{comment_id}")

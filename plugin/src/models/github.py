"""
GitHub API models.
"""

from pydantic import BaseModel
from typing import Optional

class GitHubUser(BaseModel):
    login: str

class IssueComment(BaseModel):
    id: int
    body: str = ""
    user: Optional[GitHubUser] = None
    html_url: str = ""

    @property
    def author(self) -> str:
        return self.user.login if self.user else ""

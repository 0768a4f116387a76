"""
Values available to the comment template.
"""

from pydantic import BaseModel, field_validator
from typing import Dict, List

SHORT_SHA_LENGTH = 7

class TemplateContext(BaseModel):
    build_number: int
    drone_server: str
    github_server: str = "https://github.com"
    labels: Dict[str, str] = {}
    logs: List[str] = []
    pull_request: int
    repo_name: str
    repo_owner: str
    sha: str
    stage_name: str
    stage_number: int
    status: str
    step_name: str
    step_number: int

    class Config:
        frozen = True

    @field_validator("sha")
    @classmethod
    def sha_long_enough(cls, v: str) -> str:
        if len(v) < SHORT_SHA_LENGTH:
            raise ValueError(f"commit sha must have at least {SHORT_SHA_LENGTH} characters")
        return v

    @property
    def short_sha(self) -> str:
        return self.sha[:SHORT_SHA_LENGTH]

"""
Validated, typed options for a single plugin run.
"""

import logging
from pydantic import BaseModel
from typing import Dict
from enum import Enum

logger = logging.getLogger(__name__)

class CommentPolicy(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    ALWAYS = "always"

    @classmethod
    def parse(cls, value: str) -> "CommentPolicy":
        """Parse PLUGIN_WHEN. Empty or unknown values fall back to always."""
        value = (value or "").strip().lower()
        if not value:
            return cls.ALWAYS
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"unknown comment policy {value!r}, commenting always")
            return cls.ALWAYS

class CommentOrder(str, Enum):
    DELETE_THEN_CREATE = "delete-then-create"
    CREATE_THEN_DELETE = "create-then-delete"

class Invocation(BaseModel):
    drone_server: str
    github_server: str = "https://github.com"
    repo_owner: str
    repo_name: str
    build_number: int
    pull_request: int
    commit_sha: str
    stage_name: str
    step_name: str
    keep: bool = False
    verbatim: bool = False
    when: CommentPolicy = CommentPolicy.ALWAYS
    order: CommentOrder = CommentOrder.DELETE_THEN_CREATE

    class Config:
        frozen = True

    @property
    def labels(self) -> Dict[str, str]:
        """
        Label set embedded into comments to recognize them on later runs.
        Values are trimmed the same way labels are parsed back.
        """
        return {
            "stage": self.stage_name.strip(),
            "step": self.step_name.strip(),
        }

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

from plugin.src.errors import ConfigurationError
from plugin.src.models.invocation import CommentPolicy, CommentOrder, Invocation

TRUE_VALUES = ("1", "t", "T", "TRUE", "true", "True")

def parse_bool(value) -> bool:
    """Lenient boolean parsing, anything unrecognized is False."""
    if isinstance(value, bool):
        return value
    return str(value).strip() in TRUE_VALUES

class Settings(BaseSettings):
    # Drone build environment
    drone_build_number: str = ""
    drone_commit_sha: str = ""
    drone_pull_request: str = ""
    drone_repo_name: str = ""
    drone_repo_owner: str = ""
    drone_system_proto: str = ""
    drone_system_hostname: str = ""

    # Secrets
    drone_token: str = ""
    github_token: str = ""

    # GitHub endpoints, override for GitHub Enterprise
    github_api_url: str = "https://api.github.com"
    github_server_url: str = "https://github.com"

    # Plugin settings
    plugin_stage: str = ""
    plugin_step: str = ""
    plugin_keep: bool = False
    plugin_verbatim: bool = False
    plugin_when: str = ""
    plugin_order: str = ""

    class Config:
        env_file = ".env"

    @field_validator("plugin_keep", "plugin_verbatim", mode="before")
    @classmethod
    def lenient_bool(cls, v):
        return parse_bool(v)

    @property
    def drone_server(self) -> str:
        return f"{self.drone_system_proto}://{self.drone_system_hostname}"

    @property
    def has_pull_request(self) -> bool:
        return self.drone_pull_request.strip() != ""

    def validate_required(self):
        """Check required settings, most important first."""
        required = [
            ("DRONE_BUILD_NUMBER", self.drone_build_number),
            ("DRONE_COMMIT_SHA", self.drone_commit_sha),
            ("DRONE_REPO_NAME", self.drone_repo_name),
            ("DRONE_REPO_OWNER", self.drone_repo_owner),
            ("DRONE_SYSTEM_PROTO", self.drone_system_proto),
            ("DRONE_SYSTEM_HOSTNAME", self.drone_system_hostname),
            ("DRONE_TOKEN", self.drone_token),
            ("GITHUB_TOKEN", self.github_token),
            ("PLUGIN_STAGE", self.plugin_stage),
            ("PLUGIN_STEP", self.plugin_step),
        ]
        for name, value in required:
            if not value.strip():
                raise ConfigurationError(f"{name} was not provided")

    def invocation(self) -> Optional[Invocation]:
        """
        Build the typed options for this run.
        Returns None when the build is not for a pull request.
        """
        if not self.has_pull_request:
            return None

        self.validate_required()

        build_number = _parse_int("DRONE_BUILD_NUMBER", self.drone_build_number)
        pull_request = _parse_int("DRONE_PULL_REQUEST", self.drone_pull_request)

        sha = self.drone_commit_sha.strip()
        if len(sha) < 7:
            raise ConfigurationError(f"DRONE_COMMIT_SHA {sha!r} is too short")

        order = self.plugin_order.strip().lower() or CommentOrder.DELETE_THEN_CREATE.value
        try:
            order = CommentOrder(order)
        except ValueError:
            raise ConfigurationError(f"PLUGIN_ORDER {self.plugin_order!r} is not supported")

        return Invocation(
            drone_server=self.drone_server,
            github_server=self.github_server_url.rstrip("/"),
            repo_owner=self.drone_repo_owner,
            repo_name=self.drone_repo_name,
            build_number=build_number,
            pull_request=pull_request,
            commit_sha=sha,
            stage_name=self.plugin_stage.strip(),
            step_name=self.plugin_step.strip(),
            keep=self.plugin_keep,
            verbatim=self.plugin_verbatim,
            when=CommentPolicy.parse(self.plugin_when),
            order=order,
        )

def _parse_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise ConfigurationError(f"{name} {value!r} is not a valid number")

@lru_cache()
def get_settings() -> Settings:
    return Settings()

"""Shared fixtures and fake API clients."""

import pytest

from plugin.src.config import Settings, get_settings
from plugin.src.errors import APIError
from plugin.src.models import (
    DroneBuild,
    DroneUser,
    GitHubUser,
    Invocation,
    IssueComment,
    LogLine,
)

SHA = "bcdd4bf0245c82c060407b3b24b9b87301d15ac1"

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings from picking up the environment of whoever runs the tests."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

class FakeDrone:
    def __init__(self, build: DroneBuild, logs=None, login="drone-bot"):
        self._build = build
        self._logs = logs or []
        self.login = login
        self.fail = None
        self.log_requests = []

    def current_user(self):
        if self.fail == "user":
            raise APIError("drone user unavailable", status_code=401)
        return DroneUser(login=self.login)

    def build(self, owner, repo, number):
        if self.fail == "build":
            raise APIError("drone build unavailable", status_code=404)
        return self._build

    def logs(self, owner, repo, build, stage, step):
        self.log_requests.append((owner, repo, build, stage, step))
        return [LogLine(pos=i, out=line) for i, line in enumerate(self._logs)]

class FakeGitHub:
    def __init__(self, login="ci-bot", comments=None):
        self.login = login
        self.comments = list(comments or [])
        self.events = []
        self.fail_list = False
        self.fail_create = False
        self.fail_delete = set()
        self.next_id = 1000

    @property
    def created(self):
        return [c for c in self.comments if c.id >= 1000]

    @property
    def deleted(self):
        return [comment_id for event, comment_id in self.events if event == "delete"]

    def current_user(self):
        return GitHubUser(login=self.login)

    def list_comments(self, owner, repo, pull_request):
        self.events.append(("list", None))
        if self.fail_list:
            raise APIError("listing failed", status_code=502)
        return list(self.comments)

    def create_comment(self, owner, repo, pull_request, body):
        if self.fail_create:
            raise APIError("create failed", status_code=403)
        comment = IssueComment(
            id=self.next_id,
            body=body,
            user=GitHubUser(login=self.login),
            html_url=f"https://github.com/{owner}/{repo}/pull/{pull_request}#issuecomment-{self.next_id}",
        )
        self.next_id += 1
        self.comments.append(comment)
        self.events.append(("create", comment.id))
        return comment

    def delete_comment(self, owner, repo, comment_id):
        if comment_id in self.fail_delete:
            raise APIError("delete failed", status_code=500)
        self.comments = [c for c in self.comments if c.id != comment_id]
        self.events.append(("delete", comment_id))

def make_comment(comment_id, login, body):
    return IssueComment(
        id=comment_id,
        body=body,
        user=GitHubUser(login=login),
        html_url=f"https://github.com/octocat/hello-world/pull/123#issuecomment-{comment_id}",
    )

@pytest.fixture
def build():
    return DroneBuild.model_validate({
        "number": 42,
        "stages": [
            {
                "number": 1,
                "name": "build-pull-request",
                "steps": [
                    {"number": 1, "name": "clone", "status": "success"},
                    {"number": 2, "name": "lint-code", "status": "failure"},
                    {"number": 3, "name": "unit-test", "status": "success"},
                    {"number": 4, "name": "publish", "status": "running"},
                ],
            },
            {
                "number": 2,
                "name": "deploy",
                "steps": [
                    {"number": 1, "name": "lint-code", "status": "success"},
                ],
            },
        ],
    })

@pytest.fixture
def make_invocation():
    def factory(**overrides):
        values = dict(
            drone_server="https://drone.example.com",
            repo_owner="octocat",
            repo_name="hello-world",
            build_number=42,
            pull_request=123,
            commit_sha=SHA,
            stage_name="build-pull-request",
            step_name="lint-code",
        )
        values.update(overrides)
        return Invocation(**values)
    return factory

@pytest.fixture
def plugin_env(monkeypatch):
    """A complete plugin environment for a pull request build."""
    env = {
        "DRONE_BUILD_NUMBER": "42",
        "DRONE_COMMIT_SHA": SHA,
        "DRONE_PULL_REQUEST": "123",
        "DRONE_REPO_NAME": "hello-world",
        "DRONE_REPO_OWNER": "octocat",
        "DRONE_SYSTEM_PROTO": "https",
        "DRONE_SYSTEM_HOSTNAME": "drone.example.com",
        "DRONE_TOKEN": "drone-token",
        "GITHUB_TOKEN": "github-token",
        "PLUGIN_STAGE": "build-pull-request",
        "PLUGIN_STEP": "lint-code",
    }
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return env

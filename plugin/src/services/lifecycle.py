"""
Comment lifecycle - decides whether to comment, cleans up the comments left by
earlier runs and posts the new one.
"""

import logging
from contextlib import ExitStack
from enum import Enum
from typing import Callable, Optional

from plugin.src.clients import DroneClient, GitHubClient
from plugin.src.config import Settings
from plugin.src.errors import ResolutionError, StepStatusError, best_effort
from plugin.src.models import (
    CommentOrder,
    CommentPolicy,
    GitHubUser,
    Invocation,
    IssueComment,
    StepStatus,
    TemplateContext,
    TERMINAL_STATUSES,
)
from plugin.src.services.log_curator import curate_logs
from plugin.src.services.metadata import has_labels
from plugin.src.services.renderer import render_comment
from plugin.src.services.resolver import resolve_stage_and_step

logger = logging.getLogger(__name__)

class LifecycleOutcome(str, Enum):
    NO_PULL_REQUEST = "no-pull-request"
    SKIPPED_BY_POLICY = "skipped-by-policy"
    COMMENTED = "commented"

class CommentLifecycle:
    """
    One plugin run against one pull request.

    Collaborators are passed in so that any object with the same methods as
    DroneClient and GitHubClient can be used.
    """

    def __init__(
        self,
        invocation: Invocation,
        drone: DroneClient,
        github: GitHubClient,
        render: Callable[[TemplateContext], str] = render_comment,
    ):
        self.invocation = invocation
        self.drone = drone
        self.github = github
        self.render = render

    def run(self) -> LifecycleOutcome:
        inv = self.invocation

        # Both users are fetched as a sanity check. The GitHub login is also
        # what identifies our own comments later on.
        drone_user = self.drone.current_user()
        logger.info(f"authenticated as drone user {drone_user.login}")
        github_user = self.github.current_user()
        logger.info(f"authenticated as github user {github_user.login}")

        logger.info(
            f"fetching build for {inv.drone_server}/{inv.repo_owner}/{inv.repo_name}/{inv.build_number}"
        )
        build = self.drone.build(inv.repo_owner, inv.repo_name, inv.build_number)

        logger.info(f"searching for stage {inv.stage_name} step {inv.step_name}")
        stage_number, step_number, status, found = resolve_stage_and_step(
            build, inv.stage_name, inv.step_name
        )
        if not found:
            # Stage and step names are known when the pipeline is defined, so
            # this means the plugin settings no longer match the pipeline.
            raise ResolutionError(
                f"build stage {inv.stage_name} and step {inv.step_name} could not be found"
            )

        if status not in TERMINAL_STATUSES:
            raise StepStatusError(f"target step status is {status}")

        if status == StepStatus.PASSING and inv.when == CommentPolicy.FAILURE:
            logger.info("not commenting since step passed")
            return LifecycleOutcome.SKIPPED_BY_POLICY
        if status == StepStatus.FAILING and inv.when == CommentPolicy.SUCCESS:
            logger.info("not commenting since step failed")
            return LifecycleOutcome.SKIPPED_BY_POLICY

        if inv.order == CommentOrder.DELETE_THEN_CREATE:
            if not inv.keep:
                self.delete_previous_comments(github_user)
            body = self.build_comment(stage_number, step_number, status)
            self.create_comment(body)
        else:
            body = self.build_comment(stage_number, step_number, status)
            created = self.create_comment(body)
            if not inv.keep:
                self.delete_previous_comments(github_user, exclude_id=created.id)

        return LifecycleOutcome.COMMENTED

    def build_comment(self, stage_number: int, step_number: int, status: str) -> str:
        """Fetch logs for the resolved step and template the comment body."""
        inv = self.invocation

        logger.info(
            f"fetching logs for {inv.drone_server}/{inv.repo_owner}/{inv.repo_name}/"
            f"{inv.build_number}/{stage_number}/{step_number}"
        )
        lines = self.drone.logs(
            inv.repo_owner, inv.repo_name, inv.build_number, stage_number, step_number
        )
        logs = curate_logs((line.out for line in lines), verbatim=inv.verbatim)

        comment = self.render(TemplateContext(
            build_number=inv.build_number,
            drone_server=inv.drone_server,
            github_server=inv.github_server,
            labels=inv.labels,
            logs=logs,
            pull_request=inv.pull_request,
            repo_name=inv.repo_name,
            repo_owner=inv.repo_owner,
            sha=inv.commit_sha,
            stage_name=inv.stage_name,
            stage_number=stage_number,
            status=status,
            step_name=inv.step_name,
            step_number=step_number,
        ))
        logger.info(f"templated comment:\n{comment}")
        return comment

    def create_comment(self, body: str) -> IssueComment:
        inv = self.invocation
        created = self.github.create_comment(
            inv.repo_owner, inv.repo_name, inv.pull_request, body
        )
        logger.info(f"created comment {created.html_url}")
        return created

    def delete_previous_comments(self, user: GitHubUser, exclude_id: Optional[int] = None) -> int:
        """
        Delete comments that this plugin posted on earlier runs.

        Only comments authored by the current GitHub user and tagged with the
        same labels are removed, so other instances of the plugin in the same
        pipeline keep their comments. Listing and deleting are best-effort.
        Returns the number of deleted comments.
        """
        inv = self.invocation

        comments = []
        with best_effort("failed to list existing comments"):
            comments = self.github.list_comments(inv.repo_owner, inv.repo_name, inv.pull_request)

        deleted = 0
        for comment in comments:
            if comment.author != user.login:
                continue
            if exclude_id is not None and comment.id == exclude_id:
                continue
            if not has_labels(comment.body, inv.labels):
                continue

            with best_effort(f"failed to delete comment {comment.html_url}"):
                self.github.delete_comment(inv.repo_owner, inv.repo_name, comment.id)
                logger.info(f"deleted comment {comment.html_url}")
                deleted += 1

        return deleted

def run(
    settings: Settings,
    drone: Optional[DroneClient] = None,
    github: Optional[GitHubClient] = None,
) -> LifecycleOutcome:
    """
    Run the plugin for the given settings. Clients are created from the
    settings unless provided.
    """
    invocation = settings.invocation()
    if invocation is None:
        # Branch and tag builds have no pull request to comment on.
        logger.info("exiting as build is not for a pull request")
        return LifecycleOutcome.NO_PULL_REQUEST

    with ExitStack() as stack:
        if drone is None:
            drone = stack.enter_context(DroneClient(invocation.drone_server, settings.drone_token))
        if github is None:
            github = stack.enter_context(GitHubClient(settings.github_token, settings.github_api_url))

        return CommentLifecycle(invocation, drone, github).run()

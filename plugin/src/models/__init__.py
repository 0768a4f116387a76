from plugin.src.models.drone import (
    StepStatus,
    TERMINAL_STATUSES,
    DroneUser,
    DroneStep,
    DroneStage,
    DroneBuild,
    LogLine,
)
from plugin.src.models.github import GitHubUser, IssueComment
from plugin.src.models.invocation import CommentPolicy, CommentOrder, Invocation
from plugin.src.models.context import TemplateContext

__all__ = [
    "StepStatus",
    "TERMINAL_STATUSES",
    "DroneUser",
    "DroneStep",
    "DroneStage",
    "DroneBuild",
    "LogLine",
    "GitHubUser",
    "IssueComment",
    "CommentPolicy",
    "CommentOrder",
    "Invocation",
    "TemplateContext",
]

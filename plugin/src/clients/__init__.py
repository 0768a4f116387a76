from plugin.src.clients.base import APIClient
from plugin.src.clients.drone import DroneClient
from plugin.src.clients.github import GitHubClient

__all__ = [
    "APIClient",
    "DroneClient",
    "GitHubClient",
]

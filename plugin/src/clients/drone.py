"""
Drone API client.
"""

from typing import List, Optional

import httpx

from plugin.src.clients.base import APIClient
from plugin.src.models.drone import DroneBuild, DroneUser, LogLine

class DroneClient(APIClient):
    name = "drone"

    def __init__(self, server: str, token: str, transport: Optional[httpx.BaseTransport] = None):
        super().__init__(server, token, transport=transport)

    def current_user(self) -> DroneUser:
        """Get the user that owns the token."""
        response = self.request("GET", "/api/user")
        return self.parse(DroneUser, self.json(response))

    def build(self, owner: str, repo: str, number: int) -> DroneBuild:
        response = self.request("GET", f"/api/repos/{owner}/{repo}/builds/{number}")
        return self.parse(DroneBuild, self.json(response))

    def logs(self, owner: str, repo: str, build: int, stage: int, step: int) -> List[LogLine]:
        response = self.request(
            "GET", f"/api/repos/{owner}/{repo}/builds/{build}/logs/{stage}/{step}"
        )
        # Steps that never produced output come back as null
        return [self.parse(LogLine, line) for line in self.json(response) or []]

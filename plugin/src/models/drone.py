"""
Drone API models.
"""

from pydantic import BaseModel
from typing import List
from enum import Enum

class StepStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    PASSING = "success"
    FAILING = "failure"
    SKIPPED = "skipped"
    KILLED = "killed"
    ERROR = "error"
    DECLINED = "declined"
    BLOCKED = "blocked"
    WAITING = "waiting_on_dependencies"

TERMINAL_STATUSES = (StepStatus.PASSING, StepStatus.FAILING)

class DroneUser(BaseModel):
    login: str

class DroneStep(BaseModel):
    number: int
    name: str
    # Kept as a plain string, Drone may report statuses not listed above.
    status: str = ""

class DroneStage(BaseModel):
    number: int
    name: str
    steps: List[DroneStep] = []

class DroneBuild(BaseModel):
    number: int = 0
    stages: List[DroneStage] = []

class LogLine(BaseModel):
    pos: int = 0
    out: str = ""
    time: int = 0

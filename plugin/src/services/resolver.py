"""
Resolve named build stages and steps into the numbers the Drone API needs.
"""

from typing import NamedTuple

from plugin.src.models.drone import DroneBuild

class Resolution(NamedTuple):
    stage_number: int
    step_number: int
    status: str
    found: bool

NOT_FOUND = Resolution(0, 0, "", False)

def resolve_stage_and_step(build: DroneBuild, stage_name: str, step_name: str) -> Resolution:
    """
    Find the stage and step numbers for a named stage and step.

    Stage names are unique within a build, so only the first stage with a
    matching name is searched. If the step is not in that stage the lookup
    fails rather than moving on to later stages.
    """
    for stage in build.stages:
        if stage.name != stage_name:
            continue

        for step in stage.steps:
            if step.name == step_name:
                return Resolution(stage.number, step.number, step.status, True)

        break

    return NOT_FOUND

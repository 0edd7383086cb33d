"""
Example scenarios with their expected reports.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Scenario:
    name: str
    description: str
    commands: List[str]
    expected: List[str] = field(default_factory=list)


SCENARIOS: Dict[str, Scenario] = {
    "basic_movement": Scenario(
        name="Basic Movement",
        description="Place robot at origin, move north, report position",
        commands=["PLACE 0,0,NORTH", "MOVE", "REPORT"],
        expected=["0,1,NORTH"],
    ),
    "rotation": Scenario(
        name="Rotation Test",
        description="Place robot, turn left, report direction",
        commands=["PLACE 0,0,NORTH", "LEFT", "REPORT"],
        expected=["0,0,WEST"],
    ),
    "complex_sequence": Scenario(
        name="Complex Sequence",
        description="Place robot, move twice, turn left, move, report",
        commands=["PLACE 1,2,EAST", "MOVE", "MOVE", "LEFT", "MOVE", "REPORT"],
        expected=["3,3,NORTH"],
    ),
    "edge_cases": Scenario(
        name="Edge Cases",
        description="Commands before PLACE are ignored, the robot stops at the edge",
        commands=[
            "MOVE", "LEFT", "REPORT",
            "PLACE 0,0,NORTH", "MOVE", "MOVE", "MOVE", "MOVE", "MOVE", "MOVE",
            "REPORT",
        ],
        expected=["0,4,NORTH"],
    ),
}


def get_scenario(key: str) -> Optional[Scenario]:
    return SCENARIOS.get(key.strip().lower())

"""
Swarm Core Scenario - Replay join/leave scripts

Scenario format (see data/scenario.json):

    {
        "name": "Two burrows",
        "steps": [
            {"join": "rat1", "group": "burrow"},
            {"leave": "rat1"}
        ]
    }

"group" is optional and defaults to DEFAULT_GROUP.
"""
from typing import Dict, Optional

from ..config import DEFAULT_GROUP
from .members import Rat
from .pack import PackCoordinator


def run_scenario(scenario: dict, coordinator: Optional[PackCoordinator] = None) -> Dict[str, Rat]:
    """Replay every step and return the rats created, by name."""
    if coordinator is None:
        coordinator = PackCoordinator()

    rats: Dict[str, Rat] = {}
    for number, step in enumerate(scenario.get("steps", []), start=1):
        if "join" in step:
            name = step["join"]
            if name in rats:
                raise ValueError(f"Step {number}: rat '{name}' already entered play")
            rats[name] = Rat(coordinator, step.get("group", DEFAULT_GROUP))
        elif "leave" in step:
            name = step["leave"]
            if name not in rats:
                raise ValueError(f"Step {number}: unknown rat '{name}'")
            rats[name].kill()
        else:
            raise ValueError(f"Step {number}: expected 'join' or 'leave', got {sorted(step)}")
    return rats


def summarize(rats: Dict[str, Rat]) -> Dict[str, int]:
    """Final attack per rat name."""
    return {name: rat.attack for name, rat in rats.items()}

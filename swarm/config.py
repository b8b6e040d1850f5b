"""
Swarm Configuration
Contains pack constants, file paths, and creature stats.
"""
import json
from pathlib import Path

# Paths
PACKAGE_ROOT = Path(__file__).parent
DATA_DIR = PACKAGE_ROOT / "data"
DEFAULT_SCENARIO = DATA_DIR / "scenario.json"

# Packs
BASELINE_ATTACK = 1  # Attack of a lone member and of a member that left
DEFAULT_GROUP = "default"

# Observers
VOTING_AGE = 16


def load_creature_stats() -> dict:
    """Load creature base stats from creatures.json"""
    with open(DATA_DIR / "creatures.json", "r") as f:
        return json.load(f)


def load_scenario(path=DEFAULT_SCENARIO) -> dict:
    """Load a join/leave scenario"""
    with open(path, "r") as f:
        return json.load(f)


# Pre-load stats for convenience (used by members.py and horde.py)
CREATURE_STATS = load_creature_stats()

from typing import Dict, Optional
from ..types import ActionType


def best_action_from_scores(scores: Dict[ActionType, Optional[float]]) -> Optional[ActionType]:
    """Action with the highest score, skipping actions without a score.

    Ties go to the action inserted first, so the caller's ordering decides them.
    """
    best_action = None
    best_score = float('-inf')
    for action, score in scores.items():
        if score is not None and score > best_score:
            best_action = action
            best_score = score
    return best_action


def parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean")

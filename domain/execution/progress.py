"""
Per-exercise progress state during workout execution.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class ExerciseProgress:
    """
    Ephemeral execution state for one exercise of a routine.

    Attributes:
        completed_sets: Sets done so far, in [0, exercise.sets]
        timer: Rest seconds remaining, never negative
        timer_active: True while a rest countdown is running
    """

    completed_sets: int = 0
    timer: int = 0
    timer_active: bool = False

    @property
    def is_idle(self) -> bool:
        return not self.timer_active and self.timer == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


ProgressMap = Dict[int, ExerciseProgress]

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal


EvaluationSource = Literal["heuristic", "ollama"]


def clamp_score(value: float) -> int:
    # Halves round up.
    return int(math.floor(max(0.0, min(100.0, float(value))) + 0.5))


@dataclass
class EvaluationResult:
    score: int
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    detailed_feedback: str = ""
    criteria_scores: Dict[str, int] = field(default_factory=dict)
    source: EvaluationSource = "heuristic"

    def __post_init__(self) -> None:
        self.score = clamp_score(self.score)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

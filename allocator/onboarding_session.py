from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from allocator.enums import Goal, TimelineAnswer, VolatilityTolerance
from allocator.live_preview import LivePreviewBlender
from allocator.models import FinalizedAllocation, StockBondSplit

# Question id, prompt, allowed answers (in display order).
QUESTIONS: List[Tuple[str, str, Tuple[str, ...]]] = [
    ("goal",       "What's your main investment goal?",
     tuple(g.value for g in Goal)),
    ("timeline",   "When will you need this money?",
     tuple(t.value for t in TimelineAnswer)),
    ("volatility", "How do you feel about market ups and downs?",
     tuple(v.value for v in VolatilityTolerance)),
]

_ANSWER_TYPES = {
    "goal":       Goal,
    "timeline":   TimelineAnswer,
    "volatility": VolatilityTolerance,
}


@dataclass
class OnboardingSession:
    """
    Answers gathered by the three-step onboarding questionnaire.
    Answers may be given in any order and changed until finalized.
    """
    goal: Optional[Goal] = None
    timeline: Optional[TimelineAnswer] = None
    volatility: Optional[VolatilityTolerance] = None

    def answer(self, question_id: str, value) -> None:
        """
        Record *value* for *question_id*.

        Raises
        ------
        ValueError
            If the question id is unknown or the value is not an allowed answer.
        """
        try:
            answer_type = _ANSWER_TYPES[question_id]
        except KeyError:
            raise ValueError(f"Unknown question: {question_id!r}") from None
        if isinstance(value, str):
            value = value.strip().lower()
        setattr(self, question_id, answer_type(value))

    @property
    def answered_count(self) -> int:
        return sum(1 for a in self.answers().values() if a is not None)

    def answers(self) -> Dict[str, Optional[object]]:
        return {"goal": self.goal, "timeline": self.timeline, "volatility": self.volatility}

    def is_complete(self) -> bool:
        """Return True when all three questions have been answered."""
        return self.answered_count == len(QUESTIONS)

    def preview(self) -> StockBondSplit:
        return LivePreviewBlender.preview(self.volatility, self.timeline)

    def finalize(self) -> FinalizedAllocation:
        """Raises MissingAnswerError while any answer is outstanding."""
        return LivePreviewBlender.finalize_allocation(self.goal, self.timeline, self.volatility)

    def reset(self):
        """Clear every answer."""
        self.__init__()

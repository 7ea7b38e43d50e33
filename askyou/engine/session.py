from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from askyou.engine.estimator import Estimate, EstimationResult, Incomplete, estimate
from askyou.engine.questions import QuestionSpec, ScenarioDefinition, get_scenario

log = logging.getLogger(__name__)


class SessionState(str, Enum):
    NO_SCENARIO = "no_scenario"
    SCENARIO_SELECTED = "scenario_selected"
    ESTIMATED = "estimated"
    INCOMPLETE = "incomplete"


@dataclass
class DemoSession:
    """One visitor's calculator state. Answers never outlive their scenario."""

    scenario_id: Optional[str] = None
    answers: Dict[str, str] = field(default_factory=dict)
    result: Optional[Estimate] = None

    @property
    def scenario(self) -> Optional[ScenarioDefinition]:
        return get_scenario(self.scenario_id) if self.scenario_id else None

    @property
    def state(self) -> SessionState:
        if self.scenario_id is None:
            return SessionState.NO_SCENARIO
        if not self.answers:
            return SessionState.SCENARIO_SELECTED
        if isinstance(self.result, EstimationResult):
            return SessionState.ESTIMATED
        return SessionState.INCOMPLETE

    def select_scenario(self, scenario_id: str) -> None:
        get_scenario(scenario_id)
        if scenario_id == self.scenario_id:
            return
        log.info("demo scenario: %s -> %s", self.scenario_id, scenario_id)
        self.scenario_id = scenario_id
        self.answers = {}
        self._recompute()

    def set_answer(self, question_id: str, value: Optional[str]) -> Estimate:
        if self.scenario_id is None:
            raise RuntimeError("select a scenario before answering")
        self.scenario.question(question_id)
        text = "" if value is None else str(value)
        if text.strip():
            self.answers[question_id] = text
        else:
            self.answers.pop(question_id, None)
        return self._recompute()

    def reset(self) -> None:
        self.scenario_id = None
        self.answers = {}
        self.result = None

    def visible_questions(self) -> List[QuestionSpec]:
        s = self.scenario
        return s.visible_questions(self.answers) if s else []

    def _recompute(self) -> Estimate:
        if self.scenario_id is None:
            raise RuntimeError("no scenario selected")
        self.result = estimate(self.scenario_id, self.answers)
        return self.result

    @property
    def incomplete(self) -> Optional[Incomplete]:
        return self.result if isinstance(self.result, Incomplete) else None

"""Simulation headless et parallélisation."""

from .parallel import EpisodeSummary, ParallelRolloutRunner, RolloutSummary, WorkerSummary
from .policies import AgentPolicy, RandomLegalPolicy, random_policy_factory
from .runner import HeadlessEnv, StepResult, legal_moves

__all__ = [
    "HeadlessEnv",
    "StepResult",
    "legal_moves",
    "AgentPolicy",
    "RandomLegalPolicy",
    "random_policy_factory",
    "ParallelRolloutRunner",
    "EpisodeSummary",
    "RolloutSummary",
    "WorkerSummary",
]

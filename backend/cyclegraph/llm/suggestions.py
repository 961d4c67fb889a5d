"""
Fix suggestions for tiny cycles.

A tiny cycle is two services calling each other directly. The generator is
asked for three ways to break the dependency, and the solution titles are
pulled out of its answer so the UI can list them.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import requests

from cyclegraph.errors import SuggestionError
from cyclegraph.graph.tiny_cycles import TinyCycle
from cyclegraph.llm.client import LLMClient

logger = logging.getLogger(__name__)

DEFAULT_STRATEGIES = [
    "Introduce an intermediary service or event bus",
    "Use asynchronous messaging patterns",
    "Refactor to extract shared logic into a common service",
]

SOLUTION_PATTERN = re.compile(r"\*\*Solution \d+: ([^*]+)\*\*")

PROMPT_TEMPLATE = """You are a microservices architecture expert. I have detected a tiny cycle (bidirectional dependency) between two microservices:

Service A: "{node1_label}" (ID: {node1})
Service B: "{node2_label}" (ID: {node2})

These two services have a circular dependency where they call each other directly, which can lead to:
- Tight coupling
- Deployment challenges
- Potential cascading failures
- Difficult testing and maintenance

Please provide:
1. A brief explanation of why this is problematic (2-3 sentences)
2. THREE concrete architectural solutions to break this cycle
3. For each solution, explain the implementation approach

Format your response as:
**Problem:** [explanation]

**Solution 1: [Title]**
[Description and implementation steps]

**Solution 2: [Title]**
[Description and implementation steps]

**Solution 3: [Title]**
[Description and implementation steps]

**Recommended Approach:** [Which solution you recommend and why]"""


@dataclass
class FixSuggestion:
    cycle: TinyCycle
    suggestion: str
    strategies: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "cycle": self.cycle.to_dict(),
            "suggestion": self.suggestion,
            "strategies": list(self.strategies),
        }


def build_prompt(cycle: TinyCycle, node1_label: str, node2_label: str) -> str:
    return PROMPT_TEMPLATE.format(
        node1=cycle.node1,
        node2=cycle.node2,
        node1_label=node1_label,
        node2_label=node2_label,
    )


def parse_strategies(text: str) -> List[str]:
    """Solution titles from a formatted answer, or the generic defaults."""
    strategies = [m.strip() for m in SOLUTION_PATTERN.findall(text or "")]
    if not strategies:
        return list(DEFAULT_STRATEGIES)
    return strategies


class SuggestionService:
    def __init__(self, client: Optional[LLMClient] = None):
        self._client = client

    @property
    def client(self) -> LLMClient:
        """Lazily build the client so a missing endpoint only fails on use"""
        if self._client is None:
            self._client = LLMClient()
        return self._client

    def suggest_fix(self, cycle: TinyCycle, node1_label: str, node2_label: str) -> FixSuggestion:
        prompt = build_prompt(cycle, node1_label, node2_label)
        client = self.client

        try:
            text = client.generate(prompt)
        except (requests.RequestException, KeyError, IndexError, ValueError) as e:
            logger.error("[Suggest] Generator call failed for %s <-> %s: %s", cycle.node1, cycle.node2, e)
            raise SuggestionError("Failed to generate suggestion from AI service") from e

        return FixSuggestion(
            cycle=cycle,
            suggestion=text,
            strategies=parse_strategies(text),
        )

    def suggest_multiple_fixes(self, cycles: List[Tuple[TinyCycle, str, str]]) -> List[FixSuggestion]:
        return [
            self.suggest_fix(cycle, node1_label, node2_label)
            for cycle, node1_label, node2_label in cycles
        ]

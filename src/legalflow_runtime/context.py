"""Shared context threaded through a workflow run.

The context starts as the objective and grows by one entry per completed
step. Entries are typed and append-only; ``text`` renders them in order, so
what step N sees is always a prefix of what step N+1 sees.
"""

import json
from typing import Any

from legalflow_runtime.models import ContextEntry


class WorkflowContext:
    """Append-only record of the objective and prior step outputs.

    Usage:
        context = WorkflowContext("Research X then draft Y")
        context.append(1, "research", {"summary": "..."})
        prompt_context = context.text
    """

    def __init__(self, objective: str) -> None:
        self.objective = objective
        self._entries: list[ContextEntry] = []
        self._text = objective

    @property
    def entries(self) -> tuple[ContextEntry, ...]:
        return tuple(self._entries)

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def render_entry(entry: ContextEntry) -> str:
        """Serialized form of one entry as appended to the text."""
        output = json.dumps(entry.output, ensure_ascii=False, sort_keys=True)
        return f"\n\nStep {entry.step_number} Result ({entry.agent}):\n{output}"

    def append(self, step_number: int, agent: str, output: dict[str, Any]) -> ContextEntry:
        """Record a completed step's output.

        Raises:
            ValueError: If ``step_number`` does not follow the last entry
        """
        if self._entries and step_number <= self._entries[-1].step_number:
            raise ValueError(
                f"Context entry for step {step_number} after step {self._entries[-1].step_number}"
            )
        entry = ContextEntry(step_number=step_number, agent=agent, output=output)
        self._entries.append(entry)
        self._text += self.render_entry(entry)
        return entry

    def latest(self, agent: str | None = None) -> ContextEntry | None:
        """Most recent entry, optionally restricted to one agent kind."""
        for entry in reversed(self._entries):
            if agent is None or entry.agent == agent:
                return entry
        return None

"""Status workflow domain entity.

A workflow lists the statuses of an entity type and the (from, to) pairs
that may be written. Checklist gates are evaluated on top of it.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from app.domain.value_objects import TransitionKey


@dataclass(frozen=True)
class StatusWorkflow:
    """Permitted status transitions for one entity type."""

    entity_type: str
    statuses: tuple[str, ...] = ()
    transitions: frozenset[TransitionKey] = field(default_factory=frozenset)

    def permits(self, transition: TransitionKey) -> bool:
        """Return whether the workflow has an edge for the transition."""
        return transition in self.transitions

    def next_statuses(self, from_status: str) -> list[str]:
        """Return statuses reachable in one step from from_status, in status order."""
        reachable = {t.to_status for t in self.transitions if t.from_status == from_status}
        ordered = [s for s in self.statuses if s in reachable]
        return ordered + sorted(reachable.difference(ordered))

    @classmethod
    def from_edges(
        cls,
        entity_type: str,
        statuses: Iterable[str],
        edges: Mapping[str, Iterable[str]],
    ) -> "StatusWorkflow":
        """Build a workflow from {from_status: [to_status, ...]}."""
        return cls(
            entity_type=entity_type,
            statuses=tuple(statuses),
            transitions=frozenset(
                TransitionKey(src, dst) for src, targets in edges.items() for dst in targets
            ),
        )

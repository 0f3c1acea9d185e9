"""Configuration for the max-flow engine and the command-line front end."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class MaxFlowConfig:
    """Tunable behaviour of a max-flow run."""

    # Append a full per-edge flow dump to the trace after every iteration
    record_flow_state: bool = True

    # Stop the breadth-first search as soon as the sink is admitted
    stop_at_sink: bool = False

    # Terminals used when the caller does not name them
    default_source: int = 0
    default_sink: Optional[int] = None  # None means the last node

    def resolve_terminals(
        self,
        num_nodes: int,
        source: Optional[int] = None,
        sink: Optional[int] = None,
    ) -> Tuple[int, int]:
        """Fill in missing terminals from the configured defaults.

        Args:
            num_nodes: Node count of the network the terminals refer to.
            source: Explicit source, or None to use ``default_source``.
            sink: Explicit sink, or None to use ``default_sink``
                (``num_nodes - 1`` when that is None as well).

        Returns:
            ``(source, sink)`` pair. Range checking is left to the engine.
        """
        if source is None:
            source = self.default_source
        if sink is None:
            sink = num_nodes - 1 if self.default_sink is None else self.default_sink
        return source, sink


# Global configuration instance
MAX_FLOW_CONFIG = MaxFlowConfig()

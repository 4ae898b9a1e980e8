"""Configuration classes for pennant components."""

from dataclasses import dataclass
from typing import Optional

from pennant.errors import ResourceLimitError


@dataclass
class EliminationConfig:
    """Resource caps for elimination queries.

    The defaults impose no limit: network size is bounded by the league size and
    every augmentation pushes at least one game, so a query always terminates.
    Set the caps when the league data comes from an untrusted source.
    """

    # Largest flow network (in vertices) a single query may build
    max_vertices: Optional[int] = None

    # Largest number of augmenting paths a single max-flow run may push
    max_augmentations: Optional[int] = None

    def check_vertex_budget(self, vertex_count: int) -> None:
        """Raise ResourceLimitError if ``vertex_count`` exceeds ``max_vertices``."""
        if self.max_vertices is not None and vertex_count > self.max_vertices:
            raise ResourceLimitError("vertex", self.max_vertices, vertex_count)


# Global configuration instance
ELIMINATION_CONFIG = EliminationConfig()

"""League standings snapshot.

The snapshot is the read-only input of every elimination query. It is built
once by whatever loads the standings and is never modified afterwards, so it
can be shared freely between concurrent queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Sequence, Tuple

from pennant.errors import UnknownTeamError


@dataclass(frozen=True)
class TeamRecord:
    """Standing of one team.

    Attributes:
        name: Unique team name.
        wins: Games won so far.
        losses: Games lost so far.
        remaining: Games left to play, against any opponent.
    """

    name: str
    wins: int
    losses: int
    remaining: int


@dataclass(frozen=True)
class LeagueSnapshot:
    """Immutable standings of a league at one point of the season.

    Teams are identified by their position (load order) ``0..N-1``; ``names``
    gives the name of each position. ``against[i][j]`` is the number of games
    left between teams ``i`` and ``j``.

    A snapshot is expected to satisfy the invariants checked by
    :meth:`validate`. Queries do not check them again.
    """

    names: Tuple[str, ...]
    wins: Tuple[int, ...]
    losses: Tuple[int, ...]
    remaining: Tuple[int, ...]
    against: Tuple[Tuple[int, ...], ...]
    _index: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_index", {name: i for i, name in enumerate(self.names)}
        )

    @classmethod
    def from_records(
        cls,
        records: Iterable[TeamRecord],
        against: Sequence[Sequence[int]],
    ) -> LeagueSnapshot:
        """Build a snapshot from per-team records and the remaining-games matrix.

        The order of ``records`` defines the team indices, and row/column ``i``
        of ``against`` belongs to the ``i``-th record.
        """
        records = tuple(records)
        return cls(
            names=tuple(r.name for r in records),
            wins=tuple(r.wins for r in records),
            losses=tuple(r.losses for r in records),
            remaining=tuple(r.remaining for r in records),
            against=tuple(tuple(row) for row in against),
        )

    def __len__(self) -> int:
        return len(self.names)

    def index_of(self, name: str) -> int:
        """Return the index of ``name``; raise UnknownTeamError if absent."""
        try:
            return self._index[name]
        except (KeyError, TypeError):
            raise UnknownTeamError(name) from None

    def name_of(self, index: int) -> str:
        return self.names[index]

    def record(self, index: int) -> TeamRecord:
        return TeamRecord(
            self.names[index],
            self.wins[index],
            self.losses[index],
            self.remaining[index],
        )

    def leader(self) -> int:
        """Index of the team with the most wins; the first in load order on ties."""
        return max(range(len(self.wins)), key=self.wins.__getitem__)

    def validate(self) -> LeagueSnapshot:
        """Check the snapshot invariants and return ``self``.

        Meant for loaders; the elimination engine trusts its input.

        Raises:
            ValueError: On the first violated invariant.
        """
        n = len(self.names)
        if n < 1:
            raise ValueError("A league needs at least one team.")
        if len(self._index) != n:
            raise ValueError("Team names must be unique.")
        for label, column in (
            ("wins", self.wins),
            ("losses", self.losses),
            ("remaining", self.remaining),
        ):
            if len(column) != n:
                raise ValueError(f"Expected {n} '{label}' values, got {len(column)}.")
            for name, value in zip(self.names, column):
                if value < 0:
                    raise ValueError(f"Team '{name}' has negative {label}: {value}.")
        if len(self.against) != n or any(len(row) != n for row in self.against):
            raise ValueError(f"The against matrix must be {n}x{n}.")
        for i in range(n):
            if self.against[i][i] != 0:
                raise ValueError(f"Team '{self.names[i]}' has games against itself.")
            for j in range(i + 1, n):
                if self.against[i][j] != self.against[j][i]:
                    raise ValueError(
                        f"Games between '{self.names[i]}' and '{self.names[j]}' "
                        "are not symmetric."
                    )
                if self.against[i][j] < 0:
                    raise ValueError(
                        f"Negative game count between '{self.names[i]}' "
                        f"and '{self.names[j]}'."
                    )
            if sum(self.against[i]) != self.remaining[i]:
                raise ValueError(
                    f"Team '{self.names[i]}' has {self.remaining[i]} remaining games "
                    f"but {sum(self.against[i])} scheduled against other teams."
                )
        return self

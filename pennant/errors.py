"""Exceptions raised by pennant.

Programmer errors (a vertex that is not in a flow network, a snapshot that
breaks its own invariants) are reported with the builtin ``KeyError`` and
``ValueError``; only the two conditions a caller is expected to handle get a
dedicated type.
"""


class UnknownTeamError(KeyError):
    """A query named a team that is not part of the league (or passed None)."""

    def __init__(self, team: object) -> None:
        super().__init__(team)
        self.team = team

    def __str__(self) -> str:
        return f"Unknown team: {self.team!r}"


class ResourceLimitError(RuntimeError):
    """A configured size or iteration cap was exceeded."""

    def __init__(self, what: str, limit: int, actual: int) -> None:
        super().__init__(f"{what} limit exceeded: {actual} > {limit}")
        self.what = what
        self.limit = limit
        self.actual = actual

"""Exception types shared across pidmatch."""

__all__ = ["PidmatchError", "DuplicateRelationError"]


class PidmatchError(Exception):
    """Base class for errors raised by pidmatch."""


class DuplicateRelationError(PidmatchError):
    """Raised when adding a relation that is already in the list."""

    MESSAGE = (
        "This exact relation already exists in the list (same identifier and relation type). "
        "Note: You can add the same identifier with a different relation type."
    )

    def __init__(self, identifier: str, relation_type: str, clear_after: float = 5.0) -> None:
        """Initialize duplicate relation error.

        Parameters
        ----------
        identifier : str
            Identifier that was rejected.
        relation_type : str
            Relation type of the rejected entry.
        clear_after : float, optional
            Seconds the message stays visible to the user.
        """
        super().__init__(self.MESSAGE)
        self.identifier = identifier
        self.relation_type = relation_type
        self.clear_after = clear_after

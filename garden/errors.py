"""Exceptions raised by the bed planner."""


class ArrangementError(Exception):
    """Base class for every failure of an arrangement request."""


class InvalidDimensionsError(ArrangementError, ValueError):
    """Bed width/height missing or below 1, or a lock mask of the wrong shape."""


class InvalidSelectionError(ArrangementError, TypeError):
    """Plant selections are not a list of selections."""


class InsufficientSpaceError(ArrangementError):
    """More squares requested than there are unlocked squares in the bed."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough space: {required} plants require more than "
            f"{available} available squares"
        )


class ConstraintError(ArrangementError):
    """The greedy scan could not place some plants without an enemy neighbour.

    Attributes:
        unplaced_plants: distinct plant IDs left over, in the order they
            first failed.
    """

    headline = "Could not place all plants due to companion/enemy constraints."

    def __init__(self, unplaced_plants: list[str], names: list[str]):
        self.unplaced_plants = list(unplaced_plants)
        super().__init__(
            f"{self.headline} Unable to place: {', '.join(names)}. "
            "Consider removing plants with many enemies or reducing quantities."
        )


class MinimumQuantityError(ConstraintError):
    """Fill mode could not place the requested minimum quantities."""

    headline = (
        "Could not place minimum plant quantities due to companion/enemy "
        "constraints."
    )

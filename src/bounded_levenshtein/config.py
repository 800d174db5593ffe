from __future__ import annotations

"""Cost configuration and error types."""

from typing import Any, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    NonNegativeFloat,
    NonNegativeInt,
    ValidationError,
)

Cost = Union[int, float]
Weight = Union[NonNegativeInt, NonNegativeFloat]


class EditCosts(BaseModel):
    """Weights charged for each edit operation."""

    model_config = ConfigDict(frozen=True)

    deletion: Weight = 1
    insertion: Weight = 1
    substitution: Weight = 1

    @property
    def is_integral(self) -> bool:
        return all(
            isinstance(value, int)
            for value in (self.deletion, self.insertion, self.substitution)
        )

    def swapped(self) -> "EditCosts":
        """Costs seen from the other side: deleting from one is inserting into the other."""

        return EditCosts(
            deletion=self.insertion,
            insertion=self.deletion,
            substitution=self.substitution,
        )


UNIT_COSTS = EditCosts()


class PreconditionError(ValueError):
    """Raised when a caller breaks the input contract of a distance call."""


def load_costs(data: Optional[Mapping[str, Any]]) -> EditCosts:
    """Validate a mapping of weights, falling back to unit costs for missing keys."""

    if data is None:
        return UNIT_COSTS
    try:
        return EditCosts.model_validate(dict(data))
    except ValidationError as exc:
        raise ValueError(f"Invalid edit costs: {exc}") from exc


def make_costs(deletion: Cost = 1, insertion: Cost = 1, substitution: Cost = 1) -> EditCosts:
    if deletion == insertion == substitution == 1:
        return UNIT_COSTS
    return load_costs(
        {"deletion": deletion, "insertion": insertion, "substitution": substitution}
    )

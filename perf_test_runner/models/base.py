"""Base model for configuration and result records."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model rejecting unknown fields.

    Execution configs come from hand-written YAML, so a misspelled option
    fails validation instead of being silently dropped.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

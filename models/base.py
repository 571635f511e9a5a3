from pydantic import BaseModel, ConfigDict


class BaseGolfModel(BaseModel):
    """Shared configuration for scorecard models.

    Fields may be populated by their Python name or by their wire alias
    (``playerName``, ``in``), and assignments are re-validated.
    """
    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

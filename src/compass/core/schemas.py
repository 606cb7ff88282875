"""Shared Pydantic base schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema whose JSON form uses camelCase keys.

    The embedded admin UI speaks camelCase (``mediaUrl``, ``cardIds``);
    Python code keeps snake_case attribute names. Both spellings are
    accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(CamelModel):
    """Acknowledgement for operations without a resource to return."""

    success: bool = True
    message: str | None = None

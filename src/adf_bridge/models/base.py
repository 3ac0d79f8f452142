"""
Base model for the ADF bridge data structures.

All models that are built from REST payloads derive from ``ApiModel`` so
they share one construction entry point and one serialisation shape.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base class for models created from Jira REST payloads.

    Subclasses implement ``from_api_response`` and must tolerate payloads of
    the wrong shape: the REST collaborator is not trusted to be consistent.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Create a model instance from an API response.

        Args:
            data: The raw payload
            **kwargs: Additional context

        Returns:
            An instance of the model
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to a simplified dictionary, omitting unset values."""
        return self.model_dump(exclude_none=True)

"""Pydantic schemas for the CSV export API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CsvResponse(BaseModel):
    """
    Response body of an accepted CSV export.

    Attributes:
        tracking_id: Opaque id referring to the export
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"example": {"trackingId": "Q2hZb8m6TqS0x1W4dKp3aA"}},
    )

    tracking_id: str = Field(..., description="Export tracking id")

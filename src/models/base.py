"""Shared configuration for domain models."""

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from src.dal.keys import has_known_tag


class DomainModel(BaseModel):
    """
    Base for caller-facing records.

    Fields are snake_case in Python and camelCase on the wire. Identifier
    fields (``*_id``) hold bare ids and never carry an entity tag.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="after")
    def reject_tagged_ids(self) -> "DomainModel":
        """Reject identifier values that start with a storage tag."""
        for field_name in type(self).model_fields:
            if not field_name.endswith("_id"):
                continue
            value = getattr(self, field_name)
            if isinstance(value, str) and has_known_tag(value):
                raise ValueError(f"{field_name} must not carry an entity tag: {value!r}")
        return self

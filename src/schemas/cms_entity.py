"""Shared base for CMS-backed domain models."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CmsEntity(BaseModel):
    """Base model for flattened CMS entities.

    Fields are snake_case in Python and camelCase on the wire, matching the
    keys produced by the normalizers. Either spelling is accepted on input.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

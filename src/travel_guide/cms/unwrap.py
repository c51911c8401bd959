"""Decoder for the CMS relation-wrapper shapes.

The same logical entity reaches us in several wire shapes, depending on the
CMS schema version and on how deeply a relation was populated:

    flat:       {"id": 1, "name": "Travel"}
    attributes: {"id": 1, "attributes": {"name": "Travel"}}
    relation:   {"data": <entity | [entity, ...] | null>}

unwrap_entity and unwrap_relation reduce all of them to flat dicts. They
operate on the untyped JSON tree only and know nothing about domain types,
so a future wire-shape change is absorbed here. Both are idempotent:
unwrapping a flat entity returns it unchanged.
"""

from typing import Any

WRAPPER_KEYS = frozenset({"data", "meta"})


def is_relation_wrapper(value: Any) -> bool:
    """True for `{data: ...}` envelopes (optionally carrying `meta`)."""
    return isinstance(value, dict) and "data" in value and set(value) <= WRAPPER_KEYS


def unwrap_entity(value: Any) -> Any:
    """Unwrap a single-entity relation.

    Args:
        value: Raw JSON value in any supported shape

    Returns:
        None for null input or an empty relation, a flat dict for wrapped
        entities, anything else unchanged. A relation holding a list yields
        its first non-null entity.
    """
    if value is None:
        return None

    if is_relation_wrapper(value):
        data = value["data"]
        if isinstance(data, list):
            for item in data:
                entity = unwrap_entity(item)
                if entity is not None:
                    return entity
            return None
        return unwrap_entity(data)

    if isinstance(value, dict) and isinstance(value.get("attributes"), dict):
        flattened = {key: item for key, item in value.items() if key != "attributes"}
        flattened.update(value["attributes"])
        if "id" in value:
            flattened["id"] = value["id"]
        return flattened

    return value


def unwrap_relation(value: Any) -> list[Any]:
    """Unwrap a collection relation into a list of flat entities.

    Args:
        value: Raw JSON value in any supported shape

    Returns:
        [] for null input, the unwrapped elements (nulls dropped) for
        wrapped or bare lists, and a one-element list for a single object.
        Scalars such as unpopulated relation ids yield [].
    """
    if value is None:
        return []

    if is_relation_wrapper(value):
        return unwrap_relation(value["data"])

    if isinstance(value, list):
        entities = (unwrap_entity(item) for item in value)
        return [entity for entity in entities if entity is not None]

    if isinstance(value, dict):
        return [unwrap_entity(value)]

    return []

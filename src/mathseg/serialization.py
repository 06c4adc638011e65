"""Serialization: JSON round-trip for components and blocks.

Converts Component and ComponentBlock values to/from JSON-compatible dicts,
so a scan result can be handed to a rendering layer in another process or
stored alongside the document.

All output is deterministic (sorted keys).

Example:
    from mathseg import parse
    from mathseg.serialization import to_json, from_json

    blocks = parse("Area: $\\pi r^2$")
    restored = from_json(to_json(blocks))
    assert blocks == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from mathseg.components import Component, ComponentBlock, ComponentType


def to_dict(value: Component | ComponentBlock) -> dict[str, Any]:
    """Convert a component or block to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization. Component
    types are stored by enum member name.

    Args:
        value: Component or ComponentBlock.

    Returns:
        Dict with ``_type`` and the value's fields.

    """
    if isinstance(value, Component):
        return {"_type": "Component", "text": value.text, "type": value.type.name}
    if isinstance(value, ComponentBlock):
        return {
            "_type": "ComponentBlock",
            "components": [to_dict(component) for component in value.components],
        }
    msg = f"Cannot serialize {type(value).__name__}"
    raise TypeError(msg)


def from_dict(data: dict[str, Any]) -> Component | ComponentBlock:
    """Reconstruct a component or block from a dict.

    Args:
        data: Dict with ``_type`` and fields (as produced by to_dict).

    Returns:
        Component or ComponentBlock.

    Raises:
        ValueError: If ``_type`` or the component type is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized value"
        raise ValueError(msg)

    if type_name == "Component":
        return Component(text=data.get("text", ""), type=_component_type(data.get("type")))
    if type_name == "ComponentBlock":
        components = []
        for item in data.get("components", []):
            component = from_dict(item)
            if not isinstance(component, Component):
                msg = f"Expected Component inside ComponentBlock, got {type(component).__name__}"
                raise ValueError(msg)
            components.append(component)
        return ComponentBlock(tuple(components))

    msg = f"Unknown value type: {type_name!r}"
    raise ValueError(msg)


def _component_type(name: Any) -> ComponentType:
    """Look up a ComponentType by member name."""
    try:
        return ComponentType[name]
    except (KeyError, TypeError):
        msg = f"Unknown component type: {name!r}"
        raise ValueError(msg) from None


def to_json(blocks: Iterable[ComponentBlock], *, indent: int | None = None) -> str:
    """Serialize a block sequence to a JSON string.

    Args:
        blocks: Blocks to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string holding a list of blocks.

    """
    return json.dumps([to_dict(block) for block in blocks], sort_keys=True, indent=indent)


def from_json(data: str) -> list[ComponentBlock]:
    """Deserialize a block sequence from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Blocks in order.

    Raises:
        ValueError: If the JSON isn't a list of blocks.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a list of blocks, got {type(raw).__name__}"
        raise ValueError(msg)

    blocks: list[ComponentBlock] = []
    for item in raw:
        block = from_dict(item)
        if not isinstance(block, ComponentBlock):
            msg = f"Expected ComponentBlock, got {type(block).__name__}"
            raise ValueError(msg)
        blocks.append(block)
    return blocks

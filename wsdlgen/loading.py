"""Load a Definition from its JSON description.

Expected shape::

    {
      "targetNamespace": "http://example.com/users",
      "messages": [
        {"name": "GetUserRequest", "parts": [{"name": "body", "element": "GetUser"}]},
        {"name": "GetUserResponse", "namespace": "http://example.com/other"}
      ]
    }

Messages default to the target namespace. Part ``element``/``type`` values are
resolved against the target namespace unless written as ``{ns}local``.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import DefinitionError
from .ir import Definition, Message, MessagePart, QName


def _parse_qname(value: str, default_namespace: str) -> QName:
    text = value.strip()
    if text.startswith("{"):
        namespace, sep, local_part = text[1:].partition("}")
        if not sep or not local_part:
            raise DefinitionError(f"Malformed qualified name '{value}'")
        return QName(namespace, local_part)
    if not text:
        raise DefinitionError("Qualified name must not be empty")
    return QName(default_namespace, text)


def _parse_part(entry: Any, message_name: str, target_namespace: str) -> MessagePart:
    if not isinstance(entry, dict) or not entry.get("name"):
        raise DefinitionError(f"Message '{message_name}': every part needs a 'name'")
    element = entry.get("element")
    type_ = entry.get("type")
    if element is not None and type_ is not None:
        raise DefinitionError(
            f"Message '{message_name}': part '{entry['name']}' declares both element and type"
        )
    return MessagePart(
        name=str(entry["name"]),
        element=_parse_qname(str(element), target_namespace) if element is not None else None,
        type=_parse_qname(str(type_), target_namespace) if type_ is not None else None,
    )


def _parse_message(entry: Any, index: int, target_namespace: str) -> Message:
    if not isinstance(entry, dict):
        raise DefinitionError(f"messages[{index}] must be an object")
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise DefinitionError(f"messages[{index}] is missing a 'name'")
    namespace = entry.get("namespace", target_namespace)
    if not isinstance(namespace, str):
        raise DefinitionError(f"Message '{name}': 'namespace' must be a string")
    parts = entry.get("parts", [])
    if not isinstance(parts, list):
        raise DefinitionError(f"Message '{name}': 'parts' must be a list")
    return Message(
        qname=QName(namespace, name.strip()),
        parts=tuple(_parse_part(p, name, target_namespace) for p in parts),
    )


def definition_from_dict(payload: Any) -> Definition:
    if not isinstance(payload, dict):
        raise DefinitionError("Definition document must be a JSON object")
    target_namespace = payload.get("targetNamespace", "")
    if not isinstance(target_namespace, str):
        raise DefinitionError("'targetNamespace' must be a string")
    messages = payload.get("messages", [])
    if not isinstance(messages, list):
        raise DefinitionError("'messages' must be a list")

    definition = Definition(target_namespace)
    for index, entry in enumerate(messages):
        definition.add_message(_parse_message(entry, index, target_namespace))
    return definition


def load_definition(path: Path | str) -> Definition:
    definition_file = Path(path)
    try:
        payload = json.loads(definition_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise DefinitionError(f"Cannot read definition {definition_file}: {exc}") from exc
    return definition_from_dict(payload)

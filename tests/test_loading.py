from __future__ import annotations

from pathlib import Path

import pytest

from wsdlgen.errors import DefinitionError
from wsdlgen.ir import Definition, Message, PortType, QName
from wsdlgen.loading import definition_from_dict, load_definition

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def test_load_fixture_definition() -> None:
    definition = load_definition(FIXTURES / "users.json")

    assert definition.target_namespace == "http://example.com/users"
    assert [q.local_part for q in definition.messages] == [
        "GetUserRequest",
        "GetUserResponse",
        "UserNotFoundFault",
        "PingRequest",
        "UserChangedResponse",
        "AuditRecord",
    ]
    request = definition.get_message(QName("http://example.com/users", "GetUserRequest"))
    assert request is not None
    assert request.parts[0].name == "body"
    assert request.parts[0].element == QName("http://example.com/users", "GetUserRequest")


def test_explicit_namespaces() -> None:
    definition = definition_from_dict(
        {
            "targetNamespace": "urn:a",
            "messages": [
                {
                    "name": "Echo",
                    "namespace": "urn:b",
                    "parts": [{"name": "text", "type": "{http://www.w3.org/2001/XMLSchema}string"}],
                }
            ],
        }
    )

    message = definition.get_message(QName("urn:b", "Echo"))
    assert message is not None
    assert message.parts[0].type == QName("http://www.w3.org/2001/XMLSchema", "string")
    assert message.parts[0].element is None


@pytest.mark.parametrize(
    ("payload", "match"),
    [
        ([], "JSON object"),
        ({"targetNamespace": 3}, "targetNamespace"),
        ({"messages": {}}, "'messages' must be a list"),
        ({"messages": ["GetUser"]}, r"messages\[0\] must be an object"),
        ({"messages": [{"parts": []}]}, r"messages\[0\] is missing a 'name'"),
        ({"messages": [{"name": "A", "parts": [{}]}]}, "every part needs a 'name'"),
        (
            {"messages": [{"name": "A", "parts": [{"name": "p", "element": "x", "type": "y"}]}]},
            "both element and type",
        ),
        ({"messages": [{"name": "A", "parts": [{"name": "p", "type": "{urn:x"}]}]}, "Malformed"),
        ({"messages": [{"name": "A"}, {"name": "A"}]}, "already declared"),
    ],
)
def test_malformed_definitions(payload: object, match: str) -> None:
    with pytest.raises(DefinitionError, match=match):
        definition_from_dict(payload)


def test_unreadable_definition(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    with pytest.raises(DefinitionError, match="Cannot read definition"):
        load_definition(broken)


def test_messages_view_is_read_only() -> None:
    definition = Definition("urn:a")
    definition.add_message(Message(QName("urn:a", "A")))

    with pytest.raises(TypeError):
        definition.messages[QName("urn:a", "B")] = Message(QName("urn:a", "B"))  # type: ignore[index]


def test_port_type_registration_rules() -> None:
    definition = Definition("urn:a")

    with pytest.raises(DefinitionError, match="without a qualified name"):
        definition.add_port_type(PortType())

    definition.add_port_type(PortType(qname=QName("urn:a", "P")))
    with pytest.raises(DefinitionError, match="already registered"):
        definition.add_port_type(PortType(qname=QName("urn:a", "P")))

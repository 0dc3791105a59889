"""Serialize wire models into ElementTree elements.

Field aliases carry the element names. An alias of ``xsi:type`` becomes the
XML Schema instance type attribute, and ``>`` in an alias nests elements
(``bidCeiling>microAmount``). ``None`` values and empty lists are omitted.

With a namespace, elements serialize under the ``cm`` prefix and type names
are written as ``cm:ManualCpcBiddingScheme`` so they resolve into it.
"""

import xml.etree.ElementTree as ET
from enum import Enum
from typing import Any

from pydantic import BaseModel

from core.wire.namespaces import (
    PATH_SEPARATOR,
    SERVICE_PREFIX,
    XSI_NS,
    XSI_TYPE,
    XSI_TYPE_QNAME,
    qualify,
    qualify_type,
)

ET.register_namespace("xsi", XSI_NS)


def format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode(model: BaseModel, tag: str, namespace: str | None = None) -> ET.Element:
    element = ET.Element(qualify(tag, namespace))
    encode_into(element, model, namespace)
    return element


def encode_into(element: ET.Element, model: BaseModel, namespace: str | None) -> None:
    if namespace:
        ET.register_namespace(SERVICE_PREFIX, namespace)
    # Intermediate elements created for nested paths, keyed by path prefix
    parents: dict[tuple[str, ...], ET.Element] = {}

    for name, field in type(model).model_fields.items():
        value = getattr(model, name)
        alias = field.alias or name

        if alias == XSI_TYPE:
            if value:
                element.set(XSI_TYPE_QNAME, qualify_type(value, namespace))
            continue
        if value is None or (isinstance(value, list) and not value):
            continue

        *prefix, leaf = alias.split(PATH_SEPARATOR)
        parent = element
        for depth, segment in enumerate(prefix):
            key = tuple(prefix[: depth + 1])
            if key not in parents:
                parents[key] = ET.SubElement(parent, qualify(segment, namespace))
            parent = parents[key]

        items = value if isinstance(value, list) else [value]
        for item in items:
            append_value(parent, leaf, item, namespace)


def append_value(parent: ET.Element, tag: str, value: Any, namespace: str | None) -> ET.Element:
    child = ET.SubElement(parent, qualify(tag, namespace))
    if isinstance(value, BaseModel):
        encode_into(child, value, namespace)
    else:
        child.text = format_scalar(value)
    return child


def to_string(element: ET.Element) -> bytes:
    return ET.tostring(element, encoding="utf-8", xml_declaration=True)

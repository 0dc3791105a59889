"""Deserialize ElementTree elements into wire models.

Elements are matched on local name, so responses decode the same whether or
not the service qualifies them. Models that declare a ``variants`` registry
are resolved through their ``xsi:type`` attribute before decoding.
"""

import types
import xml.etree.ElementTree as ET
from typing import Any, Union, get_args, get_origin

import structlog
from pydantic import BaseModel, ValidationError

from core.wire.namespaces import (
    PATH_SEPARATOR,
    XSI_NS,
    XSI_TYPE,
    local_name,
    xsi_type_of,
)
from exceptions.custom_exceptions import AdWordsDecodeException

logger = structlog.get_logger(__name__)

XSI_NIL_QNAME = f"{{{XSI_NS}}}nil"


def parse(payload: bytes | str) -> ET.Element:
    try:
        return ET.fromstring(payload)
    except ET.ParseError as e:
        raise AdWordsDecodeException(
            message=f"Malformed XML: {e}",
            details={"position": getattr(e, "position", None)},
        )


def children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if local_name(child.tag) == name]


def find_path(element: ET.Element, path: str) -> list[ET.Element]:
    """Return all elements at the end of a ``a>b>c`` path.

    Every segment but the last follows the first match; the last segment
    collects every match so repeated elements come back as a list.
    """
    *prefix, leaf = path.split(PATH_SEPARATOR)
    node = element
    for segment in prefix:
        matches = children(node, segment)
        if not matches:
            return []
        node = matches[0]
    return children(node, leaf)


def find_text(element: ET.Element, path: str) -> str | None:
    nodes = find_path(element, path)
    if not nodes:
        return None
    return nodes[0].text or ""


def resolve_variant(model_cls: type, element: ET.Element, strict: bool) -> type | None:
    """Pick the concrete model for a polymorphic element.

    Returns ``None`` when the element carries an unknown ``xsi:type`` and
    strict mode is off, so callers can skip it.
    """
    variants = getattr(model_cls, "variants", None)
    if not variants or getattr(model_cls, "xsi_type", ""):
        return model_cls

    type_name = xsi_type_of(element)
    if type_name is None:
        raise AdWordsDecodeException(
            message=f"Missing xsi:type on <{local_name(element.tag)}>",
            details={"base": model_cls.__name__},
        )
    variant = variants.get(type_name)
    if variant is not None:
        return variant
    if strict:
        raise AdWordsDecodeException(
            message=f"Unknown {model_cls.__name__} type {type_name!r}",
            details={"base": model_cls.__name__, "xsi_type": type_name},
        )
    logger.debug("Skipping unknown xsi:type", base=model_cls.__name__, xsi_type=type_name)
    return None


def decode(model_cls: type, element: ET.Element, strict: bool = False) -> Any:
    if _is_nil(element):
        return None
    cls = resolve_variant(model_cls, element, strict)
    if cls is None:
        return None

    data: dict[str, Any] = {}
    for name, field in cls.model_fields.items():
        alias = field.alias or name
        if alias == XSI_TYPE:
            type_name = xsi_type_of(element)
            if type_name is not None:
                data[name] = type_name
            continue

        nodes = find_path(element, alias)
        if not nodes:
            continue
        many, inner = _unwrap(field.annotation)
        if many:
            values = [_decode_value(inner, node, strict) for node in nodes]
            data[name] = [value for value in values if value is not None]
        else:
            value = _decode_value(inner, nodes[0], strict)
            if value is not None:
                data[name] = value

    try:
        return cls.model_validate(data)
    except ValidationError as e:
        raise AdWordsDecodeException(
            message=f"Invalid <{local_name(element.tag)}> for {cls.__name__}",
            details={"errors": e.errors(include_url=False)},
        )


def decode_all(model_cls: type, element: ET.Element, path: str, strict: bool = False) -> list:
    values = [decode(model_cls, node, strict) for node in find_path(element, path)]
    return [value for value in values if value is not None]


def _is_nil(element: ET.Element) -> bool:
    return element.get(XSI_NIL_QNAME) == "true"


def _decode_value(inner: Any, node: ET.Element, strict: bool) -> Any:
    if _is_nil(node):
        return None
    if isinstance(inner, type) and issubclass(inner, BaseModel):
        return decode(inner, node, strict)
    if node.text is None:
        return "" if inner is str else None
    return node.text


def _unwrap(annotation: Any) -> tuple[bool, Any]:
    """Return (is_list, item_type) with Optional stripped."""
    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return _unwrap(args[0])
        return False, annotation
    if origin in (list, tuple):
        args = get_args(annotation)
        return True, args[0] if args else Any
    return False, annotation

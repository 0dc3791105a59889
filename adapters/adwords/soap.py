"""SOAP 1.1 envelope handling for the AdWords cm services."""

import xml.etree.ElementTree as ET

import structlog

from core.models.common import ApiError, RequestHeader, ResponseHeader
from core.wire.decoder import children, decode, decode_all, find_text, parse
from core.wire.encoder import encode, to_string
from core.wire.namespaces import SOAP_ENV_NS, local_name, qualify
from exceptions.custom_exceptions import AdWordsApiException, AdWordsDecodeException

logger = structlog.get_logger(__name__)

ET.register_namespace("soapenv", SOAP_ENV_NS)


def build_envelope(body: ET.Element, header: RequestHeader, namespace: str) -> bytes:
    envelope = ET.Element(qualify("Envelope", SOAP_ENV_NS))
    soap_header = ET.SubElement(envelope, qualify("Header", SOAP_ENV_NS))
    soap_header.append(encode(header, "RequestHeader", namespace))
    soap_body = ET.SubElement(envelope, qualify("Body", SOAP_ENV_NS))
    soap_body.append(body)
    return to_string(envelope)


def parse_envelope(payload: bytes | str) -> tuple[ResponseHeader | None, ET.Element]:
    """Return the response header and the first child of the SOAP Body.

    Raises AdWordsApiException when the Body holds a Fault.
    """
    envelope = parse(payload)
    if local_name(envelope.tag) != "Envelope":
        raise AdWordsDecodeException(
            message=f"Expected SOAP Envelope, got <{local_name(envelope.tag)}>"
        )

    response_header = None
    for soap_header in children(envelope, "Header"):
        for node in children(soap_header, "ResponseHeader"):
            response_header = decode(ResponseHeader, node)

    bodies = children(envelope, "Body")
    if not bodies or len(bodies[0]) == 0:
        raise AdWordsDecodeException(message="SOAP Envelope has no Body content")
    content = bodies[0][0]

    if local_name(content.tag) == "Fault":
        raise fault_to_exception(content)
    return response_header, content


def is_fault(payload: bytes | str) -> bool:
    try:
        envelope = parse(payload)
    except AdWordsDecodeException:
        return False
    return any(
        local_name(content.tag) == "Fault"
        for body in children(envelope, "Body")
        for content in body
    )


def fault_to_exception(fault: ET.Element) -> AdWordsApiException:
    fault_string = find_text(fault, "faultstring") or "SOAP fault"
    errors: list[ApiError] = []
    for detail in children(fault, "detail"):
        for api_exception in children(detail, "ApiExceptionFault"):
            errors.extend(decode_all(ApiError, api_exception, "errors"))

    logger.error(
        "AdWords SOAP fault",
        component="adwords-soap",
        fault=fault_string,
        errors=[str(error) for error in errors],
    )
    return AdWordsApiException(
        message=fault_string,
        errors=errors,
        details={
            "fault_code": find_text(fault, "faultcode"),
            "errors": [error.model_dump(exclude_none=True) for error in errors],
        },
    )

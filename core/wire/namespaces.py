XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
SOAP_ENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"

# Field alias that maps a model attribute onto the xsi:type attribute.
XSI_TYPE = "xsi:type"
XSI_TYPE_QNAME = f"{{{XSI_NS}}}type"

# Alias separator for nested element paths, e.g. "budget>budgetId".
PATH_SEPARATOR = ">"

# Prefix bound to the cm service namespace; qualifies xsi:type values.
SERVICE_PREFIX = "cm"


def local_name(tag: str) -> str:
    """Strip the "{namespace}" prefix ElementTree puts on qualified tags."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def qualify(name: str, namespace: str | None) -> str:
    return f"{{{namespace}}}{name}" if namespace else name


def xsi_type_of(element) -> str | None:
    """Return the xsi:type value with any "ns:" prefix removed."""
    value = element.get(XSI_TYPE_QNAME)
    if value is None:
        return None
    return value.rsplit(":", 1)[-1]


def qualify_type(type_name: str, namespace: str | None) -> str:
    return f"{SERVICE_PREFIX}:{type_name}" if namespace else type_name

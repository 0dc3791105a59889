import xml.etree.ElementTree as ET
from typing import Mapping, Sequence

import structlog
from pydantic import BaseModel

from adapters.adwords.client import AdWordsClient
from core.models.common import OPERATOR_VALUES, ApiError, AWQLQuery, Selector
from core.wire.decoder import decode_all, find_text
from core.wire.encoder import append_value, encode
from core.wire.namespaces import qualify
from exceptions.custom_exceptions import (
    AdWordsDecodeException,
    AdWordsPartialFailureException,
    AdWordsValidationException,
)

logger = structlog.get_logger(__name__)


class BaseAdWordsService:
    """Request/response plumbing shared by the cm services.

    Subclasses set the service name, the element name their ``get`` expects
    for the selector, and the model returned as page entries.
    """

    SERVICE_NAME: str = ""
    SELECTOR_TAG: str = "serviceSelector"
    ENTRY_MODEL: type = BaseModel

    def __init__(self, client: AdWordsClient) -> None:
        self.client = client

    @property
    def namespace(self) -> str:
        return self.client.namespace

    async def _get_page(self, selector: Selector) -> tuple[list, int]:
        body = ET.Element(qualify("get", self.namespace))
        body.append(encode(selector, self.SELECTOR_TAG, self.namespace))
        response = await self.client.request(self.SERVICE_NAME, "get", body)
        return self._parse_page(response)

    async def _query_page(self, query: str) -> tuple[list, int]:
        body = encode(AWQLQuery(query=query), "query", self.namespace)
        response = await self.client.request(self.SERVICE_NAME, "query", body)
        return self._parse_page(response)

    async def _mutate(
        self,
        action: str,
        operations: Mapping[str, Sequence[BaseModel]],
        result_model: type,
    ) -> list:
        body = self._build_operations(action, operations)
        count = len(body)
        if count == 0:
            logger.info("No operations to execute", service=self.SERVICE_NAME, action=action)
            return []

        response = await self.client.request(self.SERVICE_NAME, action, body)
        strict = self.client.strict_mode
        results = decode_all(result_model, response, "rval>value", strict)
        errors = decode_all(ApiError, response, "rval>partialFailureErrors", strict)

        if errors:
            logger.warning(
                "Partial failure",
                service=self.SERVICE_NAME,
                action=action,
                operations=count,
                errors=len(errors),
            )
            raise AdWordsPartialFailureException(errors=errors, results=results)

        logger.info(
            "Mutation successful", service=self.SERVICE_NAME, action=action, operations=count
        )
        return results

    def _build_operations(
        self, action: str, operations: Mapping[str, Sequence[BaseModel]]
    ) -> ET.Element:
        body = ET.Element(qualify(action, self.namespace))
        for operator, operands in operations.items():
            if operator not in OPERATOR_VALUES:
                raise AdWordsValidationException(
                    message=f"Unsupported operator {operator!r}",
                    details={"operator": operator, "allowed": list(OPERATOR_VALUES)},
                )
            for operand in operands:
                operation = ET.SubElement(body, qualify("operations", self.namespace))
                append_value(operation, "operator", operator, self.namespace)
                append_value(operation, "operand", self._prepare_operand(operand), self.namespace)
        return body

    def _prepare_operand(self, operand: BaseModel) -> BaseModel:
        return operand

    def _parse_page(self, response: ET.Element) -> tuple[list, int]:
        entries = decode_all(self.ENTRY_MODEL, response, "rval>entries", self.client.strict_mode)
        total = find_text(response, "rval>totalNumEntries")
        try:
            total_count = int(total) if total else 0
        except ValueError:
            raise AdWordsDecodeException(
                message=f"Invalid totalNumEntries {total!r}",
                details={"service": self.SERVICE_NAME},
            )
        logger.info(
            "Fetched entries", service=self.SERVICE_NAME, count=len(entries), total=total_count
        )
        return entries, total_count

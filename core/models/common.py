from typing import ClassVar, List, Literal, Optional, Tuple, get_args

from pydantic import BaseModel, ConfigDict, Field

from core.wire.namespaces import XSI_TYPE

Operator = Literal["ADD", "SET", "REMOVE"]
OPERATOR_VALUES: Tuple[str, ...] = get_args(Operator)

SortOrder = Literal["ASCENDING", "DESCENDING"]


class WireModel(BaseModel):
    """Base for models mirroring AdWords schema types.

    Aliases hold the wire element names; Python code may use either.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PolymorphicModel(WireModel):
    """Base for types whose concrete shape is selected by ``xsi:type``.

    A root subclass declares its own ``variants`` registry; every subclass
    that sets ``xsi_type`` registers itself there.
    """

    xsi_type: ClassVar[str] = ""
    type: str = Field("", alias=XSI_TYPE)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs):
        super().__pydantic_init_subclass__(**kwargs)
        if cls.xsi_type and "xsi_type" in cls.__dict__:
            cls.variants[cls.xsi_type] = cls

    def model_post_init(self, __context) -> None:
        if not self.type:
            self.type = self.xsi_type

    def get_type(self) -> str:
        return self.type


class Predicate(WireModel):
    field: str
    operator: str
    values: List[str] = Field(default_factory=list)


class DateRange(WireModel):
    min: Optional[str] = None
    max: Optional[str] = None


class OrderBy(WireModel):
    field: str
    sort_order: SortOrder = Field("ASCENDING", alias="sortOrder")


class Paging(WireModel):
    start_index: int = Field(0, alias="startIndex")
    number_results: int = Field(100, alias="numberResults")


class Selector(WireModel):
    """Generic selector for ``get`` calls.

    Example:
        Selector(
            fields=["Id", "Name", "Status"],
            predicates=[Predicate(field="Status", operator="EQUALS", values=["ENABLED"])],
            ordering=[OrderBy(field="Name")],
            paging=Paging(start_index=0, number_results=50),
        )
    """

    fields: List[str] = Field(default_factory=list)
    predicates: List[Predicate] = Field(default_factory=list)
    date_range: Optional[DateRange] = Field(None, alias="dateRange")
    ordering: List[OrderBy] = Field(default_factory=list)
    paging: Optional[Paging] = None


class AWQLQuery(WireModel):
    query: str


class LabelAttribute(WireModel):
    type: Optional[str] = Field(None, alias=XSI_TYPE)
    background_color: Optional[str] = Field(None, alias="backgroundColor")
    description: Optional[str] = None


class Label(WireModel):
    id: Optional[int] = None
    name: Optional[str] = None
    status: Optional[str] = None
    attribute: Optional[LabelAttribute] = None
    type: Optional[str] = Field("TextLabel", alias=XSI_TYPE)


class CustomParameter(WireModel):
    key: str
    value: str = ""
    is_remove: bool = Field(False, alias="isRemove")


class CustomParameters(WireModel):
    parameters: List[CustomParameter] = Field(default_factory=list)
    do_replace: bool = Field(False, alias="doReplace")


class StringMapEntry(WireModel):
    key: str
    value: Optional[str] = None


class ApiError(WireModel):
    """One entry of an ApiException fault or of ``partialFailureErrors``."""

    field_path: Optional[str] = Field(None, alias="fieldPath")
    trigger: Optional[str] = None
    error_string: Optional[str] = Field(None, alias="errorString")
    api_error_type: Optional[str] = Field(None, alias="ApiError.Type")
    reason: Optional[str] = None
    type: Optional[str] = Field(None, alias=XSI_TYPE)

    def __str__(self) -> str:
        parts = [self.error_string or self.type or "ApiError"]
        if self.field_path:
            parts.append(f"field={self.field_path}")
        if self.trigger:
            parts.append(f"trigger={self.trigger}")
        return " ".join(parts)


class RequestHeader(WireModel):
    client_customer_id: Optional[str] = Field(None, alias="clientCustomerId")
    developer_token: str = Field(..., alias="developerToken")
    user_agent: Optional[str] = Field(None, alias="userAgent")
    validate_only: Optional[bool] = Field(None, alias="validateOnly")
    partial_failure: Optional[bool] = Field(None, alias="partialFailure")


class ResponseHeader(WireModel):
    request_id: Optional[str] = Field(None, alias="requestId")
    service_name: Optional[str] = Field(None, alias="serviceName")
    method_name: Optional[str] = Field(None, alias="methodName")
    operations: Optional[int] = None
    response_time: Optional[int] = Field(None, alias="responseTime")

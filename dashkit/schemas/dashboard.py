"""
Dashboard domain models shared across the parser, query and builder packages.

Wire format is camelCase (`sourceType`, `createdAt`, `datasetId`); models also
accept the snake_case field names. Unknown keys are dropped, except on
`WidgetConfig` (and its subclasses) and `LayoutConfig`, which keep them.
"""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

Aggregation = Literal["sum", "avg", "count", "min", "max"]

# ints and floats only; booleans and numeric strings are rejected
Number = Annotated[float, Field(strict=True)]


def _required(message: str) -> AfterValidator:
    """Reject empty strings / lists with a display-ready message."""
    def check(v):
        if len(v) == 0:
            raise PydanticCustomError("required", message)
        return v
    return AfterValidator(check)


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Datasets
# ---------------------------------------------------------------------------

class DataField(_Model):
    name: Annotated[str, _required("Field name cannot be empty")]
    type: Literal["string", "number", "date", "boolean", "categorical"]
    nullable: Optional[bool] = None
    metadata: Optional[dict[str, Any]] = None


class DatasetSchema(_Model):
    fields: Annotated[list[DataField], _required("Schema must have at least one field")]


class ParsedDataset(_Model):
    id: Annotated[str, Field(min_length=1)]
    name: Annotated[str, _required("Dataset name is required")]
    data: list[dict[str, Any]]
    schema_: DatasetSchema = Field(alias="schema")
    metadata: Optional[dict[str, Any]] = None
    source_type: Literal["csv", "json", "api", "pdf", "text"]
    created_at: datetime


# ---------------------------------------------------------------------------
# Widgets
# ---------------------------------------------------------------------------

class WidgetPosition(_Model):
    x: Annotated[Number, Field(ge=0)]
    y: Annotated[Number, Field(ge=0)]
    width: Annotated[Number, Field(ge=1)]
    height: Annotated[Number, Field(ge=1)]


class WidgetConfig(_Model):
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None


class ChartConfig(WidgetConfig):
    chart_type: Literal["bar", "line", "pie", "scatter", "area"]
    x_field: Optional[str] = None
    y_field: Optional[str] = None
    color_field: Optional[str] = None
    aggregation: Optional[Aggregation] = None


class TableConfig(WidgetConfig):
    columns: Optional[list[str]] = None
    sort_by: Optional[str] = None
    sort_order: Optional[Literal["asc", "desc"]] = None
    page_size: Optional[Annotated[Number, Field(ge=1, le=1000)]] = None


class MetricConfig(WidgetConfig):
    field: Annotated[str, _required("Field is required")]
    aggregation: Aggregation
    format: Optional[Literal["number", "currency", "percentage"]] = None
    precision: Optional[Annotated[Number, Field(ge=0, le=10)]] = None


class Widget(_Model):
    id: Annotated[str, Field(min_length=1)]
    type: Literal["table", "chart", "metric", "text"]
    config: WidgetConfig
    query: Optional[str] = None
    dataset_id: Optional[str] = None
    position: Optional[WidgetPosition] = None


# ---------------------------------------------------------------------------
# Dashboards & query results
# ---------------------------------------------------------------------------

class LayoutConfig(_Model):
    model_config = ConfigDict(extra="allow")

    type: Literal["grid", "flex", "absolute"]
    columns: Optional[Annotated[Number, Field(ge=1, le=12)]] = None
    gap: Optional[Annotated[Number, Field(ge=0)]] = None


class Dashboard(_Model):
    id: Annotated[str, Field(min_length=1)]
    name: Annotated[str, _required("Dashboard name is required")]
    description: Optional[str] = None
    widgets: list[Widget]
    layout: LayoutConfig
    datasets: list[str]
    created_at: datetime
    updated_at: datetime


class QueryMetadata(_Model):
    row_count: Annotated[Number, Field(ge=0)]
    execution_time: Annotated[Number, Field(ge=0)]
    query: str


class QueryResult(_Model):
    data: list[dict[str, Any]]
    schema_: DatasetSchema = Field(alias="schema")
    metadata: Optional[QueryMetadata] = None

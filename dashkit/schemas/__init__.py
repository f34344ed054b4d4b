from dashkit.schemas.dashboard import (
    ChartConfig,
    Dashboard,
    DataField,
    DatasetSchema,
    LayoutConfig,
    MetricConfig,
    ParsedDataset,
    QueryMetadata,
    QueryResult,
    TableConfig,
    Widget,
    WidgetConfig,
    WidgetPosition,
)
from dashkit.schemas.common import ErrorDetail, ErrorResponse

__all__ = [
    "ChartConfig",
    "Dashboard",
    "DataField",
    "DatasetSchema",
    "ErrorDetail",
    "ErrorResponse",
    "LayoutConfig",
    "MetricConfig",
    "ParsedDataset",
    "QueryMetadata",
    "QueryResult",
    "TableConfig",
    "Widget",
    "WidgetConfig",
    "WidgetPosition",
]

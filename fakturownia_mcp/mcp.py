"""
Tool catalog and endpoint definitions for the MCP surface.

Every tool is described once here (name, description, JSON input schema) and
attached to the endpoint serving its resource family. The catalog is static;
argument checks beyond the schema happen in the tool handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from fakturownia_mcp.router import route_method
from fakturownia_mcp.tools import (
    handle_categories_methods,
    handle_clients_methods,
    handle_departments_methods,
    handle_invoices_methods,
    handle_payments_methods,
    handle_products_methods,
    handle_warehouses_methods,
)

Handler = Callable[..., Awaitable[Any]]


def _object_schema(properties: Dict[str, Any], required: Optional[List[str]] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def _id_schema(label: str) -> Dict[str, Any]:
    return {"type": "number", "description": f"{label} ID"}


def _data_schema(description: str) -> Dict[str, Any]:
    return {"type": "object", "description": description}


def _list_schema(**extra: Dict[str, Any]) -> Dict[str, Any]:
    properties: Dict[str, Any] = {
        "page": {"type": "number", "description": "Page number"},
        "perPage": {"type": "number", "description": "Items per page"},
    }
    properties.update(extra)
    properties["filters"] = {
        "type": "object",
        "description": "Additional query parameters passed to the API as-is",
    }
    return _object_schema(properties)


@dataclass(slots=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Dict[str, Any]

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


def _crud_tools(
    plural: str,
    singular: str,
    id_param: str,
    data_param: str,
    *,
    article: str = "a",
    label: Optional[str] = None,
    list_schema: Optional[Dict[str, Any]] = None,
    get_extra: Optional[Dict[str, Any]] = None,
    delete: bool = True,
) -> List[ToolDefinition]:
    label = label or singular.capitalize()
    key = singular.replace(" ", "_")
    list_key = plural.replace(" ", "_")
    tools = [
        ToolDefinition(
            name=f"fakt_get_{list_key}",
            description=f"Get list of {plural} from Fakturownia",
            input_schema=list_schema or _list_schema(),
        ),
        ToolDefinition(
            name=f"fakt_get_{key}",
            description=f"Get a specific {singular} by ID",
            input_schema=_object_schema({id_param: _id_schema(label), **(get_extra or {})}, [id_param]),
        ),
        ToolDefinition(
            name=f"fakt_create_{key}",
            description=f"Create a new {singular}",
            input_schema=_object_schema({data_param: _data_schema(f"{label} data")}, [data_param]),
        ),
        ToolDefinition(
            name=f"fakt_update_{key}",
            description=f"Update an existing {singular}",
            input_schema=_object_schema(
                {
                    id_param: _id_schema(label),
                    data_param: _data_schema(f"Updated {singular} data"),
                },
                [id_param, data_param],
            ),
        ),
    ]
    if delete:
        tools.append(
            ToolDefinition(
                name=f"fakt_delete_{key}",
                description=f"Delete {article} {singular}",
                input_schema=_object_schema({id_param: _id_schema(label)}, [id_param]),
            )
        )
    return tools


_INVOICE_ID = {"invoiceId": _id_schema("Invoice")}

INVOICE_TOOLS: List[ToolDefinition] = _crud_tools(
    "invoices",
    "invoice",
    "invoiceId",
    "invoiceData",
    article="an",
    list_schema=_list_schema(
        period={"type": "string", "description": "Time period filter"},
        includePositions={"type": "boolean", "description": "Include invoice positions"},
    ),
) + [
    ToolDefinition(
        name="fakt_send_invoice_by_email",
        description="Send invoice by email",
        input_schema=_object_schema(
            {
                **_INVOICE_ID,
                "emailTo": {"type": "string", "description": "Recipient email"},
                "emailCc": {"type": "string", "description": "CC email"},
                "emailPdf": {"type": "boolean", "description": "Include PDF attachment"},
            },
            ["invoiceId"],
        ),
    ),
    ToolDefinition(
        name="fakt_change_invoice_status",
        description="Change invoice status",
        input_schema=_object_schema(
            {**_INVOICE_ID, "status": {"type": "string", "description": "New status"}},
            ["invoiceId", "status"],
        ),
    ),
    ToolDefinition(
        name="fakt_get_invoice_pdf",
        description="Get invoice as PDF",
        input_schema=_object_schema(dict(_INVOICE_ID), ["invoiceId"]),
    ),
]

CLIENT_TOOLS = _crud_tools(
    "clients",
    "client",
    "clientId",
    "clientData",
    list_schema=_list_schema(
        name={"type": "string", "description": "Filter by client name"},
        email={"type": "string", "description": "Filter by email"},
        taxNo={"type": "string", "description": "Filter by tax number (NIP)"},
    ),
)

CATEGORY_TOOLS = _crud_tools("categories", "category", "categoryId", "categoryData")

DEPARTMENT_TOOLS = _crud_tools("departments", "department", "departmentId", "departmentData")

PAYMENT_TOOLS = _crud_tools(
    "payments",
    "payment",
    "paymentId",
    "paymentData",
    list_schema=_list_schema(
        include={"type": "string", "description": "Related data to include, e.g. invoices"},
    ),
)

_WAREHOUSE_ID = {"type": "number", "description": "Warehouse ID for stock levels"}

PRODUCT_TOOLS = _crud_tools(
    "products",
    "product",
    "productId",
    "productData",
    list_schema=_list_schema(warehouseId=_WAREHOUSE_ID),
    get_extra={"warehouseId": _WAREHOUSE_ID},
    delete=False,
)

WAREHOUSE_TOOLS = _crud_tools(
    "warehouses", "warehouse", "warehouseId", "warehouseData"
) + _crud_tools(
    "warehouse documents",
    "warehouse document",
    "documentId",
    "documentData",
    label="Document",
)


@dataclass(slots=True)
class EndpointDefinition:
    """One HTTP front door: its handler, tool catalog and protocol quirks."""

    slug: str
    title: str
    description: str
    label: str
    handler: Handler
    tools: Tuple[ToolDefinition, ...]
    supports_initialize: bool = False
    legacy_calls: bool = False
    parse_error_status: int = 200

    @property
    def path(self) -> str:
        return f"/{self.slug}"

    @property
    def resource(self) -> str:
        return self.slug.split("-", 1)[-1]

    @property
    def tool_names(self) -> List[str]:
        return [tool.name for tool in self.tools]

    def list_tools(self) -> List[Dict[str, Any]]:
        return [tool.describe() for tool in self.tools]


def _resource_endpoint(
    resource: str, label: str, handler: Handler, tools: List[ToolDefinition], **kwargs: Any
) -> EndpointDefinition:
    title = resource.capitalize()
    return EndpointDefinition(
        slug=f"fakturownia-{resource}",
        title=f"Fakturownia {title} MCP Server",
        description=f"MCP Server for Fakturownia.pl - {title} Only",
        label=label,
        handler=handler,
        tools=tuple(tools),
        **kwargs,
    )


ENDPOINTS: Dict[str, EndpointDefinition] = {
    endpoint.slug: endpoint
    for endpoint in (
        _resource_endpoint("categories", "Categories", handle_categories_methods, CATEGORY_TOOLS),
        _resource_endpoint("clients", "Clients", handle_clients_methods, CLIENT_TOOLS),
        _resource_endpoint("departments", "Departments", handle_departments_methods, DEPARTMENT_TOOLS),
        _resource_endpoint(
            "invoices",
            "Invoice",
            handle_invoices_methods,
            INVOICE_TOOLS,
            supports_initialize=True,
            legacy_calls=True,
            parse_error_status=400,
        ),
        _resource_endpoint("payments", "Payments", handle_payments_methods, PAYMENT_TOOLS),
        _resource_endpoint("products", "Products", handle_products_methods, PRODUCT_TOOLS),
        _resource_endpoint("warehouses", "Warehouses", handle_warehouses_methods, WAREHOUSE_TOOLS),
        EndpointDefinition(
            slug="fakturownia",
            title="Fakturownia MCP Server",
            description="MCP Server for Fakturownia.pl - all resources",
            label="Fakturownia",
            handler=route_method,
            tools=tuple(
                INVOICE_TOOLS
                + CLIENT_TOOLS
                + PRODUCT_TOOLS
                + PAYMENT_TOOLS
                + CATEGORY_TOOLS
                + WAREHOUSE_TOOLS
                + DEPARTMENT_TOOLS
            ),
            supports_initialize=True,
            legacy_calls=True,
            parse_error_status=400,
        ),
    )
}


def list_tools(slug: Optional[str] = None) -> List[Dict[str, Any]]:
    """Return tool descriptors for one endpoint, or for every resource when ``slug`` is None."""
    return ENDPOINTS[slug or "fakturownia"].list_tools()

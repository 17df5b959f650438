"""Resource method handlers, one module per Fakturownia object family."""

from .base import NOT_HANDLED, Resource
from .categories import CATEGORY_METHODS, handle_categories_methods
from .clients import CLIENT_METHODS, handle_clients_methods
from .departments import DEPARTMENT_METHODS, handle_departments_methods
from .invoices import INVOICE_METHODS, handle_invoices_methods
from .payments import PAYMENT_METHODS, handle_payments_methods
from .products import PRODUCT_METHODS, handle_products_methods
from .warehouses import WAREHOUSE_METHODS, handle_warehouses_methods
from . import validators

__all__ = [
    "NOT_HANDLED",
    "Resource",
    "CATEGORY_METHODS",
    "CLIENT_METHODS",
    "DEPARTMENT_METHODS",
    "INVOICE_METHODS",
    "PAYMENT_METHODS",
    "PRODUCT_METHODS",
    "WAREHOUSE_METHODS",
    "handle_categories_methods",
    "handle_clients_methods",
    "handle_departments_methods",
    "handle_invoices_methods",
    "handle_payments_methods",
    "handle_products_methods",
    "handle_warehouses_methods",
    "validators",
]

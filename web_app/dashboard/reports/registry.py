from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class ReportSpec:
    report_id: str
    name: str


@dataclass(frozen=True)
class FieldSpec:
    """
    One column of a synthetic report.

    kind:
      label        -> "<prefix> <i+1>"
      ident        -> "<prefix><i+1 padded to 4>"
      month_of_row -> "2024-<i+1>-01"
      random_month -> "2024-<1..12>-01"
      integer      -> uniform int in [0, upper)
      choice       -> uniform pick from choices
    """
    name: str
    kind: str
    prefix: str = ""
    upper: int = 0
    choices: Tuple[str, ...] = ()


REPORT_SPECS: Dict[str, ReportSpec] = {
    "sales": ReportSpec(report_id="sales", name="Sales Report"),
    "inventory": ReportSpec(report_id="inventory", name="Inventory Status"),
    "customers": ReportSpec(report_id="customers", name="Customer Analysis"),
    "products": ReportSpec(report_id="products", name="Product Performance"),
    "orders": ReportSpec(report_id="orders", name="Order Summary"),
}


# column order here is the column order of the rows
REPORT_FIELDS: Dict[str, Tuple[FieldSpec, ...]] = {
    "sales": (
        FieldSpec("date", "month_of_row"),
        FieldSpec("product", "label", prefix="Product"),
        FieldSpec("revenue", "integer", upper=10000),
        FieldSpec("units", "integer", upper=100),
        FieldSpec("region", "choice", choices=("North", "South", "East", "West")),
    ),
    "inventory": (
        FieldSpec("product", "label", prefix="Product"),
        FieldSpec("sku", "ident", prefix="SKU"),
        FieldSpec("quantity", "integer", upper=1000),
        FieldSpec("location", "choice", choices=("Warehouse A", "Warehouse B")),
        FieldSpec("status", "choice", choices=("In Stock", "Low Stock", "Out of Stock")),
    ),
    "customers": (
        FieldSpec("customerId", "ident", prefix="CUST"),
        FieldSpec("customer", "label", prefix="Customer"),
        FieldSpec("segment", "choice", choices=("Premium", "Standard", "Basic")),
        FieldSpec("totalSpent", "integer", upper=50000),
        FieldSpec("lastPurchase", "random_month"),
    ),
    "products": (
        FieldSpec("productId", "ident", prefix="PROD"),
        FieldSpec("product", "label", prefix="Product"),
        FieldSpec("category", "choice", choices=("Electronics", "Clothing", "Home")),
        FieldSpec("revenue", "integer", upper=100000),
        FieldSpec("profit", "integer", upper=50000),
    ),
    "orders": (
        FieldSpec("orderId", "ident", prefix="ORD"),
        FieldSpec("customer", "label", prefix="Customer"),
        FieldSpec("date", "month_of_row"),
        FieldSpec("total", "integer", upper=1000),
        FieldSpec("status", "choice", choices=("Completed", "Processing", "Shipped")),
        FieldSpec("paymentMethod", "choice", choices=("Credit Card", "PayPal", "Bank Transfer")),
    ),
}

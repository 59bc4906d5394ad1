"""CSV export of orders for the admin dashboard."""

import csv
import io
from datetime import UTC

from storefront.order.order import Order

CSV_HEADERS = ["OrderID", "Date", "CustomerName", "Email", "Phone", "Address", "Total", "Items"]


def _iso_timestamp(moment) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _row(order: Order) -> list:
    customer = order.customer
    return [
        order.order_id,
        _iso_timestamp(order.date),
        f"{customer.firstname} {customer.lastname}",
        customer.email,
        customer.phone,
        customer.mailing_address,
        order.total,
        "; ".join(f"{item.quantity} x {item.name}" for item in order.items),
    ]


def orders_to_csv(orders: list[Order]) -> str:
    """Render orders as CSV, one line per order, quoting cells only when needed."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for order in orders:
        writer.writerow(_row(order))
    return buffer.getvalue().rstrip("\n")

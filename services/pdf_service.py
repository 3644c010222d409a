import html
import io
from datetime import datetime
from typing import Any, Dict, List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from config import settings


def _format_date(value: Any) -> str:
    if isinstance(value, datetime):
        return value.strftime("%d-%m-%Y")
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%d-%m-%Y")
        except ValueError:
            return value
    return datetime.utcnow().strftime("%d-%m-%Y")


def _money(value: Any) -> str:
    return f"{float(value or 0):,.2f}"


def build_quotation_pdf(quotation: Dict[str, Any]) -> bytes:
    """Build a PDF document for a stored quotation."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
        title=f"Quotation {quotation.get('quotationNumber') or quotation.get('_id')}",
    )
    styles = getSampleStyleSheet()
    normal = styles["BodyText"]

    elements: List[Any] = [
        Paragraph(html.escape(settings.COMPANY_NAME), styles["Title"]),
        Paragraph("Quotation Details", styles["Heading2"]),
    ]

    number = quotation.get("quotationNumber") or str(quotation.get("_id", ""))
    elements.append(Paragraph(f"Quotation #: {html.escape(number)}", normal))
    elements.append(Paragraph(f"Date: {_format_date(quotation.get('createdAt'))}", normal))
    elements.append(Paragraph(f"Status: {html.escape(str(quotation.get('status') or ''))}", normal))
    elements.append(Spacer(1, 6 * mm))

    customer_lines = [
        quotation.get("customerName"),
        quotation.get("address"),
        quotation.get("state"),
        quotation.get("email"),
        quotation.get("phone"),
    ]
    customer_block = "<br/>".join(html.escape(str(line)) for line in customer_lines if line)
    elements.append(Paragraph(f"<strong>Customer</strong><br/>{customer_block}", normal))
    elements.append(Spacer(1, 6 * mm))

    rows = [["#", "Item", "Qty", "Unit", "Price", "Disc %", "Tax %", "Subtotal"]]
    for index, item in enumerate(quotation.get("items", []), start=1):
        rows.append([
            str(index),
            Paragraph(html.escape(str(item.get("itemName", ""))), normal),
            f"{item.get('quantity', 0):g}",
            item.get("unit") or "",
            _money(item.get("unitPrice")),
            f"{item.get('discountPercent', 0):g}",
            f"{item.get('taxPercent', 0):g}",
            _money(item.get("subtotal")),
        ])
    rows.append(["", "", "", "", "", "", "Total", _money(quotation.get("totalAmount"))])

    table = Table(rows, colWidths=[8 * mm, 52 * mm, 14 * mm, 14 * mm, 22 * mm, 16 * mm, 16 * mm, 28 * mm], repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#f0f0f0")),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -2), 0.5, colors.grey),
        ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
        ("FONTNAME", (-2, -1), (-1, -1), "Helvetica-Bold"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]))
    elements.append(table)

    custom_fields = quotation.get("customFields") or {}
    if custom_fields:
        elements.append(Spacer(1, 6 * mm))
        for key, value in custom_fields.items():
            elements.append(Paragraph(f"{html.escape(str(key))}: {html.escape(str(value))}", normal))

    doc.build(elements)
    buffer.seek(0)
    return buffer.getvalue()

import io
from typing import Sequence

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from chefmate.domain.ShoppingList import ShoppingListItem
from chefmate.logic.shopping.export import format_amount, group_by_category


def generate_pdf_for_shopping_list(items: Sequence[ShoppingListItem], title: str = "Shopping List"):
    """Generate a printable PDF: one Amount / Unit / Item / Used in table per category."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(title, styles["Title"]),
        Spacer(1, 16),
    ]
    if not items:
        elements.append(Paragraph("No items in shopping list.", styles["Normal"]))

    for category, category_items in group_by_category(items).items():
        elements.append(Paragraph(category.capitalize(), styles["Heading2"]))
        data = [["Amount", "Unit", "Item", "Used in"]]
        for item in category_items:
            data.append([format_amount(item.amount), item.unit, item.item, ", ".join(item.recipes)])

        table = Table(data, repeatRows=1, colWidths=[60, 80, 170, 240])
        table.setStyle(TableStyle([
            ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#059669")),
            ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
            ("ALIGN", (0,0), (0,-1), "RIGHT"),
            ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
            ("FONTSIZE", (0,0), (-1,0), 11),
            ("BOTTOMPADDING", (0,0), (-1,0), 8),
            ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ]))
        elements.append(table)
        elements.append(Spacer(1, 12))

    doc.build(elements)
    return buf.getvalue()

import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from feast.domain.MenuEvent import MenuEvent
from feast.domain.ShoppingList import ShoppingList
from feast.logic.menu.calculations import format_purchase_quantity

HEADER = ["Item", "Type", "Edible (kg)", "Bruto (kg)", "Purchase"]

TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#8D4A2B")),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
])


def _kg(grams: float) -> str:
    return f"{grams / 1000:.2f}"


def generate_pdf_for_shopping_list(event: MenuEvent, shopping_list: ShoppingList) -> bytes:
    """Render one table per course plus the grand total; returns the PDF bytes."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20)

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Shopping list - {event.name}", styles["Title"]),
        Paragraph(f"{event.total_persons or 0} persons", styles["Normal"]),
        Spacer(1, 12),
    ]

    for course in shopping_list.courses:
        elements.append(Paragraph(f"{course.course_name} ({course.grams_per_person:g} g p.p.)", styles["Heading2"]))
        data = [HEADER]
        for item in course.items:
            data.append([
                item.name,
                item.item_type,
                _kg(item.edible_grams),
                _kg(item.bruto_grams),
                format_purchase_quantity(item),
            ])
        sub = course.subtotal
        data.append(["Subtotal", "", _kg(sub.total_edible_grams), _kg(sub.total_bruto_grams),
                     f"{_kg(sub.total_purchase_grams)} kg"])
        table = Table(data, repeatRows=1)
        table.setStyle(TABLE_STYLE)
        elements.extend([table, Spacer(1, 12)])

    total = shopping_list.grand_total
    elements.append(Paragraph(
        f"Grand total: {_kg(total.total_purchase_grams)} kg to purchase "
        f"({_kg(total.total_edible_grams)} kg edible)",
        styles["Heading3"],
    ))
    doc.build(elements)
    return buf.getvalue()

import io
from xml.sax.saxutils import escape
from datetime import timedelta
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from comedor.domain.Menu import dish_list
from comedor.logic.days import monday_of, week_range
from comedor.utilities.constants import DAYS_CANONICAL, DAYS_DISPLAY, DATE_DISPLAY_FORMAT


def _item_text(item) -> str:
    if isinstance(item, dict):
        name = item.get("name", "")
        desc = item.get("description")
        return f"{name} ({desc})" if desc else str(name)
    return str(item)


def generate_pdf_for_menu(menu):
    """Generate a printable PDF table: Día / Fecha / Platillos for the given weekly menu."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Menú - {week_range(menu.week_start)['display_text']}", styles["Title"]),
        Spacer(1, 16),
    ]

    monday = monday_of(menu.week_start)
    data = [["Día", "Fecha", "Platillos"]]
    for i, (canonical, display) in enumerate(zip(DAYS_CANONICAL, DAYS_DISPLAY)):
        items = dish_list(menu.days.get(canonical, {}))
        data.append([
            display,
            (monday + timedelta(days=i)).strftime(DATE_DISPLAY_FORMAT),
            Paragraph("<br/>".join(escape(_item_text(it)) for it in items) or "-", styles["Normal"]),
        ])

    table = Table(data, repeatRows=1, colWidths=[100, 90, 560])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (1,-1), "CENTER"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()

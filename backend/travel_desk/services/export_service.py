"""Export service — PDF and printable HTML generation for itineraries."""

import html
import io
import logging
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    HRFlowable,
    KeepTogether,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from travel_desk.services.itinerary_layout import AtomicBlock, Badge, Document, Icon, Row, Section, Text

logger = logging.getLogger(__name__)

PAGE_MARGIN = 15 * mm
CONTENT_WIDTH = A4[0] - 2 * PAGE_MARGIN - 12  # frame padding

BADGE_COLORS = {
    "default": ("#374151", "#E5E7EB"),
    "primary": ("#1E40AF", "#DBEAFE"),
    "success": ("#166534", "#DCFCE7"),
    "accent": ("#6B21A8", "#F3E8FF"),
}

# Glyphs missing from the standard PDF fonts.
PDF_REPLACEMENTS = {"→": "-&gt;"}

BOXED_ROLES = {"item", "free-day", "travelers", "empty"}


def _pdf_styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle("ItinTitle", parent=base["Title"], alignment=0, spaceAfter=4),
        "subtitle": ParagraphStyle("ItinSubtitle", parent=base["Normal"], fontSize=12, leading=15, textColor=colors.HexColor("#4B5563")),
        "heading": ParagraphStyle("ItinHeading", parent=base["Heading2"], spaceBefore=6, spaceAfter=2),
        "strong": ParagraphStyle("ItinStrong", parent=base["Normal"], fontName="Helvetica-Bold", fontSize=10.5, leading=14),
        "body": ParagraphStyle("ItinBody", parent=base["Normal"], fontSize=9.5, leading=13),
        "muted": ParagraphStyle("ItinMuted", parent=base["Normal"], fontSize=9.5, leading=13, textColor=colors.HexColor("#6B7280")),
        "small": ParagraphStyle("ItinSmall", parent=base["Normal"], fontSize=8, leading=11, textColor=colors.HexColor("#6B7280")),
    }


def _pdf_text(content: str) -> str:
    text = escape(content)
    for glyph, replacement in PDF_REPLACEMENTS.items():
        text = text.replace(glyph, replacement)
    return text


def _pdf_inline(node) -> str:
    if isinstance(node, Text):
        text = _pdf_text(node.content)
        if node.style in ("strong", "heading", "title"):
            return f"<b>{text}</b>"
        if node.style in ("small", "muted"):
            return f'<font size="8" color="#6B7280">{text}</font>'
        return text
    if isinstance(node, Badge):
        fg, bg = BADGE_COLORS.get(node.tone, BADGE_COLORS["default"])
        return f'<font size="8" color="{fg}" backColor="{bg}"> {_pdf_text(node.label)} </font>'
    return ""  # icons have no glyph in the standard fonts


def _pdf_content(nodes: list, styles: dict[str, ParagraphStyle]) -> list:
    flowables = []
    for node in nodes:
        if isinstance(node, Text):
            flowables.append(Paragraph(_pdf_text(node.content), styles.get(node.style, styles["body"])))
        elif isinstance(node, Row):
            markup = "&nbsp;&nbsp;".join(filter(None, (_pdf_inline(child) for child in node.children)))
            if markup:
                flowables.append(Paragraph(markup, styles["body"]))
        elif isinstance(node, Badge):
            flowables.append(Paragraph(_pdf_inline(node), styles["body"]))
        elif isinstance(node, (AtomicBlock, Section)):
            flowables.extend(_pdf_content(node.children, styles))
    return flowables


def _pdf_block(block: AtomicBlock, styles: dict[str, ParagraphStyle]) -> list:
    flowables = _pdf_content(block.children, styles)
    if block.role in BOXED_ROLES and flowables:
        # One row per flowable; tables only split between rows.
        box = Table([[f] for f in flowables], colWidths=[CONTENT_WIDTH])
        box.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, -1), colors.HexColor("#F9FAFB")),
            ("BOX", (0, 0), (-1, -1), 0.5, colors.HexColor("#E5E7EB")),
            ("LEFTPADDING", (0, 0), (-1, -1), 8),
            ("RIGHTPADDING", (0, 0), (-1, -1), 8),
            ("TOPPADDING", (0, 0), (-1, -1), 1),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 1),
            ("TOPPADDING", (0, 0), (-1, 0), 6),
            ("BOTTOMPADDING", (0, -1), (-1, -1), 6),
        ]))
        return [box]
    if block.role == "header":
        flowables.append(HRFlowable(width="100%", thickness=3, color=colors.HexColor("#2563EB"), spaceBefore=4))
    if block.role == "footer":
        flowables.insert(0, HRFlowable(width="100%", thickness=0.5, color=colors.grey, spaceAfter=4))
    return flowables


def _linearize(nodes: list) -> list:
    """Flatten sections so that only atomic blocks and loose nodes remain, in order."""
    out = []
    for node in nodes:
        if isinstance(node, Section):
            out.extend(_linearize(node.children))
        else:
            out.append(node)
    return out


class ExportService:
    """Generates PDF and HTML renditions of an itinerary layout tree."""

    def itinerary_pdf(self, document: Document) -> bytes:
        """Render to an A4 PDF; atomic blocks become KeepTogether groups."""
        buf = io.BytesIO()
        doc = SimpleDocTemplate(
            buf,
            pagesize=A4,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=document.title,
        )
        styles = _pdf_styles()
        elements = []

        pending: list = []
        for node in _linearize(document.children):
            if not isinstance(node, AtomicBlock):
                pending.extend(_pdf_content([node], styles))
                continue
            flowables = _pdf_block(node, styles)
            if node.keep_with_next:
                pending.extend(flowables)
                continue
            elements.append(KeepTogether(pending + flowables))
            elements.append(Spacer(1, 6))
            pending = []
        if pending:
            elements.append(KeepTogether(pending))

        doc.build(elements)
        logger.debug(f"Rendered itinerary PDF {document.title} ({buf.tell()} bytes)")
        return buf.getvalue()

    def itinerary_html(self, document: Document) -> str:
        """Render to a standalone HTML page suitable for preview and browser print."""
        body = "\n".join(_html_node(node) for node in document.children)
        return HTML_PAGE.format(title=html.escape(document.title), css=HTML_CSS, body=body)


# ─── HTML ───

HTML_CSS = """
@page { size: A4; margin: 15mm; }
body { font-family: Helvetica, Arial, sans-serif; color: #111827; max-width: 210mm; margin: 0 auto; padding: 8mm; }
.atomic { break-inside: avoid; page-break-inside: avoid; }
.keep-with-next { break-after: avoid; page-break-after: avoid; }
.header { border-bottom: 4px solid #2563EB; padding-bottom: 12px; margin-bottom: 16px; }
.travelers, .item, .free-day, .empty { background: #F9FAFB; border-radius: 6px; padding: 10px 12px; margin: 8px 0; }
.day { border-left: 4px solid #2563EB; padding-left: 14px; margin: 18px 0; }
.footer { border-top: 1px solid #E5E7EB; margin-top: 24px; padding-top: 10px; text-align: center; }
.row { display: flex; flex-wrap: wrap; gap: 10px; align-items: center; }
p { margin: 2px 0; }
.text-title { font-size: 28px; font-weight: bold; }
.text-subtitle { font-size: 16px; color: #4B5563; }
.text-heading { font-size: 20px; font-weight: bold; }
.text-strong { font-weight: bold; }
.text-muted { color: #6B7280; }
.text-small { font-size: 12px; color: #6B7280; }
.badge { font-size: 11px; padding: 1px 6px; border-radius: 4px; background: #E5E7EB; color: #374151; }
.badge-primary { background: #DBEAFE; color: #1E40AF; }
.badge-success { background: #DCFCE7; color: #166534; }
.badge-accent { background: #F3E8FF; color: #6B21A8; }
"""

HTML_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""


def _html_node(node, inline: bool = False) -> str:
    if isinstance(node, Text):
        tag = "span" if inline else "p"
        return f'<{tag} class="text-{node.style}">{html.escape(node.content)}</{tag}>'
    if isinstance(node, Badge):
        return f'<span class="badge badge-{node.tone}">{html.escape(node.label)}</span>'
    if isinstance(node, Icon):
        return f'<span class="icon icon-{node.name}" aria-hidden="true"></span>'
    if isinstance(node, Row):
        return '<div class="row">' + "".join(_html_node(child, inline=True) for child in node.children) + "</div>"
    if isinstance(node, AtomicBlock):
        classes = ["atomic", node.role]
        if node.keep_with_next:
            classes.append("keep-with-next")
        kind = f' data-kind="{html.escape(node.kind)}"' if node.kind else ""
        inner = "".join(_html_node(child) for child in node.children)
        return f'<div class="{" ".join(classes)}"{kind}>{inner}</div>'
    if isinstance(node, Section):
        inner = "\n".join(_html_node(child) for child in node.children)
        return f'<section class="{node.role}">{inner}</section>'
    return ""


export_service = ExportService()

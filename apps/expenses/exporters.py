"""
Spreadsheet and PDF renderers for expense exports.

Both work on the flat rows built by ``services.reporting.export_rows`` and
return the file content as bytes.
"""

import base64
import logging
from io import BytesIO
from xml.sax.saxutils import escape

import pandas as pd
from django.utils import timezone
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Table, TableStyle, Spacer, Image
)

from .models import ExpenseStatus, ExpenseType
from .services.reporting import summarize, date_range_label

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
PDF_CONTENT_TYPE = 'application/pdf'

DEFAULT_HEADER_TEXT = 'SGFI - Sistema de Gestão Financeira Institucional'
DEFAULT_FOOTER_TEXT = '© 2024 - Todos os direitos reservados'

EXPENSE_COLUMNS = [
    ('ID', 20),
    ('Description', 30),
    ('Amount', 12),
    ('Formatted Amount', 15),
    ('Type', 12),
    ('Creditor', 25),
    ('Creditor Document', 18),
    ('Due Date', 14),
    ('Status', 12),
    ('Paid Date', 14),
    ('Created Date', 14),
]

HEADER_FILL = colors.Color(53 / 255, 51 / 255, 133 / 255)


def format_currency(value) -> str:
    """Brazilian real formatting: R$ 1.234,56"""
    formatted = f"{abs(value):,.2f}".replace(',', 'X').replace('.', ',').replace('X', '.')
    sign = '-' if value < 0 else ''
    return f"{sign}R$ {formatted}"


def format_date(value) -> str:
    return value.strftime('%d/%m/%Y') if value else 'N/A'


def _label(choices, value) -> str:
    try:
        return choices(value).label
    except ValueError:
        return value or 'N/A'


def export_filename(kind: str, start_date=None, end_date=None) -> str:
    period = date_range_label(start_date, end_date)
    if kind == 'xlsx':
        return f"SGFI_Expenses_{period}.xlsx"
    return f"SGFI_Report_{period}.pdf"


# =============================================================================
# Spreadsheet
# =============================================================================

def build_xlsx(rows: list) -> bytes:
    """Workbook with an "Expenses" detail sheet and a "Summary" sheet."""
    records = [
        [
            row['id'],
            row['description'],
            float(row['amount']),
            format_currency(row['amount']),
            _label(ExpenseType, row['type']),
            row['creditor'] or 'N/A',
            row['creditor_document'] or 'N/A',
            format_date(row['due_date']),
            _label(ExpenseStatus, row['status']),
            format_date(row['paid_at']),
            format_date(row['created_at']),
        ]
        for row in rows
    ]
    expenses_df = pd.DataFrame(records, columns=[name for name, _ in EXPENSE_COLUMNS])

    totals = summarize(rows)
    summary_df = pd.DataFrame([
        ('Total Paid', format_currency(totals['total_paid'])),
        ('Total Pending', format_currency(totals['total_pending'])),
        ('Grand Total', format_currency(totals['total'])),
        ('Expense Count', totals['count']),
    ], columns=['Metric', 'Value'])

    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
        expenses_df.to_excel(writer, sheet_name='Expenses', index=False)
        summary_df.to_excel(writer, sheet_name='Summary', index=False)

        sheet = writer.sheets['Expenses']
        for index, (_, width) in enumerate(EXPENSE_COLUMNS):
            sheet.column_dimensions[chr(ord('A') + index)].width = width

    return buffer.getvalue()


# =============================================================================
# PDF
# =============================================================================

def decode_data_url(data_url: str):
    """Decoded bytes of a ``data:image/...;base64,`` URL, or None if unreadable."""
    if not data_url or not data_url.startswith('data:image/') or ',' not in data_url:
        return None
    try:
        raw = base64.b64decode(data_url.split(',', 1)[1], validate=True)
        ImageReader(BytesIO(raw)).getSize()
    except (ValueError, OSError) as e:
        logger.warning("Could not decode report image: %s", e)
        return None
    return raw


def _footer_canvas(header_text: str, footer_text: str, generated_by: str):
    """Canvas class that stamps the footer and "Page i of N" on every page."""
    generated_at = timezone.localtime().strftime('%d/%m/%Y %H:%M')

    class FooterCanvas(canvas.Canvas):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self._page_states = []

        def showPage(self):
            self._page_states.append(dict(self.__dict__))
            self._startPage()

        def save(self):
            total = len(self._page_states)
            for state in self._page_states:
                self.__dict__.update(state)
                self._draw_footer(total)
                super().showPage()
            super().save()

        def _draw_footer(self, total):
            width, _ = self._pagesize
            self.setFont('Helvetica-Bold', 9)
            self.setFillGray(0.25)
            self.drawCentredString(width / 2, 30 * mm, header_text)

            self.setFont('Helvetica', 8)
            self.setFillGray(0.4)
            self.drawCentredString(width / 2, 25 * mm, footer_text)

            self.setFont('Helvetica', 7)
            self.setFillGray(0.5)
            self.drawString(14 * mm, 17 * mm, f"Generated at: {generated_at}")
            if generated_by:
                self.drawString(14 * mm, 12 * mm, f"Generated by: {generated_by}")

            self.setFont('Helvetica', 8)
            self.drawRightString(width - 14 * mm, 12 * mm, f"Page {self.getPageNumber()} of {total}")

    return FooterCanvas


def _header_flowables(entity, styles) -> list:
    centered = ParagraphStyle('Centered', parent=styles['Normal'], alignment=TA_CENTER, fontSize=8)
    title = ParagraphStyle('EntityTitle', parent=styles['Title'], fontSize=16)
    elements = []

    logo = decode_data_url(getattr(entity, 'logo_url', ''))
    brasao = decode_data_url(getattr(entity, 'brasao_url', ''))
    if logo or brasao:
        size = 20 * mm
        cells = [
            Image(BytesIO(logo), width=size, height=size) if logo else '',
            Image(BytesIO(brasao), width=size, height=size) if brasao else '',
        ]
        images = Table([cells], colWidths=[90 * mm, 90 * mm])
        images.setStyle(TableStyle([
            ('ALIGN', (0, 0), (0, 0), 'LEFT'),
            ('ALIGN', (1, 0), (1, 0), 'RIGHT'),
        ]))
        elements.append(images)
        elements.append(Spacer(1, 6))

    if entity is not None:
        elements.append(Paragraph(escape(entity.full_name or entity.name), title))
        if entity.document_number:
            elements.append(Paragraph(escape(f"CNPJ: {entity.document_number}"), centered))
        if entity.address:
            elements.append(Paragraph(escape(entity.address), centered))
        contact = ' | '.join(filter(None, [entity.phone, entity.email]))
        if contact:
            elements.append(Paragraph(escape(contact), centered))
        elements.append(Spacer(1, 6))

    return elements


def build_pdf(
    rows: list,
    *,
    entity=None,
    header_text: str = '',
    footer_text: str = '',
    start_date=None,
    end_date=None,
    include_metrics: bool = True,
    generated_by: str = ''
) -> bytes:
    """
    Expense report: organization header, period, optional financial summary,
    expense detail table and a footer on every page.
    """
    styles = getSampleStyleSheet()
    elements = _header_flowables(entity, styles)

    if start_date or end_date:
        period = ParagraphStyle('Period', parent=styles['Normal'], alignment=TA_CENTER)
        elements.append(Paragraph(f"Period: {date_range_label(start_date, end_date)}", period))
        elements.append(Spacer(1, 8))

    if include_metrics:
        totals = summarize(rows)
        elements.append(Paragraph('Financial Summary', styles['Heading3']))
        summary = Table(
            [
                ['Metric', 'Value'],
                ['Total Paid', format_currency(totals['total_paid'])],
                ['Total Pending', format_currency(totals['total_pending'])],
                ['Grand Total', format_currency(totals['total'])],
                ['Fixed Expenses', format_currency(totals['fixed'])],
                ['Variable Expenses', format_currency(totals['variable'])],
                ['Count', f"{totals['count']} expenses"],
            ],
            colWidths=[90 * mm, 90 * mm]
        )
        summary.setStyle(TableStyle([
            ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
            ('BACKGROUND', (0, 0), (-1, 0), HEADER_FILL),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('FONTSIZE', (0, 0), (-1, -1), 10),
        ]))
        elements.append(summary)
        elements.append(Spacer(1, 10))

    elements.append(Paragraph('Expense Detail', styles['Heading3']))
    cell = ParagraphStyle('Cell', parent=styles['Normal'], fontSize=8, leading=9)
    detail_rows = [['Description', 'Creditor', 'Amount', 'Type', 'Due Date', 'Status']]
    for row in rows:
        detail_rows.append([
            Paragraph(escape(row['description']), cell),
            Paragraph(escape(row['creditor'] or 'N/A'), cell),
            format_currency(row['amount']),
            _label(ExpenseType, row['type']),
            format_date(row['due_date']),
            _label(ExpenseStatus, row['status']),
        ])
    detail = Table(
        detail_rows,
        colWidths=[50 * mm, 40 * mm, 25 * mm, 20 * mm, 25 * mm, 20 * mm],
        repeatRows=1
    )
    detail.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), HEADER_FILL),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
        ('FONTSIZE', (0, 0), (-1, -1), 8),
        ('ALIGN', (2, 1), (2, -1), 'RIGHT'),
        ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.whitesmoke]),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
    ]))
    elements.append(detail)

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=14 * mm,
        rightMargin=14 * mm,
        topMargin=15 * mm,
        bottomMargin=40 * mm,
        title='SGFI Expense Report',
    )
    doc.build(
        elements,
        canvasmaker=_footer_canvas(
            header_text or DEFAULT_HEADER_TEXT,
            footer_text or DEFAULT_FOOTER_TEXT,
            generated_by,
        )
    )
    logger.info("Expense report rendered: %d row(s)", len(rows))
    return buffer.getvalue()

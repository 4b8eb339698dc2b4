import base64
from datetime import date
from decimal import Decimal
from io import BytesIO

import pandas as pd
import pytest

from apps.expenses.exporters import (
    build_xlsx,
    build_pdf,
    decode_data_url,
    export_filename,
    format_currency,
    format_date,
)
from apps.organization.models import Entity

# 1x1 transparent PNG
PNG_DATA_URL = (
    'data:image/png;base64,'
    'iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=='
)


def _row(**kwargs):
    row = {
        'id': 'e1',
        'description': 'Office rent',
        'amount': Decimal('1234.56'),
        'type': 'fixed',
        'creditor': 'Imobiliária Sul',
        'creditor_document': '11.111.111/0001-11',
        'due_date': date(2025, 3, 10),
        'status': 'paid',
        'paid_at': date(2025, 3, 9),
        'created_at': date(2025, 3, 1),
    }
    row.update(kwargs)
    return row


class TestFormatting:

    def test_currency(self):
        assert format_currency(Decimal('1234.56')) == 'R$ 1.234,56'
        assert format_currency(Decimal('0')) == 'R$ 0,00'
        assert format_currency(Decimal('1000000')) == 'R$ 1.000.000,00'
        assert format_currency(Decimal('-5.5')) == '-R$ 5,50'

    def test_date(self):
        assert format_date(date(2025, 3, 9)) == '09/03/2025'
        assert format_date(None) == 'N/A'

    def test_filenames(self):
        assert export_filename('xlsx') == 'SGFI_Expenses_all.xlsx'
        assert export_filename('pdf', date(2025, 1, 1), date(2025, 1, 31)) == (
            'SGFI_Report_2025-01-01_to_2025-01-31.pdf'
        )


class TestSpreadsheet:

    def test_sheets(self):
        rows = [
            _row(),
            _row(id='e2', description='Paper', amount=Decimal('100'), type='variable',
                 status='overdue', paid_at=None, creditor=None, creditor_document=None),
        ]
        content = build_xlsx(rows)
        sheets = pd.read_excel(BytesIO(content), sheet_name=None, keep_default_na=False)

        assert list(sheets) == ['Expenses', 'Summary']
        expenses = sheets['Expenses']
        assert len(expenses) == 2
        assert expenses.loc[0, 'Formatted Amount'] == 'R$ 1.234,56'
        assert expenses.loc[1, 'Status'] == 'Overdue'
        assert expenses.loc[1, 'Creditor'] == 'N/A'
        assert expenses.loc[1, 'Paid Date'] == 'N/A'

        summary = dict(zip(sheets['Summary']['Metric'], sheets['Summary']['Value']))
        assert summary['Total Paid'] == 'R$ 1.234,56'
        assert summary['Total Pending'] == 'R$ 100,00'
        assert summary['Grand Total'] == 'R$ 1.334,56'

    def test_empty(self):
        sheets = pd.read_excel(BytesIO(build_xlsx([])), sheet_name=None)
        assert sheets['Expenses'].empty


class TestPdf:

    def test_minimal_report(self):
        content = build_pdf([_row()])
        assert content.startswith(b'%PDF')

    def test_report_with_entity_images(self):
        entity = Entity(
            name='Prefeitura',
            full_name='Prefeitura Municipal & Cia <teste>',
            document_number='12.345.678/0001-99',
            logo_url=PNG_DATA_URL,
            brasao_url=PNG_DATA_URL,
        )
        rows = [_row(id=str(i), description=f'Item {i}') for i in range(120)]
        content = build_pdf(
            rows,
            entity=entity,
            header_text='Custom header',
            start_date=date(2025, 3, 1),
            end_date=date(2025, 3, 31),
            generated_by='Admin User',
        )
        assert content.startswith(b'%PDF')

    def test_undecodable_image_is_skipped(self):
        entity = Entity(name='Org', full_name='Org', logo_url='data:image/png;base64,not-an-image')
        content = build_pdf([], entity=entity, include_metrics=False)
        assert content.startswith(b'%PDF')

    @pytest.mark.parametrize('value', ['', 'https://example.com/logo.png', 'data:image/png;base64,%%%'])
    def test_decode_rejects(self, value):
        assert decode_data_url(value) is None

    def test_decode_png(self):
        raw = decode_data_url(PNG_DATA_URL)
        assert raw == base64.b64decode(PNG_DATA_URL.split(',', 1)[1])
        assert raw[:4] == b'\x89PNG'

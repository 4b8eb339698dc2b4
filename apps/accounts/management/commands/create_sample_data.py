"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --clear

This creates:
- 3 users, one per role (admin, finance manager, viewer)
- The institution entity and application settings
- Creditors and expense categories
- Two supply contracts with line items
- Twelve months of expenses, some paid, some pending, some past due
- A few local catalog items
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from decimal import Decimal
from datetime import datetime, timedelta
import random

from apps.accounts.models import User, UserRole
from apps.analytics.analytics import shift_month
from apps.catalog.models import CatalogItem
from apps.contracts.models import Contract
from apps.contracts.services import create_contract
from apps.creditors.models import Creditor
from apps.expenses.models import Category, Expense, ExpenseStatus, ExpenseType
from apps.organization.models import AppSettings, Entity

SAMPLE_PASSWORD = 'password123'


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=42,
            help='Random seed for generated expense amounts',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        random.seed(options['seed'])
        self.stdout.write('Creating sample data...')

        self.create_users()
        self.create_organization()
        creditors = self.create_creditors()
        categories = self.create_categories()
        contracts = self.create_contracts(creditors)
        self.create_expenses(creditors, categories, contracts)
        self.create_catalog_items()

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write(f'  admin@sgfi.local / {SAMPLE_PASSWORD} (admin)')
        self.stdout.write(f'  finance@sgfi.local / {SAMPLE_PASSWORD} (finance manager)')
        self.stdout.write(f'  viewer@sgfi.local / {SAMPLE_PASSWORD} (viewer)')

    def clear_data(self):
        """Clear all domain data; superusers created by hand are kept."""
        Expense.objects.all().delete()
        Contract.objects.all().delete()
        Category.objects.all().delete()
        Creditor.objects.all().delete()
        CatalogItem.objects.all().delete()
        AppSettings.objects.all().delete()
        Entity.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()

    def create_users(self):
        self.stdout.write('  Creating users...')
        accounts = [
            ('admin@sgfi.local', 'Administrador', UserRole.ADMIN),
            ('finance@sgfi.local', 'Gestor Financeiro', UserRole.FINANCE_MANAGER),
            ('viewer@sgfi.local', 'Consulta', UserRole.VIEWER),
        ]
        for email, name, role in accounts:
            user, _ = User.objects.get_or_create(
                email=email,
                defaults={'name': name, 'role': role},
            )
            user.set_password(SAMPLE_PASSWORD)
            user.save()

    def create_organization(self):
        self.stdout.write('  Creating entity and settings...')
        entity = Entity.objects.first()
        if entity is None:
            entity = Entity.objects.create(
                name='Prefeitura de Exemplo',
                full_name='Prefeitura Municipal de Exemplo',
                document_number='12.345.678/0001-90',
                address='Praça Central, 100 - Centro',
                phone='(11) 3333-0000',
                email='financeiro@exemplo.gov.br',
            )

        app_settings = AppSettings.load()
        app_settings.entity = entity
        app_settings.header_text = entity.full_name
        app_settings.save()

    def create_creditors(self):
        self.stdout.write('  Creating creditors...')
        rows = [
            ('Auto Posto Central', '22.333.444/0001-55', 'São Paulo', 'SP'),
            ('Papelaria Modelo Ltda', '33.444.555/0001-66', 'Campinas', 'SP'),
            ('Companhia de Energia', '44.555.666/0001-77', 'São Paulo', 'SP'),
            ('Segurança Total Serviços', '55.666.777/0001-88', 'Santos', 'SP'),
        ]
        creditors = {}
        for name, document, city, uf in rows:
            creditor, _ = Creditor.objects.get_or_create(
                name=name,
                defaults={'document_number': document, 'city': city, 'uf': uf},
            )
            creditors[name] = creditor
        return creditors

    def create_categories(self):
        self.stdout.write('  Creating categories...')
        rows = [
            ('Combustível', ExpenseType.VARIABLE, '#f59e0b'),
            ('Material de Escritório', ExpenseType.VARIABLE, '#3b82f6'),
            ('Energia Elétrica', ExpenseType.FIXED, '#10b981'),
            ('Vigilância', ExpenseType.FIXED, '#6366f1'),
        ]
        categories = {}
        for name, expense_type, color in rows:
            category, _ = Category.objects.get_or_create(
                name=name,
                defaults={'type': expense_type, 'color': color},
            )
            categories[name] = category
        return categories

    def create_contracts(self, creditors):
        self.stdout.write('  Creating contracts...')
        today = timezone.localdate()
        specs = [
            {
                'number': '001/2026',
                'description': 'Fornecimento de combustível para a frota',
                'creditor': creditors['Auto Posto Central'],
                'start_date': today - timedelta(days=200),
                'end_date': today + timedelta(days=25),
                'alert_new_contract': 60,
                'alert_additive': 30,
                'items': [
                    {'id': 'diesel', 'description': 'Óleo diesel S10', 'unit': 'L',
                     'quantity': 20000, 'consumed': 17500, 'unit_price': '6.19'},
                    {'id': 'gasolina', 'description': 'Gasolina comum', 'unit': 'L',
                     'quantity': 8000, 'consumed': 2100, 'unit_price': '5.89'},
                ],
            },
            {
                'number': '002/2026',
                'description': 'Material de escritório',
                'creditor': creditors['Papelaria Modelo Ltda'],
                'start_date': today - timedelta(days=90),
                'end_date': today + timedelta(days=275),
                'items': [
                    {'id': 'papel-a4', 'description': 'Papel A4 75g', 'unit': 'RM',
                     'quantity': 500, 'consumed': 120, 'unit_price': '24.90'},
                    {'id': 'toner', 'description': 'Toner para impressora laser', 'unit': 'un',
                     'quantity': 40, 'consumed': 38, 'unit_price': '310.00'},
                ],
            },
        ]
        contracts = {}
        for spec in specs:
            existing = Contract.objects.filter(number=spec['number']).first()
            contracts[spec['number']] = existing or create_contract(**spec)
        return contracts

    def create_expenses(self, creditors, categories, contracts):
        """One fixed energy bill and one security bill per month, plus fuel."""
        self.stdout.write('  Creating expenses...')
        if Expense.objects.exists():
            return

        today = timezone.localdate()
        for months_ago in range(11, -2, -1):
            due = shift_month(today, -months_ago).replace(day=10)
            paid = due < today - timedelta(days=5)
            paid_at = timezone.make_aware(datetime.combine(due, datetime.min.time())) if paid else None
            status = ExpenseStatus.PAID if paid else ExpenseStatus.PENDING
            month = due.strftime('%Y-%m')

            Expense.objects.create(
                description=f'Conta de energia {month}',
                amount=Decimal(random.randint(380000, 460000)) / 100,
                type=ExpenseType.FIXED,
                due_date=due,
                month=month,
                status=status,
                paid_at=paid_at,
                creditor=creditors['Companhia de Energia'],
                category=categories['Energia Elétrica'],
            )
            Expense.objects.create(
                description=f'Vigilância patrimonial {month}',
                amount=Decimal('12500.00'),
                type=ExpenseType.FIXED,
                due_date=due + timedelta(days=5),
                month=month,
                status=status,
                paid_at=paid_at,
                creditor=creditors['Segurança Total Serviços'],
                category=categories['Vigilância'],
            )
            Expense.objects.create(
                description=f'Abastecimento da frota {month}',
                amount=Decimal(random.randint(900000, 1500000)) / 100,
                type=ExpenseType.VARIABLE,
                due_date=due + timedelta(days=15),
                month=month,
                status=status,
                paid_at=paid_at,
                creditor=creditors['Auto Posto Central'],
                category=categories['Combustível'],
                contract=contracts['001/2026'],
            )

    def create_catalog_items(self):
        self.stdout.write('  Creating catalog items...')
        rows = [
            ('Papel A4 75g', 'Material de Escritório', 'RM', '24.90', 'CATMAT', 'resma'),
            ('Caneta esferográfica azul', 'Material de Escritório', 'un', '1.35', 'CATMAT', 'caneta'),
            ('Óleo diesel S10', 'Combustível', 'L', '6.19', 'CATMAT', 'diesel'),
            ('Serviço de vigilância patrimonial', 'Serviços', 'mês', '12500.00', 'CATSERV', 'vigilancia'),
        ]
        for description, category, unit, price, pncp_catalog, keyword in rows:
            CatalogItem.objects.get_or_create(
                description=description,
                defaults={
                    'category': category,
                    'unit': unit,
                    'unit_price': Decimal(price),
                    'pncp_catalog': pncp_catalog,
                    'keyword1': keyword,
                },
            )

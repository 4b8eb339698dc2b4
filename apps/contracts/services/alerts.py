"""
Contract expiry and balance alerting.

Deadline alerts: for every contract that is not expired or cancelled,
``days_left`` is the whole number of days from today to the end date.
Each of the two reminder thresholds is checked on its own, so one contract
can raise both a ``new_contract`` and an ``additive`` alert.

Balance alerts: items of non-terminal contracts with at most 30% of the
contracted quantity left.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from django.utils import timezone

from apps.contracts.models import Contract, TERMINAL_STATUSES
from .balance import classify, to_decimal, to_json_number, WARNING_THRESHOLD

ALERT_NEW_CONTRACT = 'new_contract'
ALERT_ADDITIVE = 'additive'


def days_until(end_date: date, today: Optional[date] = None) -> int:
    """Whole days from today to end_date; negative once it has passed."""
    today = today or timezone.localdate()
    return (end_date - today).days


def _within(threshold: Optional[int], days_left: int) -> bool:
    return threshold is not None and 0 <= days_left <= threshold


def _alert(contract: Contract, alert_type: str, days_left: int) -> dict:
    return {
        'contract_id': str(contract.id),
        'number': contract.number,
        'description': contract.description,
        'end_date': contract.end_date,
        'type': alert_type,
        'days_left': days_left,
    }


def alerts_for_contract(contract: Contract, today: Optional[date] = None) -> list:
    """Deadline alerts raised by a single contract."""
    if contract.is_terminal or contract.end_date is None:
        return []

    days_left = days_until(contract.end_date, today)
    alerts = []
    if _within(contract.alert_new_contract, days_left):
        alerts.append(_alert(contract, ALERT_NEW_CONTRACT, days_left))
    if _within(contract.alert_additive, days_left):
        alerts.append(_alert(contract, ALERT_ADDITIVE, days_left))
    return alerts


def deadline_alerts(
    contracts: Optional[Iterable[Contract]] = None,
    today: Optional[date] = None
) -> list:
    """Deadline alerts for all contracts, soonest first."""
    if contracts is None:
        contracts = Contract.objects.exclude(status__in=TERMINAL_STATUSES)

    alerts = []
    for contract in contracts:
        alerts.extend(alerts_for_contract(contract, today))
    return sorted(alerts, key=lambda a: a['days_left'])


def balance_alerts(contracts: Optional[Iterable[Contract]] = None) -> list:
    """Items of live contracts that are running out (or already over)."""
    if contracts is None:
        contracts = Contract.objects.exclude(status__in=TERMINAL_STATUSES)

    alerts = []
    for contract in contracts:
        if contract.is_terminal:
            continue
        for item in contract.items or []:
            quantity = to_decimal(item.get('quantity', 0))
            if quantity == 0:
                continue
            consumed = to_decimal(item.get('consumed') or 0)
            remaining_fraction = (quantity - consumed) / quantity
            if remaining_fraction > WARNING_THRESHOLD:
                continue
            alerts.append({
                'contract_id': str(contract.id),
                'number': contract.number,
                'item_id': item.get('id'),
                'description': item.get('description', ''),
                'remaining_fraction': to_json_number(remaining_fraction.quantize(Decimal('0.0001'))),
                'status': str(classify(quantity, consumed)),
            })
    return alerts

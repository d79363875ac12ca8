"""Per-resource endpoint groups."""

from __future__ import annotations

from .billing_profiles import BillingProfiles
from .billings import Billings
from .delivery_events import DeliveryEvents
from .invoices import Invoices
from .payments import Payments
from .rate_cards import RateCards
from .reports import Reports
from .sender_accounts import SenderAccounts
from .waybills import Waybills

__all__ = [
    "BillingProfiles",
    "Billings",
    "DeliveryEvents",
    "Invoices",
    "Payments",
    "RateCards",
    "Reports",
    "SenderAccounts",
    "Waybills",
]

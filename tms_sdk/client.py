"""TMS API client facade."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from .config import ClientConfig, load_client_config
from .resources import (
    BillingProfiles,
    Billings,
    DeliveryEvents,
    Invoices,
    Payments,
    RateCards,
    Reports,
    SenderAccounts,
    Waybills,
)
from .transport.http import HttpClient


class TMSClient:
    """Entry point for the TMS API.

    Usage::

        async with TMSClient(
            base_url="https://your-domain.com/api",
            api_key="your-api-key",
            api_secret="your-api-secret",
        ) as client:
            waybill = await client.waybills.create({...})
            events = await client.waybills.get_events(waybill["waybill_no"])
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        base_url: str = "",
        api_key: str = "",
        api_secret: str = "",
        timeout_ms: int | None = None,
        headers: Mapping[str, str] | None = None,
        sign_type: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if config is None:
            options: dict[str, Any] = {}
            if timeout_ms is not None:
                options["timeout_ms"] = timeout_ms
            if headers is not None:
                options["headers"] = headers
            if sign_type is not None:
                options["sign_type"] = sign_type
            config = ClientConfig(
                base_url=base_url,
                api_key=api_key,
                api_secret=api_secret,
                **options,
            )
        self.config = config
        self.http = HttpClient(config, transport=transport)

        self.waybills = Waybills(self.http)
        self.billings = Billings(self.http)
        self.invoices = Invoices(self.http)
        self.payments = Payments(self.http)
        self.rate_cards = RateCards(self.http)
        self.sender_accounts = SenderAccounts(self.http)
        self.billing_profiles = BillingProfiles(self.http)
        self.delivery_events = DeliveryEvents(self.http)
        self.reports = Reports(self.http)

    @classmethod
    def from_env(cls, *, transport: httpx.AsyncBaseTransport | None = None) -> "TMSClient":
        """Build a client from ``$TMS_CONFIG_PATH`` and the ``TMS_*`` variables."""
        return cls(load_client_config(), transport=transport)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "TMSClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

"""Request and response shapes for the TMS API."""

from __future__ import annotations

from typing import Any, Literal, TypedDict


class PaginationParams(TypedDict, total=False):
    page: int
    pageSize: int


class DateRangeParams(TypedDict, total=False):
    date_from: str
    date_to: str


class PaginatedResponse(TypedDict):
    data: list[Any]
    page: int
    pageSize: int
    total: int
    totalPages: int


# Waybills


class _ProductBase(TypedDict):
    sku: str
    name: str


class Product(_ProductBase, total=False):
    quantity: int
    number: int
    weight: float
    width: float
    length: float
    height: float


class _ParcelBase(TypedDict):
    outParcelNo: str
    itemDesc: str
    itemValue: float
    productList: list[Product]


class Parcel(_ParcelBase, total=False):
    weight: float
    width: float
    length: float
    height: float
    photos: list[str]


class _CreateWaybillBase(TypedDict):
    outTradeNo: str
    owner: str
    senderName: str
    senderPhone: str
    senderCityName: str
    senderDistrictName: str
    senderPostCode: str
    senderAddress: str
    receiverName: str
    receiverPhone: str
    receiverProvinceName: str
    receiverCityName: str
    receiverDistrictName: str
    receiverPostCode: str
    receiverAddress: str
    parcelList: list[Parcel]


class CreateWaybillRequest(_CreateWaybillBase, total=False):
    receiverPhone2: str
    remark: str
    service_id: str
    route_id: str
    additional_service_ids: list[str]
    sender_account: dict[str, str]


class WaybillPackage(TypedDict):
    package_no: str
    external_package_no: str


class CreateWaybillResponse(TypedDict):
    waybill_no: str
    external_waybill_no: str
    status: str
    packages: list[WaybillPackage]


class TrackingRoute(TypedDict):
    state: str
    stateText: str
    message: str
    createdAt: int


class WaybillEvents(TypedDict, total=False):
    trackingNo: str
    state: str
    stateText: str
    licensePlate: str
    courierPhone: str
    podImages: list[str]
    returnedItems: list[str]
    routes: list[TrackingRoute]


class _AddPackageBase(TypedDict):
    external_package_no: str


class AddPackageRequest(_AddPackageBase, total=False):
    weight: float
    width: float
    length: float
    height: float
    notes: str
    products: list[Product]


AdditionalServiceStatus = Literal["pending", "in_progress", "completed", "skipped"]


class _UpdateAdditionalServiceBase(TypedDict):
    status: Literal["completed", "skipped", "in_progress"]


class UpdateAdditionalServiceRequest(_UpdateAdditionalServiceBase, total=False):
    result: dict[str, Any]


class _RecipientAddressBase(TypedDict):
    street_line: str
    city: str
    state: str
    zip_code: str


class RecipientAddress(_RecipientAddressBase, total=False):
    block_floor_room: str
    town: str
    country: str


class _RecipientBase(TypedDict):
    name: str
    phone: str
    address: RecipientAddress


class RecipientInput(_RecipientBase, total=False):
    email: str


class _ConsolidateBase(TypedDict):
    waybill_ids: list[str]
    external_waybill_no: str
    sender: dict[str, str]
    recipient: RecipientInput
    service_id: str


class ConsolidateWaybillsRequest(_ConsolidateBase, total=False):
    route_id: str
    notes: str
    tags: list[str]


# Billing

BillingStatus = Literal["pending", "draft", "invoiced", "paid", "canceled"]


class _CreateBillingBase(TypedDict):
    rate_card_id: str
    quantity: float


class CreateBillingRequest(_CreateBillingBase, total=False):
    name: str
    contractor_id: str
    subcontractor_id: str
    sender_account_id: str
    organization_id: str
    waybill_id: str
    delivery_id: str
    status: BillingStatus


class UpdateBillingRequest(TypedDict, total=False):
    name: str
    quantity: float
    status: BillingStatus


class ListBillingsParams(PaginationParams, DateRangeParams, total=False):
    contractor_id: str
    subcontractor_id: str
    rate_card_id: str
    status: BillingStatus
    invoice_id: str


# Invoices

InvoiceStatus = Literal["draft", "issued", "paid", "partial", "overdue", "canceled"]


class _CreateInvoiceBase(TypedDict):
    period_start: str
    period_end: str


class CreateInvoiceRequest(_CreateInvoiceBase, total=False):
    contractor_id: str
    sender_account_id: str
    billing_ids: list[str]
    notes: str
    payment_terms: str
    tax_rate: float
    currency: str


class IssueInvoiceRequest(TypedDict, total=False):
    due_date: str
    issue_date: str


class _SendInvoiceEmailBase(TypedDict):
    recipient_email: str


class SendInvoiceEmailRequest(_SendInvoiceEmailBase, total=False):
    cc_emails: list[str]
    subject: str
    message: str


# Payments

PaymentStatus = Literal["pending", "verified", "rejected"]
PaymentMethod = Literal["bank_transfer", "flashpay"]
FlashPayType = Literal["qr", "app"]


class AllocationInput(TypedDict):
    invoice_id: str
    amount: float


class _CreatePaymentBase(TypedDict):
    amount: float
    payment_method: PaymentMethod
    payment_date: str
    allocations: list[AllocationInput]


class CreatePaymentRequest(_CreatePaymentBase, total=False):
    notes: str
    contractor_id: str
    subcontractor_id: str
    sender_account_id: str


class _FlashPayBase(TypedDict):
    amount: float
    allocations: list[AllocationInput]
    flashpay_type: FlashPayType


class FlashPayRequest(_FlashPayBase, total=False):
    flashpay_bank_code: str
    description: str
    contractor_id: str
    subcontractor_id: str
    sender_account_id: str


# Reports

ReportPeriod = Literal["daily", "weekly", "monthly"]


class RevenueSummaryParams(DateRangeParams, total=False):
    period: ReportPeriod
    contractor_id: str


# Billing profiles

BillingType = Literal["consolidated", "transactional"]
BillingCycle = Literal["weekly", "biweekly", "monthly", "custom"]
PaymentTerms = Literal[
    "due_on_receipt", "net_7", "net_15", "net_30", "net_45", "net_60", "net_90", "custom"
]
CycleRunStatus = Literal["pending", "processing", "completed", "failed", "skipped"]


class _CreateBillingProfileBase(TypedDict):
    billing_type: BillingType


class CreateBillingProfileRequest(_CreateBillingProfileBase, total=False):
    contractor_id: str
    sender_account_id: str
    billing_cycle: BillingCycle
    cycle_day: int
    cycle_weekday: int
    cycle_interval_days: int
    cycle_anchor_date: str
    payment_terms: PaymentTerms
    payment_terms_days: int
    default_tax_rate: float
    default_currency: str
    default_notes: str
    auto_issue: bool


# None clears a field server-side; leave a key out (or pass UNSET) to keep it
class UpdateBillingProfileRequest(TypedDict, total=False):
    billing_type: BillingType
    billing_cycle: BillingCycle
    cycle_day: int | None
    cycle_weekday: int | None
    cycle_interval_days: int | None
    cycle_anchor_date: str | None
    payment_terms: PaymentTerms
    payment_terms_days: int | None
    default_tax_rate: float
    default_currency: str
    default_notes: str | None
    auto_issue: bool
    is_active: bool


class TriggerCycleRequest(TypedDict, total=False):
    as_of_date: str

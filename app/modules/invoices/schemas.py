"""
Invoice DTOs (Data Transfer Objects)
"""

from datetime import date
from typing import Any, List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from app.core.config import config
from app.core.utils import parse_amount


def new_item_id() -> str:
    return uuid4().hex


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# ============================================================================
# State models
# ============================================================================


class LineItem(BaseModel):
    """One billable row of the invoice"""

    id: str = Field(default_factory=new_item_id, description="Opaque item id")
    description: str = ""
    hsn_code: str = ""
    quantity: float = Field(default=1, description="Blank or non-numeric reads as 0")
    rate: float = Field(default=0, description="Blank or non-numeric reads as 0")
    from_date: Optional[date] = None
    to_date: Optional[date] = None

    @field_validator("quantity", "rate", mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> float:
        return parse_amount(value)

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def blank_date(cls, value: Any) -> Any:
        return _blank_to_none(value)


class InvoiceState(BaseModel):
    """Everything the client edits on one invoice"""

    company_name: str = ""
    company_address: str = ""
    gstin: str = ""
    company_phone: str = ""
    invoice_title: str = Field(default_factory=lambda: config.default_invoice_title)
    invoice_number: str = ""
    invoice_date: Optional[date] = None
    client_name: str = ""
    client_address: str = ""
    client_gstin: str = ""
    delivery_address: str = ""

    items: List[LineItem] = Field(default_factory=list)

    sgst_rate: float = 0
    cgst_rate: float = 0
    igst_rate: float = 0
    cartage: float = 0

    bank_account_holder: str = ""
    bank_name: str = ""
    account_number: str = ""
    ifsc_code: str = ""
    terms: str = ""

    @field_validator("sgst_rate", "cgst_rate", "igst_rate", "cartage", mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> float:
        return parse_amount(value)

    @field_validator("invoice_date", mode="before")
    @classmethod
    def blank_date(cls, value: Any) -> Any:
        return _blank_to_none(value)


# ============================================================================
# Request DTOs
# ============================================================================


class UpdateInvoiceDto(BaseModel):
    """DTO for changing header, footer, rate and cartage fields"""

    company_name: Optional[str] = None
    company_address: Optional[str] = None
    gstin: Optional[str] = None
    company_phone: Optional[str] = None
    invoice_title: Optional[str] = None
    invoice_number: Optional[str] = None
    invoice_date: Optional[date] = None
    client_name: Optional[str] = None
    client_address: Optional[str] = None
    client_gstin: Optional[str] = None
    delivery_address: Optional[str] = None

    sgst_rate: Optional[float] = None
    cgst_rate: Optional[float] = None
    igst_rate: Optional[float] = None
    cartage: Optional[float] = None

    bank_account_holder: Optional[str] = None
    bank_name: Optional[str] = None
    account_number: Optional[str] = None
    ifsc_code: Optional[str] = None
    terms: Optional[str] = None

    @field_validator("sgst_rate", "cgst_rate", "igst_rate", "cartage", mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> float:
        return parse_amount(value)

    @field_validator("invoice_date", mode="before")
    @classmethod
    def blank_date(cls, value: Any) -> Any:
        return _blank_to_none(value)


class UpdateLineItemDto(BaseModel):
    """DTO for changing fields of one line item (the id never changes)"""

    description: Optional[str] = None
    hsn_code: Optional[str] = None
    quantity: Optional[float] = None
    rate: Optional[float] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None

    @field_validator("quantity", "rate", mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> float:
        return parse_amount(value)

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def blank_date(cls, value: Any) -> Any:
        return _blank_to_none(value)


class UpdateInvoiceRequest(BaseModel):
    state: InvoiceState
    changes: UpdateInvoiceDto


class UpdateLineItemRequest(BaseModel):
    state: InvoiceState
    changes: UpdateLineItemDto


# ============================================================================
# Response DTOs
# ============================================================================


class InvoiceTotals(BaseModel):
    """Derived totals, recomputed from the state on every read"""

    subtotal: float
    sgst_amount: float
    cgst_amount: float
    igst_amount: float
    cartage: float
    grand_total: float


class FormattedTotals(BaseModel):
    subtotal: str
    sgst_amount: str
    cgst_amount: str
    igst_amount: str
    cartage: str
    grand_total: str


class LineItemView(BaseModel):
    """Line item as displayed, with its computed amount and day count"""

    item: LineItem
    amount: float
    amount_display: str
    days: Optional[int] = None
    days_display: str = ""


class InvoiceView(BaseModel):
    """Full computed invoice for rendering and printing"""

    state: InvoiceState
    invoice_date_display: str = ""
    items: List[LineItemView]
    totals: InvoiceTotals
    totals_display: FormattedTotals
    rounded_grand_total: int
    amount_in_words: str


class AmountInWordsResponse(BaseModel):
    amount: int
    words: str


class DaySpanResponse(BaseModel):
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    days: Optional[int] = None

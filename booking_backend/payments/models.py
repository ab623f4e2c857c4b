"""
Modèles d'entrée du checkout (corps JSON envoyé par le storefront).
Les clés JSON restent en camelCase (alias), les attributs Python en snake_case.
"""
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class RoomPackage(_Payload):
    quantity: int = Field(ge=1)
    total_price: float = Field(alias="totalPrice")


class Addon(_Payload):
    price: float


class Totals(_Payload):
    subtotal_before_discount: float = Field(alias="subtotalBeforeDiscount")
    discount: float = 0
    voucher_discount: float = Field(default=0, alias="voucherDiscount")
    final_total: float = Field(alias="finalTotal")


class Customer(_Payload):
    name: str
    email: str
    phone: str


class Voucher(_Payload):
    code: str
    amount: float


class CheckoutRequest(_Payload):
    cart: Dict[str, RoomPackage]
    addons: Dict[str, Addon] = Field(default_factory=dict)
    totals: Totals
    customer: Customer
    voucher: Optional[Voucher] = None
    success_url: str = Field(alias="successUrl")
    cancel_url: str = Field(alias="cancelUrl")

"""
VietQR bank-transfer image URLs.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union
from urllib.parse import quote

from django.conf import settings

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"

VIETQR_IMAGE_URL = "https://img.vietqr.io/image/{bank_code}-{account_number}-compact.png"


def encode_uri_component(value: str) -> str:
    """Percent-encode exactly like JavaScript's encodeURIComponent."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def round_half_up(amount: Union[Decimal, int, float, str]) -> int:
    """Round like JavaScript Math.round for non-negative amounts."""
    return int(Decimal(str(amount)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class BankAccount:
    bank_code: str
    account_number: str
    account_name: str

    @classmethod
    def from_settings(cls) -> 'BankAccount':
        bank = settings.VIETQR_BANK
        return cls(
            bank_code=bank['BANK_CODE'],
            account_number=bank['ACCOUNT_NUMBER'],
            account_name=bank['ACCOUNT_NAME'],
        )


def transfer_note(order_id: Optional[Union[int, str]] = None, phone_number: Optional[str] = None) -> str:
    """
    Reference the customer types into the transfer.

    An explicit phone number wins; otherwise the order id as `DH {id}`.
    """
    if phone_number:
        return phone_number.strip()
    return f"DH {order_id if order_id not in (None, '') else 'N/A'}"


def build_vietqr_url(amount, note: str, account: Optional[BankAccount] = None) -> str:
    """
    Build the QR image URL for a transfer of `amount` dong.

    Same inputs always give the same URL, byte for byte.
    """
    account = account or BankAccount.from_settings()
    base = VIETQR_IMAGE_URL.format(
        bank_code=account.bank_code,
        account_number=account.account_number,
    )
    add_info = encode_uri_component(f"Thanh toan don {note}")
    account_name = encode_uri_component(account.account_name)
    return f"{base}?amount={round_half_up(amount)}&addInfo={add_info}&accountName={account_name}"

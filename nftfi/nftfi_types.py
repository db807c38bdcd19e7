"""
NFTfi SDK - Data Types

Offer records and loan contract names, as exchanged with the NFTfi API.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union
import json


class ContractName(Enum):
    """Loan contract variant an offer is made against"""
    V1_LOAN_FIXED = "v1.loan.fixed"
    V2_LOAN_FIXED = "v2.loan.fixed"
    V2_1_LOAN_FIXED = "v2-1.loan.fixed"


@dataclass
class Offer:
    """
    Offer - A lender's signed proposal to fund a loan against an NFT.

    Offers are created and stored by the NFTfi API; the SDK only reads
    and writes them in their wire format.

    Structure:
      - id: Opaque offer id assigned by the API
      - terms: principal, repayment, duration (seconds), currency (ERC20)
      - nft: address (collection) and id (token)
      - borrower: address of the NFT owner
      - lender: address and nonce of the lender
      - contract_name: loan contract tag, e.g. "v2-1.loan.fixed"

    Amounts, token ids and nonces keep the type the API sent (wei
    amounts usually arrive as decimal strings).
    """
    id: str = ""
    principal: Union[int, str] = 0
    repayment: Union[int, str] = 0
    duration: Union[int, str] = 0
    currency: str = ""
    nft_address: str = ""
    nft_id: Union[int, str] = ""
    borrower_address: str = ""
    lender_address: str = ""
    lender_nonce: Union[int, str] = ""
    contract_name: str = ""

    # Fields the SDK doesn't model (signatures, dates, ...)
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def contract(self) -> Optional[ContractName]:
        """Known contract variant, or None for an unrecognised tag."""
        try:
            return ContractName(self.contract_name)
        except ValueError:
            return None

    def to_dict(self) -> dict:
        """Convert to the API's nested wire format."""
        data = dict(self.extra)
        if self.id:
            data["id"] = self.id
        data.update({
            "terms": {
                "principal": self.principal,
                "repayment": self.repayment,
                "duration": self.duration,
                "currency": self.currency
            },
            "nft": {
                "address": self.nft_address,
                "id": self.nft_id
            },
            "borrower": {"address": self.borrower_address},
            "lender": {
                "address": self.lender_address,
                "nonce": self.lender_nonce
            },
            "nftfi": {"contract": {"name": self.contract_name}}
        })
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Offer":
        """Create Offer from an API record."""
        known = {"id", "terms", "nft", "borrower", "lender", "nftfi"}
        terms = data.get("terms") or {}
        nft = data.get("nft") or {}
        borrower = data.get("borrower") or {}
        lender = data.get("lender") or {}
        contract = (data.get("nftfi") or {}).get("contract") or {}
        return cls(
            id=data.get("id", ""),
            principal=terms.get("principal", 0),
            repayment=terms.get("repayment", 0),
            duration=terms.get("duration", 0),
            currency=terms.get("currency", ""),
            nft_address=nft.get("address", ""),
            nft_id=nft.get("id", ""),
            borrower_address=borrower.get("address", ""),
            lender_address=lender.get("address", ""),
            lender_nonce=lender.get("nonce", ""),
            contract_name=contract.get("name", ""),
            extra={k: v for k, v in data.items() if k not in known}
        )

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> "Offer":
        """Create Offer from JSON string."""
        return cls.from_dict(json.loads(json_str))

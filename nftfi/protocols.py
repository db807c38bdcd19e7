"""
NFTfi SDK - Collaborator Protocols

Structural contracts for the objects injected into Offers and
MultisigGnosisOwner. Any object with the right methods will do.
"""

from typing import Any, Awaitable, Dict, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class ApiClient(Protocol):
    """REST client used by Offers (see nftfi.api.Api)."""

    async def get(self, uri: str, params: Optional[dict] = None) -> Any:
        ...

    async def post(self, uri: str, payload: Optional[dict] = None) -> Any:
        ...

    async def delete(self, uri: str) -> Any:
        ...


@runtime_checkable
class AccountLike(Protocol):
    """
    Account whose address is used as the default lender filter.
    get_address() may return the address or an awaitable of it.
    """

    def get_address(self) -> Union[str, Awaitable[str]]:
        ...


@runtime_checkable
class OffersHelper(Protocol):
    """Builds contract-specific offer payloads (signs lender terms)."""

    async def construct_v2_offer(self, options: Dict[str, Any]) -> Dict[str, Any]:
        ...


@runtime_checkable
class Loans(Protocol):
    """Loan contract operations; offers are revoked on-chain by nonce."""

    async def revoke_offer(self, options: Dict[str, Any]) -> Any:
        ...


@runtime_checkable
class Signer(Protocol):
    """
    Anything that can produce EIP-191 personal signatures.
    sign_message returns a 0x-prefixed hex string.
    """

    async def get_address(self) -> str:
        ...

    async def sign_message(self, data: bytes) -> str:
        ...

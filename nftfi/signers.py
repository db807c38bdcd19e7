"""
NFTfi SDK - Signers

Private-key wallets for signing offers directly (EOA accounts).
"""

import logging
from typing import Optional

from eth_account import Account
from eth_account.messages import encode_defunct

log = logging.getLogger(__name__)


def to_hex_0x(data: bytes) -> str:
    """Convert bytes to hex string with 0x prefix"""
    return "0x" + bytes(data).hex()


class WalletSigner:
    """
    Signer backed by a local private key.

    Usage:
        signer = WalletSigner("0x...", provider="https://eth.llamarpc.com")
        address = await signer.get_address()
        signature = await signer.sign_message(b"hello")
    """

    def __init__(self, private_key: str, provider: Optional[str] = None):
        """
        Initialize wallet.

        Args:
            private_key: 32-byte key as hex (0x prefix optional)
            provider: JSON-RPC node URL, needed only for on-chain work
        """
        self._account = Account.from_key(private_key)
        self.provider = provider

    @property
    def address(self) -> str:
        return self._account.address

    async def get_address(self) -> str:
        return self._account.address

    async def sign_message(self, data: bytes) -> str:
        """EIP-191 personal sign of raw bytes, 0x hex (r || s || v)."""
        signed = self._account.sign_message(encode_defunct(primitive=data))
        return to_hex_0x(signed.signature)


class EoaAccount:
    """
    Externally owned account: the lender signs with its own key.

    Usage:
        account = EoaAccount(os.environ["NFTFI_PRIVATE_KEY"])
        offers = Offers(account=account, api=api, ...)
    """

    def __init__(self, private_key: str, provider: Optional[str] = None):
        self._signer = WalletSigner(private_key, provider)

    def get_address(self) -> str:
        """Checksummed address of the account."""
        return self._signer.address

    def get_signer(self) -> WalletSigner:
        return self._signer

    async def sign(self, msg: bytes) -> str:
        """Sign msg with an EIP-191 personal signature."""
        log.debug(f"Signing {len(msg)} bytes as {self._signer.address}")
        return await self._signer.sign_message(msg)

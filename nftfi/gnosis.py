"""
NFTfi SDK - Gnosis Safe Multisig

Signing on behalf of a Gnosis Safe by one of its owners.

A Safe validates an owner's signature of a SafeMessage hash (EIP-712,
domain = the Safe itself). Owners sign that hash with eth_sign, which the
Safe recognises by a recovery byte v > 30: v is shifted from 27/28 to 31/32.
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from eth_account import Account
from eth_account.messages import SignableMessage, encode_defunct, encode_typed_data
from web3 import Web3

from .protocols import Signer
from .signers import WalletSigner

log = logging.getLogger(__name__)

# eth_sign recovery byte: 27/28 -> 31/32
ETH_SIGN_V_SUFFIXES = {
    "1b": "1f",
    "1c": "20",
}

SAFE_MESSAGE_TYPES = {
    "SafeMessage": [{"name": "message", "type": "bytes"}]
}


@dataclass(frozen=True)
class Multisig:
    """Gnosis Safe the owner signs for."""
    safe_address: str


async def signer_address(signer: Any) -> str:
    """signer.get_address(), awaited if the signer is async."""
    address = signer.get_address()
    if inspect.isawaitable(address):
        address = await address
    return address


def hash_signable(signable: SignableMessage) -> bytes:
    """keccak256(0x19 || version || header || body)"""
    return Web3.keccak(b"\x19" + signable.version + signable.header + signable.body)


def safe_message_hash(msg: bytes, safe_address: str, chain_id: int) -> bytes:
    """
    EIP-712 SafeMessage hash of msg.

    Args:
        msg: Raw message bytes
        safe_address: Safe contract (verifyingContract)
        chain_id: EVM chain id

    Returns:
        32-byte hash the owners must sign
    """
    message = hash_signable(encode_defunct(primitive=msg))
    signable = encode_typed_data(
        domain_data={
            "chainId": chain_id,
            "verifyingContract": Web3.to_checksum_address(safe_address)
        },
        message_types=SAFE_MESSAGE_TYPES,
        message_data={"message": message}
    )
    return hash_signable(signable)


def adjust_safe_signature(signature: str) -> str:
    """
    Shift the recovery byte of an eth_sign signature to the Safe's range.

    ...1b -> ...1f and ...1c -> ...20; anything else (including upper-case
    hex) is returned as is.
    """
    suffix = signature[-2:]
    if suffix not in ETH_SIGN_V_SUFFIXES:
        log.warning(f"Unexpected signature recovery byte: {suffix!r}, left unchanged")
        return signature
    return signature[:-2] + ETH_SIGN_V_SUFFIXES[suffix]


class EthAdapter:
    """
    Binds a signer to the node the Safe SDK talks to.

    The node URL is the signer's own provider if it has one, else the
    owner's provider.
    """

    def __init__(self, signer: Optional[Signer] = None, provider_url: Optional[str] = None):
        self.signer = signer
        self.provider_url = getattr(signer, "provider", None) or provider_url


@dataclass
class SafeSession:
    """
    Safe SDK instance together with the adapter (and so the signer) it
    was created for. Unknown attributes are looked up on the Safe.
    """
    safe: Any
    eth_adapter: EthAdapter

    @property
    def signer(self) -> Optional[Signer]:
        return self.eth_adapter.signer

    async def get_owner_address(self) -> str:
        """Address of the owner signing for this session."""
        return await signer_address(self.signer)

    def __getattr__(self, name: str):
        if name in ("safe", "eth_adapter"):
            raise AttributeError(name)
        return getattr(self.safe, name)


def create_safe(eth_adapter: EthAdapter, safe_address: str) -> SafeSession:
    """Instantiate a safe-eth-py Safe (queries the node for its version)."""
    try:
        from safe_eth.eth import EthereumClient
        from safe_eth.safe import Safe
    except ImportError:
        log.error("safe-eth-py not installed. Run: pip install safe-eth-py")
        raise

    if not eth_adapter.provider_url:
        raise ValueError("Safe SDK needs a provider URL (signer provider or config.provider_url)")

    client = EthereumClient(eth_adapter.provider_url)
    safe = Safe(Web3.to_checksum_address(safe_address), client)
    return SafeSession(safe=safe, eth_adapter=eth_adapter)


class MultisigGnosisOwner:
    """
    Owner of a Gnosis Safe, acting as the signer for the Safe's account.

    Signs either through an explicit signer or through a wallet derived
    from a private key; the explicit signer takes precedence.

    Usage:
        owner = MultisigGnosisOwner(
            multisig=Multisig(safe_address="0x..."),
            config=Config(chain_id=1),
            private_key="0x...",
            provider="https://eth.llamarpc.com"
        )

        address = await owner.get_address()
        signature = await owner.sign(b"offer bytes")
        safe = await owner.get_safe_sdk()
    """

    def __init__(self, multisig: Multisig, config: Any,
                 private_key: Optional[str] = None,
                 signer: Optional[Signer] = None,
                 provider: Optional[str] = None,
                 adapter_factory: Callable[..., Any] = EthAdapter,
                 safe_factory: Callable[..., Any] = create_safe):
        """
        Initialize owner.

        Args:
            multisig: Safe descriptor
            config: Anything with chain_id (and optionally provider_url)
            private_key: Owner key, used when no signer is given
            signer: Explicit signer (hardware wallet, remote signer, ...)
            provider: Node URL for wallets derived from private_key
                      (defaults to config.provider_url)
            adapter_factory: Called as adapter_factory(signer=..., provider_url=...)
            safe_factory: Called as safe_factory(eth_adapter=..., safe_address=...)
        """
        self._multisig = multisig
        self._config = config
        self._private_key = private_key
        self._signer = signer
        self._provider = provider or getattr(config, "provider_url", None) or None
        self._adapter_factory = adapter_factory
        self._safe_factory = safe_factory

    def get_private_key(self) -> Optional[str]:
        return self._private_key

    def get_signer(self) -> Optional[Signer]:
        return self._signer

    def _resolve_signer(self, provider: Optional[str] = None) -> Signer:
        """Explicit signer, else a wallet derived from the private key."""
        if self._signer is not None:
            return self._signer
        return WalletSigner(self._private_key, provider)

    async def get_address(self) -> str:
        """Signer's address if there is one, else the private key's."""
        if self._signer is not None:
            address = await signer_address(self._signer)
            if address:
                return address
        return Account.from_key(self._private_key).address

    async def get_safe_sdk(self) -> Any:
        """
        Create a Safe SDK session for the multisig.

        Returns:
            Whatever safe_factory produces (a SafeSession by default)
        """
        safe_address = self._multisig.safe_address
        signer = self._resolve_signer(self._provider)
        eth_adapter = self._adapter_factory(signer=signer, provider_url=self._provider)

        loop = asyncio.get_running_loop()
        safe = await loop.run_in_executor(
            None,
            lambda: self._safe_factory(eth_adapter=eth_adapter, safe_address=safe_address)
        )
        if inspect.isawaitable(safe):
            safe = await safe
        log.debug(f"Safe SDK ready for {safe_address}")
        return safe

    async def sign(self, msg: bytes) -> str:
        """
        Sign msg as a Safe owner.

        Args:
            msg: Raw message bytes

        Returns:
            0x hex signature with the recovery byte shifted for eth_sign
        """
        safe_hash = safe_message_hash(msg, self._multisig.safe_address, self._config.chain_id)
        signer = self._resolve_signer()
        signature = await signer.sign_message(bytes(safe_hash))
        return adjust_safe_signature(signature)

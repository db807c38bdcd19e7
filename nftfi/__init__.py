"""
NFTfi Python SDK

Client for the NFTfi peer-to-peer NFT-collateralised lending platform.

Architecture:
  - Offers are listed, created and deleted via the NFTfi REST API
  - Offers are authorised by lender signatures (EOA key or Gnosis Safe owner)
  - Revocation happens on-chain via the loans collaborator (by nonce)

Usage:
    from nftfi import Api, Config, EoaAccount, Offers

    config = Config.from_env()
    async with Api(config) as api:
        offers = Offers(account=EoaAccount(private_key), api=api,
                        offers_helper=helper, loans=loans)
        mine = await offers.get()
"""

from .config import Config
from .api import Api, ApiError
from .nftfi_types import ContractName, Offer
from .offers import Offers
from .drops import DropsOg
from .signers import EoaAccount, WalletSigner
from .gnosis import (
    EthAdapter,
    Multisig,
    MultisigGnosisOwner,
    SafeSession,
    adjust_safe_signature,
    create_safe,
    safe_message_hash,
    signer_address,
)

__version__ = "0.1.0"
__all__ = [
    # Config / transport
    "Config", "Api", "ApiError",
    # Types
    "ContractName", "Offer",
    # Core
    "Offers", "DropsOg",
    # Signing
    "EoaAccount", "WalletSigner",
    "Multisig", "MultisigGnosisOwner", "EthAdapter", "SafeSession",
    "adjust_safe_signature", "create_safe", "safe_message_hash", "signer_address",
]

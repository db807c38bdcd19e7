"""
NFTfi SDK - Configuration

Settings shared by the API client and the signers.
"""

import os
from dataclasses import dataclass

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_API_URL = "https://sdk-api.nftfi.com"
DEFAULT_CHAIN_ID = 1            # Ethereum mainnet
DEFAULT_TIMEOUT = 30            # HTTP timeout (seconds)


@dataclass(frozen=True)
class Config:
    """
    SDK configuration.

    Fields:
      - api_url: Base URL of the NFTfi REST API
      - api_key: API key sent as X-API-Key (optional)
      - chain_id: EVM chain id used for EIP-712 domains
      - provider_url: JSON-RPC node URL for wallets bound to a provider
      - timeout: HTTP timeout in seconds
    """
    api_url: str = DEFAULT_API_URL
    api_key: str = ""
    chain_id: int = DEFAULT_CHAIN_ID
    provider_url: str = ""
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "Config":
        """Build config from NFTFI_* environment variables."""
        return cls(
            api_url=os.environ.get("NFTFI_API_URL", DEFAULT_API_URL),
            api_key=os.environ.get("NFTFI_API_KEY", ""),
            chain_id=int(os.environ.get("NFTFI_CHAIN_ID", DEFAULT_CHAIN_ID)),
            provider_url=os.environ.get("NFTFI_PROVIDER_URL", ""),
            timeout=float(os.environ.get("NFTFI_TIMEOUT", DEFAULT_TIMEOUT)),
        )

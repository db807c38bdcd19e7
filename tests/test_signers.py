"""
Tests for private-key wallets.
"""

import asyncio

from eth_account import Account
from eth_account.messages import encode_defunct

from nftfi.signers import EoaAccount, WalletSigner

from conftest import ADDRESS, PRIVATE_KEY


def run(coro):
    return asyncio.run(coro)


class TestWalletSigner:
    """Tests for WalletSigner."""

    def test_address_from_key(self):
        signer = WalletSigner(PRIVATE_KEY)
        assert signer.address == ADDRESS
        assert run(signer.get_address()) == ADDRESS
        assert signer.provider is None

    def test_key_without_prefix(self):
        assert WalletSigner(PRIVATE_KEY[2:]).address == ADDRESS

    def test_sign_message_recovers(self):
        """Should produce a 65-byte personal signature of the key."""
        signature = run(WalletSigner(PRIVATE_KEY).sign_message(b"hello"))

        assert signature.startswith("0x")
        assert len(signature) == 2 + 130
        assert signature[-2:] in ("1b", "1c")
        recovered = Account.recover_message(encode_defunct(primitive=b"hello"),
                                            signature=signature)
        assert recovered == ADDRESS


class TestEoaAccount:
    """Tests for EoaAccount."""

    def test_get_address_is_sync(self):
        assert EoaAccount(PRIVATE_KEY).get_address() == ADDRESS

    def test_sign_matches_signer(self):
        account = EoaAccount(PRIVATE_KEY, provider="http://localhost:8545")

        assert account.get_signer().provider == "http://localhost:8545"
        assert run(account.sign(b"offer")) == run(account.get_signer().sign_message(b"offer"))

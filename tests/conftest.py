"""
Shared fakes for the collaborators injected into Offers and MultisigGnosisOwner.
"""

import pytest

# Well-known development key (hardhat/anvil account #0)
PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

SAFE_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


class FakeApi:
    def __init__(self, get_response=None, post_response=None, delete_response=None):
        self.calls = []
        self.get_response = get_response if get_response is not None else {"results": []}
        self.post_response = post_response
        self.delete_response = delete_response

    async def get(self, uri, params=None):
        self.calls.append(("get", uri, params))
        return self.get_response

    async def post(self, uri, payload=None):
        self.calls.append(("post", uri, payload))
        return self.post_response

    async def delete(self, uri):
        self.calls.append(("delete", uri))
        return self.delete_response


class FakeAccount:
    def __init__(self, address):
        self.address = address

    def get_address(self):
        return self.address


class FakeAsyncAccount(FakeAccount):
    async def get_address(self):
        return self.address


class FakeHelper:
    def __init__(self, payload):
        self.payload = payload
        self.calls = []

    async def construct_v2_offer(self, options):
        self.calls.append(options)
        return self.payload


class FakeLoans:
    def __init__(self, result):
        self.result = result
        self.calls = []

    async def revoke_offer(self, options):
        self.calls.append(options)
        return self.result


class FakeSigner:
    def __init__(self, address, signature="0x" + "ab" * 64 + "1b"):
        self.address = address
        self.signature = signature
        self.signed = []

    async def get_address(self):
        return self.address

    async def sign_message(self, data):
        self.signed.append(data)
        return self.signature


@pytest.fixture
def api():
    return FakeApi()

"""
NFTfi SDK - Offers

Listing, creating, deleting and revoking loan offers.
"""

import inspect
import logging
from typing import Any, Dict, List, Optional

from .nftfi_types import ContractName
from .protocols import AccountLike, ApiClient, Loans, OffersHelper

log = logging.getLogger(__name__)


class Offers:
    """
    Offers wrapper over the NFTfi API.

    Payload construction is delegated to the offers helper and on-chain
    revocation to the loans collaborator.

    Usage:
        offers = Offers(account=account, api=api,
                        offers_helper=helper, loans=loans)

        # All offers made by your account
        mine = await offers.get()

        # All offers for one NFT
        nft_offers = await offers.get({
            "filters": {"nft": {"address": "0x00000000", "id": "42"}}
        })

        # Create an offer
        created = await offers.create({
            "terms": {
                "principal": 1000000000000000000,
                "repayment": 1100000000000000000,
                "duration": 86400 * 7,
                "currency": "0x00000000"
            },
            "nft": {"address": "0x00000000", "id": "42"},
            "borrower": {"address": "0x00000000"},
            "nftfi": {"contract": {"name": "v2-1.loan.fixed"}}
        })

        # Delete / revoke
        await offers.delete({"offer": {"id": mine[0]["id"]}})
        await offers.revoke({
            "offer": {"nonce": mine[0]["lender"]["nonce"]},
            "nftfi": {"contract": {"name": mine[0]["nftfi"]["contract"]["name"]}}
        })
    """

    def __init__(self, account: Optional[AccountLike] = None,
                 api: Optional[ApiClient] = None,
                 offers_helper: Optional[OffersHelper] = None,
                 loans: Optional[Loans] = None):
        self._account = account
        self._api = api
        self._helper = offers_helper
        self._loans = loans

    async def _account_address(self) -> str:
        address = self._account.get_address()
        if inspect.isawaitable(address):
            address = await address
        return address

    async def get(self, options: Optional[Dict[str, Any]] = None) -> List[dict]:
        """
        Get offers.

        With no filters, returns the offers made by your account.

        Args:
            options: {"filters": {"nft": {"address": ..., "id": ...}}},
                     both nft fields optional

        Returns:
            List of offer records, as returned by the API
        """
        options = options or {}
        nft = (options.get("filters") or {}).get("nft")
        params = {}
        if nft is not None:
            if nft.get("address") and nft.get("id"):
                params = {
                    "nftAddress": nft["address"],
                    "nftId": nft["id"]
                }
            elif nft.get("address"):
                params = {"nftAddress": nft["address"]}
        else:
            params = {"lenderAddress": await self._account_address()}

        response = await self._api.get(uri="offers", params=params)
        return response["results"]

    async def create(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new offer on an NFT.

        Fields nested under options["listing"] are copied onto the root
        for backwards compatibility; root fields win.

        Args:
            options: terms, nft, borrower and nftfi.contract.name;
                     simulation.dryRun to build without posting

        Returns:
            API response, the constructed payload (dry run), or
            {"errors": {"nftfi.contract.name": [...]}} for an
            unsupported contract
        """
        options = {**(options.get("listing") or {}), **options}
        dry_run = bool((options.get("simulation") or {}).get("dryRun", False))
        contract_name = options["nftfi"]["contract"]["name"]

        if contract_name == ContractName.V2_1_LOAN_FIXED.value:
            payload = await self._helper.construct_v2_offer(options)
            if dry_run:
                log.debug(f"Dry run, offer not posted ({contract_name})")
                return payload
            response = await self._api.post(uri="offers", payload=payload)
            log.info(f"Offer created ({contract_name})")
            return response

        log.warning(f"Offer contract not supported: {contract_name}")
        return {"errors": {"nftfi.contract.name": [f"{contract_name} not supported"]}}

    async def delete(self, options: Dict[str, Any]) -> Any:
        """
        Delete an active offer made by your account.

        Args:
            options: {"offer": {"id": ...}}

        Returns:
            API response
        """
        offer_id = options["offer"]["id"]
        result = await self._api.delete(uri=f"offers/{offer_id}")
        log.info(f"Offer deleted: {offer_id}")
        return result

    async def revoke(self, options: Dict[str, Any]) -> Any:
        """
        Revoke an active offer on-chain, by lender nonce.

        Args:
            options: {"offer": {"nonce": ...},
                      "nftfi": {"contract": {"name": ...}}}

        Returns:
            Result of loans.revoke_offer
        """
        result = await self._loans.revoke_offer(options)
        log.info("Offer revoked")
        return result

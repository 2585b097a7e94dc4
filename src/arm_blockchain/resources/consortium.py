from __future__ import annotations

from typing import List

from arm_blockchain.resources.models import BlockchainMember, envelope_items, parse_items


class ConsortiumResource:
    """Typed access to the blockchain members (and so consortia) of the resource group."""

    def __init__(self, client):
        self.client = client

    def list_consortia(self) -> List[BlockchainMember]:
        payload = self.client.get_consortia()
        return parse_items(BlockchainMember, envelope_items(payload))

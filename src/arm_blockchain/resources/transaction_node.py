from __future__ import annotations

from typing import List

from arm_blockchain.resources.models import AccessKey, TransactionNode, envelope_items, parse_items


class TransactionNodeResource:
    def __init__(self, client):
        self.client = client

    def list_transaction_nodes(self, member_name: str) -> List[TransactionNode]:
        payload = self.client.get_transaction_nodes(member_name)
        return parse_items(TransactionNode, envelope_items(payload))

    def list_access_keys(self, member_name: str, node_name: str) -> List[AccessKey]:
        payload = self.client.get_transaction_node_access_keys(member_name, node_name)
        return parse_items(AccessKey, envelope_items(payload, key="keys"))

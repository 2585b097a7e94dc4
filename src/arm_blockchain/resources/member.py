from __future__ import annotations

from typing import List

from arm_blockchain.resources.models import ConsortiumMember, envelope_items, parse_items


class MemberResource:
    """Typed access to the members of a consortium."""

    def __init__(self, client):
        self.client = client

    def list_members(self, member_name: str) -> List[ConsortiumMember]:
        payload = self.client.get_members(member_name)
        return parse_items(ConsortiumMember, envelope_items(payload))

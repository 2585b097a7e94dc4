from __future__ import annotations

from typing import List

from arm_blockchain.resources.models import Sku, envelope_items, parse_item


class SkuResource:
    def __init__(self, client):
        self.client = client

    def list_skus(self) -> List[Sku]:
        """List SKUs; nested `skus` arrays per resource type are flattened."""
        skus: List[Sku] = []
        for item in envelope_items(self.client.get_skus()):
            nested = item.get("skus") if isinstance(item, dict) else None
            if isinstance(nested, list):
                for sku in nested:
                    if isinstance(sku, dict):
                        sku = {"resourceType": item.get("resourceType"), **sku}
                    skus.append(parse_item(Sku, sku))
            else:
                skus.append(parse_item(Sku, item))
        return skus

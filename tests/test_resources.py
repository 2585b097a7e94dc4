"""
Tests for the typed resource helpers exposed on the client.
"""

import unittest
from unittest.mock import Mock

from pydantic import ValidationError

from arm_blockchain.core.callbacks import call_with_callback
from arm_blockchain.core.errors import DeserializationError
from arm_blockchain.resources.consortium import ConsortiumResource
from arm_blockchain.resources.member import MemberResource
from arm_blockchain.resources.sku import SkuResource
from arm_blockchain.resources.transaction_node import TransactionNodeResource


class TestResources(unittest.TestCase):

    def setUp(self):
        self.client = Mock()

    def test_list_members(self):
        """Test parsing consortium members."""
        self.client.get_members.return_value = {
            "value": [
                {"name": "m1", "displayName": "Member One", "role": "ADMIN", "status": "Ready", "extra": 1},
                {"name": "m2"},
            ]
        }
        members = MemberResource(self.client).list_members("m1")

        self.client.get_members.assert_called_once_with("m1")
        self.assertEqual([m.name for m in members], ["m1", "m2"])
        self.assertEqual(members[0].display_name, "Member One")
        self.assertEqual(members[0].role, "ADMIN")
        self.assertIsNone(members[1].role)

    def test_list_consortia(self):
        """Test parsing blockchain members into consortia."""
        self.client.get_consortia.return_value = {
            "value": [
                {
                    "id": "/subscriptions/sub-1/.../blockchainMembers/m1",
                    "name": "m1",
                    "location": "eastus",
                    "properties": {"consortium": "c1", "provisioningState": "Succeeded"},
                    "sku": {"name": "S0", "tier": "Standard"},
                }
            ]
        }
        consortia = ConsortiumResource(self.client).list_consortia()

        self.assertEqual(len(consortia), 1)
        self.assertEqual(consortia[0].consortium, "c1")
        self.assertEqual(consortia[0].properties.provisioning_state, "Succeeded")
        self.assertEqual(consortia[0].sku.tier, "Standard")

    def test_transaction_nodes_and_keys(self):
        """Test parsing transaction nodes and access keys."""
        self.client.get_transaction_nodes.return_value = {
            "value": [{"name": "node1", "properties": {"dns": "node1.blockchain.azure.com"}}]
        }
        self.client.get_transaction_node_access_keys.return_value = {
            "keys": [{"keyName": "key1", "value": "secret1"}, {"keyName": "key2", "value": "secret2"}]
        }
        resource = TransactionNodeResource(self.client)

        nodes = resource.list_transaction_nodes("m1")
        keys = resource.list_access_keys("m1", "node1")

        self.assertEqual(nodes[0].properties.dns, "node1.blockchain.azure.com")
        self.client.get_transaction_node_access_keys.assert_called_once_with("m1", "node1")
        self.assertEqual([(k.key_name, k.value) for k in keys], [("key1", "secret1"), ("key2", "secret2")])

    def test_list_skus_flattens_resource_types(self):
        """Test that nested SKU arrays are flattened."""
        self.client.get_skus.return_value = {
            "value": [
                {"resourceType": "blockchainMembers", "skus": [{"name": "B0", "tier": "Basic"}, {"name": "S0"}]},
                {"name": "X1", "locations": ["eastus"]},
            ]
        }
        skus = SkuResource(self.client).list_skus()

        self.assertEqual([s.name for s in skus], ["B0", "S0", "X1"])
        self.assertEqual(skus[0].resource_type, "blockchainMembers")
        self.assertEqual(skus[2].locations, ["eastus"])

    def test_missing_envelope_yields_empty_list(self):
        """Test that payloads without an envelope give empty lists."""
        self.client.get_members.return_value = {"unexpected": True}
        self.client.get_skus.return_value = []

        self.assertEqual(MemberResource(self.client).list_members("m1"), [])
        self.assertEqual(SkuResource(self.client).list_skus(), [])


    def test_off_schema_items_raise_deserialization_error(self):
        """Test that items missing required keys or not being objects raise DeserializationError."""
        self.client.get_members.return_value = {"value": [{"role": "ADMIN"}]}
        self.client.get_transaction_node_access_keys.return_value = {"keys": ["key1"]}
        self.client.get_skus.return_value = {"value": [{"resourceType": "blockchainMembers", "skus": [42]}]}

        with self.assertRaises(DeserializationError) as ctx:
            MemberResource(self.client).list_members("m1")
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)

        with self.assertRaises(DeserializationError):
            TransactionNodeResource(self.client).list_access_keys("m1", "node1")
        with self.assertRaises(DeserializationError):
            SkuResource(self.client).list_skus()

    def test_off_schema_items_reach_callback(self):
        """Test that parse failures are delivered to an error-first callback."""
        self.client.get_consortia.return_value = {"value": ["not-a-member"]}
        callback = Mock()

        call_with_callback(ConsortiumResource(self.client).list_consortia, callback=callback)

        callback.assert_called_once()
        self.assertIsInstance(callback.call_args.args[0], DeserializationError)

if __name__ == "__main__":
    unittest.main()

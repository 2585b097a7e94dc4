from arm_blockchain.resources.consortium import ConsortiumResource
from arm_blockchain.resources.member import MemberResource
from arm_blockchain.resources.sku import SkuResource
from arm_blockchain.resources.transaction_node import TransactionNodeResource

__all__ = [
    "ConsortiumResource",
    "MemberResource",
    "SkuResource",
    "TransactionNodeResource",
]

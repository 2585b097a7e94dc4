"""
Pydantic models for the resources returned by the Microsoft.Blockchain provider.
Unknown keys are ignored so provider-side additions do not break parsing.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Type, TypeVar
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from arm_blockchain.core.errors import DeserializationError


class ArmModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ResourceSku(ArmModel):
    name: str = Field(..., description="SKU name, e.g. S0")
    tier: Optional[str] = Field(None, description="SKU tier, e.g. Standard")


class MemberProperties(ArmModel):
    protocol: Optional[str] = None
    consortium: Optional[str] = Field(None, description="Name of the consortium the member belongs to")
    consortium_role: Optional[str] = Field(None, alias="consortiumRole")
    dns: Optional[str] = None
    user_name: Optional[str] = Field(None, alias="userName")
    provisioning_state: Optional[str] = Field(None, alias="provisioningState")


class BlockchainMember(ArmModel):
    """A blockchain member resource; listing them yields the consortia the user joined."""
    id: str = ""
    name: str
    location: Optional[str] = None
    properties: MemberProperties = Field(default_factory=MemberProperties)
    sku: Optional[ResourceSku] = None
    tags: Dict[str, Any] = Field(default_factory=dict)

    @property
    def consortium(self) -> Optional[str]:
        return self.properties.consortium


class ConsortiumMember(ArmModel):
    name: str
    display_name: Optional[str] = Field(None, alias="displayName")
    subscription_id: Optional[str] = Field(None, alias="subscriptionId")
    role: Optional[str] = None
    status: Optional[str] = None
    join_date: Optional[str] = Field(None, alias="joinDate")


class TransactionNodeProperties(ArmModel):
    dns: Optional[str] = None
    public_key: Optional[str] = Field(None, alias="publicKey")
    user_name: Optional[str] = Field(None, alias="userName")
    provisioning_state: Optional[str] = Field(None, alias="provisioningState")


class TransactionNode(ArmModel):
    id: str = ""
    name: str
    location: Optional[str] = None
    properties: TransactionNodeProperties = Field(default_factory=TransactionNodeProperties)


class AccessKey(ArmModel):
    key_name: str = Field(..., alias="keyName")
    value: str


class Sku(ArmModel):
    name: str
    tier: Optional[str] = None
    resource_type: Optional[str] = Field(None, alias="resourceType")
    locations: List[str] = Field(default_factory=list)


def envelope_items(payload: Any, key: str = "value") -> List[Dict[str, Any]]:
    """Return the list stored under `key`, or an empty list when the envelope is missing."""
    if not isinstance(payload, dict):
        return []
    items = payload.get(key)
    return items if isinstance(items, list) else []


M = TypeVar("M", bound=ArmModel)


def parse_item(model: Type[M], item: Any) -> M:
    """Validate one envelope item, raising DeserializationError for off-schema data."""
    try:
        return model.model_validate(item)
    except (ValidationError, TypeError) as e:
        raise DeserializationError(f"Unexpected {model.__name__} payload: {e}") from e


def parse_items(model: Type[M], items: List[Any]) -> List[M]:
    return [parse_item(model, item) for item in items]

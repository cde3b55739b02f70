"""Host groups (``hostgroup.*``)."""

from enum import IntEnum
from typing import List

from pydantic import Field

from ..envelope import DecodeStrategy
from .base import EntityClient, WireId, WireInt, ZabbixObject


class InternalType(IntEnum):
    NOT_INTERNAL = 0
    INTERNAL = 1


class HostGroup(ZabbixObject):
    """Host group object."""

    group_id: WireId = Field("", alias="groupid")
    name: str = ""
    internal: WireInt = 0

    omit_empty = frozenset({"group_id"})
    read_only = frozenset({"internal"})


class HostGroupId(ZabbixObject):
    """Reference to a host group, as embedded in hosts and templates."""

    group_id: WireId = Field(..., alias="groupid")


class HostGroupClient(EntityClient[HostGroup]):
    """Host groups.

    Decoded DIRECT: the records are flat, no nested arrays.
    """

    object_name = "hostgroup"
    model = HostGroup
    ids_key = "groupids"
    id_field = "group_id"
    decode_strategy = DecodeStrategy.DIRECT

    def get_by_name(self, name: str) -> HostGroup:
        """Get the host group named ``name``; exactly one must match."""
        return self.get_one({"filter": {"name": name}})

    def get_by_host_id(self, host_id: str) -> List[HostGroup]:
        """Host groups the host ``host_id`` belongs to."""
        return self.get({"hostids": host_id})

"""Hosts (``host.*``)."""

from enum import IntEnum
from typing import Any, List

from pydantic import Field

from ..dialect import LegacyRules
from ..envelope import DecodeStrategy
from .base import EntityClient, WireId, WireInt, ZabbixObject
from .host_group import HostGroup, HostGroupId
from .host_interface import HostInterface


class AvailableType(IntEnum):
    AVAILABLE = 1
    UNAVAILABLE = 2


class StatusType(IntEnum):
    MONITORED = 0
    UNMONITORED = 1


class Host(ZabbixObject):
    """Host object."""

    host_id: WireId = Field("", alias="hostid")
    host: str = ""
    available: WireInt = 0
    error: str = ""
    name: str = ""
    status: WireInt = StatusType.MONITORED
    proxy_id: WireId = Field("", alias="proxy_hostid")

    # Sent on create; filled on get by selectGroups/selectInterfaces.
    groups: List[HostGroupId] = Field(default_factory=list)
    interfaces: List[HostInterface] = Field(default_factory=list)

    # API 1.8 keeps the connection details on the host itself.
    dns: str = ""
    ip: str = ""
    use_ip: WireInt = Field(0, alias="useip")
    port: str = ""

    omit_empty = frozenset({"host_id", "proxy_id", "interfaces", "dns", "ip", "use_ip", "port"})
    read_only = frozenset({"available", "error"})


class HostId(ZabbixObject):
    """Reference to a host, as embedded in templates and applications."""

    host_id: WireId = Field(..., alias="hostid")


class HostClient(EntityClient[Host]):
    """Hosts.

    Decoded RAW_THEN_TYPED: ``groups`` and ``interfaces`` are optional nested
    arrays that must survive decoding.
    """

    object_name = "host"
    model = Host
    ids_key = "hostids"
    id_field = "host_id"
    decode_strategy = DecodeStrategy.RAW_THEN_TYPED
    defaults = {
        "output": "extend",
        "selectGroups": "extend",
        "selectInterfaces": "extend",
    }
    legacy_rules = LegacyRules(
        renames={"selectGroups": "select_groups"},
        drops=("selectInterfaces",),
    )

    def get_by_host_group_ids(self, ids: List[str]) -> List[Host]:
        return self.get({"groupids": ids})

    def get_by_host_groups(self, host_groups: List[HostGroup]) -> List[Host]:
        return self.get_by_host_group_ids([group.group_id for group in host_groups])

    def get_by_template_ids(self, ids: List[str]) -> List[Host]:
        """Hosts linked to any of the templates ``ids``."""
        return self.get({"templateids": ids})

    def get_by_host(self, host: str) -> Host:
        """Get the host with technical name ``host``; exactly one must match."""
        return self.get_one({"filter": {"host": host}})

    def delete_payload(self, ids: List[str]) -> Any:
        # host.delete takes bare ids from 2.4 on, {"hostid": ...} objects before.
        if self.api.is_version_at_least(2, 4, 0):
            return list(ids)
        return [{"hostid": host_id} for host_id in ids]

"""Host interfaces (``hostinterface.*``). Introduced with API 2.0."""

from enum import IntEnum
from typing import Dict, List, Mapping, Optional

from pydantic import Field

from ..envelope import DecodeStrategy
from ..errors import UnsupportedVersionError
from ..params import Params, ParamValue
from .base import EntityClient, WireId, WireInt, ZabbixObject


class InterfaceType(IntEnum):
    AGENT = 1
    SNMP = 2
    IPMI = 3
    JMX = 4


class HostInterface(ZabbixObject):
    """Host interface object."""

    interface_id: WireId = Field("", alias="interfaceid")
    host_id: WireId = Field("", alias="hostid")
    dns: str = ""
    ip: str = ""
    main: WireInt = 0
    port: str = ""
    type: WireInt = InterfaceType.AGENT
    use_ip: WireInt = Field(0, alias="useip")
    use_bulk_snmp: WireInt = Field(0, alias="bulk")

    omit_empty = frozenset({"interface_id", "host_id", "use_bulk_snmp"})


class HostInterfaceClient(EntityClient[HostInterface]):
    """Host interfaces.

    Decoded RAW_THEN_TYPED, the same path as hosts, which inline these
    records through ``selectInterfaces``.
    """

    object_name = "hostinterface"
    model = HostInterface
    ids_key = "interfaceids"
    id_field = "interface_id"
    decode_strategy = DecodeStrategy.RAW_THEN_TYPED

    def _require_support(self) -> None:
        if not self.dialect.has_host_interfaces:
            # there was no such object in Zabbix 1.8
            raise UnsupportedVersionError(
                f"Host interfaces need API 2.0 or later, server is {self.api.version}"
            )

    def get(self, params: Optional[Mapping[str, ParamValue]] = None) -> List[HostInterface]:
        self._require_support()
        return super().get(params)

    def create(self, records: List[HostInterface]) -> None:
        self._require_support()
        super().create(records)

    def update(self, records: List[HostInterface]) -> None:
        self._require_support()
        super().update(records)

    def delete_by_ids(self, ids: List[str]) -> None:
        self._require_support()
        super().delete_by_ids(ids)

    def get_by_host_id(
        self,
        host_id: str,
        params: Optional[Mapping[str, ParamValue]] = None,
        filter: Optional[Dict[str, str]] = None,
    ) -> List[HostInterface]:
        """Interfaces of host ``host_id``, with optional extra params and filter."""
        query = Params.of(params)
        query["hostids"] = [host_id]
        if filter is not None:
            query["filter"] = filter
        return self.get(query)

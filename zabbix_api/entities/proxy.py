"""Proxies (``proxy.get``)."""

from pydantic import Field

from ..envelope import DecodeStrategy
from .base import EntityReader, WireId, ZabbixObject


class Proxy(ZabbixObject):
    proxy_id: WireId = Field("", alias="proxyid")
    host: str = ""
    error: str = ""


class ProxyClient(EntityReader[Proxy]):
    """Read-only access to proxies. Flat records, decoded DIRECT."""

    object_name = "proxy"
    model = Proxy
    ids_key = "proxyids"
    decode_strategy = DecodeStrategy.DIRECT

    def get_by_host(self, host: str) -> Proxy:
        return self.get_one({"filter": {"host": host}})

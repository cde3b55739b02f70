"""Applications (``application.*``)."""

from pydantic import Field

from ..envelope import DecodeStrategy
from .base import EntityClient, WireId, ZabbixObject


class Application(ZabbixObject):
    """Application object."""

    application_id: WireId = Field("", alias="applicationid")
    host_id: WireId = Field("", alias="hostid")
    name: str = ""
    template_id: WireId = Field("", alias="templateid")

    omit_empty = frozenset({"application_id", "template_id"})


class ApplicationClient(EntityClient[Application]):
    """Applications. Flat records, decoded DIRECT."""

    object_name = "application"
    model = Application
    ids_key = "applicationids"
    id_field = "application_id"
    decode_strategy = DecodeStrategy.DIRECT

    def get_by_host_id_and_name(self, host_id: str, name: str) -> Application:
        """Get application ``name`` of host ``host_id``; exactly one must match."""
        return self.get_one({"hostids": host_id, "filter": {"name": name}})

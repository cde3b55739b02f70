"""Templates (``template.*``)."""

from typing import List

from pydantic import Field

from ..envelope import DecodeStrategy
from .base import EntityClient, WireId, ZabbixObject
from .host import HostId
from .host_group import HostGroupId


class TemplateId(ZabbixObject):
    """Reference to a linked template."""

    template_id: WireId = Field(..., alias="templateid")


class TemplateMacro(ZabbixObject):
    """User macro defined on a template."""

    macro: str
    value: str = ""


class Template(ZabbixObject):
    """Template object.

    ``groups``, ``templates``, ``macros`` and ``hosts`` are sent on create and
    only filled on get when the matching select flag is passed.
    """

    template_id: WireId = Field("", alias="templateid")
    host: str = ""
    name: str = ""

    groups: List[HostGroupId] = Field(default_factory=list)
    templates: List[TemplateId] = Field(default_factory=list)
    macros: List[TemplateMacro] = Field(default_factory=list)
    hosts: List[HostId] = Field(default_factory=list)

    omit_empty = frozenset({"template_id", "groups", "templates", "macros", "hosts"})


class TemplateClient(EntityClient[Template]):
    """Templates.

    Decoded RAW_THEN_TYPED: callers commonly ask for the nested group, host
    and template arrays.
    """

    object_name = "template"
    model = Template
    ids_key = "templateids"
    id_field = "template_id"
    decode_strategy = DecodeStrategy.RAW_THEN_TYPED

    def get_by_host(self, host: str) -> Template:
        """Get the template with technical name ``host``; exactly one must match."""
        return self.get_one({"filter": {"host": host}})

    def get_by_host_ids(self, ids: List[str]) -> List[Template]:
        """Templates linked to any of the hosts ``ids``."""
        return self.get({"hostids": ids})

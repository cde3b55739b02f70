"""User macros (``usermacro.*``)."""

from typing import List

from pydantic import Field

from ..envelope import DecodeStrategy
from .base import EntityClient, WireId, ZabbixObject


class UserMacro(ZabbixObject):
    """Host or global user macro."""

    id: WireId = ""
    global_macro_id: WireId = Field("", alias="globalmacroid")
    host_macro_id: WireId = Field("", alias="hostmacroid")
    host_id: WireId = Field("", alias="hostid")
    macro: str = ""
    value: str = ""

    omit_empty = frozenset({"id", "global_macro_id", "host_macro_id", "host_id"})


class UserMacroClient(EntityClient[UserMacro]):
    """Host macros through create/update/delete, global macros through the
    ``*_global`` methods.

    Decoded RAW_THEN_TYPED, like hosts, which can inline macros.
    """

    object_name = "usermacro"
    model = UserMacro
    ids_key = "hostmacroids"
    id_field = "host_macro_id"
    decode_strategy = DecodeStrategy.RAW_THEN_TYPED

    def get_by_host_id(self, host_id: str) -> List[UserMacro]:
        return self.get({"hostids": host_id})

    def get_global_by_macro(self, macro: str) -> UserMacro:
        """Get global macro ``macro``; exactly one must match."""
        return self.get_one({"globalmacro": "1", "filter": {"macro": macro}})

    def create_global(self, macros: List[UserMacro]) -> None:
        """Wrapper for ``usermacro.createglobal``. Sets ``global_macro_id``."""
        payload = [self.to_wire(macro) for macro in macros]
        ids = self._confirm(self.method("createglobal"), payload, len(macros), ids_key="globalmacroids")
        for macro, new_id in zip(macros, ids):
            macro.global_macro_id = new_id

    def delete_global(self, macros: List[UserMacro]) -> None:
        """Wrapper for ``usermacro.deleteglobal``. Clears ``global_macro_id`` on success."""
        ids = [macro.global_macro_id for macro in macros]
        self._confirm(self.method("deleteglobal"), ids, len(ids), ids_key="globalmacroids")
        for macro in macros:
            macro.global_macro_id = ""

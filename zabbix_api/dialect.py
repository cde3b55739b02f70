"""Protocol dialects of the two API generations.

The session picks one dialect whenever the server version is discovered and
every entity client routes its version-specific rewrites through it.
"""

from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Tuple, TypeVar

from .params import Params
from .version import Version

T = TypeVar("T")

# First API generation with camelCase select flags and host interfaces.
CURRENT_API = Version(2, 0, 0)


class LegacyRules(NamedTuple):
    """How a get call's params change for the pre-2.0 API.

    ``extras`` are only added when at least one rename actually happened;
    the old server needs them to honour the renamed ``select_*`` options.
    """

    renames: Mapping[str, str] = {}
    drops: Tuple[str, ...] = ()
    extras: Mapping[str, Any] = {}

    def apply(self, params: Params) -> Params:
        for key in self.drops:
            params.drop(key)
        renamed = False
        for old, new in self.renames.items():
            renamed = params.rename(old, new) or renamed
        if renamed:
            for key, value in self.extras.items():
                params.setdefault(key, value)
        return params


class Dialect:
    """Parameter/response shape of one API generation."""

    name = ""
    has_host_interfaces = True

    def adapt_params(self, params: Params, rules: LegacyRules) -> Params:
        raise NotImplementedError

    def adapt_records(self, records: List[T], normalize: Callable[[T], None]) -> List[T]:
        raise NotImplementedError

    def adapt_write(self, data: Dict[str, Any], rewrite: Callable[[Dict[str, Any]], None]) -> Dict[str, Any]:
        """Reshape a create/update payload for this API generation."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class CurrentDialect(Dialect):
    """API 2.0 and later. Everything passes through unchanged."""

    name = "current"

    def adapt_params(self, params: Params, rules: LegacyRules) -> Params:
        return params

    def adapt_records(self, records: List[T], normalize: Callable[[T], None]) -> List[T]:
        return records

    def adapt_write(self, data: Dict[str, Any], rewrite: Callable[[Dict[str, Any]], None]) -> Dict[str, Any]:
        return data


class LegacyDialect(Dialect):
    """API 1.8 and undiscovered versions."""

    name = "legacy"
    has_host_interfaces = False

    def adapt_params(self, params: Params, rules: LegacyRules) -> Params:
        return rules.apply(params)

    def adapt_records(self, records: List[T], normalize: Callable[[T], None]) -> List[T]:
        for record in records:
            normalize(record)
        return records

    def adapt_write(self, data: Dict[str, Any], rewrite: Callable[[Dict[str, Any]], None]) -> Dict[str, Any]:
        rewrite(data)
        return data


LEGACY = LegacyDialect()
CURRENT = CurrentDialect()


def dialect_for(version: Version) -> Dialect:
    if version.at_least(*CURRENT_API):
        return CURRENT
    return LEGACY


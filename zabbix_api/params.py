"""Query/option bag passed to the ``*.get`` methods."""

from typing import Any, Dict, List, Mapping, Optional, Union

# Values the API accepts in a params bag: scalars, id lists and nested filters.
ParamValue = Union[str, int, float, bool, List[str], Dict[str, Any], None]


class Params(Dict[str, ParamValue]):
    """Free-form key/value options for a single API call.

    Keys that no default or dialect rule knows about pass through untouched.
    """

    @classmethod
    def of(cls, params: Optional[Mapping[str, ParamValue]] = None) -> "Params":
        """Copy ``params`` so the caller's mapping is never modified."""
        return cls(params or {})

    def with_defaults(self, defaults: Mapping[str, ParamValue]) -> "Params":
        """Return a copy with every missing default filled in."""
        merged = Params(self)
        for key, value in defaults.items():
            if key not in merged:
                merged[key] = value
        return merged

    def rename(self, old: str, new: str) -> bool:
        """Move ``old`` to ``new`` in place. Returns True if ``old`` was present."""
        if old not in self:
            return False
        self[new] = self.pop(old)
        return True

    def drop(self, key: str) -> bool:
        """Remove ``key`` in place. Returns True if it was present."""
        if key not in self:
            return False
        del self[key]
        return True

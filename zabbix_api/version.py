"""Remote API version parsing and comparison."""

from typing import NamedTuple

from .errors import VersionDiscoveryError


class Version(NamedTuple):
    """Semantic version of the remote API. ``Version()`` means "not discovered"."""

    major: int = 0
    minor: int = 0
    release: int = 0

    @classmethod
    def parse(cls, text: str) -> "Version":
        parts = str(text).strip().split(".")
        if len(parts) != 3:
            raise VersionDiscoveryError(f"Unable to determine version from {text!r}")
        try:
            major, minor, release = (int(part) for part in parts)
        except ValueError as e:
            raise VersionDiscoveryError(f"Unable to determine version from {text!r}") from e
        return cls(major, minor, release)

    def at_least(self, major: int, minor: int, release: int) -> bool:
        if self.major != major:
            return self.major > major
        if self.minor != minor:
            return self.minor > minor
        return self.release >= release

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.release}"

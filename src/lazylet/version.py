import re
from typing import NamedTuple

__all__ = ["version", "version_info"]


version = "1.0.0"


_re_version = re.compile(r"(\d+)\.(\d+)\.(\d+)(?:(a|b|rc)(\d+))?$")


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    releaselevel: str
    serial: int

    @classmethod
    def from_str(cls, v: str) -> "VersionInfo":
        match = _re_version.match(v)
        if not match:
            raise ValueError(f"Invalid version: {v!r}.")
        major, minor, micro, level, serial = match.groups()
        releaselevel = {"a": "alpha", "b": "beta", "rc": "candidate"}.get(
            level, "final"
        )
        return cls(
            int(major), int(minor), int(micro), releaselevel, int(serial or 0)
        )

    def __str__(self) -> str:
        v = f"{self.major}.{self.minor}.{self.micro}"
        if self.releaselevel != "final":
            level = "rc" if self.releaselevel == "candidate" else self.releaselevel[:1]
            v = f"{v}{level}{self.serial}"
        return v


version_info = VersionInfo.from_str(version)

"""Outdated packages and check results consumed by the notification services.

Both types are immutable dataclasses: the check process creates them once and
every service only reads them while rendering its report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Union

from .settings import is_truthy

PACKAGIST_URL = "https://packagist.org/packages/{name}"


@dataclass(frozen=True)
class OutdatedPackage:
    name: str
    outdated_version: str
    new_version: str
    insecure: bool = False

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Package name must not be empty.")

    @property
    def provider_link(self) -> str:
        return PACKAGIST_URL.format(name=self.name) + f"#{self.new_version}"

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "OutdatedPackage":
        """Build a package from one entry of the update check JSON output.

        ``outdated`` is the key written by the check, ``current`` is accepted
        as an alias.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Package entry must be an object, got {data!r}.")
        return cls(
            name=str(data.get("name", "")),
            outdated_version=str(data.get("outdated", data.get("current", ""))),
            new_version=str(data.get("new", "")),
            insecure=is_truthy(data.get("insecure", False)),
        )


@dataclass(frozen=True)
class UpdateCheckResult:
    outdated_packages: Iterable[OutdatedPackage] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Lists and generators are frozen into a tuple
        object.__setattr__(self, "outdated_packages", tuple(self.outdated_packages))

    def is_empty(self) -> bool:
        return not self.outdated_packages

    def __len__(self) -> int:
        return len(self.outdated_packages)

    def __iter__(self) -> Iterator[OutdatedPackage]:
        return iter(self.outdated_packages)

    @classmethod
    def from_payload(
        cls, data: Union[Dict[str, Any], List[Dict[str, Any]], None]
    ) -> "UpdateCheckResult":
        """Build a result from the decoded JSON of an update check run.

        Accepts either the bare list of packages or the full JSON document
        where the packages are stored under ``result``.
        """
        if data is None:
            return cls()
        if isinstance(data, dict):
            data = data.get("result") or []
        if not isinstance(data, list):
            raise ValueError("Update check result must be a list of packages.")
        return cls(OutdatedPackage.from_payload(entry) for entry in data)


__all__ = ["OutdatedPackage", "UpdateCheckResult", "PACKAGIST_URL"]

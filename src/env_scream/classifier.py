"""
Classification of detected suspects against declared reference keys.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable

from pydantic import BaseModel, Field


class Autopsy(BaseModel):
    """Suspects split into undeclared and declared-but-still-screaming names."""

    missing: list[str] = Field(default_factory=list)
    misconfigured: list[str] = Field(default_factory=list)

    @property
    def suspects(self) -> list[str]:
        return [*self.missing, *self.misconfigured]

    @property
    def is_clean(self) -> bool:
        return not self.missing and not self.misconfigured


def classify(suspects: Iterable[str], reference_keys: Collection[str]) -> Autopsy:
    """Partition ``suspects`` by membership in ``reference_keys``, keeping order."""
    missing: list[str] = []
    misconfigured: list[str] = []
    for suspect in suspects:
        if suspect in reference_keys:
            misconfigured.append(suspect)
        else:
            missing.append(suspect)
    return Autopsy(missing=missing, misconfigured=misconfigured)

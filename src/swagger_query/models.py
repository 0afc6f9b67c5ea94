"""Internal models for rendered OpenAPI fragments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Parameter:
    name: str
    location: str
    required: bool = False

    def render(self) -> str:
        flag = " [required]" if self.required else ""
        return f"  - {self.name} (in: {self.location}){flag}"


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str
    summary: str

    def render(self) -> str:
        return f"{self.method} {self.path} - {self.summary}"

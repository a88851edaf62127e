"""Shared document builder types and text helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Protocol

from ..config.schema import ConfigModel
from ..layout.blocks import DocumentContent
from ..record import ApplicationRecord

__all__ = ["ContentBuilder", "DocumentSpec", "join_present"]


class ContentBuilder(Protocol):
    def __call__(
        self,
        record: ApplicationRecord,
        settings: ConfigModel,
        *,
        today: date | None = None,
    ) -> DocumentContent: ...


@dataclass(slots=True, frozen=True)
class DocumentSpec:
    """A document kind: its stable key and its content builder.

    ``key`` matches a field of ``bundle.filenames`` in the configuration.
    """

    key: str
    build_content: ContentBuilder


def join_present(parts: Iterable[str], sep: str) -> str:
    """Join the non-blank ``parts`` with ``sep`` after trimming them."""

    return sep.join(p.strip() for p in parts if p and p.strip())

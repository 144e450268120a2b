"""Compiling a whole document of territories."""

from __future__ import annotations

import dataclasses
from typing import Iterable, Mapping

import structlog

from mp_phonemeta.config import CompilerSettings
from mp_phonemeta.kernel.ddd import Invariant
from mp_phonemeta.kernel.errors import DomainError
from mp_phonemeta.metadata.assembler import MetadataAssembler
from mp_phonemeta.metadata.element import Element
from mp_phonemeta.metadata.model import PhoneMetadata
from mp_phonemeta.observability.logging import get_logger

TERRITORY = "territory"
ID = "id"

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class MetadataCollection:
    """Compiled territories plus the territories that failed, keyed by region id."""

    metadata: tuple[PhoneMetadata, ...] = ()
    failures: Mapping[str, DomainError] = dataclasses.field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures

    def get(self, region_id: str) -> PhoneMetadata | None:
        for metadata in self.metadata:
            if metadata.id == region_id:
                return metadata
        return None


def build_metadata_collection(
    root: Element,
    settings: CompilerSettings | None = None,
) -> MetadataCollection:
    """Compile every ``territory`` under *root*.

    A territory that fails to compile is logged and recorded in
    ``failures``; the others are compiled regardless.
    """
    assembler = MetadataAssembler(settings)
    compiled: list[PhoneMetadata] = []
    failures: dict[str, DomainError] = {}

    for index, territory in enumerate(root.elements_by_tag(TERRITORY)):
        region_id = territory.attribute(ID) or f"#{index}"
        with structlog.contextvars.bound_contextvars(territory=region_id):
            try:
                Invariant.not_none(territory.attribute(ID), f"id of territory {region_id}")
                compiled.append(assembler.compile(region_id, territory))
            except DomainError as exc:
                logger.error("territory_compile_failed", **exc.to_dict())
                failures[region_id] = exc

    logger.info(
        "metadata_collection_built",
        compiled=len(compiled),
        failed=sorted(failures),
    )
    return MetadataCollection(metadata=tuple(compiled), failures=failures)


def country_code_to_region_codes(metadata: Iterable[PhoneMetadata]) -> dict[int, list[str]]:
    """Region ids per country calling code, the main country for the code first."""
    mapping: dict[int, list[str]] = {}
    for record in metadata:
        if record.country_code is None:
            continue
        regions = mapping.setdefault(record.country_code, [])
        if record.main_country_for_code:
            regions.insert(0, record.id)
        else:
            regions.append(record.id)
    return mapping


__all__ = [
    "MetadataCollection",
    "build_metadata_collection",
    "country_code_to_region_codes",
]

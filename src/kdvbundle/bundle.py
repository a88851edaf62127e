"""Bundle assembly.

Builds the cover letter, the justification and the CV, encodes each one and
concatenates all of their pages, in that order, into a single PDF.  The three
builds share no state and may run in a thread pool; results are always
collected in bundle order and the first failing build (in that order) aborts
the assembly with its original exception.  No partial bundle is produced.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PyPdfError

from .config import ConfigModel, load_config
from .documents import DOCUMENTS, DocumentSpec, build_document
from .layout.render import RenderedDocument
from .record import ApplicationRecord
from .utils.errors import DocumentEncodingError
from .utils.logging import get_logger

__all__ = [
    "BuildFn",
    "BundlePart",
    "Bundle",
    "document_builders",
    "merge_parts",
    "assemble_bundle",
]

logger = get_logger(__name__)

BuildFn = Callable[[], RenderedDocument]


@dataclass(frozen=True, slots=True)
class BundlePart:
    """One encoded document of the bundle."""

    name: str
    data: bytes


@dataclass(frozen=True, slots=True)
class Bundle:
    """The combined PDF plus its parts in generation order."""

    bundle_bytes: bytes
    parts: tuple[BundlePart, ...]
    bundle_filename: str

    def part(self, name: str) -> BundlePart:
        for p in self.parts:
            if p.name == name:
                return p
        raise KeyError(name)


def document_builders(
    record: ApplicationRecord,
    settings: ConfigModel,
    *,
    today: date | None = None,
) -> list[BuildFn]:
    """Return zero-argument build functions for the three documents."""

    day = today or date.today()

    def _builder(spec: DocumentSpec) -> BuildFn:
        return lambda: build_document(spec, record, settings, today=day)

    return [_builder(spec) for spec in DOCUMENTS]


def _run_builders(builders: Sequence[BuildFn], parallel: bool) -> list[RenderedDocument]:
    if not parallel or len(builders) < 2:
        return [build() for build in builders]
    with ThreadPoolExecutor(max_workers=len(builders)) as pool:
        futures = [pool.submit(build) for build in builders]
        # ``result()`` re-raises the build's own exception; order decides which.
        return [future.result() for future in futures]


def merge_parts(parts: Sequence[BundlePart]) -> bytes:
    """Concatenate every page of ``parts`` in order into one PDF."""

    writer = PdfWriter()
    try:
        for part in parts:
            reader = PdfReader(io.BytesIO(part.data))
            for page in reader.pages:
                writer.add_page(page)
        output = io.BytesIO()
        writer.write(output)
    except (PyPdfError, ValueError, OSError) as exc:
        raise DocumentEncodingError(f"failed to merge bundle parts: {exc}") from exc
    return output.getvalue()


def assemble_bundle(
    record: ApplicationRecord,
    settings: ConfigModel | None = None,
    *,
    today: date | None = None,
    builders: Sequence[BuildFn] | None = None,
    parallel: bool | None = None,
) -> Bundle:
    """Build all documents for ``record`` and merge them into a bundle.

    Parameters
    ----------
    record:
        The populated application record.
    settings:
        Configuration; defaults to :func:`~kdvbundle.config.load_config`.
    today:
        Date printed on the cover letter; defaults to the current date.
    builders:
        Replaces the default build functions.  Each must return a
        :class:`RenderedDocument` with encoded ``data``.
    parallel:
        Overrides ``bundle.parallel`` from the configuration.
    """

    cfg = settings if settings is not None else load_config()
    fns = list(builders) if builders is not None else document_builders(record, cfg, today=today)
    run_parallel = cfg.bundle.parallel if parallel is None else parallel

    documents = _run_builders(fns, run_parallel)
    parts = tuple(BundlePart(doc.filename, doc.data) for doc in documents)
    for doc in documents:
        logger.info("built %s: %d page(s), %d bytes", doc.filename, doc.page_count, len(doc.data))

    bundle_bytes = merge_parts(parts)
    logger.info("merged %d part(s) into %d bytes", len(parts), len(bundle_bytes))
    return Bundle(bundle_bytes, parts, cfg.bundle.bundle_filename)

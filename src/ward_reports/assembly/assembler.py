"""Document assembler: validates, fetches notes and lays out a full report.

Usage::

    assembler = DocumentAssembler(settings.pdf)
    result = await assembler.assemble(records, notes_repository, ReportOptions())
    Path(result.filename).write_bytes(result.content)

Records are processed strictly in input order and notes lookups are awaited
one record at a time; the cursor has a single owner for the whole call.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ward_reports.assembly.models import (
    AssemblyResult,
    FailureKind,
    ReportFailure,
    ReportOptions,
)
from ward_reports.assembly.naming import artifact_name
from ward_reports.core.config import ReportLayoutConfig
from ward_reports.exceptions import AssemblyCancelledError, FatalAssemblyError
from ward_reports.layout.decorations import PageFooter, draw_title_header, scope_label
from ward_reports.layout.document import ReportDocument
from ward_reports.layout.flow import PageFlowEngine
from ward_reports.layout.models import LayoutCursor, TableDescription
from ward_reports.layout.styles import A4_GEOMETRY, SECTION_SPACING, SEPARATOR_OFFSET, PageGeometry
from ward_reports.models import NoteEntry, ReportRecord
from ward_reports.repositories.protocols import INotesRepository
from ward_reports.tables.builder import build_info_table, build_notes_table, build_overview_table
from ward_reports.validation.validator import validate_records

log = logging.getLogger(__name__)


class DocumentAssembler:
    """Builds one PDF per :meth:`assemble` call.

    Holds configuration only; every call constructs its own document and
    cursor, so one assembler may serve concurrent requests.
    """

    def __init__(
        self,
        config: Optional[ReportLayoutConfig] = None,
        geometry: PageGeometry = A4_GEOMETRY,
        *,
        invariant: bool = False,
    ) -> None:
        self._config = config or ReportLayoutConfig()
        self._geometry = geometry
        self._invariant = invariant
        self._engine = PageFlowEngine(geometry, font_family=self._config.font_family)

    async def assemble(
        self,
        records: Sequence[ReportRecord],
        notes_repository: INotesRepository,
        options: Optional[ReportOptions] = None,
    ) -> AssemblyResult:
        """Lay out *records* and return the finished report.

        Raises:
            FatalAssemblyError: no record validated, or none could be rendered.
            AssemblyCancelledError: ``options.cancel_event`` was set.
        """
        options = options or ReportOptions()
        generated_at = options.generated_at or datetime.now()

        if not records:
            raise FatalAssemblyError("No records supplied for the report.")

        batch = validate_records(records)
        failures = [
            ReportFailure.for_record(v.record, FailureKind.VALIDATION, v.to_error()) for v in batch.rejected
        ]
        if not batch.valid:
            message = "No valid records could be processed for the report.\nValidation errors:\n" + "\n".join(
                batch.summary_lines()
            )
            log.error(message)
            raise FatalAssemblyError(message, failures)

        doc = ReportDocument(self._geometry, title=options.title, invariant=self._invariant)
        cursor = draw_title_header(
            doc,
            options.title,
            generated_at,
            scope_label(options.specialty, options.date_range),
            font_family=self._config.font_family,
        )

        if self._config.include_overview:
            overview = build_overview_table(batch.valid, generated_at, self._config)
            cursor = self._engine.render_table(doc, overview, cursor)

        rendered: list[str] = []
        for record in batch.valid:
            self._check_cancelled(options, len(rendered))
            notes = await self._fetch_notes(record, notes_repository, failures)

            try:
                cursor = self._render_record(doc, record, notes, cursor)
            except Exception as exc:
                log.warning(f"Layout failed for record {record.label}: {exc}")
                failures.append(ReportFailure.for_record(record, FailureKind.LAYOUT, exc))
                cursor = self._resync_cursor(doc, cursor)
                continue
            rendered.append(record.record_id)

        self._check_cancelled(options, len(rendered))

        if not rendered:
            message = "Failed to render any records.\nErrors:\n" + "\n".join(f.describe() for f in failures)
            log.error(message)
            raise FatalAssemblyError(message, failures)

        footer = PageFooter(
            year=generated_at.year,
            company_name=self._config.company_name,
            disclaimer=self._config.disclaimer,
            geometry=self._geometry,
            font_family=self._config.font_family,
        )
        content = doc.finalize(footer)

        if failures:
            log.warning(
                f"Report assembled with {len(failures)} failure(s): "
                + "; ".join(f.describe() for f in failures)
            )
        log.info(f"Assembled {len(rendered)} record section(s) on {doc.page_count} page(s)")

        return AssemblyResult(
            content=content,
            filename=artifact_name(options.report_kind, generated_at),
            generated_at=generated_at,
            page_count=doc.page_count,
            rendered_record_ids=rendered,
            failures=failures,
            pages=doc.pages,
        )

    # ── Internals ────────────────────────────────────────────────────

    @staticmethod
    def _check_cancelled(options: ReportOptions, rendered: int) -> None:
        if options.cancelled:
            log.info(f"Assembly cancelled after {rendered} record section(s)")
            raise AssemblyCancelledError(
                f"Report assembly was cancelled after {rendered} record section(s); no document produced"
            )

    @staticmethod
    async def _fetch_notes(
        record: ReportRecord,
        repository: INotesRepository,
        failures: list[ReportFailure],
    ) -> list[NoteEntry]:
        try:
            return list(await repository.fetch_notes(record.record_id))
        except Exception as exc:
            log.warning(f"Notes lookup failed for record {record.label}: {exc}")
            failures.append(ReportFailure.for_record(record, FailureKind.LOOKUP, exc))
            return []

    def _render_record(
        self,
        doc: ReportDocument,
        record: ReportRecord,
        notes: list[NoteEntry],
        cursor: LayoutCursor,
    ) -> LayoutCursor:
        info = build_info_table(record, self._config)
        notes_table = build_notes_table(notes, self._config)

        # Both tables are checked before the first row is drawn.
        self._preflight(info)
        self._preflight(notes_table)

        cursor = self._engine.ensure_space(doc, cursor, self._config.section_min_space)
        cursor = self._engine.render_table(doc, info, cursor)
        if not notes_table.is_empty:
            cursor = self._engine.render_table(doc, notes_table, cursor)
        self._engine.render_separator_line(doc, cursor.y - SEPARATOR_OFFSET)
        return cursor

    def _preflight(self, table: TableDescription) -> None:
        if table.is_empty:
            return
        table.validate()
        self._engine.measure_rows(table)

    def _resync_cursor(self, doc: ReportDocument, cursor: LayoutCursor) -> LayoutCursor:
        """Cursor below whatever is already on the document's current page."""
        rows = doc.current_page.rows
        if cursor.page_index == doc.page_index:
            if not rows:
                return cursor
            return LayoutCursor(y=max(cursor.y, rows[-1].bottom + SECTION_SPACING), page_index=doc.page_index)
        if not rows:
            return LayoutCursor(y=self._geometry.content_top, page_index=doc.page_index)
        return LayoutCursor(y=rows[-1].bottom + SECTION_SPACING, page_index=doc.page_index)

#!/usr/bin/env python3
"""
Export ClickUp Docs and Wikis to a tree of markdown files.

Each doc becomes a folder. Each page becomes either a markdown file or, when
it has sub-pages, a folder holding an index.md plus its children.

Usage:
    from clickup_export.exporter import ClickUpExporter
    from clickup_export.models import ExportOptions

    exporter = ClickUpExporter(ExportOptions(token="pk_...", workspace_id="9012345"))
    result = exporter.export()
"""

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional

from clickup_export.clickup_api import ClickUpAPI
from clickup_export.errors import ClickUpAPIError
from clickup_export.filename_utils import sanitize_filename
from clickup_export.models import (
    ExportOptions,
    ExportResult,
    doc_content,
    page_children,
    page_content,
)

NO_CONTENT_PLACEHOLDER = "*No content*"


def export_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision (e.g., 2024-05-01T12:00:00.000Z)."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def render_markdown(title: str, content: str, exported_at: str) -> str:
    """Frontmatter block followed by the page body."""
    escaped_title = title.replace('"', '\\"')
    frontmatter = (
        "---\n"
        f'title: "{escaped_title}"\n'
        f'exported_at: "{exported_at}"\n'
        "---\n"
        "\n"
    )
    return frontmatter + (content or NO_CONTENT_PLACEHOLDER)


def count_pages(pages: list) -> int:
    """Count page nodes in a hierarchy, children included."""
    count = 0
    stack = list(pages)
    while stack:
        page = stack.pop()
        count += 1
        if isinstance(page, Mapping):
            stack.extend(page_children(page))
    return count


class ClickUpExporter:
    """Walks a workspace's docs and writes them to disk."""

    def __init__(
        self,
        options: ExportOptions,
        api: Optional[ClickUpAPI] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            options: Export settings
            api: API client (creates one from options.token if not provided)
            logger: Logger instance (creates one if not provided, at DEBUG
                level when options.verbose is set)
        """
        self.options = options
        if logger is None:
            logger = logging.getLogger("clickup_export")
            if options.verbose:
                logger.setLevel(logging.DEBUG)
        self.logger = logger
        self.api = api or ClickUpAPI(token=options.token, logger=self.logger)
        self.page_delay = options.page_delay
        self.exported_pages = 0
        self.errors: list[str] = []

    def export(self) -> ExportResult:
        """
        Export every doc of the workspace, or only options.doc_id when set.

        Returns:
            ExportResult with counts, absolute output path and warnings

        Raises:
            ClickUpAPIError: If the workspace check, doc listing or single
                doc fetch fails
        """
        workspace_id = self.options.workspace_id
        output_dir = Path(self.options.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        self.logger.info("Verifying workspace access...")
        workspaces = self.api.get_workspaces()
        known_ids = {str(w.get("id")) for w in workspaces if isinstance(w, Mapping)}
        if workspaces and str(workspace_id) not in known_ids:
            self.logger.warning(
                f"Workspace {workspace_id} not found among {len(workspaces)} "
                f"accessible workspace(s); continuing with the requested ID"
            )

        if self.options.doc_id:
            self.logger.info(f"Fetching doc {self.options.doc_id}...")
            docs = [self.api.get_doc(workspace_id, self.options.doc_id)]
        else:
            self.logger.info("Fetching all docs...")
            docs = self.api.get_docs(workspace_id)

        self.logger.info(f"Found {len(docs)} doc(s) to export")

        for doc in docs:
            doc_name = doc.get("name") or "unnamed-doc"
            try:
                self.export_doc(doc, workspace_id, output_dir)
            except (ClickUpAPIError, OSError) as e:
                self.logger.error(f"Failed to export doc \"{doc_name}\": {e}")
                self.errors.append(f"Failed to export doc \"{doc_name}\": {e}")

        return ExportResult(
            total_docs=len(docs),
            total_pages=self.exported_pages,
            output_dir=str(output_dir.resolve()),
            errors=self.errors,
        )

    def export_doc(self, doc: Mapping[str, Any], workspace_id: str, output_dir: Path):
        """Export one doc and all of its pages into its own folder."""
        doc_name = doc.get("name") or "unnamed-doc"
        doc_dir = output_dir / sanitize_filename(doc_name)

        self.logger.info(f"Exporting: {doc_name}")
        doc_dir.mkdir(parents=True, exist_ok=True)

        self.logger.debug(f"Fetching page hierarchy for {doc.get('id')}...")
        pages = []
        try:
            pages = self.api.get_page_listing(workspace_id, doc.get("id"))
            self.logger.debug(f"Found {count_pages(pages)} pages")
        except ClickUpAPIError as e:
            self.logger.warning(f"Could not fetch pages: {e}")

        if not pages:
            # Doc has no pages, build index.md from its inline content
            self.write_markdown_file(doc_dir / "index.md", doc_name, doc_content(doc))
            self.exported_pages += 1
            return

        self.export_pages(pages, workspace_id, doc.get("id"), doc_dir)

    def export_pages(self, pages: list, workspace_id: str, doc_id: str, parent_dir: Path):
        """
        Export a page hierarchy depth-first, each page before its children.

        Uses an explicit stack, so arbitrarily deep hierarchies are fine.
        """
        # Reversed so pops come out in sibling order
        stack = [(page, parent_dir) for page in reversed(pages)]

        while stack:
            page, directory = stack.pop()
            if not isinstance(page, Mapping) or not page.get("id"):
                continue

            page_name = page.get("name") or "unnamed-page"
            children = page_children(page)

            content = ""
            try:
                page_data = self.api.get_page_content(workspace_id, doc_id, page["id"])
                content = page_content(page_data)
            except ClickUpAPIError as e:
                self.logger.debug(f"Could not fetch content for \"{page_name}\": {e}")
                self.errors.append(f"Failed to fetch content for \"{page_name}\"")

            time.sleep(self.page_delay)

            if children:
                page_dir = directory / sanitize_filename(page_name)
                page_dir.mkdir(parents=True, exist_ok=True)
                self.write_markdown_file(page_dir / "index.md", page_name, content)
                self.exported_pages += 1
                stack.extend((child, page_dir) for child in reversed(children))
            else:
                filename = sanitize_filename(page_name) + ".md"
                self.write_markdown_file(directory / filename, page_name, content)
                self.exported_pages += 1

            self.logger.debug(f"Exported: {page_name}")

    def write_markdown_file(self, filepath: Path, title: str, content: str):
        """Write a markdown file with frontmatter, replacing any existing file."""
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(render_markdown(title, content, export_timestamp()))

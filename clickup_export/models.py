"""Data models for the docs exporter.

Documents, pages and workspaces are kept as the JSON mappings the API
returns, since field names differ across endpoints and API versions. The
lookup tables below list, in priority order, the keys that may carry a
page's children or its body text; field name drift only needs a change here.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence

CHILD_FIELDS = ("children", "sub_pages", "pages")
CONTENT_FIELDS = ("content", "body", "markdown")

DEFAULT_PAGE_DELAY = 0.1


@dataclass
class ExportOptions:
    """Options for a single export run.

    Attributes:
        token: ClickUp API token (personal "pk_..." token or OAuth token)
        workspace_id: Workspace (team) ID to export from
        output_dir: Directory that receives one folder per document
        doc_id: Export only this document when set
        verbose: Log debug messages (an injected logger keeps its own level)
        page_delay: Seconds to wait after each page content fetch
    """
    token: str
    workspace_id: str
    output_dir: str = "./clickup-docs"
    doc_id: Optional[str] = None
    verbose: bool = False
    page_delay: float = DEFAULT_PAGE_DELAY


@dataclass
class ExportResult:
    """Summary of a finished export run.

    Attributes:
        total_docs: Number of documents processed
        total_pages: Number of markdown files written
        output_dir: Absolute path of the output directory
        errors: Non-fatal warnings collected during the run
    """
    total_docs: int
    total_pages: int
    output_dir: str
    errors: List[str] = field(default_factory=list)


def first_field(node: Mapping[str, Any], fields: Sequence[str], default: Any = None) -> Any:
    """Return the first truthy value among ``fields`` in ``node``."""
    for name in fields:
        value = node.get(name)
        if value:
            return value
    return default


def page_children(node: Mapping[str, Any]) -> list:
    """Child page nodes of a page, or an empty list for leaf pages."""
    children = first_field(node, CHILD_FIELDS, [])
    return children if isinstance(children, list) else []


def content_blocks_to_markdown(blocks: Sequence[Any]) -> str:
    """Join markdown content blocks, skipping any other block types."""
    parts = []
    for block in blocks:
        if not isinstance(block, Mapping):
            continue
        text = block.get("content")
        if block.get("type") == "markdown" or isinstance(text, str):
            parts.append(text if isinstance(text, str) else "")
    return "\n\n".join(parts)


def page_content(page_data: Any) -> str:
    """Extract markdown text from a page content response."""
    if not isinstance(page_data, Mapping):
        return ""
    content = first_field(page_data, CONTENT_FIELDS, "")
    if isinstance(content, list):
        return content_blocks_to_markdown(content)
    return content if isinstance(content, str) else str(content)


def doc_content(doc: Mapping[str, Any]) -> str:
    """Build markdown for a document that has no pages from its inline blocks."""
    blocks = doc.get("content")
    if isinstance(blocks, list):
        return content_blocks_to_markdown(blocks)
    return ""

"""Documentation metadata extraction from the host route tree.

The host hands over its rendered route tree as nested mappings. Every field
we read is optional there, so the models below spell out each one with a
default instead of probing the raw mappings. Only the top-level route list
must be well formed; deeper values of an unexpected shape are read as missing.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)

from llmstxt.models import DocEntry

LOGGER = logging.getLogger(__name__)

DOCS_PLUGIN_MARKER = "docusaurus-plugin-content-docs"
VERSION_ROOT_PATH = "/"


def _none_if_invalid(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    # Plugins put arbitrary data under these keys; anything of the wrong shape
    # reads as absent.
    try:
        return handler(value)
    except ValidationError:
        return None


def _routes_or_none(value: Any) -> Any:
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, (Mapping, RouteNode))]


def _docs_or_none(value: Any) -> Any:
    if not isinstance(value, Mapping):
        return None
    return {
        key: doc
        for key, doc in value.items()
        if isinstance(key, str) and isinstance(doc, (Mapping, DocMetadata))
    }


_LENIENT = WrapValidator(_none_if_invalid)

LenientStr = Annotated[Optional[str], _LENIENT]


class _HostModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class DocMetadata(_HostModel):
    title: LenientStr = None
    description: LenientStr = None
    id: LenientStr = None
    unversioned_id: LenientStr = Field(default=None, alias="unversionedId")


class VersionInfo(_HostModel):
    docs: Annotated[
        Optional[Dict[str, DocMetadata]], BeforeValidator(_docs_or_none), _LENIENT
    ] = None


class RouteProps(_HostModel):
    version: Annotated[Optional[VersionInfo], _LENIENT] = None


class PluginInfo(_HostModel):
    name: LenientStr = None


class RouteNode(_HostModel):
    path: LenientStr = None
    plugin: Annotated[Optional[PluginInfo], _LENIENT] = None
    routes: Annotated[
        Optional[List["RouteNode"]], BeforeValidator(_routes_or_none), _LENIENT
    ] = None
    props: Annotated[Optional[RouteProps], _LENIENT] = None

    @property
    def plugin_name(self) -> str:
        if self.plugin is None or self.plugin.name is None:
            return ""
        return self.plugin.name

    @property
    def version_docs(self) -> Optional[Dict[str, DocMetadata]]:
        if self.props is None or self.props.version is None:
            return None
        return self.props.version.docs


RouteNode.model_rebuild()

_ROUTE_LIST = TypeAdapter(List[RouteNode])


def parse_routes(raw: Iterable[Any]) -> List[RouteNode]:
    """Validate raw host route mappings; raises ``pydantic.ValidationError``."""
    return _ROUTE_LIST.validate_python(list(raw))


def find_docs_routes(routes: Sequence[RouteNode]) -> List[RouteNode]:
    """Return every node served by the docs plugin, nested ones included."""
    found: List[RouteNode] = []

    def visit(nodes: Sequence[RouteNode]) -> None:
        for node in nodes:
            if DOCS_PLUGIN_MARKER in node.plugin_name:
                LOGGER.debug("Found docs plugin: %s", node.plugin_name)
                found.append(node)
            if node.routes:
                visit(node.routes)

    visit(routes)
    return found


def _entry_from_metadata(doc_path: str, doc: DocMetadata) -> DocEntry:
    return DocEntry(
        path=doc_path,
        title=doc.title or "",
        description=doc.description or "",
        id=doc.id or doc.unversioned_id or "",
    )


def extract_doc_entries(docs_routes: Sequence[RouteNode]) -> List[DocEntry]:
    """Collect titled docs from the version roots below each docs plugin node.

    Entries keep mapping order and are not deduplicated across versions.
    """
    entries: List[DocEntry] = []

    def visit(nodes: Sequence[RouteNode]) -> None:
        for node in nodes:
            version_docs = node.version_docs
            if node.path == VERSION_ROOT_PATH and version_docs:
                LOGGER.debug("Found %d docs in version", len(version_docs))
                for doc_path, doc in version_docs.items():
                    if doc.title:
                        entries.append(_entry_from_metadata(doc_path, doc))
            if node.routes:
                visit(node.routes)

    for docs_route in docs_routes:
        if docs_route.routes:
            visit(docs_route.routes)

    LOGGER.debug("Found %d documentation entries", len(entries))
    return entries


def scan_routes(routes: Sequence[RouteNode]) -> List[DocEntry]:
    return extract_doc_entries(find_docs_routes(routes))

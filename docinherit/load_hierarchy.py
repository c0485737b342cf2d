"""Logic for loading type hierarchies and doc comments from YAML files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from docinherit.doc_tag import DocTag
from docinherit.hierarchy_index import HierarchyIndex
from docinherit.method_symbol import MethodSymbol
from docinherit.parse_description import parse_description
from docinherit.strip_yaml_mime_header import strip_yaml_mime_header
from docinherit.type_symbol import TypeSymbol

logger = logging.getLogger(__name__)

HIERARCHY_MIME = "InheritanceHierarchy"
TYPE_KINDS = {"class", "interface"}
METHOD_KINDS = {"method", "constructor"}
TAG_KEYS = ("see", "throws", "exception", "param", "return")


class HierarchyLoadError(ValueError):
    """Raised when a hierarchy file is malformed."""


def load_hierarchy(paths: list[Path]) -> HierarchyIndex:
    """Load one or more hierarchy files into a single index."""
    uid_to_type: dict[str, TypeSymbol] = {}
    uid_to_method: dict[str, MethodSymbol] = {}
    for path in paths:
        doc = _load_document(path)
        for raw in doc.get("types") or []:
            t = _build_type(raw, path)
            if t.uid in uid_to_type:
                msg = f"{path}: duplicate type uid {t.uid}"
                raise HierarchyLoadError(msg)
            uid_to_type[t.uid] = t
        for raw in doc.get("methods") or []:
            m = _build_method(raw, path)
            if m.uid in uid_to_method:
                msg = f"{path}: duplicate method uid {m.uid}"
                raise HierarchyLoadError(msg)
            uid_to_method[m.uid] = m

    for m in uid_to_method.values():
        for ref in [m.overrides, *m.implements]:
            if ref and ref not in uid_to_method:
                logger.warning("%s refers to unknown method %s", m.uid, ref)
    logger.info(
        "Loaded %d types and %d methods", len(uid_to_type), len(uid_to_method)
    )
    return HierarchyIndex(uid_to_type, uid_to_method)


def _load_document(path: Path) -> dict[str, Any]:
    kind, raw = strip_yaml_mime_header(path.read_text(encoding="utf-8"))
    if kind is not None and kind != HIERARCHY_MIME:
        msg = f"{path}: unsupported YamlMime {kind!r}"
        raise HierarchyLoadError(msg)
    try:
        doc = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        msg = f"{path}: invalid YAML"
        raise HierarchyLoadError(msg) from e
    if doc is not None and not isinstance(doc, dict):
        msg = f"{path}: expected a mapping at top level"
        raise HierarchyLoadError(msg)
    return doc or {}


def _require(raw: dict[str, Any], key: str, path: Path) -> str:
    value = raw.get(key)
    if not value:
        msg = f"{path}: entry is missing {key!r}: {raw!r}"
        raise HierarchyLoadError(msg)
    return str(value)


def _build_type(raw: dict[str, Any], path: Path) -> TypeSymbol:
    uid = _require(raw, "uid", path)
    kind = str(raw.get("kind") or "class").lower()
    if kind not in TYPE_KINDS:
        msg = f"{path}: unknown type kind {kind!r} for {uid}"
        raise HierarchyLoadError(msg)
    return TypeSymbol(
        uid=uid,
        name=str(raw.get("name") or uid.split(".")[-1]),
        kind=kind,
        superclass=raw.get("superclass"),
        interfaces=tuple(str(x) for x in raw.get("interfaces") or []),
        type_parameters=tuple(str(x) for x in raw.get("typeParameters") or []),
        type_arguments={
            str(k): str(v) for k, v in (raw.get("typeArguments") or {}).items()
        },
    )


def _build_method(raw: dict[str, Any], path: Path) -> MethodSymbol:
    uid = _require(raw, "uid", path)
    owner = _require(raw, "owner", path)
    kind = str(raw.get("kind") or "method").lower()
    if kind not in METHOD_KINDS:
        msg = f"{path}: unknown member kind {kind!r} for {uid}"
        raise HierarchyLoadError(msg)
    tags = tuple(
        _build_tag(t, f"{path.name}: {uid}") for t in raw.get("doc") or []
    )
    return MethodSymbol(
        uid=uid,
        name=str(raw.get("name") or uid.split("#")[-1].split("(")[0]),
        kind=kind,
        owner=owner,
        thrown_types=tuple(str(x) for x in raw.get("throws") or []),
        tags=tags,
        overrides=raw.get("overrides"),
        implements=tuple(str(x) for x in raw.get("implements") or []),
        signature=str(raw.get("signature") or ""),
    )


def _build_tag(raw: dict[str, Any], location: str) -> DocTag:
    for key in TAG_KEYS:
        if key in raw:
            return DocTag(
                kind=key,
                name=str(raw[key] or ""),
                description=parse_description(raw.get("description")),
                location=location,
            )
    msg = f"{location}: unknown tag {raw!r}"
    raise HierarchyLoadError(msg)

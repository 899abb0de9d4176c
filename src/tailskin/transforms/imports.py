"""Rewrite a skin's imports for the generated module."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace

from tailskin.naming import CUSTOM_ELEMENT_PREFIX, to_kebab_case
from tailskin.parser.nodes import ImportInfo

__all__ = [
    "DEFAULT_EXCLUDE_PATTERNS",
    "ImportMappingConfig",
    "default_should_exclude",
    "format_imports",
    "format_side_effect_imports",
    "identity_relative_import",
    "media_relative_import",
    "transform_imports",
]

logger = logging.getLogger(__name__)

# Styles and the React runtime never reach the generated module.
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = ("./styles", ".css", "react", "react-dom", "react/")


def default_should_exclude(source: str, patterns: Iterable[str]) -> bool:
    """Whether *source* matches any exclude pattern.

    * ``"react/"`` - prefix match; also matches the bare ``react``.
    * ``".css"``, ``"./styles"`` - substring match.
    * ``"react"`` - package match: ``react`` or ``react/...``, never
      ``react-dom`` or ``@pkg/react-icons``.
    """
    for pattern in patterns:
        if not pattern:
            continue
        if pattern.endswith("/"):
            if source.startswith(pattern) or source == pattern[:-1]:
                return True
        elif pattern.startswith("."):
            if pattern in source:
                return True
        elif source == pattern or source.startswith(pattern + "/"):
            return True
    return False


def identity_relative_import(source: str) -> str:
    return source


def media_relative_import(source: str) -> str:
    """``../components/PlayButton`` -> ``../components/media-play-button``.

    Only the last path segment changes, and only for component paths
    (under ``components/`` or PascalCase); other relative paths are kept.
    """
    head, _, last = source.rpartition("/")
    if not last or ("/components" not in source and not last[:1].isupper()):
        return source
    name = to_kebab_case(last)
    if not name.startswith(CUSTOM_ELEMENT_PREFIX):
        name = CUSTOM_ELEMENT_PREFIX + name
    return f"{head}/{name}" if head else name


@dataclass(frozen=True)
class ImportMappingConfig:
    package_mappings: Mapping[str, str] = field(default_factory=dict)
    exclude_patterns: Sequence[str] = DEFAULT_EXCLUDE_PATTERNS
    component_mappings: Mapping[str, str] | None = None
    should_exclude: Callable[[str, Sequence[str]], bool] = default_should_exclude
    transform_relative_import: Callable[[str], str] = identity_relative_import


def _map_source(source: str, mappings: Mapping[str, str]) -> str:
    if source in mappings:
        return mappings[source]
    for package, target in mappings.items():
        if source.startswith(package + "/"):
            return target + source[len(package):]
    return source


def _rename(specifier: str, renames: Mapping[str, str]) -> str:
    if specifier.startswith("* as "):
        return specifier
    imported, sep, local = specifier.partition(" as ")
    renamed = renames.get(imported, imported)
    if sep:
        return f"{renamed} as {local}"
    return renamed


def transform_imports(
    imports: Iterable[ImportInfo], config: ImportMappingConfig | None = None
) -> list[ImportInfo]:
    """Drop excluded and type-only imports, then remap sources and names.

    The order of the remaining imports is preserved.
    """
    config = config or ImportMappingConfig()
    result: list[ImportInfo] = []
    for info in imports:
        if info.type_only:
            continue
        if config.should_exclude(info.source, config.exclude_patterns):
            logger.debug("excluding import %r", info.source)
            continue
        source = info.source
        if source.startswith("."):
            source = config.transform_relative_import(source)
        else:
            source = _map_source(source, config.package_mappings)
        specifiers = info.specifiers
        if config.component_mappings:
            specifiers = tuple(_rename(s, config.component_mappings) for s in specifiers)
        result.append(replace(info, source=source, specifiers=specifiers))
    return result


def format_side_effect_imports(imports: Iterable[ImportInfo]) -> list[str]:
    """One ``import 'source';`` per distinct source, in first-seen order."""
    sources = dict.fromkeys(info.source for info in imports)
    return [f"import '{source}';" for source in sources]


def format_imports(imports: Iterable[ImportInfo]) -> list[str]:
    """Render import statements with their specifiers."""
    lines: list[str] = []
    for info in imports:
        specifiers = list(info.specifiers)
        if not specifiers:
            lines.append(f"import '{info.source}';")
            continue
        parts: list[str] = []
        if info.is_default:
            parts.append(specifiers.pop(0))
        if specifiers and specifiers[0].startswith("* as "):
            parts.append(specifiers.pop(0))
        if specifiers:
            parts.append("{ " + ", ".join(specifiers) + " }")
        lines.append(f"import {', '.join(parts)} from '{info.source}';")
    return lines

"""
enu.toml manifest loading.

A manifest declares enum types outside of Python code so build tooling can
export them without importing the application:

    [project]
    name = "blog"

    [export]
    indent = 2
    output = "build/enums.json"

    [enums.PostStatus]
    title = "Post Status"
    options = ["draft", "published", { name = "moderated", value = 10 }, "deleted"]

    [enums.ArchivedPostStatus]
    extends = "PostStatus"
    options = ["archived"]
"""

import logging
import tomllib
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import EnuError, ErrorContext, ManifestError
from .registry import EnumType

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = "enu.toml"


@dataclass
class ProjectConfig:
    """Project metadata."""

    name: str = "unnamed"
    version: str = "0.0.0"


@dataclass
class ExportConfig:
    """Defaults for `enu export`."""

    indent: int | None = None  # None = compact
    output: str | None = None  # None = stdout


@dataclass
class OptionDefinition:
    """One option entry; value None means auto-assign."""

    name: str
    value: int | None = None


@dataclass
class EnumDefinition:
    """An [enums.<Name>] table."""

    name: str
    title: str | None = None
    extends: str | None = None
    options: list[OptionDefinition] = field(default_factory=list)


@dataclass
class EnumManifest:
    """Parsed enu.toml."""

    path: Path
    project: ProjectConfig = field(default_factory=ProjectConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    enums: list[EnumDefinition] = field(default_factory=list)

    def get_enum(self, name: str) -> EnumDefinition | None:
        """Get enum definition by name."""
        for definition in self.enums:
            if definition.name == name:
                return definition
        return None


def load_manifest(path: Path) -> EnumManifest:
    """
    Read and parse an enu.toml manifest.

    Args:
        path: Path to the manifest file

    Returns:
        Parsed manifest; enum types are not built yet (see build_enums)

    Raises:
        ManifestError: If the file is missing, not valid TOML, or malformed
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ManifestError(f"Manifest not found: {path}") from None
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    project_data = data.get("project", {})
    export_data = data.get("export", {})
    enums_data = data.get("enums", {})

    if not isinstance(enums_data, dict):
        raise ManifestError(f"{path}: [enums] must be a table of enum definitions")
    if not isinstance(project_data, dict):
        raise ManifestError(f"{path}: [project] must be a table")
    if not isinstance(export_data, dict):
        raise ManifestError(f"{path}: [export] must be a table")

    project = ProjectConfig(
        name=_optional_str(project_data, "name", f"{path}: [project]") or "unnamed",
        version=_optional_str(project_data, "version", f"{path}: [project]") or "0.0.0",
    )

    indent = export_data.get("indent")
    if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int)):
        raise ManifestError(f"{path}: [export] indent must be an integer")

    export = ExportConfig(
        indent=indent,
        output=_optional_str(export_data, "output", f"{path}: [export]"),
    )

    enums = [
        _parse_enum(name, enum_data, path) for name, enum_data in enums_data.items()
    ]

    logger.debug("Loaded %d enum definitions from %s", len(enums), path)
    return EnumManifest(path=path, project=project, export=export, enums=enums)


def _parse_enum(name: str, data: Any, path: Path) -> EnumDefinition:
    context = ErrorContext(name, source=path)
    if not isinstance(data, dict):
        raise ManifestError("enum definition must be a table", context)

    options_data = data.get("options", [])
    if not isinstance(options_data, list):
        raise ManifestError("options must be an array", context)

    options: list[OptionDefinition] = []
    for entry in options_data:
        if isinstance(entry, str):
            options.append(OptionDefinition(name=entry))
        elif isinstance(entry, dict) and "name" in entry:
            options.append(OptionDefinition(name=entry["name"], value=entry.get("value")))
        else:
            raise ManifestError(
                f"option entries must be names or {{ name = ..., value = ... }} tables, "
                f"got {entry!r}",
                context,
            )

    return EnumDefinition(
        name=name,
        title=_optional_str(data, "title", context),
        extends=_optional_str(data, "extends", context),
        options=options,
    )


def _optional_str(data: dict[str, Any], key: str, where: str | ErrorContext) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    message = f"{key} must be a string, got {type(value).__name__} {value!r}"
    if isinstance(where, ErrorContext):
        raise ManifestError(message, where)
    raise ManifestError(f"{where} {message}")


def resolve_order(definitions: list[EnumDefinition]) -> list[EnumDefinition]:
    """
    Order definitions so every parent comes before the enums extending it.

    Uses Kahn's algorithm; definitions without a parent keep file order.

    Raises:
        ManifestError: If a parent is undefined or extends chains form a cycle
    """
    definition_map = {d.name: d for d in definitions}

    for definition in definitions:
        if definition.extends is not None and definition.extends not in definition_map:
            raise ManifestError(
                f"extends '{definition.extends}', which is not defined. "
                f"Available enums: {list(definition_map.keys())}",
                ErrorContext(definition.name),
            )

    children: dict[str, list[str]] = {d.name: [] for d in definitions}
    for definition in definitions:
        if definition.extends is not None:
            children[definition.extends].append(definition.name)

    queue = deque(d.name for d in definitions if d.extends is None)
    ordered: list[EnumDefinition] = []

    while queue:
        name = queue.popleft()
        ordered.append(definition_map[name])
        queue.extend(children[name])

    if len(ordered) != len(definitions):
        unresolved = sorted(set(definition_map) - {d.name for d in ordered})
        raise ManifestError(f"Circular extends chain between enums: {', '.join(unresolved)}")

    return ordered


def build_enums(manifest: EnumManifest) -> dict[str, EnumType]:
    """
    Build frozen EnumType descriptors from a manifest.

    Returns:
        Enum types keyed by name, in manifest order

    Raises:
        ManifestError: If extends cannot be resolved
        DeclarationError: If an option declaration is rejected; the error
            context carries the manifest path
    """
    built: dict[str, EnumType] = {}

    for definition in resolve_order(manifest.enums):
        if definition.extends is not None:
            enum_type = built[definition.extends].derive(definition.name, title=definition.title)
        else:
            enum_type = EnumType(definition.name, title=definition.title)

        for option in definition.options:
            try:
                enum_type.add_option(option.name, option.value)
            except EnuError as e:
                if e.context is not None and e.context.source is None:
                    e.context.source = manifest.path
                    e.args = (str(e),)
                raise

        built[definition.name] = enum_type

    for enum_type in built.values():
        enum_type.freeze()

    logger.info("Built %d enum types from %s", len(built), manifest.path)
    return {d.name: built[d.name] for d in manifest.enums}

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Location:
    """Represents a line range in a source file (1-indexed, inclusive)."""
    start: int
    end: int


@dataclass(frozen=True)
class Span:
    """Represents a character range in a source file (end is exclusive)."""
    start: int
    end: int

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end


@dataclass(frozen=True)
class StructuralElement:
    """A class, function, or method declaration recovered from a file."""
    kind: str  # "class", "function" or "method"
    name: str
    path: str
    signature: str
    snippet: str
    extent: Location
    span: Span
    summary: str | None = None  # None if no preceding comment
    class_name: str | None = None  # Only set for methods


@dataclass(frozen=True)
class ImportSpecifier:
    """One binding introduced by an import statement."""
    kind: str  # "default", "namespace", "named" or "side-effect"
    imported_name: str | None = None  # Only set for named specifiers
    local_name: str | None = None  # None for side-effect imports


@dataclass(frozen=True)
class ImportEdge:
    """An import statement decomposed into its source module and specifiers."""
    raw: str
    source: str
    specifiers: tuple[ImportSpecifier, ...]
    path: str
    extent: Location
    span: Span


@dataclass(frozen=True)
class ExportedItem:
    """One name made public by an export statement."""
    public_name: str
    local_name: str


@dataclass(frozen=True)
class ExportEdge:
    """An export statement decomposed into its kind and exported names."""
    raw: str
    kind: str
    exported_items: tuple[ExportedItem, ...]
    path: str
    extent: Location
    span: Span
    source: str | None = None  # Only set for re-exports


@dataclass(frozen=True)
class ParseResult:
    """Everything recovered from a single source file."""
    elements: tuple[StructuralElement, ...] = ()
    imports: tuple[ImportEdge, ...] = ()
    exports: tuple[ExportEdge, ...] = ()

    def to_dict(self) -> dict:
        """Convert to plain dicts and lists suitable for JSON output."""
        return asdict(self)

    def classes(self) -> list[StructuralElement]:
        return [e for e in self.elements if e.kind == "class"]

    def functions(self) -> list[StructuralElement]:
        return [e for e in self.elements if e.kind == "function"]

    def methods(self) -> list[StructuralElement]:
        return [e for e in self.elements if e.kind == "method"]

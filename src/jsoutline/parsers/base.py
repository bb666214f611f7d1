from abc import ABC, abstractmethod

from jsoutline.models import ParseResult


class UnbalancedBracesError(ValueError):
    """Raised when a declaration's opening brace has no matching close."""

    def __init__(self, kind: str, name: str, line: int):
        self.kind = kind
        self.name = name
        self.line = line
        super().__init__(
            f"Could not find closing brace for {kind} {name} starting at line {line}"
        )


class BaseParser(ABC):
    """Abstract base class for language-specific structural parsers."""

    @abstractmethod
    def parse(self, source_code: str, file_path: str) -> ParseResult:
        """Extract declarations, imports and exports from source code.

        Args:
            source_code: The source code to parse
            file_path: Identifier for the file, echoed into every record

        Returns:
            ParseResult holding everything found in the source code
        """
        pass

"""Documentation extraction: the react-docgen adapter and its failure policy."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Mapping, Sequence
from typing import Any, Callable, List, Optional

from .logging import get_logger
from .models import DocumentationRecord

DEFAULT_RESOLVER = "findAllExportedComponentDefinitions"
BUILTIN_RESOLVERS = (
    "findAllExportedComponentDefinitions",
    "findExportedComponentDefinition",
    "findAllComponentDefinitions",
)
DEFAULT_COMMAND = ("npx", "react-docgen")

Extractor = Callable[..., Any]


class ExtractionError(RuntimeError):
    """Raised when the documentation extractor cannot produce records."""


class ReactDocgenExtractor:
    """Runs the react-docgen CLI on module source passed through stdin."""

    def __init__(self, command: Sequence[str] | None = None) -> None:
        self.command = list(command or DEFAULT_COMMAND)
        if not self.command:
            raise ValueError("react-docgen command must not be empty")

    def __call__(
        self,
        source: str,
        *,
        resolver: str | None = None,
        filename: str | None = None,
    ) -> Any:
        args = [*self.command, "--resolver", resolver or DEFAULT_RESOLVER]
        try:
            completed = subprocess.run(
                args,
                input=source,
                check=True,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as exc:
            raise ExtractionError(
                f"Unable to locate react-docgen executable '{self.command[0]}'."
            ) from exc
        except subprocess.CalledProcessError as exc:
            message = (exc.stderr or "").strip() or (exc.stdout or "").strip() or str(exc.returncode)
            label = f" for {filename}" if filename else ""
            raise ExtractionError(f"react-docgen failed{label}: {message}") from exc

        output = completed.stdout.strip()
        if not output:
            raise ExtractionError("react-docgen returned no output")
        try:
            return json.loads(output)
        except json.JSONDecodeError as exc:
            raise ExtractionError(f"react-docgen returned invalid JSON: {exc}") from exc


class DocExtractionAdapter:
    """Normalises extractor results and swallows extraction failures.

    Extraction is best-effort enrichment, so every failure turns into an
    empty record list instead of an exception.
    """

    def __init__(
        self,
        extractor: Optional[Extractor] = None,
        *,
        include_methods: bool = False,
        resolver: str | None = None,
    ) -> None:
        self.extractor = extractor if extractor is not None else ReactDocgenExtractor()
        self.include_methods = include_methods
        self.resolver = resolver or DEFAULT_RESOLVER
        self.logger = get_logger("extraction")

    def extract(self, source: str, filename: str | None = None) -> List[DocumentationRecord]:
        try:
            result = self.extractor(source, resolver=self.resolver, filename=filename)
        except Exception as exc:
            self.logger.debug("Extraction failed for %s: %s", filename or "<source>", exc)
            return []

        records = self._normalise(result)
        if records is None:
            self.logger.debug(
                "Extractor returned unsupported %s for %s",
                type(result).__name__,
                filename or "<source>",
            )
            return []
        if not self.include_methods:
            records = [
                {key: value for key, value in record.items() if key != "methods"}
                for record in records
            ]
        return records

    @staticmethod
    def _normalise(result: Any) -> Optional[List[DocumentationRecord]]:
        if isinstance(result, Mapping):
            return [dict(result)]
        if isinstance(result, Sequence) and not isinstance(result, (str, bytes)):
            return [dict(item) for item in result if isinstance(item, Mapping)]
        return None


__all__ = [
    "BUILTIN_RESOLVERS",
    "DEFAULT_RESOLVER",
    "DocExtractionAdapter",
    "ExtractionError",
    "Extractor",
    "ReactDocgenExtractor",
]

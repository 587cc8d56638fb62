"""The docinject pass: attach ``__docgenInfo`` metadata to exported components."""

from __future__ import annotations

from typing import Optional

from tree_sitter import Node

from .classifier import ComponentClassifier
from .config import InjectConfig
from .emitter import InstrumentationEmitter
from .exports import is_exported
from .extraction import DocExtractionAdapter, Extractor, ReactDocgenExtractor
from .guard import already_instrumented
from .logging import get_logger
from .models import CandidateDefinition
from .syntax.module import Module, parse_module
from .syntax.parser import JavaScriptParser
from .syntax.traversal import walk


class DocgenInjector:
    """Runs classification, export resolution and emission over modules.

    One instance can process any number of modules; all per-module state
    lives in :meth:`process`.
    """

    def __init__(
        self,
        config: Optional[InjectConfig] = None,
        *,
        extractor: Optional[Extractor] = None,
        classifier: Optional[ComponentClassifier] = None,
    ) -> None:
        self.config = config or InjectConfig()
        if extractor is None:
            extractor = ReactDocgenExtractor(self.config.extractor_command)
        self.adapter = DocExtractionAdapter(
            extractor,
            include_methods=self.config.include_methods,
            resolver=self.config.resolver,
        )
        self.classifier = classifier or ComponentClassifier()
        self.emitter = InstrumentationEmitter(
            collection_name=self.config.registry_name,
            root=self.config.root,
        )
        self.parser = JavaScriptParser()
        self.logger = get_logger("injector")

    def process(self, module: Module) -> bool:
        """Instrument ``module`` in place; return True when statements were appended."""
        trigger: list[CandidateDefinition] = []

        def _visit(node: Node) -> bool:
            candidate = self.classifier.classify(node, module)
            if candidate is None or not is_exported(candidate):
                return False
            trigger.append(candidate)
            return True

        handlers = {kind: _visit for kind in self.classifier.NODE_KINDS}
        walk(module.root, handlers)
        if not trigger:
            self.logger.debug("No exported component definitions in %s", module.filename)
            return False

        candidate = trigger[0]
        if already_instrumented(module):
            self.logger.debug("Skipping %s: already instrumented", module.filename)
            return False

        records = self.adapter.extract(module.source, filename=module.filename)
        if not records:
            return False

        emitted = self.emitter.emit(module, records, fallback_name=candidate.bound_name)
        self.logger.debug(
            "Attached documentation for %d component(s) in %s", emitted, module.filename
        )
        return emitted > 0

    def transform(self, source: str, filename: Optional[str] = None) -> str:
        """Parse ``source``, instrument it and return the resulting source text."""
        module = parse_module(source, filename, parser=self.parser)
        self.process(module)
        return module.render()


__all__ = ["DocgenInjector"]

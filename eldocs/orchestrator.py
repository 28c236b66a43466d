"""Pipeline orchestration for documentation runs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from .analyzers.base import SourceParseError, SourceParser
from .analyzers.dependencies import DependencyExtractor
from .analyzers.stereotypes import StereotypeClassifier
from .config import EldocsConfig
from .diagrams import DiagramBuilder
from .git.diff import ChangeDetector
from .llm.client import EnrichmentClient
from .logging import get_logger
from .models import RenderedArtifact, SourceUnit, TypeDocument
from .registry import PackageRegistry
from .renderer import DocumentRenderer
from .source_scanner import SourceScanner
from .templates import create_environment
from .writer import ArtifactWriter


@dataclass
class RunResult:
    """Outcome of one documentation run."""

    written: List[Path] = field(default_factory=list)
    unchanged: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    failed: Dict[Path, str] = field(default_factory=dict)

    def record_write(self, path: Path, written: bool) -> None:
        (self.written if written else self.unchanged).append(path)


class Orchestrator:
    """Coordinates extraction, classification, rendering and writing for a source tree.

    Collaborators can be injected; anything left out is built from the run configuration.
    Each call to ``run`` owns a fresh ``PackageRegistry``.
    """

    def __init__(
        self,
        parser: SourceParser | None = None,
        classifier: StereotypeClassifier | None = None,
        change_detector: ChangeDetector | None = None,
        client: EnrichmentClient | None = None,
    ) -> None:
        self._parser = parser
        self.classifier = classifier or StereotypeClassifier()
        self.change_detector = change_detector or ChangeDetector()
        self._client = client
        self.logger = get_logger("orchestrator")

    def run(self, config: EldocsConfig) -> RunResult:
        """Document every selected source file, then package summaries and the project diagram."""
        source_root = config.source_path
        output_root = config.output_path
        self.logger.info("Generating docs from %s into %s", source_root, output_root)

        parser = self._resolve_parser()
        scanner = SourceScanner(suffixes=parser.suffixes, exclude_paths=config.exclude_paths)
        files = self._collect_sources(scanner, source_root, config)
        self.logger.debug("Selected %d source files", len(files))

        env = create_environment(config.templates_dir)
        client = self._client or EnrichmentClient(
            config.llm.model, request_timeout=config.llm.request_timeout, debug=config.llm.debug
        )
        renderer = DocumentRenderer(env=env, client=client)
        diagrams = DiagramBuilder(env=env)
        writer = ArtifactWriter(output_root, extension=config.extension, policy=config.write_policy)
        dependencies = DependencyExtractor(config.injection_markers)
        registry = PackageRegistry()
        result = RunResult()

        for path in files:
            try:
                self._process_file(
                    path, parser, dependencies, renderer, writer, registry, config, result
                )
            except Exception as exc:  # pragma: no cover
                self._log_exception(f"Error processing {path}", exc)
                result.failed[path] = str(exc)

        snapshot = registry.snapshot()
        for package in snapshot:
            summary = RenderedArtifact(
                path=writer.summary_path(package),
                content=diagrams.render_package_summary(snapshot, package),
            )
            if not self._write(writer, summary, result):
                result.failed[summary.path] = f"could not write {summary.path}"

        project_diagram = RenderedArtifact(
            path=writer.project_diagram_path(),
            content=diagrams.render_project_diagram(snapshot),
        )
        if not self._write(writer, project_diagram, result):
            result.failed[project_diagram.path] = f"could not write {project_diagram.path}"

        self.logger.info(
            "Documented %d types in %d packages (%d skipped, %d failed)",
            sum(len(names) for names in snapshot.values()),
            len(snapshot),
            len(result.skipped),
            len(result.failed),
        )
        return result

    def build_document(self, unit: SourceUnit, dependencies: DependencyExtractor) -> TypeDocument:
        return TypeDocument(
            name=unit.name,
            package=unit.package,
            description=unit.doc,
            stereotype=self.classifier.classify(unit.annotations),
            methods=unit.methods,
            dependencies=dependencies.extract(unit),
        )

    def _process_file(
        self,
        path: Path,
        parser: SourceParser,
        dependencies: DependencyExtractor,
        renderer: DocumentRenderer,
        writer: ArtifactWriter,
        registry: PackageRegistry,
        config: EldocsConfig,
        result: RunResult,
    ) -> None:
        try:
            unit = parser.parse(path)
        except SourceParseError as exc:
            self.logger.error("%s", exc)
            result.failed[path] = str(exc)
            return
        except (OSError, UnicodeDecodeError) as exc:
            self._log_exception(f"Unable to read {path}", exc)
            result.failed[path] = str(exc)
            return

        if unit is None:
            self.logger.warning("No class or interface found in %s; skipping", path)
            result.skipped.append(path)
            return

        document = self.build_document(unit, dependencies)
        content = renderer.render(document, use_ai=config.use_ai, llm=config.llm)
        artifact = RenderedArtifact(path=writer.type_path(unit.package, unit.name), content=content)
        if not self._write(writer, artifact, result):
            result.failed[path] = f"could not write {artifact.path}"
            return
        registry.register(unit.package, unit.name)
        self.logger.debug("Documented %s as %s", unit.name, document.stereotype.value)

    def _write(self, writer: ArtifactWriter, artifact: RenderedArtifact, result: RunResult) -> bool:
        try:
            written = writer.write(artifact)
        except OSError as exc:
            self._log_exception(f"Failed to write {artifact.path}", exc)
            return False
        result.record_write(artifact.path, written)
        return True

    def _collect_sources(
        self, scanner: SourceScanner, source_root: Path, config: EldocsConfig
    ) -> List[Path]:
        if not config.changed_only:
            return scanner.scan(source_root)
        changed = self.change_detector.changed_files(source_root, config.diff_base)
        self.logger.info("%d files changed since %s", len(changed), config.diff_base)
        return scanner.filter(source_root, changed)

    def _resolve_parser(self) -> SourceParser:
        if self._parser is None:
            from .analyzers.java import JavaSourceParser

            self._parser = JavaSourceParser()
        return self._parser

    def _log_exception(self, message: str, exc: Exception) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.exception("%s: %s", message, exc)
        else:
            self.logger.error("%s: %s", message, exc)


__all__ = ["Orchestrator", "RunResult"]

"""CLI entrypoints for eldocs commands."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

from .config import ConfigError, EldocsConfig, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator, RunResult


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eldocs",
        description="Generate Markdown documentation and package diagrams from Java sources.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Document every type under the source directory.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project root holding .eldocs.yml (defaults to current directory).",
    )
    generate_parser.add_argument("--source-dir", help="Source directory to scan for Java files.")
    generate_parser.add_argument("--output-dir", help="Directory that receives the generated docs.")
    generate_parser.add_argument(
        "--changed-only",
        action="store_true",
        default=None,
        help="Only document files changed since --diff-base.",
    )
    generate_parser.add_argument("--diff-base", help="Revision compared against HEAD in changed-only mode.")
    mode = generate_parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--use-ai",
        dest="use_ai",
        action="store_true",
        default=None,
        help="Render pages through the enrichment service.",
    )
    mode.add_argument(
        "--local",
        dest="use_ai",
        action="store_false",
        default=None,
        help="Render pages from local templates only.",
    )
    generate_parser.add_argument("--api-url", help="Chat completions endpoint for --use-ai.")
    generate_parser.add_argument("--api-key", help="Bearer credential for the enrichment service.")
    generate_parser.add_argument("--model", help="Model name sent to the enrichment service.")
    generate_parser.add_argument(
        "--debug-prompts",
        action="store_true",
        default=None,
        help="Write the generated prompts instead of calling the enrichment service.",
    )
    generate_parser.add_argument("--log-file", type=Path, help="Also write logs to this file.")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing the generate operation.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def build_config(args: argparse.Namespace) -> EldocsConfig:
    """Translate parsed CLI arguments into the pipeline configuration."""
    config = load_config(Path(args.path))
    overrides: dict[str, object] = {}
    if args.source_dir:
        overrides["source_dir"] = Path(args.source_dir)
    if args.output_dir:
        overrides["output_dir"] = Path(args.output_dir)
    if args.changed_only is not None:
        overrides["changed_only"] = args.changed_only
    if args.diff_base:
        overrides["diff_base"] = args.diff_base
    if args.use_ai is not None:
        overrides["use_ai"] = args.use_ai

    llm_overrides: dict[str, object] = {}
    if args.api_url:
        llm_overrides["endpoint"] = args.api_url
    if args.api_key is not None:
        llm_overrides["api_key"] = args.api_key
    if args.model:
        llm_overrides["model"] = args.model
    if args.debug_prompts is not None:
        llm_overrides["debug"] = args.debug_prompts
    if llm_overrides:
        overrides["llm"] = dataclasses.replace(config.llm, **llm_overrides)

    return dataclasses.replace(config, **overrides)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for eldocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=getattr(args, "log_file", None))

    if args.command == "generate":
        try:
            config = build_config(args)
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        try:
            result = Orchestrator().run(config)
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        except RuntimeError as exc:
            parser.exit(1, f"eldocs generate failed: {exc}\nRun with --verbose for more details.\n")
        print(_summarise(result, config.output_path))
        if result.failed:
            parser.exit(2)
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _summarise(result: RunResult, output_root: Path) -> str:
    lines = [
        f"Docs written to {_relativize(output_root)}: "
        f"{len(result.written)} written, {len(result.unchanged)} unchanged, "
        f"{len(result.skipped)} skipped, {len(result.failed)} failed"
    ]
    for path, reason in result.failed.items():
        lines.append(f"  failed: {_relativize(path)} ({reason})")
    return "\n".join(lines)


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])

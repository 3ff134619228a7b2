"""Command-line interface for schedgraph."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from schedgraph.config import LOADER_CONFIG, REPORT_CONFIG
from schedgraph.generate import write_dataset
from schedgraph.graph.io import load_graph_file
from schedgraph.logging import configure_cli_logging, get_logger
from schedgraph.report import analyze_files, format_report

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _collect_inputs(paths: List[Path]) -> List[Path]:
    """Expand directories into their description files, sorted by name."""
    files: List[Path] = []
    for path in paths:
        if path.is_dir():
            found = sorted(
                p
                for p in path.iterdir()
                if p.is_file() and p.suffix.lower() in LOADER_CONFIG.suffixes
            )
            if not found:
                logger.warning(f"No graph files found in {path}")
            files.extend(found)
        else:
            files.append(path)
    return files


def _run(
    paths: List[Path], json_path: Optional[Path], stdout: bool, quiet: bool
) -> None:
    files = _collect_inputs(paths)
    if not files:
        logger.error("No input datasets")
        sys.exit(1)

    start = perf_counter()
    reports = analyze_files(files)
    elapsed = perf_counter() - start
    failed = [r for r in reports if r.error is not None]

    if stdout:
        print(json.dumps([r.to_dict() for r in reports], indent=2))
    elif not quiet:
        for report in reports:
            print(format_report(report))
            print()
        print("=" * REPORT_CONFIG.rule_width)
        print(f"Analyzed {len(reports)} dataset(s) in {_format_duration(elapsed)}")

    if json_path is not None:
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(
            json.dumps([r.to_dict() for r in reports], indent=2), encoding="utf-8"
        )
        logger.info(f"Results written to {json_path}")

    if failed:
        logger.error(f"{len(failed)} of {len(reports)} dataset(s) failed")
        sys.exit(1)


def _inspect(path: Path) -> None:
    try:
        loaded = load_graph_file(path)
    except (OSError, ValueError) as exc:
        logger.error(f"Failed to load {path}: {exc}")
        sys.exit(1)

    graph = loaded.graph
    ind = REPORT_CONFIG.indent
    print(f"Graph: {loaded.name}")
    print(f"{ind}Nodes: {graph.vertex_count}")
    print(f"{ind}Edges: {graph.edge_count}")
    print(f"{ind}Directed: {graph.directed}")
    print(f"{ind}Weight Model: {graph.weight_model}")
    print(f"{ind}Source Node: {loaded.source}")
    print(str(graph))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``schedgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="schedgraph",
        description="Analyze dependency graphs: SCCs, topological order, DAG paths.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect,generate}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Analyze graph datasets")
    run_parser.add_argument(
        "paths", type=Path, nargs="+", help="Graph files or directories"
    )
    run_parser.add_argument(
        "--json", "-j", type=Path, default=None, help="Write results to a JSON file"
    )
    run_parser.add_argument(
        "--stdout", action="store_true", help="Print results as JSON to stdout"
    )

    inspect_parser = subparsers.add_parser("inspect", help="Show a graph summary")
    inspect_parser.add_argument("path", type=Path, help="Graph file")

    gen_parser = subparsers.add_parser("generate", help="Generate a dataset")
    gen_parser.add_argument("output", type=Path, help="Output file")
    gen_parser.add_argument("--n", type=int, required=True, help="Vertex count")
    gen_parser.add_argument(
        "--edges", type=int, required=True, help="Target edge count"
    )
    gen_parser.add_argument(
        "--cycle", action="store_true", help="Seed cyclic SCC structure"
    )
    gen_parser.add_argument(
        "--sccs", type=int, default=1, help="Number of cyclic SCC blocks"
    )
    gen_parser.add_argument(
        "--acyclic", action="store_true", help="Generate a DAG"
    )
    gen_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    gen_parser.add_argument(
        "--description", default=None, help="Comment line written above the JSON"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    configure_cli_logging(verbose=args.verbose, quiet=args.quiet)
    logger.debug("Debug logging enabled")

    if args.command == "run":
        _run(args.paths, args.json, args.stdout, args.quiet)
    elif args.command == "inspect":
        _inspect(args.path)
    elif args.command == "generate":
        try:
            write_dataset(
                args.output,
                args.n,
                args.edges,
                includes_cycle=args.cycle,
                num_sccs=args.sccs,
                seed=args.seed,
                acyclic=args.acyclic,
                description=args.description,
            )
        except ValueError as exc:
            logger.error(f"Cannot generate dataset: {exc}")
            sys.exit(1)


if __name__ == "__main__":
    main()

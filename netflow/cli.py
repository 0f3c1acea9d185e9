"""Command-line interface for netflow."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from netflow.algorithms.max_flow import MaxFlowEngine
from netflow.config import MaxFlowConfig
from netflow.io import NetworkDocument, NetworkFormatError, load_network_document
from netflow.logging import get_logger, set_global_log_level
from netflow.report import format_flow_assignment, format_network, format_result

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[Any]], min_width: int = 6) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [[str(h) for h in headers]] + [[str(item) for item in row] for row in rows]
    col_widths = [
        max(min_width, max(len(row[col_idx]) for row in all_data))
        for col_idx in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(all_data[0])]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in all_data[1:])
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _load_document(path: Path, fmt: str) -> NetworkDocument:
    """Load a network file, exiting with status 1 on any input error."""
    try:
        return load_network_document(path, fmt)
    except FileNotFoundError:
        logger.error(f"Network file not found: {path}")
        print(f"❌ ERROR: Network file not found: {path}")
        sys.exit(1)
    except NetworkFormatError as e:
        logger.error(f"Invalid network file {path}: {e}")
        print(f"❌ ERROR: Invalid network file {path}: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        print(f"❌ ERROR: Failed to read {path}: {e}")
        sys.exit(1)


def _run_network(
    path: Path,
    fmt: str = "auto",
    source: Optional[int] = None,
    sink: Optional[int] = None,
    include_trace: bool = True,
    record_flow_state: bool = True,
    early_exit: bool = False,
    results_path: Optional[Path] = None,
    stdout: bool = False,
) -> None:
    """Compute the max flow of a network file and print the report.

    Args:
        path: Network file.
        fmt: Input format (``auto``, ``text`` or ``yaml``).
        source: Source override; falls back to the document, then node 0.
        sink: Sink override; falls back to the document, then the last node.
        include_trace: Print the algorithm steps.
        record_flow_state: Dump edge flows into the trace after each iteration.
        early_exit: Stop each search once the sink is reached.
        results_path: Optional JSON export of the result.
        stdout: Also print the JSON result.
    """
    document = _load_document(path, fmt)
    network = document.network
    config = MaxFlowConfig(record_flow_state=record_flow_state, stop_at_sink=early_exit)
    source, sink = config.resolve_terminals(
        network.num_nodes,
        source if source is not None else document.source,
        sink if sink is not None else document.sink,
    )

    print(f"Network loaded with {network.num_nodes} nodes.")
    print(format_network(network))
    print("\nRunning Ford-Fulkerson algorithm")

    _start_time = perf_counter()
    try:
        result = MaxFlowEngine(network, config).find_max_flow(source, sink)
    except (TypeError, ValueError) as e:
        print(f"❌ ERROR: Failed to compute max flow: {e}")
        sys.exit(1)
    _elapsed = perf_counter() - _start_time

    print()
    print(format_result(result, include_trace=include_trace))
    print("\n********FINAL FLOW ASSIGNMENT*********")
    for line in format_flow_assignment(network):
        print(line)

    logger.info(f"Max flow computed in {_format_duration(_elapsed)}")

    if results_path is not None or stdout:
        json_str = json.dumps(result.to_dict(), indent=2)
        if results_path is not None:
            logger.info(f"Writing results to: {results_path}")
            try:
                results_path.parent.mkdir(parents=True, exist_ok=True)
                results_path.write_text(json_str)
            except OSError as e:
                logger.error(f"Failed to write results to {results_path}: {e}")
                print(f"❌ ERROR: Failed to write results to {results_path}: {e}")
                sys.exit(1)
            print(f"✅ Results written to: {results_path}")
        if stdout:
            print(json_str)


def _inspect_network(path: Path, fmt: str = "auto") -> None:
    """Print a structural summary of a network file."""
    document = _load_document(path, fmt)
    network = document.network
    edges = network.forward_edges()

    print(f"Network: {path}")
    print(f"   Nodes: {network.num_nodes:,}")
    print(f"   Edges: {len(edges):,}")
    print(f"   Total capacity: {sum(e.capacity for e in edges):,}")
    if document.source is not None or document.sink is not None:
        print(f"   Source: {document.source}  Sink: {document.sink}")

    rows = []
    for node in range(network.num_nodes):
        out_edges = [e for e in edges if e.source == node]
        in_edges = [e for e in edges if e.destination == node]
        rows.append(
            [
                node,
                len(out_edges),
                len(in_edges),
                sum(e.capacity for e in out_edges),
                sum(e.capacity for e in in_edges),
            ]
        )
    print()
    print(_format_table(["Node", "Out", "In", "Out capacity", "In capacity"], rows))

    isolated = [row[0] for row in rows if row[1] == 0 and row[2] == 0]
    if isolated and network.num_nodes > 1:
        print(f"\n   Isolated nodes: {', '.join(str(n) for n in isolated)}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``netflow`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="netflow",
        description="Compute maximum flows with the Edmonds-Karp algorithm.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Compute the max flow of a network")
    run_parser.add_argument("network", type=Path, help="Path to the network file")
    run_parser.add_argument(
        "--source", "-s", type=int, default=None, help="Source node (default: 0)"
    )
    run_parser.add_argument(
        "--sink", "-t", type=int, default=None, help="Sink node (default: last node)"
    )
    run_parser.add_argument(
        "--no-trace", action="store_true", help="Do not print the algorithm steps"
    )
    run_parser.add_argument(
        "--no-flow-state",
        action="store_true",
        help="Omit the per-edge flow dump after each iteration",
    )
    run_parser.add_argument(
        "--early-exit",
        action="store_true",
        help="Stop each breadth-first search once the sink is reached",
    )
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export the result as JSON to this file",
    )
    run_parser.add_argument(
        "--stdout", action="store_true", help="Print the JSON result to stdout"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Summarize a network file without running the algorithm"
    )
    inspect_parser.add_argument("network", type=Path, help="Path to the network file")

    for p in (run_parser, inspect_parser):
        p.add_argument(
            "--format",
            "-f",
            choices=("auto", "text", "yaml"),
            default="auto",
            help="Input format (default: by file suffix)",
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_network(
            path=args.network,
            fmt=args.format,
            source=args.source,
            sink=args.sink,
            include_trace=not args.no_trace,
            record_flow_state=not args.no_flow_state,
            early_exit=args.early_exit,
            results_path=args.results,
            stdout=args.stdout,
        )
    elif args.command == "inspect":
        _inspect_network(args.network, args.format)


if __name__ == "__main__":
    main()

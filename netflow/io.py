"""Reading and writing network descriptions.

Two input formats are supported:

* a line-oriented text format: the first non-blank line holds the node count,
  each further non-blank line one edge as ``source destination capacity``
  (whitespace-separated integers, ``#`` starts a comment);
* a YAML document validated against ``netflow/schemas/network.json``::

      nodes: 4
      source: 0
      sink: 3
      edges:
        - {source: 0, destination: 1, capacity: 3}

Every malformed input raises :class:`NetworkFormatError` before a
:class:`FlowNetwork` is handed to the algorithms.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import jsonschema
import yaml

from netflow.logging import get_logger
from netflow.model import FlowNetwork

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


class NetworkFormatError(ValueError):
    """Malformed network description.

    Attributes:
        line_number: 1-based line of the text input, when known.
        line: Offending line, when known.
    """

    def __init__(
        self, message: str, line_number: Optional[int] = None, line: Optional[str] = None
    ) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


@dataclass(frozen=True)
class NetworkDocument:
    """A parsed network plus the terminals the document names, if any."""

    network: FlowNetwork
    source: Optional[int] = None
    sink: Optional[int] = None


def _strip_comment(line: str) -> str:
    return line.split("#", 1)[0].strip()


def _parse_int(token: str, what: str, line_number: int, line: str) -> int:
    # ASCII digits with an optional sign; int() alone also takes "1_000"
    if not _INT_TOKEN.fullmatch(token):
        raise NetworkFormatError(
            f"{what} '{token}' is not an integer: {line!r}", line_number, line
        )
    return int(token)


def parse_network_lines(lines: Iterable[str]) -> FlowNetwork:
    """Build a network from the lines of the text format.

    Args:
        lines: Iterable of lines; trailing newlines are ignored.

    Returns:
        The populated FlowNetwork with all flows at zero.

    Raises:
        NetworkFormatError: On an empty input, a bad node count, a line that
            does not hold exactly three integers, an out-of-range node index
            or a negative capacity.
    """
    network: Optional[FlowNetwork] = None

    for line_number, raw in enumerate(lines, start=1):
        raw = raw.rstrip("\r\n")
        content = _strip_comment(raw)
        if not content:
            continue

        if network is None:
            num_nodes = _parse_int(content, "Node count", line_number, raw)
            if num_nodes < 1:
                raise NetworkFormatError(
                    f"Node count must be at least 1, got {num_nodes}", line_number, raw
                )
            network = FlowNetwork(num_nodes)
            continue

        tokens = content.split()
        if len(tokens) != 3:
            raise NetworkFormatError(
                f"Invalid edge format, expected 'source destination capacity': {raw!r}",
                line_number,
                raw,
            )
        source = _parse_int(tokens[0], "Source node", line_number, raw)
        destination = _parse_int(tokens[1], "Destination node", line_number, raw)
        capacity = _parse_int(tokens[2], "Capacity", line_number, raw)

        for node in (source, destination):
            if not 0 <= node < network.num_nodes:
                raise NetworkFormatError(
                    f"Invalid node index {node} (network has {network.num_nodes} nodes): {raw!r}",
                    line_number,
                    raw,
                )
        if capacity < 0:
            raise NetworkFormatError(f"Negative capacity in line: {raw!r}", line_number, raw)

        network.add_edge(source, destination, capacity)

    if network is None:
        raise NetworkFormatError("Input is empty; expected the node count on the first line")

    logger.debug(
        "Parsed network with %d nodes and %d edges", network.num_nodes, network.num_edges
    )
    return network


def parse_network(text: str) -> FlowNetwork:
    """Parse the text format from a string."""
    return parse_network_lines(text.splitlines())


def parse_network_file(path: Union[str, Path]) -> FlowNetwork:
    """Parse the text format from a file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        NetworkFormatError: If the content is malformed.
    """
    path = Path(path)
    logger.info(f"Reading network from file: {path}")
    with path.open("r", encoding="utf-8") as fh:
        return parse_network_lines(fh)


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("netflow.schemas")
        .joinpath("network.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_network_yaml(yaml_str: str) -> NetworkDocument:
    """Parse and validate a YAML network document.

    Raises:
        NetworkFormatError: If the YAML is unparsable, violates the schema, or
            refers to nodes outside ``0..nodes-1``.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise NetworkFormatError(f"Invalid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise NetworkFormatError("The network YAML must map to a dictionary at top-level")

    try:
        jsonschema.validate(data, _load_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise NetworkFormatError(f"Invalid network document at {location}: {exc.message}") from exc

    num_nodes = int(data["nodes"])
    network = FlowNetwork(num_nodes)
    for index, entry in enumerate(data.get("edges") or []):
        source = int(entry["source"])
        destination = int(entry["destination"])
        for node in (source, destination):
            if node >= num_nodes:
                raise NetworkFormatError(
                    f"Edge {index} refers to node {node} but the network has {num_nodes} nodes"
                )
        network.add_edge(source, destination, int(entry["capacity"]))

    terminals: Dict[str, Optional[int]] = {}
    for key in ("source", "sink"):
        value = data.get(key)
        if value is not None and value >= num_nodes:
            raise NetworkFormatError(
                f"{key.capitalize()} node {value} is out of range for {num_nodes} nodes"
            )
        terminals[key] = None if value is None else int(value)

    return NetworkDocument(network, terminals["source"], terminals["sink"])


def load_network_document(path: Union[str, Path], fmt: str = "auto") -> NetworkDocument:
    """Load a network file in either supported format.

    Args:
        path: File to read.
        fmt: ``"text"``, ``"yaml"`` or ``"auto"`` (YAML for ``.yaml``/``.yml``
            suffixes, text otherwise).

    Raises:
        ValueError: If ``fmt`` is not recognized.
        FileNotFoundError: If ``path`` does not exist.
        NetworkFormatError: If the content is malformed.
    """
    path = Path(path)
    if fmt == "auto":
        fmt = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "text"
    if fmt == "yaml":
        logger.info(f"Reading YAML network from file: {path}")
        return load_network_yaml(path.read_text(encoding="utf-8"))
    if fmt == "text":
        return NetworkDocument(parse_network_file(path))
    raise ValueError(f"Unknown network format '{fmt}'; expected auto, text or yaml")


def network_to_edgelist(network: FlowNetwork, separator: str = " ") -> List[str]:
    """Render a network in the text format, one string per line.

    Only caller-added edges are written, zero-capacity ones included, so
    ``parse_network_lines(network_to_edgelist(n))`` rebuilds ``n``.
    """
    lines = [str(network.num_nodes)]
    for edge in network.forward_edges():
        lines.append(
            separator.join(str(v) for v in (edge.source, edge.destination, edge.capacity))
        )
    return lines

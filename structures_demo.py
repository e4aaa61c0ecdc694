"""Command line demonstration of the ``algoengine`` data structures.

Each structure runs a fixed, deterministic scenario and prints the canonical
encodings it produces, one ``label: encoding`` line per step. The output is
what the browser visualiser would render for the same sequence of operations,
which makes the script a quick way to eyeball behaviour without a host.

Use ``--structure`` to pick a single scenario and ``--output-format json`` to
emit one JSON object keyed by structure name instead of text.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import json
import logging
import sys
from typing import Callable, Dict, Iterator, List, Sequence, Tuple

from algoengine import AVLTree, BinaryHeap, Graph, HashTable

logger = logging.getLogger(__name__)

Step = Tuple[str, str]


@dataclass(frozen=True)
class DemoCase:
    """A named scenario producing ``(label, encoding)`` steps."""

    name: str
    run: Callable[[], List[Step]]


def _heap_steps() -> List[Step]:
    heap = BinaryHeap(min_heap=True)
    for value in (5, 3, 8, 1):
        heap.insert(value)
    steps = [("min heap", heap.get_array())]
    heap.convert_to_max_heap()
    steps.append(("max heap", heap.get_array()))
    steps.append(("extract top", str(heap.extract_top())))
    steps.append(("after extract", heap.get_array()))
    return steps


def _avl_steps() -> List[Step]:
    tree = AVLTree()
    steps: List[Step] = []
    for value in (10, 20, 30, 40):
        tree.insert(value)
    steps.append(("tree", tree.get_tree()))
    steps.append(("rotation after inserts", tree.get_last_rotation()))
    tree.insert(50)
    tree.remove(10)
    steps.append(("after remove 10", tree.get_tree()))
    steps.append(("rotation after remove", tree.get_last_rotation()))
    return steps


def _graph_steps() -> List[Step]:
    graph = Graph(4)
    for u, v, w in ((0, 1, 1), (1, 2, 2), (0, 2, 5), (2, 3, 1)):
        graph.add_edge(u, v, w)
    return [
        ("matrix", graph.get_matrix()),
        ("bfs 0", graph.bfs(0)),
        ("dfs 0", graph.dfs(0)),
        ("dijkstra 0", graph.dijkstra(0)),
        ("prim", graph.prim_mst()),
        ("without vertex 1", graph.remove_vertex(1).get_matrix()),
    ]


def _hash_steps() -> List[Step]:
    table = HashTable()
    for key, value in ((1, 10), (11, 20), (-3, 5), (1, 99)):
        table.insert(key, value)
    return [
        ("table", table.get_table()),
        ("search 11", str(table.search(11))),
        ("search 7", str(table.search(7))),
    ]


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase(name="heap", run=_heap_steps)
    yield DemoCase(name="avl", run=_avl_steps)
    yield DemoCase(name="graph", run=_graph_steps)
    yield DemoCase(name="hash", run=_hash_steps)


DEMO_NAMES = tuple(case.name for case in _iter_demo_cases())


def collect(structure: str = "all") -> Dict[str, List[Step]]:
    """Run the selected scenarios and return their steps keyed by name."""

    if structure != "all" and structure not in DEMO_NAMES:
        raise ValueError(f"Unknown structure {structure!r}. Choose from {sorted(DEMO_NAMES)}")
    results: Dict[str, List[Step]] = {}
    for case in _iter_demo_cases():
        if structure in ("all", case.name):
            logger.info("Running %s scenario", case.name)
            results[case.name] = case.run()
    return results


def _format_text(results: Dict[str, List[Step]]) -> List[str]:
    lines: List[str] = []
    for name, steps in results.items():
        lines.append(f"== {name}")
        lines.extend(f"{label}: {encoding}" for label, encoding in steps)
    return lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print canonical encodings for the built-in data structure scenarios.",
    )
    parser.add_argument(
        "--structure",
        choices=("all",) + DEMO_NAMES,
        default="all",
        help="Run a single scenario instead of all of them.",
    )
    parser.add_argument(
        "--output-format",
        choices=("text", "json"),
        default="text",
        help="Select whether to print human-readable lines or a JSON object.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the demonstration flow for the selected cases."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        results = collect(args.structure)
    except ValueError as exc:  # pragma: no cover - argparse restricts choices
        logger.error("%s", exc)
        return 2

    if args.output_format == "json":
        payload = {name: dict(steps) for name, steps in results.items()}
        print(json.dumps(payload, sort_keys=True))
    else:
        for line in _format_text(results):
            print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())

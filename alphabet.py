# alphabet.py
# Infers the collation order of an unknown alphabet from a sorted word list.
# Adjacent words give at most one precedence edge each; a min-heap Kahn pass
# turns the edges into a reproducible order.

import heapq
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, NamedTuple, Optional, Sequence, Set, Tuple

import report

Edge = Tuple[str, str]


class FailureKind(Enum):
    PREFIX_CONFLICT = 'prefix_conflict'
    CYCLIC_CONSTRAINT = 'cyclic_constraint'


class PrefixConflictError(Exception):
    """Raised by extract_constraints when a longer word is listed before its own prefix."""

    def __init__(self, earlier: str, later: str):
        self.earlier = earlier
        self.later = later
        super().__init__(
            f'Prefix conflict: "{earlier}" comes before "{later}", '
            f'but "{later}" is a prefix of "{earlier}".'
        )


class AlphabetResult(NamedTuple):
    """Outcome of one inference run.

    On success ``order`` holds every distinct symbol once. On failure ``kind``
    and ``message`` describe why; ``words`` names the conflicting pair for a
    prefix conflict and ``cycle`` lists the symbols of one cycle.
    """
    success: bool
    order: str = ''
    kind: Optional[FailureKind] = None
    message: str = ''
    words: Tuple[str, ...] = ()
    cycle: Tuple[str, ...] = ()

    @classmethod
    def ok(cls, order: str) -> "AlphabetResult":
        return cls(True, order=order)

    @classmethod
    def fail(cls, kind: FailureKind, message: str, words=(), cycle=()) -> "AlphabetResult":
        return cls(False, kind=kind, message=message, words=tuple(words), cycle=tuple(cycle))

    def to_dict(self) -> Dict[str, object]:
        if self.success:
            return {"success": True, "order": self.order}
        data = {"success": False, "kind": self.kind.value, "message": self.message}
        if self.words:
            data["words"] = list(self.words)
        if self.cycle:
            data["cycle"] = list(self.cycle)
        return data


class ConstraintGraph:
    """
    Precedence graph over the symbols of a word list.
      - ConstraintGraph.build(symbols, edges) -> ConstraintGraph
      - successors(symbol) / predecessors(symbol) -> frozenset
      - edges() -> Iterable[(a, b)] in sorted order
      - in_degrees() -> fresh {symbol: count} table
    The graph is not modified after build; linearize works on its own copy of
    the in-degree table.
    """

    __slots__ = ("_succ", "_pred")

    def __init__(self, succ: Dict[str, FrozenSet[str]], pred: Dict[str, FrozenSet[str]]):
        self._succ = succ
        self._pred = pred

    # ---------- Public API ----------
    @classmethod
    def build(cls, symbols: Iterable[str], edges: Iterable[Edge]) -> "ConstraintGraph":
        """Every symbol becomes a node, isolated or not. Repeated edges count once."""
        succ: Dict[str, Set[str]] = {s: set() for s in symbols}
        pred: Dict[str, Set[str]] = {s: set() for s in succ}
        for a, b in edges:
            succ.setdefault(a, set()).add(b)
            pred.setdefault(a, set())
            succ.setdefault(b, set())
            pred.setdefault(b, set()).add(a)
        return cls(
            {s: frozenset(v) for s, v in succ.items()},
            {s: frozenset(v) for s, v in pred.items()},
        )

    @property
    def symbols(self) -> FrozenSet[str]:
        return frozenset(self._succ)

    def successors(self, symbol: str) -> FrozenSet[str]:
        return self._succ[symbol]

    def predecessors(self, symbol: str) -> FrozenSet[str]:
        return self._pred[symbol]

    def edges(self) -> Iterable[Edge]:
        for a in sorted(self._succ):
            for b in sorted(self._succ[a]):
                yield a, b

    def in_degrees(self) -> Dict[str, int]:
        return {s: len(p) for s, p in self._pred.items()}


def collect_symbols(words: Iterable[str]) -> Set[str]:
    """Return every distinct character used in ``words``."""
    symbols = set()
    for w in words:
        symbols.update(w)
    return symbols


def extract_constraints(words: Sequence[str]) -> List[Edge]:
    """
    Compare each pair of adjacent words and return the precedence edges they imply,
    without duplicates, in the order they were first derived.

    Only the first differing position of a pair says anything about the alphabet.
    Raises PrefixConflictError on the first pair where a longer word precedes its
    own prefix; later pairs are not examined.
    """
    edges: List[Edge] = []
    seen = set()
    for w1, w2 in zip(words, words[1:]):
        if len(w1) > len(w2) and w1.startswith(w2):
            raise PrefixConflictError(w1, w2)
        for c1, c2 in zip(w1, w2):
            if c1 == c2:
                continue
            if (c1, c2) not in seen:
                seen.add((c1, c2))
                edges.append((c1, c2))
            break
    return edges


def linearize(graph: ConstraintGraph) -> Tuple[str, List[str]]:
    """Kahn's algorithm, always taking the smallest available symbol (code point order).

    Returns (order, remaining). ``remaining`` is sorted and non-empty only when
    some symbols sit on or behind a cycle.
    """
    indegree = graph.in_degrees()
    available = [s for s, d in indegree.items() if d == 0]
    heapq.heapify(available)

    order = []
    while available:
        current = heapq.heappop(available)
        order.append(current)
        for nxt in graph.successors(current):
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                heapq.heappush(available, nxt)

    placed = set(order)
    remaining = sorted(s for s in indegree if s not in placed)
    return ''.join(order), remaining


def find_cycle(graph: ConstraintGraph, remaining: Iterable[str]) -> List[str]:
    """
    Trace one cycle among symbols linearize could not place.

    Each unplaced symbol still has an unplaced predecessor, so walking
    predecessors from any of them must revisit a symbol. The walk always takes
    the smallest predecessor, and the cycle is returned in precedence order
    starting from its smallest symbol. Returns [] if ``remaining`` is empty.
    """
    pending = set(remaining)
    if not pending:
        return []
    current = min(pending)
    walk = [current]
    index = {current: 0}
    while True:
        current = min(p for p in graph.predecessors(current) if p in pending)
        if current in index:
            cycle = walk[index[current]:]
            break
        index[current] = len(walk)
        walk.append(current)
    cycle.reverse()
    start = cycle.index(min(cycle))
    return cycle[start:] + cycle[:start]


def infer_alphabet_order(words: Sequence[str], verbose: bool = False) -> AlphabetResult:
    """Infer the alphabet order from ``words``, which must already be normalized.

    Never raises for string input: prefix conflicts and cycles come back as
    failed results.
    """
    words = list(words)
    symbols = collect_symbols(words)

    try:
        edges = extract_constraints(words)
    except PrefixConflictError as e:
        return AlphabetResult.fail(FailureKind.PREFIX_CONFLICT, str(e), words=(e.earlier, e.later))

    graph = ConstraintGraph.build(symbols, edges)
    if verbose:
        report.print_graph(graph)

    order, remaining = linearize(graph)
    if remaining:
        cycle = find_cycle(graph, remaining)
        trace = ' -> '.join(cycle + cycle[:1])
        return AlphabetResult.fail(
            FailureKind.CYCLIC_CONSTRAINT,
            f"Cyclic constraint: no valid order exists for the alphabet (cycle: {trace}).",
            cycle=cycle,
        )
    return AlphabetResult.ok(order)

"""Helpers for shaping raw filter mappings into document-store match clauses."""

from typing import Any, Dict, List, Mapping, Optional

from sudoku_profiles.errors import InvalidRequestError

MOVES_FIELD = "moves"
MOVE_STATE_KEYS = ("puzzleCurrentState", "puzzleCurrentNotesState")
DOT = "."


def flatten_dot(
    obj: Mapping[str, Any], *, prefix: str = "", sep: str = DOT
) -> Dict[str, Any]:
    """Flatten nested mappings into dot-path keys.

    Only non-empty mappings are descended into. Lists, scalars and empty
    mappings are kept as leaf values, so ``{"a": {"b": 1, "c": [2]}}`` becomes
    ``{"a.b": 1, "a.c": [2]}``.
    """
    out: Dict[str, Any] = {}
    for key, value in obj.items():
        path = f"{prefix}{sep}{key}" if prefix else str(key)
        if isinstance(value, Mapping) and value:
            out.update(flatten_dot(value, prefix=path, sep=sep))
        else:
            out[path] = value
    return out


def expand_dot(obj: Mapping[str, Any], *, sep: str = DOT) -> Dict[str, Any]:
    """Expand dot-path keys into nested mappings (inverse of flatten_dot).

    Raises:
        InvalidRequestError: If a path collides with a non-mapping value,
            e.g. both ``a=1`` and ``a.b=2``.
    """
    out: Dict[str, Any] = {}
    for key, value in obj.items():
        parts = str(key).split(sep)
        node = out
        for part in parts[:-1]:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise InvalidRequestError(f"conflicting filter key: {key!r}")
            node = child
        leaf = parts[-1]
        if isinstance(node.get(leaf), dict) and not isinstance(value, Mapping):
            raise InvalidRequestError(f"conflicting filter key: {key!r}")
        node[leaf] = value
    return out


def _moves_state_clause(moves: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(moves, Mapping):
        return None
    if not all(k in moves for k in MOVE_STATE_KEYS):
        return None
    return {MOVES_FIELD: {"$elemMatch": {k: moves[k] for k in MOVE_STATE_KEYS}}}


def normalize_filter(query: Optional[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Turn a raw filter mapping into a list of alternative match clauses.

    - An empty filter yields the catch-all clause ``[{}]``.
    - A ``moves`` mapping holding both puzzle state keys becomes one
      ``$elemMatch`` clause against the ``moves`` array; the rest of ``moves``
      is dropped.
    - Whatever fields remain are flattened to dot-paths and appended as one
      more clause, so nested counters such as ``numWrongCellsPlayedPerStrategy``
      match per field instead of as an exact sub-document.

    The caller's mapping is left untouched.
    """
    if not query:
        return [{}]

    remaining = dict(query)
    clauses: List[Dict[str, Any]] = []

    moves_clause = _moves_state_clause(remaining.get(MOVES_FIELD))
    if moves_clause is not None:
        clauses.append(moves_clause)
        del remaining[MOVES_FIELD]

    # must be re-checked after the moves key is gone
    if remaining:
        clauses.append(flatten_dot(remaining))

    return clauses

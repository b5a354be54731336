"""Greedy approximation of the set cover problem."""

import logging
from typing import AbstractSet, Any, Callable, Dict, Hashable, List, Mapping, Optional, Set, TypeVar

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Hashable)
E = TypeVar("E", bound=Hashable)


def greedy_set_cover(
    candidates: Mapping[C, AbstractSet[E]],
    tie_breaker: Optional[Callable[[C], Any]] = None,
) -> List[C]:
    """Select a small subset of candidates whose covered elements add up to those of all candidates.

    In each round the candidate covering the most still uncovered elements is chosen. Among
    candidates covering equally many, the one with the smallest ``tie_breaker`` key wins, so
    the selection never depends on the iteration order of ``candidates``. Candidates that no
    longer add anything are dropped after every round.

    The greedy choice does not guarantee a minimum cover, but every returned candidate
    contributes at least one element no earlier candidate covered.

    Args:
        candidates: Mapping from candidate to the set of elements it covers.
        tie_breaker: Key function ordering candidates with equal gain. Defaults to the
            candidate itself, which then has to be orderable.

    Returns:
        List: The chosen candidates in the order they were selected.

    Example:
        >>> greedy_set_cover({"a": {1, 2, 3}, "b": {2, 3}, "c": {3, 4}})
        ['a', 'c']
    """
    key = tie_breaker if tie_breaker is not None else (lambda candidate: candidate)

    uncovered: Set[E] = set()
    for elements in candidates.values():
        uncovered.update(elements)

    remaining: Dict[C, AbstractSet[E]] = {candidate: elements for candidate, elements in candidates.items() if elements}
    result: List[C] = []

    while uncovered and remaining:
        best = min(remaining, key=lambda candidate: (-len(remaining[candidate] & uncovered), key(candidate)))
        gain = remaining.pop(best) & uncovered
        if not gain:
            break

        logger.debug("Selected %s covering %d more element(s)", best, len(gain))
        result.append(best)
        uncovered -= gain

        remaining = {candidate: elements for candidate, elements in remaining.items() if elements & uncovered}

    return result

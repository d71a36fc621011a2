import logging
from collections import deque

from .expressions import Compound, Term, Variable

__all__ = [
    "term_iterator",
    "fold_term",
    "occurs_check",
    "replace_variable",
]


LOG = logging.getLogger(__name__)


def term_iterator(term, include_level=False, dfs=True, unique=False):
    """
    Iterate traversing the term tree.

    Iterates over the sub-terms of `term`, `term` included, when
    `include_level` is `False`.

    If `include_level` is `True` then the iterated elements are
    `(sub_term, depth_level)`.

    If `dfs` is true the iteration is in DFS order else is in BFS.

    If `unique` is true a sub-term object shared by several parents is
    visited only once.
    """
    stack = deque([(term, 0)])

    if dfs:
        pop = stack.pop
    else:
        pop = stack.popleft

    visited = set()
    while stack:
        current, level = pop()

        if unique:
            if id(current) in visited:
                continue
            visited.add(id(current))

        if isinstance(current, Compound):
            children = current.args
            if dfs:
                children = reversed(children)
            stack.extend((child, level + 1) for child in children)

        if include_level:
            yield current, level
        else:
            yield current


def fold_term(term, leaf_function, compound_function):
    """
    Compute a value bottom-up over the term tree using an explicit stack.

    `leaf_function(term)` is called for every non-compound term and
    `compound_function(compound, args_values)` for every compound term,
    where `args_values` is the tuple of values computed for its
    arguments. Sub-term objects shared by several parents are computed
    once.
    """
    results = dict()
    stack = [(term, False)]
    while stack:
        current, expanded = stack.pop()
        key = id(current)
        if key in results:
            continue
        if not isinstance(current, Compound):
            results[key] = leaf_function(current)
        elif expanded:
            results[key] = compound_function(
                current, tuple(results[id(arg)] for arg in current.args)
            )
        else:
            stack.append((current, True))
            stack.extend(
                (arg, False) for arg in reversed(current.args)
                if id(arg) not in results
            )
    return results[id(term)]


def occurs_check(variable, term):
    """
    Check whether `variable` occurs anywhere in `term`. The check
    compares variable nodes of the tree, `x1` does not occur in `x10`.
    """
    if not isinstance(variable, Variable):
        raise ValueError(f"{variable!r} is not a variable")
    return any(
        sub_term == variable
        for sub_term in term_iterator(term, unique=True)
    )


def replace_variable(term, variable, replacement):
    """
    Replace every occurrence of `variable` in `term` by `replacement`.
    Sub-terms without occurrences of `variable` are kept as they are.
    """
    if not isinstance(replacement, Term):
        raise ValueError(f"{replacement!r} is not a term")

    def replace_leaf(leaf):
        if leaf == variable:
            return replacement
        return leaf

    def replace_compound(compound, args):
        if all(new is old for new, old in zip(args, compound.args)):
            return compound
        return Compound(compound.functor, args)

    return fold_term(term, replace_leaf, replace_compound)

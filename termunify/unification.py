"""
Syntactic unification of first-order terms.

A substitution is a `dict` mapping `Variable` to `Term`. Its insertion
order matters: it is applied sequentially, one binding at a time, in
that order.
"""
import logging

from .config import config
from .exceptions import (
    ConstantOrEmptyMismatch,
    FunctorMismatch,
    OccursCheckFailure,
    ResourceExhaustion,
    UnexpectedTermError,
    UnificationError,
)
from .expression_walker import occurs_check, replace_variable
from .expressions import (
    EMPTY,
    REST,
    Compound,
    Constant,
    Variable,
    classify,
    is_empty,
)

__all__ = [
    "decompose",
    "apply_substitution",
    "compose_substitutions",
    "resolve_substitution",
    "substitution_size",
    "most_general_unifier",
    "unify",
    "unify_pair",
]


LOG = logging.getLogger(__name__)


def decompose(compound):
    """
    Split a compound term in its first argument, the head, and a
    synthetic `rest` term wrapping the remaining arguments, the tail.

    The head of a compound term without arguments is the empty term.

    Parameters
    ----------
    compound : Compound
        term to decompose.

    Returns
    -------
    tuple of Term
        `(head, tail)`.

    Raises
    ------
    UnexpectedTermError
        if `compound` is not a compound term.
    """
    if not isinstance(compound, Compound):
        raise UnexpectedTermError(
            f"Only compound terms can be decomposed, got {compound!r}"
        )
    if compound.arity == 0:
        return EMPTY, Compound(REST, ())
    return compound.args[0], Compound(REST, compound.args[1:])


def apply_substitution(term, substitution):
    """
    Replace the variables bound in `substitution` by their bound terms.

    The bindings are applied one at a time, in insertion order, each
    one on the term rewritten by the previous ones. Hence
    `apply_substitution(x, {x: y, y: a})` is `a`.
    """
    for variable, value in substitution.items():
        if not isinstance(variable, Variable):
            raise UnexpectedTermError(
                f"Only variables can be substituted, got {variable!r}"
            )
        term = replace_variable(term, variable, value)
    return term


def compose_substitutions(subs1, subs2):
    """
    Union of both substitutions, the bindings of `subs1` first. If both
    bind the same variable the binding of `subs2` is kept. The terms
    bound in `subs1` are not rewritten by `subs2`.
    """
    res = subs1.copy()
    res.update(subs2)
    return res


def resolve_substitution(term, substitution):
    """
    Apply `substitution` to `term` until a fixed point is reached.

    Raises
    ------
    UnificationError
        if `substitution` is cyclic and no fixed point exists.
    """
    for _ in range(len(substitution) + 2):
        new_term = apply_substitution(term, substitution)
        if new_term == term:
            return new_term
        term = new_term
    raise UnificationError(
        f"The substitution has no fixed point on {term}"
    )


def substitution_size(substitution):
    """
    Size of the substitution: one node per bound variable plus the size
    of each bound term.
    """
    return sum(1 + value.size for value in substitution.values())


def most_general_unifier(
    term_a, term_b, max_substitution_size=None, max_pending_pairs=None
):
    """
    Obtain the most general unifier (MGU) between two terms.

    The pair is solved by case analysis, in this order:

    1. identical terms are unified by the empty substitution;
    2. if either term is the empty term, or a constant facing anything
       but a variable, unification fails;
    3. if `term_a` is a variable not occurring in `term_b`, it is bound
       to `term_b`;
    4. symmetrically if `term_b` is a variable;
    5. two compound terms with the same functor are decomposed in head
       and tail, the heads are unified, the resulting substitution is
       applied to both tails and the tails are unified.

    Pairs waiting to be unified are kept in an explicit stack, the head
    pair on top of the tail pair, and each new binding is applied to all
    of them. This gives the same bindings, in the same order, as
    composing the unifier of the heads with the unifier of the
    substituted tails.

    Parameters
    ----------
    term_a, term_b : Term
        terms to unify.
    max_substitution_size : int, optional
        upper bound for `substitution_size` of the unifier, defaults to
        the configured one.
    max_pending_pairs : int, optional
        upper bound for the number of pairs waiting to be unified,
        defaults to the configured one.

    Returns
    -------
    dict
        the unifier, mapping variables to terms in binding order.

    Raises
    ------
    ConstantOrEmptyMismatch, OccursCheckFailure, FunctorMismatch
        if the terms are not unifiable.
    ResourceExhaustion
        if one of the bounds is exceeded or memory is exhausted.
    """
    classify(term_a)
    classify(term_b)
    if max_substitution_size is None:
        max_substitution_size = config.get_max_substitution_size()
    if max_pending_pairs is None:
        max_pending_pairs = config.get_max_pending_pairs()

    try:
        substitution = _most_general_unifier_pending(
            term_a, term_b, max_substitution_size, max_pending_pairs
        )
    except MemoryError as e:
        raise ResourceExhaustion(
            "Memory exhausted while unifying terms"
        ) from e

    LOG.debug(
        "Unifier with %d bindings of size %d",
        len(substitution), substitution_size(substitution)
    )
    return substitution


unify = most_general_unifier


def unify_pair(terms_pair, **kwargs):
    term_a, term_b = terms_pair
    return most_general_unifier(term_a, term_b, **kwargs)


def _most_general_unifier_pending(
    term_a, term_b, max_substitution_size, max_pending_pairs
):
    substitution = dict()
    size = 0
    pending = [(term_a, term_b)]
    while pending:
        term_a, term_b = pending.pop()
        if term_a == term_b:
            continue
        elif _is_clash(term_a, term_b):
            raise ConstantOrEmptyMismatch(term_a, term_b)
        elif isinstance(term_a, Variable):
            variable, value = term_a, term_b
        elif isinstance(term_b, Variable):
            variable, value = term_b, term_a
        else:
            _push_decomposed_pairs(term_a, term_b, pending)
            if len(pending) > max_pending_pairs:
                raise ResourceExhaustion(
                    f"More than {max_pending_pairs} pairs of terms "
                    "pending unification"
                )
            continue

        if occurs_check(variable, value):
            raise OccursCheckFailure(variable, value)

        LOG.debug("Binding %s to a term of size %d", variable, value.size)
        substitution[variable] = value
        size += 1 + value.size
        if size > max_substitution_size:
            raise ResourceExhaustion(
                f"Substitution size {size} exceeds {max_substitution_size}"
            )

        pending = [
            (
                replace_variable(pending_a, variable, value),
                replace_variable(pending_b, variable, value)
            )
            for pending_a, pending_b in pending
        ]
    return substitution


def _is_clash(term_a, term_b):
    if is_empty(term_a) or is_empty(term_b):
        return True
    return (
        isinstance(term_a, Constant) and not isinstance(term_b, Variable) or
        isinstance(term_b, Constant) and not isinstance(term_a, Variable)
    )


def _push_decomposed_pairs(term_a, term_b, pending):
    if term_a.functor != term_b.functor:
        raise FunctorMismatch(term_a, term_b)
    head_a, tail_a = decompose(term_a)
    head_b, tail_b = decompose(term_b)
    pending.append((tail_a, tail_b))
    pending.append((head_a, head_b))

"""Terms of first-order logic and their structural classification."""
import enum
import logging

from .exceptions import UnexpectedTermError

__all__ = [
    'Term', 'Variable', 'Constant', 'Compound',
    'EMPTY', 'REST', 'TermKind', 'classify', 'is_empty'
]


LOG = logging.getLogger(__name__)


class TermKind(enum.Enum):
    VARIABLE = 'variable'
    CONSTANT = 'constant'
    COMPOUND = 'compound'
    EMPTY = 'empty'


class Term:
    """
    Base class of every term. It guarantees a set of properties for
    every instance:

    * Terms are immutable and hashable. The hash is computed once, at
      construction, from the already computed hashes of the arguments.
    * Terms have a `size` attribute holding the number of nodes of the
      term tree, counting shared sub-terms once per occurrence.
    * `str(term)` produces the textual syntax `functor(arg, arg, ...)`
      which `termunify.syntax.parser` reads back.
    """

    def __init__(self, *args, **kwargs):
        raise TypeError("Term can not be instantiated")

    def __hash__(self):
        return self._hash


class Variable(Term):
    """Variable, two variables are the same iff their names are equal."""

    def __init__(self, name):
        self.name = name
        self.size = 1
        self._hash = hash((Variable, name))

    def __eq__(self, other):
        return isinstance(other, Variable) and other.name == self.name

    __hash__ = Term.__hash__

    def __repr__(self):
        return 'V{{{}}}'.format(self.name)

    def __str__(self):
        return self.name


class Constant(Term):
    """Atomic symbol without arguments which is not a variable."""

    def __init__(self, name):
        self.name = name
        self.size = 1
        self._hash = hash((Constant, name))

    def __eq__(self, other):
        return isinstance(other, Constant) and other.name == self.name

    __hash__ = Term.__hash__

    def __repr__(self):
        return 'C{{{}}}'.format(self.name)

    def __str__(self):
        return self.name


class _RestFunctor:
    """
    Functor of the synthetic term wrapping the remaining arguments of a
    decomposed compound term. It is not a string, so it is never equal
    to the functor of a parsed term.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'rest'

    def __reduce__(self):
        return (_RestFunctor, ())


REST = _RestFunctor()


class Compound(Term):
    """Functor applied to an ordered tuple of argument terms."""

    def __init__(self, functor, args):
        args = tuple(args)
        for arg in args:
            if not isinstance(arg, Term) or arg is EMPTY:
                raise UnexpectedTermError(
                    f"Argument {arg!r} of {functor} is not a term"
                )
        self.functor = functor
        self.args = args
        self.size = 1 + sum(arg.size for arg in args)
        self._hash = hash((Compound, functor, args))

    __hash__ = Term.__hash__

    @property
    def arity(self):
        return len(self.args)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Compound):
            return False

        seen = set()
        stack = [(self, other)]
        while stack:
            left, right = stack.pop()
            if left is right:
                continue
            if hash(left) != hash(right) or left.size != right.size:
                return False
            if isinstance(left, Compound) and isinstance(right, Compound):
                key = (id(left), id(right))
                if key in seen:
                    continue
                seen.add(key)
                if (
                    left.functor != right.functor or
                    len(left.args) != len(right.args)
                ):
                    return False
                stack.extend(zip(left.args, right.args))
            elif not left == right:
                return False
        return True

    def __repr__(self):
        from .expression_walker import fold_term
        return fold_term(
            self, repr,
            lambda compound, args: 'λ{{{}}}({})'.format(
                compound.functor, ', '.join(args)
            )
        )

    def __str__(self):
        from .expression_walker import fold_term
        return fold_term(
            self, str,
            lambda compound, args: '{}({})'.format(
                compound.functor, ', '.join(args)
            )
        )


class _Empty(Term):
    """
    Sentinel for an exhausted argument list. It is produced as the head
    of the decomposition of a compound term without arguments.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        self.size = 0
        self._hash = hash(_Empty)

    def __eq__(self, other):
        return self is other

    __hash__ = Term.__hash__

    def __repr__(self):
        return 'EMPTY'

    def __str__(self):
        return ''


EMPTY = _Empty()


def classify(term):
    """
    Classify a term as a variable, a constant, a compound term
    or the empty sentinel.

    Parameters
    ----------
    term : Term
        term to classify.

    Returns
    -------
    TermKind
        the kind of the term.

    Raises
    ------
    UnexpectedTermError
        if `term` is not a term.
    """
    if term is EMPTY:
        return TermKind.EMPTY
    elif isinstance(term, Variable):
        return TermKind.VARIABLE
    elif isinstance(term, Constant):
        return TermKind.CONSTANT
    elif isinstance(term, Compound):
        return TermKind.COMPOUND
    raise UnexpectedTermError(f"{term!r} is not a term")


def is_empty(term):
    return term is EMPTY

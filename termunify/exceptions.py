class TermUnifyException(Exception):
    """Base class for termunify Exceptions"""

    pass


class UnexpectedTermError(TermUnifyException):
    """
    An operation received a term of a kind it can not process, such as
    asking for the head and tail of a variable.
    """

    pass


class UnificationError(TermUnifyException):
    """
    Base class for the failures of the unification algorithm. A failure
    anywhere in the unification of two terms aborts the whole call, there
    is no partial unifier.
    """

    pass


class ConstantOrEmptyMismatch(UnificationError):
    """
    The terms are different constants, a constant and a compound term,
    or one of them is the empty term.

    The empty term is produced when the arguments of one of the compound
    terms are exhausted before the ones of the other, which means that
    both terms have a different arity.

    Examples
    --------
    unify(a, b)
    unify(f(a), f(b))
    unify(h(x1), h(x1, x2))
    """

    def __init__(self, term_a, term_b):
        super().__init__(
            "Unification failed, different constant or empty terms: "
            f"{term_a}, {term_b}"
        )
        self.term_a = term_a
        self.term_b = term_b


class OccursCheckFailure(UnificationError):
    """
    A variable would have to be bound to a term containing itself. Such
    a binding would describe an infinite term.

    Examples
    --------
    unify(x1, f(x1, x1))

    `x1` can not be bound to `f(x1, x1)` as `x1` occurs in it.
    """

    def __init__(self, variable, term):
        super().__init__(
            f"Unification failed, {variable} occurs in {term}"
        )
        self.variable = variable
        self.term = term


class FunctorMismatch(UnificationError):
    """
    Two compound terms have different functors.

    Examples
    --------
    unify(f(x1), g(x1))
    """

    def __init__(self, term_a, term_b):
        super().__init__(
            f"Unification failed, different functors: {term_a}, {term_b}"
        )
        self.term_a = term_a
        self.term_b = term_b


class InvalidGeneratorParameter(TermUnifyException, ValueError):
    """
    The size of the benchmark terms pair must be an integer greater
    than 0.
    """

    def __init__(self, n):
        super().__init__(f"n must be greater than 0, got {n!r}")
        self.n = n


class ResourceExhaustion(TermUnifyException):
    """
    The unification exceeded one of the configured resource bounds,
    either the total size of the substitution being built or the number
    of pending pairs of terms to unify, or the interpreter ran out of
    memory.

    The bounds are set in the `UNIFICATION` section of the configuration
    file and can be overridden on each call to `most_general_unifier`.
    """

    pass


class TermParseException(TermUnifyException):
    """
    The text could not be parsed as a term.

    Examples
    --------
    h(x1, y1
    h(x1,, y1)
    foo

    The last example fails because a bare token must be either a
    variable, one letter followed by digits, or a constant, a single
    letter.
    """

    def __init__(self, message, line=None, column=None):
        super().__init__(message)
        self.line = line
        self.column = column

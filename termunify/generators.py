"""
Generator of the classical pair of terms whose most general unifier has
a size exponential in the number of variables.

For `n = 2` the pair is::

    h(x1, x2, f(y0, y0), f(y1, y1), y2)
    h(f(x0, x0), f(x1, x1), y1, y2, x2)

and unifying it binds `x2` and `y2` to `f(f(x0, x0), f(x0, x0))` and
`f(f(y0, y0), f(y0, y0))` respectively: every new `x_i` and `y_i` is
bound to a term twice the size of the previous one.
"""
import numbers

from .exceptions import InvalidGeneratorParameter
from .expressions import Compound, Variable

__all__ = ["generate_benchmark_pair", "generate_benchmark_text_pair"]


def generate_benchmark_pair(n):
    """
    Build the pathological pair of terms of size `n`.

    Parameters
    ----------
    n : int
        number of `x_i` and of `y_i` variables, both terms have arity
        `2 * n + 1`.

    Returns
    -------
    tuple of Compound
        `(h(x1, ..., xn, f(y0, y0), ..., f(y(n-1), y(n-1)), yn),
        h(f(x0, x0), ..., f(x(n-1), x(n-1)), y1, ..., yn, xn))`

    Raises
    ------
    InvalidGeneratorParameter
        if `n` is not an integer greater than 0.
    """
    _check_size(n)

    x_variables = [Variable(f"x{i}") for i in range(n + 1)]
    y_variables = [Variable(f"y{i}") for i in range(n + 1)]
    f_x_functions = [Compound("f", (x, x)) for x in x_variables[:-1]]
    f_y_functions = [Compound("f", (y, y)) for y in y_variables[:-1]]

    term1 = Compound(
        "h", x_variables[1:] + f_y_functions + [y_variables[-1]]
    )
    term2 = Compound(
        "h", f_x_functions + y_variables[1:] + [x_variables[-1]]
    )
    return term1, term2


def generate_benchmark_text_pair(n):
    """Textual syntax of the pair built by `generate_benchmark_pair`."""
    term1, term2 = generate_benchmark_pair(n)
    return str(term1), str(term2)


def _check_size(n):
    if (
        isinstance(n, bool) or
        not isinstance(n, numbers.Integral) or
        n < 1
    ):
        raise InvalidGeneratorParameter(n)

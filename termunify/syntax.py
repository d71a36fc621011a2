"""
Textual syntax of terms.

Compound terms are written `functor(arg, arg, ...)`, variables are one
letter followed by one or more digits, `x1`, and constants a single
letter, `a`. Whitespace is ignored.
"""
import logging
import re

from lark import Lark, Transformer
from lark.exceptions import UnexpectedEOF, UnexpectedInput, VisitError

from .exceptions import (
    ResourceExhaustion,
    TermParseException,
    TermUnifyException,
)
from .expressions import Compound, Constant, Variable

__all__ = ["parser", "parse_terms_pair", "COMPILED_GRAMMAR"]


LOG = logging.getLogger(__name__)


GRAMMAR = u"""
?start : term

?term : compound
      | atom

compound : NAME "(" [ arguments ] ")"
arguments : term ("," term)*

atom : NAME

NAME : /[A-Za-z_][A-Za-z0-9_]*/

%import common.WS
%ignore WS
"""

VARIABLE_RE = re.compile(r"^[A-Za-z][0-9]+$")
CONSTANT_RE = re.compile(r"^[A-Za-z]$")


COMPILED_GRAMMAR = Lark(GRAMMAR, parser='lalr')


class TermTransformer(Transformer):
    def compound(self, ast):
        functor = ast[0]
        arguments = ast[1] if len(ast) > 1 else None
        if arguments is None:
            arguments = tuple()
        return Compound(functor.value, arguments)

    def arguments(self, ast):
        return tuple(ast)

    def atom(self, ast):
        token = ast[0]
        if VARIABLE_RE.match(token.value):
            return Variable(token.value)
        elif CONSTANT_RE.match(token.value):
            return Constant(token.value)
        raise TermParseException(
            f"{token.value!r} is neither a variable nor a constant",
            line=token.line - 1, column=token.column - 1
        )


def parser(code):
    """
    Parse the textual representation of a term.

    Parameters
    ----------
    code : str
        text of the term, e.g. `"h(x1, f(y0, y0), y1)"`.

    Returns
    -------
    Term
        the term tree.

    Raises
    ------
    TermParseException
        if `code` is not a well formed term.
    ResourceExhaustion
        if the term is too deeply nested to be transformed.
    """
    code = code.strip()
    try:
        tree = COMPILED_GRAMMAR.parse(code)
    except UnexpectedEOF as ex:
        raise TermParseException(
            f"Unexpected end of term, expected one of {sorted(ex.expected)}"
        ) from None
    except UnexpectedInput as ex:
        if getattr(ex, "pos_in_stream", None) is not None:
            err = ex.get_context(code, span=40)
        else:
            err = str(ex)
        line, column = _error_position(ex)
        raise TermParseException(
            "\n" + err, line=line, column=column
        ) from None

    try:
        term = TermTransformer().transform(tree)
    except VisitError as ex:
        if isinstance(ex.orig_exc, TermUnifyException):
            raise ex.orig_exc from None
        elif isinstance(ex.orig_exc, RecursionError):
            raise ResourceExhaustion(
                "Term nesting too deep to be parsed"
            ) from ex.orig_exc
        raise
    except RecursionError as ex:
        raise ResourceExhaustion(
            "Term nesting too deep to be parsed"
        ) from ex
    LOG.debug("Parsed term of size %d", term.size)
    return term


def parse_terms_pair(code1, code2):
    return parser(code1), parser(code2)


def _error_position(ex):
    line = getattr(ex, "line", None)
    column = getattr(ex, "column", None)
    if not isinstance(line, int) or not isinstance(column, int):
        return None, None
    return line - 1, column - 1

"""
termunify
=========
First-order syntactic unification of terms with occurs-check, and the
classical pair of terms with an exponentially sized unifier.
"""
from .exceptions import (
    ConstantOrEmptyMismatch,
    FunctorMismatch,
    InvalidGeneratorParameter,
    OccursCheckFailure,
    ResourceExhaustion,
    TermParseException,
    TermUnifyException,
    UnexpectedTermError,
    UnificationError,
)
from .expressions import (
    EMPTY,
    REST,
    Compound,
    Constant,
    Term,
    TermKind,
    Variable,
    classify,
    is_empty,
)
from .generators import generate_benchmark_pair, generate_benchmark_text_pair
from .syntax import parse_terms_pair, parser
from .unification import (
    apply_substitution,
    compose_substitutions,
    decompose,
    most_general_unifier,
    resolve_substitution,
    substitution_size,
    unify,
    unify_pair,
)
from .version import __version__

__all__ = [
    "Term", "Variable", "Constant", "Compound", "EMPTY", "REST",
    "TermKind", "classify", "is_empty",
    "decompose", "apply_substitution", "compose_substitutions",
    "resolve_substitution", "substitution_size",
    "most_general_unifier", "unify", "unify_pair",
    "generate_benchmark_pair", "generate_benchmark_text_pair",
    "parser", "parse_terms_pair",
    "TermUnifyException", "UnificationError", "ConstantOrEmptyMismatch",
    "OccursCheckFailure", "FunctorMismatch", "InvalidGeneratorParameter",
    "ResourceExhaustion", "TermParseException", "UnexpectedTermError",
    "__version__",
]

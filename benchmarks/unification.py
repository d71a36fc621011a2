import logging

from termunify import (
    generate_benchmark_pair,
    most_general_unifier,
    substitution_size,
)
from termunify.config import config
from termunify.utils import log_performance

LOG = logging.getLogger(__name__)


def run_benchmark(n, **kwargs):
    """
    Generate the pathological pair of size `n` and unify it once,
    logging the elapsed time. Unification errors are not caught.
    """
    term1, term2 = generate_benchmark_pair(n)
    with log_performance(
        LOG, "Unification with n = %d", init_args=(n,),
        end_message="Finished unification, elapsed time %2.4fs"
    ):
        substitution = most_general_unifier(term1, term2, **kwargs)
    return substitution


class TimeUnifyBenchmarkPair:
    params = [config.get_benchmark_sizes()]

    param_names = ['n']

    timeout = 10 * 60

    def setup(self, n):
        self.terms_pair = generate_benchmark_pair(n)

    def time_unify(self, n):
        most_general_unifier(*self.terms_pair)


class TrackSubstitutionSize:
    params = [config.get_benchmark_sizes()]

    param_names = ['n']

    unit = 'nodes'

    def track_substitution_size(self, n):
        return substitution_size(run_benchmark(n))

import configparser
import logging
import os
import sys

LOG = logging.getLogger(__name__)


class TermUnifyConfigParser(configparser.ConfigParser):
    def get_max_substitution_size(self):
        """
        Upper bound on the total size of a unifier, counted as one node
        per bound variable plus the size of its bound term.
        """
        return self.getint(
            "UNIFICATION", "max_substitution_size", fallback=10000000
        )

    def set_max_substitution_size(self, size):
        self._set_positive_int("UNIFICATION", "max_substitution_size", size)

    def get_max_pending_pairs(self):
        """
        Upper bound on the number of pairs of terms waiting to be unified.
        """
        return self.getint(
            "UNIFICATION", "max_pending_pairs", fallback=1000000
        )

    def set_max_pending_pairs(self, pairs):
        self._set_positive_int("UNIFICATION", "max_pending_pairs", pairs)

    def get_benchmark_sizes(self):
        sizes = self.get("BENCHMARK", "sizes", fallback="1,2,4,8")
        return [int(size) for size in sizes.split(",") if size.strip()]

    def set_benchmark_sizes(self, sizes):
        sizes = list(sizes)
        if any(int(size) < 1 for size in sizes):
            raise ValueError("Benchmark sizes must be greater than 0")
        self._ensure_section("BENCHMARK")
        LOG.info(f"Setting new benchmark sizes : {sizes}")
        self.set("BENCHMARK", "sizes", ",".join(str(s) for s in sizes))

    def _set_positive_int(self, section, option, value):
        if int(value) < 1:
            raise ValueError(f"The {option} option should be greater than 0")
        self._ensure_section(section)
        LOG.info(f"Setting new {option} : {value}")
        self.set(section, option, str(int(value)))

    def _ensure_section(self, section):
        if not self.has_section(section):
            self.add_section(section)


config = TermUnifyConfigParser()

config_dirs = [
    os.path.join(sys.prefix, "config"),
    os.path.dirname(os.path.realpath(__file__)),
]
for d in config_dirs:
    config_file = os.path.join(d, "config.ini")
    if os.path.isfile(config_file):
        LOG.info(f"Reading configuration file for termunify: {config_file}")
        config.read(config_file)
        LOG.info(f"Read config file with sections {config.sections()}")
        break

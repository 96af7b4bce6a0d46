"""
runa: edit distance and optimal alignment under pluggable cost models,
in exponential, quadratic and linear memory.
"""
from runa.core.alphabet import Alphabet, AlphabetError
from runa.core.metric import MetricSpace, MetricSpaceError, UnitMetricSpace, MatrixMetricSpace
from runa.align.alignment import Align, AlignError, alignment_cost, cout_align
from runa.align.distance import dist_naif, dist_1, dist_2
from runa.align.solution import sol_1, prog_dyn
from runa.align.linear import coupure, sol_2
from runa.align.engine import distance
from runa.dna import DNA, DnaMetricSpace, DnaBlock
from runa.utils.resources import RESOURCES, RunaWarning, PerformanceWarning, DependencyWarning, ConfigError

__version__ = '0.1.0'

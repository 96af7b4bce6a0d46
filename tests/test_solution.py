import numpy as np
from runa.align.alignment import Align
from runa.align.distance import dist_dp_full, dist_2
from runa.align.solution import sol_1, sol_1_tab, prog_dyn
from runa.core.alphabet import Alphabet
from runa.core.metric import MetricSpace, MatrixMetricSpace, UnitMetricSpace
from runa.dna import DNA


def random_pairs(seed, count, max_len):
    rng = np.random.default_rng(seed)
    for _ in range(count):
        x = ''.join(rng.choice(list('ACGT'), size=rng.integers(0, max_len + 1)))
        y = ''.join(rng.choice(list('ACGT'), size=rng.integers(0, max_len + 1)))
        yield x, y


class DotGap(MetricSpace):
    GAP = '.'
    def sub(self, a, b): return 0 if a == b else 1


class TestSol1:
    def test_dna_instance(self):
        aln = sol_1('TATATGAGTC', 'TATTT', DNA)
        assert aln.cost(DNA) == 10
        assert aln.strip() == (list('TATATGAGTC'), list('TATTT'))

    def test_empty_sides(self):
        assert sol_1('', '', DNA) == Align()
        assert sol_1('', 'AC', DNA) == Align('--', 'AC')
        assert sol_1('AC', '', DNA) == Align('AC', '--')

    def test_prefers_diagonal(self):
        assert sol_1('ab', 'ba', UnitMetricSpace()) == Align('ab', 'ba')

    def test_prefers_insertion_over_deletion(self):
        space = MatrixMetricSpace.build(Alphabet('AB'), mismatch=5)
        assert sol_1('A', 'B', space) == Align('A-', '-B')

    def test_never_pairs_two_gaps(self):
        for x, y in random_pairs(5, 20, 20):
            assert all(not (a == '-' and b == '-') for a, b in sol_1(x, y, DNA))

    def test_optimal_and_valid(self):
        for x, y in random_pairs(17, 30, 25):
            aln = sol_1(x, y, DNA)
            assert aln.strip() == (list(x), list(y))
            assert aln.cost(DNA) == dist_2(x, y, DNA)

    def test_generic_space(self):
        space = UnitMetricSpace()
        aln = sol_1('kitten', 'sitting', space)
        assert aln.cost(space) == 3
        assert aln.strip() == (list('kitten'), list('sitting'))

    def test_model_gap(self):
        aln = sol_1('AC', 'A', DotGap())
        assert aln == Align('AC', 'A.')
        assert aln.gap == '.'
        assert aln.strip() == (list('AC'), list('A'))
        assert aln.cigar() == '1M1D'


class TestSol1Tab:
    def test_reuses_table(self):
        x, y = 'GATTACA', 'GCATGCT'
        table = dist_dp_full(x, y, DNA)
        assert sol_1_tab(x, y, table, DNA) == sol_1(x, y, DNA)
        assert sol_1_tab(x, y, table, DNA).cost(DNA) == table[-1, -1]


class TestProgDyn:
    def test_cost_and_alignment(self):
        assert prog_dyn('abc', 'ac', UnitMetricSpace()) == (1, Align('abc', 'a-c'))

    def test_dna_instance(self):
        cost, aln = prog_dyn('TATATGAGTC', 'TATTT', DNA)
        assert cost == 10
        assert type(cost) is int
        assert aln == sol_1('TATATGAGTC', 'TATTT', DNA)

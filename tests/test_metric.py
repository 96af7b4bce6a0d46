import math

import numpy as np
import pytest
from runa.core.alphabet import Alphabet, AlphabetError
from runa.core.metric import MetricSpace, MetricSpaceError, UnitMetricSpace, MatrixMetricSpace, has_kernel


class TestUnitMetricSpace:
    def test_costs(self):
        space = UnitMetricSpace()
        assert space.sub('a', 'a') == 0
        assert space.sub('a', 'b') == 1
        assert space.INS == space.DEL == 1
        assert space.ZERO_COST == 0
        assert space.GAP == '-'

    def test_any_hashable_elements(self):
        assert UnitMetricSpace().sub(('x', 1), ('x', 1)) == 0

    def test_infinity_absorbs(self):
        space = UnitMetricSpace()
        assert space.INF_COST + 10 == space.INF_COST
        assert min(space.INF_COST, 3) == 3
        assert math.isinf(space.INF_COST)

    def test_abstract(self):
        with pytest.raises(TypeError):
            MetricSpace()


class TestMatrixMetricSpace:
    def test_build(self):
        space = MatrixMetricSpace.build(Alphabet('ACGT'), mismatch=3, ins=2, dele=5)
        assert space.sub('A', 'A') == 0
        assert space.sub('A', 'C') == 3
        assert (space.INS, space.DEL) == (2, 5)
        assert isinstance(space.sub('A', 'C'), int)

    def test_matrix_is_read_only(self):
        space = MatrixMetricSpace.build(Alphabet('AB'))
        with pytest.raises(ValueError):
            space.matrix[0, 1] = 7

    def test_encode(self):
        space = MatrixMetricSpace.build(Alphabet('AB'))
        np.testing.assert_array_equal(space.encode('BAB'), [1, 0, 1])

    def test_not_square(self):
        with pytest.raises(MetricSpaceError, match="square"):
            MatrixMetricSpace(Alphabet('AB'), [[0, 1, 1], [1, 0, 1]])

    def test_wrong_size(self):
        with pytest.raises(MetricSpaceError, match="alphabet"):
            MatrixMetricSpace(Alphabet('ABC'), [[0, 1], [1, 0]])

    def test_non_zero_diagonal(self):
        with pytest.raises(MetricSpaceError, match="nothing"):
            MatrixMetricSpace(Alphabet('AB'), [[1, 1], [1, 0]])

    def test_negative_costs(self):
        with pytest.raises(MetricSpaceError, match="non-negative"):
            MatrixMetricSpace(Alphabet('AB'), [[0, -1], [1, 0]])
        with pytest.raises(MetricSpaceError, match="Insertion"):
            MatrixMetricSpace(Alphabet('AB'), [[0, 1], [1, 0]], ins=-1)

    def test_float_costs(self):
        with pytest.raises(MetricSpaceError, match="integers"):
            MatrixMetricSpace(Alphabet('AB'), [[0, 0.5], [0.5, 0]])
        with pytest.raises(MetricSpaceError, match="Deletion"):
            MatrixMetricSpace(Alphabet('AB'), [[0, 1], [1, 0]], dele=1.5)

    def test_gap_in_alphabet(self):
        with pytest.raises(MetricSpaceError, match="Gap"):
            MatrixMetricSpace(Alphabet('AB-'), np.zeros((3, 3), dtype=int))

    def test_has_kernel(self):
        assert has_kernel(MatrixMetricSpace.build(Alphabet('AB')))
        assert not has_kernel(UnitMetricSpace())

    def test_has_kernel_skips_overridden_sub(self):
        class Flat(MatrixMetricSpace):
            def sub(self, a, b): return 0
        assert not has_kernel(Flat.build(Alphabet('AB')))

    def test_sub_accepts_lowercase(self):
        space = MatrixMetricSpace.build(Alphabet('AB'), mismatch=3)
        assert space.sub('a', 'B') == 3
        assert space.sub('a', 'A') == 0

    def test_sub_unknown_symbol(self):
        space = MatrixMetricSpace.build(Alphabet('AB'))
        with pytest.raises(AlphabetError):
            space.sub('A', 'Z')

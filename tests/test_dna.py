import numpy as np
import pytest
from runa.core.alphabet import AlphabetError
from runa.dna import DNA, DnaBlock, DnaMetricSpace, InstanceFormatError


INSTANCE = '10\n5\nT A T A T G A G T C \nT A T T T \n'


class TestDnaMetricSpace:
    def test_costs(self):
        assert DNA.sub('A', 'A') == 0
        assert DNA.sub('A', 'G') == DNA.sub('C', 'T') == 3
        assert DNA.sub('A', 'C') == DNA.sub('G', 'T') == 4
        assert DNA.INS == DNA.DEL == 2
        assert DNA.GAP == '-'

    def test_matrix(self):
        np.testing.assert_array_equal(DNA.matrix, [
            [0, 4, 3, 4],
            [4, 0, 4, 3],
            [3, 4, 0, 4],
            [4, 3, 4, 0],
        ])
        np.testing.assert_array_equal(DNA.matrix, DNA.matrix.T)

    def test_instances_are_equivalent(self):
        np.testing.assert_array_equal(DnaMetricSpace().matrix, DNA.matrix)


class TestDnaBlock:
    def test_parse(self):
        assert DnaBlock.parse(INSTANCE) == DnaBlock('TATATGAGTC', 'TATTT')

    def test_unpacking(self):
        x, y = DnaBlock.parse(INSTANCE)
        assert (x, y) == ('TATATGAGTC', 'TATTT')
        assert len(DnaBlock.parse(INSTANCE)) == 10

    def test_parse_lowercase(self):
        assert DnaBlock.parse('2\n1\na c\ng\n') == DnaBlock('AC', 'G')

    def test_parse_empty_sequence(self):
        assert DnaBlock.parse('0\n2\n\nA C\n') == DnaBlock('', 'AC')

    def test_dumps(self):
        block = DnaBlock('ACG', 'T')
        assert block.dumps() == '3\n1\nA C G\nT\n'
        assert DnaBlock.parse(block.dumps()) == block

    def test_missing_header(self):
        with pytest.raises(InstanceFormatError, match="lengths"):
            DnaBlock.parse('10')

    def test_invalid_header(self):
        with pytest.raises(InstanceFormatError, match="Invalid"):
            DnaBlock.parse('ten\n5\n')

    def test_negative_header(self):
        with pytest.raises(InstanceFormatError, match="negative"):
            DnaBlock.parse('-1\n0\n')

    def test_wrong_count(self):
        with pytest.raises(InstanceFormatError, match="Expected"):
            DnaBlock.parse('3\n1\nA C\nT\n')

    def test_unknown_symbol(self):
        with pytest.raises(InstanceFormatError, match="X"):
            DnaBlock.parse('2\n1\nA X\nT\n')

    def test_multi_character_symbol(self):
        with pytest.raises(InstanceFormatError, match="single"):
            DnaBlock.parse('1\n0\nAC\n')

    def test_direct_construction_checks_symbols(self):
        with pytest.raises(AlphabetError):
            DnaBlock('ACGN', '')

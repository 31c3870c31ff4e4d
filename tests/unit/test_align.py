import unittest

from svcontig.align import AlignmentRegion, overlap_on_contig
from svcontig.constants import CIGAR
from svcontig.interval import ReferenceInterval

from .mock import region


class TestAlignmentRegion(unittest.TestCase):

    def test_inverted_contig_range_error(self):
        with self.assertRaises(AttributeError):
            region(contig=(100, 1))

    def test_inverted_reference_range_error(self):
        with self.assertRaises(AttributeError):
            region(ref=(100, 1))

    def test_to_packed_string(self):
        reg = region(chr='1', ref=(100, 200), contig=(1, 101), cigar=[(CIGAR.M, 101), (CIGAR.S, 20)], mismatches=2)
        self.assertEqual('1_101_1:100-200_+_101M20S_60_2', reg.to_packed_string())

    def test_to_packed_string_reverse_no_cigar(self):
        reg = region(chr='X', ref=(5, 10), contig=(3, 8), forward=False, mapq=7)
        self.assertEqual('3_8_X:5-10_-_*_7_0', reg.to_packed_string())

    def test_from_packed_string(self):
        reg = region(
            chr='chrUn_gl000220', ref=(100, 200), contig=(1, 101), forward=False, cigar=[(CIGAR.S, 20), (CIGAR.EQ, 101)])
        parsed = AlignmentRegion.from_packed_string(reg.to_packed_string(), reg.assembly_id, reg.contig_id)
        self.assertEqual(reg, parsed)

    def test_from_packed_string_error(self):
        with self.assertRaises(ValueError):
            AlignmentRegion.from_packed_string('1_101_1:100-200_?_*_60_0', 'asm', 'tig')
        with self.assertRaises(ValueError):
            AlignmentRegion.from_packed_string('1_101', 'asm', 'tig')

    def test_str(self):
        reg = region(chr='2', ref=(10, 20), contig=(5, 15), cigar=[(CIGAR.M, 11)])
        self.assertEqual('asm000001\ttig00001\t2\t10\t20\t+\t11M\t60\t5\t15\t0', str(reg))

    def test_eq(self):
        self.assertEqual(region(), region())
        self.assertNotEqual(region(), region(mapq=1))
        self.assertNotEqual(region(), region(contig_id='other'))
        self.assertEqual(1, len({region(), region()}))

    def test_reference_interval_type(self):
        self.assertIsInstance(region().reference_interval, ReferenceInterval)


class TestOverlapOnContig(unittest.TestCase):

    def test_disjoint(self):
        self.assertEqual(0, overlap_on_contig(region(contig=(1, 100)), region(contig=(101, 200))))
        self.assertEqual(0, overlap_on_contig(region(contig=(101, 200)), region(contig=(1, 100))))

    def test_overlap(self):
        self.assertEqual(10, overlap_on_contig(region(contig=(1, 100)), region(contig=(91, 200))))
        self.assertEqual(10, overlap_on_contig(region(contig=(91, 200)), region(contig=(1, 100))))

    def test_single_base(self):
        self.assertEqual(1, overlap_on_contig(region(contig=(1, 100)), region(contig=(100, 200))))

    def test_contained(self):
        self.assertEqual(20, overlap_on_contig(region(contig=(1, 100)), region(contig=(41, 60))))

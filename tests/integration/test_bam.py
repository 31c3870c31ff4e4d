import unittest

from svcontig.bam import read as _read
from svcontig.chimeric import from_split_alignments
from svcontig.constants import STRAND_SWITCH
from svcontig.interval import ReferenceInterval

from ..util import get_data


class TestReadContigAlignments(unittest.TestCase):

    def setUp(self):
        self.contigs = {name: (regions, seq) for name, regions, seq in _read.read_contig_alignments(get_data('contigs.sam'))}

    def test_contigs(self):
        self.assertEqual({'asm1:tig1', 'asm1:tig2', 'asm1:tig3'}, set(self.contigs))
        for regions, seq in self.contigs.values():
            self.assertEqual(2, len(regions))
            self.assertEqual(200, len(seq))
            self.assertIsInstance(seq, bytes)

    def test_hard_clipped_supplementary(self):
        regions, seq = self.contigs['asm1:tig1']
        first, second = sorted(regions, key=lambda r: r.start_in_assembled_contig)
        self.assertEqual(ReferenceInterval('1', 1001, 1100), first.reference_interval)
        self.assertEqual((1, 100), (first.start_in_assembled_contig, first.end_in_assembled_contig))
        self.assertEqual(ReferenceInterval('1', 5001, 5100), second.reference_interval)
        self.assertEqual((101, 200), (second.start_in_assembled_contig, second.end_in_assembled_contig))
        self.assertEqual(1, second.mismatches)
        self.assertEqual('asm1', first.assembly_id)
        self.assertEqual('tig1', first.contig_id)

    def test_reverse_supplementary(self):
        regions, seq = self.contigs['asm1:tig2']
        second = max(regions, key=lambda r: r.start_in_assembled_contig)
        self.assertFalse(second.forward_strand)
        self.assertEqual(ReferenceInterval('2', 8001, 8100), second.reference_interval)
        self.assertEqual((101, 200), (second.start_in_assembled_contig, second.end_in_assembled_contig))


class TestCallFromAlignments(unittest.TestCase):

    def call(self, name):
        for contig_name, regions, seq in _read.read_contig_alignments(get_data('contigs.sam')):
            if contig_name == name:
                return from_split_alignments(regions, seq)
        raise KeyError(name)

    def test_deletion(self):
        junctions = self.call('asm1:tig1')
        self.assertEqual(1, len(junctions))
        self.assertEqual(STRAND_SWITCH.NO_SWITCH, junctions[0].strand_switch)
        self.assertTrue(junctions[0].is_forward_strand_representation)
        self.assertEqual(
            (ReferenceInterval('1', 1001, 1100), ReferenceInterval('1', 5001, 5100)),
            junctions[0].get_coord_sorted_reference_intervals()
        )

    def test_inversion(self):
        junctions = self.call('asm1:tig2')
        self.assertEqual(1, len(junctions))
        self.assertEqual(STRAND_SWITCH.FORWARD_TO_REVERSE, junctions[0].strand_switch)

    def test_translocation(self):
        self.assertEqual([], self.call('asm1:tig3'))

import io
import struct
import unittest

from svcontig.chimeric import ChimericAlignment
from svcontig.chimeric.serialize import FORMAT_VERSION, decode, dump, encode, load
from svcontig.constants import CIGAR
from svcontig.error import SerializationError

from .mock import region


def build_junction(contig_seq=b'ACGTACGT', insertion_mappings=None):
    return ChimericAlignment(
        region(chr='1', ref=(5000, 5100), contig=(1, 101), cigar=[(CIGAR.M, 101), (CIGAR.S, 100)], mismatches=1),
        region(chr='1', ref=(100, 199), contig=(102, 201), forward=False, mapq=45, cigar=[(CIGAR.S, 101), (CIGAR.M, 100)]),
        contig_seq,
        insertion_mappings
    )


class TestEncodeDecode(unittest.TestCase):

    def test_round_trip(self):
        junction = build_junction(bytes(range(256)), ['150_160_5:1-10_+_*_3_0', '161_170_chrUn_gl000220:1-10_-_10M_0_2'])
        result = decode(encode(junction))
        self.assertEqual(junction, result)
        self.assertEqual(junction.strand_switch, result.strand_switch)
        self.assertEqual(junction.is_forward_strand_representation, result.is_forward_strand_representation)
        self.assertEqual(bytes(range(256)), result.contig_seq)
        self.assertEqual(junction.insertion_mappings, result.insertion_mappings)
        self.assertEqual(
            junction.region_with_lower_coord_on_contig.cigar, result.region_with_lower_coord_on_contig.cigar)
        self.assertEqual(1, result.region_with_lower_coord_on_contig.mismatches)

    def test_empty_sequence_and_no_insertions(self):
        junction = build_junction(b'')
        result = decode(encode(junction))
        self.assertEqual(b'', result.contig_seq)
        self.assertEqual(tuple(), result.insertion_mappings)

    def test_version_byte(self):
        self.assertEqual(FORMAT_VERSION, encode(build_junction())[0])

    def test_unsupported_version(self):
        data = bytearray(encode(build_junction()))
        data[0] = FORMAT_VERSION + 1
        with self.assertRaises(SerializationError):
            decode(bytes(data))

    def test_strand_switch_ordinal_out_of_range(self):
        junction = build_junction(b'ACGT')
        data = bytearray(encode(junction))
        # tail: ordinal (4) + representation flag (1) + sequence length (4) + sequence (4) + insertion count (4)
        offset = len(data) - 17
        self.assertEqual(1, struct.unpack('>i', data[offset:offset + 4])[0])
        data[offset:offset + 4] = struct.pack('>i', 7)
        with self.assertRaises(SerializationError):
            decode(bytes(data))
        data[offset:offset + 4] = struct.pack('>i', -1)
        with self.assertRaises(SerializationError):
            decode(bytes(data))

    def test_inconsistent_classification(self):
        data = bytearray(encode(build_junction(b'ACGT')))
        offset = len(data) - 17
        data[offset:offset + 4] = struct.pack('>i', 0)
        with self.assertRaises(SerializationError):
            decode(bytes(data))

    def test_truncated(self):
        data = encode(build_junction())
        for size in [0, 1, 10, len(data) // 2, len(data) - 1]:
            with self.assertRaises(SerializationError):
                decode(data[:size])

    def test_trailing_bytes(self):
        with self.assertRaises(SerializationError):
            decode(encode(build_junction()) + b'\x00')


class TestDumpLoad(unittest.TestCase):

    def test_round_trip(self):
        junctions = [build_junction(b'AAAA'), build_junction(b'CCCC', ['1_2_3:1-2_+_*_0_0'])]
        fh = io.BytesIO()
        self.assertEqual(2, dump(junctions, fh))
        fh.seek(0)
        self.assertEqual(junctions, load(fh))

    def test_empty(self):
        fh = io.BytesIO()
        self.assertEqual(0, dump([], fh))
        fh.seek(0)
        self.assertEqual([], load(fh))

    def test_truncated_record(self):
        fh = io.BytesIO()
        dump([build_junction()], fh)
        fh = io.BytesIO(fh.getvalue()[:-3])
        with self.assertRaises(SerializationError):
            load(fh)

    def test_truncated_length(self):
        with self.assertRaises(SerializationError):
            load(io.BytesIO(b'\x00\x00'))

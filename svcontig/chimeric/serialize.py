"""
binary record format used to move chimeric alignments between processes and to store them on disk.

All numbers are big-endian. Integers are 4-byte signed, booleans a single byte, and byte arrays and strings are
prefixed by their length as an integer (strings are utf-8). A record is

1. the format version (1 byte)
2. the alignment region with the lower coordinate on the contig
3. the alignment region with the higher coordinate on the contig
4. the strand switch as its ordinal in :attr:`~svcontig.constants.STRAND_SWITCH`
5. the forward strand representation flag
6. the contig sequence
7. the insertion mappings, as a count followed by the strings

An alignment region is written as: assembly id, contig id, reference name (strings); reference start, reference end
(integers); forward strand (boolean); mapping quality, contig start, contig end (integers); cigar (string);
mismatches (integer)
"""
import struct

from .alignment import ChimericAlignment
from ..align import AlignmentRegion
from ..bam.cigar import convert_cigar_to_string, convert_string_to_cigar
from ..constants import STRAND_SWITCH
from ..error import InvalidChimericAlignment, SerializationError
from ..interval import ReferenceInterval

FORMAT_VERSION = 1

_INT = struct.Struct('>i')
_BOOL = struct.Struct('>?')
_VERSION = struct.Struct('>B')


class _Writer:
    def __init__(self):
        self.chunks = []

    def write_int(self, value):
        self.chunks.append(_INT.pack(value))

    def write_bool(self, value):
        self.chunks.append(_BOOL.pack(bool(value)))

    def write_bytes(self, value):
        value = bytes(value)
        self.write_int(len(value))
        self.chunks.append(value)

    def write_string(self, value):
        self.write_bytes(value.encode('utf8'))

    def getvalue(self):
        return b''.join(self.chunks)


class _Reader:
    def __init__(self, data):
        self.data = memoryview(data)
        self.pos = 0

    def _take(self, size):
        if size < 0 or self.pos + size > len(self.data):
            raise SerializationError('record is truncated', self.pos, size, len(self.data))
        chunk = self.data[self.pos:self.pos + size]
        self.pos += size
        return chunk

    def read_version(self):
        return _VERSION.unpack(self._take(_VERSION.size))[0]

    def read_int(self):
        return _INT.unpack(self._take(_INT.size))[0]

    def read_bool(self):
        return _BOOL.unpack(self._take(_BOOL.size))[0]

    def read_bytes(self):
        return bytes(self._take(self.read_int()))

    def read_string(self):
        try:
            return self.read_bytes().decode('utf8')
        except UnicodeDecodeError as err:
            raise SerializationError('string field is not valid utf-8', err)

    def at_end(self):
        return self.pos == len(self.data)


def _write_region(writer, region):
    writer.write_string(region.assembly_id)
    writer.write_string(region.contig_id)
    writer.write_string(region.reference_interval.chr)
    writer.write_int(region.reference_interval.start)
    writer.write_int(region.reference_interval.end)
    writer.write_bool(region.forward_strand)
    writer.write_int(region.map_qual)
    writer.write_int(region.start_in_assembled_contig)
    writer.write_int(region.end_in_assembled_contig)
    writer.write_string(convert_cigar_to_string(region.cigar))
    writer.write_int(region.mismatches)


def _read_region(reader):
    assembly_id = reader.read_string()
    contig_id = reader.read_string()
    chrom = reader.read_string()
    ref_start = reader.read_int()
    ref_end = reader.read_int()
    forward_strand = reader.read_bool()
    map_qual = reader.read_int()
    start = reader.read_int()
    end = reader.read_int()
    cigar = reader.read_string()
    mismatches = reader.read_int()
    try:
        return AlignmentRegion(
            assembly_id, contig_id,
            ReferenceInterval(chrom, ref_start, ref_end),
            forward_strand=forward_strand,
            map_qual=map_qual,
            start_in_assembled_contig=start,
            end_in_assembled_contig=end,
            cigar=convert_string_to_cigar(cigar),
            mismatches=mismatches
        )
    except (AttributeError, ValueError) as err:
        raise SerializationError('invalid alignment region', err)


def encode(chimeric_alignment):
    """
    Returns:
        bytes: the binary record for a chimeric alignment
    """
    writer = _Writer()
    writer.chunks.append(_VERSION.pack(FORMAT_VERSION))
    _write_region(writer, chimeric_alignment.region_with_lower_coord_on_contig)
    _write_region(writer, chimeric_alignment.region_with_higher_coord_on_contig)
    writer.write_int(STRAND_SWITCH.ordinal(chimeric_alignment.strand_switch))
    writer.write_bool(chimeric_alignment.is_forward_strand_representation)
    writer.write_bytes(chimeric_alignment.contig_seq)
    writer.write_int(len(chimeric_alignment.insertion_mappings))
    for mapping in chimeric_alignment.insertion_mappings:
        writer.write_string(mapping)
    return writer.getvalue()


def _decode(reader):
    version = reader.read_version()
    if version != FORMAT_VERSION:
        raise SerializationError('unsupported record format version', version)
    lower = _read_region(reader)
    higher = _read_region(reader)
    ordinal = reader.read_int()
    try:
        strand_switch = STRAND_SWITCH.from_ordinal(ordinal)
    except IndexError:
        raise SerializationError('strand switch ordinal is out of range', ordinal)
    forward_representation = reader.read_bool()
    contig_seq = reader.read_bytes()
    count = reader.read_int()
    if count < 0:
        raise SerializationError('negative number of insertion mappings', count)
    insertion_mappings = [reader.read_string() for i in range(count)]

    try:
        result = ChimericAlignment(lower, higher, contig_seq, insertion_mappings)
    except InvalidChimericAlignment as err:
        raise SerializationError('decoded regions do not form a valid chimeric alignment', err)
    if result.strand_switch != strand_switch or result.is_forward_strand_representation != forward_representation:
        raise SerializationError(
            'stored classification does not match the decoded regions',
            strand_switch, forward_representation, result.strand_switch, result.is_forward_strand_representation)
    return result


def decode(data):
    """
    Args:
        data (bytes): a single binary record

    Returns:
        ChimericAlignment: the decoded chimeric alignment

    Raises:
        SerializationError: the record is corrupt or was written by an unsupported version
    """
    reader = _Reader(data)
    result = _decode(reader)
    if not reader.at_end():
        raise SerializationError('unexpected trailing bytes after record', len(data) - reader.pos)
    return result


def dump(chimeric_alignments, fh):
    """
    write chimeric alignments to a binary file handle as length-prefixed records

    Returns:
        int: the number of records written
    """
    count = 0
    for chimeric_alignment in chimeric_alignments:
        record = encode(chimeric_alignment)
        fh.write(_INT.pack(len(record)))
        fh.write(record)
        count += 1
    return count


def load(fh):
    """
    read the length-prefixed records written by :func:`dump`

    Returns:
        list of ChimericAlignment: the decoded records in file order
    """
    result = []
    while True:
        header = fh.read(_INT.size)
        if not header:
            break
        if len(header) < _INT.size:
            raise SerializationError('record length is truncated')
        size = _INT.unpack(header)[0]
        if size < 0:
            raise SerializationError('negative record length', size)
        record = fh.read(size)
        if len(record) < size:
            raise SerializationError('record is truncated', size, len(record))
        result.append(decode(record))
    return result

"""
alignment regions of locally assembled contigs. An alignment region is a single contiguous mapping of
part of a contig onto the reference genome, as reported by an upstream aligner
"""
from .bam.cigar import convert_cigar_to_string, convert_string_to_cigar
from .constants import PACKED_STRING_SEP
from .interval import Interval, ReferenceInterval


class AlignmentRegion:
    """
    Coordinates on the contig are 1-based and inclusive and are given along the 5' to 3' direction of the
    contig as it was assembled, regardless of the strand it aligned to
    """

    def __init__(
        self,
        assembly_id,
        contig_id,
        reference_interval,
        forward_strand,
        map_qual,
        start_in_assembled_contig,
        end_in_assembled_contig,
        cigar=None,
        mismatches=0
    ):
        """
        Args:
            assembly_id (str): the local assembly the contig belongs to
            contig_id (str): the contig name
            reference_interval (ReferenceInterval): where the region is aligned on the reference
            forward_strand (bool): True if the contig segment aligns to the forward strand of the reference
            map_qual (int): mapping quality of the alignment
            start_in_assembled_contig (int): first contig position covered by the alignment
            end_in_assembled_contig (int): last contig position covered by the alignment
            cigar (list): cigar tuples along the 5' to 3' direction of the contig
            mismatches (int): number of mismatches in the alignment (NM)
        """
        Interval(start_in_assembled_contig, end_in_assembled_contig)  # raises on an inverted range
        self.assembly_id = str(assembly_id)
        self.contig_id = str(contig_id)
        self.reference_interval = reference_interval
        self.forward_strand = bool(forward_strand)
        self.map_qual = int(map_qual)
        self.start_in_assembled_contig = int(start_in_assembled_contig)
        self.end_in_assembled_contig = int(end_in_assembled_contig)
        self.cigar = list(cigar) if cigar else []
        self.mismatches = int(mismatches)

    @property
    def contig_interval(self):
        return Interval(self.start_in_assembled_contig, self.end_in_assembled_contig)

    @property
    def strand(self):
        return '+' if self.forward_strand else '-'

    def key(self):
        return (
            self.assembly_id, self.contig_id, self.reference_interval.key, self.forward_strand, self.map_qual,
            self.start_in_assembled_contig, self.end_in_assembled_contig, tuple(self.cigar), self.mismatches
        )

    def __eq__(self, other):
        if not isinstance(other, AlignmentRegion):
            return False
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __repr__(self):
        return 'AlignmentRegion({}:{} {}{} contig={}-{} mapq={})'.format(
            self.assembly_id, self.contig_id, self.reference_interval, self.strand,
            self.start_in_assembled_contig, self.end_in_assembled_contig, self.map_qual
        )

    def __str__(self):
        return '\t'.join([str(c) for c in [
            self.assembly_id,
            self.contig_id,
            self.reference_interval.chr,
            self.reference_interval.start,
            self.reference_interval.end,
            self.strand,
            convert_cigar_to_string(self.cigar),
            self.map_qual,
            self.start_in_assembled_contig,
            self.end_in_assembled_contig,
            self.mismatches
        ]])

    def to_packed_string(self):
        """
        compact single-token description of the region, used to record alignments absorbed as inserted sequence.
        Does not include the assembly and contig ids

        Example:
            >>> AlignmentRegion('asm1', 'tig1', ReferenceInterval('1', 100, 200), True, 60, 1, 101).to_packed_string()
            '1_101_1:100-200_+_*_60_0'
        """
        return PACKED_STRING_SEP.join([str(c) for c in [
            self.start_in_assembled_contig,
            self.end_in_assembled_contig,
            self.reference_interval,
            self.strand,
            convert_cigar_to_string(self.cigar),
            self.map_qual,
            self.mismatches
        ]])

    @classmethod
    def from_packed_string(cls, packed, assembly_id, contig_id):
        """
        parse the packed representation. The reference name may contain the separator so the fixed fields
        are split off from either end
        """
        try:
            start, end, rest = packed.split(PACKED_STRING_SEP, 2)
            interval, strand, cigar, map_qual, mismatches = rest.rsplit(PACKED_STRING_SEP, 4)
            if strand not in {'+', '-'}:
                raise ValueError('invalid strand', strand)
            return cls(
                assembly_id, contig_id,
                ReferenceInterval.parse(interval),
                forward_strand=(strand == '+'),
                map_qual=int(map_qual),
                start_in_assembled_contig=int(start),
                end_in_assembled_contig=int(end),
                cigar=convert_string_to_cigar(cigar),
                mismatches=int(mismatches)
            )
        except ValueError as err:
            raise ValueError('could not parse packed alignment region', packed, err)


def overlap_on_contig(first, second):
    """
    number of contig positions covered by both alignment regions, 0 if they are disjoint on the contig

    Example:
        >>> overlap_on_contig(region(contig=(1, 100)), region(contig=(91, 200)))
        10
    """
    shared = first.contig_interval & second.contig_interval
    return 0 if shared is None else len(shared)

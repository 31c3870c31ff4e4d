import logging
import re

import pysam

from . import cigar as _cigar
from .constants import DEFAULTS
from ..align import AlignmentRegion
from ..constants import CIGAR, NA_ASSEMBLY_ID, reverse_complement
from ..interval import ReferenceInterval
from ..util import DEVNULL


class ReadFilter:
    """
    predicates for deciding which reads can be used as structural variant evidence
    """

    def __init__(
        self,
        min_evidence_mapq=DEFAULTS.min_evidence_mapq,
        min_evidence_match_length=DEFAULTS.min_evidence_match_length,
        allowed_short_fragment_overhang=DEFAULTS.allowed_short_fragment_overhang
    ):
        self.min_evidence_mapq = min_evidence_mapq
        self.min_evidence_match_length = min_evidence_match_length
        self.allowed_short_fragment_overhang = allowed_short_fragment_overhang

    def not_junk(self, read):
        return not read.is_duplicate and not read.is_qcfail

    def is_primary_line(self, read):
        return not read.is_secondary and not read.is_supplementary

    def is_mapped(self, read):
        return self.not_junk(read) and not read.is_unmapped

    def is_evidence(self, read):
        return all([
            self.is_mapped(read),
            read.mapping_quality >= self.min_evidence_mapq,
            _cigar.alignment_matches(read.cigartuples) >= self.min_evidence_match_length
        ])

    def is_non_discordant_evidence(self, read):
        """
        evidence reads that are the first of a properly oriented pair with both mates on the same chromosome. The
        reverse read may start a short distance before its mate
        """
        if not all([
            self.is_evidence(read),
            self.is_primary_line(read),
            read.is_read1,
            not read.mate_is_unmapped,
            read.is_reverse != read.mate_is_reverse,
            read.reference_name == read.next_reference_name,
        ]):
            return False
        if read.is_reverse:
            return read.reference_start + self.allowed_short_fragment_overhang >= read.next_reference_start
        return read.reference_start - self.allowed_short_fragment_overhang <= read.next_reference_start

    def apply_filter(self, reads, predicate):
        """
        Args:
            reads (iterable of pysam.AlignedSegment): reads to filter
            predicate (callable): one of the predicate methods of this class, unbound (ex. ReadFilter.is_evidence)

        Returns:
            generator of pysam.AlignedSegment: the reads passing the predicate
        """
        return (read for read in reads if predicate(self, read))


def parse_contig_name(query_name):
    """
    split a contig name into its assembly and contig ids. Contigs from local assemblies are named
    <assembly id>:<contig id>

    Example:
        >>> parse_contig_name('asm000001:tig00002')
        ('asm000001', 'tig00002')
        >>> parse_contig_name('contig_1')
        ('NA', 'contig_1')
    """
    match = re.match(r'^([^:]+):(.+)$', query_name)
    if match:
        return match.group(1), match.group(2)
    return NA_ASSEMBLY_ID, query_name


def alignment_region_from_read(read, assembly_id=None, contig_id=None):
    """
    convert an aligned contig record into an alignment region. Contig coordinates are computed along the contig as
    assembled, so for reverse strand alignments the cigar is read from its end

    Args:
        read (pysam.AlignedSegment): the alignment of the contig
        assembly_id (str): overrides the assembly id parsed from the query name
        contig_id (str): overrides the contig id parsed from the query name

    Returns:
        AlignmentRegion: the alignment region
    """
    if read.is_unmapped:
        raise ValueError('cannot convert an unmapped record to an alignment region', read.query_name)
    parsed_assembly_id, parsed_contig_id = parse_contig_name(read.query_name)
    cigar = list(read.cigartuples)
    if read.is_reverse:
        cigar = list(reversed(cigar))
    start = _cigar.leading_clipped_length(cigar) + 1
    end = start + _cigar.query_aligned_length(cigar) - 1
    return AlignmentRegion(
        assembly_id if assembly_id is not None else parsed_assembly_id,
        contig_id if contig_id is not None else parsed_contig_id,
        ReferenceInterval(read.reference_name, read.reference_start + 1, read.reference_end),
        forward_strand=not read.is_reverse,
        map_qual=read.mapping_quality,
        start_in_assembled_contig=start,
        end_in_assembled_contig=end,
        cigar=cigar,
        mismatches=read.get_tag('NM') if read.has_tag('NM') else 0
    )


def contig_sequence_from_read(read):
    """
    the full contig sequence as assembled, or None if the record is hard clipped or carries no sequence

    Returns:
        bytes: the contig sequence
    """
    if not read.query_sequence or any([v == CIGAR.H for v, f in read.cigartuples]):
        return None
    seq = read.query_sequence
    if read.is_reverse:
        seq = reverse_complement(seq)
    return seq.encode('ascii')


def group_contig_alignments(reads, read_filter=None, log=DEVNULL):
    """
    group aligned contig records by contig

    Args:
        reads (iterable of pysam.AlignedSegment): contig alignment records, in any order
        read_filter (ReadFilter): used to drop junk, unmapped and secondary records

    Returns:
        list of tuple: (contig name, list of AlignmentRegion, contig sequence as bytes) in order of first appearance.
        Contigs for which no record carries the full sequence are skipped
    """
    if read_filter is None:
        read_filter = ReadFilter()
    regions_by_contig = {}
    sequence_by_contig = {}
    for read in reads:
        if not read_filter.is_mapped(read) or read.is_secondary:
            continue
        regions_by_contig.setdefault(read.query_name, []).append(alignment_region_from_read(read))
        if sequence_by_contig.get(read.query_name) is None:
            sequence_by_contig[read.query_name] = contig_sequence_from_read(read)

    result = []
    for name, regions in regions_by_contig.items():
        sequence = sequence_by_contig.get(name)
        if sequence is None:
            log('skipping contig without a full length sequence:', name, level=logging.WARNING)
            continue
        result.append((name, regions, sequence))
    return result


def read_contig_alignments(filename, read_filter=None, log=DEVNULL):
    """
    read the contig alignments from a SAM/BAM file

    Returns:
        list of tuple: see :func:`group_contig_alignments`
    """
    with pysam.AlignmentFile(filename, 'r') as fh:
        return group_contig_alignments(fh.fetch(until_eof=True), read_filter=read_filter, log=log)

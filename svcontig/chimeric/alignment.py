"""
chimeric alignments of locally assembled contigs. A contig that aligns to several places on the reference is split
into junctions, one per pair of consecutive alignment regions that can flank a breakpoint.

For example, a contig aligning to three regions gives two junctions::

    |---------1:100-200------------|
                                    |----------2:100-200---------|
                                                                  |----------3:100-200---------|

    1) links 1:100-200 to 2:100-200
    2) links 2:100-200 to 3:100-200

Alignment regions between two flanks which look like inserted sequence (low mapping quality, very short, or
contained in a flank on the reference) are not used as flanks. Their packed descriptions are kept on the junction
that spans them instead
"""
import logging

from .classify import (
    determine_strand_switch,
    involves_ref_position_switch,
    is_forward_strand_representation,
    is_not_simple_translocation,
)
from .constants import DEFAULTS
from .filter import first_alignment_too_short, map_qual_too_low, next_alignment_may_be_novel_insertion
from ..constants import STRAND_SWITCH
from ..error import InvalidChimericAlignment
from ..util import DEVNULL


class ChimericAlignment:
    """
    the junction between two alignment regions of the same contig
    """

    def __init__(
        self, region_with_lower_coord_on_contig, region_with_higher_coord_on_contig, contig_seq, insertion_mappings=None
    ):
        """
        Args:
            region_with_lower_coord_on_contig (AlignmentRegion): the flank earlier in the contig
            region_with_higher_coord_on_contig (AlignmentRegion): the flank later in the contig
            contig_seq (bytes): the full sequence of the contig
            insertion_mappings (list of str): packed descriptions of the regions absorbed between the two flanks

        Raises:
            InvalidChimericAlignment: the regions come from different assemblies or contigs, are not in contig
                order, or one contains the other on the reference
        """
        lower = region_with_lower_coord_on_contig
        higher = region_with_higher_coord_on_contig
        if lower.assembly_id != higher.assembly_id:
            raise InvalidChimericAlignment(
                'two alignment regions used to construct chimeric alignment are not from the same local assembly',
                lower.assembly_id, higher.assembly_id)
        if lower.contig_id != higher.contig_id:
            raise InvalidChimericAlignment(
                'two alignment regions used to construct chimeric alignment are not from the same assembled contig',
                lower.contig_id, higher.contig_id)
        if lower.start_in_assembled_contig > higher.start_in_assembled_contig:
            raise InvalidChimericAlignment(
                'alignment regions are not given in contig order', lower.to_packed_string(), higher.to_packed_string())
        if lower.reference_interval.contains(higher.reference_interval) or higher.reference_interval.contains(lower.reference_interval):
            raise InvalidChimericAlignment(
                'one alignment region contains the other', lower.to_packed_string(), higher.to_packed_string())

        self.region_with_lower_coord_on_contig = lower
        self.region_with_higher_coord_on_contig = higher
        self.strand_switch = determine_strand_switch(lower, higher)
        self.is_forward_strand_representation = is_forward_strand_representation(
            lower, higher, self.strand_switch, involves_ref_position_switch(lower, higher))
        self.contig_seq = contig_seq
        self.insertion_mappings = tuple(insertion_mappings) if insertion_mappings else tuple()

    @property
    def assembly_id(self):
        return self.region_with_lower_coord_on_contig.assembly_id

    @property
    def contig_id(self):
        return self.region_with_lower_coord_on_contig.contig_id

    def involves_ref_position_switch(self):
        return involves_ref_position_switch(self.region_with_lower_coord_on_contig, self.region_with_higher_coord_on_contig)

    def is_not_simple_translocation(self):
        return is_not_simple_translocation(
            self.region_with_lower_coord_on_contig,
            self.region_with_higher_coord_on_contig,
            self.strand_switch,
            self.involves_ref_position_switch()
        )

    def get_coord_sorted_reference_intervals(self):
        """
        Returns:
            tuple of ReferenceInterval: the reference intervals of the two flanks ordered by reference start
        """
        if self.involves_ref_position_switch():
            return (
                self.region_with_higher_coord_on_contig.reference_interval,
                self.region_with_lower_coord_on_contig.reference_interval
            )
        return (
            self.region_with_lower_coord_on_contig.reference_interval,
            self.region_with_higher_coord_on_contig.reference_interval
        )

    def key(self):
        return (
            self.region_with_lower_coord_on_contig.key(),
            self.region_with_higher_coord_on_contig.key(),
            self.strand_switch,
            self.is_forward_strand_representation,
            bytes(self.contig_seq),
            self.insertion_mappings
        )

    def __eq__(self, other):
        if not isinstance(other, ChimericAlignment):
            return False
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __repr__(self):
        return 'ChimericAlignment({}:{} {!r}, {!r}, {})'.format(
            self.assembly_id, self.contig_id,
            self.region_with_lower_coord_on_contig.reference_interval,
            self.region_with_higher_coord_on_contig.reference_interval,
            self.strand_switch
        )

    def __str__(self):
        return '\t'.join([
            str(self.region_with_lower_coord_on_contig),
            str(self.region_with_higher_coord_on_contig),
            bytes(self.contig_seq).decode('utf8', errors='replace')
        ])

    def to_dict(self):
        """
        flat representation used for the tab-delimited report
        """
        first, second = self.get_coord_sorted_reference_intervals()
        return {
            'assembly_id': self.assembly_id,
            'contig_id': self.contig_id,
            'break1_chromosome': first.chr,
            'break1_position_start': first.start,
            'break1_position_end': first.end,
            'break2_chromosome': second.chr,
            'break2_position_start': second.start,
            'break2_position_end': second.end,
            'lower_region': self.region_with_lower_coord_on_contig.to_packed_string(),
            'higher_region': self.region_with_higher_coord_on_contig.to_packed_string(),
            'strand_switch': self.strand_switch,
            'forward_strand_representation': self.is_forward_strand_representation,
            'insertion_mappings': ';'.join(self.insertion_mappings) if self.insertion_mappings else None,
            'contig_length': len(self.contig_seq),
        }


def from_split_alignments(
    regions,
    contig_sequence,
    min_mapq=DEFAULTS.min_mapq,
    min_align_length=DEFAULTS.min_align_length,
    log=DEVNULL
):
    """
    Parse all alignment regions of a single locally-assembled contig and generate its chimeric alignments.

    The regions are ordered by their start on the contig. Ties keep the order they were given in.
    Leading regions with a low mapping quality are skipped. The remaining regions are walked in consecutive pairs:

    1. if the current flank is too short once the overlap with the next region is removed, the next region is dropped
    2. if the next region may be inserted sequence, it is absorbed and its packed description is kept for the
       junction that spans it
    3. otherwise the two regions form a junction, which is kept unless it is a simple translocation

    Args:
        regions (iterable of AlignmentRegion): every alignment region of the contig
        contig_sequence (bytes): the contig sequence
        min_mapq (int): see :func:`~svcontig.chimeric.filter.map_qual_too_low`
        min_align_length (int): see :func:`~svcontig.chimeric.filter.first_alignment_too_short`
        log (Log): logging callable

    Returns:
        list of ChimericAlignment: the junctions of the contig in contig order (empty if there are none)

    Raises:
        InvalidChimericAlignment: the regions do not all come from the same contig
    """
    sorted_regions = sorted(regions, key=lambda r: r.start_in_assembled_contig)
    if len(sorted_regions) < 2:
        return []

    position = 0
    while map_qual_too_low(sorted_regions[position], min_mapq) and position + 1 < len(sorted_regions):
        log('skipping low mapping quality leading region', sorted_regions[position].to_packed_string(), level=logging.DEBUG)
        position += 1

    current = sorted_regions[position]
    insertions = []
    junctions = []
    remaining = sorted_regions[position + 1:]

    for index, next_region in enumerate(remaining):
        if first_alignment_too_short(current, next_region, min_align_length):
            log('dropping region after a short flank', next_region.to_packed_string(), level=logging.DEBUG)
            continue
        elif next_alignment_may_be_novel_insertion(current, next_region, min_mapq, min_align_length):
            if index + 1 == len(remaining):
                break
            log('possible inserted sequence', next_region.to_packed_string(), level=logging.DEBUG)
            insertions.append(next_region.to_packed_string())
            continue

        junction = ChimericAlignment(current, next_region, contig_sequence, insertions)
        insertions = []
        if junction.is_not_simple_translocation():
            junctions.append(junction)
        else:
            log('filtered simple translocation', repr(junction), level=logging.DEBUG)
        current = next_region
    return junctions

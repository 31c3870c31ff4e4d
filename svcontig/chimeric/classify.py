"""
classification of a pair of alignment regions given in contig order (lower contig coordinate first)
"""
from ..constants import STRAND_SWITCH


def determine_strand_switch(first, second):
    """
    Returns:
        STRAND_SWITCH: the change in strand going from the first to the second region

    Example:
        >>> determine_strand_switch(forward_region, reverse_region)
        'FORWARD_TO_REVERSE'
    """
    if first.forward_strand == second.forward_strand:
        return STRAND_SWITCH.NO_SWITCH
    return STRAND_SWITCH.FORWARD_TO_REVERSE if first.forward_strand else STRAND_SWITCH.REVERSE_TO_FORWARD


def involves_ref_position_switch(region_with_lower_coord_on_contig, region_with_higher_coord_on_contig):
    """
    True if the region later in the contig starts at a lower reference position than the region earlier in the contig
    """
    return region_with_higher_coord_on_contig.reference_interval.start < region_with_lower_coord_on_contig.reference_interval.start


def is_forward_strand_representation(
    region_with_lower_coord_on_contig, region_with_higher_coord_on_contig, strand_switch, involves_ref_switch
):
    """
    the same event can be assembled from either strand of the reference. This flags the representation that reads
    along the forward strand so that a junction and its reverse complement can be treated as one event
    """
    if strand_switch == STRAND_SWITCH.NO_SWITCH:
        return region_with_lower_coord_on_contig.forward_strand and region_with_higher_coord_on_contig.forward_strand
    return not involves_ref_switch


def is_not_simple_translocation(
    region_with_lower_coord_on_contig, region_with_higher_coord_on_contig, strand_switch, involves_ref_switch
):
    """
    False for the translocations that are not called: inter-chromosomal junctions and intra-chromosomal junctions
    whose reference order does not agree with the strand of the first region. Same chromosome junctions with a strand
    switch are kept.

    Warning:
        this also drops insertions whose inserted sequence maps to a chromosome other than that of its flanks
    """
    same_chromosome = region_with_lower_coord_on_contig.reference_interval.chr == region_with_higher_coord_on_contig.reference_interval.chr
    return same_chromosome and (
        strand_switch != STRAND_SWITCH.NO_SWITCH
        or involves_ref_switch == (not region_with_lower_coord_on_contig.forward_strand)
    )

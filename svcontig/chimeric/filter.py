"""
predicates deciding which alignment regions of a contig can flank a breakpoint. None of these raise; a failed
check only changes how the region is used
"""
from .constants import DEFAULTS
from ..align import overlap_on_contig


def map_qual_too_low(region, min_mapq=DEFAULTS.min_mapq):
    """
    Args:
        region (AlignmentRegion): the alignment region to check
        min_mapq (int): minimum acceptable mapping quality

    Returns:
        bool: True if the mapping quality of the region is below the threshold
    """
    return region.map_qual < min_mapq


def effective_length(first, second):
    """
    reference length of the first region less the contig bases it shares with the second region
    """
    return len(first.reference_interval) - overlap_on_contig(first, second)


def first_alignment_too_short(first, second, min_align_length=DEFAULTS.min_align_length):
    """
    Note:
        not symmetric. Only the first region is measured, the second one only contributes its contig overlap
    """
    return effective_length(first, second) < min_align_length


def next_alignment_may_be_novel_insertion(
    current, next_region, min_mapq=DEFAULTS.min_mapq, min_align_length=DEFAULTS.min_align_length
):
    """
    for two consecutive alignment regions of a contig, checks if the region later in the contig is more likely to be
    inserted sequence than the flank of a breakpoint. This is the case when it

    - has a low mapping quality
    - is very short (measured against the current region)
    - is contained in the current region on the reference, or contains it

    Args:
        current (AlignmentRegion): the region earlier in the contig (the current breakpoint flank)
        next_region (AlignmentRegion): the region immediately after it on the contig
    """
    return any([
        map_qual_too_low(next_region, min_mapq),
        first_alignment_too_short(next_region, current, min_align_length),
        current.reference_interval.contains(next_region.reference_interval),
        next_region.reference_interval.contains(current.reference_interval),
    ])

from ..util import WeakConstantNamespace


DEFAULTS = WeakConstantNamespace()
"""
- min_mapq
- min_align_length
"""
DEFAULTS.add(
    'min_mapq',
    60,
    defn='alignment regions with a mapping quality below this are not used as breakpoint flanks. A low quality '
    'region between two flanks is kept as candidate inserted sequence',
)
DEFAULTS.add(
    'min_align_length',
    50,
    defn='minimum reference length of an alignment region, after subtracting the contig bases it shares with its '
    'neighbour, for the region to be used as a breakpoint flank',
)

COLUMNS = [
    'assembly_id',
    'contig_id',
    'break1_chromosome',
    'break1_position_start',
    'break1_position_end',
    'break2_chromosome',
    'break2_position_start',
    'break2_position_end',
    'lower_region',
    'higher_region',
    'strand_switch',
    'forward_strand_representation',
    'insertion_mappings',
    'contig_length',
]
""":class:`list`: columns of the tab-delimited junction report, in output order"""

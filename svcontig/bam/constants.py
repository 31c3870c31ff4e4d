from ..util import WeakConstantNamespace


DEFAULTS = WeakConstantNamespace()
"""
- min_evidence_mapq
- min_evidence_match_length
- allowed_short_fragment_overhang
"""
DEFAULTS.add('min_evidence_mapq', 20, defn='minimum mapping quality for a read to count as evidence')
DEFAULTS.add(
    'min_evidence_match_length', 45, defn='minimum number of aligned (match or mismatch) bases for a read to count as evidence'
)
DEFAULTS.add(
    'allowed_short_fragment_overhang',
    10,
    defn='number of bases a read may extend past the start of its mate and still be part of a properly oriented pair',
)

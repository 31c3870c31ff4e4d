"""
holds methods related to processing cigar tuples. Cigar tuples are generally
an iterable list of tuples where the first element in each tuple is the
CIGAR value (i.e. 1 for an insertion), and the second value is the frequency
"""
import re

from ..constants import CIGAR

ALIGNED_STATES = {CIGAR.M, CIGAR.X, CIGAR.EQ}
QUERY_ALIGNED_STATES = ALIGNED_STATES | {CIGAR.I, CIGAR.S}
CLIPPING_STATE = {CIGAR.S, CIGAR.H}


def alignment_matches(cigar):
    """
    counts the number of aligned bases irrespective of match/mismatch
    this is equivalent to counting all CIGAR.M
    """
    result = 0
    for v, f in cigar:
        if v in ALIGNED_STATES:
            result += f
    return result


def leading_clipped_length(cigar):
    """
    total length of the clipping (soft and hard) at the start of the cigar

    Example:
        >>> leading_clipped_length([(CIGAR.H, 5), (CIGAR.S, 10), (CIGAR.M, 50)])
        15
    """
    result = 0
    for v, f in cigar:
        if v not in CLIPPING_STATE:
            break
        result += f
    return result


def query_aligned_length(cigar):
    """
    number of query bases consumed by the cigar, excluding clipping

    Example:
        >>> query_aligned_length([(CIGAR.S, 10), (CIGAR.M, 50), (CIGAR.I, 2), (CIGAR.M, 8)])
        60
    """
    return sum([f for v, f in cigar if v in QUERY_ALIGNED_STATES and v not in CLIPPING_STATE])


def convert_string_to_cigar(string):
    """
    Given a cigar string, converts it to the appropriate cigar tuple. The SAM placeholder '*' is an empty cigar

    Example:
        >>> convert_string_to_cigar('8M2I1D9X')
        [(CIGAR.M, 8), (CIGAR.I, 2), (CIGAR.D, 1), (CIGAR.X, 9)]
    """
    if string == '*':
        return []
    if not re.match(r'^(\d+[MIDNSHPX=])*$', string):
        raise ValueError('invalid cigar string', string)
    patt = r'(\d+(\D))'
    cigar = [m[0] for m in re.findall(patt, string)]
    cigar = [(CIGAR[match[-1]] if match[-1] != '=' else CIGAR.EQ, int(match[:-1])) for match in cigar]
    return cigar


def convert_cigar_to_string(cigar):
    if not cigar:
        return '*'
    return ''.join(['{}{}'.format(f, CIGAR.reverse(s) if s != CIGAR.EQ else '=') for s, f in cigar])

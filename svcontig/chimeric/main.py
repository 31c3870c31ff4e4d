import os

from .alignment import from_split_alignments
from .constants import COLUMNS, DEFAULTS
from . import serialize as _serialize
from ..bam.read import read_contig_alignments
from ..util import LOG, mkdirp, output_tabbed_file


def main(
    inputs, output,
    binary_output=None,
    min_mapq=DEFAULTS.min_mapq,
    min_align_length=DEFAULTS.min_align_length,
    **kwargs
):
    """
    Args:
        inputs (list): paths to the SAM/BAM files of the aligned contigs
        output (str): path to the tab-delimited output file
        binary_output (str): path to write the binary junction records to
        min_mapq (int): minimum mapping quality of a breakpoint flank
        min_align_length (int): minimum effective length of a breakpoint flank

    Returns:
        list of ChimericAlignment: the junctions called from all inputs
    """
    junctions = []
    for filename in inputs:
        LOG('reading:', filename, time_stamp=True)
        contigs = read_contig_alignments(filename, log=LOG.indent())
        LOG('read alignments for', len(contigs), 'contigs')
        for contig_name, regions, sequence in contigs:
            called = from_split_alignments(
                regions, sequence, min_mapq=min_mapq, min_align_length=min_align_length, log=LOG.indent())
            if called:
                LOG('called', len(called), 'junction(s) from', contig_name, indent_level=1)
            junctions.extend(called)
    LOG('called', len(junctions), 'junctions in total', time_stamp=True)

    output_tabbed_file(junctions, output, header=COLUMNS)
    if binary_output:
        if os.path.dirname(binary_output):
            mkdirp(os.path.dirname(binary_output))
        LOG('writing:', binary_output)
        with open(binary_output, 'wb') as fh:
            _serialize.dump(junctions, fh)
    return junctions


def decode_main(inputs, output, **kwargs):
    """
    write the text representation of every junction in the binary input files, one per line
    """
    count = 0
    if os.path.dirname(output):
        mkdirp(os.path.dirname(output))
    with open(output, 'w') as out_fh:
        LOG('writing:', output)
        for filename in inputs:
            LOG('reading:', filename)
            with open(filename, 'rb') as fh:
                for junction in _serialize.load(fh):
                    out_fh.write(str(junction) + '\n')
                    count += 1
    LOG('decoded', count, 'junctions')
    return count

"""
calls structural variant breakpoint junctions from the split alignments of locally assembled contigs
"""
__version__ = '0.1.0'

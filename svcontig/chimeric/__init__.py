"""
Sub-package Documentation
==========================

The chimeric sub-package turns the split alignments of locally assembled contigs into breakpoint junctions.

Types of Output Files
----------------------

+--------------------------------+------------------+----------------------------------------------------------------------+
| expected name/suffix           | file type/format | content                                                              |
+================================+==================+======================================================================+
| ``*.tab``                      | text/tabbed      | one row per junction                                                 |
+--------------------------------+------------------+----------------------------------------------------------------------+
| ``*.bin``                      | binary           | length-prefixed junction records (see serialize)                     |
+--------------------------------+------------------+----------------------------------------------------------------------+

Algorithm Overview
--------------------

- Group the alignment records by contig
- Order the alignment regions of each contig by their start on the contig
- Skip leading regions with low mapping quality
- Walk consecutive regions, dropping short ones and absorbing likely inserted sequence
- Pair the remaining consecutive regions into junctions and filter simple translocations

"""
from .alignment import ChimericAlignment, from_split_alignments

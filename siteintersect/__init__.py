# Copyright (c) 2022 Tuukka Norri
# This code is licensed under MIT license (see LICENSE for details).

# Intersection of genomic positions from any number of sorted sources, with a
# single pass over each source and one position per source held in memory.

from .chrom_dict import ChromDict
from .cursor import Cursor
from .intersect import Intersect, Merge, MultiwayJoin
from .position import chrom_of, colocated, pos_of, within

# Copyright (c) 2022 Tuukka Norri
# This code is licensed under MIT license (see LICENSE for details).

# A position is anything with a chromosome identifier and an integer offset
# along that chromosome. Records expose them as the attributes chrom and pos;
# plain (chrom, pos) tuples are accepted too.


def chrom_of(x):
	if isinstance(x, tuple) and not hasattr(x, "chrom"):
		return x[0]
	return x.chrom


def pos_of(x):
	if isinstance(x, tuple) and not hasattr(x, "pos"):
		return x[1]
	return x.pos


def colocated(lhs, rhs):
	"""Check whether two positions are on the same chromosome at the same offset."""
	return chrom_of(lhs) == chrom_of(rhs) and pos_of(lhs) == pos_of(rhs)


def within(window: int):
	"""Make a predicate that is true for positions on the same chromosome at most window apart."""
	if window < 0:
		raise ValueError(f"Window must be non-negative, got {window}")

	def helper(lhs, rhs):
		return chrom_of(lhs) == chrom_of(rhs) and abs(pos_of(lhs) - pos_of(rhs)) <= window
	return helper

# Copyright (c) 2022 Tuukka Norri
# This code is licensed under MIT license (see LICENSE for details).

import logging
from .position import chrom_of, pos_of


logger = logging.getLogger(__name__)


def cmp(lhs, rhs):
	return (lhs > rhs) - (lhs < rhs)


class ChromDict(object):
	"""Ordered set of chromosome identifiers.

	Merging positions from several sources requires a dictionary that contains
	the chromosomes occurring in every source, in the order in which they occur
	in those sources. The order is not verified; positions on chromosomes that
	are not in the dictionary have no order.
	"""

	def __init__(self, chromosomes = ()):
		self._ids = []
		self._index = {}
		for chrom in chromosomes:
			if chrom not in self._index:
				self._index[chrom] = len(self._ids)
				self._ids.append(chrom)

	@classmethod
	def from_chromosomes(cls, chromosomes):
		"""Wrap chromosome identifiers that have already been intersected and ordered."""
		return cls(chromosomes)

	@classmethod
	def from_merged_chromosomes(cls, chromosome_lists):
		"""Keep the identifiers that occur in every list, in the order of the first one."""
		retval = None
		for chromosomes in chromosome_lists:
			if retval is None:
				retval = list(cls(chromosomes))
			else:
				present = frozenset(chromosomes)
				retval = [chrom for chrom in retval if chrom in present]

		logger.debug("Chromosomes common to all sources: %s", retval)
		return cls(retval or ())

	@property
	def chromosomes(self):
		return tuple(self._ids)

	def index(self, chrom):
		return self._index[chrom]

	def contains(self, position):
		return chrom_of(position) in self._index

	def compare(self, lhs, rhs):
		"""Order two positions.

		Returns -1, 0 or 1 like cmp(), or None if the chromosome of either
		position is not in the dictionary. Positions on the same chromosome are
		ordered by offset, others by the order of their chromosomes.
		"""
		lhs_idx = self._index.get(chrom_of(lhs))
		rhs_idx = self._index.get(chrom_of(rhs))
		if lhs_idx is None or rhs_idx is None:
			return None

		if lhs_idx == rhs_idx:
			return cmp(pos_of(lhs), pos_of(rhs))
		return cmp(lhs_idx, rhs_idx)

	def __contains__(self, chrom):
		return chrom in self._index

	def __iter__(self):
		return iter(self._ids)

	def __len__(self):
		return len(self._ids)

	def __eq__(self, other):
		if not isinstance(other, ChromDict):
			return NotImplemented
		return self._ids == other._ids

	def __repr__(self):
		return f"ChromDict({self._ids!r})"

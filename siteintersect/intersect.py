# Copyright (c) 2022 Tuukka Norri
# This code is licensed under MIT license (see LICENSE for details).

import logging
from .chrom_dict import ChromDict
from .cursor import Cursor
from .position import chrom_of, colocated, pos_of, within


logger = logging.getLogger(__name__)


def is_intersection(positions, equivalent = colocated):
	"""Check whether all positions are pairwise equivalent.

	Colocation is transitive, so comparing against the first position is enough.
	Other predicates such as within() are not, and every pair is compared.
	"""
	if equivalent is colocated:
		first = positions[0]
		return all(colocated(first, x) for x in positions[1:])

	for i, lhs in enumerate(positions):
		for rhs in positions[i + 1:]:
			if not equivalent(lhs, rhs):
				return False
	return True


def argmax(positions, chrom_dict):
	"""Return the index of the greatest position.

	Ties go to the first of the greatest positions. Returns None if some
	position cannot be compared.
	"""
	retval = 0
	for i in range(1, len(positions)):
		res = chrom_dict.compare(positions[i], positions[retval])
		if res is None:
			return None
		if 1 == res:
			retval = i
	return retval


class MultiwayJoin(object):
	"""Iterator over tuples of equivalent positions, one from each sorted source.

	Each source must be sorted by the order given in chrom_dict when positions
	on other chromosomes are left out. Only the current position of each source
	is kept in memory.
	"""

	def __init__(self, sources, chrom_dict: ChromDict, equivalent = colocated):
		assert chrom_dict is not None
		self.cursors = [Cursor(source) for source in sources]
		if not self.cursors:
			raise ValueError("At least one source is required")
		self.chrom_dict = chrom_dict
		self.equivalent = equivalent
		self.is_terminated = False
		logger.debug("Joining %d sources over %d chromosomes.", len(self.cursors), len(chrom_dict))

	@classmethod
	def from_chromosomes(cls, sources, chromosome_lists, *args, **kwargs):
		"""Build the chromosome dictionary from each source's chromosome order."""
		chrom_dict = ChromDict.from_merged_chromosomes(chromosome_lists)
		return cls(sources, chrom_dict, *args, **kwargs)

	def _terminate(self, reason):
		logger.debug("Stopping: %s", reason)
		self.is_terminated = True

	def _search_target(self, position):
		return position

	def _next_candidates(self):
		retval = []
		for i, cursor in enumerate(self.cursors):
			position = cursor.next_candidate(self.chrom_dict)
			if position is None:
				self._terminate(f"source {i} exhausted")
				return None
			retval.append(position)
		return retval

	def _next(self):
		positions = self._next_candidates()
		if positions is None:
			return None

		while not is_intersection(positions, self.equivalent):
			# Move every source behind the greatest position up to it.
			max_idx = argmax(positions, self.chrom_dict)
			if max_idx is None:
				self._terminate("position outside the chromosome dictionary")
				return None

			max_pos = positions[max_idx]
			target = self._search_target(max_pos)
			for i, cursor in enumerate(self.cursors):
				if i == max_idx or self.equivalent(positions[i], max_pos):
					continue

				position = cursor.search(target, self.chrom_dict)
				if position is None:
					self._terminate(f"source {i} exhausted or not comparable while searching")
					return None
				positions[i] = position

		return tuple(positions)

	def __iter__(self):
		return self

	def __next__(self):
		if self.is_terminated:
			raise StopIteration

		try:
			retval = self._next()
		except Exception:
			self.is_terminated = True
			raise

		if retval is None:
			raise StopIteration
		return retval


class Intersect(MultiwayJoin):
	"""Tuples of colocated positions, i.e. the positions present in every source."""

	def __init__(self, sources, chrom_dict: ChromDict):
		super().__init__(sources, chrom_dict, colocated)


class Merge(MultiwayJoin):
	"""Tuples of positions on the same chromosome at most window apart from each other.

	Sources behind the greatest current position are moved forward only up to
	window before it. With window = 0 this is the same as Intersect.
	"""

	def __init__(self, sources, chrom_dict: ChromDict, window: int = 0):
		super().__init__(sources, chrom_dict, within(window))
		self.window = window

	def _search_target(self, position):
		# Positions up to window behind the greatest one still belong to the same site.
		return (chrom_of(position), pos_of(position) - self.window)

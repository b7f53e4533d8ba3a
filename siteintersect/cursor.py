# Copyright (c) 2022 Tuukka Norri
# This code is licensed under MIT license (see LICENSE for details).


class Cursor(object):
	"""Forward-only search over one sorted source of positions."""

	def __init__(self, source):
		assert source is not None
		self.source = iter(source)

	def next_candidate(self, chrom_dict):
		"""Return the next position on a chromosome in the dictionary, or None if the source runs out.

		Exceptions raised by the source are not caught.
		"""
		for position in self.source:
			if chrom_dict.contains(position):
				return position
		return None

	def search(self, target, chrom_dict):
		"""Return the first position not less than target.

		Returns None if the source runs out first, or if a position cannot be
		compared to target.
		"""
		while True:
			position = self.next_candidate(chrom_dict)
			if position is None:
				return None

			res = chrom_dict.compare(position, target)
			if res is None:
				return None
			if -1 != res:
				return position

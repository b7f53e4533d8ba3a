# Copyright (c) 2022 Tuukka Norri
# This code is licensed under MIT license (see LICENSE for details).

# Intersecting sorted VCF files read with vcfpy. The files are assumed to be
# sorted, and the contig lines of each header are assumed to be listed in the
# order used for the records.

import vcfpy
from .chrom_dict import ChromDict
from .intersect import Intersect, Merge


class Site(object):
	"""A VCF record with a 0-based position."""

	def __init__(self, record):
		self.record = record
		self.chrom = record.CHROM
		self.pos = record.POS - 1

	def __repr__(self):
		return f"Site({self.chrom!r}, {self.pos})"

	def genotype(self, sample_idx: int = 0):
		"""Return the GT field of the given sample, or None if there is none."""
		calls = self.record.calls
		if not 0 <= sample_idx < len(calls):
			return None
		return calls[sample_idx].data.get("GT")


def records(vcf_recs):
	"""Wrap VCF records into sites."""
	assert vcf_recs is not None

	for rec in vcf_recs:
		yield Site(rec)


def contigs(header):
	"""Return the contig identifiers in the order of the header lines."""
	return [line.mapping["ID"] for line in header.get_lines("contig")]


def chrom_dict_from_headers(headers):
	return ChromDict.from_merged_chromosomes([contigs(header) for header in headers])


def intersect_vcfs(readers, chrom_dict = None):
	"""Iterate over the sites present in every VCF.

	If chrom_dict is not given, it is built from the contig lines of the
	headers.
	"""
	readers = list(readers)
	if chrom_dict is None:
		chrom_dict = chrom_dict_from_headers(reader.header for reader in readers)
	return Intersect([records(reader) for reader in readers], chrom_dict)


def merge_vcfs(readers, window: int = 0, chrom_dict = None):
	readers = list(readers)
	if chrom_dict is None:
		chrom_dict = chrom_dict_from_headers(reader.header for reader in readers)
	return Merge([records(reader) for reader in readers], chrom_dict, window)


def open_readers(paths):
	return [vcfpy.Reader.from_path(path) for path in paths]

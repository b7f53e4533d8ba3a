# Copyright (c) 2023 Tuukka Norri
# This code is licensed under MIT license (see LICENSE for details).

from Bio import SeqIO


def chromosomes_from_fasta(fasta_fp):
	""" List the sequence identifiers of a FASTA file in file order."""
	return [rec.id for rec in SeqIO.parse(fasta_fp, "fasta")]


def chromosomes_from_fai(fai_fp):
	""" List the sequence identifiers of a FASTA index (.fai) in file order."""
	def helper():
		for line_ in fai_fp:
			line = line_.rstrip("\n")
			if not line:
				continue
			fields = line.split("\t")
			yield fields[0]
	return list(helper())

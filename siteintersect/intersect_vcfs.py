# Copyright (c) 2022 Tuukka Norri
# This code is licensed under MIT license (see LICENSE for details).

# Output the sites present in all of the given sorted VCF files. For each
# site, write the chromosome, the 0-based position and the genotype of the
# selected sample in each file.

import argparse
import logging
import sys
from .chrom_dict import ChromDict
from .reference import chromosomes_from_fai, chromosomes_from_fasta
from .vcf import contigs, intersect_vcfs, merge_vcfs, open_readers


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
	logging.basicConfig(format = "%(levelname)s: %(message)s", level = logging.DEBUG if verbose else logging.INFO)
	logging.captureWarnings(True)


def make_chrom_dict(readers, fasta_fp = None, fai_fp = None):
	chromosome_lists = [contigs(reader.header) for reader in readers]
	if fasta_fp is not None:
		chromosome_lists.insert(0, chromosomes_from_fasta(fasta_fp))
	if fai_fp is not None:
		chromosome_lists.insert(0, chromosomes_from_fai(fai_fp))
	return ChromDict.from_merged_chromosomes(chromosome_lists)


def output_sites(sites, sample_idx, fp, progress_interval = 1000000):
	fp.write("CHROM\tPOS\tGENOTYPES\n")
	lineno = 0
	for lineno, site in enumerate(sites, start = 1):
		first = site[0]
		gts = ";".join(str(rec.genotype(sample_idx)) for rec in site)
		fp.write(f"{first.chrom}\t{first.pos}\t{gts}\n")

		if 0 == lineno % progress_interval:
			logger.info(f"Processed {lineno} sites…")
	return lineno


def main(argv = None):
	parser = argparse.ArgumentParser(description = "Output the sites present in all of the given sorted VCF files.")
	parser.add_argument("input_vcf", type = str, nargs = "+", help = "Input VCF")
	parser.add_argument("--reference", type = argparse.FileType("r"), required = False, default = None, help = "Reference FASTA; its sequence order is used for the chromosomes")
	parser.add_argument("--fai", type = argparse.FileType("r"), required = False, default = None, help = "Reference FASTA index; its sequence order is used for the chromosomes")
	parser.add_argument("--window", metavar = "N", type = int, required = False, default = None, help = "Report sites on the same chromosome at most N apart instead of exact matches")
	parser.add_argument("--sample-index", metavar = "N", type = int, default = 0, help = "Index of the sample whose genotype is output")
	parser.add_argument("--verbose", action = "store_true", help = "Output debugging messages")
	args = parser.parse_args(argv)

	if args.window is not None and args.window < 0:
		parser.error("--window must be non-negative")
	if args.sample_index < 0:
		parser.error("--sample-index must be non-negative")

	setup_logging(args.verbose)

	readers = open_readers(args.input_vcf)
	try:
		for path, reader in zip(args.input_vcf, readers):
			if len(reader.header.samples.names) <= args.sample_index:
				logger.warning(f"{path} has no sample with index {args.sample_index}; its genotypes are output as None.")

		chrom_dict = make_chrom_dict(readers, args.reference, args.fai)
		logger.info(f"Chromosomes in common: {len(chrom_dict)}")

		if args.window is None:
			sites = intersect_vcfs(readers, chrom_dict)
		else:
			sites = merge_vcfs(readers, args.window, chrom_dict)

		count = output_sites(sites, args.sample_index, sys.stdout)
		logger.info(f"Sites output: {count}")
	finally:
		for reader in readers:
			reader.close()


if __name__ == "__main__":
	main()

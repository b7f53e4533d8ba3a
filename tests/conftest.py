# Copyright (c) 2022 Tuukka Norri
# This code is licensed under MIT license (see LICENSE for details).

import pytest


VCF_HEADER = (
	"##fileformat=VCFv4.2\n"
	"{contigs}"
	"##FORMAT=<ID=GT,Number=1,Type=String,Description=\"Genotype\">\n"
	"#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\t{sample}\n"
)


def write_vcf(path, sample, contigs, records):
	"""Write a minimal VCF with one sample; records are (chrom, 1-based pos, GT)."""
	with open(path, "w") as fp:
		fp.write(VCF_HEADER.format(
			contigs = "".join(f"##contig=<ID={contig},length=1000>\n" for contig in contigs),
			sample = sample
		))
		for chrom, pos, gt in records:
			fp.write(f"{chrom}\t{pos}\t.\tA\tC\t.\t.\t.\tGT\t{gt}\n")
	return str(path)


@pytest.fixture
def vcf_paths(tmp_path):
	"""Three VCFs whose only common sites are 2:4 and 4:2."""
	return [
		write_vcf(tmp_path / "a.vcf", "sample0", ["1", "2", "3", "4"], [
			("1", 2, "0/0"),
			("2", 2, "0/0"),
			("2", 4, "0/1"),
			("4", 2, "1/1"),
		]),
		write_vcf(tmp_path / "b.vcf", "sample1", ["1", "2", "4"], [
			("1", 3, "0/1"),
			("2", 3, "0/1"),
			("2", 4, "0/0"),
			("4", 2, "0/1"),
			("4", 6, "1/1"),
		]),
		write_vcf(tmp_path / "c.vcf", "sample2", ["2", "3", "4"], [
			("2", 2, "0/1"),
			("2", 3, "0/0"),
			("2", 4, "1/1"),
			("3", 2, "0/1"),
			("4", 2, "0/0"),
			("4", 8, "0/1"),
		]),
	]

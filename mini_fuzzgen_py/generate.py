"""miniFuzzGen - 初始语料生成入口模块。
"""
from __future__ import annotations

import sys
import argparse
import logging
from typing import Optional
from pathlib import Path

from .core.state import FuzzState
from .core.monitor import GenerationMonitor, export_histogram_csv
from .core.seeding import seed_corpus, seed_dummies
from .errors import ConfigError, GenerationError
from .generators import create_generator
from .utils.config import GENERATOR_CHOICES, load_config, merge_overrides


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="miniFuzzGen - generate an initial fuzzing corpus")
	parser.add_argument("--config", help="path to a JSON config file (values are overridden by CLI options)")
	parser.add_argument("--generator", choices=GENERATOR_CHOICES, help="generator kind: bytes or printables")
	parser.add_argument("--max-size", type=int, help="inclusive upper bound on generated input length")
	parser.add_argument("--num", type=int, help="number of inputs to generate")
	parser.add_argument("--seed", type=int, help="random seed (default: time based)")
	parser.add_argument("--outdir", help="output directory for generated inputs")
	parser.add_argument("--dummy", action="store_true", help="only emit deterministic dummy inputs")
	parser.add_argument("--no-fallback", action="store_true", help="abort instead of falling back to dummy inputs on generation errors")
	parser.add_argument("--stats-csv", help="also export the size histogram as CSV to this path")
	parser.add_argument("--verbose", action="store_true", help="enable debug logging")
	return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> int:
	"""解析参数、生成语料并写出到输出目录。"""
	args = parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
	)

	try:
		cfg = load_config(args.config)
		cfg = merge_overrides(
			cfg,
			generator=args.generator,
			max_size=args.max_size,
			num_inputs=args.num,
			seed=args.seed,
			outdir=args.outdir,
			fallback_to_dummy=False if args.no_fallback else None,
		)
	except ConfigError as e:
		print(f"error: {e}", file=sys.stderr)
		return 2

	out_dir = Path(cfg["outdir"])
	try:
		out_dir.mkdir(parents=True, exist_ok=True)
	except OSError as e:
		print(f"error: cannot create outdir {out_dir}: {e}", file=sys.stderr)
		return 4

	state = FuzzState.with_seed(cfg["seed"])
	generator = create_generator(cfg["generator"], cfg["max_size"])
	monitor = GenerationMonitor()

	print(f"generator: {generator!r}")
	print(f"seed: {getattr(state.rand, 'seed', None)}, num: {cfg['num_inputs']}, outdir: {out_dir}")

	if args.dummy:
		seed_dummies(state, generator, cfg["num_inputs"], stats=monitor)
	else:
		try:
			seed_corpus(state, generator, cfg["num_inputs"],
					   fallback_to_dummy=cfg["fallback_to_dummy"], stats=monitor)
		except GenerationError as e:
			print(f"error: generation failed: {e}", file=sys.stderr)
			return 3

	try:
		written = state.corpus.dump_to_dir(out_dir)
		records_path = monitor.export_records(str(out_dir / "gen_records.json"))
		print(f"generation records exported to: {records_path}")
		if args.stats_csv:
			export_histogram_csv(monitor.size_histogram(), args.stats_csv)
			print(f"size histogram exported to: {args.stats_csv}")
	except OSError as e:
		print(f"error: cannot write output: {e}", file=sys.stderr)
		return 4

	sizes = [r.size for r in monitor.records]
	print("======== generation summary ========")
	print(f"  generated: {len(monitor.records)} (dummy: {monitor.dummy_count})")
	print(f"  unique files written: {len(written)}")
	if sizes:
		print(f"  size: min={min(sizes)}, max={max(sizes)}, avg={sum(sizes) / len(sizes):.2f}")
	print("===== generation finished =====")
	return 0


if __name__ == "__main__":
	sys.exit(main())

"""
graphcoreset command-line interface.

Usage
-----
    graphcoreset sample roads.gr --k 10 --trials 5 --seed 1 -o coreset.json
    graphcoreset sample city.json --variant round --round-cap 50 --max-rounds 8
    graphcoreset bench --generator grid_2d --sizes 100 400 --k 3 --runs 3
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from graphcoreset.algorithms.wrappers import BestOfTrialsAlgorithm, ThorupSampleAlgorithm
from graphcoreset.api import assign, sample_best_coreset, sample_coreset
from graphcoreset.config import ExperimentConfig, GeneratorConfig, SamplerVariant
from graphcoreset.engine.runner import ExperimentRunner, summarize
from graphcoreset.exceptions import CoresetError
from graphcoreset.generators import list_generators
from graphcoreset.utils.instance_loader import graph_summary, load_graph

logger = logging.getLogger("graphcoreset")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphcoreset",
        description="Sample k-median coresets from weighted graphs.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sample = sub.add_parser("sample", help="Sample a coreset from a graph file.")
    sample.add_argument("path", help="Graph file: JSON instance or DIMACS (.gr/.dimacs/.sp).")
    sample.add_argument("--directed", action="store_true", help="Keep DIMACS arcs directed.")
    sample.add_argument(
        "--variant", choices=["best", *[v.value for v in SamplerVariant]], default="best",
        help="'best' runs best-of-trials; 'hierarchical'/'round' run one sampler directly.",
    )
    sample.add_argument("--k", type=int, default=5, help="Target number of facilities.")
    sample.add_argument("--trials", type=int, default=5, help="Trials for best-of-trials.")
    sample.add_argument("--seed", type=int, default=0)
    sample.add_argument("--round-cap", type=int, help="Vertices sampled per round.")
    sample.add_argument("--max-rounds", type=int, help="Upper bound on sampling rounds.")
    sample.add_argument("--output", "-o", type=str, help="Write the result JSON here.")

    bench = sub.add_parser("bench", help="Run coreset algorithms on generated graphs.")
    bench.add_argument("--generator", "-g", choices=list_generators(), default="grid_2d")
    bench.add_argument("--sizes", type=int, nargs="+", default=[100, 400])
    bench.add_argument("--count", type=int, default=1, help="Instances per size.")
    bench.add_argument("--k", type=int, default=3)
    bench.add_argument("--trials", type=int, default=5)
    bench.add_argument("--runs", type=int, default=3)
    bench.add_argument("--seed", type=int, default=0)
    bench.add_argument("--csv", type=str, help="Write raw results to this CSV file.")

    return parser


def _cmd_sample(args: argparse.Namespace) -> int:
    graph = load_graph(args.path, directed=args.directed)
    logger.info("Graph summary: %s", graph_summary(graph))

    if args.variant == "best":
        result = sample_best_coreset(
            graph, args.k, args.seed, args.trials,
            samples_per_round=args.round_cap, max_rounds=args.max_rounds,
        )
    else:
        if args.round_cap is None or args.max_rounds is None:
            raise SystemExit("--round-cap and --max-rounds are required with --variant "
                             f"{args.variant}")
        sample = sample_coreset(graph, args.round_cap, args.max_rounds, args.seed, args.variant)
        result = assign(graph, sample)

    payload = result.model_dump_json(indent=2)
    if args.output:
        with open(args.output, "w") as f:
            f.write(payload)
        print(f"Wrote {len(result.sample)} samples (cost {result.total_cost:g}) to {args.output}")
    else:
        print(payload)
    return 0


def _cmd_bench(args: argparse.Namespace) -> int:
    config = ExperimentConfig(
        generators=[GeneratorConfig(type=args.generator, sizes=args.sizes,
                                    count_per_size=args.count)],
        runs_per_config=args.runs,
        base_seed=args.seed,
    )
    runner = ExperimentRunner(config)
    runner.register_algorithm(BestOfTrialsAlgorithm(k=args.k, num_trials=args.trials))
    runner.register_algorithm(ThorupSampleAlgorithm(k=args.k))
    df = runner.run()

    if args.csv:
        df.to_csv(args.csv, index=False)
        print(f"Wrote {len(df)} rows to {args.csv}")
    print(summarize(df).to_string(index=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=os.environ.get("GRAPHCORESET_LOG_LEVEL", "INFO").upper(),
        format="%(levelname)s | %(message)s",
    )
    args = _build_parser().parse_args(argv)

    try:
        if args.command == "sample":
            return _cmd_sample(args)
        return _cmd_bench(args)
    except (CoresetError, FileNotFoundError) as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

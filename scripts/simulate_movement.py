import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import argparse
import logging
import numpy as np
from pathlib import Path

from catch_movement.core.parser import Parser
from catch_movement.data.features import movement_features, summarize
from catch_movement.difficulty.calculator import clock_rate_for_mods, create_difficulty_hit_objects


def main(argv=None):
    arg_parser = argparse.ArgumentParser(description="Simulate catcher movement over an osu!catch beatmap")
    arg_parser.add_argument("beatmap", help="path to a .osu beatmap file")
    arg_parser.add_argument("--mods", nargs="*", default=[], help="rate changing mods (DT, NC, HT, DC)")
    arg_parser.add_argument("--output", help="save the feature matrix to this .npy file")
    arg_parser.add_argument("--verbose", action="store_true")
    args = arg_parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if not os.path.exists(args.beatmap):
        print(f"Error: File not found: {args.beatmap}")
        return 1

    if not args.beatmap.endswith('.osu'):
        print(f"Error: Not a .osu file: {args.beatmap}")
        return 1

    beatmap = Parser(args.beatmap).parse()
    clock_rate = clock_rate_for_mods(args.mods)

    print(f"Loaded beatmap: {Path(args.beatmap).name}")
    print(f"Mode: {beatmap.mode} | CircleSize: {beatmap.circle_size} | Clock rate: {clock_rate}")

    history = create_difficulty_hit_objects(beatmap, clock_rate=clock_rate)
    features = movement_features(history)

    print(f"\n{'idx':>5} {'time':>10} {'norm':>9} {'player':>9} {'moved':>9} {'exact':>9} {'strain':>8} hd")
    for obj in history:
        print(f"{obj.index:5d} {obj.start_time:10.1f} "
              f"{obj.normalized_position:9.2f} {obj.player_position:9.2f} "
              f"{obj.distance_moved:9.2f} {obj.exact_distance_moved:9.2f} "
              f"{obj.strain_time:8.1f} {'*' if obj.last_object.hyper_dash else ''}")

    summary = summarize(features)
    print(f"\n{'='*60}")
    print(f"Objects: {summary['objects']}")
    print(f"Hyperdashes: {summary['hyper_dashes']}")
    print(f"Total distance moved: {summary['total_distance_moved']:.2f}")
    print(f"Total exact distance moved: {summary['total_exact_distance_moved']:.2f}")
    print(f"Mean strain time: {summary['mean_strain_time']:.2f}ms")
    print(f"{'='*60}")

    if args.output:
        np.save(args.output, features)
        print(f"Features saved to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Convenient executable script to plot harness CSV logs.

Usage:
    python plot_sim_log.py <csv_file> [options]

Examples:
    python plot_sim_log.py output/elevator_demo.csv
    python plot_sim_log.py output/elevator_demo.csv --analyze --after 5
    python plot_sim_log.py output/elevator_demo.csv --save plots/
"""

import argparse
import sys
from pathlib import Path

from control_sim.analyzer.metrics import compute_tracking_metrics
from control_sim.analyzer.plots import SimulationPlotter
from control_sim.logging.csv_logger import read_log_csv


def main():
    parser = argparse.ArgumentParser(
        description='Plot closed-loop simulation logs from CSV files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s harness.csv
  %(prog)s harness.csv --analyze --after 5
  %(prog)s harness.csv --travel-limits -0.02 2.5 --voltage-limit 12
  %(prog)s harness.csv --save output_dir/
        """
    )

    parser.add_argument(
        'csv_file',
        type=str,
        help='Path to CSV log file'
    )

    parser.add_argument(
        '--analyze',
        action='store_true',
        help='Print tracking metrics against the last logged setpoint'
    )

    parser.add_argument(
        '--after',
        type=float,
        default=0.0,
        metavar='T',
        help='Only analyze samples after this time (s), e.g. once homing is done'
    )

    parser.add_argument(
        '--travel-limits',
        type=float,
        nargs=2,
        metavar=('MIN', 'MAX'),
        help='Travel bounds drawn on the position panel'
    )

    parser.add_argument(
        '--voltage-limit',
        type=float,
        metavar='V',
        help='Saturation voltage drawn on the voltage panel'
    )

    parser.add_argument(
        '--save',
        type=str,
        metavar='DIR',
        help='Save plot to directory instead of displaying'
    )

    parser.add_argument(
        '--dpi',
        type=int,
        default=150,
        help='DPI for saved figures (default: 150)'
    )

    args = parser.parse_args()

    csv_path = Path(args.csv_file)
    if not csv_path.exists():
        print(f"Error: CSV file not found: {csv_path}", file=sys.stderr)
        sys.exit(1)

    print(f"Loading simulation log from: {csv_path}")

    try:
        arrays = read_log_csv(str(csv_path))
    except ValueError as e:
        print(f"Error loading CSV: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Loaded {len(arrays['time'])} samples")
    print()

    if args.analyze:
        window = arrays['time'] > args.after
        if window.sum() < 2:
            print(f"Error: fewer than 2 samples after t={args.after}", file=sys.stderr)
            sys.exit(1)
        setpoint = float(arrays['setpoint'][-1])
        metrics = compute_tracking_metrics(
            arrays['time'][window], arrays['position'][window], setpoint
        )
        print(f"Tracking metrics (setpoint {setpoint:.4f} m):")
        for name, value in metrics.to_dict().items():
            print(f"  {name}: {value:.4f}")
        print()

    plotter = SimulationPlotter()
    fig = plotter.plot_log(
        arrays,
        title=csv_path.stem,
        travel_limits=tuple(args.travel_limits) if args.travel_limits else None,
        voltage_limit=args.voltage_limit,
    )

    if args.save:
        save_dir = Path(args.save)
        save_dir.mkdir(parents=True, exist_ok=True)
        filepath = save_dir / f"{csv_path.stem}.png"
        SimulationPlotter.save(fig, str(filepath), dpi=args.dpi)
        print(f"Saved: {filepath}")
    else:
        SimulationPlotter.show()


if __name__ == '__main__':
    main()

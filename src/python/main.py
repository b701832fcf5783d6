#!/usr/bin/env python3
"""
===============================================================================
HYPERCOMPLEX - DEMO ENTRY POINT
===============================================================================
Loads a list of quaternion operands from YAML, runs every arithmetic
operation on them and logs the rendered results. This is a diagnostic
driver for the Quaternion type; it is not part of the importable package.

USAGE:
    python main.py                          # Default config/quaternion_config.yaml
    python main.py --config my_config.yaml  # Custom operand list
    python main.py --verbose                # Include library debug records

DEPENDENCIES:
    numpy, pyyaml
    Install: pip install numpy pyyaml

===============================================================================
"""

import sys
import argparse
import logging
from pathlib import Path

import yaml

# ---------------------------------------------------------------------------
# Path setup: ensure the package is importable without installation
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

from hypercomplex.constants import COMPONENT_COUNT, DISPLAY_PRECISION
from hypercomplex.quaternion import Quaternion

logger = logging.getLogger('QUAT_MAIN')


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stdout, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def parse_operand(value) -> Quaternion:
    """
    Turn one configuration entry into a quaternion.

    Args:
        value: A real number, or a list of exactly four real numbers

    Returns:
        The corresponding Quaternion

    Raises:
        ValueError: If the entry is neither form
    """
    if isinstance(value, bool):
        raise ValueError(f"Operand must be a number or a 4-element list, got {value!r}")
    if isinstance(value, (int, float)):
        return Quaternion.from_scalar(value)
    if isinstance(value, list):
        if len(value) != COMPONENT_COUNT:
            raise ValueError(
                f"Operand list must have {COMPONENT_COUNT} components, got {value!r}"
            )
        return Quaternion.from_components(value)
    raise ValueError(f"Operand must be a number or a 4-element list, got {value!r}")


def load_config(config_path: str = None) -> dict:
    """
    Load the demo configuration from a YAML file.

    Args:
        config_path: Path to YAML config. Defaults to config/quaternion_config.yaml

    Returns:
        Dictionary with 'precision' (int), 'scalar' (float) and
        'operands' (list of Quaternion)

    Raises:
        ValueError: If the file is not a mapping, has no operands, or
            has a malformed entry or display section
    """
    if config_path is None:
        config_path = str(PROJECT_ROOT.parent.parent / 'config' / 'quaternion_config.yaml')

    logger.info(f"Loading configuration from: {config_path}")
    with open(config_path, 'r') as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Top level of {config_path} must be a mapping")

    entries = raw.get('operands')
    if not entries:
        raise ValueError(f"No operands defined in {config_path}")

    display = raw.get('display') or {}
    if not isinstance(display, dict):
        raise ValueError(f"'display' in {config_path} must be a mapping")

    config = {
        'precision': int(display.get('precision', DISPLAY_PRECISION)),
        'scalar': float(raw.get('scalar', 1.0)),
        'operands': [parse_operand(entry) for entry in entries],
    }
    logger.info(f"Loaded {len(config['operands'])} operands")
    return config


def _evaluate(lhs, rhs) -> dict:
    """All four binary operations for one operand pair."""
    return {
        'sum': lhs + rhs,
        'difference': lhs - rhs,
        'product': lhs * rhs,
        'quotient': lhs / rhs,
    }


def run_demo(config: dict) -> dict:
    """
    Run every operation over the configured operands.

    Consecutive operands are combined pairwise, and each operand is also
    combined with the configured scalar from both sides.

    Args:
        config: Dictionary returned by load_config()

    Returns:
        Dictionary with 'unary', 'pairs' and 'scalar' result lists
    """
    precision = config['precision']
    scalar = config['scalar']
    operands = config['operands']
    results = {'unary': [], 'pairs': [], 'scalar': []}

    logger.info("=" * 60)
    logger.info("UNARY OPERATIONS")
    logger.info("=" * 60)
    for q in operands:
        entry = {
            'operand': q,
            'negated': -q,
            'conjugate': q.conjugate(),
            'norm': q.norm(),
        }
        results['unary'].append(entry)
        logger.info(f"q = {q.to_string(precision)}")
        logger.info(f"  -q      = {entry['negated'].to_string(precision)}")
        logger.info(f"  conj(q) = {entry['conjugate'].to_string(precision)}")
        logger.info(f"  norm(q) = {entry['norm']:.{precision}f}")

    logger.info("=" * 60)
    logger.info("BINARY OPERATIONS")
    logger.info("=" * 60)
    for lhs, rhs in zip(operands, operands[1:]):
        entry = {'lhs': lhs, 'rhs': rhs, **_evaluate(lhs, rhs)}
        results['pairs'].append(entry)
        logger.info(f"a = {lhs.to_string(precision)}")
        logger.info(f"b = {rhs.to_string(precision)}")
        for name in ('sum', 'difference', 'product', 'quotient'):
            logger.info(f"  {name:<10} = {entry[name].to_string(precision)}")

    logger.info("=" * 60)
    logger.info(f"SCALAR OPERATIONS (s = {scalar})")
    logger.info("=" * 60)
    for q in operands:
        entry = {
            'operand': q,
            'right': _evaluate(q, scalar),
            'left': _evaluate(scalar, q),
        }
        results['scalar'].append(entry)
        logger.info(f"q = {q.to_string(precision)}")
        logger.info(f"  q / s = {entry['right']['quotient'].to_string(precision)}")
        logger.info(f"  s / q = {entry['left']['quotient'].to_string(precision)}")

    return results


def main(argv=None):
    """Main entry point for the demo driver."""
    parser = argparse.ArgumentParser(
        description='Quaternion arithmetic demo',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--config', type=str, default=None,
                        help='Path to YAML configuration file')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    config = load_config(args.config)
    return run_demo(config)


if __name__ == '__main__':
    main()

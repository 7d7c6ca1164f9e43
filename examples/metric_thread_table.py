"""
Build a change gear table for common ISO metric coarse pitches.

For each pitch, prints the best train using only the gears on hand, and
the best train if one extra gear were bought.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from changegears.io import load_config
from changegears.solver import RatioSolver, validate_config

# ISO 261 coarse thread pitches, M3 to M24 (mm)
ISO_COARSE_PITCHES_MM = [0.5, 0.7, 0.8, 1.0, 1.25, 1.5, 1.75, 2.0, 2.5, 3.0]

config = load_config(os.path.join(os.path.dirname(__file__), "myLathe.conf"))
validation = validate_config(config)
if not validation.valid:
    for msg in validation.errors:
        print(f"ERROR: {msg.message}")
    sys.exit(1)

solver = RatioSolver(config)

print("="*78)
print(f"METRIC THREADS ON A {config.lead:g} TPI LEADSCREW")
print("="*78)
print()
print(f"{'Pitch':>6}  {'Driving':<12} {'Driven':<12} {'Error %':>9}   {'+1 gear':<8} {'Error %':>9}")
print("-"*78)

for pitch in ISO_COARSE_PITCHES_MM:
    best = solver.solve_available(pitch)[0]
    best_plus = solver.solve_available_plus(pitch)[0]

    driving = "-".join(str(t) for t in best.driving_gears)
    driven = "-".join(str(t) for t in best.driven_gears)
    extra = f"{best_plus.extra_gear_teeth}T" if best_plus.extra_gear_teeth else "(none)"

    print(
        f"{pitch:>6.2f}  {driving:<12} {driven:<12} {best.error_percent:>9.4f}   "
        f"{extra:<8} {best_plus.error_percent:>9.4f}"
    )

print()
print("Gears are listed in stage order: the first driving gear meshes with the first driven gear.")

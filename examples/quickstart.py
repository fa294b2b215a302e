#!/usr/bin/env python3
"""Quick start example: recover a Shamir secret from base-encoded shares.

Demonstrates the core workflow:
  1. Decode shares written in mixed bases
  2. Interpolate the first k points at x = 0
  3. Compare the exact and termwise division modes
  4. Recover a whole share file, as the CLI does
"""

from pathlib import Path

from ssr.codec import decode_share
from ssr.interpolation import DivisionMode, interpolate_at_zero, lagrange_weights_at_zero
from ssr.loader import load_share_set
from ssr.models import Point, Share
from ssr.recovery import recover

# --- 1. Decode shares ---
#   y = x^2 + 3, shares at x = 1, 2, 3, 6 in bases 10, 2, 10, 4
shares = [Share(1, 10, "4"), Share(2, 2, "111"), Share(3, 10, "12"), Share(6, 4, "213")]
points = [decode_share(s) for s in shares]
print("Decoded points:", ", ".join(f"({p.x},{p.y})" for p in points))

# --- 2. Interpolate with threshold k = 3 (uses the first three points) ---
secret = interpolate_at_zero(points, k=3)
print(f"Secret: {secret}")

# --- 3. Exact vs termwise division ---
#   On y = x^2 at x = 1, 2, 4 the basis values are not all integers.
uneven = [Point(1, 1), Point(2, 4), Point(4, 16)]
print("Basis values at 0:", [str(w) for w in lagrange_weights_at_zero([p.x for p in uneven])])
print(f"  exact:    {interpolate_at_zero(uneven, mode=DivisionMode.EXACT)}")
print(f"  termwise: {interpolate_at_zero(uneven, mode=DivisionMode.TERMWISE)}")

# --- 4. Recover a share file ---
share_set = load_share_set(Path(__file__).with_name("testcase1.json"))
result = recover(share_set)
print(f"\n{result.name}: n={result.n}, k={result.k}, secret={result.secret}")

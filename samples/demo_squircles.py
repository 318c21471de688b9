"""
Squircley walkthrough
Sweeps the curvature slider, parses every generated path back with
svgpathtools, and writes one SVG per step next to this script.
"""
from pathlib import Path

from squircley.engine.superellipse import build_path, curvature_to_exponent
from squircley.svg.serializer import generate_squircle_svg
from squircley.svg.validation import inspect_path

OUT_DIR = Path(__file__).parent / "out"
OUT_DIR.mkdir(exist_ok=True)

# ============================================================
# STEP 1: Curvature sweep (slider 0-100 -> exponent 0.5-10)
# ============================================================
print("=" * 60)
print("STEP 1: CURVATURE SWEEP")
print("=" * 60)

for curvature in range(0, 101, 25):
    p = curvature_to_exponent(curvature)
    report = inspect_path(build_path(100, 100, p))
    xmin, ymin, xmax, ymax = report.bbox
    print(f"\n--- curvature {curvature} (p = {p:.3f}) ---")
    print(f"  Valid: {report.valid}  closed: {report.closed}  cubics: {report.cubic_count}")
    print(f"  Bounding box: x=[{xmin:.2f}, {xmax:.2f}] y=[{ymin:.2f}, {ymax:.2f}]")
    print(f"  Enclosed area: {report.area:.1f}")

    (OUT_DIR / f"squircle_c{curvature:03d}.svg").write_text(generate_squircle_svg(curvature))


# ============================================================
# STEP 2: Rotation (rigid, so the area must not move)
# ============================================================
print("\n" + "=" * 60)
print("STEP 2: ROTATION")
print("=" * 60)

for rotation in range(0, 360, 45):
    report = inspect_path(build_path(100, 100, curvature_to_exponent(75), rotation))
    print(f"  {rotation:3d} deg  width={report.width:7.2f}  area={report.area:9.1f}")

print(f"\nWrote SVGs to {OUT_DIR}")

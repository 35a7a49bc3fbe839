"""
Demonstration of hinge calculation and model patching.

Calculates a beam, a brace and a column from the example section catalog,
prints the intermediate values and writes the hinges into a throw-away
$2k model.
"""

import tempfile
from pathlib import Path

from steelhinge.batch import run_batch
from steelhinge.core.logging import configure_logging
from steelhinge.core.variants import BeamVariant, BraceVariant, ColumnVariant, VariantCollection
from steelhinge.design import calculate, get_calculator
from steelhinge.io.section_source import CatalogSectionSource
from steelhinge.visualization import plot_backbone

HERE = Path(__file__).parent

MODEL = (
    'TABLE:  "PROGRAM CONTROL"\n'
    '   ProgramName=SAP2000   Version=24.0.0   CurrUnits="KN, mm, C"\n'
    "\n"
    "END TABLE DATA\n"
)


def main():
    configure_logging("INFO")
    catalog = CatalogSectionSource.from_yaml(HERE / "sections.yaml")

    print("=" * 60)
    print("steelhinge - Hinge Parameter Demo")
    print("=" * 60)

    # ===== Beam =====
    print("\n1. Beam IPE400 framing into HEB300:")
    print("-" * 60)

    beam = BeamVariant(
        name="V1", section_name="IPE400", category="Beam-I-Section",
        length=6000, fy=345, column_section="HEB300",
        column_length=3500, column_fy=345,
    )
    beam = calculate(beam, catalog)
    res = beam.results
    cls = res.classification
    print(f"  bf/tf = {cls.flange_ratio:.2f}  (compact <= {cls.compact_flange_limit:.2f})")
    print(f"  h/tw  = {cls.web_ratio:.2f}  (compact <= {cls.compact_web_limit:.2f})")
    print(f"  My    = {res.yield_moment:.1f} kN·m")
    print(f"  θy    = {res.yield_rotation:.5f} rad")
    f = res.control_factors
    print(f"  control = {f.connection}, {f.hinge_location}, {f.panel_zone:.3f}, {f.slenderness:.3f}")
    print(f"  adjustment = {f.adjustment_factor:.3f}")
    print(f"  a' = {res.profile_prime.a:.2f}, b' = {res.profile_prime.b:.2f}, CP' = {res.profile_prime.CP:.2f}")

    # ===== Brace =====
    print("\n2. Brace BOX150, 3 m:")
    print("-" * 60)

    brace = BraceVariant(
        name="B1", section_name="BOX150", category="Brace-Tube-Section",
        length=3000, fy=345, length_minor=3000, length_major=3000,
    )
    brace = calculate(brace, catalog)
    res = brace.results
    print(f"  KL/r = {res.classification.slenderness:.1f}")
    print(f"  Fcr  = {res.capacity.critical_stress:.1f} MPa")
    print(f"  P_y  = {res.capacity.compression_force:.1f} kN,  T_y = {res.capacity.tension_force:.1f} kN")
    print(f"  compression a/b/c = {res.compression.a:.2f}/{res.compression.b:.2f}/{res.compression.c:.2f}")

    # ===== Column =====
    print("\n3. Column HEB300, 3.5 m:")
    print("-" * 60)

    column = ColumnVariant(
        name="C1", section_name="HEB300", category="Column-I-Section",
        length=3500, fy=345,
    )
    column = calculate(column, catalog)
    print(f"  KL/r = {column.results.classification.slenderness:.1f}")
    print(f"  Axial capacity = {column.results.axial_capacity:.1f} kN")

    # ===== Patch =====
    print("\n4. Writing hinges into a model:")
    print("-" * 60)

    collection = VariantCollection()
    for variant in (beam, brace, column):
        collection.add(variant)

    with tempfile.TemporaryDirectory() as tmp:
        model_path = Path(tmp) / "frame.$2k"
        model_path.write_text(MODEL, encoding="latin-1")
        summary = run_batch(collection, catalog, model_path)
        print(summary.to_frame().to_string(index=False))
        print()
        print(model_path.read_text(encoding="latin-1"))

    record = get_calculator("Beam").build_hinge_record(beam)
    fig = plot_backbone(record, title="IPE400_V1_M3")
    print(f"Backbone figure with {len(fig.data[0].x)} points ready (fig.show() to display)")


if __name__ == "__main__":
    main()

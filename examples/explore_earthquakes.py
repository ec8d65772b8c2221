"""
Exploration demo: USGS earthquake queries

Runs the fixed queries (a well-located magnitude band and a radius
search around Tokyo), prints telemetry and a short summary of each table.
"""

import logging
import sys
from pathlib import Path

# Allow running from project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from quakequery import LocationQuery, MagnitudeQuery, QueryService


def show(title, result):
    print("=" * 60)
    print(title)
    print("=" * 60)
    print(f"  Success:    {result.success}")
    print(f"  Records:    {result.records}")
    print(f"  Duration:   {result.duration_seconds:.2f}s")
    print(f"  URL:        {result.url}")
    print()

    if not result.success:
        print(f"Error ({result.error_type}): {result.error}")
        print()
        return

    df = result.table.to_dataframe(parse_time=True)
    if df.empty:
        print("  No events.")
        print()
        return

    print("--- Largest 5 Events ---")
    for _, row in df.nlargest(5, "magnitude").iterrows():
        print(f"  M{row['magnitude']:.1f} ({row['measurement_method']})  {row['place']}")
    print()

    print("--- Events by Network ---")
    for network, count in df["network"].value_counts().head(5).items():
        print(f"  {network}: {count}")
    print()

    print("--- Magnitude / Gap Summary ---")
    print(df[["magnitude", "gap", "rms"]].describe().round(2).to_string())
    print()


def main():
    logging.basicConfig(level=logging.INFO)

    with QueryService() as service:
        show(
            "Magnitude 5-10, azimuthal gap <= 90 degrees",
            service.extract(MagnitudeQuery(min_magnitude=5, max_magnitude=10, max_gap=90.0)),
        )
        show(
            "Within 300 km of Tokyo",
            service.extract(LocationQuery(latitude=35.68, longitude=139.69, max_radius_km=300)),
        )


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Simple demo script generating one image per octave preset.
"""

import numpy as np
from py_heightmap.config import get_preset, list_presets
from py_heightmap.core import ColorBand, HeightClassifier, generate
from py_heightmap.export import export_image


def main():
    """Generate and summarise every preset."""
    print("Py-Heightmap Preset Demo")
    print("=" * 40)

    width, height = 400, 240
    seed = 20240601
    classifier = HeightClassifier()

    for preset in list_presets():
        print(f"\n{preset.upper()} preset:")
        print("-" * 30)

        result = generate(width, height, get_preset(preset), seed=seed)
        filename = f"preset_{preset}.png"
        export_image(result.pixels, filename)

        heights = result.heights
        print(f"  Height range: {result.height_range.minimum:.3f}-{result.height_range.maximum:.3f}")
        print(f"  Average height: {np.mean(heights):.3f}")

        # Band distribution
        counts = {band: 0 for band in ColorBand}
        for value in heights.ravel()[::7]:
            counts[classifier.band_for(float(value))] += 1
        total = sum(counts.values())
        print("  Band distribution (sampled):")
        for band, count in counts.items():
            bar = '#' * int(count / total * 20)
            print(f"    {band.value:>8}: {bar} ({count / total * 100:.1f}%)")

        print(f"  Saved {filename}")


if __name__ == "__main__":
    main()

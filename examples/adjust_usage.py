"""
Example: lightening and darkening colours with rgbshade.

Demonstrates how to:
- Darken a palette by a relative amount
- Lighten colours given in different formats
- Use the fluent ColorAdjuster
- Plot original and adjusted colours side by side
"""

import logging

import matplotlib

from rgbshade import ColorAdjuster, PlotConfig, adjust_colours, plot_comparison

# Configure logging to see adjuster activity
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def example_1_darken_palette():
    """Example 1: Darken a palette by 20%."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Darken a palette")
    print("=" * 70)

    palette = ["#FF0000", "#FF8000", "#FFFF00", "#80FF00", "#00FF00"]
    darker = adjust_colours(palette, adj=-0.2)

    for old, new in zip(palette, darker):
        print(f"  {old} -> {new}")


def example_2_mixed_formats():
    """Example 2: Lighten colours given as names, hex strings and tuples."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Mixed colour formats")
    print("=" * 70)

    cols = ["navy", "#abc", (34, 139, 34), (0.5, 0.0, 0.5)]
    lighter = adjust_colours(cols, adj=0.5)

    for old, new in zip(cols, lighter):
        print(f"  {old!s:>18} -> {new}")


def example_3_fluent_adjuster():
    """Example 3: Reuse a configured adjuster."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Fluent ColorAdjuster")
    print("=" * 70)

    adjuster = ColorAdjuster().lighten(0.3)
    print(f"  {adjuster!r}: {adjuster(['tab:blue', 'tab:orange'])}")

    adjuster.darken(0.3)
    print(f"  {adjuster!r}: {adjuster(['tab:blue', 'tab:orange'])}")


def example_4_comparison_plot():
    """Example 4: Plot originals above adjusted colours."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Comparison plot")
    print("=" * 70)

    palette = [matplotlib.colormaps["viridis"](i / 9) for i in range(10)]
    old = adjust_colours(palette, adj=0)
    new = adjust_colours(palette, adj=-0.3)

    config = PlotConfig(figsize=(8.0, 2.0), labels=("viridis", "viridis -30%"))
    fig = plot_comparison(old, new, config=config, show=False)
    fig.savefig("comparison.png", dpi=100)
    print("  Saved comparison.png")


if __name__ == "__main__":
    example_1_darken_palette()
    example_2_mixed_formats()
    example_3_fluent_adjuster()
    example_4_comparison_plot()

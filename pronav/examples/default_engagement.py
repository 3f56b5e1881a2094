#!/usr/bin/env python
"""Reference pure pro-nav engagement.

A 1 m/s pursuer starts at the origin heading north and chases a target
starting at (250, 250) m moving at (0.2, 0.5) m/s. The navigation gain is
N = 4 and the simulation steps at 0.4 s for up to 1250 s.

Outputs (plots, trajectory CSV, summary JSON) are written to a timestamped
directory under ./outputs/.
"""

import logging

import matplotlib.pyplot as plt
import numpy as np

from pronav import (
    EngagementConfig,
    OutputContext,
    plot_heading_history,
    plot_positions,
    plot_range_history,
    run_engagement,
)


def main() -> None:
    """Run the reference engagement."""
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    print("=" * 60)
    print("PURE PROPORTIONAL NAVIGATION")
    print("=" * 60)

    config = EngagementConfig()

    print(f"\n   Gain N:          {config.navigation_gain:g}")
    print(f"   Pursuer speed:   {config.pursuer_speed:.2f} m/s")
    print(f"   Target start:    {config.target_position} m")
    print(f"   Target velocity: {config.target_velocity} m/s")
    print(f"   Time step:       {config.dt} s ({config.max_iterations} max steps)")

    result = run_engagement(config)

    print("\nResults:")
    print("-" * 40)
    print(f"   Status:          {result.status.value}")
    print(f"   Steps:           {result.steps}")
    print(f"   Min range:       {result.min_range:.4f} m at t = {result.min_range_time:.1f} s")
    if result.intercepted:
        print(f"   Intercept time:  {result.intercept_time:.1f} s")
    final_heading = np.degrees(result.log.pursuer_heading[-1]) if len(result.log) else 0.0
    print(f"   Final heading:   {final_heading:.1f} deg")

    with OutputContext("default_engagement") as ctx:
        for name, plot in (
            ("range.png", plot_range_history),
            ("heading.png", plot_heading_history),
            ("positions.png", plot_positions),
        ):
            fig = plot(result)
            fig.savefig(ctx.path(name), dpi=120)
            plt.close(fig)

        ctx.save_config(config)
        ctx.save_result(result)
        ctx.log(f"Outputs saved to {ctx.output_dir}")

    print("\n" + "=" * 60)
    print("SIMULATION COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()

#!/usr/bin/env python
"""Pure pro-nav with current drift and a gain sweep.

The same engagement is flown with a current of 0.1 m/s south and 0.1 m/s
west, for navigation gains 3, 4 and 5. The drift slips both positions
without entering the guidance law, so the pursuer has to correct for it
through the LOS rate alone.
"""

import logging
from dataclasses import replace

from pronav import EngagementConfig, OutputContext, run_engagement
from pronav.storage import load_config


def main() -> None:
    """Run the drift gain sweep."""
    logging.basicConfig(level=logging.WARNING, format="[%(levelname)s] %(message)s")

    base = EngagementConfig(disturbance=(-0.1, -0.1), duration=2000.0)

    print("=" * 60)
    print("PURE PRO-NAV WITH CURRENT DRIFT")
    print("=" * 60)
    print(f"\n   Current: {base.disturbance} m/s")
    print(f"\n   {'N':>4}  {'status':>12}  {'steps':>6}  {'min range (m)':>14}")

    with OutputContext("current_drift") as ctx:
        for gain in (3.0, 4.0, 5.0):
            label = f"n{gain:g}"
            config = load_config(ctx.save_config(replace(base, navigation_gain=gain), label=label))

            result = run_engagement(config)
            print(
                f"   {gain:>4g}  {result.status.value:>12}  {result.steps:>6d}"
                f"  {result.min_range:>14.4f}"
            )
            ctx.save_result(result, label=label)

    print("\n" + "=" * 60)
    print("SWEEP COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()

"""
Demo Runner
===========
Builds the sample fields, evaluates Gauss' and Ampère's Laws at one distance,
adds two samples of each kind and prints the results to stdout.

Usage:
    $ python -m fieldcalc
"""
import logging
from typing import List

from fieldcalc.config import DEMO_INPUTS, DemoInputs
from fieldcalc.logging_config import setup_logging
from fieldcalc.model.fields import ElectricFieldSample, MagneticFieldSample
from fieldcalc.model.vector import format_component

logger = logging.getLogger(__name__)


def build_report(inputs: DemoInputs = DEMO_INPUTS) -> List[str]:
    e1 = ElectricFieldSample.from_components(*inputs.electric_1)
    e2 = ElectricFieldSample.from_components(*inputs.electric_2)
    b1 = MagneticFieldSample.from_components(*inputs.magnetic_1)
    b2 = MagneticFieldSample.from_components(*inputs.magnetic_2)

    lines = ["Initial Fields:", e1.describe(), b1.describe()]

    r = inputs.distance
    e1.compute_from_point_charge(inputs.charge, r)
    lines.append("")
    lines.append(f"E at r = {format_component(r)}: {e1}, {e1.magnitude_text()}")

    b1.compute_from_current(inputs.current, r)
    lines.append(f"B at r = {format_component(r)}: {b1}, {b1.magnitude_text()}")

    e3 = e1 + e2
    b3 = b1 + b2

    lines.append("")
    lines.append("Summed Fields:")
    lines.append(str(e3))
    lines.append(str(b3))
    return lines


def main() -> None:
    setup_logging()
    logger.debug(f"Running demo with {DEMO_INPUTS}")

    for line in build_report(DEMO_INPUTS):
        print(line)


if __name__ == "__main__":
    main()

"""
mission_profile.py

Defines the scenario being assessed: where the rocket is launched from,
what it is claimed to have hit, and the elevation it is fired at.
"""

import dataclasses
from dataclasses import dataclass

from Environment.geodesy import Coordinate, Site


def _default_launch_site() -> Site:
    return Site(
        name="Cambodia launch site",
        coordinate=Coordinate(14.3559, 103.2586),
        description="Cambodia",
    )


def _default_target() -> Site:
    return Site(
        name="PTT gas station",
        coordinate=Coordinate(15.1198505, 104.3200196),
        description="Thailand",
    )


@dataclass
class MissionProfile:
    launch_site: Site = dataclasses.field(default_factory=_default_launch_site)
    target: Site = dataclasses.field(default_factory=_default_target)

    # 45 deg maximises drag-free range
    launch_angle_deg: float = 45.0

    def __post_init__(self):
        if not 0.0 < self.launch_angle_deg <= 90.0:
            raise ValueError(f"launch_angle_deg must be within (0, 90], got {self.launch_angle_deg}")

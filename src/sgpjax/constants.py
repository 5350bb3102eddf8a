"""
The `constants` module defines the mathematical constants shared by the
SGP4/SDP4 initialization and propagation routines.
"""

from math import pi as PI

# Mathematical Constants
"""
Full turn in radians. Units: *rad*
"""
TWOPI = 2.0 * PI

"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert a mean motion in revolutions per day to radians per
minute. Equal to 2pi/1440. Units: *(rad/min)/(rev/day)*
"""
REVPERDAY2RADPERMIN = PI / 720.0

# Time Constants

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00). Units: *days*
"""
JD_J2000 = 2451545.0

"""
Number of days in a Julian year. Units: *days*
"""
DAYS_PER_JULIAN_YEAR = 365.25

# Earth Constants

"""
Earth sidereal rotation rate used by SGP4. Units: *rad/min*

References:

1. F. R. Hoots, R. L. Roehrich, *Spacetrack Report No. 3*, 1980
"""
SIDEREAL_SPEED = 4.37526908801129966e-3

"""
Mean motion separating near-earth (SGP4) from deep-space (SDP4) orbits,
corresponding to a 225 minute period. Units: *rad/min*
"""
DEEP_SPACE_MEAN_MOTION = 2.0 * PI / 225.0

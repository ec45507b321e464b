"""Breakpoint tables and descriptor vocabularies for the 20-80 scouting scale.

Step tables are ordered from the highest threshold down; a value earns the
grade of the first threshold it meets, and anything below the last threshold
grades out at :data:`FLOOR_GRADE`.
"""

from dataclasses import dataclass

MIN_GRADE = 20
MAX_GRADE = 80
FLOOR_GRADE = MIN_GRADE

type Breakpoints = tuple[tuple[float, int], ...]

# 100 = league average for the season
PLUS_STAT_BREAKPOINTS: Breakpoints = (
    (180, 80),
    (160, 70),
    (140, 60),
    (120, 55),
    (90, 50),
    (80, 45),
    (70, 40),
    (60, 30),
)

WAR_BREAKPOINTS: Breakpoints = (
    (9.0, 80),
    (7.0, 70),
    (5.0, 60),
    (3.0, 55),
    (2.0, 50),
    (1.0, 45),
    (-0.3, 40),
    (-1.0, 30),
)

# Stolen bases per 600 plate appearances
SPEED_BREAKPOINTS: Breakpoints = (
    (50, 80),
    (40, 70),
    (30, 60),
    (25, 55),
    (15, 50),
    (10, 45),
    (5, 40),
    (2, 30),
)

SPEED_PA_BASIS = 600

# 90th percentile exit velocity, mph
EXIT_VELO_BREAKPOINTS: Breakpoints = (
    (112.0, 80),
    (110.0, 70),
    (108.0, 60),
    (107.0, 55),
    (105.0, 50),
    (103.0, 45),
    (101.0, 40),
    (99.0, 30),
)

# Continuous grade -> nearest scouting step
ROUNDING_BREAKPOINTS: Breakpoints = (
    (75, 80),
    (65, 70),
    (57.5, 60),
    (52.5, 55),
    (47.5, 50),
    (42.5, 45),
    (35, 40),
    (25, 30),
)


@dataclass(frozen=True)
class FieldingThresholds:
    """Fielding runs that map to grades 80, 50 and 20."""

    grade80: float
    grade50: float
    grade20: float


@dataclass(frozen=True)
class FieldingEra:
    start_year: int | None
    end_year: int | None
    catcher: FieldingThresholds
    other: FieldingThresholds

    def contains(self, year: int) -> bool:
        if self.start_year is not None and year < self.start_year:
            return False
        if self.end_year is not None and year > self.end_year:
            return False
        return True


FIELDING_ERAS: tuple[FieldingEra, ...] = (
    FieldingEra(
        start_year=None,
        end_year=2001,
        catcher=FieldingThresholds(grade80=15, grade50=0, grade20=-15),
        other=FieldingThresholds(grade80=20, grade50=0, grade20=-20),
    ),
    FieldingEra(
        start_year=2002,
        end_year=2015,
        catcher=FieldingThresholds(grade80=30, grade50=0, grade20=-30),
        other=FieldingThresholds(grade80=15, grade50=0, grade20=-15),
    ),
    FieldingEra(
        start_year=2016,
        end_year=None,
        catcher=FieldingThresholds(grade80=30, grade50=0, grade20=-30),
        other=FieldingThresholds(grade80=15, grade50=0, grade20=-15),
    ),
)

GRADE_DESCRIPTORS: dict[int, str] = {
    80: "elite",
    70: "exceptional",
    60: "plus",
    55: "above average",
    50: "average",
    45: "fringe average",
    40: "below average",
    30: "poor",
    20: "extremely poor",
}

GRADE_DESCRIPTORS_VERBOSE: dict[int, str] = {
    80: "generational, elite, otherworldly, best in baseball",
    70: "exceptional, plus-plus, excellent, fantastic",
    60: "strong, plus, very good",
    55: "solid, above average, good",
    50: "average, league average, MLB regular",
    45: "slight negative, fringe average, fringey",
    40: "below average, replacement level, questionable, negative",
    30: "poor, well below MLB standard, bad",
    20: "extremely poor, unplayable, terrible",
}

FIELDING_DESCRIPTORS: dict[int, str] = {
    80: "all-time great defender, defensive wizard",
    70: "Gold Glove caliber defender",
    60: "one of the better defenders at his position",
    55: "above average defender",
    50: "solid defender, average",
    45: "adequate defender, fringy",
    40: "below average defender, questionable",
    30: "poor defender, liability",
    20: "extremely poor defender, unplayable",
}

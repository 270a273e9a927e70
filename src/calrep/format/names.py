from __future__ import annotations

from typing import Tuple

MONTH_NAMES: Tuple[str, ...] = (
    "Vendémiaire", "Brumaire", "Frimaire",     # autumn
    "Nivôse", "Pluviôse", "Ventôse",           # winter
    "Germinal", "Floréal", "Prairial",         # spring
    "Messidor", "Thermidor", "Fructidor",      # summer
)

ABBREVIATED_MONTH_NAMES: Tuple[str, ...] = (
    "Vend", "Brum", "Frim", "Niv", "Pluv", "Vent",
    "Germ", "Flor", "Prair", "Mess", "Therm", "Fruct",
)

# Days of the décade
DAY_NAMES: Tuple[str, ...] = (
    "Primidi", "Duodi", "Tridi", "Quartidi", "Quintidi",
    "Sextidi", "Septidi", "Octidi", "Nonidi", "Décadi",
)

# Sansculottides; the last one only in leap years
COMPLEMENTARY_DAY_NAMES: Tuple[str, ...] = (
    "Jour de la vertu",
    "Jour du génie",
    "Jour du travail",
    "Jour de l'opinion",
    "Jour des récompenses",
    "Jour de la révolution",
)

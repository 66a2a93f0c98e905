"""Meteorological file opening and annual CO2 / N deposition records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, TextIO

from .ini import IniError, InitFile, file_open


@dataclass
class Co2Control:
    """Annual atmospheric CO2 concentrations (ppm) by year."""

    years: List[int] = field(default_factory=list)
    ppm: List[float] = field(default_factory=list)


@dataclass
class NdepControl:
    """Annual nitrogen deposition values by year."""

    years: List[int] = field(default_factory=list)
    values: List[float] = field(default_factory=list)


def met_init(init: InitFile) -> TextIO:
    """Read the MET_INPUT block, open the met file and skip its header.

    Returns the open met data stream positioned at the first data line.
    """
    try:
        init.expect_keyword("MET_INPUT")
    except IniError as exc:
        raise IniError(f"Error reading keyword for met file in {init.name}") from exc
    try:
        metf = init.open_listed_file("i")
    except IniError as exc:
        raise IniError("Error opening met data file: met_init()") from exc
    try:
        nhead = init.read_int()
    except IniError as exc:
        metf.close()
        raise IniError("Error reading number of met file header lines: met_init()") from exc
    reader = InitFile(metf, getattr(metf, "name", "<met>"))
    for line_number in range(1, nhead + 1):
        try:
            reader.read_string()
        except IniError as exc:
            metf.close()
            raise IniError(f"Error reading met file header line #{line_number}") from exc
    return metf


def ndep_init(path) -> NdepControl:
    """Read year / N deposition pairs from the file at *path*."""
    with file_open(path, "i") as ndepfile:
        tokens = ndepfile.read().split()
    if len(tokens) % 2:
        raise IniError(
            f"Error reading annual NDEP array from {path}: file must contain "
            "a pair of values for each simyear: year and ndep."
        )
    ctrl = NdepControl()
    pairs = zip(tokens[::2], tokens[1::2])
    for year, value in pairs:
        try:
            ctrl.years.append(int(year))
            ctrl.values.append(float(value))
        except ValueError as exc:
            raise IniError(f"Error reading annual NDEP array from {path}: {exc}") from exc
    return ctrl


def get_co2(co2: Co2Control, simyr: int) -> float:
    """Return the CO2 concentration for *simyr*; KeyError if absent."""
    for year, ppm in zip(co2.years, co2.ppm):
        if year == simyr:
            return ppm
    raise KeyError(f"no CO2 value for year {simyr}")


def get_ndep(ndepctrl: NdepControl, simyr: int) -> float:
    """Return the N deposition value for *simyr*; KeyError if absent."""
    for year, value in zip(ndepctrl.years, ndepctrl.values):
        if year == simyr:
            return value
    raise KeyError(f"no N deposition value for year {simyr}")
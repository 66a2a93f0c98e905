"""Output control block reading and opening of output files."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import IO, List, Optional

from .ini import IniError, InitFile, file_open


class RunMode(Enum):
    """How the simulation is being run."""

    SPINUP = "spinup"
    MODEL = "model"
    SPINNGO = "spinngo"


@dataclass
class OutputControl:
    """Output options and the output files opened for a run."""

    outprefix: str = ""
    dodaily: bool = False
    domonavg: bool = False
    doannavg: bool = False
    doannual: bool = False
    onscreen: bool = False
    bgc_ascii: bool = False
    daycodes: List[int] = field(default_factory=list)
    anncodes: List[int] = field(default_factory=list)
    dayout: Optional[IO] = None
    monavgout: Optional[IO] = None
    annavgout: Optional[IO] = None
    annout: Optional[IO] = None
    dayoutascii: Optional[IO] = None
    monoutascii: Optional[IO] = None
    annoutascii: Optional[IO] = None
    anntext: Optional[IO] = None

    @property
    def ndayout(self) -> int:
        return len(self.daycodes)

    @property
    def nannout(self) -> int:
        return len(self.anncodes)

    def _open_streams(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if hasattr(value, "close") and hasattr(value, "write"):
                yield f.name, value

    def close(self) -> None:
        """Close every output file that is open."""
        for name, stream in list(self._open_streams()):
            stream.close()
            setattr(self, name, None)

    def __enter__(self) -> "OutputControl":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _read_flag(init: InitFile, what: str) -> bool:
    try:
        return bool(init.read_int())
    except IniError as exc:
        raise IniError(f"Error reading {what} flag: output_ctrl()") from exc


def _read_codes(init: InitFile, what: str) -> List[int]:
    try:
        count = init.read_int()
    except IniError as exc:
        raise IniError(f"Error reading number of {what} outputs: output_ctrl()") from exc
    codes = []
    for number in range(count):
        try:
            codes.append(init.read_int())
        except IniError as exc:
            raise IniError(f"Error reading {what} output #{number}: output_ctrl()") from exc
    return codes


def _expect(init: InitFile, keyword: str) -> None:
    try:
        init.expect_keyword(keyword)
    except IniError as exc:
        raise IniError(f"Error reading keyword for output file data: {exc}") from exc


def output_ctrl(init: InitFile, mode: Optional[RunMode] = None) -> OutputControl:
    """Read the OUTPUT_CONTROL, DAILY_OUTPUT and ANNUAL_OUTPUT blocks.

    In spinup and spin-and-go modes the daily, monthly and annual output
    flags are forced off; in model mode they are forced on.
    """
    output = OutputControl()
    _expect(init, "OUTPUT_CONTROL")
    try:
        output.outprefix = init.read_string()
    except IniError as exc:
        raise IniError("Error reading outfile prefix: output_ctrl()") from exc

    forced: Optional[bool]
    if mode in (RunMode.SPINUP, RunMode.SPINNGO):
        forced = False
    elif mode is RunMode.MODEL:
        forced = True
    else:
        forced = None

    for name, what in (
        ("dodaily", "daily output"),
        ("domonavg", "monthly average output"),
        ("doannavg", "annual average output"),
        ("doannual", "annual output"),
    ):
        value = _read_flag(init, what)
        setattr(output, name, value if forced is None else forced)
    output.onscreen = _read_flag(init, "on-screen indicator")

    _expect(init, "DAILY_OUTPUT")
    output.daycodes = _read_codes(init, "daily")

    _expect(init, "ANNUAL_OUTPUT")
    try:
        nannout = init.read_int()
    except IniError as exc:
        raise IniError("Error reading number of annual outputs: output_ctrl()") from exc
    if nannout == 0 and not output.daycodes and mode in (RunMode.MODEL, RunMode.SPINNGO):
        raise IniError(
            "You are trying to run the model with no output variables. "
            "Please add some output variables to your ini file."
        )
    for number in range(nannout):
        try:
            output.anncodes.append(init.read_int())
        except IniError as exc:
            raise IniError(f"Error reading annual output #{number}: output_ctrl()") from exc
    return output


def _header_lines(version: str) -> List[str]:
    columns = ("ann PRCP", "ann Tavg", "max LAI", "ann ET", "ann OF", "ann NPP", "ann NBP")
    return [
        f"Annual summary output from model version {version}\n",
        "ann PRCP = annual total precipitation (mm/yr)\n",
        "ann Tavg = annual average air temperature (deg C)\n",
        "max LAI = annual maximum value of projected leaf area index (m2/m2)\n",
        "ann ET = annual total evapotranspiration (mm/yr)\n",
        "ann OF = annual total outflow (mm/yr)\n",
        "ann NPP = annual total net primary production (gC/m2/yr)\n",
        "ann NPB = annual total net biome production (gC/m2/yr)\n\n",
        f"{'year':>6}" + "".join(f"{c:>10}" for c in columns) + "\n",
    ]


def output_init(output: OutputControl, version: str) -> None:
    """Open the output files that *output* asks for, named from its prefix."""
    prefix = str(output.outprefix)
    plan = [
        ("dayout", output.dodaily, ".dayout", "w", "daily outfile"),
        ("monavgout", output.domonavg, ".monavgout", "w", "monthly average outfile"),
        ("annavgout", output.doannavg, ".annavgout", "w", "annual average outfile"),
        ("annout", output.doannual, ".annout", "w", "annual outfile"),
        ("dayoutascii", output.bgc_ascii and output.dodaily, ".dayout.ascii", "o",
         "daily ascii outfile"),
        ("monoutascii", output.bgc_ascii and output.domonavg, ".monavgout.ascii", "o",
         "monthly ascii outfile"),
        ("annoutascii", output.bgc_ascii and output.doannual, ".annout.ascii", "o",
         "annual ascii outfile"),
        ("anntext", output.bgc_ascii and output.doannual, "_ann.txt", "o",
         "annual text file"),
    ]
    try:
        for attribute, wanted, suffix, mode, what in plan:
            if not wanted:
                continue
            path = prefix + suffix
            try:
                setattr(output, attribute, file_open(path, mode))
            except IniError as exc:
                raise IniError(f"Error opening {what} ({path}) in output_init()") from exc
        if output.anntext is not None:
            output.anntext.writelines(_header_lines(version))
    except BaseException:
        output.close()
        raise
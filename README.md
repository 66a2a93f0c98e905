# bgcsim

`bgcsim` holds the daily process routines of a point ecosystem
biogeochemistry model: potential decomposition, maintenance and growth
respiration, phenology and first-day initialization, mortality, soil water
outflow and nitrogen leaching. It also reads the model's text
initialization files and ecophysiological constants, looks up annual CO2
and nitrogen deposition records, opens output files and maps numbered
output codes to model variables.

The routines work in place on dataclass records (`CarbonState`,
`NitrogenFlux`, `EpVar` and so on) and raise exceptions when input is
malformed or missing.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `bgcsim.ini`: `InitFile` reads one value per line (`read_int`,
  `read_float`, `read_string`, `expect_keyword`, `open_listed_file`).
  `file_open` opens a path in mode `'r'`, `'i'`, `'w'` or `'o'`.
  `end_init` checks for the closing `END_INIT` keyword. Errors are raised
  as `IniError`.
- `bgcsim.structs`: the state, flux and parameter records, including
  `MetVar`, `MetArrays`, `PhenArrays`, `Phenology`, `WaterState`,
  `WaterFlux`, `CarbonState`, `CarbonFlux`, `NitrogenState`,
  `NitrogenFlux`, `EpConst`, `EpVar`, `SiteConst`, `NTemp`, `PsnStruct`,
  `Summary`, `CInit` and `BgcConstants`. It also provides `zero_fluxes`,
  which resets the daily fluxes, and `daymet` and `dayphen`, which copy
  one day out of the yearly arrays.
- `bgcsim.epc`: `epc_init(init)` reads the `EPC_FILE` block, opens the
  listed file and returns an `EpConst`.
- `bgcsim.metdata`: `met_init(init)` opens the met file and skips its
  header lines. `ndep_init(path)` reads year and deposition pairs into an
  `NdepControl`. `get_co2` and `get_ndep` look up a year in a `Co2Control`
  or an `NdepControl`, and raise `KeyError` when the year is absent.
- `bgcsim.respiration`: `maint_resp` and `growth_resp`.
- `bgcsim.decomp`: `decomp` computes the potential decomposition and
  mineral N fluxes and stores them in an `NTemp`.
- `bgcsim.water`: `outflow` and `nleaching`.
- `bgcsim.phenology`: `phenology`, `leaf_litfall`, `froot_litfall` and
  `firstday`.
- `bgcsim.mortality`: `mortality` applies whole-plant mortality first and
  fire mortality after it.
- `bgcsim.outputmap`: `output_map_init` builds an `OutputMap`. This is a
  live mapping from output codes to record attributes, with `values(codes)`
  and `name(code)`. `output_ascii` writes one tab-separated line at single
  precision.
- `bgcsim.output`: `output_ctrl(init, mode)` reads the output control
  blocks into an `OutputControl`. Give it a `RunMode` to force the output
  flags on or off. `output_init(output, version)` opens the requested
  output files. `OutputControl` is a context manager and closes those
  files on exit.

## Example

```python
from bgcsim.structs import CarbonFlux, NitrogenFlux, WaterFlux, zero_fluxes
from bgcsim.metdata import NdepControl, get_ndep

wf, cf, nf = WaterFlux(), CarbonFlux(), NitrogenFlux()
zero_fluxes(wf, cf, nf)

ndep = NdepControl(years=[2000, 2001], values=[0.0008, 0.0009])
print(get_ndep(ndep, 2001))  # 0.0009
```

`BgcConstants` has no built-in values. The caller supplies the growth
respiration fractions, soil C:N ratios, respiration fractions, base decay
rates and mobile N proportion. `growth_resp` and `decomp` take these
constants, and `firstday` and `nleaching` take the single values they need.

## What the package does not do

There is no command and no driver that runs a whole simulation year by
year. The package has no daily carbon allocation step, no photosynthesis
or canopy water routine, and no state update between days. It also does
not read the daily values of an open met file into `MetArrays`, and it
does not write restart files. These routines are building blocks for such
a driver.
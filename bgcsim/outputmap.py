"""Numbered output variable map and tab-separated text output."""

from __future__ import annotations

import struct
from typing import Any, Dict, Iterable, Iterator, List, Mapping, TextIO, Tuple

from .structs import (
    CarbonFlux,
    CarbonState,
    EpVar,
    MetVar,
    NitrogenFlux,
    NitrogenState,
    Phenology,
    PsnStruct,
    Summary,
    WaterFlux,
    WaterState,
)

_METV = """
prcp tmax tmin tavg tday tnight tsoil vpd swavgfd swabs swtrans
swabs_per_plaisun swabs_per_plaishade ppfd_per_plaisun ppfd_per_plaishade
par parabs pa co2 dayl
"""

_WS = """
soilw snoww canopyw prcp_src outflow_snk soilevap_snk snowsubl_snk
canopyevap_snk trans_snk
"""

_WF = """
prcp_to_canopyw prcp_to_soilw prcp_to_snoww canopyw_evap canopyw_to_soilw
snoww_subl snoww_to_soilw soilw_evap soilw_trans soilw_outflow
"""

_CS = """
leafc leafc_storage leafc_transfer frootc frootc_storage frootc_transfer
livestemc livestemc_storage livestemc_transfer deadstemc deadstemc_storage
deadstemc_transfer livecrootc livecrootc_storage livecrootc_transfer
deadcrootc deadcrootc_storage deadcrootc_transfer gresp_storage gresp_transfer
cwdc litr1c litr2c litr3c litr4c soil1c soil2c soil3c soil4c cpool
psnsun_src psnshade_src leaf_mr_snk leaf_gr_snk froot_mr_snk froot_gr_snk
livestem_mr_snk livestem_gr_snk deadstem_gr_snk livecroot_mr_snk
livecroot_gr_snk deadcroot_gr_snk litr1_hr_snk litr2_hr_snk litr4_hr_snk
soil1_hr_snk soil2_hr_snk soil3_hr_snk soil4_hr_snk fire_snk
"""

_CF = """
m_leafc_to_litr1c m_leafc_to_litr2c m_leafc_to_litr3c m_leafc_to_litr4c
m_frootc_to_litr1c m_frootc_to_litr2c m_frootc_to_litr3c m_frootc_to_litr4c
m_leafc_storage_to_litr1c m_frootc_storage_to_litr1c
m_livestemc_storage_to_litr1c m_deadstemc_storage_to_litr1c
m_livecrootc_storage_to_litr1c m_deadcrootc_storage_to_litr1c
m_leafc_transfer_to_litr1c m_frootc_transfer_to_litr1c
m_livestemc_transfer_to_litr1c m_deadstemc_transfer_to_litr1c
m_livecrootc_transfer_to_litr1c m_deadcrootc_transfer_to_litr1c
m_livestemc_to_cwdc m_deadstemc_to_cwdc m_livecrootc_to_cwdc
m_deadcrootc_to_cwdc m_gresp_storage_to_litr1c m_gresp_transfer_to_litr1c
m_leafc_to_fire m_frootc_to_fire
m_leafc_storage_to_fire m_frootc_storage_to_fire m_livestemc_storage_to_fire
m_deadstemc_storage_to_fire m_livecrootc_storage_to_fire
m_deadcrootc_storage_to_fire
m_leafc_transfer_to_fire m_frootc_transfer_to_fire
m_livestemc_transfer_to_fire m_deadstemc_transfer_to_fire
m_livecrootc_transfer_to_fire m_deadcrootc_transfer_to_fire
m_livestemc_to_fire m_deadstemc_to_fire m_livecrootc_to_fire
m_deadcrootc_to_fire m_gresp_storage_to_fire m_gresp_transfer_to_fire
m_litr1c_to_fire m_litr2c_to_fire m_litr3c_to_fire m_litr4c_to_fire
m_cwdc_to_fire
leafc_transfer_to_leafc frootc_transfer_to_frootc
livestemc_transfer_to_livestemc deadstemc_transfer_to_deadstemc
livecrootc_transfer_to_livecrootc deadcrootc_transfer_to_deadcrootc
leafc_to_litr1c leafc_to_litr2c leafc_to_litr3c leafc_to_litr4c
frootc_to_litr1c frootc_to_litr2c frootc_to_litr3c frootc_to_litr4c
leaf_day_mr leaf_night_mr froot_mr livestem_mr livecroot_mr
psnsun_to_cpool psnshade_to_cpool
cwdc_to_litr2c cwdc_to_litr3c cwdc_to_litr4c
litr1_hr litr1c_to_soil1c litr2_hr litr2c_to_soil2c litr3c_to_litr2c
litr4_hr litr4c_to_soil3c soil1_hr soil1c_to_soil2c soil2_hr
soil2c_to_soil3c soil3_hr soil3c_to_soil4c soil4_hr
cpool_to_leafc cpool_to_leafc_storage cpool_to_frootc cpool_to_frootc_storage
cpool_to_livestemc cpool_to_livestemc_storage cpool_to_deadstemc
cpool_to_deadstemc_storage cpool_to_livecrootc cpool_to_livecrootc_storage
cpool_to_deadcrootc cpool_to_deadcrootc_storage cpool_to_gresp_storage
cpool_leaf_gr transfer_leaf_gr cpool_froot_gr transfer_froot_gr
cpool_livestem_gr transfer_livestem_gr cpool_deadstem_gr transfer_deadstem_gr
cpool_livecroot_gr transfer_livecroot_gr cpool_deadcroot_gr
transfer_deadcroot_gr
leafc_storage_to_leafc_transfer frootc_storage_to_frootc_transfer
livestemc_storage_to_livestemc_transfer deadstemc_storage_to_deadstemc_transfer
livecrootc_storage_to_livecrootc_transfer
deadcrootc_storage_to_deadcrootc_transfer gresp_storage_to_gresp_transfer
livestemc_to_deadstemc livecrootc_to_deadcrootc
cpool_leaf_storage_gr cpool_froot_storage_gr cpool_livestem_storage_gr
cpool_deadstem_storage_gr cpool_livecroot_storage_gr cpool_deadcroot_storage_gr
"""

_NS = """
leafn leafn_storage leafn_transfer frootn frootn_storage frootn_transfer
livestemn livestemn_storage livestemn_transfer deadstemn deadstemn_storage
deadstemn_transfer livecrootn livecrootn_storage livecrootn_transfer
deadcrootn deadcrootn_storage deadcrootn_transfer cwdn litr1n litr2n litr3n
litr4n soil1n soil2n soil3n soil4n sminn retransn npool nfix_src ndep_src
nleached_snk nvol_snk fire_snk
"""

_NF = """
m_leafn_to_litr1n m_leafn_to_litr2n m_leafn_to_litr3n m_leafn_to_litr4n
m_frootn_to_litr1n m_frootn_to_litr2n m_frootn_to_litr3n m_frootn_to_litr4n
m_leafn_storage_to_litr1n m_frootn_storage_to_litr1n
m_livestemn_storage_to_litr1n m_deadstemn_storage_to_litr1n
m_livecrootn_storage_to_litr1n m_deadcrootn_storage_to_litr1n
m_leafn_transfer_to_litr1n m_frootn_transfer_to_litr1n
m_livestemn_transfer_to_litr1n m_deadstemn_transfer_to_litr1n
m_livecrootn_transfer_to_litr1n m_deadcrootn_transfer_to_litr1n
m_livestemn_to_litr1n m_livestemn_to_cwdn m_deadstemn_to_cwdn
m_livecrootn_to_litr1n m_livecrootn_to_cwdn m_deadcrootn_to_cwdn
m_retransn_to_litr1n
m_leafn_to_fire m_frootn_to_fire
m_leafn_storage_to_fire m_frootn_storage_to_fire m_livestemn_storage_to_fire
m_deadstemn_storage_to_fire m_livecrootn_storage_to_fire
m_deadcrootn_storage_to_fire
m_leafn_transfer_to_fire m_frootn_transfer_to_fire
m_livestemn_transfer_to_fire m_deadstemn_transfer_to_fire
m_livecrootn_transfer_to_fire m_deadcrootn_transfer_to_fire
m_livestemn_to_fire m_deadstemn_to_fire m_livecrootn_to_fire
m_deadcrootn_to_fire m_retransn_to_fire
m_litr1n_to_fire m_litr2n_to_fire m_litr3n_to_fire m_litr4n_to_fire
m_cwdn_to_fire
leafn_transfer_to_leafn frootn_transfer_to_frootn
livestemn_transfer_to_livestemn deadstemn_transfer_to_deadstemn
livecrootn_transfer_to_livecrootn deadcrootn_transfer_to_deadcrootn
leafn_to_litr1n leafn_to_litr2n leafn_to_litr3n leafn_to_litr4n
leafn_to_retransn
frootn_to_litr1n frootn_to_litr2n frootn_to_litr3n frootn_to_litr4n
ndep_to_sminn nfix_to_sminn
cwdn_to_litr2n cwdn_to_litr3n cwdn_to_litr4n
litr1n_to_soil1n sminn_to_soil1n_l1 litr2n_to_soil2n sminn_to_soil2n_l2
litr3n_to_litr2n litr4n_to_soil3n sminn_to_soil3n_l4 soil1n_to_soil2n
sminn_to_soil2n_s1 soil2n_to_soil3n sminn_to_soil3n_s2 soil3n_to_soil4n
sminn_to_soil4n_s3 soil4n_to_sminn
sminn_to_nvol_l1s1 sminn_to_nvol_l2s2 sminn_to_nvol_l4s3 sminn_to_nvol_s1s2
sminn_to_nvol_s2s3 sminn_to_nvol_s3s4 sminn_to_nvol_s4
sminn_leached retransn_to_npool sminn_to_npool
npool_to_leafn npool_to_leafn_storage npool_to_frootn npool_to_frootn_storage
npool_to_livestemn npool_to_livestemn_storage npool_to_deadstemn
npool_to_deadstemn_storage npool_to_livecrootn npool_to_livecrootn_storage
npool_to_deadcrootn npool_to_deadcrootn_storage
leafn_storage_to_leafn_transfer frootn_storage_to_frootn_transfer
livestemn_storage_to_livestemn_transfer deadstemn_storage_to_deadstemn_transfer
livecrootn_storage_to_livecrootn_transfer
deadcrootn_storage_to_deadcrootn_transfer
livestemn_to_deadstemn livestemn_to_retransn livecrootn_to_deadcrootn
livecrootn_to_retransn
"""

_PHEN = """
remdays_curgrowth remdays_transfer remdays_litfall predays_transfer
predays_litfall
"""

_EPV = """
day_leafc_litfall_increment day_frootc_litfall_increment
day_livestemc_turnover_increment day_livecrootc_turnover_increment
annmax_leafc annmax_frootc annmax_livestemc annmax_livecrootc dsr proj_lai
all_lai plaisun plaishade sun_proj_sla shade_proj_sla psi vwc dlmr_area_sun
dlmr_area_shade gl_t_wv_sun gl_t_wv_shade assim_sun assim_shade t_scalar
w_scalar rate_scalar daily_gross_nmin daily_gross_nimmob daily_net_nmin
m_tmin m_psi m_co2 m_ppfd_sun m_ppfd_shade m_vpd m_final_sun m_final_shade
gl_bl gl_c gl_s_sun gl_s_shade gl_e_wv gl_sh gc_e_wv gc_sh ytd_maxplai fpi
m_Kl leaf_psi d13C_leaf_sun d13C_leaf_shade m_psi_x
"""

_PSN = """
pa co2 t lnc flnr ppfd g dlmr Ci O2 Ca gamma Kc Ko Vmax Jmax J Av Aj A
"""

_SUMMARY = """
daily_npp daily_nep daily_nee daily_gpp daily_mr daily_gr daily_hr daily_fire
cum_npp cum_nep cum_nee cum_gpp cum_mr cum_gr cum_hr cum_fire vegc litrc
soilc totalc daily_litfallc daily_et daily_outflow daily_evap daily_trans
daily_soilw daily_snoww vegn litrn soiln totaln
"""

# (first output code, record key, attribute names at consecutive codes)
_LAYOUT: Tuple[Tuple[int, str, str], ...] = (
    (0, "metv", _METV),
    (20, "ws", _WS),
    (35, "wf", _WF),
    (50, "cs", _CS),
    (120, "cf", _CF),
    (280, "ns", _NS),
    (340, "nf", _NF),
    (480, "phen", _PHEN),
    (500, "epv", _EPV),
    (560, "psn_sun", _PSN),
    (590, "psn_shade", _PSN),
    (620, "summary", _SUMMARY),
)


class OutputMap(Mapping[int, float]):
    """A live view from numeric output codes to model variables.

    Looking up a code reads the current value of the variable it names,
    so the map built once reflects every later change to the records.
    """

    def __init__(self, entries: Dict[int, Tuple[Any, str]]):
        self._entries = dict(entries)

    def __getitem__(self, index: int) -> float:
        try:
            record, name = self._entries[index]
        except KeyError:
            raise KeyError(f"output code {index} is not mapped to a variable") from None
        return getattr(record, name)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def name(self, index: int) -> str:
        """Return the attribute name that output code *index* refers to."""
        try:
            return self._entries[index][1]
        except KeyError:
            raise KeyError(f"output code {index} is not mapped to a variable") from None

    def values(self, codes: Iterable[int]) -> List[float]:  # type: ignore[override]
        """Return the current values of *codes*, in the order given."""
        return [self[code] for code in codes]


def output_map_init(
    metv: MetVar,
    ws: WaterState,
    wf: WaterFlux,
    cs: CarbonState,
    cf: CarbonFlux,
    ns: NitrogenState,
    nf: NitrogenFlux,
    phen: Phenology,
    epv: EpVar,
    psn_sun: PsnStruct,
    psn_shade: PsnStruct,
    summary: Summary,
) -> OutputMap:
    """Build the map from output codes to the variables of these records."""
    records = {
        "metv": metv,
        "ws": ws,
        "wf": wf,
        "cs": cs,
        "cf": cf,
        "ns": ns,
        "nf": nf,
        "phen": phen,
        "epv": epv,
        "psn_sun": psn_sun,
        "psn_shade": psn_shade,
        "summary": summary,
    }
    entries: Dict[int, Tuple[Any, str]] = {}
    for start, key, names in _LAYOUT:
        record = records[key]
        for code, name in enumerate(names.split(), start):
            entries[code] = (record, name)
    return OutputMap(entries)


def _single(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def output_ascii(values: Iterable[float], stream: TextIO) -> None:
    """Write *values* as one tab-separated line at single precision."""
    stream.write("".join(f"{_single(v):10.8f}\t" for v in values))
    stream.write("\n")
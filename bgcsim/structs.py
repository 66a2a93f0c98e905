"""State, flux and parameter records of the simulation, and daily transfers."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import List


@dataclass
class MetVar:
    """Meteorological variables for one day."""

    prcp: float = 0.0
    tmax: float = 0.0
    tmin: float = 0.0
    tavg: float = 0.0
    tday: float = 0.0
    tnight: float = 0.0
    tsoil: float = 0.0
    vpd: float = 0.0
    swavgfd: float = 0.0
    swabs: float = 0.0
    swtrans: float = 0.0
    swabs_per_plaisun: float = 0.0
    swabs_per_plaishade: float = 0.0
    ppfd_per_plaisun: float = 0.0
    ppfd_per_plaishade: float = 0.0
    par: float = 0.0
    parabs: float = 0.0
    pa: float = 0.0
    co2: float = 0.0
    dayl: float = 0.0


@dataclass
class MetArrays:
    """Daily meteorological series for the whole simulation."""

    prcp: List[float] = field(default_factory=list)
    tmax: List[float] = field(default_factory=list)
    tmin: List[float] = field(default_factory=list)
    tavg: List[float] = field(default_factory=list)
    tavg_ra: List[float] = field(default_factory=list)
    vpd: List[float] = field(default_factory=list)
    swavgfd: List[float] = field(default_factory=list)
    par: List[float] = field(default_factory=list)
    dayl: List[float] = field(default_factory=list)


@dataclass
class PhenArrays:
    """Daily phenology day counts for the whole simulation."""

    remdays_curgrowth: List[int] = field(default_factory=list)
    remdays_transfer: List[int] = field(default_factory=list)
    remdays_litfall: List[int] = field(default_factory=list)
    predays_transfer: List[int] = field(default_factory=list)
    predays_litfall: List[int] = field(default_factory=list)


@dataclass
class Phenology:
    """Phenology day counts for one day."""

    remdays_curgrowth: float = 0.0
    remdays_transfer: float = 0.0
    remdays_litfall: float = 0.0
    predays_transfer: float = 0.0
    predays_litfall: float = 0.0


@dataclass
class WaterState:
    soilw: float = 0.0
    snoww: float = 0.0
    canopyw: float = 0.0
    prcp_src: float = 0.0
    outflow_snk: float = 0.0
    soilevap_snk: float = 0.0
    snowsubl_snk: float = 0.0
    canopyevap_snk: float = 0.0
    trans_snk: float = 0.0


@dataclass
class WaterFlux:
    prcp_to_canopyw: float = 0.0
    prcp_to_soilw: float = 0.0
    prcp_to_snoww: float = 0.0
    canopyw_evap: float = 0.0
    canopyw_to_soilw: float = 0.0
    snoww_subl: float = 0.0
    snoww_to_soilw: float = 0.0
    soilw_evap: float = 0.0
    soilw_trans: float = 0.0
    soilw_outflow: float = 0.0


@dataclass
class CarbonState:
    leafc: float = 0.0
    leafc_storage: float = 0.0
    leafc_transfer: float = 0.0
    frootc: float = 0.0
    frootc_storage: float = 0.0
    frootc_transfer: float = 0.0
    livestemc: float = 0.0
    livestemc_storage: float = 0.0
    livestemc_transfer: float = 0.0
    deadstemc: float = 0.0
    deadstemc_storage: float = 0.0
    deadstemc_transfer: float = 0.0
    livecrootc: float = 0.0
    livecrootc_storage: float = 0.0
    livecrootc_transfer: float = 0.0
    deadcrootc: float = 0.0
    deadcrootc_storage: float = 0.0
    deadcrootc_transfer: float = 0.0
    gresp_storage: float = 0.0
    gresp_transfer: float = 0.0
    cwdc: float = 0.0
    litr1c: float = 0.0
    litr2c: float = 0.0
    litr3c: float = 0.0
    litr4c: float = 0.0
    soil1c: float = 0.0
    soil2c: float = 0.0
    soil3c: float = 0.0
    soil4c: float = 0.0
    cpool: float = 0.0
    psnsun_src: float = 0.0
    psnshade_src: float = 0.0
    leaf_mr_snk: float = 0.0
    leaf_gr_snk: float = 0.0
    froot_mr_snk: float = 0.0
    froot_gr_snk: float = 0.0
    livestem_mr_snk: float = 0.0
    livestem_gr_snk: float = 0.0
    deadstem_gr_snk: float = 0.0
    livecroot_mr_snk: float = 0.0
    livecroot_gr_snk: float = 0.0
    deadcroot_gr_snk: float = 0.0
    litr1_hr_snk: float = 0.0
    litr2_hr_snk: float = 0.0
    litr4_hr_snk: float = 0.0
    soil1_hr_snk: float = 0.0
    soil2_hr_snk: float = 0.0
    soil3_hr_snk: float = 0.0
    soil4_hr_snk: float = 0.0
    fire_snk: float = 0.0


@dataclass
class CarbonFlux:
    m_leafc_to_litr1c: float = 0.0
    m_leafc_to_litr2c: float = 0.0
    m_leafc_to_litr3c: float = 0.0
    m_leafc_to_litr4c: float = 0.0
    m_frootc_to_litr1c: float = 0.0
    m_frootc_to_litr2c: float = 0.0
    m_frootc_to_litr3c: float = 0.0
    m_frootc_to_litr4c: float = 0.0
    m_leafc_storage_to_litr1c: float = 0.0
    m_frootc_storage_to_litr1c: float = 0.0
    m_livestemc_storage_to_litr1c: float = 0.0
    m_deadstemc_storage_to_litr1c: float = 0.0
    m_livecrootc_storage_to_litr1c: float = 0.0
    m_deadcrootc_storage_to_litr1c: float = 0.0
    m_leafc_transfer_to_litr1c: float = 0.0
    m_frootc_transfer_to_litr1c: float = 0.0
    m_livestemc_transfer_to_litr1c: float = 0.0
    m_deadstemc_transfer_to_litr1c: float = 0.0
    m_livecrootc_transfer_to_litr1c: float = 0.0
    m_deadcrootc_transfer_to_litr1c: float = 0.0
    m_livestemc_to_cwdc: float = 0.0
    m_deadstemc_to_cwdc: float = 0.0
    m_livecrootc_to_cwdc: float = 0.0
    m_deadcrootc_to_cwdc: float = 0.0
    m_gresp_storage_to_litr1c: float = 0.0
    m_gresp_transfer_to_litr1c: float = 0.0
    m_leafc_to_fire: float = 0.0
    m_frootc_to_fire: float = 0.0
    m_leafc_storage_to_fire: float = 0.0
    m_frootc_storage_to_fire: float = 0.0
    m_livestemc_storage_to_fire: float = 0.0
    m_deadstemc_storage_to_fire: float = 0.0
    m_livecrootc_storage_to_fire: float = 0.0
    m_deadcrootc_storage_to_fire: float = 0.0
    m_leafc_transfer_to_fire: float = 0.0
    m_frootc_transfer_to_fire: float = 0.0
    m_livestemc_transfer_to_fire: float = 0.0
    m_deadstemc_transfer_to_fire: float = 0.0
    m_livecrootc_transfer_to_fire: float = 0.0
    m_deadcrootc_transfer_to_fire: float = 0.0
    m_livestemc_to_fire: float = 0.0
    m_deadstemc_to_fire: float = 0.0
    m_livecrootc_to_fire: float = 0.0
    m_deadcrootc_to_fire: float = 0.0
    m_gresp_storage_to_fire: float = 0.0
    m_gresp_transfer_to_fire: float = 0.0
    m_litr1c_to_fire: float = 0.0
    m_litr2c_to_fire: float = 0.0
    m_litr3c_to_fire: float = 0.0
    m_litr4c_to_fire: float = 0.0
    m_cwdc_to_fire: float = 0.0
    leafc_transfer_to_leafc: float = 0.0
    frootc_transfer_to_frootc: float = 0.0
    livestemc_transfer_to_livestemc: float = 0.0
    deadstemc_transfer_to_deadstemc: float = 0.0
    livecrootc_transfer_to_livecrootc: float = 0.0
    deadcrootc_transfer_to_deadcrootc: float = 0.0
    leafc_to_litr1c: float = 0.0
    leafc_to_litr2c: float = 0.0
    leafc_to_litr3c: float = 0.0
    leafc_to_litr4c: float = 0.0
    frootc_to_litr1c: float = 0.0
    frootc_to_litr2c: float = 0.0
    frootc_to_litr3c: float = 0.0
    frootc_to_litr4c: float = 0.0
    leaf_day_mr: float = 0.0
    leaf_night_mr: float = 0.0
    froot_mr: float = 0.0
    livestem_mr: float = 0.0
    livecroot_mr: float = 0.0
    psnsun_to_cpool: float = 0.0
    psnshade_to_cpool: float = 0.0
    cwdc_to_litr2c: float = 0.0
    cwdc_to_litr3c: float = 0.0
    cwdc_to_litr4c: float = 0.0
    litr1_hr: float = 0.0
    litr1c_to_soil1c: float = 0.0
    litr2_hr: float = 0.0
    litr2c_to_soil2c: float = 0.0
    litr3c_to_litr2c: float = 0.0
    litr4_hr: float = 0.0
    litr4c_to_soil3c: float = 0.0
    soil1_hr: float = 0.0
    soil1c_to_soil2c: float = 0.0
    soil2_hr: float = 0.0
    soil2c_to_soil3c: float = 0.0
    soil3_hr: float = 0.0
    soil3c_to_soil4c: float = 0.0
    soil4_hr: float = 0.0
    cpool_to_leafc: float = 0.0
    cpool_to_leafc_storage: float = 0.0
    cpool_to_frootc: float = 0.0
    cpool_to_frootc_storage: float = 0.0
    cpool_to_livestemc: float = 0.0
    cpool_to_livestemc_storage: float = 0.0
    cpool_to_deadstemc: float = 0.0
    cpool_to_deadstemc_storage: float = 0.0
    cpool_to_livecrootc: float = 0.0
    cpool_to_livecrootc_storage: float = 0.0
    cpool_to_deadcrootc: float = 0.0
    cpool_to_deadcrootc_storage: float = 0.0
    cpool_to_gresp_storage: float = 0.0
    cpool_leaf_gr: float = 0.0
    cpool_leaf_storage_gr: float = 0.0
    transfer_leaf_gr: float = 0.0
    cpool_froot_gr: float = 0.0
    cpool_froot_storage_gr: float = 0.0
    transfer_froot_gr: float = 0.0
    cpool_livestem_gr: float = 0.0
    cpool_livestem_storage_gr: float = 0.0
    transfer_livestem_gr: float = 0.0
    cpool_deadstem_gr: float = 0.0
    cpool_deadstem_storage_gr: float = 0.0
    transfer_deadstem_gr: float = 0.0
    cpool_livecroot_gr: float = 0.0
    cpool_livecroot_storage_gr: float = 0.0
    transfer_livecroot_gr: float = 0.0
    cpool_deadcroot_gr: float = 0.0
    cpool_deadcroot_storage_gr: float = 0.0
    transfer_deadcroot_gr: float = 0.0
    leafc_storage_to_leafc_transfer: float = 0.0
    frootc_storage_to_frootc_transfer: float = 0.0
    livestemc_storage_to_livestemc_transfer: float = 0.0
    deadstemc_storage_to_deadstemc_transfer: float = 0.0
    livecrootc_storage_to_livecrootc_transfer: float = 0.0
    deadcrootc_storage_to_deadcrootc_transfer: float = 0.0
    gresp_storage_to_gresp_transfer: float = 0.0
    livestemc_to_deadstemc: float = 0.0
    livecrootc_to_deadcrootc: float = 0.0


@dataclass
class NitrogenState:
    leafn: float = 0.0
    leafn_storage: float = 0.0
    leafn_transfer: float = 0.0
    frootn: float = 0.0
    frootn_storage: float = 0.0
    frootn_transfer: float = 0.0
    livestemn: float = 0.0
    livestemn_storage: float = 0.0
    livestemn_transfer: float = 0.0
    deadstemn: float = 0.0
    deadstemn_storage: float = 0.0
    deadstemn_transfer: float = 0.0
    livecrootn: float = 0.0
    livecrootn_storage: float = 0.0
    livecrootn_transfer: float = 0.0
    deadcrootn: float = 0.0
    deadcrootn_storage: float = 0.0
    deadcrootn_transfer: float = 0.0
    cwdn: float = 0.0
    litr1n: float = 0.0
    litr2n: float = 0.0
    litr3n: float = 0.0
    litr4n: float = 0.0
    soil1n: float = 0.0
    soil2n: float = 0.0
    soil3n: float = 0.0
    soil4n: float = 0.0
    sminn: float = 0.0
    retransn: float = 0.0
    npool: float = 0.0
    nfix_src: float = 0.0
    ndep_src: float = 0.0
    nleached_snk: float = 0.0
    nvol_snk: float = 0.0
    fire_snk: float = 0.0


@dataclass
class NitrogenFlux:
    m_leafn_to_litr1n: float = 0.0
    m_leafn_to_litr2n: float = 0.0
    m_leafn_to_litr3n: float = 0.0
    m_leafn_to_litr4n: float = 0.0
    m_frootn_to_litr1n: float = 0.0
    m_frootn_to_litr2n: float = 0.0
    m_frootn_to_litr3n: float = 0.0
    m_frootn_to_litr4n: float = 0.0
    m_leafn_storage_to_litr1n: float = 0.0
    m_frootn_storage_to_litr1n: float = 0.0
    m_livestemn_storage_to_litr1n: float = 0.0
    m_deadstemn_storage_to_litr1n: float = 0.0
    m_livecrootn_storage_to_litr1n: float = 0.0
    m_deadcrootn_storage_to_litr1n: float = 0.0
    m_leafn_transfer_to_litr1n: float = 0.0
    m_frootn_transfer_to_litr1n: float = 0.0
    m_livestemn_transfer_to_litr1n: float = 0.0
    m_deadstemn_transfer_to_litr1n: float = 0.0
    m_livecrootn_transfer_to_litr1n: float = 0.0
    m_deadcrootn_transfer_to_litr1n: float = 0.0
    m_livestemn_to_litr1n: float = 0.0
    m_livestemn_to_cwdn: float = 0.0
    m_deadstemn_to_cwdn: float = 0.0
    m_livecrootn_to_litr1n: float = 0.0
    m_livecrootn_to_cwdn: float = 0.0
    m_deadcrootn_to_cwdn: float = 0.0
    m_retransn_to_litr1n: float = 0.0
    m_leafn_to_fire: float = 0.0
    m_frootn_to_fire: float = 0.0
    m_leafn_storage_to_fire: float = 0.0
    m_frootn_storage_to_fire: float = 0.0
    m_livestemn_storage_to_fire: float = 0.0
    m_deadstemn_storage_to_fire: float = 0.0
    m_livecrootn_storage_to_fire: float = 0.0
    m_deadcrootn_storage_to_fire: float = 0.0
    m_leafn_transfer_to_fire: float = 0.0
    m_frootn_transfer_to_fire: float = 0.0
    m_livestemn_transfer_to_fire: float = 0.0
    m_deadstemn_transfer_to_fire: float = 0.0
    m_livecrootn_transfer_to_fire: float = 0.0
    m_deadcrootn_transfer_to_fire: float = 0.0
    m_livestemn_to_fire: float = 0.0
    m_deadstemn_to_fire: float = 0.0
    m_livecrootn_to_fire: float = 0.0
    m_deadcrootn_to_fire: float = 0.0
    m_retransn_to_fire: float = 0.0
    m_litr1n_to_fire: float = 0.0
    m_litr2n_to_fire: float = 0.0
    m_litr3n_to_fire: float = 0.0
    m_litr4n_to_fire: float = 0.0
    m_cwdn_to_fire: float = 0.0
    leafn_transfer_to_leafn: float = 0.0
    frootn_transfer_to_frootn: float = 0.0
    livestemn_transfer_to_livestemn: float = 0.0
    deadstemn_transfer_to_deadstemn: float = 0.0
    livecrootn_transfer_to_livecrootn: float = 0.0
    deadcrootn_transfer_to_deadcrootn: float = 0.0
    leafn_to_litr1n: float = 0.0
    leafn_to_litr2n: float = 0.0
    leafn_to_litr3n: float = 0.0
    leafn_to_litr4n: float = 0.0
    leafn_to_retransn: float = 0.0
    frootn_to_litr1n: float = 0.0
    frootn_to_litr2n: float = 0.0
    frootn_to_litr3n: float = 0.0
    frootn_to_litr4n: float = 0.0
    ndep_to_sminn: float = 0.0
    nfix_to_sminn: float = 0.0
    cwdn_to_litr2n: float = 0.0
    cwdn_to_litr3n: float = 0.0
    cwdn_to_litr4n: float = 0.0
    litr1n_to_soil1n: float = 0.0
    sminn_to_soil1n_l1: float = 0.0
    litr2n_to_soil2n: float = 0.0
    sminn_to_soil2n_l2: float = 0.0
    litr3n_to_litr2n: float = 0.0
    litr4n_to_soil3n: float = 0.0
    sminn_to_soil3n_l4: float = 0.0
    soil1n_to_soil2n: float = 0.0
    sminn_to_soil2n_s1: float = 0.0
    soil2n_to_soil3n: float = 0.0
    sminn_to_soil3n_s2: float = 0.0
    soil3n_to_soil4n: float = 0.0
    sminn_to_soil4n_s3: float = 0.0
    soil4n_to_sminn: float = 0.0
    sminn_to_nvol_l1s1: float = 0.0
    sminn_to_nvol_l2s2: float = 0.0
    sminn_to_nvol_l4s3: float = 0.0
    sminn_to_nvol_s1s2: float = 0.0
    sminn_to_nvol_s2s3: float = 0.0
    sminn_to_nvol_s3s4: float = 0.0
    sminn_to_nvol_s4: float = 0.0
    sminn_to_denitrif: float = 0.0
    sminn_leached: float = 0.0
    retransn_to_npool: float = 0.0
    sminn_to_npool: float = 0.0
    npool_to_leafn: float = 0.0
    npool_to_leafn_storage: float = 0.0
    npool_to_frootn: float = 0.0
    npool_to_frootn_storage: float = 0.0
    npool_to_livestemn: float = 0.0
    npool_to_livestemn_storage: float = 0.0
    npool_to_deadstemn: float = 0.0
    npool_to_deadstemn_storage: float = 0.0
    npool_to_livecrootn: float = 0.0
    npool_to_livecrootn_storage: float = 0.0
    npool_to_deadcrootn: float = 0.0
    npool_to_deadcrootn_storage: float = 0.0
    leafn_storage_to_leafn_transfer: float = 0.0
    frootn_storage_to_frootn_transfer: float = 0.0
    livestemn_storage_to_livestemn_transfer: float = 0.0
    deadstemn_storage_to_deadstemn_transfer: float = 0.0
    livecrootn_storage_to_livecrootn_transfer: float = 0.0
    deadcrootn_storage_to_deadcrootn_transfer: float = 0.0
    livestemn_to_deadstemn: float = 0.0
    livestemn_to_retransn: float = 0.0
    livecrootn_to_deadcrootn: float = 0.0
    livecrootn_to_retransn: float = 0.0


@dataclass
class EpConst:
    """Ecophysiological constants of a vegetation type."""

    woody: bool = False
    evergreen: bool = False
    c3_flag: bool = False
    phenology_flag: int = 0
    onday: int = 0
    offday: int = 0
    transfer_pdays: float = 0.0
    litfall_pdays: float = 0.0
    leaf_turnover: float = 0.0
    froot_turnover: float = 0.0
    livewood_turnover: float = 0.0
    daily_mortality_turnover: float = 0.0
    daily_fire_turnover: float = 0.0
    alloc_frootc_leafc: float = 0.0
    alloc_newstemc_newleafc: float = 0.0
    alloc_newlivewoodc_newwoodc: float = 0.0
    alloc_crootc_stemc: float = 0.0
    alloc_prop_curgrowth: float = 0.0
    leaf_cn: float = 0.0
    leaflitr_cn: float = 0.0
    froot_cn: float = 0.0
    livewood_cn: float = 0.0
    deadwood_cn: float = 0.0
    leaflitr_flab: float = 0.0
    leaflitr_fucel: float = 0.0
    leaflitr_fscel: float = 0.0
    leaflitr_flig: float = 0.0
    frootlitr_flab: float = 0.0
    frootlitr_fucel: float = 0.0
    frootlitr_fscel: float = 0.0
    frootlitr_flig: float = 0.0
    deadwood_fucel: float = 0.0
    deadwood_fscel: float = 0.0
    deadwood_flig: float = 0.0
    int_coef: float = 0.0
    ext_coef: float = 0.0
    lai_ratio: float = 0.0
    avg_proj_sla: float = 0.0
    sla_ratio: float = 0.0
    flnr: float = 0.0
    gl_smax: float = 0.0
    gl_c: float = 0.0
    gl_bl: float = 0.0
    psi_open: float = 0.0
    psi_close: float = 0.0
    vpd_open: float = 0.0
    vpd_close: float = 0.0
    max_mesophyll_path: float = 0.0
    min_mesophyll_path: float = 0.0
    psi_p_50: float = 0.0
    s_psi_p_50: float = 0.0
    psi_refill: float = 0.0


@dataclass
class EpVar:
    """Ecophysiological variables that change during the simulation."""

    day_leafc_litfall_increment: float = 0.0
    day_frootc_litfall_increment: float = 0.0
    day_livestemc_turnover_increment: float = 0.0
    day_livecrootc_turnover_increment: float = 0.0
    annmax_leafc: float = 0.0
    annmax_frootc: float = 0.0
    annmax_livestemc: float = 0.0
    annmax_livecrootc: float = 0.0
    dsr: float = 0.0
    proj_lai: float = 0.0
    all_lai: float = 0.0
    plaisun: float = 0.0
    plaishade: float = 0.0
    sun_proj_sla: float = 0.0
    shade_proj_sla: float = 0.0
    psi: float = 0.0
    vwc: float = 0.0
    dlmr_area_sun: float = 0.0
    dlmr_area_shade: float = 0.0
    gl_t_wv_sun: float = 0.0
    gl_t_wv_shade: float = 0.0
    assim_sun: float = 0.0
    assim_shade: float = 0.0
    t_scalar: float = 0.0
    w_scalar: float = 0.0
    rate_scalar: float = 0.0
    daily_gross_nmin: float = 0.0
    daily_gross_nimmob: float = 0.0
    daily_net_nmin: float = 0.0
    m_tmin: float = 0.0
    m_psi: float = 0.0
    m_co2: float = 0.0
    m_ppfd_sun: float = 0.0
    m_ppfd_shade: float = 0.0
    m_vpd: float = 0.0
    m_final_sun: float = 0.0
    m_final_shade: float = 0.0
    gl_bl: float = 0.0
    gl_c: float = 0.0
    gl_s_sun: float = 0.0
    gl_s_shade: float = 0.0
    gl_e_wv: float = 0.0
    gl_sh: float = 0.0
    gc_e_wv: float = 0.0
    gc_sh: float = 0.0
    ytd_maxplai: float = 0.0
    fpi: float = 0.0
    m_Kl: float = 0.0
    leaf_psi: float = 0.0
    d13C_leaf_sun: float = 0.0
    d13C_leaf_shade: float = 0.0
    m_psi_x: float = 0.0


@dataclass
class SiteConst:
    """Site constants used by soil water and decomposition routines."""

    soilw_fc: float = 0.0
    soilw_sat: float = 0.0
    psi_sat: float = 0.0


@dataclass
class NTemp:
    """Potential decomposition fluxes held until N competition is resolved."""

    mineralized: float = 0.0
    potential_immob: float = 0.0
    plitr1c_loss: float = 0.0
    pmnf_l1s1: float = 0.0
    plitr2c_loss: float = 0.0
    pmnf_l2s2: float = 0.0
    plitr4c_loss: float = 0.0
    pmnf_l4s3: float = 0.0
    psoil1c_loss: float = 0.0
    pmnf_s1s2: float = 0.0
    psoil2c_loss: float = 0.0
    pmnf_s2s3: float = 0.0
    psoil3c_loss: float = 0.0
    pmnf_s3s4: float = 0.0
    psoil4c_loss: float = 0.0
    kl4: float = 0.0


@dataclass
class PsnStruct:
    """Inputs and outputs of the leaf photosynthesis model."""

    c3: bool = True
    pa: float = 0.0
    co2: float = 0.0
    t: float = 0.0
    lnc: float = 0.0
    flnr: float = 0.0
    ppfd: float = 0.0
    g: float = 0.0
    dlmr: float = 0.0
    Ci: float = 0.0
    O2: float = 0.0
    Ca: float = 0.0
    gamma: float = 0.0
    Kc: float = 0.0
    Ko: float = 0.0
    Vmax: float = 0.0
    Jmax: float = 0.0
    J: float = 0.0
    Av: float = 0.0
    Aj: float = 0.0
    A: float = 0.0


@dataclass
class Summary:
    """Carbon, nitrogen and water budget summary variables."""

    daily_npp: float = 0.0
    daily_nep: float = 0.0
    daily_nee: float = 0.0
    daily_gpp: float = 0.0
    daily_mr: float = 0.0
    daily_gr: float = 0.0
    daily_hr: float = 0.0
    daily_fire: float = 0.0
    cum_npp: float = 0.0
    cum_nep: float = 0.0
    cum_nee: float = 0.0
    cum_gpp: float = 0.0
    cum_mr: float = 0.0
    cum_gr: float = 0.0
    cum_hr: float = 0.0
    cum_fire: float = 0.0
    vegc: float = 0.0
    litrc: float = 0.0
    soilc: float = 0.0
    totalc: float = 0.0
    daily_litfallc: float = 0.0
    daily_et: float = 0.0
    daily_outflow: float = 0.0
    daily_evap: float = 0.0
    daily_trans: float = 0.0
    daily_soilw: float = 0.0
    daily_snoww: float = 0.0
    vegn: float = 0.0
    litrn: float = 0.0
    soiln: float = 0.0
    totaln: float = 0.0


@dataclass
class CInit:
    """Initial maximum leaf and stem carbon."""

    max_leafc: float = 0.0
    max_stemc: float = 0.0


@dataclass(frozen=True)
class BgcConstants:
    """Model-wide constants: growth respiration, soil C:N, respiration
    fractions, base decomposition rates and the mobile N proportion."""

    grperc: float
    grpnow: float
    soil1_cn: float
    soil2_cn: float
    soil3_cn: float
    soil4_cn: float
    rfl1s1: float
    rfl2s2: float
    rfl4s3: float
    rfs1s2: float
    rfs2s3: float
    rfs3s4: float
    kl1_base: float
    kl2_base: float
    kl4_base: float
    ks1_base: float
    ks2_base: float
    ks3_base: float
    ks4_base: float
    kfrag_base: float
    mobilen_proportion: float


def _zero(record) -> None:
    for f in fields(record):
        setattr(record, f.name, 0.0)


def zero_fluxes(wf: WaterFlux, cf: CarbonFlux, nf: NitrogenFlux) -> None:
    """Reset every daily water, carbon and nitrogen flux to zero."""
    _zero(wf)
    _zero(cf)
    _zero(nf)


def daymet(metarr: MetArrays, metv: MetVar, metday: int) -> None:
    """Copy one day of meteorological data into *metv*, deriving daylight
    and night temperatures and converting precipitation from cm to kg/m2."""
    metv.prcp = metarr.prcp[metday] * 10.0
    tmax = metv.tmax = metarr.tmax[metday]
    metv.tmin = metarr.tmin[metday]
    tavg = metv.tavg = metarr.tavg[metday]
    metv.tday = 0.45 * (tmax - tavg) + tavg
    metv.tnight = (metv.tday + metv.tmin) / 2.0
    metv.tsoil = metarr.tavg_ra[metday]
    metv.vpd = metarr.vpd[metday]
    metv.swavgfd = metarr.swavgfd[metday]
    metv.par = metarr.par[metday]
    metv.dayl = metarr.dayl[metday]


def dayphen(phenarr: PhenArrays, phen: Phenology, metday: int) -> None:
    """Copy one day of phenology counts into *phen* as floats."""
    phen.remdays_curgrowth = float(phenarr.remdays_curgrowth[metday])
    phen.remdays_transfer = float(phenarr.remdays_transfer[metday])
    phen.remdays_litfall = float(phenarr.remdays_litfall[metday])
    phen.predays_transfer = float(phenarr.predays_transfer[metday])
    phen.predays_litfall = float(phenarr.predays_litfall[metday])
"""Daily maintenance and growth respiration."""

from __future__ import annotations

from .structs import (
    BgcConstants,
    CarbonFlux,
    CarbonState,
    EpConst,
    EpVar,
    MetVar,
    NitrogenState,
)

_Q10 = 2.0
_MR_PER_N = 0.218  # kgC/kgN/d at 20 deg C
_SECONDS_PER_DAY = 86400.0


def _q10_factor(temperature: float) -> float:
    return _Q10 ** ((temperature - 20.0) / 10.0)


def maint_resp(
    cs: CarbonState,
    ns: NitrogenState,
    epc: EpConst,
    metv: MetVar,
    cf: CarbonFlux,
    epv: EpVar,
) -> None:
    """Compute daily maintenance respiration from tissue N and temperature."""
    if cs.leafc:
        t1 = ns.leafn * _MR_PER_N
        day_factor = _q10_factor(metv.tday)
        cf.leaf_day_mr = t1 * day_factor * metv.dayl / _SECONDS_PER_DAY

        # respiration per unit projected leaf area, for photosynthesis
        n_area_sun = 1.0 / (epv.sun_proj_sla * epc.leaf_cn)
        n_area_shade = 1.0 / (epv.shade_proj_sla * epc.leaf_cn)
        dlmr_area_sun = n_area_sun * _MR_PER_N * day_factor
        dlmr_area_shade = n_area_shade * _MR_PER_N * day_factor
        epv.dlmr_area_sun = dlmr_area_sun / (_SECONDS_PER_DAY * 12.011e-9)
        epv.dlmr_area_shade = dlmr_area_shade / (_SECONDS_PER_DAY * 12.011e-9)

        cf.leaf_night_mr = (
            t1 * _q10_factor(metv.tnight) * (_SECONDS_PER_DAY - metv.dayl) / _SECONDS_PER_DAY
        )
    else:
        cf.leaf_day_mr = 0.0
        epv.dlmr_area_sun = 0.0
        epv.dlmr_area_shade = 0.0
        cf.leaf_night_mr = 0.0

    if cs.frootc:
        cf.froot_mr = ns.frootn * _MR_PER_N * _q10_factor(metv.tsoil)
    else:
        cf.froot_mr = 0.0

    if epc.woody:
        cf.livestem_mr = ns.livestemn * _MR_PER_N * _q10_factor(metv.tavg)
        cf.livecroot_mr = ns.livecrootn * _MR_PER_N * _q10_factor(metv.tsoil)


def growth_resp(epc: EpConst, cf: CarbonFlux, constants: BgcConstants) -> None:
    """Compute daily growth respiration fluxes from the day's allocation."""
    g1 = constants.grperc
    g2 = constants.grpnow

    cf.cpool_leaf_gr = cf.cpool_to_leafc * g1
    cf.cpool_froot_gr = cf.cpool_to_frootc * g1
    cf.cpool_leaf_storage_gr = cf.cpool_to_leafc_storage * g1 * g2
    cf.cpool_froot_storage_gr = cf.cpool_to_frootc_storage * g1 * g2
    cf.transfer_leaf_gr = cf.leafc_transfer_to_leafc * g1 * (1.0 - g2)
    cf.transfer_froot_gr = cf.frootc_transfer_to_frootc * g1 * (1.0 - g2)

    if epc.woody:
        cf.cpool_livestem_gr = cf.cpool_to_livestemc * g1
        cf.cpool_deadstem_gr = cf.cpool_to_deadstemc * g1
        cf.cpool_livecroot_gr = cf.cpool_to_livecrootc * g1
        cf.cpool_deadcroot_gr = cf.cpool_to_deadcrootc * g1
        cf.cpool_livestem_storage_gr = cf.cpool_to_livestemc_storage * g1 * g2
        cf.cpool_deadstem_storage_gr = cf.cpool_to_deadstemc_storage * g1 * g2
        cf.cpool_livecroot_storage_gr = cf.cpool_to_livecrootc_storage * g1 * g2
        cf.cpool_deadcroot_storage_gr = cf.cpool_to_deadcrootc_storage * g1 * g2
        cf.transfer_livestem_gr = cf.livestemc_transfer_to_livestemc * g1 * (1.0 - g2)
        cf.transfer_deadstem_gr = cf.deadstemc_transfer_to_deadstemc * g1 * (1.0 - g2)
        cf.transfer_livecroot_gr = cf.livecrootc_transfer_to_livecrootc * g1 * (1.0 - g2)
        cf.transfer_deadcroot_gr = cf.deadcrootc_transfer_to_deadcrootc * g1 * (1.0 - g2)
"""Daily phenological fluxes and first-day state initialization."""

from __future__ import annotations

from typing import Optional, Tuple

from .structs import (
    CarbonFlux,
    CarbonState,
    EpConst,
    EpVar,
    NitrogenFlux,
    NitrogenState,
    Phenology,
)

_WOODY_POOLS = ("livestem", "deadstem", "livecroot", "deadcroot")
_ALL_POOLS = ("leaf", "froot") + _WOODY_POOLS


def _pools(woody: bool) -> Tuple[str, ...]:
    return _ALL_POOLS if woody else ("leaf", "froot")


def _transfer_growth(
    factor: float,
    ndays: float,
    woody: bool,
    cs: CarbonState,
    cf: CarbonFlux,
    ns: NitrogenState,
    nf: NitrogenFlux,
) -> None:
    """Set transfer-to-display fluxes for every pool at factor * pool / ndays."""
    for pool in _pools(woody):
        c_transfer = getattr(cs, f"{pool}c_transfer")
        n_transfer = getattr(ns, f"{pool}n_transfer")
        setattr(cf, f"{pool}c_transfer_to_{pool}c", factor * c_transfer / ndays)
        setattr(nf, f"{pool}n_transfer_to_{pool}n", factor * n_transfer / ndays)


def _livewood_turnover(
    increment: float,
    livec: float,
    liven: float,
    epc: EpConst,
) -> Optional[Tuple[float, float, float]]:
    """Return (C to dead wood, N to dead wood, N to retranslocation), or None."""
    tovrc = increment
    tovrn = tovrc / epc.livewood_cn
    tovrc = min(tovrc, livec)
    tovrn = min(tovrn, liven)
    if not (tovrc and tovrn):
        return None
    to_dead_n = tovrc / epc.deadwood_cn
    return tovrc, to_dead_n, tovrn - to_dead_n


def _woody_turnover(
    epc: EpConst,
    epv: EpVar,
    cs: CarbonState,
    cf: CarbonFlux,
    ns: NitrogenState,
    nf: NitrogenFlux,
) -> None:
    stem = _livewood_turnover(
        epv.day_livestemc_turnover_increment, cs.livestemc, ns.livestemn, epc
    )
    if stem is not None:
        (cf.livestemc_to_deadstemc,
         nf.livestemn_to_deadstemn,
         nf.livestemn_to_retransn) = stem
    croot = _livewood_turnover(
        epv.day_livecrootc_turnover_increment, cs.livecrootc, ns.livecrootn, epc
    )
    if croot is not None:
        (cf.livecrootc_to_deadcrootc,
         nf.livecrootn_to_deadcrootn,
         nf.livecrootn_to_retransn) = croot


def phenology(
    epc: EpConst,
    phen: Phenology,
    epv: EpVar,
    cs: CarbonState,
    cf: CarbonFlux,
    ns: NitrogenState,
    nf: NitrogenFlux,
) -> None:
    """Compute the day's transfer growth, litterfall and livewood turnover."""
    if epc.evergreen:
        ndays = phen.remdays_transfer
        if ndays:
            _transfer_growth(1.0, ndays, epc.woody, cs, cf, ns, nf)

        # evergreen litterfall happens every day at the annually set rate
        leaf_litfall(epc, min(epv.day_leafc_litfall_increment, cs.leafc), cf, nf)
        froot_litfall(epc, min(epv.day_frootc_litfall_increment, cs.frootc), cf, nf)
    else:
        ndays = phen.remdays_transfer
        if ndays:
            # linearly decreasing rate reaching zero on the last transfer day
            _transfer_growth(2.0, ndays, epc.woody, cs, cf, ns, nf)

        ndays = phen.remdays_litfall
        if ndays:
            if ndays == 1.0:
                leaflitfallc = cs.leafc
                frootlitfallc = cs.frootc
            else:
                leaflitfallc = epv.day_leafc_litfall_increment
                epv.day_leafc_litfall_increment += (
                    2.0 * (cs.leafc - leaflitfallc * ndays) / (ndays * ndays)
                )
                frootlitfallc = epv.day_frootc_litfall_increment
                epv.day_frootc_litfall_increment += (
                    2.0 * (cs.frootc - frootlitfallc * ndays) / (ndays * ndays)
                )
            leaflitfallc = min(leaflitfallc, cs.leafc)
            if leaflitfallc:
                leaf_litfall(epc, leaflitfallc, cf, nf)
            frootlitfallc = min(frootlitfallc, cs.frootc)
            if frootlitfallc:
                froot_litfall(epc, frootlitfallc, cf, nf)

    if epc.woody:
        _woody_turnover(epc, epv, cs, cf, ns, nf)
        epv.annmax_livestemc = max(epv.annmax_livestemc, cs.livestemc)
        epv.annmax_livecrootc = max(epv.annmax_livecrootc, cs.livecrootc)

    epv.annmax_leafc = max(epv.annmax_leafc, cs.leafc)
    epv.annmax_frootc = max(epv.annmax_frootc, cs.frootc)


def leaf_litfall(
    epc: EpConst, litfallc: float, cf: CarbonFlux, nf: NitrogenFlux
) -> None:
    """Split leaf litterfall C and N among litter pools and retranslocation."""
    litfalln = litfallc / epc.leaflitr_cn
    cf.leafc_to_litr1c = litfallc * epc.leaflitr_flab
    cf.leafc_to_litr2c = litfallc * epc.leaflitr_fucel
    cf.leafc_to_litr3c = litfallc * epc.leaflitr_fscel
    cf.leafc_to_litr4c = litfallc * epc.leaflitr_flig
    nf.leafn_to_litr1n = litfalln * epc.leaflitr_flab
    nf.leafn_to_litr2n = litfalln * epc.leaflitr_fucel
    nf.leafn_to_litr3n = litfalln * epc.leaflitr_fscel
    nf.leafn_to_litr4n = litfalln * epc.leaflitr_flig
    nf.leafn_to_retransn = litfallc / epc.leaf_cn - litfalln


def froot_litfall(
    epc: EpConst, litfallc: float, cf: CarbonFlux, nf: NitrogenFlux
) -> None:
    """Split fine root litterfall C and N among the litter pools."""
    cn = epc.froot_cn
    c1 = litfallc * epc.frootlitr_flab
    c2 = litfallc * epc.frootlitr_fucel
    c3 = litfallc * epc.frootlitr_fscel
    c4 = litfallc * epc.frootlitr_flig
    cf.frootc_to_litr1c = c1
    cf.frootc_to_litr2c = c2
    cf.frootc_to_litr3c = c3
    cf.frootc_to_litr4c = c4
    nf.frootn_to_litr1n = c1 / cn
    nf.frootn_to_litr2n = c2 / cn
    nf.frootn_to_litr3n = c3 / cn
    nf.frootn_to_litr4n = c4 / cn


def _apply_transfer(proportion: float, woody: bool, cs: CarbonState, ns: NitrogenState) -> None:
    for pool in _pools(woody):
        for state, element in ((cs, "c"), (ns, "n")):
            displayed = f"{pool}{element}"
            transfer_name = f"{displayed}_transfer"
            amount = proportion * getattr(state, transfer_name)
            setattr(state, displayed, getattr(state, displayed) + amount)
            setattr(state, transfer_name, getattr(state, transfer_name) - amount)


def firstday(epc: EpConst, cinit, epv: EpVar, phen, cs: CarbonState,
             ns: NitrogenState, grperc: float) -> None:
    """Initialize plant state for the first day of a run without a restart.

    *phen* holds the yearly phenology arrays; only their first day is used.
    *grperc* is the ratio of growth respiration to C grown.
    """
    for pool in _ALL_POOLS:
        setattr(cs, f"{pool}c_storage", 0.0)
        setattr(ns, f"{pool}n_storage", 0.0)
    cs.gresp_storage = 0.0
    cs.cpool = 0.0
    ns.retransn = 0.0
    ns.npool = 0.0

    epv.dsr = 0.0
    epv.m_psi_x = 1.0

    woody = bool(epc.woody)

    max_leafc = cinit.max_leafc
    cs.leafc_transfer = max_leafc * epc.leaf_turnover
    cs.leafc = max_leafc - cs.leafc_transfer
    max_frootc = max_leafc * epc.alloc_frootc_leafc
    cs.frootc_transfer = max_leafc * epc.alloc_frootc_leafc * epc.froot_turnover
    cs.frootc = max_frootc - cs.frootc_transfer
    if woody:
        new_stemc = cs.leafc_transfer * epc.alloc_newstemc_newleafc
        cs.livestemc_transfer = new_stemc * epc.alloc_newlivewoodc_newwoodc
        cs.livestemc = cs.livestemc_transfer / epc.livewood_turnover
        cs.deadstemc_transfer = new_stemc - cs.livestemc_transfer
        cs.deadstemc = max(
            0.0,
            cinit.max_stemc - cs.livestemc_transfer - cs.livestemc - cs.deadstemc_transfer,
        )
        cs.livecrootc_transfer = cs.livestemc_transfer * epc.alloc_crootc_stemc
        cs.livecrootc = cs.livestemc * epc.alloc_crootc_stemc
        cs.deadcrootc_transfer = cs.deadstemc_transfer * epc.alloc_crootc_stemc
        cs.deadcrootc = cs.deadstemc * epc.alloc_crootc_stemc

    cn_of = {
        "leaf": epc.leaf_cn,
        "froot": epc.froot_cn,
        "livestem": epc.livewood_cn,
        "livecroot": epc.livewood_cn,
        "deadstem": epc.deadwood_cn,
        "deadcroot": epc.deadwood_cn,
    }
    for pool in _pools(woody):
        cn = cn_of[pool]
        setattr(ns, f"{pool}n_transfer", getattr(cs, f"{pool}c_transfer") / cn)
        setattr(ns, f"{pool}n", getattr(cs, f"{pool}c") / cn)

    predays = phen.predays_transfer[0]
    remdays = phen.remdays_transfer[0]
    if predays > 0:
        _apply_transfer(predays / (predays + remdays), woody, cs, ns)

        predays = phen.predays_litfall[0]
        remdays = phen.remdays_litfall[0]
        if predays > 0:
            prop_litfall = predays / (predays + remdays)
            cs.leafc -= prop_litfall * cs.leafc * epc.leaf_turnover
            cs.frootc -= prop_litfall * cs.frootc * epc.froot_turnover

    transfers = cs.leafc_transfer + cs.frootc_transfer
    cs.gresp_transfer = transfers * grperc
    if woody:
        cs.gresp_transfer += (
            cs.livestemc_transfer + cs.deadstemc_transfer
            + cs.livecrootc_transfer + cs.deadcrootc_transfer
        ) * grperc

    if epc.evergreen:
        epv.day_leafc_litfall_increment = max_leafc * epc.leaf_turnover / 365.0
        epv.day_frootc_litfall_increment = max_frootc * epc.froot_turnover / 365.0
    else:
        epv.day_leafc_litfall_increment = 0.0
        epv.day_frootc_litfall_increment = 0.0
    epv.annmax_leafc = 0.0
    epv.annmax_frootc = 0.0

    if woody:
        epv.day_livestemc_turnover_increment = cs.livestemc * epc.livewood_turnover / 365.0
        epv.day_livecrootc_turnover_increment = cs.livecrootc * epc.livewood_turnover / 365.0
        epv.annmax_livestemc = 0.0
        epv.annmax_livecrootc = 0.0
"""Daily potential decomposition fluxes, before N competition is resolved."""

from __future__ import annotations

import math

from .structs import (
    BgcConstants,
    CarbonFlux,
    CarbonState,
    EpConst,
    EpVar,
    NitrogenFlux,
    NitrogenState,
    NTemp,
    SiteConst,
)

_MIN_PSI = -10.0  # MPa, no decomposition below this water potential


def _temperature_scalar(tsoil: float) -> float:
    """Lloyd and Taylor temperature scalar, based at 25 deg C."""
    if tsoil < -10.0:
        return 0.0
    tk = tsoil + 273.15
    return math.exp(308.56 * ((1.0 / 71.02) - (1.0 / (tk - 227.13))))


def _water_scalar(psi: float, maxpsi: float) -> float:
    """Log relationship between soil water potential and decomposition."""
    if psi < _MIN_PSI:
        return 0.0
    if psi > maxpsi:
        return 1.0
    return math.log(_MIN_PSI / psi) / math.log(_MIN_PSI / maxpsi)


def _litter_flux(kbase, rate_scalar, c, n, rf, cn_soil):
    """Return (potential C loss, potential mineral N flux) for a litter pool."""
    if c <= 0.0:
        return 0.0, 0.0
    loss = kbase * rate_scalar * c
    ratio = cn_soil / (c / n) if n > 0.0 else 0.0
    return loss, loss * (1.0 - rf - ratio) / cn_soil


def _soil_flux(kbase, rate_scalar, c, rf, cn_from, cn_to):
    if c <= 0.0:
        return 0.0, 0.0
    loss = kbase * rate_scalar * c
    return loss, loss * (1.0 - rf - cn_to / cn_from) / cn_to


def decomp(
    tsoil: float,
    epc: EpConst,
    epv: EpVar,
    sitec: SiteConst,
    cs: CarbonState,
    cf: CarbonFlux,
    ns: NitrogenState,
    nf: NitrogenFlux,
    nt: NTemp,
    constants: BgcConstants,
) -> None:
    """Compute potential decomposition and mineral N fluxes for the day.

    Immobilizing fluxes are positive and mineralizing fluxes negative;
    they are stored in *nt* until plant demand has been assessed.
    """
    t_scalar = _temperature_scalar(tsoil)
    w_scalar = _water_scalar(epv.psi, sitec.psi_sat)
    rate_scalar = w_scalar * t_scalar
    epv.t_scalar = t_scalar
    epv.w_scalar = w_scalar
    epv.rate_scalar = rate_scalar

    k = constants
    if epc.woody:
        cwdc_loss = k.kfrag_base * rate_scalar * cs.cwdc
        cf.cwdc_to_litr2c = cwdc_loss * epc.deadwood_fucel
        cf.cwdc_to_litr3c = cwdc_loss * epc.deadwood_fscel
        cf.cwdc_to_litr4c = cwdc_loss * epc.deadwood_flig
        nf.cwdn_to_litr2n = cf.cwdc_to_litr2c / epc.deadwood_cn
        nf.cwdn_to_litr3n = cf.cwdc_to_litr3c / epc.deadwood_cn
        nf.cwdn_to_litr4n = cf.cwdc_to_litr4c / epc.deadwood_cn

    plitr1c_loss, pmnf_l1s1 = _litter_flux(
        k.kl1_base, rate_scalar, cs.litr1c, ns.litr1n, k.rfl1s1, k.soil1_cn)
    plitr2c_loss, pmnf_l2s2 = _litter_flux(
        k.kl2_base, rate_scalar, cs.litr2c, ns.litr2n, k.rfl2s2, k.soil2_cn)
    plitr4c_loss, pmnf_l4s3 = _litter_flux(
        k.kl4_base, rate_scalar, cs.litr4c, ns.litr4n, k.rfl4s3, k.soil3_cn)
    psoil1c_loss, pmnf_s1s2 = _soil_flux(
        k.ks1_base, rate_scalar, cs.soil1c, k.rfs1s2, k.soil1_cn, k.soil2_cn)
    psoil2c_loss, pmnf_s2s3 = _soil_flux(
        k.ks2_base, rate_scalar, cs.soil2c, k.rfs2s3, k.soil2_cn, k.soil3_cn)
    psoil3c_loss, pmnf_s3s4 = _soil_flux(
        k.ks3_base, rate_scalar, cs.soil3c, k.rfs3s4, k.soil3_cn, k.soil4_cn)
    if cs.soil4c > 0.0:
        psoil4c_loss = k.ks4_base * rate_scalar * cs.soil4c
        pmnf_s4 = -psoil4c_loss / k.soil4_cn
    else:
        psoil4c_loss = pmnf_s4 = 0.0

    transitions = (pmnf_l1s1, pmnf_l2s2, pmnf_l4s3, pmnf_s1s2, pmnf_s2s3, pmnf_s3s4)
    potential_immob = sum(p for p in transitions if p > 0.0)
    mineralized = sum(-p for p in transitions if p <= 0.0) - pmnf_s4

    nt.mineralized = mineralized
    nt.potential_immob = potential_immob
    nt.plitr1c_loss = plitr1c_loss
    nt.pmnf_l1s1 = pmnf_l1s1
    nt.plitr2c_loss = plitr2c_loss
    nt.pmnf_l2s2 = pmnf_l2s2
    nt.plitr4c_loss = plitr4c_loss
    nt.pmnf_l4s3 = pmnf_l4s3
    nt.psoil1c_loss = psoil1c_loss
    nt.pmnf_s1s2 = pmnf_s1s2
    nt.psoil2c_loss = psoil2c_loss
    nt.pmnf_s2s3 = pmnf_s2s3
    nt.psoil3c_loss = psoil3c_loss
    nt.pmnf_s3s4 = pmnf_s3s4
    nt.psoil4c_loss = psoil4c_loss
    nt.kl4 = k.kl4_base * rate_scalar

    epv.daily_gross_nmin = mineralized
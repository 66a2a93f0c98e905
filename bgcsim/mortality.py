"""Daily whole-plant and fire mortality fluxes and their state updates."""

from __future__ import annotations

from typing import Tuple

from .structs import CarbonFlux, CarbonState, EpConst, NitrogenFlux, NitrogenState

_DEADSTEM_COMBUSTION = 0.2  # proportion of fire-killed dead stem that burns
_CWD_COMBUSTION = 0.30  # proportion of fire-affected CWD that burns

_WOODY_POOLS = ("livestem", "deadstem", "livecroot", "deadcroot")
_ALL_POOLS = ("leaf", "froot") + _WOODY_POOLS
_LITTER_FRACTIONS = ("flab", "fucel", "fscel", "flig")
_LITTER_TISSUES = (("leaf", "leaflitr", "leaf_cn"), ("froot", "frootlitr", "froot_cn"))


def _store_pools(element: str) -> Tuple[str, ...]:
    """Names of the storage and transfer pools for carbon ('c') or nitrogen ('n')."""
    pools = tuple(f"{p}{element}_storage" for p in _ALL_POOLS)
    pools += tuple(f"{p}{element}_transfer" for p in _ALL_POOLS)
    if element == "c":
        return pools + ("gresp_storage", "gresp_transfer")
    return pools + ("retransn",)


def _move(state, source: str, sink: str, amount: float) -> None:
    """Add *amount* to the *sink* pool and take it from the *source* pool."""
    setattr(state, sink, getattr(state, sink) + amount)
    setattr(state, source, getattr(state, source) - amount)


def _background_mortality(
    epc: EpConst,
    cs: CarbonState,
    cf: CarbonFlux,
    ns: NitrogenState,
    nf: NitrogenFlux,
) -> None:
    """Non-fire mortality: material enters the litter and CWD pools."""
    mort = epc.daily_mortality_turnover
    dead_mort = mort + (1.0 - _DEADSTEM_COMBUSTION) * epc.daily_fire_turnover

    # carbon fluxes
    for tissue, litr, _ in _LITTER_TISSUES:
        pool = getattr(cs, f"{tissue}c")
        for i, frac in enumerate(_LITTER_FRACTIONS, 1):
            setattr(cf, f"m_{tissue}c_to_litr{i}c",
                    mort * pool * getattr(epc, f"{litr}_{frac}"))
    for name in _store_pools("c"):
        setattr(cf, f"m_{name}_to_litr1c", mort * getattr(cs, name))
    if epc.woody:
        cf.m_livestemc_to_cwdc = mort * cs.livestemc
        cf.m_deadstemc_to_cwdc = dead_mort * cs.deadstemc
        cf.m_livecrootc_to_cwdc = mort * cs.livecrootc
        cf.m_deadcrootc_to_cwdc = dead_mort * cs.deadcrootc

    # nitrogen fluxes
    for tissue, _, cn_name in _LITTER_TISSUES:
        cn = getattr(epc, cn_name)
        for i in range(1, 5):
            setattr(nf, f"m_{tissue}n_to_litr{i}n",
                    getattr(cf, f"m_{tissue}c_to_litr{i}c") / cn)
    for name in _store_pools("n"):
        setattr(nf, f"m_{name}_to_litr1n", mort * getattr(ns, name))
    if epc.woody:
        nf.m_livestemn_to_cwdn = cf.m_livestemc_to_cwdc / epc.deadwood_cn
        nf.m_livestemn_to_litr1n = mort * ns.livestemn - nf.m_livestemn_to_cwdn
        nf.m_deadstemn_to_cwdn = cf.m_deadstemc_to_cwdc / epc.deadwood_cn
        nf.m_livecrootn_to_cwdn = cf.m_livecrootc_to_cwdc / epc.deadwood_cn
        nf.m_livecrootn_to_litr1n = mort * ns.livecrootn - nf.m_livecrootn_to_cwdn
        nf.m_deadcrootn_to_cwdn = cf.m_deadcrootc_to_cwdc / epc.deadwood_cn

    # carbon state update
    for tissue, _, _ in _LITTER_TISSUES:
        for i in range(1, 5):
            _move(cs, f"{tissue}c", f"litr{i}c", getattr(cf, f"m_{tissue}c_to_litr{i}c"))
    for name in _store_pools("c"):
        _move(cs, name, "litr1c", getattr(cf, f"m_{name}_to_litr1c"))
    if epc.woody:
        for pool in _WOODY_POOLS:
            _move(cs, f"{pool}c", "cwdc", getattr(cf, f"m_{pool}c_to_cwdc"))

    # nitrogen state update
    for tissue, _, _ in _LITTER_TISSUES:
        for i in range(1, 5):
            _move(ns, f"{tissue}n", f"litr{i}n", getattr(nf, f"m_{tissue}n_to_litr{i}n"))
    for name in _store_pools("n"):
        _move(ns, name, "litr1n", getattr(nf, f"m_{name}_to_litr1n"))
    if epc.woody:
        _move(ns, "livestemn", "litr1n", nf.m_livestemn_to_litr1n)
        _move(ns, "livestemn", "cwdn", nf.m_livestemn_to_cwdn)
        _move(ns, "deadstemn", "cwdn", nf.m_deadstemn_to_cwdn)
        _move(ns, "livecrootn", "litr1n", nf.m_livecrootn_to_litr1n)
        _move(ns, "livecrootn", "cwdn", nf.m_livecrootn_to_cwdn)
        _move(ns, "deadcrootn", "cwdn", nf.m_deadcrootn_to_cwdn)


def _fire_mortality(
    epc: EpConst,
    cs: CarbonState,
    cf: CarbonFlux,
    ns: NitrogenState,
    nf: NitrogenFlux,
) -> None:
    """Fire mortality: material leaves for the atmospheric fire sink."""
    mort = epc.daily_fire_turnover
    woody_share = {
        "livestem": 1.0,
        "deadstem": _DEADSTEM_COMBUSTION,
        "livecroot": 1.0,
        "deadcroot": _DEADSTEM_COMBUSTION,
    }

    # carbon fluxes
    cf.m_leafc_to_fire = mort * cs.leafc
    cf.m_frootc_to_fire = mort * cs.frootc
    for name in _store_pools("c"):
        setattr(cf, f"m_{name}_to_fire", mort * getattr(cs, name))
    if epc.woody:
        for pool in _WOODY_POOLS:
            setattr(cf, f"m_{pool}c_to_fire",
                    woody_share[pool] * mort * getattr(cs, f"{pool}c"))
    for i in range(1, 5):
        setattr(cf, f"m_litr{i}c_to_fire", mort * getattr(cs, f"litr{i}c"))
    cf.m_cwdc_to_fire = _CWD_COMBUSTION * mort * cs.cwdc

    # nitrogen fluxes
    nf.m_leafn_to_fire = cf.m_leafc_to_fire / epc.leaf_cn
    nf.m_frootn_to_fire = cf.m_frootc_to_fire / epc.froot_cn
    for name in _store_pools("n"):
        setattr(nf, f"m_{name}_to_fire", mort * getattr(ns, name))
    if epc.woody:
        for pool in _WOODY_POOLS:
            setattr(nf, f"m_{pool}n_to_fire",
                    woody_share[pool] * mort * getattr(ns, f"{pool}n"))
    for i in range(1, 5):
        setattr(nf, f"m_litr{i}n_to_fire", mort * getattr(ns, f"litr{i}n"))
    nf.m_cwdn_to_fire = _CWD_COMBUSTION * mort * ns.cwdn

    # state updates, carbon then nitrogen
    for state, flux, element in ((cs, cf, "c"), (ns, nf, "n")):
        for tissue in ("leaf", "froot"):
            _move(state, f"{tissue}{element}", "fire_snk",
                  getattr(flux, f"m_{tissue}{element}_to_fire"))
        for name in _store_pools(element):
            _move(state, name, "fire_snk", getattr(flux, f"m_{name}_to_fire"))
        if epc.woody:
            for pool in _WOODY_POOLS:
                _move(state, f"{pool}{element}", "fire_snk",
                      getattr(flux, f"m_{pool}{element}_to_fire"))
        for i in range(1, 5):
            _move(state, f"litr{i}{element}", "fire_snk",
                  getattr(flux, f"m_litr{i}{element}_to_fire"))
        _move(state, f"cwd{element}", "fire_snk", getattr(flux, f"m_cwd{element}_to_fire"))


def mortality(
    epc: EpConst,
    cs: CarbonState,
    cf: CarbonFlux,
    ns: NitrogenState,
    nf: NitrogenFlux,
) -> None:
    """Compute the day's mortality fluxes and apply them to the states.

    Whole-plant mortality is taken first, into litter and coarse woody
    debris; fire mortality follows, from the updated pools into the
    fire sinks.
    """
    _background_mortality(epc, cs, cf, ns, nf)
    _fire_mortality(epc, cs, cf, ns, nf)
"""Daily soil water outflow and nitrogen leaching."""

from __future__ import annotations

from .structs import NitrogenFlux, NitrogenState, SiteConst, WaterFlux, WaterState


def outflow(sitec: SiteConst, ws: WaterState, wf: WaterFlux) -> None:
    """Set the day's outflow from soil water above field capacity.

    Water above saturation drains at once; water between field capacity
    and saturation drains at half the excess per day.
    """
    if ws.soilw > sitec.soilw_sat:
        wf.soilw_outflow = ws.soilw - sitec.soilw_sat
    elif ws.soilw > sitec.soilw_fc:
        wf.soilw_outflow = 0.5 * (ws.soilw - sitec.soilw_fc)
    else:
        wf.soilw_outflow = 0.0


def nleaching(
    ns: NitrogenState,
    nf: NitrogenFlux,
    ws: WaterState,
    wf: WaterFlux,
    mobilen_proportion: float,
) -> None:
    """Leach the soluble part of soil mineral N with the day's outflow."""
    if wf.soilw_outflow:
        soilwater_nconc = mobilen_proportion * ns.sminn / ws.soilw
        nf.sminn_leached = soilwater_nconc * wf.soilw_outflow
        ns.nleached_snk += nf.sminn_leached
        ns.sminn -= nf.sminn_leached
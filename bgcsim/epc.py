"""Reading of the ecophysiological constants (EPC) file."""

from __future__ import annotations

from typing import Tuple

from .ini import FLT_COND_TOL, IniError, InitFile
from .structs import EpConst


def _int(epcfile: InitFile, what: str) -> int:
    try:
        return epcfile.read_int()
    except IniError as exc:
        raise IniError(f"Error reading {what}, epc_init()") from exc


def _float(epcfile: InitFile, what: str) -> float:
    try:
        return epcfile.read_float()
    except IniError as exc:
        raise IniError(f"Error reading {what}, epc_init()") from exc


def _split_cellulose(cellulose: float, lignin: float) -> Tuple[float, float]:
    """Split cellulose into (shielded, unshielded) fractions.

    The split depends on the lignin:cellulose ratio.
    """
    if cellulose == 0.0:
        return 0.0, 0.0
    ratio = lignin / cellulose
    if ratio <= 0.45:
        return 0.0, cellulose
    if ratio < 0.7:
        shielded = (ratio - 0.45) * 3.2
        return shielded * cellulose, (1.0 - shielded) * cellulose
    return 0.8 * cellulose, 0.2 * cellulose


def _check_sum(total: float, what: str) -> None:
    if abs(total - 1.0) > FLT_COND_TOL:
        raise IniError(
            f"{what} proportions must sum to 1.0. "
            "Check initialization file and try again."
        )


def _read_epc(epcfile: InitFile) -> EpConst:
    epc = EpConst()
    epcfile.expect_keyword("ECOPHYS")

    epc.woody = bool(_int(epcfile, "woody/non-woody flag"))
    epc.evergreen = bool(_int(epcfile, "evergreen/deciduous flag"))
    epc.c3_flag = bool(_int(epcfile, "C3/C4 flag"))
    epc.phenology_flag = _int(epcfile, "phenology flag")
    epc.onday = _int(epcfile, "onday")
    epc.offday = _int(epcfile, "offday")
    epc.transfer_pdays = _float(epcfile, "transfer_pdays")
    epc.litfall_pdays = _float(epcfile, "litfall_pdays")
    epc.leaf_turnover = _float(epcfile, "leaf turnover")
    if not epc.evergreen:
        epc.leaf_turnover = 1.0
    epc.froot_turnover = epc.leaf_turnover
    epc.livewood_turnover = _float(epcfile, "livewood turnover")
    epc.daily_mortality_turnover = _float(epcfile, "whole-plant mortality") / 365
    epc.daily_fire_turnover = _float(epcfile, "fire mortality") / 365
    epc.alloc_frootc_leafc = _float(epcfile, "froot C:leaf C")
    epc.alloc_newstemc_newleafc = _float(epcfile, "new stemC:new leaf C")
    epc.alloc_newlivewoodc_newwoodc = _float(epcfile, "new livewood C:new wood C")
    epc.alloc_crootc_stemc = _float(epcfile, "croot C:stem C")
    epc.alloc_prop_curgrowth = _float(epcfile, "new growth:storage growth")
    epc.leaf_cn = _float(epcfile, "average leaf C:N")
    epc.leaflitr_cn = _float(epcfile, "leaf litter C:N")
    if epc.leaflitr_cn < epc.leaf_cn:
        raise IniError(
            "Error: leaf litter C:N must be >= leaf C:N; "
            "change the values in ECOPHYS block of initialization file"
        )
    epc.froot_cn = _float(epcfile, "initial fine root C:N")
    epc.livewood_cn = _float(epcfile, "initial livewood C:N")
    epc.deadwood_cn = _float(epcfile, "initial deadwood C:N")
    if epc.deadwood_cn < epc.livewood_cn:
        raise IniError(
            "Error: deadwood C:N must be >= livewood C:N; "
            "change the values in ECOPHYS block of initialization file"
        )

    labile = _float(epcfile, "leaf litter labile proportion")
    cellulose = _float(epcfile, "leaf litter cellulose proportion")
    lignin = _float(epcfile, "leaf litter lignin proportion")
    epc.leaflitr_flab = labile
    epc.leaflitr_flig = lignin
    _check_sum(labile + cellulose + lignin, "leaf litter labile, cellulose, and lignin")
    epc.leaflitr_fscel, epc.leaflitr_fucel = _split_cellulose(cellulose, lignin)

    labile = _float(epcfile, "froot litter labile proportion")
    cellulose = _float(epcfile, "froot litter cellulose proportion")
    lignin = _float(epcfile, "froot litter lignin proportion")
    epc.frootlitr_flab = labile
    epc.frootlitr_flig = lignin
    _check_sum(labile + cellulose + lignin, "froot litter labile, cellulose, and lignin")
    epc.frootlitr_fscel, epc.frootlitr_fucel = _split_cellulose(cellulose, lignin)

    cellulose = _float(epcfile, "dead wood % cellulose")
    lignin = _float(epcfile, "dead wood % lignin")
    epc.deadwood_flig = lignin
    _check_sum(cellulose + lignin, "deadwood cellulose and lignin")
    epc.deadwood_fscel, epc.deadwood_fucel = _split_cellulose(cellulose, lignin)

    epc.int_coef = _float(epcfile, "canopy water int coef")
    epc.ext_coef = _float(epcfile, "canopy light ext coef")
    epc.lai_ratio = _float(epcfile, "all to projected LA ratio")
    epc.avg_proj_sla = _float(epcfile, "canopy average projected specific leaf area")
    epc.sla_ratio = _float(epcfile, "shaded to sunlit SLA ratio")
    epc.flnr = _float(epcfile, "Rubisco N fraction")
    epc.gl_smax = _float(epcfile, "gl_smax")
    epc.gl_c = _float(epcfile, "gl_c")
    epc.gl_bl = _float(epcfile, "gl_bl")
    epc.psi_open = _float(epcfile, "psi_open")
    epc.psi_close = _float(epcfile, "psi_close")
    epc.vpd_open = _float(epcfile, "vpd_open")
    epc.vpd_close = _float(epcfile, "vpd_close")
    epc.max_mesophyll_path = _float(epcfile, "max_mesophyll_path")
    epc.min_mesophyll_path = _float(epcfile, "min_mesophyll_path")
    epc.psi_p_50 = _float(epcfile, "psi_p_50")
    epc.s_psi_p_50 = _float(epcfile, "s_psi_p_50")
    epc.psi_refill = _float(epcfile, "psi_refill")
    return epc


def epc_init(init: InitFile) -> EpConst:
    """Read the EPC_FILE block of *init* and load the listed EPC file."""
    try:
        init.expect_keyword("EPC_FILE")
    except IniError as exc:
        raise IniError(f"Error reading keyword for control data in {init.name}") from exc
    try:
        stream = init.open_listed_file("i")
    except IniError as exc:
        raise IniError("Error opening epconst file, epc_init()") from exc
    with stream:
        return _read_epc(InitFile(stream, getattr(stream, "name", "<epc>")))
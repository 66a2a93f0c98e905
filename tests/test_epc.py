import io

import pytest

from bgcsim.epc import epc_init
from bgcsim.ini import IniError, InitFile

BASE_VALUES = [
    ("woody", "1"),
    ("evergreen", "1"),
    ("c3", "1"),
    ("phenology_flag", "0"),
    ("onday", "-1"),
    ("offday", "-1"),
    ("transfer_pdays", "0.2"),
    ("litfall_pdays", "0.2"),
    ("leaf_turnover", "0.25"),
    ("livewood_turnover", "0.7"),
    ("mortality", "0.005"),
    ("fire", "0.005"),
    ("frootc_leafc", "1.0"),
    ("newstem_newleaf", "2.2"),
    ("newlive_newwood", "0.1"),
    ("croot_stem", "0.3"),
    ("prop_curgrowth", "0.5"),
    ("leaf_cn", "42.0"),
    ("leaflitr_cn", "93.0"),
    ("froot_cn", "58.0"),
    ("livewood_cn", "50.0"),
    ("deadwood_cn", "730.0"),
    ("leaf_lab", "0.32"),
    ("leaf_cel", "0.44"),
    ("leaf_lig", "0.24"),
    ("froot_lab", "0.30"),
    ("froot_cel", "0.45"),
    ("froot_lig", "0.25"),
    ("dead_cel", "0.76"),
    ("dead_lig", "0.24"),
    ("int_coef", "0.045"),
    ("ext_coef", "0.5"),
    ("lai_ratio", "2.6"),
    ("sla", "8.2"),
    ("sla_ratio", "2.0"),
    ("flnr", "0.04"),
    ("gl_smax", "0.003"),
    ("gl_c", "0.00001"),
    ("gl_bl", "0.08"),
    ("psi_open", "-0.65"),
    ("psi_close", "-2.5"),
    ("vpd_open", "930.0"),
    ("vpd_close", "4100.0"),
    ("max_meso", "0.0"),
    ("min_meso", "0.0"),
    ("psi_p_50", "-3.0"),
    ("s_psi_p_50", "0.5"),
    ("psi_refill", "-0.5"),
]


def _load(tmp_path, keyword="ECOPHYS", **overrides):
    lines = [keyword]
    for name, value in BASE_VALUES:
        lines.append(f"{overrides.get(name, value)}\t(comment) {name}")
    epc_path = tmp_path / "test.epc"
    epc_path.write_text("\n".join(lines) + "\n")
    init = InitFile(io.StringIO(f"EPC_FILE\n{epc_path}\n"), "test.ini")
    return epc_init(init)


def test_reads_flags_and_values(tmp_path):
    epc = _load(tmp_path)
    assert epc.woody is True
    assert epc.evergreen is True
    assert epc.c3_flag is True
    assert epc.onday == -1
    assert epc.leaf_cn == pytest.approx(42.0)
    assert epc.deadwood_cn == pytest.approx(730.0)
    assert epc.psi_p_50 == pytest.approx(-3.0)
    assert epc.psi_refill == pytest.approx(-0.5)


def test_evergreen_keeps_turnover_and_froot_matches(tmp_path):
    epc = _load(tmp_path)
    assert epc.leaf_turnover == pytest.approx(0.25)
    assert epc.froot_turnover == epc.leaf_turnover


def test_deciduous_forces_full_turnover(tmp_path):
    epc = _load(tmp_path, evergreen="0")
    assert epc.evergreen is False
    assert epc.leaf_turnover == 1.0
    assert epc.froot_turnover == 1.0


def test_annual_mortality_becomes_daily(tmp_path):
    epc = _load(tmp_path, mortality="0.365", fire="0.73")
    assert epc.daily_mortality_turnover == pytest.approx(0.365 / 365)
    assert epc.daily_fire_turnover == pytest.approx(0.73 / 365)


def test_low_lignin_ratio_keeps_all_cellulose_unshielded(tmp_path):
    epc = _load(tmp_path)
    assert epc.deadwood_fscel == 0.0
    assert epc.deadwood_fucel == pytest.approx(0.76)
    assert epc.deadwood_flig == pytest.approx(0.24)


def test_high_lignin_ratio_shields_most_cellulose(tmp_path):
    epc = _load(tmp_path, leaf_lab="0.2", leaf_cel="0.4", leaf_lig="0.4")
    assert epc.leaflitr_fscel == pytest.approx(0.8 * 0.4)
    assert epc.leaflitr_fucel == pytest.approx(0.2 * 0.4)


def test_intermediate_ratio_split_preserves_cellulose(tmp_path):
    epc = _load(tmp_path)
    assert epc.leaflitr_fscel + epc.leaflitr_fucel == pytest.approx(0.44)
    assert 0.0 < epc.leaflitr_fscel < 0.44
    assert epc.frootlitr_fscel + epc.frootlitr_fucel == pytest.approx(0.45)
    total = epc.leaflitr_flab + epc.leaflitr_fscel + epc.leaflitr_fucel + epc.leaflitr_flig
    assert total == pytest.approx(1.0)


def test_leaf_litter_cn_below_leaf_cn_is_rejected(tmp_path):
    with pytest.raises(IniError):
        _load(tmp_path, leaflitr_cn="30.0")


def test_deadwood_cn_below_livewood_cn_is_rejected(tmp_path):
    with pytest.raises(IniError):
        _load(tmp_path, deadwood_cn="40.0")


def test_litter_fractions_must_sum_to_one(tmp_path):
    with pytest.raises(IniError):
        _load(tmp_path, leaf_lab="0.5")


def test_deadwood_fractions_must_sum_to_one(tmp_path):
    with pytest.raises(IniError):
        _load(tmp_path, dead_lig="0.5")


def test_wrong_epc_keyword(tmp_path):
    with pytest.raises(IniError):
        _load(tmp_path, keyword="NOTECOPHYS")


def test_wrong_block_keyword():
    init = InitFile(io.StringIO("MET_INPUT\nfile.epc\n"), "test.ini")
    with pytest.raises(IniError):
        epc_init(init)


def test_missing_epc_file(tmp_path):
    init = InitFile(io.StringIO(f"EPC_FILE\n{tmp_path / 'absent.epc'}\n"), "test.ini")
    with pytest.raises(IniError):
        epc_init(init)


def test_bad_number_is_rejected(tmp_path):
    with pytest.raises(IniError):
        _load(tmp_path, flnr="abc")
import pytest

from bgcsim.respiration import growth_resp, maint_resp
from bgcsim.structs import (
    BgcConstants,
    CarbonFlux,
    CarbonState,
    EpConst,
    EpVar,
    MetVar,
    NitrogenState,
)


def _constants(grperc=0.3, grpnow=0.5):
    return BgcConstants(
        grperc=grperc,
        grpnow=grpnow,
        soil1_cn=12.0,
        soil2_cn=12.0,
        soil3_cn=10.0,
        soil4_cn=10.0,
        rfl1s1=0.39,
        rfl2s2=0.55,
        rfl4s3=0.29,
        rfs1s2=0.28,
        rfs2s3=0.46,
        rfs3s4=0.55,
        kl1_base=0.7,
        kl2_base=0.07,
        kl4_base=0.014,
        ks1_base=0.07,
        ks2_base=0.014,
        ks3_base=0.0014,
        ks4_base=0.0001,
        kfrag_base=0.001,
        mobilen_proportion=0.1,
    )


def _setup(temp=20.0, dayl=86400.0, woody=True):
    cs = CarbonState(leafc=0.5, frootc=0.4)
    ns = NitrogenState(leafn=1.0, frootn=2.0, livestemn=3.0, livecrootn=4.0)
    epc = EpConst(woody=woody, leaf_cn=40.0)
    metv = MetVar(tday=temp, tnight=temp, tsoil=temp, tavg=temp, dayl=dayl)
    epv = EpVar(sun_proj_sla=10.0, shade_proj_sla=20.0)
    return cs, ns, epc, metv, CarbonFlux(), epv


def test_reference_temperature_full_day():
    cs, ns, epc, metv, cf, epv = _setup()
    maint_resp(cs, ns, epc, metv, cf, epv)
    assert cf.leaf_day_mr == pytest.approx(0.218)
    assert cf.leaf_night_mr == 0.0
    assert cf.froot_mr == pytest.approx(2.0 * 0.218)
    assert cf.livestem_mr == pytest.approx(3.0 * 0.218)
    assert cf.livecroot_mr == pytest.approx(4.0 * 0.218)


def test_q10_doubles_per_ten_degrees():
    cs, ns, epc, metv, cf20, epv = _setup(temp=20.0, dayl=43200.0)
    maint_resp(cs, ns, epc, metv, cf20, epv)
    cs, ns, epc, metv, cf30, epv = _setup(temp=30.0, dayl=43200.0)
    maint_resp(cs, ns, epc, metv, cf30, epv)
    assert cf30.leaf_day_mr / cf20.leaf_day_mr == pytest.approx(2.0)
    assert cf30.leaf_night_mr / cf20.leaf_night_mr == pytest.approx(2.0)
    assert cf30.froot_mr / cf20.froot_mr == pytest.approx(2.0)


def test_day_and_night_split_sums_to_whole_day():
    cs, ns, epc, metv, cf_half, epv = _setup(dayl=30000.0)
    maint_resp(cs, ns, epc, metv, cf_half, epv)
    cs, ns, epc, metv, cf_full, epv2 = _setup(dayl=86400.0)
    maint_resp(cs, ns, epc, metv, cf_full, epv2)
    assert cf_half.leaf_day_mr + cf_half.leaf_night_mr == pytest.approx(cf_full.leaf_day_mr)


def test_sun_and_shade_area_rates_scale_with_sla():
    cs, ns, epc, metv, cf, epv = _setup()
    maint_resp(cs, ns, epc, metv, cf, epv)
    assert epv.dlmr_area_sun > 0.0
    assert epv.dlmr_area_sun / epv.dlmr_area_shade == pytest.approx(2.0)


def test_no_leaves_and_no_roots():
    cs, ns, epc, metv, cf, epv = _setup()
    cs.leafc = 0.0
    cs.frootc = 0.0
    epv.dlmr_area_sun = 5.0
    maint_resp(cs, ns, epc, metv, cf, epv)
    assert cf.leaf_day_mr == 0.0
    assert cf.leaf_night_mr == 0.0
    assert epv.dlmr_area_sun == 0.0
    assert epv.dlmr_area_shade == 0.0
    assert cf.froot_mr == 0.0


def test_non_woody_leaves_wood_fluxes_untouched():
    cs, ns, epc, metv, cf, epv = _setup(woody=False)
    cf.livestem_mr = -1.0
    maint_resp(cs, ns, epc, metv, cf, epv)
    assert cf.livestem_mr == -1.0
    assert cf.livecroot_mr == 0.0


def _allocated_flux():
    return CarbonFlux(
        cpool_to_leafc=1.0,
        cpool_to_frootc=2.0,
        cpool_to_leafc_storage=3.0,
        cpool_to_frootc_storage=4.0,
        leafc_transfer_to_leafc=5.0,
        frootc_transfer_to_frootc=6.0,
        cpool_to_livestemc=7.0,
        cpool_to_deadstemc=8.0,
        cpool_to_livecrootc=9.0,
        cpool_to_deadcrootc=10.0,
        cpool_to_livestemc_storage=11.0,
        livestemc_transfer_to_livestemc=12.0,
    )


def test_growth_resp_proportions():
    cf = _allocated_flux()
    constants = _constants(grperc=0.3, grpnow=0.5)
    growth_resp(EpConst(woody=True), cf, constants)
    assert cf.cpool_leaf_gr == pytest.approx(1.0 * constants.grperc)
    assert cf.cpool_froot_gr == pytest.approx(2.0 * constants.grperc)
    assert cf.cpool_deadcroot_gr == pytest.approx(10.0 * constants.grperc)
    assert cf.cpool_leaf_storage_gr / cf.cpool_to_leafc_storage == pytest.approx(
        constants.grperc * constants.grpnow
    )


def test_growth_resp_all_at_fixation_leaves_no_transfer_resp():
    cf = _allocated_flux()
    growth_resp(EpConst(woody=True), cf, _constants(grperc=0.3, grpnow=1.0))
    assert cf.transfer_leaf_gr == 0.0
    assert cf.transfer_froot_gr == 0.0
    assert cf.transfer_livestem_gr == 0.0
    assert cf.cpool_livestem_storage_gr == pytest.approx(11.0 * 0.3)


def test_growth_resp_storage_and_transfer_split_sum():
    cf = _allocated_flux()
    constants = _constants(grperc=0.3, grpnow=0.25)
    growth_resp(EpConst(woody=True), cf, constants)
    # a flux of equal size in storage and transfer pays the full grperc together
    storage_share = cf.cpool_livestem_storage_gr / cf.cpool_to_livestemc_storage
    transfer_share = cf.transfer_livestem_gr / cf.livestemc_transfer_to_livestemc
    assert storage_share + transfer_share == pytest.approx(constants.grperc)


def test_growth_resp_non_woody_skips_wood():
    cf = _allocated_flux()
    growth_resp(EpConst(woody=False), cf, _constants())
    assert cf.cpool_livestem_gr == 0.0
    assert cf.transfer_livestem_gr == 0.0
    assert cf.cpool_leaf_gr == pytest.approx(0.3)
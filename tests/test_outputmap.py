import io

import pytest

from bgcsim.outputmap import OutputMap, output_ascii, output_map_init
from bgcsim.structs import (
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


@pytest.fixture
def records():
    return {
        "metv": MetVar(),
        "ws": WaterState(),
        "wf": WaterFlux(),
        "cs": CarbonState(),
        "cf": CarbonFlux(),
        "ns": NitrogenState(),
        "nf": NitrogenFlux(),
        "phen": Phenology(),
        "epv": EpVar(),
        "psn_sun": PsnStruct(),
        "psn_shade": PsnStruct(),
        "summary": Summary(),
    }


@pytest.fixture
def omap(records):
    return output_map_init(**records)


def test_reads_current_value(records, omap):
    records["metv"].prcp = 3.5
    assert omap[0] == 3.5
    records["metv"].prcp = 7.25
    assert omap[0] == 7.25


def test_unmapped_code_raises(omap):
    with pytest.raises(KeyError):
        omap[29]
    with pytest.raises(KeyError):
        omap[10000]
    assert 29 not in omap
    assert 10000 not in omap
    assert 28 in omap


@pytest.mark.parametrize(
    "code, name",
    [
        (0, "prcp"),
        (19, "dayl"),
        (28, "trans_snk"),
        (44, "soilw_outflow"),
        (99, "fire_snk"),
        (120, "m_leafc_to_litr1c"),
        (233, "transfer_deadcroot_gr"),
        (240, "gresp_storage_to_gresp_transfer"),
        (248, "cpool_deadcroot_storage_gr"),
        (314, "fire_snk"),
        (431, "sminn_to_nvol_s4"),
        (432, "sminn_leached"),
        (456, "livecrootn_to_retransn"),
        (484, "predays_litfall"),
        (546, "fpi"),
        (551, "m_psi_x"),
        (579, "A"),
        (609, "A"),
        (650, "totaln"),
    ],
)
def test_code_names(omap, code, name):
    assert omap.name(code) == name


def test_sun_and_shade_are_distinct(records, omap):
    records["psn_sun"].pa = 100.0
    records["psn_shade"].pa = 200.0
    assert omap[560] == 100.0
    assert omap[590] == 200.0


def test_every_code_refers_to_its_record(records, omap):
    records["cf"].cpool_leaf_storage_gr = 4.0
    records["nf"].sminn_leached = 2.0
    records["summary"].totaln = 9.0
    assert omap[243] == 4.0
    assert omap[432] == 2.0
    assert omap[650] == 9.0


def test_values_in_given_order(records, omap):
    records["metv"].tmax = 1.0
    records["metv"].tmin = 2.0
    records["cs"].leafc = 3.0
    assert omap.values([50, 2, 1]) == [3.0, 2.0, 1.0]


def test_values_unmapped_raises(omap):
    with pytest.raises(KeyError):
        omap.values([0, 30])


def test_iteration_is_sorted_and_complete(omap):
    codes = list(omap)
    assert codes == sorted(codes)
    assert len(codes) == len(omap)
    assert codes[0] == 0 and codes[-1] == 650


def test_outputmap_direct():
    rec = MetVar(tavg=5.0)
    m = OutputMap({3: (rec, "tavg")})
    assert m[3] == 5.0
    assert len(m) == 1


def test_output_ascii_format():
    out = io.StringIO()
    output_ascii([1.5, -2.25, 0.0], out)
    assert out.getvalue() == "1.50000000\t-2.25000000\t0.00000000\t\n"


def test_output_ascii_single_precision():
    out = io.StringIO()
    output_ascii([1.0 / 3.0], out)
    assert out.getvalue() == "0.33333334\t\n"


def test_output_ascii_empty():
    out = io.StringIO()
    output_ascii([], out)
    assert out.getvalue() == "\n"


def test_output_ascii_from_map(records, omap):
    records["metv"].tmax = 12.5
    records["metv"].tmin = 0.5
    out = io.StringIO()
    output_ascii(omap.values([1, 2]), out)
    fields = out.getvalue().rstrip("\n").split("\t")
    assert fields[-1] == ""
    assert [float(f) for f in fields[:-1]] == [12.5, 0.5]
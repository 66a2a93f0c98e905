import io

import pytest

from bgcsim.ini import IniError, InitFile
from bgcsim.output import OutputControl, RunMode, output_ctrl, output_init


def _ini(prefix="out/run", flags=(1, 0, 1, 0, 1), daycodes=(20, 21), anncodes=(545,)):
    lines = ["OUTPUT_CONTROL", f"{prefix}   prefix"]
    lines += [f"{flag}  flag" for flag in flags]
    lines += ["DAILY_OUTPUT", str(len(daycodes))] + [str(c) for c in daycodes]
    lines += ["ANNUAL_OUTPUT", str(len(anncodes))] + [str(c) for c in anncodes]
    return InitFile(io.StringIO("\n".join(lines) + "\n"), "test.ini")


def test_reads_values_without_mode():
    out = output_ctrl(_ini())
    assert out.outprefix == "out/run"
    assert (out.dodaily, out.domonavg, out.doannavg, out.doannual) == (True, False, True, False)
    assert out.onscreen is True
    assert out.daycodes == [20, 21]
    assert out.anncodes == [545]
    assert out.ndayout == 2 and out.nannout == 1


def test_model_mode_forces_outputs_on():
    out = output_ctrl(_ini(flags=(0, 0, 0, 0, 0)), RunMode.MODEL)
    assert (out.dodaily, out.domonavg, out.doannavg, out.doannual) == (True, True, True, True)
    assert out.onscreen is False


@pytest.mark.parametrize("mode", [RunMode.SPINUP, RunMode.SPINNGO])
def test_spinup_modes_force_outputs_off(mode):
    out = output_ctrl(_ini(flags=(1, 1, 1, 1, 1)), mode)
    assert (out.dodaily, out.domonavg, out.doannavg, out.doannual) == (False, False, False, False)
    assert out.onscreen is True


def test_wrong_keyword_raises():
    init = InitFile(io.StringIO("MET_INPUT\n"), "bad.ini")
    with pytest.raises(IniError):
        output_ctrl(init)


@pytest.mark.parametrize("mode", [RunMode.MODEL, RunMode.SPINNGO])
def test_no_output_variables_is_an_error_when_running(mode):
    with pytest.raises(IniError):
        output_ctrl(_ini(daycodes=(), anncodes=()), mode)


def test_no_output_variables_allowed_for_spinup():
    out = output_ctrl(_ini(daycodes=(), anncodes=()), RunMode.SPINUP)
    assert out.daycodes == [] and out.anncodes == []


def test_truncated_codes_raise():
    init = InitFile(io.StringIO("OUTPUT_CONTROL\np\n1\n1\n1\n1\n1\nDAILY_OUTPUT\n3\n1\n"), "t")
    with pytest.raises(IniError):
        output_ctrl(init)


def test_output_init_opens_binary_files(tmp_path):
    prefix = str(tmp_path / "run")
    output = OutputControl(outprefix=prefix, dodaily=True, doannual=True)
    with output:
        output_init(output, "1.0")
        assert output.dayout is not None and output.annout is not None
        assert output.monavgout is None and output.anntext is None
    assert (tmp_path / "run.dayout").exists()
    assert (tmp_path / "run.annout").exists()
    assert not (tmp_path / "run.monavgout").exists()
    assert output.dayout is None


def test_output_init_ascii_files_and_header(tmp_path):
    prefix = str(tmp_path / "run")
    output = OutputControl(outprefix=prefix, dodaily=True, domonavg=True,
                           doannual=True, bgc_ascii=True)
    with output:
        output_init(output, "9.9")
        assert output.dayoutascii is not None and output.anntext is not None
        assert output.annavgout is None
    assert output.anntext is None
    for suffix in (".dayout.ascii", ".monavgout.ascii", ".annout.ascii", "_ann.txt"):
        assert (tmp_path / ("run" + suffix)).exists()
    assert not (tmp_path / "run.annavgout").exists()
    text = (tmp_path / "run_ann.txt").read_text().splitlines()
    assert "9.9" in text[0]
    headings = ["ann PRCP", "ann Tavg", "max LAI", "ann ET", "ann OF", "ann NPP", "ann NBP"]
    assert text[-1] == "  year" + "".join(h.rjust(10) for h in headings)
    assert text[-2] == ""
    assert text[1] == "ann PRCP = annual total precipitation (mm/yr)"


def test_output_init_bad_directory_raises(tmp_path):
    output = OutputControl(outprefix=str(tmp_path / "missing" / "run"), dodaily=True)
    with pytest.raises(IniError):
        output_init(output, "1.0")
    assert output.dayout is None
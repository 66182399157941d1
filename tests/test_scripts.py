"""
End-to-end tests of the command-line scripts.
"""

import importlib.util
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def _load_script(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def plot_script():
    return _load_script("plot_boundary_layer")


@pytest.fixture(scope="module")
def generate_script():
    return _load_script("generate_blasius_dataset")


def test_plot_writes_html_and_pdf(plot_script, scenario_csv, tmp_path, capsys):
    out_dir = tmp_path / "out"
    rc = plot_script.main([str(scenario_csv), "--output-dir", str(out_dir),
                           "--case-name", "bl", "--pdf", "--log-level", "WARNING"])
    assert rc == 0
    assert (out_dir / "bl_nu0_u0.html").exists()
    assert (out_dir / "bl_nu0_u0.pdf").exists()
    out = capsys.readouterr().out
    assert "1.00e+06" in out


def test_plot_list_axes(plot_script, scenario_csv, capsys):
    rc = plot_script.main([str(scenario_csv), "--list", "--log-level", "WARNING"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "nu (2 values)" in out
    assert "u_inf (1 values)" in out


def test_plot_bad_index(plot_script, scenario_csv, tmp_path):
    rc = plot_script.main([str(scenario_csv), "--nu-index", "5", "--no-html",
                           "--output-dir", str(tmp_path), "--log-level", "ERROR"])
    assert rc == 2


def test_plot_missing_source(plot_script, tmp_path):
    rc = plot_script.main([str(tmp_path / "missing.csv"), "--log-level", "CRITICAL"])
    assert rc == 1


def test_generate_then_plot(generate_script, plot_script, tmp_path, capsys):
    csv_path = tmp_path / "small.csv"
    rc = generate_script.main(["-o", str(csv_path), "--n-nu", "2", "--n-u", "3", "--n-x", "10"])
    assert rc == 0
    assert len(csv_path.read_text().strip().splitlines()) == 1 + 2 * 3 * 10
    
    rc = plot_script.main([str(csv_path), "--nu-index", "1", "--u-inf-index", "2", "--no-html",
                           "--log-level", "WARNING"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "points:    10" in out

import pytest

import cli


def test_default_run(capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Coordinates and Derivatives at t=PI/4:\n")
    assert out.count("Curve Type: ") == 5
    assert "Sorted Circles by Radius:\n" in out
    assert "Total Sum of Radii: " in out


def test_seeded_runs_are_reproducible(capsys):
    cli.main(["--seed", "42"])
    first = capsys.readouterr().out
    cli.main(["--seed", "42"])
    assert capsys.readouterr().out == first


def test_circle_lines_sorted(capsys):
    assert cli.main(["--seed", "8", "--count", "50"]) == 0
    out = capsys.readouterr().out
    summary = out.split("Sorted Circles by Radius:\n", 1)[1].splitlines()
    radii = [float(ln.split(": ")[1]) for ln in summary if ln.startswith("Circle, Radius:")]
    assert radii == sorted(radii)
    total = float(summary[-1].split(": ")[1])
    assert total == pytest.approx(sum(radii), rel=1e-4)


def test_zero_curves(capsys):
    assert cli.main(["--count", "0"]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Coordinates and Derivatives at t=PI/4:\n"
        "Sorted Circles by Radius:\n"
        "Total Sum of Radii: 0\n"
    )


def test_invalid_parameter_exits_1(capsys):
    code = cli.main(["--seed", "1", "--radius-min", "-10", "--radius-max", "-1"])
    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")
    assert captured.err.strip().endswith("must be positive.")
    assert len(captured.err.strip().splitlines()) == 1


@pytest.mark.parametrize("argv", [
    ["--count", "-1"],
    ["--radius-min", "5", "--radius-max", "5"],
    ["--step-min", "3", "--step-max", "1"],
    ["--workers", "0"],
])
def test_argument_errors(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2


def test_save_plot(tmp_path, capsys):
    path = tmp_path / "curves.png"
    assert cli.main(["--seed", "2", "--save-plot", str(path), "-p", "iso"]) == 0
    assert path.exists()
    assert f"Saved plot -> {path}" in capsys.readouterr().out

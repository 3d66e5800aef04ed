from kyberkem.bench import cpucycles, cpucycles_overhead, print_results


def test_cpucycles_does_not_go_backwards():
    first = cpucycles()
    second = cpucycles()
    assert second >= first


def test_overhead_is_non_negative():
    assert cpucycles_overhead() >= 0


def test_too_few_timestamps_reports_error(capsys):
    assert print_results("label", [5]) is None
    captured = capsys.readouterr()
    assert "ERROR: Need a least two cycle counts!" in captured.err
    assert captured.out == ""


def test_even_spacing_gives_equal_median_and_average(capsys):
    stamps = [0, 1000, 2000, 3000, 4000]
    result = print_results("evenly spaced", stamps)
    assert result.median == result.average
    assert result.median <= 1000
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "evenly spaced"
    assert out[1] == f"median: {result.median} cycles/ticks"
    assert out[2] == f"average: {result.average} cycles/ticks"
    assert stamps == [0, 1000, 2000, 3000, 4000]


def test_median_ignores_outlier(capsys):
    baseline = print_results("base", [0, 100, 200, 300])
    skewed = print_results("skewed", [0, 100, 200, 100200])
    capsys.readouterr()
    assert skewed.median == baseline.median
    assert skewed.average > baseline.average


def test_real_measurements(capsys):
    stamps = [cpucycles() for _ in range(6)]
    result = print_results("measured", stamps)
    assert "measured" in capsys.readouterr().out
    assert result.median <= max(b - a for a, b in zip(stamps, stamps[1:]))
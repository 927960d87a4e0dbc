import csv

import pytest

from erosionsim.cli import main, round_droplet_count


def read_grid(path):
    with open(path, newline="", encoding="utf-8") as handle:
        return [[float(v) for v in row] for row in csv.reader(handle)]


def test_round_keeps_whole_steps():
    assert round_droplet_count(40000, 1000) == 40000


def test_round_truncates_partial_step():
    assert round_droplet_count(2500, 1000) == 2000
    assert round_droplet_count(999, 1000) == 0


def test_round_result_is_multiple_of_step():
    for value in (0, 1, 1234, 9999, 40001):
        result = round_droplet_count(value, 1000)
        assert result % 1000 == 0
        assert 0 <= value - result < 1000


def test_round_rejects_non_positive_step():
    with pytest.raises(ValueError):
        round_droplet_count(100, 0)


def test_main_writes_grid(tmp_path, capsys):
    out = tmp_path / "grid.csv"
    code = main(["--width", "8", "--depth", "6", "--droplets", "1500",
                 "--seed", "3", "--output", str(out)])
    assert code == 0
    rows = read_grid(out)
    assert len(rows) == 8 * 6
    assert all(len(row) == 3 for row in rows)
    text = capsys.readouterr().out
    assert "Erosion droplets 1000" in text
    assert "Droplet Lifetime 30" in text


def test_main_lock_ratio_uses_width(tmp_path):
    out = tmp_path / "grid.csv"
    main(["--width", "5", "--depth", "9", "--lock-ratio", "--droplets", "0",
          "--output", str(out)])
    assert len(read_grid(out)) == 5 * 5


def test_main_zero_height_is_flat(tmp_path):
    out = tmp_path / "grid.csv"
    main(["--width", "5", "--depth", "5", "--height", "0", "--droplets", "0",
          "--output", str(out)])
    assert all(row[1] == 0.0 for row in read_grid(out))


def test_main_is_reproducible_with_seed(tmp_path):
    first = tmp_path / "a.csv"
    second = tmp_path / "b.csv"
    args = ["--width", "8", "--depth", "8", "--droplets", "1000", "--seed", "11"]
    main(args + ["--output", str(first)])
    main(args + ["--output", str(second)])
    assert read_grid(first) == read_grid(second)
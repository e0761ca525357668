"""End-to-end tests for run_goldbach.main."""

import pandas as pd
import pytest

import run_goldbach
from goldbach import prime_source


def run(capsys, *argv):
    code = run_goldbach.main(list(argv))
    return code, capsys.readouterr().out.splitlines()


class TestRun:

    def test_scan_ten(self, capsys):
        code, lines = run(capsys, "-n", "10")
        assert code == 0
        assert lines == ["4 = 2 + 2", "6 = 3 + 3", "8 = 3 + 5", "10 = 3 + 7"]

    @pytest.mark.parametrize("algo", ["Eratosthenes", "Atkin"])
    def test_algorithms_give_same_output(self, capsys, algo):
        code, lines = run(capsys, "-n", "200", "-a", algo)
        assert code == 0
        assert len(lines) == 99
        assert not any("no solution" in line for line in lines)
        assert lines[-1] == "200 = 3 + 197"

    def test_unknown_algorithm_rejected(self, capsys):
        with pytest.raises(SystemExit):
            run_goldbach.main(["-n", "10", "-a", "Sundaram"])

    def test_n_required(self, capsys):
        with pytest.raises(SystemExit):
            run_goldbach.main([])


class TestBoundRejection:

    @pytest.mark.parametrize("n", ["5", "2"])
    def test_rejected_before_sieving(self, capsys, monkeypatch, n):
        def fail(config):
            raise AssertionError("primes resolved for an invalid bound")
        monkeypatch.setattr(run_goldbach, "resolve_primes", fail)

        code, lines = run(capsys, "-n", n)
        assert code == 1
        assert lines == ["n must be >= 4 and even"]


class TestPrimesFile:

    def test_uses_file(self, capsys, tmp_path):
        path = tmp_path / "primes.txt"
        path.write_text("3\n5\n")
        code, lines = run(capsys, "-n", "12", "--primes-file", str(path))
        assert code == 0
        assert lines == [
            "4 has no solution",
            "6 = 3 + 3",
            "8 = 3 + 5",
            "10 = 5 + 5",
            "12 has no solution",
        ]

    def test_stop_on_first_failure(self, capsys, tmp_path):
        path = tmp_path / "primes.txt"
        path.write_text("2\n3\n")
        code, lines = run(capsys, "-n", "20", "-p", str(path), "--stop")
        assert code == 0
        assert lines == ["4 = 2 + 2", "6 = 3 + 3", "8 has no solution"]

    def test_invalid_file(self, capsys, tmp_path):
        path = tmp_path / "primes.txt"
        path.write_text("2\nthree\n")
        code, lines = run(capsys, "-n", "10", "-p", str(path))
        assert code == 1
        assert len(lines) == 1
        assert lines[0].startswith(f"Failed to load primes from {path}")

    def test_missing_file(self, capsys, tmp_path):
        path = tmp_path / "missing.txt"
        code, lines = run(capsys, "-n", "10", "-p", str(path))
        assert code == 1
        assert lines[0].startswith(f"Failed to load primes from {path}")

    def test_binary_file(self, capsys, tmp_path):
        path = tmp_path / "primes.bin"
        path.write_bytes(b"2\n\xff\xfe\n")
        code, lines = run(capsys, "-n", "10", "-p", str(path))
        assert code == 1
        assert len(lines) == 1
        assert lines[0].startswith(f"Failed to load primes from {path}: invalid data on line 2")


class TestConfigAndSave:

    def test_config_file_defaults(self, capsys, tmp_path):
        cfg = tmp_path / "run.yaml"
        cfg.write_text("algorithm: Eratosthenes\nverbose: true\n")
        code, lines = run(capsys, "-n", "10", "--config", str(cfg))
        assert code == 0
        assert "Sieve of Eratosthenes" in lines[0]
        assert lines[1:5] == ["4 = 2 + 2", "6 = 3 + 3", "8 = 3 + 5", "10 = 3 + 7"]

    def test_flag_overrides_config(self, capsys, tmp_path, monkeypatch):
        cfg = tmp_path / "run.yaml"
        cfg.write_text("algorithm: Eratosthenes\n")
        seen = []
        original = prime_source.sieve_primes
        monkeypatch.setattr(prime_source, "sieve_primes",
                            lambda n, algo: seen.append(algo) or original(n, algo))
        code, _ = run(capsys, "-n", "10", "--config", str(cfg), "-a", "Atkin")
        assert code == 0
        assert [str(a) for a in seen] == ["Atkin"]

    def test_bound_from_config(self, capsys, tmp_path):
        cfg = tmp_path / "run.yaml"
        cfg.write_text("n: 8\n")
        code, lines = run(capsys, "--config", str(cfg))
        assert code == 0
        assert lines == ["4 = 2 + 2", "6 = 3 + 3", "8 = 3 + 5"]

    def test_flag_bound_overrides_config(self, capsys, tmp_path):
        cfg = tmp_path / "run.yaml"
        cfg.write_text("n: 8\n")
        code, lines = run(capsys, "--config", str(cfg), "-n", "6")
        assert code == 0
        assert lines == ["4 = 2 + 2", "6 = 3 + 3"]

    def test_bound_missing_from_flags_and_config(self, capsys, tmp_path):
        cfg = tmp_path / "run.yaml"
        cfg.write_text("algorithm: Atkin\n")
        with pytest.raises(SystemExit) as excinfo:
            run_goldbach.main(["--config", str(cfg)])
        assert excinfo.value.code == 2
        assert "-n" in capsys.readouterr().err

    def test_bad_config(self, capsys, tmp_path):
        cfg = tmp_path / "run.yaml"
        cfg.write_text("colour: blue\n")
        code, lines = run(capsys, "-n", "10", "--config", str(cfg))
        assert code == 1
        assert "Unknown config keys" in lines[0]

    def test_save_csv(self, capsys, tmp_path):
        cfg = tmp_path / "run.yaml"
        cfg.write_text(f"output_dir: {tmp_path / 'results'}\n")
        code, lines = run(capsys, "-n", "20", "--config", str(cfg), "--save")
        assert code == 0
        csv_path = tmp_path / "results" / "goldbach_n20.csv"
        assert lines[-1] == f"Saved to {csv_path}"
        df = pd.read_csv(csv_path)
        assert df['target'].tolist() == list(range(4, 21, 2))
        assert df['found'].all()
        assert ((df['p'] + df['q']) == df['target']).all()

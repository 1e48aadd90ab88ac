"""Unit tests for the command line."""

from click.testing import CliRunner

from ganita.cli import main


class TestCli:
    """Test the ganita command."""

    def test_bench_one(self):
        """Test a single operation benchmark with JSON args."""
        runner = CliRunner()
        result = runner.invoke(main, ["--iterations", "3", "bench-one", "gcd", "48", "18"])

        assert result.exit_code == 0, result.output
        assert "gcd benchmark:" in result.output
        assert "iterations: 3" in result.output

    def test_bench_one_matrix_args(self):
        """Test structured JSON arguments."""
        runner = CliRunner()
        result = runner.invoke(
            main, ["--iterations", "2", "bench-one", "matrix_multiply", "[[1,2],[3,4]]", "[[5,6],[7,8]]"]
        )
        assert result.exit_code == 0, result.output

    def test_bench_one_unknown_operation(self):
        """Test unknown operations are rejected by click."""
        result = CliRunner().invoke(main, ["bench-one", "nope"])
        assert result.exit_code == 2

    def test_bench_one_bad_json(self):
        """Test malformed arguments are usage errors."""
        result = CliRunner().invoke(main, ["bench-one", "gcd", "{oops"])
        assert result.exit_code == 2
        assert "not valid JSON" in result.output

    def test_invalid_iterations(self):
        """Test non-positive iteration counts are rejected."""
        result = CliRunner().invoke(main, ["--iterations", "0", "bench-one", "gcd", "1", "2"])
        assert result.exit_code == 2

    def test_bench_suite(self):
        """Test the full suite renders every group."""
        result = CliRunner().invoke(main, ["--iterations", "1", "--time-budget", "1", "bench", "--seed", "3"])

        assert result.exit_code == 0, result.output
        for group in ("[primes]", "[matrices]", "[vectors]", "[statistics]", "[trigonometry]"):
            assert group in result.output

import pytest

from pytest_displayfuzz.plugin import derive_seeds

pytest_plugins = ["pytester"]

def test_derive_seeds_starts_with_the_base_seed():
    seeds = derive_seeds(5, 4)

    assert seeds[0] == 5
    assert len(set(seeds)) == 4
    assert seeds == derive_seeds(5, 4)
    assert derive_seeds(5, 1) == [5]

def test_computer_fuzzer_fixture_is_seeded(pytester):
    """Verify that the computer_fuzzer fixture uses the seed of the run."""
    pytester.makepyfile("""
        import pytest
        from pytest_displayfuzz import ComputerFuzzer

        @pytest.mark.displayfuzz(runs=3)
        def test_fixture(computer_fuzzer, displayfuzz_seed):
            assert isinstance(computer_fuzzer, ComputerFuzzer)
            assert computer_fuzzer.seed == displayfuzz_seed
    """)

    result = pytester.runpytest()

    result.assert_outcomes(passed=3)

def test_failing_seeds_are_reported(pytester):
    """Verify that the terminal summary lists the seeds of failing runs."""
    pytester.makepyfile("""
        import pytest

        @pytest.mark.displayfuzz(seed=11, runs=2)
        def test_always_fails(computer_fuzzer):
            computer = computer_fuzzer.with_two_monitors_or_more().build().computer
            assert computer.primary_monitor == computer.secondary_monitor
    """)

    result = pytester.runpytest()

    result.stdout.fnmatch_lines([
        "*Display Fuzz Report*",
        "Fuzzed runs: 2, failed: 2",
        "Failing seeds:",
        "*test_always_fails?seed=11? (seed=11, base seed=11, runs=2)",
        "Rerun a failure by its node id, or a test without a displayfuzz marker alone *",
    ])
    assert result.ret == 1

def test_marked_failures_report_their_own_base_seed(pytester):
    """Verify that a marker seed is reported even when the CLI sets another one."""
    path = pytester.makepyfile("""
        import pytest

        @pytest.mark.displayfuzz(seed=11, runs=1)
        def test_always_fails(computer_fuzzer):
            computer = computer_fuzzer.with_two_monitors_or_more().build().computer
            assert computer.primary_monitor == computer.secondary_monitor
    """)

    result = pytester.runpytest("--displayfuzz-seed=7")

    result.stdout.fnmatch_lines([
        "Default base seed: 7, runs per test: 1",
        "*test_always_fails?seed=11? (seed=11, base seed=11, runs=1)",
    ])

    rerun = pytester.runpytest(f"{path.name}::test_always_fails[seed=11]", "--displayfuzz-seed=7")

    rerun.assert_outcomes(failed=1)

def test_passing_runs_are_counted(pytester):
    pytester.makepyfile("""
        def test_passes(computer_fuzzer):
            computer_fuzzer.with_n_monitors(3).build()
    """)

    result = pytester.runpytest("--displayfuzz-runs=5", "--displayfuzz-seed=99")

    result.stdout.fnmatch_lines([
        "*Display Fuzz Report*",
        "Default base seed: 99, runs per test: 5",
        "Fuzzed runs: 5, failed: 0",
    ])
    assert "Failing seeds" not in result.stdout.str()
    assert result.ret == 0

def test_tests_without_fuzzing_are_left_alone(pytester):
    pytester.makepyfile("""
        def test_plain():
            pass
    """)

    result = pytester.runpytest("-v")

    result.stdout.fnmatch_lines(["*test_plain PASSED*"])
    assert "Display Fuzz Report" not in result.stdout.str()

def test_invariant_violations_fail_the_test(pytester):
    """Verify that catching Exception does not swallow a fuzzing invariant violation."""
    pytester.makepyfile("""
        from pytest_displayfuzz.domains.fuzzing.errors import ensure

        def test_swallow(computer_fuzzer):
            try:
                ensure(False, "Primary and secondary monitors are the same")
            except Exception:
                pass
    """)

    result = pytester.runpytest()

    result.stdout.fnmatch_lines(["*FuzzingInvariantError: Error during fuzzing! Primary and secondary monitors are the same*"])
    assert result.ret == 1

def test_invalid_runs_is_a_usage_error(pytester):
    pytester.makepyfile("""
        def test_runs(displayfuzz_seed):
            pass
    """)

    result = pytester.runpytest("--displayfuzz-runs=0")

    assert "displayfuzz runs must be at least 1" in result.stdout.str() + result.stderr.str()
    assert result.ret != 0

def test_marker_is_registered(pytester):
    result = pytester.runpytest("--markers")

    result.stdout.fnmatch_lines(["*displayfuzz(seed=None, runs=None)*"])

"""Pytest plugin entry point."""

import pytest
from random import Random
from typing import List, Tuple
from loguru import logger
from pytest_displayfuzz.domains.fuzzing.computer import ComputerFuzzer
from pytest_displayfuzz.config import get_settings

SEED_FIXTURE = "displayfuzz_seed"

# Store fuzzed runs for reporting
_fuzzed_runs = 0
_failed_runs = []

def pytest_sessionstart(session):
    """Initialize global result storage."""
    global _fuzzed_runs, _failed_runs
    _fuzzed_runs = 0
    _failed_runs = []

def pytest_addoption(parser):
    """Register command line options."""
    group = parser.getgroup("displayfuzz")
    group.addoption(
        "--displayfuzz-seed",
        action="store",
        dest="displayfuzz_seed",
        help="Base seed of the fuzzed computers"
    )
    group.addoption(
        "--displayfuzz-runs",
        action="store",
        dest="displayfuzz_runs",
        help="Number of seeds each fuzzed test is run with"
    )

def pytest_configure(config):
    """Configure the plugin."""
    config.addinivalue_line("markers", "displayfuzz(seed=None, runs=None): Seed and number of runs of a fuzzed test")

def resolve_seed_and_runs(config, marker=None) -> Tuple[int, int]:
    """
    Resolves the base seed and the number of runs of a fuzzed test.

    Settings (environment) come first, then CLI options, then the marker.
    """
    settings = get_settings()

    # 1. Defaults from Settings
    seed = settings.seed
    runs = settings.runs

    # 2. Overrides from CLI
    cli_seed = config.getoption("displayfuzz_seed")
    if cli_seed is not None:
        seed = int(cli_seed)

    cli_runs = config.getoption("displayfuzz_runs")
    if cli_runs is not None:
        runs = int(cli_runs)

    # 3. Overrides from Markers
    if marker:
        if marker.kwargs.get("seed") is not None:
            seed = int(marker.kwargs["seed"])
        if marker.kwargs.get("runs") is not None:
            runs = int(marker.kwargs["runs"])

    if seed < 0:
        raise pytest.UsageError(f"displayfuzz seed must not be negative, got {seed}")
    if runs < 1:
        raise pytest.UsageError(f"displayfuzz runs must be at least 1, got {runs}")

    return seed, runs

def derive_seeds(seed: int, runs: int) -> List[int]:
    """The seeds of `runs` runs: the base seed first, then seeds drawn from it."""
    random = Random(seed)
    return [seed] + [random.getrandbits(64) for _ in range(runs - 1)]

def pytest_generate_tests(metafunc):
    """Run every test using a fuzzed computer once per seed."""
    if SEED_FIXTURE not in metafunc.fixturenames:
        return

    seed, runs = resolve_seed_and_runs(metafunc.config, metafunc.definition.get_closest_marker("displayfuzz"))
    seeds = derive_seeds(seed, runs)
    metafunc.parametrize(SEED_FIXTURE, seeds, ids=[f"seed={s}" for s in seeds])

@pytest.fixture
def displayfuzz_seed() -> int:
    """Seed of the current fuzzed run."""
    return get_settings().seed

@pytest.fixture
def computer_fuzzer(displayfuzz_seed) -> ComputerFuzzer:
    """A fresh computer fuzzer seeded for the current run."""
    return ComputerFuzzer(displayfuzz_seed)

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Remember the seed of every failing fuzzed run."""
    global _fuzzed_runs
    outcome = yield
    report = outcome.get_result()

    callspec = getattr(item, "callspec", None)
    if callspec is None or SEED_FIXTURE not in callspec.params:
        return

    seed = callspec.params[SEED_FIXTURE]
    base_seed, runs = resolve_seed_and_runs(item.config, item.get_closest_marker("displayfuzz"))
    if report.when == "call":
        _fuzzed_runs += 1
    if report.failed and report.when in ("setup", "call"):
        _failed_runs.append({"node_id": item.nodeid, "seed": seed, "base_seed": base_seed, "runs": runs})
        logger.warning(f"Fuzzed test {item.nodeid} failed with seed {seed}")

def pytest_sessionfinish(session, exitstatus):
    """
    On xdist worker, sync results to controller.
    """
    if hasattr(session.config, "workeroutput"):
        session.config.workeroutput["displayfuzz_runs"] = _fuzzed_runs
        session.config.workeroutput["displayfuzz_failed_runs"] = _failed_runs

@pytest.hookimpl(optionalhook=True)
def pytest_testnodedown(node, error):
    """
    On xdist controller, receive results from worker.
    """
    global _fuzzed_runs
    if hasattr(node, "workeroutput"):
        _fuzzed_runs += node.workeroutput.get("displayfuzz_runs", 0)
        if "displayfuzz_failed_runs" in node.workeroutput:
            _failed_runs.extend(node.workeroutput["displayfuzz_failed_runs"])

def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """Report the seeds needed to reproduce failing fuzzed runs."""
    if not _fuzzed_runs and not _failed_runs:
        return

    terminalreporter.section("Display Fuzz Report")

    seed, runs = resolve_seed_and_runs(config)
    terminalreporter.write_line(f"Default base seed: {seed}, runs per test: {runs}")
    terminalreporter.write_line(f"Fuzzed runs: {_fuzzed_runs}, failed: {len(_failed_runs)}")

    if _failed_runs:
        terminalreporter.write_line("")
        terminalreporter.write_line("Failing seeds:", red=True)
        for failure in _failed_runs:
            terminalreporter.write_line(
                f"  - {failure['node_id']} (seed={failure['seed']}, "
                f"base seed={failure['base_seed']}, runs={failure['runs']})"
            )
        terminalreporter.write_line("")
        terminalreporter.write_line(
            "Rerun a failure by its node id, or a test without a displayfuzz marker alone "
            "with --displayfuzz-seed=<seed> --displayfuzz-runs=1"
        )

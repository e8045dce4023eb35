import pytest
import logging

import nqueens as nq

logger = logging.getLogger(__name__)


def pytest_configure(config):
    # Configure logging for test filtering information
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    # Register custom marker for pytest test collecting
    config.addinivalue_line(
        "markers",
        "requires_solver(name): mark test as requiring a specific solver", # to filter tests when required solver is not installed
    )


def pytest_collection_modifyitems(config, items):
    """
    Skip tests marked with `requires_solver` when that solver is not installed.
    """
    installed = nq.SolverLookup.supported()
    skipped = 0
    for item in items:
        marker = item.get_closest_marker("requires_solver")
        if marker and not all(name in installed for name in marker.args):
            item.add_marker(pytest.mark.skip(reason=f"Solver {marker.args} not installed"))
            skipped += 1
    if skipped:
        logger.info(f"Skipped {skipped} tests for solvers that are not installed")

"""guarded: exception assertions and guaranteed cleanup for test harnesses.

Flat imports (preferred):
    from guarded import assert_raises, run_guarded, CollectingSink

Submodule imports (for organization):
    from guarded.assertions import assert_raises, expect_raises
    from guarded.execution import run_guarded, cleanup_after, with_cleanup
    from guarded.reporting import CollectingSink, use_sink
"""

from guarded._config import CatchPolicy, GuardedConfig, get_config, init
from guarded._logging import configure_logging, get_logger

# Assertions
from guarded.assertions import DEFAULT_MESSAGE, ExpectRaises, assert_raises, expect_raises
from guarded.errors import AssertionFailure, AssertionFailureError, ErrorName, LibraryError, SourceLocation

# Guarded execution
from guarded.execution import cleanup_after, run_guarded, with_cleanup

# Reporting
from guarded.reporting import (
    DEFAULT_SINK_LIMIT,
    CollectingSink,
    FailureSink,
    RaisingSink,
    current_sink,
    default_sink,
    use_sink,
)
from guarded.result import Err, Ok, Result

__all__ = [
    'DEFAULT_MESSAGE',
    'DEFAULT_SINK_LIMIT',
    # Errors
    'AssertionFailure',
    'AssertionFailureError',
    # Config
    'CatchPolicy',
    'CollectingSink',
    'Err',
    'ErrorName',
    'ExpectRaises',
    'FailureSink',
    'GuardedConfig',
    'LibraryError',
    'Ok',
    'RaisingSink',
    'Result',
    'SourceLocation',
    # Logging
    'assert_raises',
    'cleanup_after',
    'configure_logging',
    'current_sink',
    'default_sink',
    'expect_raises',
    'get_config',
    'get_logger',
    'init',
    'run_guarded',
    'use_sink',
    'with_cleanup',
]

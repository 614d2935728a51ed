"""fluent-either: a chainable Left/Right container for Python 3.13+.

Flat imports (preferred):
    from fluent_either import Either, Left, Right
    from fluent_either import safe, sequence, traverse

Submodule imports (for organization):
    from fluent_either.either import Either, Left, Right, Tag
    from fluent_either.itertools import partition, lefts, rights
    from fluent_either.decorators import safe
"""

# Configuration
from fluent_either._config import DiagnosticsConfig, get_config, init

# Logging
from fluent_either._logging import add_log_hook, remove_log_hook

# Decorators
from fluent_either.decorators import safe

# Types
from fluent_either.either import Either, Left, Right, Tag

# Collections
from fluent_either.itertools import lefts, partition, rights, sequence, traverse

__all__ = [
    # Configuration
    'DiagnosticsConfig',
    # Types
    'Either',
    'Left',
    'Right',
    'Tag',
    # Logging
    'add_log_hook',
    'get_config',
    'init',
    # Collections
    'lefts',
    'partition',
    'remove_log_hook',
    'rights',
    # Decorators
    'safe',
    'sequence',
    'traverse',
]

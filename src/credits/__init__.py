"""
Consumer attack credits.

Rebuilds every consumer attack from the SIBR event log, names the players
involved, rates each attack and lists them in credits order.

Modules:
    models - Raw events, composite records, identities and display lines
    diagnostics - Non-fatal problem reporting
    merge - Fragment merge engine
    identity - Batched player name resolution
    classify - Decision tree and rating synthesis
    sorter - Surname and chronological ordering
    outcomes - Per-season outcome counter
    output - data.js writer
    pipeline - Stage orchestration
    cli - Command-line interface entrypoints
"""

from . import models
from . import diagnostics
from . import merge
from . import identity
from . import classify
from . import sorter
from . import outcomes
from . import output
from . import pipeline

__version__ = "1.0.0"

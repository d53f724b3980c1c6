"""Mini README: Core package initializer for the expense ledger.

The package is split into ``ledger`` (records, persistence and report
formatting), ``interface`` (terminal interaction such as the keystroke
confirmation) and the ambient ``configuration`` and ``logging_utils``
modules. Only the logger factory is re-exported here so importing the
package stays free of database side effects.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]

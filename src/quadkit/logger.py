"""Contains the name for the logger of QuadKit modules.

``quadkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Per-step detail, e.g. every doubling of the subdivision count
    inside the adaptive Runge loop.
* ``INFO``: An indication that things are working as expected, e.g. a
    converged adaptive run.
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. an adaptive run that hit
    one of its safety caps.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``quadkit.logger.quadkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.INFO,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "quadkit"
quadkit_logger = logging.getLogger(logger_name)

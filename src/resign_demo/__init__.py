"""resign-demo — interactive employee resignation walkthrough.

Shows a ``Quittable`` capability implemented by an ``Employee`` entity,
with a strict core / CLI split.
"""

from resign_demo.version import __version__

__all__: list[str] = ["__version__"]

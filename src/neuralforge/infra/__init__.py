"""Infrastructure layer — integration with the outside world.

This layer resolves the external application class from its import
path.  Every raw import failure must be caught here and re-raised as a
:class:`~neuralforge.exceptions.NeuralForgeError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from neuralforge.infra.app_loader import load_application_factory

__all__: list[str] = ["load_application_factory"]

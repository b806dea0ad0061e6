"""neuralforge — command-line launcher for the NeuralForge application.

Parses process arguments, builds the application configuration and
drives a single asynchronous ``execute`` run behind one error boundary.
"""

from neuralforge.version import __version__

__all__: list[str] = ["__version__"]

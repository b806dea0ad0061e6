"""Infrastructure: resolve the configured application factory.

The application class lives outside the launcher.  It is named by a
``"package.module:Attribute"`` import path and imported lazily, so the
CLI bootstrap paths (``--help``, ``--version``) never import it.

Every import failure is re-raised as
:class:`~neuralforge.exceptions.ApplicationLoadError` — nothing raw
escapes this module.
"""

from __future__ import annotations

import importlib

from neuralforge.core.protocols import ApplicationFactory
from neuralforge.exceptions import ApplicationLoadError

_HINT: str = "Set NEURALFORGE_APP to an import path such as 'package.module:ClassName'."


def load_application_factory(import_path: str) -> ApplicationFactory:
    """Import and return the callable named by *import_path*.

    Raises
    ------
    ApplicationLoadError
        When the path is malformed, the module or attribute is missing,
        or the attribute is not callable.
    """
    module_name, sep, attr_path = import_path.partition(":")
    if not sep or not module_name or not attr_path:
        raise ApplicationLoadError(
            f"Malformed application path: {import_path!r}",
            hint=_HINT,
        )

    try:
        target: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise ApplicationLoadError(
            f"Cannot import application module {module_name!r}: {exc}",
            hint=_HINT,
        ) from exc

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as exc:
            raise ApplicationLoadError(
                f"Module {module_name!r} has no attribute {attr_path!r}",
                hint=_HINT,
            ) from exc

    if not callable(target):
        raise ApplicationLoadError(
            f"Application factory {import_path!r} is not callable",
            hint=_HINT,
        )
    return target

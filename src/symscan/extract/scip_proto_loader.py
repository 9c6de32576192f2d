"""Load protoc-generated scip_pb2 bindings when full bindings are preferred."""

from __future__ import annotations

import importlib
import importlib.util
from pathlib import Path
from types import ModuleType


class ScipProtoLoadError(RuntimeError):
    """Raised when generated scip_pb2 bindings cannot be loaded."""


def load_scip_pb2_from_build(build_dir: Path) -> ModuleType:
    """Load the scip_pb2 module from a bindings directory.

    Generate the module with ``protoc --python_out=<dir> scip.proto``.

    Parameters
    ----------
    build_dir:
        Directory containing ``scip_pb2.py``.

    Returns
    -------
    types.ModuleType
        Loaded scip_pb2 module.

    Raises
    ------
    ScipProtoLoadError
        Raised when scip_pb2.py is missing or cannot be executed.
    """
    module_path = build_dir / "scip_pb2.py"
    if not module_path.exists():
        msg = f"scip_pb2.py not found under {build_dir}."
        raise ScipProtoLoadError(msg)

    spec = importlib.util.spec_from_file_location("scip_pb2", module_path)
    if spec is None or spec.loader is None:
        msg = f"Unable to build an import spec for {module_path}."
        raise ScipProtoLoadError(msg)

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        msg = f"Unable to load SCIP bindings from {module_path}: {exc}"
        raise ScipProtoLoadError(msg) from exc
    _require_index(module, str(module_path))
    return module


def import_scip_pb2(module_name: str) -> ModuleType:
    """Import generated scip_pb2 bindings by module name.

    Returns
    -------
    types.ModuleType
        Imported bindings module.

    Raises
    ------
    ScipProtoLoadError
        Raised when the module cannot be imported or lacks ``Index``.
    """
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        msg = f"Unable to import SCIP bindings module {module_name!r}: {exc}"
        raise ScipProtoLoadError(msg) from exc
    _require_index(module, module_name)
    return module


def _require_index(module: ModuleType, location: str) -> None:
    if not hasattr(module, "Index"):
        msg = f"SCIP bindings at {location} do not define an Index message."
        raise ScipProtoLoadError(msg)


__all__ = ["ScipProtoLoadError", "import_scip_pb2", "load_scip_pb2_from_build"]

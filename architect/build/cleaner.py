from __future__ import annotations

import os
from typing import Any, Mapping

import structlog

from architect import console
from architect.config.loader import build_config_from
from architect.config.types import BuildConfig

log = structlog.get_logger("architect.build")


def clean(config: BuildConfig | Mapping[str, Any] | None = None) -> bool:
    """Remove the built executable and reconcile its output folder.

    The folder is removed when it is empty or when the executable was not
    there to begin with. Removing a folder that still holds other files fails
    at the OS level and is left alone.
    """
    config = build_config_from(config)
    output_folder = config.output_folder
    executable_path = config.executable_path()

    executable_exists = os.path.exists(executable_path)
    folder_exists = bool(output_folder) and os.path.exists(output_folder)

    ok = True
    if executable_exists:
        try:
            os.remove(executable_path)
        except OSError as exc:
            console.error(f"Unable to remove '{executable_path}': {exc}")
            ok = False
        else:
            console.success("Clean complete!")

    if folder_exists:
        if not os.listdir(output_folder) or not executable_exists:
            try:
                os.rmdir(output_folder)
            except OSError as exc:
                log.debug("clean.rmdir_skipped", folder=output_folder, error=str(exc))
            else:
                console.success(
                    f"Output folder '{output_folder}' removed (empty or missing executable)."
                )

    if not executable_exists and not folder_exists:
        console.error(
            f"File '{executable_path}' does not exist, and output folder "
            f"'{output_folder}' does not exist. Unable to clean!"
        )
        return False

    return ok

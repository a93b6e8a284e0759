# src/temporary_folder/cli.py
import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from temporary_folder.config import Settings
from temporary_folder.errors import FilesystemError
from temporary_folder.filesystem import LocalFilesystem
from temporary_folder.folder import TemporaryFolder

app = typer.Typer(add_completion=False)

ENV_VAR = "TEMPORARY_FOLDER"


def _filesystem(temp_root: Optional[Path], settings: Settings) -> LocalFilesystem:
    return LocalFilesystem(temp_root if temp_root is not None else settings.temp_root)


@app.callback()
def main(ctx: typer.Context) -> None:
    """Scoped, self-deleting temporary folders."""
    try:
        settings = Settings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="TEMPORARY_FOLDER_* environment")
    ctx.obj = settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )


@app.command()
def root(
    ctx: typer.Context,
    temp_root: Optional[Path] = typer.Option(None, "--temp-root", help="Override the temp root"),
):
    """Print the directory new folders are created under."""
    typer.echo(_filesystem(temp_root, ctx.obj).system_temp_root())


@app.command(context_settings={"ignore_unknown_options": True})
def run(
    ctx: typer.Context,
    command: Optional[List[str]] = typer.Argument(None, help="Command to run inside the folder"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Folder name (default: random UUID)"),
    temp_root: Optional[Path] = typer.Option(None, "--temp-root", help="Override the temp root"),
):
    """
    Run COMMAND with its working directory set to a fresh temporary folder.

    The folder path is also exported as $TEMPORARY_FOLDER. The folder and
    everything the command wrote into it is deleted afterwards, and the
    command's exit code is passed through.
    """
    if not command:
        raise typer.BadParameter("no command given", param_hint="COMMAND")

    fs = _filesystem(temp_root, ctx.obj)
    try:
        folder = TemporaryFolder.create(name, fs)
    except FilesystemError as exc:
        typer.secho(f"cannot create folder: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    with folder as tmp:
        logging.info("Running %s in %s", command[0], tmp.path)
        env = {**os.environ, ENV_VAR: tmp.path}
        try:
            result = subprocess.run(command, cwd=tmp.path, env=env)
        except FileNotFoundError:
            typer.secho(f"command not found: {command[0]}", fg=typer.colors.RED, err=True)
            raise typer.Exit(127)

    if result.returncode != 0:
        logging.warning("%s exited with status %d", command[0], result.returncode)
    raise typer.Exit(result.returncode)


if __name__ == "__main__":
    app()

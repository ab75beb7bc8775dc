# pylint: disable=invalid-name,import-error
import shlex
from pathlib import Path
from typing import Union

from invoke import Context, task


def q(value: Union[Path, str]) -> str:
    return shlex.quote(str(value))


@task
def test(c: Context):
    c.run("tox -p auto", pty=True)


@task
def cov(c: Context):
    inner_bash_command = q(
        "coverage run"
        " --branch"
        " --source=fieldmap"
        " --data-file=.tox/cov-storage/.coverage.$TOX_ENV_NAME"
        " -m pytest",
    )
    tox_commands = f"bash -c {inner_bash_command}"
    c.run(
        "tox -p auto"
        " --override 'testenv.allowlist_externals=bash'"
        f" --override {q(f'testenv.commands={tox_commands}')}",
        pty=True,
    )
    c.run("coverage combine --data-file .tox/cov-storage/.coverage .tox/cov-storage")
    c.run("coverage xml --data-file .tox/cov-storage/.coverage")

import subprocess
from unittest import mock

import pytest

from totalcli.installer import InstallError, install_if_not_found, install_package


def _done(args, code=0):
    return subprocess.CompletedProcess(args, code)


def test_present_package_is_not_installed():
    with mock.patch("shutil.which", return_value="/usr/bin/npm"), \
            mock.patch("subprocess.run") as run:
        assert install_if_not_found("npm", "npm install -g @vue/cli") is False
    assert run.call_count == 0


def test_missing_package_runs_split_command(capsys):
    with mock.patch("shutil.which", return_value=None), \
            mock.patch("subprocess.run", side_effect=lambda args, **kw: _done(args)) as run:
        assert install_if_not_found("vue", "npm install -g @vue/cli") is True
    assert run.call_args.args[0] == ["npm", "install", "-g", "@vue/cli"]
    assert "Installing package: npm install -g @vue/cli" in capsys.readouterr().out


@pytest.mark.parametrize("command", ["", "   "])
def test_empty_command_is_invalid(command):
    with pytest.raises(InstallError, match="Invalid install command."):
        install_package(command)


def test_failing_command_raises():
    with mock.patch("subprocess.run", side_effect=lambda args, **kw: _done(args, 1)):
        with pytest.raises(InstallError, match="Error installing package."):
            install_package("npm install -g @vue/cli")


def test_unrunnable_command_raises():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("npm")):
        with pytest.raises(InstallError, match="Failed to execute installation command"):
            install_package("npm install -g @vue/cli")
import shutil
import subprocess
import sys

import pytest

from mediafetch.installers import (
    InstallError,
    ensure_dependencies,
    install_ffmpeg,
    install_yt_dlp,
    is_command_available,
)


class FakeRunner:
    """Records commands and answers with preset exit codes."""

    def __init__(self, codes=None, default=0):
        self.codes = dict(codes or {})
        self.default = default
        self.calls = []

    def __call__(self, args, **kwargs):
        args = list(args)
        self.calls.append(args)
        return subprocess.CompletedProcess(args, self.codes.get(args[0], self.default))


@pytest.fixture
def runner(monkeypatch):
    fake = FakeRunner()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


def available(monkeypatch, *names):
    monkeypatch.setattr(
        shutil, "which", lambda cmd: f"/usr/bin/{cmd}" if cmd in names else None
    )


def test_is_command_available_with_real_executable():
    assert is_command_available(sys.executable) is True


def test_is_command_available_with_missing_command():
    assert is_command_available("no-such-command-mediafetch-xyz") is False


def test_ensure_dependencies_installs_nothing_when_present(monkeypatch, runner, capsys):
    available(monkeypatch, "ffmpeg", "yt-dlp")
    ensure_dependencies()
    assert runner.calls == []
    out = capsys.readouterr().out
    assert "ffmpeg est déjà installé" in out
    assert "yt-dlp est déjà installé" in out


def test_ffmpeg_on_linux_uses_apt_with_sudo(monkeypatch, runner, capsys):
    monkeypatch.setattr(sys, "platform", "linux")
    available(monkeypatch, "sudo")
    install_ffmpeg()
    assert runner.calls == [
        ["sudo", "apt", "update"],
        ["sudo", "apt", "install", "-y", "ffmpeg"],
    ]
    out = capsys.readouterr().out
    assert "Installation de ffmpeg" in out
    assert "installé avec succès" in out


def test_ffmpeg_on_linux_without_sudo(monkeypatch, runner, capsys):
    monkeypatch.setattr(sys, "platform", "linux")
    available(monkeypatch)
    install_ffmpeg()
    assert runner.calls[0] == ["apt", "update"]
    assert runner.calls[1] == ["apt", "install", "-y", "ffmpeg"]
    out = capsys.readouterr().out
    assert "installé avec succès" in out


def test_failed_apt_update_raises(monkeypatch):
    fake = FakeRunner(default=1)
    monkeypatch.setattr(subprocess, "run", fake)
    monkeypatch.setattr(sys, "platform", "linux")
    available(monkeypatch, "sudo")
    with pytest.raises(InstallError):
        install_ffmpeg()
    assert len(fake.calls) == 1


def test_ffmpeg_on_macos_uses_existing_brew(monkeypatch, runner, capsys):
    monkeypatch.setattr(sys, "platform", "darwin")
    available(monkeypatch, "brew")
    install_ffmpeg()
    assert runner.calls == [["brew", "install", "ffmpeg"]]
    out = capsys.readouterr().out
    assert "Homebrew" not in out
    assert "installé avec succès" in out


def test_macos_bootstraps_brew_when_missing(monkeypatch, runner, capsys):
    monkeypatch.setattr(sys, "platform", "darwin")
    available(monkeypatch)
    install_yt_dlp()
    assert runner.calls[0][:2] == ["sh", "-c"]
    assert runner.calls[1] == ["brew", "install", "yt-dlp"]
    out = capsys.readouterr().out
    assert "Homebrew" in out
    assert "Installation de yt-dlp" in out


def test_windows_falls_back_to_scoop(monkeypatch, capsys):
    fake = FakeRunner(codes={"choco": 1, "scoop": 0})
    monkeypatch.setattr(subprocess, "run", fake)
    monkeypatch.setattr(sys, "platform", "win32")
    available(monkeypatch, "choco", "scoop")
    install_ffmpeg()
    assert fake.calls == [
        ["choco", "install", "ffmpeg", "-y"],
        ["scoop", "install", "ffmpeg"],
    ]
    out = capsys.readouterr().out
    assert "installé avec succès" in out


def test_yt_dlp_on_linux_downloads_and_marks_executable(monkeypatch, runner, capsys):
    monkeypatch.setattr(sys, "platform", "linux")
    available(monkeypatch)
    install_yt_dlp()
    assert len(runner.calls) == 1
    shell, flag, script = runner.calls[0]
    assert (shell, flag) == ("sh", "-c")
    assert "-o /usr/local/bin/yt-dlp" in script
    assert script.endswith("chmod a+rx /usr/local/bin/yt-dlp")
    assert "sudo" not in script
    assert "Installation de yt-dlp" in capsys.readouterr().out


def test_unsupported_platform_raises(monkeypatch, runner):
    monkeypatch.setattr(sys, "platform", "sunos5")
    with pytest.raises(InstallError):
        install_yt_dlp()
    assert runner.calls == []


def test_command_that_cannot_start_raises(monkeypatch):
    def broken(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(subprocess, "run", broken)
    monkeypatch.setattr(sys, "platform", "darwin")
    available(monkeypatch, "brew")
    with pytest.raises(InstallError):
        install_ffmpeg()


def test_ensure_dependencies_installs_missing_tool(monkeypatch, runner, capsys):
    monkeypatch.setattr(sys, "platform", "darwin")
    available(monkeypatch, "brew", "yt-dlp")
    ensure_dependencies()
    assert runner.calls == [["brew", "install", "ffmpeg"]]
    out = capsys.readouterr().out
    assert "Installation de ffmpeg" in out
    assert "yt-dlp est déjà installé" in out
"""Detection and cross-platform installation of ffmpeg and yt-dlp."""

from __future__ import annotations

import shutil
import subprocess
import sys

_HOMEBREW_INSTALL = (
    '/bin/bash -c "$(curl -fsSL '
    'https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh)"'
)
_CHOCOLATEY_INSTALL = (
    "Set-ExecutionPolicy Bypass -Scope Process -Force; "
    "[System.Net.ServicePointManager]::SecurityProtocol = "
    "[System.Net.ServicePointManager]::SecurityProtocol -bor 3072; "
    "iex ((New-Object System.Net.WebClient).DownloadString("
    "'https://community.chocolatey.org/install.ps1'))"
)
_SCOOP_INSTALL = (
    'powershell -NoProfile -ExecutionPolicy Bypass -Command '
    '"(New-Object System.Net.WebClient).DownloadString(\'https://get.scoop.sh\') | iex"'
)
_YT_DLP_RELEASE = "https://github.com/yt-dlp/yt-dlp/releases/latest/download/yt-dlp"
_YT_DLP_TARGET = "/usr/local/bin/yt-dlp"


class InstallError(RuntimeError):
    """Raised when a required tool cannot be installed."""


def is_command_available(cmd: str) -> bool:
    """Return True if ``cmd`` is found on the PATH."""
    return shutil.which(cmd) is not None


def _platform() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "macos"
    if sys.platform == "win32":
        return "windows"
    return sys.platform


def _run(args: list[str], description: str) -> bool:
    """Run a command with inherited stdio; True on a zero exit status."""
    try:
        result = subprocess.run(args, check=False)
    except OSError as exc:
        raise InstallError(f"Erreur lors de {description}.") from exc
    return result.returncode == 0


def _fail(message: str) -> bool:
    print(f"❌ {message}", file=sys.stderr)
    return False


def _sudo_prefix() -> list[str]:
    return ["sudo"] if is_command_available("sudo") else []


def _install_brew() -> bool:
    print("⚙️ Homebrew n'est pas installé. Installation en cours...")
    if not _run(["sh", "-c", _HOMEBREW_INSTALL], "l'installation de Homebrew"):
        return _fail("L'installation de Homebrew a échoué.")
    print("✅ Homebrew installé avec succès !")
    return True


def _install_chocolatey() -> bool:
    print("⚙️ Chocolatey n'est pas installé. Installation en cours...")
    args = [
        "powershell", "-NoProfile", "-InputFormat", "None",
        "-ExecutionPolicy", "Bypass", "-Command", _CHOCOLATEY_INSTALL,
    ]
    if not _run(args, "l'installation de Chocolatey"):
        return _fail("L'installation de Chocolatey a échoué.")
    print("✅ Chocolatey installé avec succès !")
    return True


def _install_scoop() -> bool:
    print("⚙️ Scoop n'est pas installé. Installation en cours...")
    args = ["powershell", "-NoProfile", "-ExecutionPolicy", "Bypass", "-Command", _SCOOP_INSTALL]
    if not _run(args, "l'installation de Scoop"):
        return _fail("L'installation de Scoop a échoué.")
    print("✅ Scoop installé avec succès!")
    return True


def _install_apt(package: str) -> bool:
    sudo = _sudo_prefix()
    if not _run([*sudo, "apt", "update"], "la mise à jour des dépôts apt"):
        return _fail("Échec de la mise à jour des dépôts apt.")
    if not _run(
        [*sudo, "apt", "install", "-y", package],
        f"l'installation de {package} avec apt",
    ):
        return _fail(f"L'installation de {package} a échoué.")
    print(f"✅ {package} installé avec succès via apt!")
    return True


def _install_with_manager(
    manager: str, args: list[str], package: str, bootstrap
) -> bool:
    if not is_command_available(manager) and not bootstrap():
        return False
    if not _run([manager, *args], f"l'installation de {package} avec {manager}"):
        return _fail(f"L'installation de {package} a échoué.")
    print(f"✅ {package} installé avec succès via {manager}!")
    return True


def _install_brew_package(package: str) -> bool:
    return _install_with_manager("brew", ["install", package], package, _install_brew)


def _install_choco_package(package: str) -> bool:
    return _install_with_manager(
        "choco", ["install", package, "-y"], package, _install_chocolatey
    )


def _install_scoop_package(package: str) -> bool:
    return _install_with_manager("scoop", ["install", package], package, _install_scoop)


def _install_windows_package(package: str) -> bool:
    return _install_choco_package(package) or _install_scoop_package(package)


def install_ffmpeg() -> None:
    """Install ffmpeg with the platform's package manager."""
    print("⚙️ Installation de ffmpeg...")
    platform = _platform()
    if platform == "linux":
        success = _install_apt("ffmpeg")
    elif platform == "macos":
        success = _install_brew_package("ffmpeg")
    elif platform == "windows":
        success = _install_windows_package("ffmpeg")
    else:
        success = _fail("Système non supporté pour installer ffmpeg.")
    if not success:
        raise InstallError("L'installation de ffmpeg a échoué sur ce système.")


def _install_yt_dlp_linux() -> bool:
    sudo = "sudo " if is_command_available("sudo") else ""
    script = (
        f"{sudo}curl -L {_YT_DLP_RELEASE} -o {_YT_DLP_TARGET} "
        f"&& {sudo}chmod a+rx {_YT_DLP_TARGET}"
    )
    return _run(["sh", "-c", script], "l'installation de yt-dlp")


def install_yt_dlp() -> None:
    """Install yt-dlp in the way that suits the platform."""
    print("⚙️ Installation de yt-dlp...")
    platform = _platform()
    if platform == "linux":
        success = _install_yt_dlp_linux()
    elif platform == "macos":
        success = _install_brew_package("yt-dlp")
    elif platform == "windows":
        success = _install_windows_package("yt-dlp")
    else:
        success = _fail("Système non supporté pour installer yt-dlp.")
    if not success:
        raise InstallError("L'installation de yt-dlp a échoué sur ce système.")


def ensure_dependencies() -> None:
    """Make sure ffmpeg and yt-dlp are present, installing what is missing."""
    print("🔍 Vérification des dépendances...")
    if is_command_available("ffmpeg"):
        print("✅ ffmpeg est déjà installé.")
    else:
        install_ffmpeg()
    if is_command_available("yt-dlp"):
        print("✅ yt-dlp est déjà installé.")
    else:
        install_yt_dlp()
    print("🎉 Toutes les dépendances sont prêtes !")
"""Interactive command-line front end."""

from __future__ import annotations

import argparse
import sys

from termcolor import colored

from mediafetch.commands import check_command
from mediafetch.downloader import DownloadError, download_audio, download_video
from mediafetch.installers import InstallError, ensure_dependencies
from mediafetch.user_input import ask_to_continue, choose_audio_format, choose_video_options

_FAREWELL = "\n👋 Merci d’avoir utilisé Panther Downloader. À bientôt !\n"
_DOWNLOADING = "\n📥 Téléchargement en cours...\n"


def show_menu() -> None:
    """Print the main menu."""
    print("\n╔══════════════════════════════════════════════════╗")
    print("║     🎬 Téléchargement de contenu vidéo et audio   ║")
    print("╚══════════════════════════════════════════════════╝\n")
    print("1. Choisissez le type de téléchargement :")
    print("   [1] 🎥 Vidéo")
    print("   [2] 🎧 Audio")
    print("   [q] ❌ Quitter")


def ask_url() -> str:
    """Prompt for a URL and return it without surrounding whitespace."""
    print(colored("Entrez l'URL YouTube :\n👉 ", attrs=["bold"]), end="", flush=True)
    return sys.stdin.readline().strip()


def _farewell() -> None:
    print(colored(_FAREWELL, "blue", attrs=["bold"]))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive downloader; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="mediafetch",
        description="Téléchargeur de vidéos et d'audio.",
    )
    parser.parse_args(argv)

    try:
        ensure_dependencies()
    except InstallError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    if check_command("curl"):
        print(colored("La commande 'curl' est disponible !", "green"))
    else:
        print(colored("La commande 'curl' n'est pas trouvée !", "red"))

    while True:
        show_menu()
        print(colored("👉 Votre choix : ", attrs=["bold"]), end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            _farewell()
            return 0
        choice = line.strip()
        if choice.lower() == "q":
            _farewell()
            return 0

        try:
            if choice == "1":
                url = ask_url()
                video_format, keep_files = choose_video_options()
                print(colored(_DOWNLOADING, "cyan", attrs=["bold"]))
                download_video(url, video_format, keep_files)
            elif choice == "2":
                url = ask_url()
                audio_format = choose_audio_format()
                print(colored(_DOWNLOADING, "cyan", attrs=["bold"]))
                download_audio(url, audio_format)
            else:
                print(colored("❌ Choix invalide. Veuillez entrer 1 ou 2.", "red"))
                continue
        except DownloadError as exc:
            print(f"❌ {exc}", file=sys.stderr)
            return 1

        if not ask_to_continue():
            _farewell()
            return 0


if __name__ == "__main__":
    sys.exit(main())